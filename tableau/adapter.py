from engine.Core import CallDeal, Card, CardMove, GameEvent, GameState, RevealTop, RunCompleted
from engine.Drag import DragState
from tableau.view_model import AnimationEvent, CardView, DragProxyView, GameViewModel, StackView


def card_view(card: Card) -> CardView:
    return CardView(id=card.id, suit=card.suit, rank=card.rank, face_up=card.faceUp)


class CoreAdapter:
    """Bridges engine state and events to a renderer-friendly model."""

    @staticmethod
    def snapshot(state: GameState, drag: DragState | None = None) -> GameViewModel:
        stacks = []
        for col_idx, column in enumerate(state.columns):
            cards = column
            # Lifted cards are drawn by the proxy only, never in their column.
            if drag is not None and drag.src_col == col_idx:
                cards = column[:drag.src_idx]
            stacks.append(StackView(cards=tuple(card_view(card) for card in cards)))

        proxy = None
        if drag is not None:
            proxy = DragProxyView(
                src_col=drag.src_col,
                src_idx=drag.src_idx,
                cards=tuple(card_view(card) for card in drag.cards),
                x=drag.x,
                y=drag.y,
                width=drag.width,
            )
        return GameViewModel(
            stock_count=len(state.stock),
            deals_left=state.dealsLeft(),
            completed_runs=state.completedRuns,
            game_ended=state.gameEnded,
            stacks=tuple(stacks),
            drag=proxy,
        )

    @staticmethod
    def event_to_animation(event: GameEvent) -> AnimationEvent:
        if isinstance(event, CardMove):
            return AnimationEvent(
                type="MOVE",
                payload={"src": event.src, "dest": event.dest, "count": event.count},
            )
        if isinstance(event, CallDeal):
            return AnimationEvent(
                type="DEAL",
                payload={"draw_count": event.drawCount},
            )
        if isinstance(event, RevealTop):
            return AnimationEvent(
                type="REVEAL",
                payload={"stack": event.idx},
            )
        if isinstance(event, RunCompleted):
            return AnimationEvent(
                type="COMPLETE_RUN",
                payload={"stack": event.idx},
            )
        return AnimationEvent(type="UNKNOWN", payload={"event": type(event).__name__})
