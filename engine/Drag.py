import logging
from dataclasses import dataclass, replace

from engine.Core import GameState, applyMove, isLegalDestination, isMovableSequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DragState:
    src_col: int
    src_idx: int
    cards: tuple
    start_x: float
    start_y: float
    x: float
    y: float
    width: float = 0.0

    @property
    def top_rank(self):
        return self.cards[0].rank


def onPress(state: GameState, colIdx, cardIdx, pointerPos, width=0.0):
    """
    Starts a drag on the run beginning at ``(colIdx, cardIdx)``.

    :return: a new DragState, or None when the cards from that index cannot be lifted
    """
    if not state.isValidPosition(colIdx, cardIdx):
        return None
    column = state.columns[colIdx]
    if not isMovableSequence(column, cardIdx):
        return None
    x, y = pointerPos
    return DragState(
        src_col=colIdx,
        src_idx=cardIdx,
        cards=tuple(column[cardIdx:]),
        start_x=x,
        start_y=y,
        x=x,
        y=y,
        width=width,
    )


def onMove(dragState: DragState, pointerPos) -> DragState:
    x, y = pointerPos
    return replace(dragState, x=x, y=y)


def onRelease(state: GameState, dragState: DragState, targetCol) -> GameState:
    """
    Ends a drag. ``targetCol`` is the column under the release point as resolved
    by the caller's layout, or None. The state is only mutated when the run can
    be dropped there; the drag is over either way.
    """
    if targetCol is None or targetCol == dragState.src_col:
        return state
    if targetCol < 0 or targetCol >= len(state.columns):
        return state
    if not isLegalDestination(state.columns[targetCol], dragState.top_rank):
        logger.debug("Drop of rank %d on column %d refused", dragState.top_rank, targetCol)
        return state
    return applyMove(state, dragState.src_col, targetCol, list(dragState.cards))


class DragSession:
    """Idle while ``drag`` is None, Dragging otherwise."""

    def __init__(self):
        self.drag: DragState = None

    def isDragging(self):
        return self.drag is not None

    def press(self, state, colIdx, cardIdx, pointerPos, width=0.0) -> bool:
        if self.drag is not None:
            return False
        self.drag = onPress(state, colIdx, cardIdx, pointerPos, width)
        return self.drag is not None

    def move(self, pointerPos) -> bool:
        if self.drag is None:
            return False
        self.drag = onMove(self.drag, pointerPos)
        return True

    def release(self, state, targetCol) -> GameState:
        if self.drag is None:
            return state
        released = self.drag
        self.drag = None
        return onRelease(state, released, targetCol)

    def cancel(self):
        self.drag = None
