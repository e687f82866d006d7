import logging

from engine.Core import DealError, GameConfig, canMove, dealFromStock, newGame
from engine.Drag import DragSession
from engine.Interface import Interface
from tableau.adapter import CoreAdapter
from tableau.layout import TableauLayout

logger = logging.getLogger(__name__)


class TableauController(Interface):
    """
    Feeds pixel-level pointer events through the layout into the engine.
    Keeps the feedback line and the queue of animation events for a renderer.
    """

    def __init__(self, layout: TableauLayout = None, config: GameConfig = None):
        super().__init__()
        self.layout = layout if layout is not None else TableauLayout()
        self.config = config if config is not None else GameConfig()
        self.session = DragSession()
        self.message = ""
        self.anim_queue = []
        self.won = False

    def new_game(self, rng=None):
        self.session.cancel()
        self.anim_queue = []
        self.won = False
        newGame(self.config, rng, interface=self)
        self.message = "New game started."
        return self.state

    def onEvent(self, event):
        self.anim_queue.append(CoreAdapter.event_to_animation(event))
        super().onEvent(event)

    def onWin(self):
        self.won = True
        self.message = "All eight runs completed. You win!"

    def column_lengths(self):
        return [len(column) for column in self.state.columns]

    def on_press(self, x, y):
        if self.state is None or self.session.isDragging():
            return
        if self.layout.is_point_in_deck(x, y):
            self.deal()
            return

        hit = self.layout.find_stack_and_index(x, y, self.column_lengths())
        if hit is None:
            return
        col_idx, card_idx = hit
        cw, _ = self.layout.card_size()
        if not self.session.press(self.state, col_idx, card_idx, (x, y), width=cw):
            self.message = "That sequence cannot be moved."
            return
        self.message = f"Dragging {len(self.session.drag.cards)} card(s)..."

    def on_drag(self, x, y):
        self.session.move((x, y))

    def on_release(self, x, y) -> bool:
        if not self.session.isDragging():
            return False
        drag = self.session.drag
        target = self.layout.find_drop_column(x)
        moved = target is not None and canMove(self.state, drag.src_col, target, list(drag.cards))
        self.state = self.session.release(self.state, target)
        if target is None or target == drag.src_col:
            self.message = "Move cancelled."
        elif not moved:
            self.message = "That move is not allowed."
        elif not self.won:
            self.message = ""
        return moved

    def deal(self) -> bool:
        try:
            dealFromStock(self.state)
        except DealError as exc:
            logger.debug("Deal refused: %s", exc)
            self.message = str(exc)
            return False
        if not self.won:
            self.message = "Dealt a new row."
        return True

    def view(self):
        return CoreAdapter.snapshot(self.state, self.session.drag)

    def consume_animation_queue(self):
        events = self.anim_queue
        self.anim_queue = []
        return events
