from engine.Core import COLUMN_COUNT
from tableau.ui_config import (
    BOTTOM_BAR_RATIO,
    CARD_HEIGHT_RATIO,
    CARD_WIDTH_RATIO,
    STACK_GAP_RATIO,
    TOP_MARGIN_RATIO,
    VISIBLE_STEP_RATIO,
)


class TableauLayout:
    """Pixel geometry of the board. The engine only ever sees column and card indices."""

    def __init__(self, width=1000, height=700, column_count=COLUMN_COUNT):
        self.width = width
        self.height = height
        self.column_count = column_count

    def card_size(self):
        return self.width * CARD_WIDTH_RATIO, self.height * CARD_HEIGHT_RATIO

    def visible_step(self, column_lengths=()):
        base_step = self.height * VISIBLE_STEP_RATIO
        max_cards = max(column_lengths, default=0)
        if max_cards <= 1:
            return base_step

        sy = self.height * TOP_MARGIN_RATIO
        _, ch = self.card_size()
        # Long piles are squeezed to stay above the stock bar.
        max_span = self.height * (1 - BOTTOM_BAR_RATIO) - sy - ch
        if max_span <= 0:
            return max(6.0, base_step * 0.4)

        fit_step = max_span / (max_cards - 1)
        min_step = max(6.0, ch * 0.08)
        return max(min_step, min(base_step, fit_step))

    def stack_origin(self, stack_idx):
        cw, _ = self.card_size()
        gap = self.width * STACK_GAP_RATIO
        total_w = self.column_count * cw + (self.column_count - 1) * gap
        start_x = (self.width - total_w) / 2
        x = start_x + stack_idx * (cw + gap)
        y = self.height * TOP_MARGIN_RATIO
        return x, y

    def card_position(self, stack_idx, card_idx, column_lengths=()):
        x, y = self.stack_origin(stack_idx)
        return x, y + self.visible_step(column_lengths) * card_idx

    def find_stack_and_index(self, x, y, column_lengths):
        cw, ch = self.card_size()
        step = self.visible_step(column_lengths)
        for s_idx, length in enumerate(column_lengths):
            sx, sy = self.stack_origin(s_idx)
            if not (sx <= x <= sx + cw):
                continue
            if length == 0:
                return None
            max_y = sy + ch + step * (length - 1)
            if y < sy or y > max_y:
                return None
            idx = int((y - sy) // step)
            idx = max(0, min(idx, length - 1))
            return s_idx, idx
        return None

    def find_drop_column(self, x):
        cw, _ = self.card_size()
        for s_idx in range(self.column_count):
            sx, _ = self.stack_origin(s_idx)
            if sx <= x <= sx + cw:
                return s_idx
        return None

    def deck_size(self):
        return self.card_size()

    def deck_position(self):
        dw, dh = self.deck_size()
        x = (self.width - dw) / 2
        y = self.height - dh - self.height * 0.02
        return x, y

    def is_point_in_deck(self, x, y):
        dx, dy = self.deck_position()
        dw, dh = self.deck_size()
        return dx <= x <= dx + dw and dy <= y <= dy + dh
