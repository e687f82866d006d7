from PIL import Image, ImageDraw, ImageFont

from engine.Core import RUNS_TO_WIN
from tableau.layout import TableauLayout
from tableau.ui_config import FONT_SCALE_FACTOR, NUMS, THEMES
from tableau.view_model import CardView, GameViewModel


def get_font(size):
    for name in ("DejaVuSans-Bold.ttf", "Arial.ttf", "Helvetica.ttc"):
        try:
            return ImageFont.truetype(name, size=size)
        except OSError:
            continue
    return ImageFont.load_default()


def draw_spade(draw, cx, cy, s, fill):
    # upside-down heart + stem
    r = s // 3
    draw.ellipse((cx - r - r // 2, cy, cx - r // 2, cy + r), fill=fill)
    draw.ellipse((cx + r // 2, cy, cx + r + r // 2, cy + r), fill=fill)
    draw.polygon([(cx - s // 2, cy + r), (cx + s // 2, cy + r), (cx, cy - s // 2 + r // 2)], fill=fill)
    draw.rectangle((cx - r // 3, cy + r, cx + r // 3, cy + s // 2 + r // 3), fill=fill)


class BoardRenderer:
    def __init__(self, layout: TableauLayout, theme_name="Felt", font_scale="Normal"):
        self.layout = layout
        self.theme = THEMES[theme_name]
        self.scale = FONT_SCALE_FACTOR[font_scale]

    def fs(self, base):
        return max(8, int(base * self.scale))

    def render(self, view: GameViewModel) -> Image.Image:
        layout = self.layout
        img = Image.new("RGB", (int(layout.width), int(layout.height)), self.theme["bg_base"])
        d = ImageDraw.Draw(img)
        d.rectangle((0, 0, layout.width - 1, layout.height - 1), outline=self.theme["bg_border"], width=4)

        lengths = [len(stack.cards) for stack in view.stacks]
        # Suppressed cards still take up their slots so the proxy does not shift the pile.
        if view.drag is not None:
            lengths[view.drag.src_col] += len(view.drag.cards)
        step = layout.visible_step(lengths)
        cw, ch = layout.card_size()

        for s_idx, stack in enumerate(view.stacks):
            sx, sy = layout.stack_origin(s_idx)
            if not stack.cards:
                d.rounded_rectangle((sx, sy, sx + cw, sy + ch), radius=4, outline=self.theme["slot_outline"], width=1)
                continue
            for c_idx, card in enumerate(stack.cards):
                self.draw_card(d, sx, sy + c_idx * step, cw, ch, card)

        self.draw_hud(d, view)
        self.draw_stock(d, view)
        if view.drag is not None:
            # Anchored like the pointer grabbed the card a fifth of the way down.
            px = view.drag.x - cw * 0.5
            py = view.drag.y - ch * 0.2
            for i, card in enumerate(view.drag.cards):
                self.draw_card(d, px, py + i * step, cw, ch, card)
        return img

    def draw_card(self, d, x, y, cw, ch, card: CardView):
        if not card.face_up:
            d.rounded_rectangle((x, y, x + cw, y + ch), radius=4, fill=self.theme["card_back"], outline=self.theme["deck_outline"])
            stripe = max(4, int(cw / 8))
            for i in range(stripe, int(cw), stripe * 2):
                d.line((x + i, y + 3, x + i, y + ch - 3), fill=self.theme["card_back_stripe"], width=max(1, stripe // 2))
            return

        d.rounded_rectangle((x, y, x + cw, y + ch), radius=4, fill=self.theme["card_front"], outline=self.theme["card_border"])
        color = self.theme["card_text"]
        d.text((x + 4, y + 2), NUMS[card.rank - 1], fill=color, font=get_font(self.fs(12)))
        size = int(min(cw, ch) * 0.4)
        draw_spade(d, int(x + cw / 2), int(y + ch * 0.55), size, color)

    def draw_hud(self, d, view: GameViewModel):
        text = f"Completed: {view.completed_runs} / {RUNS_TO_WIN}"
        if view.game_ended:
            text += "  -  You win!"
        d.text((12, 10), text, fill=self.theme["hud_text"], font=get_font(self.fs(16)))

    def draw_stock(self, d, view: GameViewModel):
        dx, dy = self.layout.deck_position()
        dw, dh = self.layout.deck_size()
        if view.stock_count == 0:
            d.rounded_rectangle((dx, dy, dx + dw, dy + dh), radius=4, outline=self.theme["slot_outline"], width=2)
            return
        d.rounded_rectangle((dx, dy, dx + dw, dy + dh), radius=4, fill=self.theme["deck_fill"], outline=self.theme["deck_outline"], width=2)
        text = str(view.deals_left)
        font = get_font(self.fs(18))
        left, top, right, bottom = d.textbbox((0, 0), text, font=font)
        tx = dx + (dw - (right - left)) / 2
        ty = dy + (dh - (bottom - top)) / 2
        d.text((tx, ty), text, fill=self.theme["hud_text"], font=font)


def render_board(view: GameViewModel, layout: TableauLayout, theme_name="Felt", font_scale="Normal") -> Image.Image:
    return BoardRenderer(layout, theme_name, font_scale).render(view)
