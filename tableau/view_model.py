from dataclasses import dataclass


@dataclass(frozen=True)
class CardView:
    id: int
    suit: int
    rank: int
    face_up: bool


@dataclass(frozen=True)
class StackView:
    cards: tuple[CardView, ...]


@dataclass(frozen=True)
class DragProxyView:
    src_col: int
    src_idx: int
    cards: tuple[CardView, ...]
    x: float
    y: float
    width: float


@dataclass(frozen=True)
class GameViewModel:
    stock_count: int
    deals_left: int
    completed_runs: int
    game_ended: bool
    stacks: tuple[StackView, ...]
    drag: DragProxyView | None = None


@dataclass(frozen=True)
class AnimationEvent:
    type: str
    payload: dict
