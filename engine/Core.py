import logging
import random

logger = logging.getLogger(__name__)

COLUMN_COUNT = 10
DECK_COPIES = 8
INITIAL_DEALT = 54
RUNS_TO_WIN = DECK_COPIES


def lastOf(lst):
    return lst[len(lst) - 1]


class Card:
    NUM_PER_SUIT = 13
    SPADES = 0
    SUIT_SYMBOL = "♠"
    NUMS = ("A ", "2 ", "3 ", "4 ", "5 ", "6 ", "7 ", "8 ", "9 ", "10", "J ", "Q ", "K ")

    def __init__(self, id, faceUp=False):
        self.id = id
        self.suit = Card.SPADES
        self.rank = id % Card.NUM_PER_SUIT + 1
        self.faceUp = faceUp

    def __str__(self):
        if not self.faceUp:
            return str(self.id) + "H"
        return str(self.id)

    def __repr__(self):
        return self.__str__()

    def gameStr(self):
        if not self.faceUp:
            return "---"
        return Card.SUIT_SYMBOL + Card.NUMS[self.rank - 1]

    def suitableAsBaseFor(self, upper):
        return self.rank == upper.rank + 1

    @staticmethod
    def fromRank(rank, copy=0, faceUp=False):
        return Card(copy * Card.NUM_PER_SUIT + rank - 1, faceUp)


def initCards(copies, rng):
    lst = [Card(i) for i in range(copies * Card.NUM_PER_SUIT)]
    rng.shuffle(lst)
    return lst


def decodeStack(code: str):
    if code.startswith("empty"):
        return []
    cards = code.split(",")

    def decodeCard(s: str):
        data = s.split()
        c = Card(int(data[0]))
        c.faceUp = data[1] == "0"
        return c

    return list(map(decodeCard, cards))


def encodeStack(cards: list):
    if len(cards) == 0:
        return "empty"

    def encodeCard(card: Card):
        s = str(card.id)
        if card.faceUp:
            return s + " 0"
        else:
            return s + " 1"

    return ",".join(map(encodeCard, cards))


class GameConfig:
    def __init__(self):
        self.columns = COLUMN_COUNT
        self.copies = DECK_COPIES
        self.initialDealt = INITIAL_DEALT
        self.seed = None
        self.gameCode = None

    @staticmethod
    def loadFromFile(path):
        config = GameConfig()
        try:
            with open(path, encoding="utf-8") as f:
                lines = f.readlines()
        except OSError as exc:
            logger.warning("Cannot read game config %s: %s", path, exc)
            return config
        for l in lines:
            l = l.strip()
            if len(l) == 0 or l.startswith("#"):
                continue
            if "=" not in l:
                logger.warning("Ignoring malformed config line: %r", l)
                continue
            (k, v) = l.split("=", 1)
            k = k.strip()
            v = v.strip()
            if k not in config.__dict__:
                logger.warning("Ignoring unknown config key: %s", k)
                continue
            if v == "None":
                v = None
            elif k != "gameCode":
                try:
                    v = int(v)
                except ValueError:
                    logger.warning("Config key %s expects an integer, got %r", k, v)
                    continue
            config.__setattr__(k, v)
        config.checkLimits()
        return config

    def checkLimits(self):
        if self.columns != COLUMN_COUNT:
            logger.warning("The tableau always has %d columns, ignoring columns=%s", COLUMN_COUNT, self.columns)
            self.columns = COLUMN_COUNT
        if self.copies is None or self.copies < 1:
            logger.warning("Config key copies must be positive, got %s", self.copies)
            self.copies = DECK_COPIES
        deckSize = self.copies * Card.NUM_PER_SUIT
        if self.initialDealt is None or not 0 <= self.initialDealt <= deckSize:
            logger.warning("Config key initialDealt must be between 0 and %d, got %s", deckSize, self.initialDealt)
            self.initialDealt = min(INITIAL_DEALT, deckSize)

    def saveToFile(self, path):
        with open(path, "w+", encoding="utf-8") as f:
            for k, v in self.__dict__.items():
                f.write(f"{k}={str(v)}\n")

    def initDeck(self, rng):
        if self.gameCode is not None:
            try:
                deck = decodeStack(self.gameCode)
            except (ValueError, IndexError) as exc:
                logger.warning("Invalid game code, dealing a shuffled deck instead: %s", exc)
            else:
                for card in deck:
                    card.faceUp = False
                return deck
        return initCards(self.copies, rng)


class DealError(Exception):
    """Base class for a stock deal that cannot be performed."""


class DealBlocked(DealError):
    def __init__(self, emptyColumns):
        self.emptyColumns = list(emptyColumns)
        super().__init__(
            "Cannot deal: every column must hold at least one card "
            f"(empty: {', '.join(map(str, self.emptyColumns))})"
        )


class StockExhausted(DealError):
    def __init__(self):
        super().__init__("Cannot deal: the stock is empty")


class GameEvent:
    pass


class CardMove(GameEvent):
    def __init__(self, src: (int, int), dest: (int, int), count: int):
        self.src = src
        self.dest = dest
        self.count = count


class CallDeal(GameEvent):
    def __init__(self, drawCount: int):
        self.drawCount = drawCount


class RunCompleted(GameEvent):
    def __init__(self, idx):
        self.idx = idx


class RevealTop(GameEvent):
    def __init__(self, idx):
        self.idx = idx


class GameState:
    """
    Columns and stock of one game. The module level functions below are the
    only operations that mutate it.
    """

    def __init__(self, columns, stock, completedRuns=0):
        self.columns = columns  # the 10 tableau columns, a list of lists, index 0 is the bottom card
        self.stock = stock  # undealt cards, dealt from the end
        self.completedRuns = completedRuns
        self.finished = []  # cards of the completed runs, one list per run
        self.gameEnded = False
        self.interface = None

    def registerInterface(self, interface):
        self.interface = interface
        interface.state = self

    def notify(self, event: GameEvent):
        if self.interface is not None:
            self.interface.onEvent(event)

    def isWon(self):
        return self.completedRuns >= RUNS_TO_WIN

    def dealsLeft(self):
        return len(self.stock) // len(self.columns)

    def cardIds(self):
        ids = [card.id for card in self.stock]
        for column in self.columns:
            ids.extend(card.id for card in column)
        for run in self.finished:
            ids.extend(card.id for card in run)
        return sorted(ids)

    def isValidPosition(self, colIdx, cardIdx):
        if colIdx < 0 or colIdx >= len(self.columns):
            return False
        return 0 <= cardIdx < len(self.columns[colIdx])


def newGame(gameConfig: GameConfig = None, rng: random.Random = None, interface=None) -> GameState:
    if gameConfig is None:
        gameConfig = GameConfig()
    if rng is None:
        rng = random.Random(gameConfig.seed)
    deck = gameConfig.initDeck(rng)
    state = GameState([[] for _ in range(gameConfig.columns)], deck)
    if interface is not None:
        state.registerInterface(interface)
        interface.onStart()

    columns = state.columns
    drawCount = min(gameConfig.initialDealt, len(deck))
    for i in range(drawCount):
        columns[i % len(columns)].append(deck.pop())
    for column in columns:
        if len(column) > 0:
            lastOf(column).faceUp = True
    logger.info("New game: %d cards dealt, %d in stock (seed=%s)", drawCount, len(deck), gameConfig.seed)
    state.notify(CallDeal(drawCount))
    return state


def isMovableSequence(column, startIndex) -> bool:
    if startIndex < 0 or startIndex >= len(column):
        return False
    base = column[startIndex]
    if not base.faceUp:
        return False
    for i in range(startIndex + 1, len(column)):
        upper = column[i]
        if not base.suitableAsBaseFor(upper):
            return False
        base = upper
    return True


def isLegalDestination(destColumn, movingTopRank) -> bool:
    if len(destColumn) == 0:
        return True
    return lastOf(destColumn).rank == movingTopRank + 1


def canMove(state: GameState, fromCol, toCol, run) -> bool:
    """
    :param run: the lifted cards, which must be the current tail of ``fromCol``
    """
    if fromCol == toCol or len(run) == 0:
        return False
    if not (0 <= fromCol < len(state.columns) and 0 <= toCol < len(state.columns)):
        return False
    src = state.columns[fromCol]
    start = len(src) - len(run)
    if start < 0:
        return False
    for held, card in zip(src[start:], run):
        if held is not card:
            return False
    if not isMovableSequence(src, start):
        return False
    return isLegalDestination(state.columns[toCol], run[0].rank)


def applyMove(state: GameState, fromCol, toCol, run) -> GameState:
    if not canMove(state, fromCol, toCol, run):
        logger.debug("Rejected move of %d card(s) from column %s to column %s", len(run), fromCol, toCol)
        return state
    src = state.columns[fromCol]
    start = len(src) - len(run)
    dest = state.columns[toCol]
    destPair = (toCol, len(dest))
    state.columns[fromCol] = src[:start]
    dest.extend(run)
    logger.debug("Moved %d card(s) from column %d to column %d", len(run), fromCol, toCol)
    state.notify(CardMove((fromCol, start), destPair, len(run)))
    revealTop(state, fromCol)
    detectCompletion(state, toCol)
    return state


def revealTop(state: GameState, idx: int) -> bool:
    column = state.columns[idx]
    if len(column) == 0:
        return False
    card = lastOf(column)
    if card.faceUp:
        return False
    card.faceUp = True
    state.notify(RevealTop(idx))
    return True


def isCompleteRun(cards) -> bool:
    if len(cards) != Card.NUM_PER_SUIT:
        return False
    for i, card in enumerate(cards):
        if card.rank != Card.NUM_PER_SUIT - i:
            return False
    return True


def detectCompletion(state: GameState, colIdx: int) -> GameState:
    column = state.columns[colIdx]
    length = len(column)
    if length < Card.NUM_PER_SUIT:
        return state
    run = column[length - Card.NUM_PER_SUIT:]
    if not isCompleteRun(run):
        return state

    state.columns[colIdx] = column[:length - Card.NUM_PER_SUIT]
    state.finished.append(run)
    state.completedRuns += 1
    logger.info("Column %d completed a run (%d/%d)", colIdx, state.completedRuns, RUNS_TO_WIN)
    state.notify(RunCompleted(colIdx))
    revealTop(state, colIdx)
    checkWin(state)
    return state


def checkWin(state: GameState) -> bool:
    if state.gameEnded or not state.isWon():
        return False
    state.gameEnded = True
    logger.info("Game won")
    if state.interface is not None:
        state.interface.onWin()
    return True


def dealFromStock(state: GameState) -> GameState:
    if len(state.stock) == 0:
        logger.debug("Deal refused: stock exhausted")
        raise StockExhausted()
    empty = [i for i, column in enumerate(state.columns) if len(column) == 0]
    if empty:
        logger.debug("Deal blocked by empty column(s) %s", empty)
        raise DealBlocked(empty)

    drawCount = min(len(state.columns), len(state.stock))
    state.notify(CallDeal(drawCount))
    for dest in range(drawCount):
        card = state.stock.pop()
        card.faceUp = True
        state.columns[dest].append(card)
        detectCompletion(state, dest)
    return state
