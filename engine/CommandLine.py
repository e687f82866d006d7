import argparse
import logging

from engine.Core import RUNS_TO_WIN, DealError, GameConfig, dealFromStock, newGame
from engine.Drag import DragSession
from engine.Interface import Interface

logger = logging.getLogger(__name__)

HELP = """Commands:
  mv <col>[:<idx>] <dest>   move the run starting at card <idx> (default: top card)
  deal                      deal one card onto every column
  new                       start a new game
  show                      print the tableau
  snap <path>               save a PNG picture of the board
  quit                      leave"""


class CommandLineInterface(Interface):

    def printAll(self):
        state = self.state
        print(f"Completed: {state.completedRuns}/{RUNS_TO_WIN}        Stock: {len(state.stock)}")
        print("   " + "".join(f"--{i}--" for i in range(len(state.columns))))
        i = 0
        while True:
            has = False
            line = f"{i:>2}: "
            for column in state.columns:
                if len(column) <= i:
                    line += "     "
                    continue
                has = True
                line += column[i].gameStr()
                line += "  "
            if not has:
                break
            print(line)
            i += 1
        print()

    def onStart(self):
        print("Game started!")

    def onWin(self):
        print("You win!")


def parseMove(args, state):
    """
    :return: (column, card index, destination) or None when the arguments are malformed
    """
    if len(args) != 2:
        return None
    srcStr, destStr = args
    try:
        if ":" in srcStr:
            col, idx = (int(part) for part in srcStr.split(":", 1))
        else:
            col = int(srcStr)
            idx = len(state.columns[col]) - 1
        dest = int(destStr)
    except (ValueError, IndexError):
        return None
    return col, idx, dest


def saveSnapshot(state, path, settings=None):
    # Imported here so the text game runs without Pillow installed.
    from tableau.adapter import CoreAdapter
    from tableau.board_image import render_board
    from tableau.layout import TableauLayout
    from tableau.settings_store import DEFAULT_SETTINGS

    settings = settings or DEFAULT_SETTINGS
    layout = TableauLayout(int(settings["width"]), int(settings["height"]), len(state.columns))
    image = render_board(CoreAdapter.snapshot(state), layout, settings["theme_name"], settings["font_scale"])
    image.save(path, "PNG")
    logger.info("Board picture written to %s", path)


def buildParser():
    parser = argparse.ArgumentParser(description="Play one-suit Spider Solitaire in the terminal.")
    parser.add_argument("--seed", type=int, default=None, help="seed for a reproducible deal")
    parser.add_argument("--config", default=None, help="game config file (key=value lines)")
    parser.add_argument("--settings", default=None, help="UI settings file used for pictures")
    parser.add_argument("--snapshot", default=None, help="write a PNG of the opening deal and exit")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv=None):
    args = buildParser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    config = GameConfig.loadFromFile(args.config) if args.config else GameConfig()
    if args.seed is not None:
        config.seed = args.seed
    settings = None
    if args.settings:
        from tableau.settings_store import load_settings
        settings = load_settings(args.settings)

    interface = CommandLineInterface()
    state = newGame(config, interface=interface)
    if args.snapshot:
        saveSnapshot(state, args.snapshot, settings)
        return 0

    session = DragSession()
    interface.printAll()
    while True:
        try:
            command = input("> ").split()
        except EOFError:
            break
        if not command:
            continue
        name, rest = command[0], command[1:]
        if name == "mv":
            move = parseMove(rest, state)
            if move is None:
                print("Invalid index!")
                continue
            col, idx, dest = move
            if not session.press(state, col, idx, (0, 0)):
                print("That sequence cannot be moved!")
                continue
            state = session.release(state, dest)
            if len(state.columns[col]) > idx:
                print("Cannot move!")
                continue
            interface.printAll()
        elif name == "deal":
            try:
                state = dealFromStock(state)
            except DealError as exc:
                print(exc)
                continue
            interface.printAll()
        elif name == "new":
            state = newGame(config, interface=interface)
            interface.printAll()
        elif name == "show":
            interface.printAll()
        elif name == "snap" and len(rest) == 1:
            try:
                saveSnapshot(state, rest[0], settings)
            except OSError as exc:
                print(f"Cannot write picture: {exc}")
        elif name in ("quit", "exit"):
            break
        elif name == "help":
            print(HELP)
        else:
            print("Invalid command! Type 'help' for the command list.")
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
