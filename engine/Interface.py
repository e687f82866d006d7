from engine.Core import GameEvent, GameState


class Interface:

    def __init__(self):
        self.state: GameState = None

    def onStart(self):
        pass

    def onEvent(self, event: GameEvent):
        """
        Invoked after a game event is performed on the registered state.
        :param event:
        :return:
        """
        pass

    def onWin(self):
        pass
