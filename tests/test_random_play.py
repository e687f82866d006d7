import random
import unittest

from engine.Core import DealError, canMove, dealFromStock, newGame
from engine.Drag import onMove, onPress, onRelease


def legal_moves(state):
    moves = []
    for col, column in enumerate(state.columns):
        for idx in range(len(column)):
            run = column[idx:]
            for dest in range(len(state.columns)):
                if canMove(state, col, dest, run):
                    moves.append((col, idx, dest))
    return moves


def column_ids(state):
    return [[card.id for card in column] for column in state.columns]


class RandomPlayTestCase(unittest.TestCase):
    """Plays seeded random games through the drag protocol and checks the tableau invariants after every step."""

    def assert_invariants(self, state):
        self.assertEqual(list(range(104)), state.cardIds())
        self.assertEqual(10, len(state.columns))
        self.assertGreaterEqual(state.completedRuns, 0)
        self.assertLessEqual(state.completedRuns, 8)
        self.assertEqual(13 * state.completedRuns, sum(len(run) for run in state.finished))
        for column in state.columns:
            flags = [card.faceUp for card in column]
            if column:
                self.assertTrue(flags[-1])
            first_up = flags.index(True) if True in flags else len(flags)
            self.assertTrue(all(flags[first_up:]))
            self.assertFalse(any(flags[:first_up]))

    def play(self, seed, steps=250):
        rng = random.Random(seed)
        state = newGame(rng=random.Random(seed))
        self.assert_invariants(state)
        for _ in range(steps):
            moves = legal_moves(state)
            if moves and rng.random() < 0.85:
                col, idx, dest = rng.choice(moves)
                drag = onPress(state, col, idx, (0, 0))
                self.assertIsNotNone(drag)
                drag = onMove(drag, (rng.random() * 1000, rng.random() * 700))
                before = sum(len(c) for c in state.columns) + 13 * state.completedRuns
                state = onRelease(state, drag, dest)
                self.assertEqual(before, sum(len(c) for c in state.columns) + 13 * state.completedRuns)
            else:
                try:
                    state = dealFromStock(state)
                except DealError:
                    if not moves:
                        break
            self.assert_invariants(state)
        return state

    def test_random_games_keep_invariants(self):
        for seed in range(6):
            with self.subTest(seed=seed):
                self.play(seed)

    def test_illegal_drops_never_change_state(self):
        rng = random.Random(99)
        state = newGame(rng=random.Random(99))
        for col, column in enumerate(state.columns):
            idx = len(column) - 1
            for dest in range(10):
                if dest == col or canMove(state, col, dest, column[idx:]):
                    continue
                drag = onPress(state, col, idx, (rng.random(), rng.random()))
                before = column_ids(state)
                onRelease(state, drag, dest)
                self.assertEqual(before, column_ids(state))


if __name__ == "__main__":
    unittest.main()
