from __future__ import annotations

import random
import sys
import unittest
from pathlib import Path


REPO_DIR = Path(__file__).resolve().parents[1]
if str(REPO_DIR) not in sys.path:
    sys.path.insert(0, str(REPO_DIR))


from checkers.game import ClickOutcome, Game  # noqa: E402
from checkers.movegen import getAvailableMoves  # noqa: E402
from checkers.pieces import Color  # noqa: E402
from checkers.rules import VARIANTS  # noqa: E402


MAX_PLIES = 200
SEEDS = range(20)


class RandomPlayoutTests(unittest.TestCase):
    def _assert_consistent(self, game: Game) -> None:
        board = game.board
        for cell in board.iterCells():
            if cell.piece is None:
                continue
            self.assertEqual(cell.piece.position, cell.position)
            self.assertTrue(cell.is_dark, cell)

        for color in Color:
            on_board = board.getAllPieces(color)
            self.assertEqual(game.inventory.count(color), len(on_board))
            self.assertTrue(all(piece in game.inventory for piece in on_board))

        for piece in board.getAllPieces():
            for move in getAvailableMoves(piece, board, game.rules):
                for x, y in move.steps:
                    self.assertTrue(board.isWithinBounds(x, y), move)
                    self.assertEqual((x + y) % 2, 1, move)
                if not piece.promoted and not move.is_capture:
                    self.assertEqual(move.end[1] - piece.y, piece.color.forward, move)

    def _play(self, variant: str, seed: int) -> tuple[int, int]:
        rng = random.Random(seed)
        game = Game(rules=VARIANTS[variant])
        kings: set[int] = set()

        for _ in range(MAX_PLIES):
            self._assert_consistent(game)
            expected = Color.WHITE if game.turn.round % 2 == 0 else Color.BLACK
            self.assertIs(game.current_player, expected)
            if game.isGameOver():
                break
            move_map = game.getValidMoves()
            if not move_map:
                break

            piece = rng.choice(sorted(move_map, key=lambda candidate: candidate.position))
            move = rng.choice(move_map[piece])
            self.assertEqual(game.onCellClicked(*piece.position), ClickOutcome.SELECTED)
            self.assertEqual(game.onCellClicked(*move.end), ClickOutcome.MOVED)

            for other in game.board.getAllPieces():
                if other.id in kings:
                    self.assertTrue(other.promoted)
            kings.update(other.id for other in game.board.getAllPieces() if other.promoted)

        self._assert_consistent(game)
        captures = sum(len(record.captured) for record in game.move_history)
        promotions = sum(1 for record in game.move_history if record.promoted)
        return captures, promotions

    def test_invariants_hold_through_random_games(self) -> None:
        for variant in ("minimal", "english"):
            total_captures = 0
            total_promotions = 0
            for seed in SEEDS:
                with self.subTest(variant=variant, seed=seed):
                    captures, promotions = self._play(variant, seed)
                    total_captures += captures
                    total_promotions += promotions
            self.assertGreater(total_captures, 0, variant)
            self.assertGreater(total_promotions, 0, variant)


if __name__ == "__main__":
    unittest.main()
