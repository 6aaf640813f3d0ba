from __future__ import annotations

from typing import TYPE_CHECKING

from .pieces import Color, Piece

if TYPE_CHECKING:
    from .board import Board


class PlayInventory:
    """Pieces still on the board, grouped by colour.

    Only captures shrink it; promotions and simple moves leave it untouched.
    """

    def __init__(self) -> None:
        self._pieces: dict[Color, set[Piece]] = {Color.WHITE: set(), Color.BLACK: set()}

    @classmethod
    def from_board(cls, board: "Board") -> "PlayInventory":
        inventory = cls()
        for piece in board.getAllPieces():
            inventory.add(piece)
        return inventory

    def add(self, piece: Piece) -> None:
        self._pieces[piece.color].add(piece)

    def remove(self, piece: Piece) -> None:
        self._pieces[piece.color].remove(piece)

    def count(self, color: Color) -> int:
        return len(self._pieces[color])

    def pieces(self, color: Color) -> frozenset[Piece]:
        return frozenset(self._pieces[color])

    def __contains__(self, piece: Piece) -> bool:
        return piece in self._pieces[piece.color]
