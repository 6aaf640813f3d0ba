from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from .errors import OutOfBounds
from .move import Coordinate
from .pieces import Color, Piece

BOARD_SIZE = 8
STARTING_ROWS = 3


@dataclass(eq=False)
class Cell:
    x: int
    y: int
    piece: Optional[Piece] = None

    @property
    def position(self) -> Coordinate:
        return (self.x, self.y)

    @property
    def is_dark(self) -> bool:
        return (self.x + self.y) % 2 == 1


class Board:
    def __init__(self) -> None:
        self.boardSize = BOARD_SIZE
        self.cells: list[list[Cell]] = [
            [Cell(x, y) for x in range(BOARD_SIZE)] for y in range(BOARD_SIZE)
        ]
        self._set_start_pieces()

    @classmethod
    def empty(cls) -> "Board":
        board = cls.__new__(cls)
        board.boardSize = BOARD_SIZE
        board.cells = [[Cell(x, y) for x in range(BOARD_SIZE)] for y in range(BOARD_SIZE)]
        return board

    def isWithinBounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.boardSize and 0 <= y < self.boardSize

    def cellAt(self, x: int, y: int) -> Cell:
        if not self.isWithinBounds(x, y):
            raise OutOfBounds(x, y)
        return self.cells[y][x]

    def isOccupied(self, x: int, y: int) -> bool:
        return self.cellAt(x, y).piece is not None

    def getPiece(self, x: int, y: int) -> Optional[Piece]:
        if self.isWithinBounds(x, y):
            return self.cells[y][x].piece
        return None

    def place(self, piece: Piece, x: int, y: int) -> None:
        cell = self.cellAt(x, y)
        cell.piece = piece
        piece.move(x, y)

    def clear(self, x: int, y: int) -> Optional[Piece]:
        cell = self.cellAt(x, y)
        previous = cell.piece
        cell.piece = None
        return previous

    def iterCells(self) -> Iterator[Cell]:
        for row in self.cells:
            yield from row

    def getAllPieces(self, color: Optional[Color] = None) -> list[Piece]:
        pieces: list[Piece] = []
        for cell in self.iterCells():
            piece = cell.piece
            if piece is None:
                continue
            if color is None or piece.color == color:
                pieces.append(piece)
        return pieces

    def _set_start_pieces(self) -> None:
        for cell in self.iterCells():
            if not cell.is_dark:
                continue
            if cell.y < STARTING_ROWS:
                self.place(Piece(Color.WHITE, cell.x, cell.y), cell.x, cell.y)
            elif cell.y >= self.boardSize - STARTING_ROWS:
                self.place(Piece(Color.BLACK, cell.x, cell.y), cell.x, cell.y)

    def __str__(self) -> str:
        # Highest row first so white (rows 0-2) sits at the bottom.
        lines = []
        for y in reversed(range(self.boardSize)):
            line = ""
            for x in range(self.boardSize):
                piece = self.cells[y][x].piece
                if piece is None:
                    line += ". "
                elif piece.color == Color.WHITE:
                    line += "W " if piece.promoted else "w "
                else:
                    line += "B " if piece.promoted else "b "
            lines.append(line.rstrip())
        return "\n".join(lines)
