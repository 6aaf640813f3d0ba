from __future__ import annotations

from enum import Enum
from itertools import count

from .move import Coordinate

_PIECE_ID_COUNTER = count()


class Color(Enum):
    WHITE = "white"
    BLACK = "black"

    @property
    def opponent(self) -> "Color":
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    @property
    def forward(self) -> int:
        """Row step of a non-promoted piece: white climbs toward row 7, black descends toward row 0."""
        return 1 if self is Color.WHITE else -1


class Piece:
    def __init__(self, color: Color, x: int, y: int, *, promoted: bool = False) -> None:
        self.color = color
        self.x = x
        self.y = y
        self.promoted = promoted
        self.id = next(_PIECE_ID_COUNTER)

    def move(self, new_x: int, new_y: int) -> None:
        self.x = new_x
        self.y = new_y

    @property
    def position(self) -> Coordinate:
        return (self.x, self.y)

    def promote(self) -> bool:
        """Mark the piece as a king. Returns False when it already was one."""
        if self.promoted:
            return False
        self.promoted = True
        return True

    def __repr__(self) -> str:
        piece_type = "K" if self.promoted else "M"
        return f"{piece_type}({self.color.name},{self.x},{self.y})"
