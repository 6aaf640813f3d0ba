from __future__ import annotations


class OutOfBounds(IndexError):
    def __init__(self, x: int, y: int) -> None:
        super().__init__(f"Coordinate ({x}, {y}) is outside the board.")
        self.x = x
        self.y = y


class IllegalMove(ValueError):
    pass


class GameOverError(RuntimeError):
    pass
