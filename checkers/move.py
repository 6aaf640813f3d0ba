from __future__ import annotations

from dataclasses import dataclass

# (x, y): x is the column, y is the row.
Coordinate = tuple[int, int]
MoveSequence = tuple[Coordinate, ...]
CaptureSequence = tuple[Coordinate, ...]


@dataclass(frozen=True, slots=True)
class Move:
    start: Coordinate
    steps: MoveSequence
    captures: CaptureSequence = ()

    @property
    def end(self) -> Coordinate:
        return self.steps[-1] if self.steps else self.start

    @property
    def is_capture(self) -> bool:
        return bool(self.captures)

    def as_path(self) -> tuple[Coordinate, ...]:
        return (self.start, *self.steps)

    def __str__(self) -> str:
        connector = " x " if self.is_capture else " - "
        return connector.join(f"{x},{y}" for x, y in self.as_path())
