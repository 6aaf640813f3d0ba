"""Legal move generation for a single piece.

Everything here reads the board and never mutates it.
"""

from __future__ import annotations

from .board import BOARD_SIZE, Board
from .move import Coordinate, Move
from .pieces import Color, Piece
from .rules import Rules

MoveList = list[Move]

DIAGONALS: tuple[Coordinate, ...] = ((-1, -1), (1, -1), (-1, 1), (1, 1))

_DEFAULT_RULES = Rules()


def promotionRow(color: Color) -> int:
    return BOARD_SIZE - 1 if color is Color.WHITE else 0


def directionsFor(piece: Piece) -> tuple[Coordinate, ...]:
    if piece.promoted:
        return DIAGONALS
    dy = piece.color.forward
    return ((-1, dy), (1, dy))


def getAvailableMoves(piece: Piece, board: Board, rules: Rules = _DEFAULT_RULES) -> MoveList:
    """Simple steps and jumps for ``piece``.

    A jump takes exactly one enemy piece unless ``rules.chain_captures`` is set,
    in which case every jump is extended into its maximal capture sequences.
    """
    origin = piece.position
    moves: MoveList = []

    for dx, dy in directionsFor(piece):
        step = (origin[0] + dx, origin[1] + dy)
        if not board.isWithinBounds(*step):
            continue

        neighbour = board.getPiece(*step)
        if neighbour is None:
            moves.append(Move(start=origin, steps=(step,)))
            continue
        if neighbour.color == piece.color:
            continue

        landing = (step[0] + dx, step[1] + dy)
        if not board.isWithinBounds(*landing) or board.getPiece(*landing) is not None:
            continue

        if rules.chain_captures:
            moves.extend(_capture_sequences(piece, board, origin, (landing,), (step,)))
        else:
            moves.append(Move(start=origin, steps=(landing,), captures=(step,)))

    return moves


def legalDestinations(piece: Piece, board: Board, rules: Rules = _DEFAULT_RULES) -> set[Coordinate]:
    return {move.end for move in getAvailableMoves(piece, board, rules)}


def _capture_sequences(
    piece: Piece,
    board: Board,
    origin: Coordinate,
    steps: tuple[Coordinate, ...],
    captures: tuple[Coordinate, ...],
) -> MoveList:
    x, y = steps[-1]
    sequences: MoveList = []
    for dx, dy in directionsFor(piece):
        over = (x + dx, y + dy)
        landing = (x + 2 * dx, y + 2 * dy)
        if over in captures or not board.isWithinBounds(*landing):
            continue

        victim = board.getPiece(*over)
        if victim is None or victim.color == piece.color:
            continue
        # Captured pieces stay on the board until the move completes; the origin is vacated.
        if landing != origin and board.getPiece(*landing) is not None:
            continue

        sequences.extend(
            _capture_sequences(piece, board, origin, steps + (landing,), captures + (over,))
        )

    return sequences or [Move(start=origin, steps=steps, captures=captures)]
