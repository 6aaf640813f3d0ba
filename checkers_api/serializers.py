from __future__ import annotations

from typing import Any, Optional

from checkers.game import CellView, Game, MoveRecord
from checkers.move import Coordinate, Move
from checkers.pieces import Color, Piece
from checkers.rules import Rules


def _coord_tuple_to_dict(coord: Coordinate) -> dict[str, int]:
    x, y = coord
    return {"x": x, "y": y}


def serialize_piece(piece: Piece) -> dict[str, Any]:
    return {
        "id": piece.id,
        "x": piece.x,
        "y": piece.y,
        "color": piece.color.value,
        "promoted": piece.promoted,
    }


def serialize_cell(cell: CellView) -> dict[str, Any]:
    occupant = None
    if cell.occupant is not None:
        occupant = {"color": cell.occupant.color.value, "promoted": cell.occupant.promoted}
    return {"x": cell.x, "y": cell.y, "dark": cell.dark, "occupant": occupant}


def serialize_move(move: Move) -> dict[str, Any]:
    return {
        "start": _coord_tuple_to_dict(move.start),
        "steps": [_coord_tuple_to_dict(step) for step in move.steps],
        "captures": [_coord_tuple_to_dict(capture) for capture in move.captures],
        "isCapture": move.is_capture,
    }


def serialize_record(record: Optional[MoveRecord]) -> Optional[dict[str, Any]]:
    if record is None:
        return None
    return {
        "round": record.round,
        "color": record.piece.color.value,
        "move": serialize_move(record.move),
        "captured": [serialize_piece(piece) for piece in record.captured],
        "promoted": record.promoted,
    }


def serialize_rules(rules: Rules) -> dict[str, bool]:
    return {
        "chainCaptures": rules.chain_captures,
        "forcedCapture": rules.forced_capture,
        "blockedSideLoses": rules.blocked_side_loses,
    }


def serialize_game(game: Game, variant: str) -> dict[str, Any]:
    pieces = game.board.getAllPieces()
    selected = game.selectedCell
    winner = game.winner()

    piece_counts: dict[str, dict[str, int]] = {}
    for color in Color:
        in_play = game.inventory.pieces(color)
        piece_counts[color.value] = {
            "total": len(in_play),
            "kings": sum(1 for piece in in_play if piece.promoted),
        }

    return {
        "boardSize": game.board.boardSize,
        "variant": variant,
        "rules": serialize_rules(game.rules),
        "round": game.turn.round,
        "turn": game.current_player.value,
        "phase": game.phase.value,
        "winner": winner.value if winner else None,
        "cells": [serialize_cell(cell) for cell in game.iterCells()],
        "pieces": [serialize_piece(piece) for piece in pieces],
        "pieceCounts": piece_counts,
        "selected": _coord_tuple_to_dict(selected) if selected else None,
        "highlighted": [_coord_tuple_to_dict(coord) for coord in sorted(game.highlightedCells)],
        "mandatoryCapture": game.isCaptureMandatory(),
        "moveCount": len(game.move_history),
        "lastMove": serialize_record(game.lastMove),
    }
