from __future__ import annotations

from dataclasses import replace
from threading import Lock
from typing import Any, Iterable, Optional

from loguru import logger

from checkers.errors import GameOverError
from checkers.game import Game
from checkers.move import Coordinate, Move
from checkers.pieces import Piece
from checkers.rules import DEFAULT_VARIANT, rules_for_variant

from .schemas import ClickRequest, MoveRequest, ResetRequest, RulesRequest, VariantRequest
from .serializers import serialize_game, serialize_move

CUSTOM_VARIANT = "custom"

_RULE_FIELDS = {
    "chainCaptures": "chain_captures",
    "forcedCapture": "forced_capture",
    "blockedSideLoses": "blocked_side_loses",
}


class GameSession:
    """Thread-safe orchestrator around a single Game instance."""

    def __init__(self, variant: str = DEFAULT_VARIANT) -> None:
        self.lock = Lock()
        self.variant = variant
        self.game = Game(rules=rules_for_variant(variant))

    # public API ---------------------------------------------------------

    def serialize(self) -> dict[str, Any]:
        with self.lock:
            return self._serialize_locked()

    def reset(self, payload: Optional[ResetRequest] = None) -> dict[str, Any]:
        with self.lock:
            if payload and payload.variant:
                self.variant = payload.variant
            rules = rules_for_variant(self.variant) if self.variant != CUSTOM_VARIANT else self.game.rules
            self.game.reset(rules)
            return self._serialize_locked()

    def set_variant(self, payload: VariantRequest) -> dict[str, Any]:
        with self.lock:
            self.variant = payload.variant
            self.game.reset(rules_for_variant(self.variant))
            return self._serialize_locked()

    def configure_rules(self, payload: RulesRequest) -> dict[str, Any]:
        with self.lock:
            overrides = payload.model_dump(exclude_none=True)
            if not overrides:
                return self._serialize_locked()
            rules = replace(
                self.game.rules,
                **{_RULE_FIELDS[key]: value for key, value in overrides.items()},
            )
            self.variant = CUSTOM_VARIANT
            self.game.reset(rules)
            return self._serialize_locked()

    def click(self, payload: ClickRequest) -> dict[str, Any]:
        with self.lock:
            outcome = self.game.onCellClicked(payload.x, payload.y)
            return {"outcome": outcome.value, "game": self._serialize_locked()}

    def get_valid_moves(self, x: int, y: int) -> dict[str, Any]:
        with self.lock:
            piece = self._require_piece(x, y)
            if piece.color != self.game.current_player:
                raise ValueError("It is not this piece's turn.")
            moves = self.game.legalMoves(piece)
            return {
                "piece": {"x": x, "y": y},
                "moves": [serialize_move(move) for move in moves],
            }

    def make_move(self, payload: MoveRequest) -> dict[str, Any]:
        with self.lock:
            if self.game.isGameOver():
                raise GameOverError("The game is already over.")
            piece = self._require_piece(payload.start.x, payload.start.y)
            if piece.color != self.game.current_player:
                raise ValueError("Selected piece cannot move now.")
            steps = tuple((node.x, node.y) for node in payload.steps)
            move = self._locate_matching_move(piece, steps)
            if move is None:
                raise ValueError("Requested move path is invalid for this piece.")
            self.game.applyMove(piece, move)
            return self._serialize_locked()

    # helpers ------------------------------------------------------------

    def _serialize_locked(self) -> dict[str, Any]:
        return serialize_game(self.game, self.variant)

    def _require_piece(self, x: int, y: int) -> Piece:
        piece = self.game.board.getPiece(x, y)
        if piece is None:
            raise ValueError(f"No piece at x {x}, y {y}.")
        return piece

    def _locate_matching_move(self, piece: Piece, steps: Iterable[Coordinate]) -> Optional[Move]:
        candidate = tuple(steps)
        for move in self.game.legalMoves(piece):
            if move.steps == candidate:
                return move
        logger.debug(f"No legal move of {piece!r} follows {candidate}")
        return None
