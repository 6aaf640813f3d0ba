"""Checkers rules engine package."""

from .board import BOARD_SIZE, Board, Cell
from .errors import GameOverError, IllegalMove, OutOfBounds
from .game import CellView, ClickOutcome, Game, MoveRecord, Phase, PieceView, TurnState
from .inventory import PlayInventory
from .move import Coordinate, Move
from .movegen import directionsFor, getAvailableMoves, legalDestinations, promotionRow
from .pieces import Color, Piece
from .rules import VARIANTS, Rules, rules_for_variant

__all__ = [
	"BOARD_SIZE",
	"Board",
	"Cell",
	"CellView",
	"ClickOutcome",
	"Color",
	"Coordinate",
	"Game",
	"GameOverError",
	"IllegalMove",
	"Move",
	"MoveRecord",
	"OutOfBounds",
	"Phase",
	"Piece",
	"PieceView",
	"PlayInventory",
	"Rules",
	"TurnState",
	"VARIANTS",
	"directionsFor",
	"getAvailableMoves",
	"legalDestinations",
	"promotionRow",
	"rules_for_variant",
]
