from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional

from loguru import logger

from .board import Board
from .errors import GameOverError, IllegalMove
from .inventory import PlayInventory
from .move import Coordinate, Move
from .movegen import getAvailableMoves, promotionRow
from .pieces import Color, Piece
from .rules import Rules

MoveMap = dict[Piece, list[Move]]


class Phase(str, Enum):
    IDLE = "idle"
    SELECTED = "selected"
    GAME_OVER = "game_over"


class ClickOutcome(str, Enum):
    IGNORED = "ignored"
    SELECTED = "selected"
    DESELECTED = "deselected"
    MOVED = "moved"


@dataclass(frozen=True, slots=True)
class PieceView:
    color: Color
    promoted: bool


@dataclass(frozen=True, slots=True)
class CellView:
    x: int
    y: int
    dark: bool
    occupant: Optional[PieceView]


@dataclass
class TurnState:
    round: int = 0
    selected: Optional[Piece] = None
    destinations: dict[Coordinate, Move] = field(default_factory=dict)

    @property
    def current_player(self) -> Color:
        return Color.WHITE if self.round % 2 == 0 else Color.BLACK

    def clearSelection(self) -> None:
        self.selected = None
        self.destinations = {}


@dataclass
class MoveRecord:
    round: int
    piece: Piece
    move: Move
    captured: list[Piece]
    promoted: bool


class Game:
    """Turn controller and win detector around a single board.

    The board, inventory and turn state are only mutated through
    ``onCellClicked`` and ``applyMove``.
    """

    def __init__(self, rules: Optional[Rules] = None, board: Optional[Board] = None) -> None:
        self.rules = rules if rules is not None else Rules()
        self.board = board if board is not None else Board()
        self.inventory = PlayInventory.from_board(self.board)
        self.turn = TurnState()
        self.move_history: list[MoveRecord] = []

    def reset(self, rules: Optional[Rules] = None) -> None:
        if rules is not None:
            self.rules = rules
        self.board = Board()
        self.inventory = PlayInventory.from_board(self.board)
        self.turn = TurnState()
        self.move_history.clear()
        logger.info(f"New game started with rules {self.rules}")

    # state ----------------------------------------------------------------

    @property
    def current_player(self) -> Color:
        return self.turn.current_player

    @property
    def phase(self) -> Phase:
        if self.isGameOver():
            return Phase.GAME_OVER
        if self.turn.selected is not None:
            return Phase.SELECTED
        return Phase.IDLE

    @property
    def selectedCell(self) -> Optional[Coordinate]:
        if self.turn.selected is None:
            return None
        return self.turn.selected.position

    @property
    def highlightedCells(self) -> frozenset[Coordinate]:
        return frozenset(self.turn.destinations)

    @property
    def lastMove(self) -> Optional[MoveRecord]:
        return self.move_history[-1] if self.move_history else None

    def iterCells(self) -> Iterator[CellView]:
        for cell in self.board.iterCells():
            occupant = None
            if cell.piece is not None:
                occupant = PieceView(color=cell.piece.color, promoted=cell.piece.promoted)
            yield CellView(x=cell.x, y=cell.y, dark=cell.is_dark, occupant=occupant)

    # moves ----------------------------------------------------------------

    def getValidMoves(self, color: Optional[Color] = None) -> MoveMap:
        color = color if color is not None else self.current_player
        move_map: MoveMap = {}
        for piece in self.board.getAllPieces(color):
            moves = getAvailableMoves(piece, self.board, self.rules)
            if moves:
                move_map[piece] = moves

        if self.rules.forced_capture:
            capture_map: MoveMap = {}
            for piece, moves in move_map.items():
                captures = [move for move in moves if move.is_capture]
                if captures:
                    capture_map[piece] = captures
            if capture_map:
                return capture_map

        return move_map

    def legalMoves(self, piece: Piece) -> list[Move]:
        if self.rules.forced_capture:
            return self.getValidMoves(piece.color).get(piece, [])
        return getAvailableMoves(piece, self.board, self.rules)

    def isCaptureMandatory(self) -> bool:
        if not self.rules.forced_capture:
            return False
        return any(move.is_capture for moves in self.getValidMoves().values() for move in moves)

    # click state machine --------------------------------------------------

    def onCellClicked(self, x: int, y: int) -> ClickOutcome:
        if not self.board.isWithinBounds(x, y):
            logger.debug(f"Ignoring click outside the board at ({x}, {y})")
            return ClickOutcome.IGNORED
        if self.isGameOver():
            logger.debug(f"Ignoring click at ({x}, {y}); the game is over")
            return ClickOutcome.IGNORED

        selected = self.turn.selected
        # A king's capture loop can end on its own square, so destinations win over deselection.
        move = self.turn.destinations.get((x, y))
        if selected is not None and move is not None:
            self.applyMove(selected, move)
            return ClickOutcome.MOVED

        clicked = self.board.getPiece(x, y)
        if clicked is not None and clicked.color == self.current_player:
            if clicked is selected:
                self.deselect()
                return ClickOutcome.DESELECTED
            self.select(clicked)
            return ClickOutcome.SELECTED

        return ClickOutcome.IGNORED

    def select(self, piece: Piece) -> None:
        self.turn.selected = piece
        self.turn.destinations = self._buildDestinationMap(piece)
        logger.debug(f"Selected {piece!r}; destinations {sorted(self.turn.destinations)}")

    def deselect(self) -> None:
        if self.turn.selected is not None:
            logger.debug(f"Deselected {self.turn.selected!r}")
        self.turn.clearSelection()

    def _buildDestinationMap(self, piece: Piece) -> dict[Coordinate, Move]:
        destination_map: dict[Coordinate, Move] = {}
        for move in self.legalMoves(piece):
            known = destination_map.get(move.end)
            # Two sequences can end on the same cell; keep the one that takes more pieces.
            if known is None or len(move.captures) > len(known.captures):
                destination_map[move.end] = move
        return destination_map

    def applyMove(self, piece: Piece, move: Move) -> MoveRecord:
        if self.isGameOver():
            logger.warning(f"Rejected move {move}: the game is over")
            raise GameOverError("The game is already over.")
        if piece.color != self.current_player:
            logger.warning(f"Rejected move {move}: it is {self.current_player.value}'s turn")
            raise IllegalMove(f"It is {self.current_player.value}'s turn.")
        if self.board.getPiece(*piece.position) is not piece or move.start != piece.position:
            logger.warning(f"Rejected move {move}: {piece!r} is not at the move start")
            raise IllegalMove("Piece must occupy the start of the move.")
        if move not in self.legalMoves(piece):
            logger.warning(f"Rejected move {move}: not legal for {piece!r}")
            raise IllegalMove(f"Move {move} is not legal for this piece.")

        captured: list[Piece] = []
        for cap_x, cap_y in move.captures:
            victim = self.board.clear(cap_x, cap_y)
            if victim is None or victim.color == piece.color:
                raise RuntimeError("Capture move references a missing or friendly piece.")
            self.inventory.remove(victim)
            captured.append(victim)
            logger.info(f"{piece.color.value.capitalize()} captured {victim!r}")

        self.board.clear(*move.start)
        self.board.place(piece, *move.end)

        promoted = False
        if move.end[1] == promotionRow(piece.color):
            promoted = piece.promote()
            if promoted:
                logger.info(f"{piece!r} promoted")

        record = MoveRecord(
            round=self.turn.round,
            piece=piece,
            move=move,
            captured=captured,
            promoted=promoted,
        )
        self.move_history.append(record)
        self.turn.clearSelection()
        self.turn.round += 1
        logger.info(f"Round {record.round}: {piece.color.value} played {move}")

        winner = self.winner()
        if winner is not None:
            logger.info(f"Game over! Winner: {winner.value}")
        return record

    # win detection --------------------------------------------------------

    def winner(self) -> Optional[Color]:
        for color in Color:
            if self.inventory.count(color) == 0:
                return color.opponent
        if self.rules.blocked_side_loses and not self.getValidMoves():
            return self.current_player.opponent
        return None

    def isGameOver(self) -> bool:
        return self.winner() is not None
