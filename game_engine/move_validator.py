"""
Move validator for Tic Tac Toe.
Validates that moves follow the rules.
"""

from enum import Enum
from typing import Optional
from dataclasses import dataclass
from .game_state import GameState, BOARD_SIZE


class MoveError(Enum):
    """Why a move was rejected."""
    OUT_OF_RANGE = "out_of_range"
    CELL_OCCUPIED = "cell_occupied"
    GAME_ALREADY_DECIDED = "game_already_decided"


@dataclass(frozen=True)
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[MoveError] = None
    error_message: Optional[str] = None

    @property
    def is_invalid_input(self) -> bool:
        """True when the coordinates themselves were bad."""
        return self.error == MoveError.OUT_OF_RANGE


class MoveValidator:
    """
    Validates Tic Tac Toe moves.

    Rules:
    1. Game must not be over
    2. Row and column must be on the board (0-2)
    3. Can only place on empty cells

    A rejected move is never an exception: the caller gets a
    ValidationResult and decides whether to ignore or report it.
    """

    def validate_move(self, game_state: GameState, row: int, col: int) -> ValidationResult:
        """
        Validate a move for the player whose turn it is.

        Args:
            game_state: Current game state.
            row: Row to place the mark (0-2).
            col: Column to place the mark (0-2).

        Returns:
            ValidationResult with is_valid, error and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error=MoveError.GAME_ALREADY_DECIDED,
                error_message="Game is already over!"
            )

        if not self.is_on_board(row, col):
            return ValidationResult(
                is_valid=False,
                error=MoveError.OUT_OF_RANGE,
                error_message=f"Invalid position ({row}, {col}). Must be 0-{BOARD_SIZE - 1}."
            )

        occupant = game_state.board[row][col]
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error=MoveError.CELL_OCCUPIED,
                error_message=f"Cell ({row}, {col}) is already occupied by {occupant.symbol}"
            )

        return ValidationResult(is_valid=True)

    @staticmethod
    def is_on_board(row, col) -> bool:
        """True if both coordinates are ints in 0-2."""
        # bool is an int subclass but True/False are not coordinates
        for value in (row, col):
            if isinstance(value, bool) or not isinstance(value, int):
                return False
        return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE

