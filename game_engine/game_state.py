"""
Game state for Tic Tac Toe.
Tracks the board, whose turn it is, and the outcome.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field


# Fixed 3x3 grid
BOARD_SIZE = 3


class Mark(Enum):
    """The two marks a player can place."""
    FIRST = "X"
    SECOND = "O"

    @property
    def symbol(self) -> str:
        """Display symbol ("X" or "O")."""
        return self.value

    def opposite(self) -> "Mark":
        """Get the other player's mark."""
        return Mark.SECOND if self == Mark.FIRST else Mark.FIRST


class OutcomeStatus(Enum):
    """Where the game stands."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    Result of the current board.

    Only WON carries a winner. Build with the classmethods rather than
    the constructor so the winner/status pairing stays consistent.
    """
    status: OutcomeStatus = OutcomeStatus.IN_PROGRESS
    winner: Optional[Mark] = None

    @classmethod
    def in_progress(cls) -> "Outcome":
        return cls(OutcomeStatus.IN_PROGRESS)

    @classmethod
    def won(cls, mark: Mark) -> "Outcome":
        return cls(OutcomeStatus.WON, mark)

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(OutcomeStatus.DRAW)

    @property
    def is_decided(self) -> bool:
        return self.status != OutcomeStatus.IN_PROGRESS


def empty_board() -> List[List[Optional[Mark]]]:
    """A fresh 3x3 board with every cell empty."""
    return [[None for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]


@dataclass
class GameState:
    """
    The complete state of a Tic Tac Toe game.

    Tracks:
    - The 3x3 board (None means empty, otherwise a Mark)
    - Whose turn it is
    - The outcome (in progress, won, draw)

    The outcome is derived from the board by the WinChecker; it is never
    set on its own.
    """

    board: List[List[Optional[Mark]]] = field(default_factory=empty_board)

    # Mark that moves next. Left at its last value once the game is decided.
    current_turn: Mark = Mark.FIRST

    outcome: Outcome = field(default_factory=Outcome.in_progress)

    @property
    def winner(self) -> Optional[Mark]:
        return self.outcome.winner

    @property
    def is_draw(self) -> bool:
        return self.outcome.status == OutcomeStatus.DRAW

    @property
    def is_game_over(self) -> bool:
        return self.outcome.is_decided

    @property
    def move_count(self) -> int:
        """Number of occupied cells."""
        return sum(1 for row in self.board for cell in row if cell is not None)

    def count_marks(self, mark: Mark) -> int:
        """How many cells hold the given mark."""
        return sum(1 for row in self.board for cell in row if cell == mark)

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples, in row-major order.
        """
        empty = []
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                if self.board[row][col] is None:
                    empty.append((row, col))
        return empty

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=[[cell for cell in row] for row in self.board],
            current_turn=self.current_turn,
            outcome=self.outcome,
        )

    def check_invariants(self):
        """
        Assert the board is a legal position.

        A failure here means a bug in the engine, not a bad move.
        """
        assert len(self.board) == BOARD_SIZE, "board must have 3 rows"
        assert all(len(row) == BOARD_SIZE for row in self.board), "board rows must have 3 cells"
        assert all(
            cell is None or isinstance(cell, Mark) for row in self.board for cell in row
        ), "cells must be empty or hold a Mark"

        difference = self.count_marks(Mark.FIRST) - self.count_marks(Mark.SECOND)
        assert difference in (0, 1), f"mark counts out of alternation (FIRST - SECOND = {difference})"

        if not self.is_game_over:
            expected = Mark.FIRST if difference == 0 else Mark.SECOND
            assert self.current_turn == expected, (
                f"turn is {self.current_turn.symbol} but board says {expected.symbol}"
            )
