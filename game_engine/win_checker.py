"""
Win checker for Tic Tac Toe.
Works out whether a board is won, drawn, or still in progress.
"""

from typing import Optional, List, Tuple
from .game_state import Mark, Outcome, BOARD_SIZE


Board = List[List[Optional[Mark]]]


class WinChecker:
    """
    Checks for win conditions in Tic Tac Toe.

    Win condition: 3 equal marks in a row
    (horizontally, vertically, or diagonally)

    Everything here is a pure function of the board. The whole board is
    scanned every time; nothing is carried between moves.
    """

    # All possible winning lines, in tie-break order:
    # rows top to bottom, columns left to right, then the two diagonals.
    WINNING_LINES = [
        # Rows
        [(0, 0), (0, 1), (0, 2)],
        [(1, 0), (1, 1), (1, 2)],
        [(2, 0), (2, 1), (2, 2)],
        # Columns
        [(0, 0), (1, 0), (2, 0)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 2), (1, 2), (2, 2)],
        # Diagonals
        [(0, 0), (1, 1), (2, 2)],
        [(0, 2), (1, 1), (2, 0)],
    ]

    def check_winner(self, board: Board) -> Optional[Mark]:
        """
        Check if there's a winner.

        If several lines match (only possible on a corrupt board) the
        first one in WINNING_LINES order decides.

        Args:
            board: The 3x3 board.

        Returns:
            The winning Mark, or None if no line is complete.
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                return winner

        return None

    def _check_line(self, board: Board, line: List[Tuple[int, int]]) -> Optional[Mark]:
        """
        Check if a single line has a winner.

        Returns:
            The Mark if all 3 cells hold it, None otherwise.
        """
        (r0, c0), (r1, c1), (r2, c2) = line
        first = board[r0][c0]
        if first is None:
            return None  # Empty cell, no winner on this line

        if first == board[r1][c1] == board[r2][c2]:
            return first

        return None

    def is_full(self, board: Board) -> bool:
        """True if no cell is empty."""
        return all(cell is not None for row in board for cell in row)

    def check_draw(self, board: Board) -> bool:
        """
        Check if the board is a draw.

        A draw occurs when all cells are filled AND there is no winner.
        """
        if self.check_winner(board) is not None:
            return False

        return self.is_full(board)

    def get_outcome(self, board: Board) -> Outcome:
        """
        Compute the outcome for a board.

        Returns:
            Outcome.won(mark), Outcome.draw(), or Outcome.in_progress().
        """
        winner = self.check_winner(board)

        if winner is not None:
            return Outcome.won(winner)
        if self.check_draw(board):
            return Outcome.draw()

        return Outcome.in_progress()


_checker = WinChecker()


def compute_outcome(board: Board) -> Outcome:
    """Outcome of a board, using the default WinChecker."""
    assert len(board) == BOARD_SIZE and all(len(row) == BOARD_SIZE for row in board), \
        "board must be 3x3"
    return _checker.get_outcome(board)
