"""Tests for the GameEngine state machine."""

import pytest

from game_engine import (
    GameEngine, GameState, Mark, MoveError, Outcome, OutcomeStatus, next_state,
)

X = Mark.FIRST
O = Mark.SECOND
_ = None

EMPTY_BOARD = [[_, _, _], [_, _, _], [_, _, _]]


def play(engine, moves):
    """Apply (row, col) moves in order, asserting each one is accepted."""
    for row, col in moves:
        result = engine.make_move(row, col)
        assert result.is_valid, result.error_message
    return engine.state


def assert_initial(state: GameState):
    assert state.board == EMPTY_BOARD
    assert state.current_turn == X
    assert state.outcome == Outcome.in_progress()


@pytest.fixture
def engine():
    return GameEngine()


# A game O wins on row 1, leaving (2, 2) empty
SECOND_WINS = [(0, 0), (1, 0), (0, 1), (1, 1), (2, 0), (1, 2)]

# Fills the board with no line for either mark
DRAW_GAME = [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (2, 0), (1, 2), (2, 2), (2, 1)]


def test_new_engine_is_initial(engine):
    assert_initial(engine.state)


def test_initialize_returns_fresh_state(engine):
    play(engine, [(0, 0), (1, 1)])
    assert_initial(engine.initialize())
    assert_initial(engine.state)


def test_turns_alternate(engine):
    moves = [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (2, 0), (1, 2), (2, 2)]
    for n, (row, col) in enumerate(moves, start=1):
        state = engine.state
        assert state.outcome.status == OutcomeStatus.IN_PROGRESS
        assert state.current_turn == (X if n % 2 == 1 else O)
        engine.apply_move(row, col)
        assert engine.state.board[row][col] == state.current_turn


def test_apply_move_returns_resulting_state(engine):
    state = engine.apply_move(1, 1)
    assert state.board[1][1] == X
    assert state.current_turn == O
    assert state == engine.state


def test_state_is_a_copy(engine):
    state = engine.state
    state.board[0][0] = O
    assert engine.state.board[0][0] is None


def test_scenario_top_row_win(engine):
    state = play(engine, [(0, 0), (1, 1), (0, 1), (1, 0), (0, 2)])
    assert state.outcome == Outcome.won(X)
    assert state.winner == X
    assert state.is_game_over
    assert not state.is_draw
    assert state.current_turn == X


def test_scenario_draw(engine):
    state = play(engine, DRAW_GAME)
    assert state.board == [[X, O, X], [X, O, X], [O, X, O]]
    assert state.outcome == Outcome.draw()
    assert state.is_draw
    assert state.winner is None
    assert state.current_turn == X


def test_scenario_same_cell_twice(engine):
    first = engine.apply_move(0, 0)
    result = engine.make_move(0, 0)
    assert not result.is_valid
    assert result.error == MoveError.CELL_OCCUPIED
    assert engine.state == first
    assert engine.apply_move(0, 0) == first


def test_scenario_out_of_range_on_fresh_board(engine):
    result = engine.make_move(3, 0)
    assert not result.is_valid
    assert result.error == MoveError.OUT_OF_RANGE
    assert result.is_invalid_input
    assert_initial(engine.state)


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (0, 3), (3, 3), (10, 1)])
def test_out_of_range_never_changes_state(engine, row, col):
    before = engine.apply_move(1, 1)
    result = engine.make_move(row, col)
    assert result.error == MoveError.OUT_OF_RANGE
    assert engine.state == before


@pytest.mark.parametrize("row, col", [(True, 0), (0, False), (1.0, 1), ("1", 1), (None, 0)])
def test_non_integer_coordinates_are_out_of_range(engine, row, col):
    result = engine.make_move(row, col)
    assert result.error == MoveError.OUT_OF_RANGE
    assert_initial(engine.state)


def test_scenario_move_after_second_wins(engine):
    state = play(engine, SECOND_WINS)
    assert state.outcome == Outcome.won(O)
    assert state.board[2][2] is None

    result = engine.make_move(2, 2)
    assert not result.is_valid
    assert result.error == MoveError.GAME_ALREADY_DECIDED
    assert engine.state == state


def test_decided_game_rejects_every_move(engine):
    state = play(engine, SECOND_WINS)
    for row, col in [(2, 1), (0, 0), (5, 5)]:
        result = engine.make_move(row, col)
        assert result.error == MoveError.GAME_ALREADY_DECIDED
        assert engine.state == state


def test_occupied_cell_after_draw_keeps_state(engine):
    state = play(engine, DRAW_GAME)
    assert engine.apply_move(1, 1) == state


@pytest.mark.parametrize("moves", [[], [(0, 0)], SECOND_WINS, DRAW_GAME])
def test_reset_yields_initial_state(engine, moves):
    play(engine, moves)
    assert_initial(engine.reset())
    assert_initial(engine.state)


def test_reset_is_idempotent(engine):
    play(engine, [(0, 0), (2, 2)])
    once = engine.reset()
    twice = engine.reset()
    assert once == twice


def test_play_again_after_reset(engine):
    play(engine, SECOND_WINS)
    engine.reset()
    state = engine.apply_move(2, 2)
    assert state.board[2][2] == X
    assert state.current_turn == O


def test_engines_are_independent():
    a = GameEngine()
    b = GameEngine()
    a.apply_move(0, 0)
    assert b.state.board[0][0] is None


def test_next_state_leaves_input_untouched():
    state = GameState()
    new_state, result = next_state(state, 1, 1)
    assert result.is_valid
    assert state.board[1][1] is None
    assert new_state.board[1][1] == X
    assert new_state.current_turn == O


def test_next_state_catches_corrupt_board():
    # Two X marks and no O: the alternation invariant is already broken
    state = GameState(board=[[X, _, _], [_, X, _], [_, _, _]], current_turn=X)
    with pytest.raises(AssertionError):
        next_state(state, 2, 0)


def test_mark_helpers():
    assert X.opposite() == O
    assert O.opposite() == X
    assert X.symbol == "X"
    assert O.symbol == "O"


def test_move_count_and_empty_cells(engine):
    state = play(engine, [(0, 0), (1, 1)])
    assert state.move_count == 2
    assert (0, 0) not in state.get_empty_cells()
    assert len(state.get_empty_cells()) == 7
