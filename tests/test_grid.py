"""Tests for the game grid."""

import pytest

from tictac_sim.exceptions import InvalidCoordinateError, InvalidSymbolError
from tictac_sim.models.game.grid import GameGrid
from tictac_sim.models.game.symbol import Symbol, MoveResult
from tests.helpers import (
    VALID_COORDINATES, WINNING_FORMATIONS, DRAW_FORMATIONS,
    symbol_for_index, create_grid, create_alternating_grid
)


def coordinate_sets():
    """Different sets of fields to fill: all, just one, and all with holes."""
    yield list(VALID_COORDINATES)
    for c in VALID_COORDINATES:
        yield [c]
    for i in range(len(VALID_COORDINATES)):
        coordinates = VALID_COORDINATES[:i] + VALID_COORDINATES[i + 1:]
        yield coordinates
        for _ in range(7 - i):
            coordinates = coordinates[:i] + coordinates[i + 1:]
            yield coordinates


class TestSetAndGet:
    """Test placing symbols and reading them back."""

    def test_new_grid_is_empty(self):
        """Test that every field of a new grid is empty."""
        grid = GameGrid()

        for x, y in VALID_COORDINATES:
            assert grid.get_symbol(x, y) is Symbol.EMPTY
        assert grid.move_count == 0
        assert grid.history == ()

    @pytest.mark.parametrize("coordinates", list(coordinate_sets()))
    def test_set_get_and_block(self, coordinates):
        """Test that set fields keep their symbol and can't be set again."""
        grid = GameGrid()

        for i, (x, y) in enumerate(coordinates):
            result = grid.try_set_symbol(symbol_for_index(i), x, y)
            assert result is not MoveResult.BLOCKED
            assert grid.get_symbol(x, y) is symbol_for_index(i)

            # Second attempt on the same field is blocked and changes nothing
            result = grid.try_set_symbol(symbol_for_index(i + 1), x, y)
            assert result is MoveResult.BLOCKED
            assert grid.get_symbol(x, y) is symbol_for_index(i)

            # History tracks exactly the non-empty fields
            taken = [c for c in VALID_COORDINATES if grid.get_symbol(*c) is not Symbol.EMPTY]
            assert grid.move_count == len(taken)

        assert grid.history == tuple(coordinates)

    @pytest.mark.parametrize("coordinates", list(coordinate_sets()))
    def test_valid_moves_exclude_taken_fields(self, coordinates):
        """Test that valid moves are exactly the empty fields."""
        grid = create_alternating_grid(coordinates)

        valid_moves = grid.get_all_valid_moves()

        assert len(valid_moves) == len(VALID_COORDINATES) - len(coordinates)
        assert not set(valid_moves) & set(coordinates)

    def test_valid_moves_scan_order(self):
        """Test that valid moves are listed with x outer and y inner."""
        grid = create_grid([(Symbol.X, 1, 1)])

        assert grid.get_all_valid_moves() == [
            (0, 0), (0, 1), (0, 2), (1, 0), (1, 2), (2, 0), (2, 1), (2, 2)
        ]

    def test_valid_moves_are_recomputed(self):
        """Test that valid moves reflect the grid after it changes."""
        grid = GameGrid()
        before = grid.get_all_valid_moves()

        grid.try_set_symbol(Symbol.X, 0, 0)

        assert len(before) == 9
        assert (0, 0) not in grid.get_all_valid_moves()
        grid.undo()
        assert (0, 0) in grid.get_all_valid_moves()

    @pytest.mark.parametrize("x, y", [(-1, 0), (3, 0), (0, -1), (0, 3), (5, 5)])
    def test_out_of_range_coordinates(self, x, y):
        """Test that coordinates outside [0, 2] are rejected."""
        grid = GameGrid()

        with pytest.raises(InvalidCoordinateError):
            grid.try_set_symbol(Symbol.X, x, y)
        with pytest.raises(InvalidCoordinateError):
            grid.get_symbol(x, y)
        # Also a ValueError for callers that don't know the package exceptions
        with pytest.raises(ValueError):
            grid.get_symbol(x, y)
        assert grid.move_count == 0

    def test_empty_symbol_rejected(self):
        """Test that a move can't be made with the empty symbol."""
        grid = GameGrid()

        with pytest.raises(InvalidSymbolError):
            grid.try_set_symbol(Symbol.EMPTY, 1, 1)
        assert grid.move_count == 0

    def test_str_renders_rows(self):
        """Test the text rendering used in logs."""
        grid = create_grid([(Symbol.X, 0, 0), (Symbol.O, 2, 1)])

        assert str(grid) == "X..\n..O\n..."


class TestResetAndUndo:
    """Test clearing the grid."""

    @pytest.mark.parametrize("coordinates", list(coordinate_sets()))
    def test_reset_clears_everything(self, coordinates):
        """Test that reset empties every field and the history."""
        grid = create_alternating_grid(coordinates)

        changed = grid.reset()

        assert sorted(changed) == sorted(VALID_COORDINATES)
        for x, y in VALID_COORDINATES:
            assert grid.get_symbol(x, y) is Symbol.EMPTY
        assert grid.move_count == 0
        assert len(grid.get_all_valid_moves()) == 9

    @pytest.mark.parametrize("undo_count", [1, 2, 6, 9])
    def test_undo_restores_last_moves(self, undo_count):
        """Test that undo(n) clears exactly the last n moves."""
        for coordinates in coordinate_sets():
            if len(coordinates) < undo_count:
                continue
            grid = create_alternating_grid(coordinates)

            cleared = grid.undo(undo_count)

            last_kept = len(coordinates) - undo_count
            assert cleared == list(reversed(coordinates[last_kept:]))
            for i, (x, y) in enumerate(coordinates):
                expected = Symbol.EMPTY if i >= last_kept else symbol_for_index(i)
                assert grid.get_symbol(x, y) is expected
            assert grid.move_count == last_kept

    def test_undo_more_than_history_is_noop(self):
        """Test that undoing more moves than were made changes nothing."""
        grid = create_alternating_grid([(0, 0), (1, 1)])

        assert grid.undo(3) == []

        assert grid.get_symbol(0, 0) is Symbol.X
        assert grid.get_symbol(1, 1) is Symbol.O
        assert grid.move_count == 2

    def test_undo_without_argument(self):
        """Test that undo() clears the last move, and does nothing on an empty grid."""
        grid = GameGrid()
        assert grid.undo() == []

        grid.try_set_symbol(Symbol.X, 2, 0)
        grid.try_set_symbol(Symbol.O, 0, 2)

        assert grid.undo() == [(0, 2)]
        assert grid.history == ((2, 0),)

    def test_undo_zero_and_negative(self):
        """Test undo(0) and rejection of a negative count."""
        grid = create_alternating_grid([(0, 0)])

        assert grid.undo(0) == []
        with pytest.raises(ValueError):
            grid.undo(-1)
        assert grid.move_count == 1

    def test_undone_field_can_be_set_again(self):
        """Test that an undone field accepts a new symbol."""
        grid = create_grid([(Symbol.X, 1, 1)])
        grid.undo()

        assert grid.try_set_symbol(Symbol.O, 1, 1) is MoveResult.SUCCESS
        assert grid.get_symbol(1, 1) is Symbol.O


class TestFieldChangedListeners:
    """Test field changed notifications."""

    def test_successful_move_notifies(self):
        """Test that placing a symbol notifies listeners with its coordinates."""
        grid = GameGrid()
        changes = []
        grid.add_field_changed_listener(lambda x, y: changes.append((x, y)))

        grid.try_set_symbol(Symbol.X, 2, 1)

        assert changes == [(2, 1)]

    def test_blocked_move_does_not_notify(self):
        """Test that a blocked attempt does not notify listeners."""
        grid = create_grid([(Symbol.X, 0, 0)])
        changes = []
        grid.add_field_changed_listener(lambda x, y: changes.append((x, y)))

        assert grid.try_set_symbol(Symbol.O, 0, 0) is MoveResult.BLOCKED

        assert changes == []

    def test_reset_notifies_every_field(self):
        """Test that reset notifies all 9 fields, even ones that were already empty."""
        grid = create_grid([(Symbol.X, 0, 0)])
        changes = []
        grid.add_field_changed_listener(lambda x, y: changes.append((x, y)))

        grid.reset()

        assert sorted(changes) == sorted(VALID_COORDINATES)

    def test_listeners_see_reset_grid(self):
        """Test that listeners are notified after every field was cleared."""
        grid = create_alternating_grid([(0, 0), (2, 2)])
        seen = []
        grid.add_field_changed_listener(lambda x, y: seen.append(grid.move_count + len(grid.get_all_valid_moves())))

        grid.reset()

        assert seen == [9] * 9

    def test_undo_notifies(self):
        """Test that undo notifies each cleared field, most recent first."""
        grid = create_alternating_grid([(0, 0), (1, 1), (2, 2)])
        changes = []
        grid.add_field_changed_listener(lambda x, y: changes.append((x, y)))

        grid.undo(2)

        assert changes == [(2, 2), (1, 1)]

    def test_remove_listener(self):
        """Test that removed listeners are no longer notified."""
        grid = GameGrid()
        changes = []
        listener = lambda x, y: changes.append((x, y))
        grid.add_field_changed_listener(listener)
        grid.remove_field_changed_listener(listener)

        grid.try_set_symbol(Symbol.X, 0, 0)

        assert changes == []
        # Removing twice is harmless
        grid.remove_field_changed_listener(listener)


class TestFormations:
    """Test victory, tie and winning move detection."""

    @pytest.mark.parametrize("formation", DRAW_FORMATIONS)
    def test_draw(self, formation):
        """Test that filling the grid without a formation is a tie on the last move."""
        grid = GameGrid()

        for x in range(3):
            for y in range(3):
                result = grid.try_set_symbol(formation[x][y], x, y)

                if (x, y) == (2, 2):
                    assert result is MoveResult.TIE
                else:
                    assert result is MoveResult.SUCCESS

    @pytest.mark.parametrize("winner", [Symbol.X, Symbol.O])
    @pytest.mark.parametrize("formation", WINNING_FORMATIONS)
    def test_win(self, formation, winner):
        """Test that completing a formation wins and the winning move is found beforehand."""
        grid = GameGrid()
        loser = winner.opposite
        # Losing moves differ between formations to spread the test data
        losing_moves = [c for c in VALID_COORDINATES if c not in formation][formation[0][0]:][:2]

        for i in range(len(formation) - 1):
            assert grid.try_set_symbol(winner, *formation[i]) is MoveResult.SUCCESS
            assert grid.try_set_symbol(loser, *losing_moves[i]) is MoveResult.SUCCESS

        winning_move = formation[-1]
        assert grid.try_get_winning_move(winner) == winning_move

        assert grid.try_set_symbol(winner, *winning_move) is MoveResult.VICTORY

    @pytest.mark.parametrize("formation", WINNING_FORMATIONS)
    def test_win_in_any_order(self, formation):
        """Test that the third symbol wins whichever field of the formation it takes."""
        for last in range(3):
            order = [formation[i] for i in range(3) if i != last] + [formation[last]]
            grid = GameGrid()

            results = [grid.try_set_symbol(Symbol.X, x, y) for x, y in order]

            assert results == [MoveResult.SUCCESS, MoveResult.SUCCESS, MoveResult.VICTORY]

    @pytest.mark.parametrize("formation", WINNING_FORMATIONS)
    def test_gap_winning_move(self, formation):
        """Test that the middle of a formation is found when both ends are taken."""
        first, middle, last = formation
        grid = create_grid([(Symbol.O, *first), (Symbol.O, *last)])

        assert grid.try_get_winning_move(Symbol.O) == middle
        assert grid.try_get_winning_move(Symbol.X) is None

    def test_example_game(self):
        """Test X winning on the diagonal against O."""
        grid = GameGrid()

        assert grid.try_set_symbol(Symbol.X, 0, 0) is MoveResult.SUCCESS
        assert grid.try_set_symbol(Symbol.O, 0, 1) is MoveResult.SUCCESS
        assert grid.try_set_symbol(Symbol.X, 1, 1) is MoveResult.SUCCESS
        assert grid.try_set_symbol(Symbol.O, 1, 0) is MoveResult.SUCCESS

        assert grid.try_get_winning_move(Symbol.X) == (2, 2)
        assert grid.try_set_symbol(Symbol.X, 2, 2) is MoveResult.VICTORY

    def test_not_winning_formations(self):
        """Test that three symbols out of line do not win."""
        not_winning = [
            [(0, 0), (1, 1), (2, 0)],
            [(0, 1), (1, 2), (2, 1)],
            [(0, 2), (1, 2), (2, 1)],
            [(2, 0), (0, 1), (0, 2)],
            [(1, 0), (1, 1), (0, 1)],
            [(1, 2), (2, 1), (2, 2)],
            [(0, 0), (0, 1), (2, 2)],
            [(2, 0), (2, 1), (1, 2)],
        ]
        for formation in not_winning:
            grid = GameGrid()
            results = [grid.try_set_symbol(Symbol.X, x, y) for x, y in formation]
            assert MoveResult.VICTORY not in results, formation

    def test_no_winning_move_on_early_grid(self):
        """Test that no winning move is reported before two moves were made."""
        grid = create_grid([(Symbol.X, 1, 1)])

        assert grid.try_get_winning_move(Symbol.X) is None
        assert grid.try_get_winning_move(Symbol.EMPTY) is None

    def test_blocked_formation_has_no_winning_move(self):
        """Test that a line already blocked by the opponent is not reported."""
        grid = create_grid([(Symbol.X, 0, 0), (Symbol.O, 1, 1), (Symbol.X, 2, 2)])

        assert grid.try_get_winning_move(Symbol.X) is None

    def test_first_winning_move_in_scan_order(self):
        """Test that the first winning move found in scan order is returned."""
        # X can win at (0, 2) on the left column and at (2, 0) on the upper row
        grid = create_grid([
            (Symbol.X, 0, 0), (Symbol.O, 2, 2),
            (Symbol.X, 0, 1), (Symbol.O, 1, 2),
            (Symbol.X, 1, 0),
        ])

        assert grid.try_get_winning_move(Symbol.X) == (0, 2)

    def test_is_winning_formation_of_empty_field(self):
        """Test that an empty field is never part of a winning formation."""
        grid = create_alternating_grid([(0, 0), (1, 0), (2, 0)])

        assert not grid.is_winning_formation(2, 2)
