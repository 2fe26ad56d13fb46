"""
Tests for the board model: cells, winner detection and rendering.
"""

import pytest

from logic.game_state import Board, GameOutcome, GameState, Mark
from logic.move_validator import MoveValidator
from logic.win_checker import WinChecker


# X and O interleaved with no line for either
DRAWN_BOARD = "XOXXOOOXX"


def test_empty_board():
    board = Board.empty()

    assert board.available_cells() == [1, 2, 3, 4, 5, 6, 7, 8, 9]
    assert board.is_empty()
    assert not board.is_complete()


def test_available_cells_are_one_based_and_ascending():
    board = Board.from_string("XX OO    ")

    assert board.available_cells() == [3, 6, 7, 8, 9]
    assert board.count(Mark.CROSS) == 2
    assert board.count(Mark.NOUGHT) == 2


def test_complete_iff_no_available_cells():
    full = Board.from_string(DRAWN_BOARD)
    almost = Board.from_string("XOXXOOOX ")

    assert full.is_complete()
    assert full.available_cells() == []
    assert not almost.is_complete()
    assert almost.available_cells() == [9]


@pytest.mark.parametrize("line", WinChecker.WINNING_LINES)
@pytest.mark.parametrize("mark", [Mark.CROSS, Mark.NOUGHT])
def test_every_line_wins(line, mark):
    cells = [Mark.EMPTY] * 9
    for index in line:
        cells[index] = mark
    board = Board(cells)

    checker = WinChecker()
    assert checker.check_winner(board) == mark
    assert checker.get_winning_line(board) == line


def test_no_winner_on_drawn_board():
    checker = WinChecker()
    board = Board.from_string(DRAWN_BOARD)

    assert checker.check_winner(board) is None
    assert checker.check_draw(board)


def test_mixed_line_does_not_win():
    checker = WinChecker()

    assert checker.check_winner(Board.from_string("XXO      ")) is None
    assert checker.check_winner(Board.empty()) is None
    assert not checker.check_draw(Board.empty())


def test_render_layout():
    board = Board.from_string("XO    O X")

    assert board.render() == (
        "O |   | X\n"
        "---------\n"
        "  |   |  \n"
        "---------\n"
        "X | O |  "
    )


def test_render_center_is_visual_center():
    board = Board.empty().with_move(5, Mark.CROSS)

    lines = board.render().splitlines()
    assert lines[2] == "  | X |  "
    assert "X" not in lines[0] + lines[4]


@pytest.mark.parametrize("index", range(9))
def test_render_places_each_cell_once(index):
    board = Board.empty().with_move(index + 1, Mark.NOUGHT)

    lines = board.render().splitlines()
    row = 2 * (2 - index // 3)
    column = 4 * (index % 3)

    assert board.render().count("O") == 1
    assert lines[row][column] == "O"


def test_with_move_leaves_original_untouched():
    board = Board.from_string("X        ")
    new_board = board.with_move(5, Mark.NOUGHT)

    assert board[4] == Mark.EMPTY
    assert new_board[4] == Mark.NOUGHT
    assert new_board[0] == Mark.CROSS


def test_place_rejects_taken_cell():
    board = Board.empty()
    board.place(1, Mark.CROSS)

    with pytest.raises(ValueError):
        board.place(1, Mark.NOUGHT)
    with pytest.raises(ValueError):
        board.place(10, Mark.NOUGHT)


def test_from_string_rejects_bad_input():
    with pytest.raises(ValueError):
        Board.from_string("XO")
    with pytest.raises(ValueError):
        Board.from_string("XOZ      ")
    with pytest.raises(ValueError):
        Board([Mark.EMPTY] * 8)


def test_marks():
    assert Mark.CROSS.opposite() == Mark.NOUGHT
    assert Mark.NOUGHT.opposite() == Mark.CROSS
    assert Mark.from_choice(" X ") == Mark.CROSS
    assert Mark.from_choice("o") == Mark.NOUGHT
    assert Mark.from_choice("0") is None
    assert Mark.EMPTY.glyph == " "

    with pytest.raises(ValueError):
        Mark.EMPTY.opposite()


def test_game_state_turns():
    game = GameState(human_mark=Mark.CROSS)

    # AI opens
    assert game.current_mark == Mark.NOUGHT
    assert not game.is_human_turn()

    assert game.make_move(5)
    assert game.is_human_turn()
    assert not game.make_move(5)

    assert game.make_move(1)
    assert [(m.mark, m.cell, m.move_number) for m in game.moves] == [
        (Mark.NOUGHT, 5, 0),
        (Mark.CROSS, 1, 1),
    ]


def test_update_game_state_and_outcome():
    checker = WinChecker()

    game = GameState(human_mark=Mark.NOUGHT)
    for cell in (1, 4, 2, 5, 3):  # X takes the bottom row
        game.make_move(cell)
    checker.update_game_state(game)

    assert game.is_game_over
    assert game.winner == Mark.CROSS
    assert game.outcome() == GameOutcome.AI_WIN
    assert not game.make_move(9)

    draw = GameState(human_mark=Mark.NOUGHT, board=Board.from_string(DRAWN_BOARD))
    checker.update_game_state(draw)
    assert draw.is_draw
    assert draw.outcome() == GameOutcome.DRAW

    ongoing = GameState()
    checker.update_game_state(ongoing)
    assert ongoing.outcome() is None


def test_move_validator():
    validator = MoveValidator()
    game = GameState(human_mark=Mark.NOUGHT)
    game.make_move(5)

    ok = validator.validate_input(game, " 7 ")
    assert ok.is_valid and ok.cell == 7

    taken = validator.validate_input(game, "5")
    assert not taken.is_valid
    assert taken.error_message == "5 is already occupied."

    assert not validator.validate_input(game, "ten").is_valid
    assert not validator.validate_input(game, "").is_valid
    assert not validator.validate_input(game, "0").is_valid
    assert not validator.validate_input(game, "10").is_valid

    game.is_game_over = True
    assert not validator.validate_move(game, 1).is_valid


def test_update_game_state_uses_check_draw(monkeypatch):
    checker = WinChecker()
    seen = []

    def fake_check_draw(board):
        seen.append(board)
        return True

    monkeypatch.setattr(checker, "check_draw", fake_check_draw)

    # Not full, but the draw decision belongs to check_draw
    game = GameState(human_mark=Mark.NOUGHT)
    checker.update_game_state(game)

    assert seen == [game.board]
    assert game.is_draw and game.is_game_over
