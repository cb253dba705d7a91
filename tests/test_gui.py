import pytest

from jumpchess.board import Board
from jumpchess.game import PLAYER_COUNTS
from jumpchess.gui import board_lines, main, player_count_choices
from jumpchess.layout import cell_at


def _horizontals():
    return [seg for seg in board_lines() if seg[1] == seg[3] and seg[0] != seg[2]
            or (seg[1] == seg[3] and seg[0] == seg[2] and False)]


def _horizontal_rows():
    lines = board_lines()
    return lines[-17:]


def test_board_has_seventeen_lines_in_each_direction():
    assert len(board_lines()) == 51


def test_last_seventeen_lines_are_horizontal_rows():
    rows = _horizontal_rows()
    assert all(y1 == y2 for _, y1, _, y2 in rows)
    ys = [y1 for _, y1, _, _ in rows]
    assert ys == sorted(ys)
    assert len(set(ys)) == 17


def test_horizontal_widths_are_whole_cells_and_hold_121_holes():
    rows = _horizontal_rows()
    widths = [x2 - x1 for x1, _, x2, _ in rows]
    assert all(w >= 0 and w % 60 == 0 for w in widths)
    assert sum(w // 60 + 1 for w in widths) == 121


def test_widest_row_spans_from_60_to_780():
    assert any(x1 == 60 and x2 == 780 for x1, _, x2, _ in _horizontal_rows())


def test_every_line_endpoint_lies_on_a_board_cell():
    board = Board(6)
    for x1, y1, x2, y2 in board_lines():
        for px, py in ((x1, y1), (x2, y2)):
            cell = cell_at(px, py)
            assert cell is not None
            assert not board.is_off_board(*cell)


def test_horizontal_endpoints_map_to_distinct_rows():
    rows = [cell_at(x1, y1)[1] for x1, y1, _, _ in _horizontal_rows()]
    assert rows == list(range(17))


def test_player_count_choices_follow_supported_counts():
    choices = player_count_choices()
    assert [count for _, count in choices] == list(PLAYER_COUNTS)
    assert [label for label, _ in choices] == ["双人对战", "三人对战", "四人对战", "六人对战"]


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit) as excinfo:
        main(["--no-such-option"])
    assert excinfo.value.code == 2