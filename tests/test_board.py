import pytest

from jumpchess.board import OFF, OPEN, PIECES_PER_PLAYER, SIZE, Board


def _grid(board):
    return [[board[x, y] for y in range(SIZE)] for x in range(SIZE)]


def _open_count(board):
    return sum(board.is_open(x, y) for x in range(SIZE) for y in range(SIZE))


@pytest.mark.parametrize("player", [1, 2, 3, 4, 5, 6])
def test_six_player_board_has_ten_pieces_each(player):
    assert len(Board(6).pieces(player)) == PIECES_PER_PLAYER == 10


def test_centre_has_sixty_one_open_cells():
    assert _open_count(Board(6)) == 61


def test_three_player_board_leaves_odd_corners_open():
    six = Board(6)
    three = Board(3)
    for player in (1, 3, 5):
        assert three.pieces(player) == []
    for player in (2, 4, 6):
        assert three.pieces(player) == six.pieces(player)
    freed = sum(len(six.pieces(p)) for p in (1, 3, 5))
    assert _open_count(three) == _open_count(six) + freed


def test_two_and_four_player_boards_match_six():
    assert _grid(Board(2)) == _grid(Board(6))
    assert _grid(Board(4)) == _grid(Board(6))


def test_top_corner_lies_in_first_rows():
    assert all(y < 4 for _, y in Board(6).pieces(1))
    assert all(y > 12 for _, y in Board(6).pieces(4))


def test_setitem_and_getitem_round_trip():
    board = Board(6)
    board[8, 8] = 3
    assert board[8, 8] == 3
    assert not board.is_open(8, 8)


def test_out_of_range_reads_as_off_board():
    board = Board(6)
    assert board[-1, 5] == OFF
    assert board[SIZE, 0] == OFF
    assert board.is_off_board(0, 0)


def test_setitem_out_of_range_raises():
    board = Board(6)
    before = _grid(board)
    with pytest.raises(IndexError):
        board[SIZE, 3] = 1
    assert _grid(board) == before
    assert board[SIZE, 3] == OFF


def test_reset_restores_start():
    board = Board(6)
    start = _grid(board)
    (x, y) = board.pieces(4)[0]
    board[x, y] = OPEN
    board.reset()
    assert _grid(board) == start


def test_reset_switches_player_count():
    board = Board(6)
    board.reset(3)
    assert board.players == 3
    assert board.pieces(1) == []


def test_no_winner_at_start():
    assert Board(6).winner() is None


@pytest.mark.parametrize(
    "player,corner", [(4, 1), (1, 4), (5, 2), (2, 5), (6, 3), (3, 6)]
)
def test_filling_opposite_corner_wins(player, corner):
    board = Board(6)
    own = board.pieces(player)
    target = board.pieces(corner)
    for pos in own:
        board[pos] = OPEN
    for pos in target:
        board[pos] = player
    assert board.winner() == player


def test_nine_pieces_in_corner_do_not_win():
    board = Board(6)
    target = board.pieces(1)
    for pos in target[:-1]:
        board[pos] = 4
    board[target[-1]] = OPEN
    assert board.winner() is None