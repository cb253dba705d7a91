"""Screen geometry, colours and messages for the jump chess board."""

from __future__ import annotations

import math

from jumpchess.board import SIZE

CELL_WIDTH = 60
ROW_HEIGHT = 30 * math.sqrt(3)

_COLOURS = {
    1: "yellow",
    2: "blue",
    3: "black",
    4: "red",
    5: "light gray",
    6: "green",
}

_TURN_MESSAGES = {
    4: "红方出棋",
    5: "灰方出棋",
    6: "绿方出棋",
    1: "黄方出棋",
    2: "蓝方出棋",
    3: "黑方出棋",
}

_WIN_MESSAGES = {
    4: "红棋胜利",
    5: "灰棋胜利",
    6: "绿棋胜利",
    1: "黄棋胜利",
    2: "蓝棋胜利",
    3: "黑棋胜利",
}

# Player counts in which each colour is drawn; None means always.
_SHOWN_WITH: dict[int, tuple[int, ...] | None] = {
    1: (2, 4, 6),
    2: (3, 6),
    3: (4, 6),
    4: None,
    5: (6,),
    6: (3, 4, 6),
}


def cell_center(i: int, j: int) -> tuple[int, int]:
    """Window coordinates of the centre of cell (column i, row j)."""
    x = i * 60 - (j - 4) * 30 + 60
    y = int(j * 30 * math.sqrt(3) + 15 * math.sqrt(3))
    return x, y


def cell_at(px: float, py: float) -> tuple[int, int] | None:
    """Cell under window point (px, py), or None outside the grid."""
    row = int(py / ROW_HEIGHT)
    col = int((int(px) + row * 30 - 150) / 60)
    if 0 <= col < SIZE and 0 <= row < SIZE:
        return col, row
    return None


def turn_message(player: int) -> str:
    try:
        return _TURN_MESSAGES[player]
    except KeyError:
        raise ValueError(f"no such player: {player}") from None


def win_message(player: int) -> str:
    try:
        return _WIN_MESSAGES[player]
    except KeyError:
        raise ValueError(f"no such player: {player}") from None


def visible_players(players: int) -> frozenset[int]:
    """Colours whose pieces are drawn in a game of the given size."""
    return frozenset(
        player
        for player, counts in _SHOWN_WITH.items()
        if counts is None or players in counts
    )


def player_color(player: int) -> str:
    try:
        return _COLOURS[player]
    except KeyError:
        raise ValueError(f"no such player: {player}") from None