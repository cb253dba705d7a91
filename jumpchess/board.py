"""The star-shaped jump chess board held as a 17 x 17 grid."""

from __future__ import annotations

SIZE = 17
OPEN = 10
OFF = 100
EMPTY = 0
PIECES_PER_PLAYER = 10

# Each player wins by filling the corner opposite the one it starts in.
_TARGET = {4: 1, 5: 2, 6: 3, 1: 4, 2: 5, 3: 6}
_THREE_PLAYER_SEATS = frozenset({2, 4, 6})


def _home_corner(x: int, y: int) -> int | None:
    """Return the player whose starting corner covers column x, row y."""
    if y < 4 and 3 < x < 9:
        return 1
    if y > 3 and x < 4:
        return 2
    if 8 < y < 13 and 3 < x < 8:
        return 3
    if y > 12 and x > 8:
        return 4
    if 8 < y < 13 and x > 12:
        return 5
    if 3 < y < 8 and 8 < x < 13:
        return 6
    return None


def _outside_star(x: int, y: int) -> bool:
    return (
        (y < 4 and x < 4)
        or (y < 4 and x > 7)
        or (y < 9 and x > 12)
        or (y > 12 and x > 12)
        or (y > 12 and x < 9)
        or (y > 7 and x < 4)
    )


def _dead_cells() -> frozenset[tuple[int, int]]:
    cells: set[tuple[int, int]] = set()
    cells.update((x, y) for y in range(5, 9) for x in range(y - 4))
    cells.update((x, y) for x in range(9, 12) for y in range(x + 5, SIZE))
    cells.update((x, y) for x in range(14, SIZE) for y in range(9, x - 4))
    cells.update((x, y) for y in range(3) for x in range(5 + y, 8))
    return frozenset(cells)


def _centre_cells() -> frozenset[tuple[int, int]]:
    cells: set[tuple[int, int]] = set()
    for extra, x in enumerate(range(4, 9)):
        cells.update((x, y) for y in range(4, 9 + extra))
    for extra, x in enumerate(range(12, 8, -1)):
        cells.update((x, y) for y in range(8 - extra, 13))
    return frozenset(cells)


_DEAD = _dead_cells()
_CENTRE = _centre_cells()
_HOME = {
    (x, y): corner
    for x in range(SIZE)
    for y in range(SIZE)
    if (corner := _home_corner(x, y)) is not None
    and (x, y) not in _CENTRE
    and (x, y) not in _DEAD
    and not _outside_star(x, y)
}


def _in_range(x: int, y: int) -> bool:
    return 0 <= x < SIZE and 0 <= y < SIZE


class Board:
    """Cells indexed by (column, row); values are players 1-6, OPEN or OFF."""

    def __init__(self, players: int = 6) -> None:
        self.players = players
        self._cells: list[list[int]] = []
        self.reset(players)

    def reset(self, players: int | None = None) -> None:
        """Put every piece back in its starting corner."""
        if players is not None:
            self.players = players
        self._cells = [
            [self._initial_value(x, y) for y in range(SIZE)] for x in range(SIZE)
        ]

    def _initial_value(self, x: int, y: int) -> int:
        if (x, y) in _CENTRE:
            return OPEN
        if (x, y) in _DEAD or _outside_star(x, y):
            return OFF
        corner = _home_corner(x, y)
        if corner is None:
            return EMPTY
        if self.players == 3 and corner not in _THREE_PLAYER_SEATS:
            return OPEN
        return corner

    def __getitem__(self, pos: tuple[int, int]) -> int:
        x, y = pos
        if _in_range(x, y):
            return self._cells[x][y]
        return OFF

    def __setitem__(self, pos: tuple[int, int], value: int) -> None:
        x, y = pos
        if not _in_range(x, y):
            raise IndexError(f"cell {pos} is outside the board")
        self._cells[x][y] = value

    def is_open(self, x: int, y: int) -> bool:
        return self[x, y] == OPEN

    def is_off_board(self, x: int, y: int) -> bool:
        return self[x, y] == OFF

    def winner(self) -> int | None:
        """Return the first player found with its opposite corner filled."""
        counts = dict.fromkeys(_TARGET, 0)
        for y in range(SIZE):
            for x in range(SIZE):
                corner = _HOME.get((x, y))
                if corner is None:
                    continue
                player = self._cells[x][y]
                if _TARGET.get(player) == corner:
                    counts[player] += 1
                    if counts[player] == PIECES_PER_PLAYER:
                        return player
        return None

    def pieces(self, player: int) -> list[tuple[int, int]]:
        """Positions holding the given player's pieces, row by row."""
        return [
            (x, y)
            for y in range(SIZE)
            for x in range(SIZE)
            if self._cells[x][y] == player
        ]