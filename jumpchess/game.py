"""Turn, move and timer rules of a jump chess game."""

from __future__ import annotations

from jumpchess.board import OFF, OPEN, Board

TURN_SECONDS = 60
FIRST_PLAYER = 4
PLAYER_COUNTS = (2, 3, 4, 6)


def next_player(current: int, players: int) -> int:
    """The player who moves after ``current`` in a game of ``players``."""
    if players == 6:
        return current + 1 if current < 6 else 1
    if players == 4:
        if current in (4, 1):
            return current + 2
        if current == 3:
            return 4
        if current == 6:
            return 1
        return current
    if players == 3:
        return current + 2 if current in (2, 4) else 2
    if players == 2:
        return 1 if current == 4 else 4
    raise ValueError(f"unsupported number of players: {players}")


def _is_step(dx: int, dy: int) -> bool:
    return (
        (abs(dx) == 1 and dy == 0)
        or (dx == 0 and abs(dy) == 1)
        or (dx == dy and abs(dx) == 1)
    )


class Game:
    """One game: the board, whose turn it is and what the turn has done."""

    def __init__(self, players: int) -> None:
        if players not in PLAYER_COUNTS:
            raise ValueError(f"unsupported number of players: {players}")
        self.players = players
        self.board = Board(players)
        self.current = FIRST_PLAYER
        self.selected: tuple[int, int] | None = None
        self.moves = 0
        self.seconds_left = TURN_SECONDS
        self._elapsed = 0
        self._stepped = False
        self._jumped = False
        self._origin: tuple[int, int] | None = None
        self._last: tuple[int, int] | None = None
        self._mover: int | None = None

    def click(self, x: int, y: int) -> int | None:
        """Handle a click on cell (x, y); return the winner if the game ends."""
        value = self.board[x, y]
        if value == OFF:
            return None
        if self.selected is not None and value != OPEN:
            self.selected = None
            return None
        if self.selected is None and self.moves >= 1 and (x, y) != self._last:
            return None
        if value == self.current:
            self.selected = (x, y)
            return None
        if self.selected is None:
            return None

        sx, sy = self.selected
        if _is_step(x - sx, y - sy):
            if self._stepped or self._jumped:
                return None
            self._stepped = True
        elif self._jump_allowed(sx, sy, x, y):
            self._jumped = True
        else:
            return None
        return self._move((sx, sy), (x, y))

    def _jump_allowed(self, sx: int, sy: int, x: int, y: int) -> bool:
        if self._stepped:
            return False
        if sx == x:
            if (sy + y) % 2:
                return False
            between = [(x, j) for j in range(min(sy, y) + 1, max(sy, y))]
            middle = (sx, (sy + y) // 2)
        elif sy == y:
            if (sx + x) % 2:
                return False
            between = [(i, y) for i in range(min(sx, x) + 1, max(sx, x))]
            middle = ((sx + x) // 2, sy)
        else:
            if (sy + y) % 2 or (sx + x) % 2:
                return False
            first_row = min(sy, y) + 1
            between = [
                (i, first_row + offset)
                for offset, i in enumerate(range(min(sx, x) + 1, max(sx, x)))
            ]
            middle = ((sx + x) // 2, (sy + y) // 2)
        blockers = sum(1 for pos in between if self.board[pos] != OPEN)
        return blockers <= 1 and self.board[middle] != OPEN

    def _move(self, source: tuple[int, int], dest: tuple[int, int]) -> int | None:
        self.board[source] = OPEN
        self.board[dest] = self.current
        self.selected = None
        self._mover = self.current
        if self._origin is None:
            self._origin = source
        self._last = dest
        self.moves += 1
        winner = self.board.winner()
        if winner is not None:
            self.reset()
        return winner

    def end_turn(self) -> None:
        """Finish the current player's turn and hand over to the next."""
        self.moves = 0
        self._stepped = False
        self._jumped = False
        self._origin = None
        self.selected = None
        self._mover = self.current
        self.current = next_player(self.current, self.players)
        self._elapsed = 0
        self.seconds_left = TURN_SECONDS

    def regret(self) -> bool:
        """Take back the moves made in this turn; return whether any were."""
        if self.current != self._mover:
            return False
        self.moves = 0
        self._stepped = False
        self._jumped = False
        self.selected = None
        if self._last is not None:
            self.board[self._last] = OPEN
        if self._origin is not None:
            self.board[self._origin] = self.current
        self._origin = None
        return True

    def tick(self) -> bool:
        """Advance the turn clock one second; return True on a timeout."""
        self._elapsed += 1
        self.seconds_left -= 1
        if self._elapsed == TURN_SECONDS:
            self.regret()
            self.end_turn()
            return True
        return False

    def reset(self) -> None:
        """Start over with the same number of players."""
        self.board.reset(self.players)
        self.current = FIRST_PLAYER
        self.selected = None
        self.moves = 0
        self.seconds_left = TURN_SECONDS
        self._elapsed = 0
        self._stepped = False
        self._jumped = False
        self._origin = None
        self._last = None
        self._mover = None