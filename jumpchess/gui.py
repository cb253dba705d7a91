"""Tkinter front end: start menu, mode menu, player choice and the game board."""

from __future__ import annotations

import argparse
import math
import tkinter as tk
from tkinter import messagebox

from jumpchess.game import Game
from jumpchess.layout import (
    cell_at,
    cell_center,
    player_color,
    turn_message,
    visible_players,
    win_message,
)

TITLE = "跳棋"
MENU_SIZE = (500, 500)
GAME_SIZE = (1100, 1080)
BACKGROUND = "burlywood"
HOLE_RADIUS = 10
PIECE_RADIUS = 15
TICK_MS = 1000

_ROOT3 = math.sqrt(3)

Segment = tuple[int, int, int, int]


def _segment(x1: float, y1: float, x2: float, y2: float) -> Segment:
    return int(x1), int(y1), int(x2), int(y2)


def _row_y(row: int) -> float:
    return row * 30 * _ROOT3 + 15 * _ROOT3


def _left_diagonals() -> list[Segment]:
    r = _ROOT3
    lines = [_segment(60 + 30 * k, 135 * r + 30 * r * k, 60 + 60 * k, 135 * r) for k in range(4)]
    lines += [_segment(60 + 60 * k, 375 * r, 420 + 30 * k, 15 * r + 30 * r * k) for k in range(5)]
    lines += [_segment(330 + 30 * k, 405 * r + 30 * r * k, 600 + 60 * k, 135 * r) for k in range(4)]
    lines += [_segment(600 + 60 * k, 375 * r, 690 + 30 * k, 285 * r + 30 * r * k) for k in range(4)]
    return lines


def _right_diagonals() -> list[Segment]:
    r = _ROOT3
    lines = [_segment(60 + 60 * k, 375 * r, 60 + 30 * k, 375 * r - 30 * r * k) for k in range(4)]
    lines += [_segment(420 + 30 * k, 495 * r - 30 * r * k, 60 + 60 * k, 135 * r) for k in range(5)]
    lines += [_segment(600 + 60 * k, 375 * r, 330 + 30 * k, 105 * r - 30 * r * k) for k in range(4)]
    lines += [_segment(690 + 30 * k, 225 * r - 30 * r * k, 600 + 60 * k, 135 * r) for k in range(4)]
    return lines


def _horizontal_span(row: int) -> tuple[int, int]:
    if row < 4:
        return 420 - 30 * row, 420 + 30 * row
    if row < 9:
        k = row - 4
        return 60 + 30 * k, 780 - 30 * k
    if row < 13:
        k = row - 9
        return 150 - 30 * k, 690 + 30 * k
    k = row - 13
    return 330 + 30 * k, 510 - 30 * k


def _horizontals() -> list[Segment]:
    lines = []
    for row in range(17):
        left, right = _horizontal_span(row)
        y = _row_y(row)
        lines.append(_segment(left, y, right, y))
    return lines


def board_lines() -> list[Segment]:
    """Every line of the star board as (x1, y1, x2, y2) window coordinates."""
    return _left_diagonals() + _right_diagonals() + _horizontals()


def _holes() -> list[tuple[int, int]]:
    return [
        (x, y1)
        for x1, y1, x2, _ in _horizontals()
        for x in range(x1, x2 + 1, 60)
    ]


def player_count_choices() -> list[tuple[str, int]]:
    """Labels and player counts offered on the player choice screen."""
    return [
        ("双人对战", 2),
        ("三人对战", 3),
        ("四人对战", 4),
        ("六人对战", 6),
    ]


class App:
    """Window that moves between the menus and a running game."""

    def __init__(self, root: tk.Misc) -> None:
        self.root = root
        self.game: Game | None = None
        self._frame: tk.Frame | None = None
        self._canvas: tk.Canvas | None = None
        self._clock: tk.Label | None = None
        self._move_count: tk.Label | None = None
        self._timer: str | None = None
        root.title(TITLE)
        self.show_start()

    def _screen(self, size: tuple[int, int]) -> tk.Frame:
        if self._frame is not None:
            self._frame.destroy()
        width, height = size
        self.root.geometry(f"{width}x{height}")
        self._frame = tk.Frame(self.root, width=width, height=height)
        self._frame.pack(fill="both", expand=True)
        return self._frame

    @staticmethod
    def _button(frame, text, command, x, y, width=None, height=None) -> tk.Button:
        button = tk.Button(frame, text=text, command=command)
        button.place(x=x, y=y, width=width, height=height)
        return button

    def show_start(self) -> None:
        frame = self._screen(MENU_SIZE)
        self._button(frame, "开始", self.show_modes, 200, 350)
        self._button(frame, "结束", self.root.destroy, 200, 400)

    def show_modes(self) -> None:
        frame = self._screen(MENU_SIZE)
        self._button(frame, "人人对战", self.show_player_choice, 200, 100)
        self._button(frame, "人机对战", None, 200, 150)
        self._button(frame, "网络对战", None, 200, 200)
        self._button(frame, "返回", self.show_start, 200, 250)

    def show_player_choice(self) -> None:
        frame = self._screen(MENU_SIZE)
        y = 100
        for label, players in player_count_choices():
            self._button(frame, label, lambda n=players: self.start_game(n), 200, y)
            y += 50
        self._button(frame, "返回", self.show_modes, 200, y)

    def start_game(self, players: int) -> None:
        """Open the board for a new game with the given number of players."""
        self.game = Game(players)
        frame = self._screen(GAME_SIZE)
        width, height = GAME_SIZE
        self._canvas = tk.Canvas(frame, width=width, height=height, bg=BACKGROUND,
                                 highlightthickness=0)
        self._canvas.place(x=0, y=0)
        self._canvas.bind("<Button-1>", self._on_click)
        self._clock = tk.Label(frame, font=("Times New Roman", 30, "bold"))
        self._clock.place(x=800, y=80)
        self._move_count = tk.Label(frame, font=("Times New Roman", 30, "bold"))
        self._move_count.place(x=800, y=800)
        self._button(frame, "出棋", self._end_turn, 800, 200, 250, 150)
        self._button(frame, "悔棋", self._regret, 800, 400, 250, 150)
        self._button(frame, "返回", self.leave_game, 800, 600, 250, 150)
        self._redraw()
        self._schedule_tick()

    def leave_game(self) -> None:
        """Stop the clock, drop the game and go back to the player choice."""
        self._cancel_tick()
        self.game = None
        self._canvas = None
        self._clock = None
        self._move_count = None
        self.show_player_choice()

    def _schedule_tick(self) -> None:
        self._timer = self.root.after(TICK_MS, self._tick)

    def _cancel_tick(self) -> None:
        if self._timer is not None:
            self.root.after_cancel(self._timer)
            self._timer = None

    def _tick(self) -> None:
        self._timer = None
        if self.game is None:
            return
        self.game.tick()
        self._redraw()
        self._schedule_tick()

    def _end_turn(self) -> None:
        if self.game is not None:
            self.game.end_turn()
            self._redraw()

    def _regret(self) -> None:
        if self.game is not None:
            self.game.regret()
            self._redraw()

    def _on_click(self, event: tk.Event) -> None:
        if self.game is None:
            return
        cell = cell_at(event.x, event.y)
        if cell is None:
            return
        winner = self.game.click(*cell)
        if winner is not None:
            messagebox.showinfo("游戏结束", win_message(winner), parent=self.root)
            self.leave_game()
            return
        self._redraw()

    def _circle(self, x: float, y: float, radius: int, colour: str) -> None:
        self._canvas.create_oval(x - radius, y - radius, x + radius, y + radius,
                                 fill=colour, outline="black")

    def _redraw(self) -> None:
        game, canvas = self.game, self._canvas
        if game is None or canvas is None:
            return
        canvas.delete("all")
        for line in board_lines():
            canvas.create_line(*line)
        for x, y in _holes():
            self._circle(x, y, HOLE_RADIUS, "white")
        for player in sorted(visible_players(game.players)):
            colour = player_color(player)
            for i, j in game.board.pieces(player):
                x, y = cell_center(i, j)
                self._circle(x, y, PIECE_RADIUS, colour)
        canvas.create_text(100, 800, anchor="sw", text=turn_message(game.current),
                           fill="white", font=("Times New Roman", 30, "bold"))
        self._clock.configure(text=str(game.seconds_left))
        self._move_count.configure(text=str(game.moves))


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="jumpchess", description="Jump chess board game.")
    parser.parse_args(argv)
    root = tk.Tk()
    App(root)
    root.mainloop()
    return 0