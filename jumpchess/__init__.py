"""Chinese checkers for two to six players: board, rules, layout and a tkinter window."""

__version__ = "0.1.0"
__all__ = ["board", "game", "gui", "layout"]