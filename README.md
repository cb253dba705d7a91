# jumpchess

Chinese checkers (star halma) played at one computer by two, three, four or
six people taking turns. The window is built with tkinter; the interface text
is in Chinese.

## Playing

Start the game window with:

    jumpchess

Press 开始 (start), then 人人对战 (person vs person), then pick the number of
players: 双人对战 (2), 三人对战 (3), 四人对战 (4) or 六人对战 (6). The red
player always moves first.

On your turn, click one of your pieces to select it, then click an empty point
to move it there. Clicking anything other than an empty point while a piece is
selected drops the selection. There are two kinds of move:

- **Step**: move to a neighbouring point. A step ends your movement for the
  turn.
- **Jump**: move in a straight line over a single piece sitting at the
  midpoint, landing the same distance beyond it. After a jump you may go on
  jumping with the same piece, but not step.

Once you have moved, only the piece you moved can be selected again that turn.

The buttons beside the board:

- 出棋 passes the turn to the next player.
- 悔棋 takes back this turn's movement, putting the piece back where it began
  the turn.
- 返回 leaves the game and returns to the player choice screen.

Each turn lasts 60 seconds; the countdown is shown beside the board. When it
runs out, the turn's movement is taken back and play passes on.

The first player to fill the opposite corner with all ten pieces wins. A
message announces the winner and the window returns to the player choice
screen.

## What it does not do

The mode menu shows 人机对战 (vs computer) and 网络对战 (network play) buttons,
but they do nothing: there is no computer opponent and no network play. Games
are not saved.

## Using it as a library

The rules do not depend on the window. You can play from code:

```python
from jumpchess.game import Game, next_player

game = Game(players=2)   # 2, 3, 4 or 6; anything else raises ValueError
game.click(9, 13)        # select one of red's (player 4) pieces
game.click(9, 12)        # step onto the empty point in front of it
game.end_turn()
print(game.current)      # 1
```

- `jumpchess.board.Board` holds the 17 x 17 grid indexed by `(column, row)`,
  its starting layout (`reset`), `is_open`, `is_off_board`, `pieces(player)`
  and `winner()`. Players are numbered 1 to 6; `OPEN` marks an empty point and
  `OFF` a cell outside the star.
- `jumpchess.game.Game` enforces turns, steps, jumps and take-backs:
  `click(x, y)` returns the winner when a move ends the game (and resets the
  board), `end_turn()`, `regret()`, `tick()` for the turn clock and `reset()`.
  `next_player(current, players)` gives the turn order.
- `jumpchess.layout` converts between grid cells and window positions
  (`cell_center`, `cell_at`) and supplies colours (`player_color`), the
  players drawn for each game size (`visible_players`) and the turn and win
  messages (`turn_message`, `win_message`).
- `jumpchess.gui` holds the window (`App`), the board drawing
  (`board_lines`) and the `main` entry point.

## Running the tests

    pip install -e ".[test]"
    pytest