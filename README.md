# reversi-board

Reversi (Othello) on an 8×8 board, played in an 800×600 pygame window.

## Installing

```
pip install .
```

## Playing

```
reversi-board
```

Options:

- `--font PATH`: font file used for all text (default `assets/微軟正黑體.ttf`). If it cannot be loaded, the command prints an error and exits with a non-zero status.
- `--assets DIR`: directory that holds `reversi_picture.png`, the start-screen picture (default `assets`).
- `--frames N`: stop after `N` frames.

The start screen has two buttons:

- **AI Opponent**: you play Black. White is played by the computer, which picks one of its legal moves at random.
- **1 vs 1**: two players take turns at the same machine.

Move the mouse over the board to see where a stone would go and which stones it would flip. Small dots mark the legal moves for the side to play. The last stone placed carries a red triangle. Left-click a cell to play there.

Each side has a clock that starts at 300 seconds and runs while it is that side's turn. When a clock reaches zero, that side loses. When the side to move has no legal move but the other side does, **PASS** is shown for 1.5 seconds and the turn goes to the other side. When neither side can move, the side with more stones wins, and equal counts give a draw.

Click the **Home** button, or press the Home key, to go back to the start screen. If the start-screen picture cannot be loaded, a plain coloured background is used instead.

## Using the pieces

The board rules work without a window:

```python
from reversi_board.board import Board, IllegalMoveError
from reversi_board.player import Player

board = Board(8)
print(board.legal_moves(Player.BLACK))   # [(row, col, flips), ...]
board.place(2, 3, Player.BLACK)          # returns the flipped stones
print(board.count(Player.BLACK), board.count(Player.WHITE))
print(board.winner_message())            # "Black wins!", "White wins!" or "Draw!"

try:
    board.place(0, 0, Player.WHITE)
except IllegalMoveError as exc:
    print(exc)
```

`Board` cells are read and written with `board[row, col]`, and iterating a board yields `((row, col), owner)` pairs. `Player.opponent()` gives the other side.

The screens are `StartScene`, `GameScene` and `WinScene` in `reversi_board.scenes`, all built on the `Scene` base class in `reversi_board.scene`. `GameScene` takes an optional `random.Random` for the computer's move choice.

## What it does not do

There is no network play: "1 vs 1" means two players sharing one window. The computer opponent does not look ahead; it plays a random legal move. Games cannot be saved or resumed.

## Running the tests

```
pip install .[test]
pytest
```