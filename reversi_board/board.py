"""Reversi board state and move rules."""

from __future__ import annotations

from typing import Iterator

from reversi_board.player import Player

Position = tuple[int, int]

_DIRECTIONS: tuple[Position, ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)


class IllegalMoveError(ValueError):
    """Raised when a stone is placed where it flips nothing."""


class Board:
    """A square reversi board starting from the standard centre position."""

    def __init__(self, size: int = 8) -> None:
        if size < 1:
            raise ValueError("board size must be positive")
        self.size = size
        self._cells = [[Player.NONE] * size for _ in range(size)]
        if size >= 4:
            mid = size // 2
            self._cells[mid - 1][mid - 1] = Player.WHITE
            self._cells[mid - 1][mid] = Player.BLACK
            self._cells[mid][mid - 1] = Player.BLACK
            self._cells[mid][mid] = Player.WHITE

    def _inside(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def _check(self, pos: Position) -> Position:
        row, col = pos
        if not self._inside(row, col):
            raise IndexError(f"position {pos} is off the board")
        return row, col

    def __getitem__(self, pos: Position) -> Player:
        row, col = self._check(pos)
        return self._cells[row][col]

    def __setitem__(self, pos: Position, value: Player) -> None:
        row, col = self._check(pos)
        if not isinstance(value, Player):
            raise TypeError("board cells hold Player values")
        self._cells[row][col] = value

    def __iter__(self) -> Iterator[tuple[Position, Player]]:
        """Yield ((row, col), owner) for every cell in row-major order."""
        for row, line in enumerate(self._cells):
            for col, owner in enumerate(line):
                yield (row, col), owner

    def _flips_in_direction(
        self, row: int, col: int, dr: int, dc: int, player: Player
    ) -> list[Position]:
        opponent = player.opponent()
        run: list[Position] = []
        r, c = row + dr, col + dc
        while self._inside(r, c) and self._cells[r][c] is opponent:
            run.append((r, c))
            r += dr
            c += dc
        if run and self._inside(r, c) and self._cells[r][c] is player:
            return run
        return []

    def flippable_stones(self, row: int, col: int, player: Player) -> list[Position]:
        """Opponent stones that a stone of ``player`` at (row, col) would flip."""
        if not self._inside(row, col) or self._cells[row][col] is not Player.NONE:
            return []
        flips: list[Position] = []
        for dr, dc in _DIRECTIONS:
            flips.extend(self._flips_in_direction(row, col, dr, dc, player))
        return flips

    def legal_moves(self, player: Player) -> list[tuple[int, int, list[Position]]]:
        """Every legal move for ``player`` as (row, col, flips), row-major."""
        moves = []
        for (row, col), owner in self:
            if owner is Player.NONE:
                flips = self.flippable_stones(row, col, player)
                if flips:
                    moves.append((row, col, flips))
        return moves

    def has_legal_move(self, player: Player) -> bool:
        """Whether ``player`` can place a stone anywhere."""
        return any(
            owner is Player.NONE and self.flippable_stones(row, col, player)
            for (row, col), owner in self
        )

    def place(self, row: int, col: int, player: Player) -> list[Position]:
        """Place a stone, flip the captured stones and return them."""
        flips = self.flippable_stones(row, col, player)
        if not flips:
            raise IllegalMoveError(f"{player.name} cannot play at ({row}, {col})")
        self._cells[row][col] = player
        for r, c in flips:
            self._cells[r][c] = player
        return flips

    def count(self, player: Player) -> int:
        """Number of cells owned by ``player``."""
        return sum(line.count(player) for line in self._cells)

    def winner_message(self) -> str:
        """Result text decided by stone count."""
        black = self.count(Player.BLACK)
        white = self.count(Player.WHITE)
        if black > white:
            return "Black wins!"
        if white > black:
            return "White wins!"
        return "Draw!"