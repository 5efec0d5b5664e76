"""The start screen, the game board screen and the result screen."""

from __future__ import annotations

import logging
import random
from enum import Enum
from functools import lru_cache
from pathlib import Path

import pygame

from reversi_board.board import Board, Position
from reversi_board.button import Button
from reversi_board.player import Player
from reversi_board.scene import Scene

logger = logging.getLogger(__name__)

Color = tuple[int, ...]
Size = tuple[int, int]

BOARD_SIZE = 8
TURN_SECONDS = 300.0
PASS_SECONDS = 1.5
BOARD_MARGIN = 10

_GAME_BACKGROUND: Color = (173, 176, 168)
_CELL_COLOR: Color = (220, 184, 135)
_BLACK_GHOST: Color = (0, 0, 0, 128)
_WHITE_GHOST: Color = (255, 255, 255, 200)
_BLACK: Color = (0, 0, 0)
_WHITE: Color = (255, 255, 255)
_RED: Color = (255, 0, 0)
_START_BACKGROUND: Color = (200, 220, 255)
_START_BUTTON_COLOR: Color = (222, 184, 135)
_WIN_BACKGROUND: Color = (200, 200, 200)
_HOME_BUTTON_COLOR: Color = (84, 84, 84)


@lru_cache(maxsize=None)
def _font(path: str | None, size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(path, size)


def _render(font: str | None, size: int, text: str, color: Color) -> pygame.Surface:
    return _font(font, size).render(text, True, color)


def _draw_circle(
    surface: pygame.Surface, color: Color, center: tuple[float, float], radius: float
) -> None:
    """Draw a filled circle, blending it when the colour carries transparency."""
    r = max(1, round(radius))
    if len(color) == 4 and color[3] < 255:
        layer = pygame.Surface((2 * r + 2, 2 * r + 2), pygame.SRCALPHA)
        pygame.draw.circle(layer, color, (r + 1, r + 1), r)
        surface.blit(layer, (round(center[0]) - r - 1, round(center[1]) - r - 1))
    else:
        pygame.draw.circle(surface, color[:3], (round(center[0]), round(center[1])), r)


class GameScene(Scene):
    """An 8x8 reversi game with per-side clocks and an optional random AI for white."""

    def __init__(
        self,
        font: str | None,
        window_size: Size,
        use_ai_opponent: bool,
        rng: random.Random | None = None,
    ) -> None:
        self.font = font
        self.window_size = (int(window_size[0]), int(window_size[1]))
        self.use_ai_opponent = use_ai_opponent
        self.rng = rng if rng is not None else random.Random()

        width, height = self.window_size
        self.cell_size = (width / 2.0) / BOARD_SIZE
        self.board = Board(BOARD_SIZE)
        self.current_player = Player.BLACK
        self.remaining_time_black = TURN_SECONDS
        self.remaining_time_white = TURN_SECONDS
        self.black_timer_text = ""
        self.white_timer_text = ""

        self.preview: Position | None = None
        self.preview_flips: list[Position] = []
        self.is_active = True
        self.show_pass = False
        self.pass_active = False
        self._pass_elapsed = 0.0
        self.last_move: Position | None = None
        self.return_home = False

        self.home_button = Button(font, "Home", 30)
        self.home_button.set_size((100.0, 70.0))
        self.home_button.set_position((width - 110.0, height - 80.0))
        self.home_button.set_background_color(_HOME_BUTTON_COLOR)
        self.home_button.set_text_color(_WHITE)

    # -- geometry -----------------------------------------------------------

    def _cell_at(self, pos: tuple[float, float]) -> Position | None:
        """Map a pixel to a board cell; None outside the board area."""
        x, y = float(pos[0]), float(pos[1])
        extent = BOARD_MARGIN + BOARD_SIZE * self.cell_size
        if not (BOARD_MARGIN <= x <= extent and BOARD_MARGIN <= y <= extent):
            return None
        return int((y - BOARD_MARGIN) / self.cell_size), int((x - BOARD_MARGIN) / self.cell_size)

    def _on_board(self, pos: tuple[float, float]) -> bool:
        return self._cell_at(pos) is not None

    def _cell_center(self, row: int, col: int) -> tuple[float, float]:
        half = (self.cell_size - 2) / 2.0
        return (
            col * self.cell_size + BOARD_MARGIN + half,
            row * self.cell_size + BOARD_MARGIN + half,
        )

    # -- state changes ------------------------------------------------------

    def _clear_preview(self) -> None:
        self.preview = None
        self.preview_flips = []

    def _switch_player(self) -> None:
        self.current_player = self.current_player.opponent()
        self._clear_preview()

    def _play(self, row: int, col: int) -> None:
        self.board.place(row, col, self.current_player)
        self.last_move = (row, col)
        self._switch_player()

    def _start_pass(self) -> None:
        if not self.pass_active:
            self.show_pass = True
            self.pass_active = True
            self._pass_elapsed = 0.0
            self._switch_player()

    def _result(self, message: str) -> WinScene:
        self.is_active = False
        return WinScene(self.font, self.window_size, message)

    def _pass_or_finish(self) -> Scene | None:
        if self.board.has_legal_move(self.current_player.opponent()):
            self._start_pass()
            return None
        return self._result(self.board.winner_message())

    # -- Scene interface ----------------------------------------------------

    def handle_event(self, event: pygame.event.Event) -> None:
        left_click = event.type == pygame.MOUSEBUTTONDOWN and event.button == 1
        if left_click and self.home_button.contains(event.pos):
            self.return_home = True

        if not self.is_active:
            return

        if event.type == pygame.MOUSEMOTION:
            self._update_preview(event.pos)

        if left_click:
            if self.use_ai_opponent and self.current_player is Player.WHITE:
                return
            cell = self._cell_at(event.pos)
            if cell is None:
                return
            row, col = cell
            if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
                return
            self.show_pass = False
            self.pass_active = False
            if self.board[row, col] is Player.NONE and self.board.flippable_stones(
                row, col, self.current_player
            ):
                self._play(row, col)

    def _update_preview(self, pos: tuple[float, float]) -> None:
        cell = self._cell_at(pos)
        if cell is None:
            self._clear_preview()
            return
        row, col = cell
        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            return
        flips = (
            self.board.flippable_stones(row, col, self.current_player)
            if self.board[row, col] is Player.NONE
            else []
        )
        if flips:
            self.preview = (row, col)
            self.preview_flips = flips
        else:
            self._clear_preview()

    def update(self, delta: float) -> Scene | None:
        if self.return_home:
            return StartScene(self.font, self.window_size)

        if self.pass_active:
            self._pass_elapsed += delta
            if self._pass_elapsed < PASS_SECONDS:
                return None
            self.show_pass = False
            self.pass_active = False
        elif self.current_player is Player.BLACK:
            self.remaining_time_black -= delta
            if self.remaining_time_black <= 0:
                self.remaining_time_black = 0.0
                return self._result("Time elapsed, White wins!")
        else:
            self.remaining_time_white -= delta
            if self.remaining_time_white <= 0:
                self.remaining_time_white = 0.0
                return self._result("Time elapsed, Black wins!")

        self.black_timer_text = f"Black Timer: {int(self.remaining_time_black)}s"
        self.white_timer_text = f"White Timer: {int(self.remaining_time_white)}s"

        if self.use_ai_opponent and self.current_player is Player.WHITE:
            moves = self.board.legal_moves(self.current_player)
            if not moves:
                return self._pass_or_finish()
            row, col, _ = moves[self.rng.randrange(len(moves))]
            self._play(row, col)
        elif self.board.has_legal_move(self.current_player):
            self.show_pass = False
            self.pass_active = False
        else:
            return self._pass_or_finish()
        return None

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(_GAME_BACKGROUND)
        inner = self.cell_size - 2
        for (row, col), _ in self.board:
            rect = pygame.Rect(
                round(col * self.cell_size + BOARD_MARGIN),
                round(row * self.cell_size + BOARD_MARGIN),
                round(inner),
                round(inner),
            )
            pygame.draw.rect(surface, _CELL_COLOR, rect)

        ghost = _BLACK_GHOST if self.current_player is Player.BLACK else _WHITE_GHOST
        for row, col, _ in self.board.legal_moves(self.current_player):
            _draw_circle(surface, ghost, self._cell_center(row, col), self.cell_size / 6.0)

        piece_radius = self.cell_size / 2.0 - 4
        for (row, col), owner in self.board:
            if owner is not Player.NONE:
                color = _BLACK if owner is Player.BLACK else _WHITE
                _draw_circle(surface, color, self._cell_center(row, col), piece_radius)

        if self.preview is not None:
            for row, col in [self.preview, *self.preview_flips]:
                _draw_circle(surface, ghost, self._cell_center(row, col), piece_radius)

        if self.last_move is not None:
            cx, cy = self._cell_center(*self.last_move)
            half = self.cell_size / 6.0
            pygame.draw.polygon(
                surface,
                _RED,
                [(cx, cy - half), (cx - half, cy + half), (cx + half, cy + half)],
            )

        text_x = round(self.window_size[0] / 2.0 + 20)
        if self.black_timer_text:
            surface.blit(_render(self.font, 20, self.black_timer_text, _BLACK), (text_x, 50))
        if self.white_timer_text:
            surface.blit(_render(self.font, 20, self.white_timer_text, _BLACK), (text_x, 100))
        if self.show_pass:
            surface.blit(_render(self.font, 24, "PASS", _RED), (text_x, 140))

        self.home_button.draw(surface)


class _Mode(Enum):
    NONE = "none"
    AI = "ai"
    ONLINE = "online"


class StartScene(Scene):
    """Title screen offering a game against the AI or a two-player game."""

    def __init__(
        self,
        font: str | None,
        window_size: Size,
        asset_dir: str | Path = "assets",
    ) -> None:
        self.font = font
        self.window_size = (int(window_size[0]), int(window_size[1]))
        self.selected_mode = _Mode.NONE
        self.background_image = self._load_background(Path(asset_dir))

        button_size = (200.0, 60.0)
        self.ai_button = Button(font, "AI Opponent")
        self.online_button = Button(font, "1 vs 1")
        for button in (self.ai_button, self.online_button):
            button.set_size(button_size)
            button.set_background_color(_START_BUTTON_COLOR)
            button.set_text_color(_BLACK)

        spacing = 20.0
        total_width = button_size[0] * 2 + spacing
        start_x = (self.window_size[0] - total_width) / 2.0
        pos_y = self.window_size[1] - button_size[1] - 50.0
        self.ai_button.set_position((start_x, pos_y))
        self.online_button.set_position((start_x + button_size[0] + spacing, pos_y))

    def _load_background(self, asset_dir: Path) -> pygame.Surface | None:
        path = asset_dir / "reversi_picture.png"
        try:
            image = pygame.image.load(str(path))
        except (pygame.error, OSError):
            logger.warning("Error loading %s", path)
            return None
        return pygame.transform.scale(image, self.window_size)

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type != pygame.MOUSEBUTTONDOWN:
            return
        if self.ai_button.contains(event.pos):
            self.selected_mode = _Mode.AI
        elif self.online_button.contains(event.pos):
            self.selected_mode = _Mode.ONLINE

    def update(self, delta: float) -> Scene | None:
        if self.selected_mode is _Mode.NONE:
            return None
        return GameScene(self.font, (800, 600), self.selected_mode is _Mode.AI)

    def draw(self, surface: pygame.Surface) -> None:
        if self.background_image is not None:
            surface.blit(self.background_image, (0, 0))
        else:
            surface.fill(_START_BACKGROUND)
        self.ai_button.draw(surface)
        self.online_button.draw(surface)


class WinScene(Scene):
    """Shows the result and offers a way back to the start screen."""

    def __init__(self, font: str | None, window_size: Size, winner: str) -> None:
        self.font = font
        self.window_size = (int(window_size[0]), int(window_size[1]))
        self.winner = winner
        self.return_home = False
        width, height = self.window_size
        self.home_button = Button(font, "Home", 30)
        self.home_button.set_position((width / 2.0 - 75, height / 2.0 + 20))

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.MOUSEBUTTONDOWN and self.home_button.contains(event.pos):
            self.return_home = True
        if event.type == pygame.KEYDOWN and event.key == pygame.K_HOME:
            self.return_home = True

    def update(self, delta: float) -> Scene | None:
        if self.return_home:
            return StartScene(self.font, self.window_size)
        return None

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(_WIN_BACKGROUND)
        width, height = self.window_size
        text = _render(self.font, 30, self.winner, _RED)
        surface.blit(text, text.get_rect(center=(round(width / 2.0), round(height / 2.0 - 50))))
        self.home_button.draw(surface)