"""Window, event loop and scene switching for the reversi game."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import pygame

from reversi_board.scene import Scene
from reversi_board.scenes import StartScene

WINDOW_SIZE = (800, 600)
FRAME_RATE = 60
TITLE = "Reversi"
DEFAULT_ASSET_DIR = "assets"
DEFAULT_FONT = str(Path(DEFAULT_ASSET_DIR) / "微軟正黑體.ttf")


class _Session:
    """Holds the current scene and routes events and time to it."""

    def __init__(self, font: str | None, window_size: tuple[int, int], asset_dir: str | Path) -> None:
        self.font = font
        self.window_size = (int(window_size[0]), int(window_size[1]))
        self.asset_dir = asset_dir
        self.running = True
        self.scene: Scene = self._start_scene()

    def _start_scene(self) -> Scene:
        return StartScene(self.font, self.window_size, self.asset_dir)

    def handle(self, event: pygame.event.Event) -> None:
        """Close on quit, go home on the Home key, otherwise forward to the scene."""
        if event.type == pygame.QUIT:
            self.running = False
        if event.type == pygame.KEYDOWN and event.key == pygame.K_HOME:
            self.scene = self._start_scene()
            return
        self.scene.handle_event(event)

    def step(self, delta: float) -> None:
        """Advance the scene by ``delta`` seconds and switch if it asks to."""
        next_scene = self.scene.update(delta)
        if next_scene is not None:
            self.scene = next_scene


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return value


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="reversi", description="Play reversi.")
    parser.add_argument("--font", default=DEFAULT_FONT, help="font file used for all text")
    parser.add_argument("--assets", default=DEFAULT_ASSET_DIR, help="directory holding the images")
    parser.add_argument(
        "--frames",
        type=_positive_int,
        default=None,
        help="stop after this many frames",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until it is closed; return the exit status."""
    args = _parse_args(argv)
    pygame.display.init()
    pygame.font.init()
    try:
        surface = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(TITLE)

        try:
            pygame.font.Font(args.font, 20)
        except (OSError, pygame.error) as exc:
            print(f"cannot load font file {args.font}: {exc}", file=sys.stderr)
            return -1

        session = _Session(args.font, surface.get_size(), args.assets)
        clock = pygame.time.Clock()
        frames = 0
        while session.running:
            delta = clock.tick(FRAME_RATE) / 1000.0
            for event in pygame.event.get():
                session.handle(event)
            if not session.running:
                break
            session.step(delta)
            session.scene.draw(surface)
            pygame.display.flip()
            frames += 1
            if args.frames is not None and frames >= args.frames:
                break
        return 0
    finally:
        pygame.display.quit()