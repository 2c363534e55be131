"""Application lifecycle and the game's main loop."""

from __future__ import annotations

import argparse
from typing import Any, List, Optional, Tuple

import pygame

from blockmaze.clock import FrameClock
from blockmaze.resources import ResourceLoader
from blockmaze.scenemanager import SceneManager
from blockmaze.scenes import Keyboard, SceneFactory

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
WINDOW_MODE = True
WINDOW_NAME = "Sword Bout"
WINDOW_EXTEND = 1.0
FRAME_INTERVAL_MS = 16
FONT_SIZE = 20
BACKGROUND = (0, 0, 0)


class App:
    """Ties the frame clock to the scene manager."""

    def __init__(
        self,
        keyboard: Optional[Keyboard] = None,
        clock: Optional[FrameClock] = None,
    ) -> None:
        self.clock = clock if clock is not None else FrameClock()
        self.manager = SceneManager(SceneFactory(keyboard), clock=self.clock)
        self._exit = False

    def init(self) -> None:
        """Start timing and create the first scene."""
        self.clock.reset()
        self.manager.start()
        self._exit = False

    def update(self) -> None:
        """Measure the frame time and update the scenes."""
        self.clock.refresh()
        self.manager.update()

    def draw(self, canvas: Any) -> None:
        """Draw the scenes onto ``canvas``."""
        self.manager.draw(canvas)

    def release(self) -> None:
        """Discard every scene."""
        self.manager.release()

    def exit(self) -> None:
        """Ask the main loop to stop."""
        self._exit = True

    def is_exit(self) -> bool:
        """Whether an exit has been requested."""
        return self._exit


class PygameCanvas:
    """Draws images and text onto a pygame surface.

    Images given as file names are loaded through ``resources``.
    """

    def __init__(self, surface: Any, resources: Optional[ResourceLoader] = None) -> None:
        self.surface = surface
        self.resources = resources if resources is not None else ResourceLoader()
        self._font: Any = None

    def _image(self, image: Any) -> Any:
        if isinstance(image, str):
            return self.resources.load_graph(image)
        return image

    def draw_rect_graph(
        self, x: int, y: int, src_x: int, src_y: int, width: int, height: int, image: Any
    ) -> None:
        """Copy a rectangle of ``image`` to ``(x, y)``."""
        area = pygame.Rect(src_x, src_y, width, height)
        self.surface.blit(self._image(image), (x, y), area)

    def draw_string(self, x: int, y: int, text: str, color: Tuple[int, int, int]) -> None:
        """Draw ``text`` with its top-left corner at ``(x, y)``."""
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, FONT_SIZE)
        self.surface.blit(self._font.render(text, True, color), (x, y))


def _pressed(key: int) -> bool:
    return bool(pygame.key.get_pressed()[key])


def main(argv: Optional[List[str]] = None) -> int:
    """Open the game window and run until closed or Escape is pressed."""
    parser = argparse.ArgumentParser(prog="blockmaze", description="Run the block maze game.")
    parser.parse_args(argv)

    pygame.init()
    try:
        window_size = (round(SCREEN_WIDTH * WINDOW_EXTEND), round(SCREEN_HEIGHT * WINDOW_EXTEND))
        flags = 0 if WINDOW_MODE else pygame.FULLSCREEN
        window = pygame.display.set_mode(window_size, flags)
        pygame.display.set_caption(WINDOW_NAME)
        screen = window if WINDOW_EXTEND == 1.0 else pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
        canvas = PygameCanvas(screen)

        app = App(keyboard=_pressed)
        app.init()
        start = pygame.time.get_ticks()
        running = True
        while running:
            now = pygame.time.get_ticks()
            if now < start + FRAME_INTERVAL_MS:
                pygame.time.wait(1)
                continue
            start = now

            app.update()
            screen.fill(BACKGROUND)
            app.draw(canvas)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            if _pressed(pygame.K_ESCAPE) or app.is_exit():
                running = False
            if not running:
                break
            if screen is not window:
                pygame.transform.scale(screen, window_size, window)
            pygame.display.flip()
        app.release()
    finally:
        pygame.quit()
    return 0