"""The game's scenes and the factory that builds them by name."""

from __future__ import annotations

from typing import Any, Callable, Optional

import pygame

from blockmaze.debugscreen import WHITE, DebugScreen
from blockmaze.player import Player
from blockmaze.scene import Scene
from blockmaze.stage import Stage

Keyboard = Callable[[int], bool]

DEBUG_DRAW_ORDER = 10000

_NO_KEYS: frozenset = frozenset()
_no_keys: Keyboard = _NO_KEYS.__contains__


class BootScene(Scene):
    """Sets up the shared debug overlay, then moves on to the title."""

    def __init__(self, manager: Any) -> None:
        super().__init__(manager)
        common = manager.common_scene
        screen = common.create_game_object(DebugScreen)
        common.set_draw_order(screen, DEBUG_DRAW_ORDER)

    def update(self) -> None:
        """Request the title scene."""
        self.manager.change_scene("TitleScene")

    def draw(self, canvas: Any) -> None:
        """The boot scene shows nothing."""


class TitleScene(Scene):
    """Shows the title; the P key starts play."""

    def __init__(self, manager: Any, keyboard: Optional[Keyboard] = None) -> None:
        super().__init__(manager)
        self.keyboard = keyboard or _no_keys

    def update(self) -> None:
        if self.keyboard(pygame.K_p):
            self.manager.change_scene("PlayScene")
        super().update()

    def draw(self, canvas: Any) -> None:
        super().draw(canvas)
        canvas.draw_string(0, 0, "TITLE SCENE", WHITE)
        canvas.draw_string(100, 400, "Push [P]Key To Play", WHITE)


class PlayScene(Scene):
    """Holds the stage and the player; the T key returns to the title."""

    def __init__(self, manager: Any, keyboard: Optional[Keyboard] = None) -> None:
        super().__init__(manager)
        self.keyboard = keyboard or _no_keys
        self.instantiate(Stage)
        self.instantiate(Player)

    def update(self) -> None:
        if self.keyboard(pygame.K_t):
            self.manager.change_scene("TitleScene")
        super().update()

    def draw(self, canvas: Any) -> None:
        super().draw(canvas)
        canvas.draw_string(0, 0, "PLAY SCENE", WHITE)
        canvas.draw_string(100, 400, "Push [T]Key To Title", WHITE)


class SceneFactory:
    """Builds scenes for a scene manager from their names."""

    def __init__(self, keyboard: Optional[Keyboard] = None) -> None:
        self.keyboard = keyboard or _no_keys

    def create_first(self, manager: Any) -> Scene:
        """Build the scene that runs first."""
        return BootScene(manager)

    def create(self, manager: Any, name: str) -> Scene:
        """Build the scene called ``name``; unknown names raise ValueError."""
        if name == "TitleScene":
            return TitleScene(manager, self.keyboard)
        if name == "PlayScene":
            return PlayScene(manager, self.keyboard)
        raise ValueError(f"there is no next scene: {name}")