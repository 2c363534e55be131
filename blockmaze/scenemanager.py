"""Switching between named scenes, plus a scene shared by all of them."""

from __future__ import annotations

from typing import Any, Optional, Protocol

from blockmaze.scene import Scene


class SceneFactoryProtocol(Protocol):
    def create_first(self, manager: "SceneManager") -> Scene: ...

    def create(self, manager: "SceneManager", name: str) -> Scene: ...


class SceneManager:
    """Runs the current scene and a common scene.

    ``change_scene`` only records the request; the switch happens at the
    start of the next ``update``.
    """

    def __init__(self, factory: SceneFactoryProtocol, clock: Optional[Any] = None) -> None:
        self.factory = factory
        self.clock = clock
        self.current_scene: Optional[Scene] = None
        self.common_scene: Optional[Scene] = None
        self._current_name = ""
        self._next_name = ""

    @property
    def current_name(self) -> str:
        """The name of the scene that is running."""
        return self._current_name

    def start(self) -> None:
        """Create the common scene and the first scene."""
        self._next_name = ""
        self._current_name = ""
        self.common_scene = Scene(self, register=False)
        self.current_scene = self.factory.create_first(self)
        if self.clock is not None:
            self.clock.reset()

    def _require_started(self) -> Scene:
        if self.common_scene is None:
            raise RuntimeError("scene manager has not been started")
        return self.common_scene

    def update(self) -> None:
        """Apply a pending scene change, then update both scenes."""
        common = self._require_started()
        if self._next_name != self._current_name:
            if self.current_scene is not None:
                self.current_scene.delete_all_game_objects()
                self.current_scene = None
            self._current_name = self._next_name
            self.current_scene = self.factory.create(self, self._next_name)
        if self.current_scene is not None:
            self.current_scene.update()
        common.update()

    def draw(self, canvas: Any) -> None:
        """Draw the current scene, then the common scene over it."""
        common = self._require_started()
        if self.current_scene is not None:
            self.current_scene.draw(canvas)
        common.draw(canvas)

    def release(self) -> None:
        """Discard the current and common scenes."""
        if self.current_scene is not None:
            self.current_scene.delete_all_game_objects()
            self.current_scene = None
        if self.common_scene is not None:
            self.common_scene.delete_all_game_objects()
            self.common_scene = None

    def change_scene(self, name: str) -> None:
        """Request a switch to the scene called ``name`` on the next update."""
        self._next_name = name