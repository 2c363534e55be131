"""Base class for objects that live in a scene."""

from __future__ import annotations

from typing import Any, Optional


class GameObject:
    """An updatable, drawable object owned by a scene.

    Subclasses override ``start``, ``update`` and ``draw``. Calling
    ``destroy`` marks the object for removal before the next update.
    """

    def __init__(
        self,
        scene: Optional[Any] = None,
        parent: Optional[GameObject] = None,
    ) -> None:
        self.scene = scene
        self.parent = parent
        self.tag = ""
        self.started = False
        self.frames = 0
        self._destroyed = False

    def start(self) -> None:
        """Called once before the first update; records that it ran."""
        self.started = True

    def update(self) -> None:
        """Called once per frame; counts the frames seen."""
        self.frames += 1

    def draw(self, canvas: Any) -> None:
        """Render the object onto ``canvas``."""

    def destroy(self) -> None:
        """Request removal of this object before the next update."""
        self._destroyed = True

    @property
    def destroyed(self) -> bool:
        """Whether removal has been requested."""
        return self._destroyed

    def is_tag(self, tag: str) -> bool:
        """Return True when the object's tag equals ``tag``."""
        return self.tag == tag