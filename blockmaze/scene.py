"""Scenes: ordered collections of game objects that update and draw together."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Type, TypeVar

from blockmaze.gameobject import GameObject

T = TypeVar("T", bound=GameObject)

DEFAULT_DRAW_ORDER = 100


@dataclass(eq=False)
class _Node:
    obj: GameObject
    order: int = DEFAULT_DRAW_ORDER
    initialized: bool = False


class Scene:
    """Owns game objects, starting, updating, drawing and removing them.

    When created with a manager, the scene registers itself as the
    manager's current scene unless ``register`` is false.
    """

    def __init__(self, manager: Optional[Any] = None, *, register: bool = True) -> None:
        self.manager = manager
        self._nodes: List[_Node] = []
        self._draw_nodes: List[_Node] = []
        self._needs_sort = False
        if manager is not None and register:
            manager.current_scene = self

    def update(self) -> None:
        """Start new objects, drop destroyed ones and update the rest.

        Objects added while updating are processed in the same pass.
        """
        index = 0
        # The list may grow while objects update, so walk it by position.
        while index < len(self._nodes):
            node = self._nodes[index]
            if not node.initialized:
                node.obj.start()
                node.initialized = True
            if node.obj.destroyed:
                self._remove_from_draw(node.obj)
                del self._nodes[index]
                continue
            node.obj.update()
            index += 1

    def draw(self, canvas: Any) -> None:
        """Draw every object in ascending draw order."""
        if self._needs_sort:
            self._draw_nodes = sorted(self._nodes, key=lambda node: node.order)
            self._needs_sort = False
        for node in list(self._draw_nodes):
            node.obj.draw(canvas)

    def push(self, obj: GameObject) -> GameObject:
        """Add an existing object to the scene and return it."""
        self._nodes.append(_Node(obj))
        self._needs_sort = True
        return obj

    def instantiate(self, cls: Type[T]) -> T:
        """Create ``cls()`` and add it to the scene."""
        obj = cls()
        self.push(obj)
        return obj

    def create_game_object(self, cls: Type[T]) -> T:
        """Create ``cls(scene)`` and add it to the scene."""
        obj = cls(self)
        self.push(obj)
        return obj

    def find_game_object(self, cls: Type[T]) -> Optional[T]:
        """Return the first object that is an instance of ``cls``, or None."""
        return next((n.obj for n in self._nodes if isinstance(n.obj, cls)), None)

    def find_game_objects(self, cls: Type[T]) -> List[T]:
        """Return every object that is an instance of ``cls``."""
        return [n.obj for n in self._nodes if isinstance(n.obj, cls)]

    def find_game_object_with_tag(self, cls: Type[T], tag: str) -> Optional[T]:
        """Return the first instance of ``cls`` carrying ``tag``, or None."""
        return next(
            (n.obj for n in self._nodes if isinstance(n.obj, cls) and n.obj.tag == tag),
            None,
        )

    def find_game_objects_with_tag(self, cls: Type[T], tag: str) -> List[T]:
        """Return every instance of ``cls`` carrying ``tag``."""
        return [
            n.obj for n in self._nodes if isinstance(n.obj, cls) and n.obj.tag == tag
        ]

    def set_draw_order(self, obj: GameObject, order: int) -> None:
        """Set the draw priority of ``obj``; lower values are drawn first."""
        for node in self._nodes:
            if node.obj is obj:
                node.order = order
                self._needs_sort = True

    def delete_game_object(self, obj: GameObject) -> None:
        """Remove ``obj`` from the scene; unknown objects are ignored."""
        for position, node in enumerate(self._nodes):
            if node.obj is obj:
                self._remove_from_draw(obj)
                del self._nodes[position]
                return

    def delete_all_game_objects(self) -> None:
        """Remove every object from the scene."""
        self._nodes.clear()
        self._draw_nodes.clear()

    def all_objects(self) -> List[GameObject]:
        """Return every object in the order it was added."""
        return [node.obj for node in self._nodes]

    def _remove_from_draw(self, obj: GameObject) -> None:
        for position, node in enumerate(self._draw_nodes):
            if node.obj is obj:
                del self._draw_nodes[position]
                return