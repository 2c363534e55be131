"""The maze stage: a fixed grid of blocks and a goal."""

from __future__ import annotations

from typing import Any, Optional, Tuple

from blockmaze.gameobject import GameObject

IMAGE_FILE = "data/image/parts.png"

WIDTH = 12
HEIGHT = 8
TILE_SIZE = 40
ORIGIN = 100

EMPTY = 0
BLOCK = 1
GOAL = 2

# Source rectangle in the parts image for each drawable tile.
TILE_SOURCES = {BLOCK: (0, 40), GOAL: (120, 0)}

MAP: Tuple[Tuple[int, ...], ...] = (
    (1, 0, 1, 0, 1, 0, 1, 0),
    (0, 1, 0, 1, 0, 1, 0, 1),
    (1, 0, 1, 0, 1, 0, 1, 0),
    (0, 1, 0, 1, 0, 1, 0, 1),
    (1, 0, 1, 0, 1, 2, 1, 0),
    (0, 1, 0, 1, 0, 1, 0, 1),
    (1, 0, 1, 0, 1, 0, 1, 0),
    (0, 1, 0, 1, 0, 1, 0, 1),
    (1, 0, 1, 0, 1, 0, 1, 0),
    (0, 1, 0, 1, 0, 1, 0, 1),
    (1, 0, 1, 0, 1, 0, 1, 0),
    (0, 1, 0, 1, 0, 1, 0, 1),
)


class Stage(GameObject):
    """Draws the maze grid; ``MAP[column][row]`` holds each tile."""

    def __init__(self, scene: Optional[Any] = None, image: Any = IMAGE_FILE) -> None:
        super().__init__(scene)
        self.image = image

    def tiles(self) -> Tuple[Tuple[int, ...], ...]:
        """Return the grid, indexed by column then row."""
        return MAP

    def draw(self, canvas: Any) -> None:
        """Draw every block and the goal onto ``canvas``."""
        for column, cells in enumerate(MAP):
            x = column * TILE_SIZE + ORIGIN
            for row, tile in enumerate(cells):
                source = TILE_SOURCES.get(tile)
                if source is None:
                    continue
                y = row * TILE_SIZE + ORIGIN
                canvas.draw_rect_graph(
                    x, y, source[0], source[1], TILE_SIZE, TILE_SIZE, self.image
                )