"""The player character."""

from __future__ import annotations

from typing import Any, Optional

from blockmaze.gameobject import GameObject

IMAGE_FILE = "data/image/chara.png"
SPRITE_SIZE = 40


class Player(GameObject):
    """Draws the character sprite at the top-left corner."""

    def __init__(self, scene: Optional[Any] = None, image: Any = IMAGE_FILE) -> None:
        super().__init__(scene)
        self.image = image
        self.x = 0
        self.y = 0

    def update(self) -> None:
        """Advance one frame; the player has no movement of its own yet."""
        super().update()

    def draw(self, canvas: Any) -> None:
        """Draw the first frame of the character sprite."""
        canvas.draw_rect_graph(
            self.x, self.y, 0, 0, SPRITE_SIZE, SPRITE_SIZE, self.image
        )