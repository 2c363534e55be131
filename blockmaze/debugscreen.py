"""An on-screen overlay for debug text, cleared after every frame."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from blockmaze.gameobject import GameObject

Color = Tuple[int, int, int]

WHITE: Color = (255, 255, 255)
MAX_MESSAGE_LENGTH = 2047


@dataclass(frozen=True)
class DebugLine:
    """A piece of text queued for the next frame."""

    x: int
    y: int
    color: Color
    text: str


class DebugScreen(GameObject):
    """Collects text during a frame and draws it once."""

    def __init__(self, scene: Optional[Any] = None) -> None:
        super().__init__(scene)
        self.color: Color = WHITE
        self._lines: List[DebugLine] = []

    @property
    def lines(self) -> Tuple[DebugLine, ...]:
        """Text queued for the next draw."""
        return tuple(self._lines)

    def set_color(self, r: int, g: int, b: int) -> None:
        """Set the color used by subsequent ``puts`` calls."""
        self.color = (r, g, b)

    def puts(self, x: int, y: int, text: str) -> None:
        """Queue ``text`` to be drawn at ``(x, y)`` in the current color."""
        self._lines.append(DebugLine(x, y, self.color, text))

    def draw(self, canvas: Any) -> None:
        """Draw every queued line, then forget them."""
        for line in self._lines:
            canvas.draw_string(line.x, line.y, line.text, line.color)
        self._lines.clear()


def _screen(scene: Any) -> DebugScreen:
    screen = scene.find_game_object(DebugScreen)
    if screen is None:
        raise LookupError("the scene holds no debug screen")
    return screen


def debug_puts(scene: Any, x: int, y: int, text: str) -> None:
    """Queue ``text`` on the debug screen found in ``scene``."""
    _screen(scene).puts(x, y, text)


def debug_printf(scene: Any, x: int, y: int, fmt: str, *args: Any) -> None:
    """Format ``fmt % args`` and queue it on the debug screen in ``scene``.

    Raises ValueError when the formatted text is longer than
    ``MAX_MESSAGE_LENGTH`` characters.
    """
    text = fmt % args if args else fmt
    if len(text) > MAX_MESSAGE_LENGTH:
        raise ValueError(
            f"debug text of {len(text)} characters exceeds {MAX_MESSAGE_LENGTH}"
        )
    _screen(scene).puts(x, y, text)


def debug_set_color(scene: Any, r: int, g: int, b: int) -> None:
    """Set the text color of the debug screen found in ``scene``."""
    _screen(scene).set_color(r, g, b)