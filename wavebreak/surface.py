"""
Drawing Surface
================
The 2D drawing interface the simulation renders through.

Coordinates passed to the primitives are in the current local frame;
`transformed()` pushes a translate + rotate onto the frame stack for
oriented drawing. Subclasses implement the primitives in world units
via `to_world()`.
"""

import math
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, List, Tuple

Point = Tuple[float, float]


@dataclass(frozen=True)
class TextStyle:
    """How a string is drawn: color, size ('normal' or 'large'), alignment."""
    color: int = 255
    size: str = 'normal'
    align: str = 'center'


@dataclass(frozen=True)
class Transform:
    """Local-to-world mapping: rotate by `angle`, then translate."""
    dx: float = 0.0
    dy: float = 0.0
    angle: float = 0.0

    def apply(self, x: float, y: float) -> Point:
        cos_a = math.cos(self.angle)
        sin_a = math.sin(self.angle)
        return (self.dx + x * cos_a - y * sin_a,
                self.dy + x * sin_a + y * cos_a)

    def then(self, dx: float, dy: float, angle: float) -> 'Transform':
        """Compose a child frame translated by (dx, dy) and rotated by angle."""
        ox, oy = self.apply(dx, dy)
        return Transform(ox, oy, self.angle + angle)


class DrawingSurface:
    """Base class for render targets used by the draw pass."""

    def __init__(self):
        self._frames: List[Transform] = [Transform()]

    @property
    def transform(self) -> Transform:
        return self._frames[-1]

    @contextmanager
    def transformed(self, dx: float = 0.0, dy: float = 0.0,
                    angle: float = 0.0) -> Iterator['DrawingSurface']:
        """Scoped translate + rotate; restored when the block exits."""
        self._frames.append(self.transform.then(dx, dy, angle))
        try:
            yield self
        finally:
            self._frames.pop()

    def to_world(self, x: float, y: float) -> Point:
        return self.transform.apply(x, y)

    def clear(self, width: float, height: float) -> None:
        raise NotImplementedError

    def draw_circle(self, center: Point, radius: float, color: int,
                    filled: bool = True) -> None:
        raise NotImplementedError

    def draw_rect(self, origin: Point, size: Point, color: int) -> None:
        raise NotImplementedError

    def draw_text(self, text: str, position: Point,
                  style: TextStyle = TextStyle()) -> None:
        raise NotImplementedError
