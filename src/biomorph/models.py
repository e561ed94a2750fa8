"""Structural primitives produced while expanding a biomorph."""

from __future__ import annotations

from dataclasses import dataclass
from math import cos, sin
from typing import Tuple

from .genome import Color

Point = Tuple[float, float]

LENGTH_DECAY = 0.7


@dataclass(frozen=True)
class BranchNode:
    """Recursion state for one branch of the figure."""

    x: float
    y: float
    angle: float
    length: float
    depth: int
    spread: float
    is_root: bool = False

    @property
    def origin(self) -> Point:
        return (self.x, self.y)

    def endpoint(self) -> Point:
        return (self.x + cos(self.angle) * self.length, self.y + sin(self.angle) * self.length)

    def child(self, angle: float) -> "BranchNode":
        x_end, y_end = self.endpoint()
        return BranchNode(
            x=x_end,
            y=y_end,
            angle=angle,
            length=self.length * LENGTH_DECAY,
            depth=self.depth - 1,
            spread=self.spread / 2,
            is_root=False,
        )


@dataclass(frozen=True)
class LineSegment:
    x0: float
    y0: float
    x1: float
    y1: float
    color: Color = (0, 0, 0)

    @property
    def length(self) -> float:
        return ((self.x1 - self.x0) ** 2 + (self.y1 - self.y0) ** 2) ** 0.5
