"""Concrete render sinks: an in-memory recorder and an SVG writer."""

from __future__ import annotations

from dataclasses import dataclass, field

from .genome import Color
from .models import LineSegment


@dataclass
class RecordingSink:
    """Keeps every emitted command so callers can inspect or replay them."""

    width: float
    height: float
    color: Color = (0, 0, 0)
    color_calls: list[Color] = field(default_factory=list)
    segments: list[LineSegment] = field(default_factory=list)

    def set_stroke_color(self, r: int, g: int, b: int) -> None:
        self.color = (r, g, b)
        self.color_calls.append(self.color)

    def draw_line(self, x0: float, y0: float, x1: float, y1: float) -> None:
        self.segments.append(LineSegment(x0, y0, x1, y1, self.color))

    @property
    def call_count(self) -> int:
        return len(self.color_calls) + len(self.segments)


def _fmt(value: float, precision: int) -> str:
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text in {"", "-0"} else text


@dataclass
class SvgSink(RecordingSink):
    """Records lines and writes them out as a standalone SVG document."""

    stroke_width: float = 1.0
    precision: int = 2

    def to_svg(self) -> str:
        lines = [
            '<svg xmlns="http://www.w3.org/2000/svg" version="1.1" '
            f'width="{_fmt(self.width, self.precision)}" height="{_fmt(self.height, self.precision)}" '
            f'viewBox="0 0 {_fmt(self.width, self.precision)} {_fmt(self.height, self.precision)}">'
        ]
        for segment in self.segments:
            r, g, b = segment.color
            lines.append(
                f'  <line x1="{_fmt(segment.x0, self.precision)}" y1="{_fmt(segment.y0, self.precision)}" '
                f'x2="{_fmt(segment.x1, self.precision)}" y2="{_fmt(segment.y1, self.precision)}" '
                f'stroke="rgb({r}, {g}, {b})" stroke-width="{_fmt(self.stroke_width, self.precision)}" />'
            )
        lines.append("</svg>")
        return "\n".join(lines) + "\n"
