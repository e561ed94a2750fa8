"""Interpret a genome under a config as a branching line figure."""

from __future__ import annotations

import logging
from math import isfinite, pi
from typing import Optional, Protocol, Sequence, Tuple, Union

from .config import PhenotypeConfig
from .errors import InvalidSurfaceDimensions
from .genome import Genome
from .models import BranchNode

logger = logging.getLogger(__name__)

ROOT_MARGIN = 10
BASE_LENGTH = 20
STRAIGHT_UP = -pi / 2
ASYMMETRY_BIAS = 0.5


class RenderSink(Protocol):
    """Anything that can take a stroke color and draw straight lines."""

    width: float
    height: float

    def set_stroke_color(self, r: int, g: int, b: int) -> None:
        ...

    def draw_line(self, x0: float, y0: float, x1: float, y1: float) -> None:
        ...


def validate_surface(width: float, height: float) -> Tuple[float, float]:
    if not (isfinite(width) and isfinite(height) and width > 0 and height > 0):
        raise InvalidSurfaceDimensions(width, height)
    return width, height


def segment_count_bound(depth: int, branches: int) -> int:
    """Number of lines one structure draws: the root stem is never split."""

    if depth <= 0:
        return 0
    return 1 + sum(branches**level for level in range(depth - 1))


def expected_segment_count(genome: Union[Genome, Sequence[int]], config: PhenotypeConfig) -> int:
    parsed = Genome.coerce(genome)
    branches = parsed.branch_count if config.use_branching_factor else 1
    per_structure = segment_count_bound(parsed.recursion_depth, branches)
    if config.use_segmentation:
        return per_structure * parsed.segment_count
    return per_structure


class PhenotypeRenderer:
    """Expands the branch tree of a genome and emits it to a sink.

    The renderer keeps no state between calls; a render either validates and
    draws the whole figure or raises before touching the sink.
    """

    def render(
        self,
        genome: Union[Genome, Sequence[int]],
        config: Optional[PhenotypeConfig],
        sink: RenderSink,
    ) -> None:
        parsed = Genome.coerce(genome)
        config = config or PhenotypeConfig()
        width, height = validate_surface(sink.width, sink.height)

        sink.set_stroke_color(*parsed.stroke_color(config.use_color))
        if config.use_segmentation:
            self._draw_segmented(parsed, config, sink, width, height)
        else:
            self._draw_structure(parsed, config, sink, width / 2, height - ROOT_MARGIN, height)

    def _draw_segmented(
        self,
        genome: Genome,
        config: PhenotypeConfig,
        sink: RenderSink,
        width: float,
        height: float,
    ) -> None:
        count = genome.segment_count
        spacing = genome.segment_spacing
        logger.debug("drawing %d segments spaced %dpx apart", count, spacing)

        gradient_factor = 1.0
        for index in range(count):
            y_start = height - ROOT_MARGIN - index * spacing
            if config.use_alternate_segment_asymmetry and index % 2 == 1:
                gradient_factor = 1 / gradient_factor
            self._draw_structure(genome, config, sink, width / 2, y_start, height, gradient_factor)
            if config.use_gradient_effect:
                gradient_factor *= genome.gradient_growth

    def _draw_structure(
        self,
        genome: Genome,
        config: PhenotypeConfig,
        sink: RenderSink,
        x_start: float,
        y_start: float,
        height: float,
        gradient_factor: float = 1.0,
    ) -> None:
        root = BranchNode(
            x=x_start,
            y=y_start,
            angle=STRAIGHT_UP,
            length=(genome.length_gene % height) / 10 + BASE_LENGTH,
            depth=genome.recursion_depth,
            spread=(genome.spread_gene / 20) * pi * gradient_factor,
            is_root=True,
        )
        self._expand(root, genome, config, sink)

    def _expand(self, node: BranchNode, genome: Genome, config: PhenotypeConfig, sink: RenderSink) -> None:
        if node.depth == 0:
            return

        x_end, y_end = node.endpoint()
        sink.draw_line(node.x, node.y, x_end, y_end)

        if node.depth <= 1:
            return

        for angle in self._child_angles(node, genome, config):
            self._expand(node.child(angle), genome, config, sink)

    def _child_angles(self, node: BranchNode, genome: Genome, config: PhenotypeConfig) -> list[float]:
        if node.is_root or not config.use_branching_factor:
            branches = 1
        else:
            branches = genome.branch_count

        if branches > 1:
            increment = node.spread / (branches - 1)
            angles = [node.angle - node.spread / 2 + increment * index for index in range(branches)]
        else:
            angles = [node.angle]

        if not node.is_root and config.use_asymmetry:
            bias = -ASYMMETRY_BIAS if genome.asymmetry_gene(node.depth) % 2 == 0 else ASYMMETRY_BIAS
            angles = [angle + bias * (node.spread / 4) for angle in angles]
        return angles


_DEFAULT_RENDERER = PhenotypeRenderer()


def render(
    genome: Union[Genome, Sequence[int]],
    config: Optional[PhenotypeConfig],
    sink: RenderSink,
) -> None:
    _DEFAULT_RENDERER.render(genome, config, sink)
