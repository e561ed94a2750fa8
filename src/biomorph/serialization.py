"""Serialization helpers for API and UI clients."""

from __future__ import annotations

from .breeding import Biomorph, Generation
from .config import PhenotypeConfig
from .genome import Genome
from .models import LineSegment


def genome_to_dict(genome: Genome, use_color: bool = True) -> dict[str, object]:
    return {
        "genes": genome.to_list(),
        "depth": genome.recursion_depth,
        "branch_count": genome.branch_count,
        "segment_count": genome.segment_count,
        "segment_spacing": genome.segment_spacing,
        "color": list(genome.stroke_color(use_color)),
    }


def segment_to_dict(segment: LineSegment) -> dict[str, object]:
    return {
        "x0": segment.x0,
        "y0": segment.y0,
        "x1": segment.x1,
        "y1": segment.y1,
        "color": list(segment.color),
    }


def config_to_dict(config: PhenotypeConfig) -> dict[str, bool]:
    return config.to_dict()


def biomorph_to_dict(biomorph: Biomorph) -> dict[str, object]:
    return {
        "genome": genome_to_dict(biomorph.genome, biomorph.config.use_color),
        "config": config_to_dict(biomorph.config),
    }


def generation_to_dict(generation: Generation) -> dict[str, object]:
    return {
        "config": config_to_dict(generation.config),
        "parent": genome_to_dict(generation.parent, generation.config.use_color),
        "children": [genome_to_dict(child, generation.config.use_color) for child in generation.children],
    }
