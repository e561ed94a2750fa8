"""Biomorph genome and phenotype toolkit."""

from .breeding import OFFSPRING_COUNT, Biomorph, Generation, spawn_offspring
from .config import PhenotypeConfig
from .errors import BiomorphError, GeneOutOfRange, InvalidGenomeLength, InvalidSurfaceDimensions
from .genome import GENE_MAX, GENE_MIN, GENOME_LENGTH, Genome, GenomeEngine
from .models import BranchNode, LineSegment
from .rendering import (
    PhenotypeRenderer,
    RenderSink,
    expected_segment_count,
    render,
    segment_count_bound,
)
from .serialization import biomorph_to_dict, generation_to_dict, genome_to_dict, segment_to_dict
from .sinks import RecordingSink, SvgSink

__all__ = [
    "Biomorph",
    "BiomorphError",
    "BranchNode",
    "GENE_MAX",
    "GENE_MIN",
    "GENOME_LENGTH",
    "GeneOutOfRange",
    "Generation",
    "Genome",
    "GenomeEngine",
    "InvalidGenomeLength",
    "InvalidSurfaceDimensions",
    "LineSegment",
    "OFFSPRING_COUNT",
    "PhenotypeConfig",
    "PhenotypeRenderer",
    "RecordingSink",
    "RenderSink",
    "SvgSink",
    "biomorph_to_dict",
    "expected_segment_count",
    "generation_to_dict",
    "genome_to_dict",
    "render",
    "segment_count_bound",
    "segment_to_dict",
    "spawn_offspring",
]
