"""Genome record, gene table, and the random/mutation operators."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from math import floor
from typing import Iterable, Optional, Sequence, Tuple, Union

from .errors import GeneOutOfRange, InvalidGenomeLength

logger = logging.getLogger(__name__)

GENOME_LENGTH = 14
GENE_MIN = 0
GENE_MAX = 20

DEPTH_GENE = 0
SPREAD_GENE = 1
LENGTH_GENE = 2
BRANCHING_GENE = 3
RED_GENE = 7
GREEN_GENE = 8
BLUE_GENE = 9
GRADIENT_GENE = 10
ASYMMETRY_GENE_BASE = 10
SEGMENT_COUNT_GENE = 12
SEGMENT_SPACING_GENE = 13

Color = Tuple[int, int, int]


def _channel(value: int) -> int:
    return floor((value / GENE_MAX) * 255)


@dataclass(frozen=True)
class Genome:
    """Fixed-length vector of heritable traits with named accessors."""

    genes: Tuple[int, ...]

    def __post_init__(self) -> None:
        genes = tuple(self.genes)
        if len(genes) != GENOME_LENGTH:
            raise InvalidGenomeLength(len(genes), GENOME_LENGTH)
        for index, value in enumerate(genes):
            if isinstance(value, bool) or not isinstance(value, int):
                raise GeneOutOfRange(index, value, GENE_MIN, GENE_MAX)
            if not GENE_MIN <= value <= GENE_MAX:
                raise GeneOutOfRange(index, value, GENE_MIN, GENE_MAX)
        object.__setattr__(self, "genes", genes)

    @classmethod
    def from_sequence(cls, values: Iterable[int]) -> "Genome":
        return cls(tuple(values))

    @classmethod
    def coerce(cls, value: Union["Genome", Sequence[int]]) -> "Genome":
        if isinstance(value, Genome):
            return value
        return cls.from_sequence(value)

    def __len__(self) -> int:
        return len(self.genes)

    def __getitem__(self, index: int) -> int:
        return self.genes[index]

    def to_list(self) -> list[int]:
        return list(self.genes)

    def replace(self, index: int, value: int) -> "Genome":
        genes = list(self.genes)
        genes[index] = value
        return Genome(tuple(genes))

    @property
    def depth_gene(self) -> int:
        return self.genes[DEPTH_GENE]

    @property
    def spread_gene(self) -> int:
        return self.genes[SPREAD_GENE]

    @property
    def length_gene(self) -> int:
        return self.genes[LENGTH_GENE]

    @property
    def branching_gene(self) -> int:
        return self.genes[BRANCHING_GENE]

    @property
    def red_gene(self) -> int:
        return self.genes[RED_GENE]

    @property
    def green_gene(self) -> int:
        return self.genes[GREEN_GENE]

    @property
    def blue_gene(self) -> int:
        return self.genes[BLUE_GENE]

    @property
    def gradient_gene(self) -> int:
        return self.genes[GRADIENT_GENE]

    @property
    def segment_count_gene(self) -> int:
        return self.genes[SEGMENT_COUNT_GENE]

    @property
    def segment_spacing_gene(self) -> int:
        return self.genes[SEGMENT_SPACING_GENE]

    def asymmetry_gene(self, depth: int) -> int:
        """Bias selector for a node at the given remaining depth."""

        return self.genes[ASYMMETRY_GENE_BASE + depth % 3]

    @property
    def recursion_depth(self) -> int:
        return self.depth_gene % 4 + 3

    @property
    def branch_count(self) -> int:
        return 2 + self.branching_gene % 3

    @property
    def segment_count(self) -> int:
        return self.segment_count_gene % 5 + 1

    @property
    def segment_spacing(self) -> int:
        return self.segment_spacing_gene % 20 + 20

    @property
    def gradient_growth(self) -> float:
        return 1 + self.gradient_gene / GENE_MAX

    def stroke_color(self, use_color: bool = True) -> Color:
        if not use_color:
            return (0, 0, 0)
        return (_channel(self.red_gene), _channel(self.green_gene), _channel(self.blue_gene))


class GenomeEngine:
    """Draws random genomes and applies single-locus point mutations."""

    def __init__(self, rng: Optional[random.Random] = None, seed: Optional[int] = None):
        self.rng = rng if rng is not None else random.Random(seed)

    def _draw_gene(self) -> int:
        return self.rng.randint(GENE_MIN, GENE_MAX)

    def randomize(self) -> Genome:
        return Genome(tuple(self._draw_gene() for _ in range(GENOME_LENGTH)))

    def mutate(self, genome: Union[Genome, Sequence[int]]) -> Genome:
        """Return a copy of ``genome`` with one random locus redrawn.

        The new value may coincide with the old one.
        """

        parent = Genome.coerce(genome)
        locus = self.rng.randrange(GENOME_LENGTH)
        value = self._draw_gene()
        logger.debug("mutating locus %d: %d -> %d", locus, parent[locus], value)
        return parent.replace(locus, value)
