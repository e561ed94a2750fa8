"""Parent/offspring selection step built on the genome operators."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from .config import PhenotypeConfig
from .genome import Genome, GenomeEngine
from .rendering import RenderSink, render

logger = logging.getLogger(__name__)

OFFSPRING_COUNT = 8


@dataclass(frozen=True)
class Biomorph:
    """A genome paired with the config it is drawn under."""

    genome: Genome
    config: PhenotypeConfig = field(default_factory=PhenotypeConfig)

    def render(self, sink: RenderSink) -> None:
        render(self.genome, self.config, sink)


def spawn_offspring(parent: Genome, engine: GenomeEngine, count: int = OFFSPRING_COUNT) -> list[Genome]:
    """Produce ``count`` independent single-locus mutants of ``parent``."""

    if count < 0:
        raise ValueError("offspring count must be non-negative")
    return [engine.mutate(parent) for _ in range(count)]


@dataclass
class Generation:
    """Current parent and its offspring, held by the host application."""

    engine: GenomeEngine
    config: PhenotypeConfig
    parent: Genome
    children: list[Genome] = field(default_factory=list)
    offspring_count: int = OFFSPRING_COUNT

    @classmethod
    def start(
        cls,
        engine: GenomeEngine,
        config: Optional[PhenotypeConfig] = None,
        parent: Optional[Genome] = None,
        offspring_count: int = OFFSPRING_COUNT,
    ) -> "Generation":
        generation = cls(
            engine=engine,
            config=config or PhenotypeConfig(),
            parent=parent if parent is not None else engine.randomize(),
            offspring_count=offspring_count,
        )
        generation.respawn()
        return generation

    @property
    def parent_biomorph(self) -> Biomorph:
        return Biomorph(self.parent, self.config)

    @property
    def child_biomorphs(self) -> list[Biomorph]:
        return [Biomorph(child, self.config) for child in self.children]

    def respawn(self) -> None:
        self.children = spawn_offspring(self.parent, self.engine, self.offspring_count)

    def select(self, index: int) -> Genome:
        if not 0 <= index < len(self.children):
            raise IndexError(f"no child at index {index}")
        self.parent = self.children[index]
        logger.debug("selected child %d as new parent", index)
        self.respawn()
        return self.parent

    def randomize(self) -> Genome:
        self.parent = self.engine.randomize()
        self.respawn()
        return self.parent

    def apply_config(self, config: PhenotypeConfig) -> Genome:
        self.config = config
        return self.randomize()
