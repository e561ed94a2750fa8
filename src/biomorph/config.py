"""Phenotype feature toggles."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from typing import Mapping

CAMEL_CASE_NAMES = {
    "useSegmentation": "use_segmentation",
    "useAsymmetry": "use_asymmetry",
    "useBranchingFactor": "use_branching_factor",
    "useColor": "use_color",
    "useDepth": "use_depth",
    "useAngleVariation": "use_angle_variation",
    "useLengthVariation": "use_length_variation",
    "useGradientEffect": "use_gradient_effect",
    "useAlternateSegmentAsymmetry": "use_alternate_segment_asymmetry",
}


@dataclass(frozen=True)
class PhenotypeConfig:
    """Which gene-derived effects are active during a render.

    ``use_depth``, ``use_angle_variation`` and ``use_length_variation`` are
    reserved toggles: they are carried and serialized but change nothing.
    """

    use_segmentation: bool = False
    use_asymmetry: bool = False
    use_branching_factor: bool = False
    use_color: bool = True
    use_depth: bool = True
    use_angle_variation: bool = True
    use_length_variation: bool = True
    use_gradient_effect: bool = False
    use_alternate_segment_asymmetry: bool = False

    @classmethod
    def from_mapping(cls, values: Mapping[str, bool]) -> "PhenotypeConfig":
        known = {field.name for field in fields(cls)}
        flags: dict[str, bool] = {}
        for key, value in values.items():
            name = CAMEL_CASE_NAMES.get(key, key)
            if name not in known:
                raise ValueError(f"unknown phenotype flag: {key}")
            if not isinstance(value, bool):
                raise ValueError(f"phenotype flag {key} must be a boolean, got {value!r}")
            flags[name] = value
        return cls(**flags)

    def with_flags(self, **changes: bool) -> "PhenotypeConfig":
        return replace(self, **changes)

    def to_dict(self) -> dict[str, bool]:
        return asdict(self)
