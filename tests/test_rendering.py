from __future__ import annotations

import itertools
from math import atan2, inf, isfinite, nan, pi

import pytest

from biomorph import (
    GeneOutOfRange,
    GenomeEngine,
    InvalidGenomeLength,
    InvalidSurfaceDimensions,
    LineSegment,
    PhenotypeConfig,
    RecordingSink,
    expected_segment_count,
    render,
    segment_count_bound,
)

ZERO_GENOME = [0] * 14


def _render(genes, config=None, width=200, height=200) -> RecordingSink:
    sink = RecordingSink(width=width, height=height)
    render(genes, config or PhenotypeConfig(), sink)
    return sink


def _angle(segment: LineSegment) -> float:
    return atan2(segment.y1 - segment.y0, segment.x1 - segment.x0)


def test_zero_genome_draws_single_vertical_stroke() -> None:
    sink = _render(ZERO_GENOME)

    assert sink.color_calls == [(0, 0, 0)]
    assert len(sink.segments) == 3
    assert sink.segments[0].y0 == pytest.approx(190)
    for segment in sink.segments:
        assert segment.x0 == pytest.approx(100)
        assert segment.x1 == pytest.approx(100)
        assert segment.color == (0, 0, 0)
    assert [segment.length for segment in sink.segments] == pytest.approx([20, 14, 9.8])
    for parent, child in zip(sink.segments, sink.segments[1:]):
        assert (child.x0, child.y0) == (parent.x1, parent.y1)


def test_deep_genome_halts_at_depth_zero() -> None:
    genes = [3, 20, 5] + [0] * 11
    sink = _render(genes)

    assert len(sink.segments) == 6
    assert sink.segments[0].length == pytest.approx(20.5)
    for segment in sink.segments:
        assert all(isfinite(value) for value in (segment.x0, segment.y0, segment.x1, segment.y1))
        assert _angle(segment) == pytest.approx(-pi / 2)


def test_branch_length_scales_with_canvas_height() -> None:
    genes = [0, 0, 20] + [0] * 11
    assert _render(genes, height=200).segments[0].length == pytest.approx(22)
    assert _render(genes, height=15).segments[0].length == pytest.approx(20.5)


def test_branching_factor_splits_non_root_nodes() -> None:
    genes = [3, 20, 5, 0] + [0] * 10
    sink = _render(genes, PhenotypeConfig(use_branching_factor=True))

    assert len(sink.segments) == 1 + 1 + 2 + 4 + 8 + 16
    assert _angle(sink.segments[1]) == pytest.approx(-pi / 2)
    assert _angle(sink.segments[2]) == pytest.approx(-pi / 2 - pi / 4)


def test_three_way_branching_spreads_evenly() -> None:
    genes = [0, 4, 0, 1] + [0] * 10
    sink = _render(genes, PhenotypeConfig(use_branching_factor=True))
    spread = 0.2 * pi / 2

    assert len(sink.segments) == 1 + 1 + 3
    angles = [_angle(segment) for segment in sink.segments[2:]]
    assert angles == pytest.approx([-pi / 2 - spread / 2, -pi / 2, -pi / 2 + spread / 2])


@pytest.mark.parametrize("bias_gene, direction", [(0, -1), (1, 1)])
def test_asymmetry_shifts_every_child_at_a_level(bias_gene: int, direction: int) -> None:
    genes = [0, 4, 0, 0] + [0] * 8 + [bias_gene, 0]
    symmetric = _render(genes, PhenotypeConfig(use_branching_factor=True))
    skewed = _render(genes, PhenotypeConfig(use_branching_factor=True, use_asymmetry=True))
    shift = direction * 0.5 * (0.2 * pi / 2) / 4

    assert _angle(skewed.segments[1]) == pytest.approx(_angle(symmetric.segments[1]))
    for plain, shifted in zip(symmetric.segments[2:], skewed.segments[2:]):
        assert _angle(shifted) == pytest.approx(_angle(plain) + shift)


def test_color_is_derived_once_from_genes() -> None:
    genes = [0] * 7 + [20, 10, 1] + [0] * 4
    sink = _render(genes)

    assert sink.color_calls == [(255, 127, 12)]
    assert {segment.color for segment in sink.segments} == {(255, 127, 12)}


def test_color_disabled_always_strokes_black(engine: GenomeEngine) -> None:
    config = PhenotypeConfig(use_color=False, use_branching_factor=True, use_segmentation=True)
    for _ in range(50):
        sink = _render(engine.randomize(), config)
        assert sink.color_calls == [(0, 0, 0)]


def test_segmentation_with_zero_genes_draws_one_structure() -> None:
    plain = _render(ZERO_GENOME)
    segmented = _render(ZERO_GENOME, PhenotypeConfig(use_segmentation=True))
    assert segmented.segments == plain.segments


def test_segmentation_stacks_structures_upwards() -> None:
    genes = [0] * 12 + [4, 5]
    sink = _render(genes, PhenotypeConfig(use_segmentation=True), height=300)

    assert len(sink.segments) == 5 * 3
    roots = sink.segments[::3]
    assert [root.y0 for root in roots] == pytest.approx([290, 265, 240, 215, 190])


def _segment_root_spreads(sink: RecordingSink, structures: int) -> list[float]:
    # each structure draws root, stem, then two grandchildren; the first
    # grandchild leans a quarter of the root spread to the left
    spreads = []
    for index in range(structures):
        grandchild = sink.segments[index * 4 + 2]
        spreads.append((-pi / 2 - _angle(grandchild)) * 4)
    return spreads


@pytest.mark.parametrize(
    "gradient, alternate, factors",
    [
        (False, False, [1, 1, 1, 1]),
        (True, False, [1, 2, 4, 8]),
        (True, True, [1, 0.5, 1, 0.5]),
        (False, True, [1, 1, 1, 1]),
    ],
)
def test_gradient_factor_across_segments(gradient: bool, alternate: bool, factors: list[float]) -> None:
    genes = [0, 4, 0, 0] + [0] * 6 + [20, 0, 3, 0]
    config = PhenotypeConfig(
        use_segmentation=True,
        use_branching_factor=True,
        use_gradient_effect=gradient,
        use_alternate_segment_asymmetry=alternate,
    )
    sink = _render(genes, config, height=400)

    assert len(sink.segments) == 4 * 4
    base_spread = 0.2 * pi
    assert _segment_root_spreads(sink, 4) == pytest.approx([base_spread * factor for factor in factors])


def test_render_is_deterministic(engine: GenomeEngine) -> None:
    config = PhenotypeConfig(
        use_segmentation=True,
        use_asymmetry=True,
        use_branching_factor=True,
        use_gradient_effect=True,
    )
    for _ in range(20):
        genome = engine.randomize()
        assert _render(genome, config).segments == _render(genome, config).segments


def test_segment_count_matches_closed_form(engine: GenomeEngine) -> None:
    flag_names = ["use_segmentation", "use_asymmetry", "use_branching_factor", "use_gradient_effect"]
    ceiling = segment_count_bound(6, 4) * 5
    for flags in itertools.product([False, True], repeat=len(flag_names)):
        config = PhenotypeConfig(**dict(zip(flag_names, flags)))
        for _ in range(10):
            genome = engine.randomize()
            sink = _render(genome, config)
            assert 0 < len(sink.segments) == expected_segment_count(genome, config) <= ceiling


def test_segment_count_bound_values() -> None:
    assert segment_count_bound(0, 4) == 0
    assert segment_count_bound(1, 4) == 1
    assert segment_count_bound(3, 1) == 3
    assert segment_count_bound(6, 2) == 32


def test_reserved_flags_change_nothing(engine: GenomeEngine) -> None:
    genome = engine.randomize()
    base = _render(genome, PhenotypeConfig(use_branching_factor=True))
    reserved = _render(
        genome,
        PhenotypeConfig(
            use_branching_factor=True,
            use_depth=False,
            use_angle_variation=False,
            use_length_variation=False,
        ),
    )
    assert base.segments == reserved.segments


def test_wrong_length_genome_draws_nothing() -> None:
    sink = RecordingSink(width=200, height=200)
    with pytest.raises(InvalidGenomeLength):
        render([0] * 13, PhenotypeConfig(), sink)
    assert sink.call_count == 0


def test_out_of_range_gene_draws_nothing() -> None:
    sink = RecordingSink(width=200, height=200)
    with pytest.raises(GeneOutOfRange):
        render([0] * 13 + [21], PhenotypeConfig(), sink)
    assert sink.call_count == 0


@pytest.mark.parametrize(
    "width, height",
    [(0, 200), (200, 0), (-5, 200), (200, -1), (inf, 200), (200, inf), (nan, 200), (200, -inf)],
)
def test_invalid_surface_draws_nothing(width: float, height: float) -> None:
    sink = RecordingSink(width=width, height=height)
    with pytest.raises(InvalidSurfaceDimensions):
        render(ZERO_GENOME, PhenotypeConfig(), sink)
    assert sink.call_count == 0


def test_missing_config_uses_defaults() -> None:
    sink = RecordingSink(width=200, height=200)
    render(ZERO_GENOME, None, sink)
    assert len(sink.segments) == 3
