from __future__ import annotations

import math
from dataclasses import replace

import pytest

from tent_core import (
    DEFAULT_PADDING,
    DEFAULT_TARP_DIMENSIONS,
    DEFAULT_TENT_DIMENSIONS,
    PaddingParameters,
    calculate,
)
from tent_core.solver import floor_width_for_heights

STANDARD_PADDING = PaddingParameters(vertical_padding=0.05, horizontal_padding=0.03, end_padding=0.05)


def _all_lengths(res) -> list[float]:
    space = res.available_space
    return [
        res.foot_height,
        res.head_height,
        res.floor_width,
        space.foot_height,
        space.head_height,
        space.foot_width,
        space.head_width,
    ]


@pytest.mark.parametrize("floor_width", [0.1, 0.3, 0.5, 0.7, 0.75])
def test_floor_not_wider_than_foot_base_needs_no_expansion(floor_width: float) -> None:
    tent = replace(DEFAULT_TENT_DIMENSIONS, floor_width=floor_width)
    res = calculate("solve_height", DEFAULT_TARP_DIMENSIONS, tent, STANDARD_PADDING)
    # Outer floor still fits the foot base: no wall expansion at either end.
    assert res.foot_height == 0.0
    assert res.head_height == 0.0


@pytest.mark.parametrize("floor_width", [0.0, 0.4, 1.1, 2.0, 5.0])
@pytest.mark.parametrize(
    "padding",
    [
        PaddingParameters(0.0, 0.0, 0.0),
        STANDARD_PADDING,
        DEFAULT_PADDING,
        PaddingParameters(2.0, 2.0, 2.0),
    ],
)
def test_results_are_finite_and_non_negative(floor_width: float, padding: PaddingParameters) -> None:
    tent = replace(DEFAULT_TENT_DIMENSIONS, floor_width=floor_width)
    res = calculate("solve_height", DEFAULT_TARP_DIMENSIONS, tent, padding)
    for value in _all_lengths(res):
        assert math.isfinite(value)
        assert value >= 0.0

    res_w = calculate(
        "solve_width",
        DEFAULT_TARP_DIMENSIONS,
        replace(DEFAULT_TENT_DIMENSIONS, foot_height=res.foot_height, head_height=res.head_height),
        padding,
    )
    for value in _all_lengths(res_w):
        assert math.isfinite(value)
        assert value >= 0.0


def test_calculate_is_deterministic() -> None:
    tent = replace(DEFAULT_TENT_DIMENSIONS, floor_width=1.1)
    first = calculate("solve_height", DEFAULT_TARP_DIMENSIONS, tent, STANDARD_PADDING)
    second = calculate("solve_height", DEFAULT_TARP_DIMENSIONS, tent, STANDARD_PADDING)
    assert first == second


def _round_trip(floor_width: float):
    tent = replace(DEFAULT_TENT_DIMENSIONS, floor_width=floor_width)
    heights = calculate("solve_height", DEFAULT_TARP_DIMENSIONS, tent, STANDARD_PADDING)
    back = calculate(
        "solve_width",
        DEFAULT_TARP_DIMENSIONS,
        replace(DEFAULT_TENT_DIMENSIONS, foot_height=heights.foot_height, head_height=heights.head_height),
        STANDARD_PADDING,
    )
    return heights, back


def test_zero_height_frame_width() -> None:
    # 0.75 base + 2 * 0.05 vertical padding - 2 * 0.03 side padding
    width = floor_width_for_heights(0.0, 0.0, DEFAULT_TENT_DIMENSIONS, STANDARD_PADDING)
    assert width == pytest.approx(0.79)


@pytest.mark.parametrize("floor_width", [0.79, 0.8, 1.0, 1.1, 1.2, 1.3])
def test_width_recovered_from_solved_heights_is_bounded(floor_width: float) -> None:
    _, back = _round_trip(floor_width)
    assert back.floor_width <= floor_width + 1e-9
    # The narrow foot end is the tight fit, so the width comes back in full.
    assert back.floor_width == pytest.approx(floor_width)


@pytest.mark.parametrize("floor_width", [0.1, 0.5, 0.75, 0.78])
def test_narrow_floor_round_trips_to_zero_height_frame_width(floor_width: float) -> None:
    heights, back = _round_trip(floor_width)
    assert heights.foot_height == 0.0
    assert heights.head_height == 0.0
    zero_height_width = floor_width_for_heights(0.0, 0.0, DEFAULT_TENT_DIMENSIONS, STANDARD_PADDING)
    assert back.floor_width == pytest.approx(zero_height_width)
    assert back.floor_width > floor_width


@pytest.mark.parametrize(
    "foot_height, head_height, steep",
    [
        (0.2, 0.9, True),
        (0.9, 0.2, True),
        (0.3, 0.8, False),
        (0.8, 0.3, False),
    ],
)
def test_slope_warning_is_symmetric(foot_height: float, head_height: float, steep: bool) -> None:
    tent = replace(DEFAULT_TENT_DIMENSIONS, floor_width=1.0, foot_height=foot_height, head_height=head_height)
    res = calculate("validate", DEFAULT_TARP_DIMENSIONS, tent, DEFAULT_PADDING)
    assert any("slope" in w for w in res.warnings) is steep


@pytest.mark.parametrize("floor_width", [1.15, 1.2, 1.25])
def test_foot_is_higher_for_wide_rectangular_floors(floor_width: float) -> None:
    tent = replace(DEFAULT_TENT_DIMENSIONS, floor_width=floor_width)
    res = calculate("solve_height", DEFAULT_TARP_DIMENSIONS, tent, DEFAULT_PADDING)
    assert res.foot_height > res.head_height
