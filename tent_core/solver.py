"""
Tent frame solver.

Geometric law: rectangular floor, walls leaning out by `wall_slope` metres
per metre of height (45 degree walls by default), under a tarp whose height
follows the quadratic profile in `geometry.tarp_height_at`.

Every function here is pure: inputs are frozen dataclasses and each call
returns a fresh result.
"""

from __future__ import annotations

import logging

from .geometry import (
    cross_section,
    height_for_width,
    tarp_height_at,
    tarp_width_at,
    width_for_height,
)
from .messages import Translator, tr
from .models import (
    DEFAULT_TARP_PROFILE,
    MAX_SLOPE,
    MIN_FLOOR_WIDTH,
    MIN_FOOT_HEIGHT,
    MIN_HEAD_HEIGHT,
    POSITION_FOOT,
    POSITION_HEAD,
    POSITION_MIDDLE,
    AvailableSpace,
    CalculationResult,
    GeometricConstraints,
    PaddingHeadroom,
    PaddingParameters,
    TarpDimensions,
    TarpProfile,
    TentDimensions,
    ValidationResult,
)
from .modes import (
    CalculationRequest,
    SolveHeightRequest,
    SolvePaddingRequest,
    SolveWidthRequest,
    ValidateRequest,
    request_for_mode,
)

log = logging.getLogger(__name__)


def calculate(
    mode: str,
    tarp: TarpDimensions,
    tent: TentDimensions,
    padding: PaddingParameters,
    *,
    profile: TarpProfile = DEFAULT_TARP_PROFILE,
    translator: Translator | None = None,
) -> CalculationResult:
    """
    Resolve the tent's free dimensions for mode.

    Raises MissingInputError when tent lacks a dimension the mode needs and
    UnknownModeError for an unsupported mode. Infeasible but well-formed
    inputs return is_valid=False with warnings.
    """
    request = request_for_mode(mode, tent)
    return solve(request, tarp, tent, padding, profile=profile, translator=translator)


def solve(
    request: CalculationRequest,
    tarp: TarpDimensions,
    tent: TentDimensions,
    padding: PaddingParameters,
    *,
    profile: TarpProfile = DEFAULT_TARP_PROFILE,
    translator: Translator | None = None,
) -> CalculationResult:
    headroom = None
    if isinstance(request, SolveHeightRequest):
        floor_width = request.floor_width
        foot_height, head_height = heights_for_floor_width(floor_width, tarp, tent, padding, profile)
    elif isinstance(request, SolveWidthRequest):
        foot_height = request.foot_height
        head_height = request.head_height
        floor_width = floor_width_for_heights(foot_height, head_height, tent, padding)
    elif isinstance(request, (SolvePaddingRequest, ValidateRequest)):
        floor_width = request.floor_width
        foot_height = request.foot_height
        head_height = request.head_height
        if isinstance(request, SolvePaddingRequest):
            headroom = padding_headroom(foot_height, head_height, floor_width, tarp, tent, profile)
    else:
        raise TypeError(f"Unsupported request type: {type(request).__name__}")

    validation = validate_dimensions(
        foot_height,
        head_height,
        floor_width,
        tarp,
        tent,
        padding,
        profile=profile,
        translator=translator,
    )
    space = available_space(tarp, tent, padding, profile)

    log.debug(
        "mode=%s floor_width=%.4f foot_height=%.4f head_height=%.4f valid=%s warnings=%d",
        request.mode,
        floor_width,
        foot_height,
        head_height,
        validation.is_valid,
        len(validation.warnings),
    )

    return CalculationResult(
        mode=request.mode,
        foot_height=max(0.0, foot_height),
        head_height=max(0.0, head_height),
        floor_width=max(0.0, floor_width),
        is_valid=validation.is_valid,
        warnings=validation.warnings,
        available_space=space,
        constraints=validation.constraints,
        padding_headroom=headroom,
    )


def heights_for_floor_width(
    floor_width: float,
    tarp: TarpDimensions,
    tent: TentDimensions,
    padding: PaddingParameters,
    profile: TarpProfile = DEFAULT_TARP_PROFILE,
) -> tuple[float, float]:
    """
    Inner (foot, head) heights needed to spread each end's base out to the
    rectangular floor plus side padding, capped at the midpoint ceiling.

    Floors narrower than floor_width_for_heights(0, 0, ...) all map to zero
    heights, so solving the width back gives that zero-height width instead.
    """
    required_outer = floor_width + 2.0 * padding.horizontal_padding
    ceiling = cross_section(POSITION_MIDDLE, tarp, tent, padding, profile).available_height

    heights = []
    for base_width in (tent.foot_base_width, tent.head_base_width):
        outer_height = height_for_width(base_width, required_outer, tent.wall_slope)
        inner = min(outer_height - padding.vertical_padding, ceiling)
        heights.append(max(0.0, inner))
    return heights[0], heights[1]


def floor_width_for_heights(
    foot_height: float,
    head_height: float,
    tent: TentDimensions,
    padding: PaddingParameters,
) -> float:
    """Widest inner floor both ends can reach; the narrower end governs."""
    foot_outer = width_for_height(
        tent.foot_base_width, foot_height + padding.vertical_padding, tent.wall_slope
    )
    head_outer = width_for_height(
        tent.head_base_width, head_height + padding.vertical_padding, tent.wall_slope
    )
    return max(0.0, min(foot_outer, head_outer) - 2.0 * padding.horizontal_padding)


def padding_headroom(
    foot_height: float,
    head_height: float,
    floor_width: float,
    tarp: TarpDimensions,
    tent: TentDimensions,
    profile: TarpProfile = DEFAULT_TARP_PROFILE,
) -> PaddingHeadroom:
    vertical = min(
        tarp_height_at(profile, POSITION_FOOT) - foot_height,
        tarp_height_at(profile, POSITION_HEAD) - head_height,
    )
    narrowest = min(tarp_width_at(tarp, POSITION_FOOT), tarp_width_at(tarp, POSITION_HEAD))
    horizontal = (narrowest - floor_width) / 2.0
    end = (tarp.usable_length - tent.length) / 2.0
    return PaddingHeadroom(
        vertical=max(0.0, vertical),
        horizontal=max(0.0, horizontal),
        end=max(0.0, end),
    )


def available_space(
    tarp: TarpDimensions,
    tent: TentDimensions,
    padding: PaddingParameters,
    profile: TarpProfile = DEFAULT_TARP_PROFILE,
) -> AvailableSpace:
    foot = cross_section(POSITION_FOOT, tarp, tent, padding, profile)
    head = cross_section(POSITION_HEAD, tarp, tent, padding, profile)
    return AvailableSpace(
        foot_height=foot.available_height,
        head_height=head.available_height,
        foot_width=foot.available_width,
        head_width=head.available_width,
    )


def validate_dimensions(
    foot_height: float,
    head_height: float,
    floor_width: float,
    tarp: TarpDimensions,
    tent: TentDimensions,
    padding: PaddingParameters,
    *,
    profile: TarpProfile = DEFAULT_TARP_PROFILE,
    translator: Translator | None = None,
) -> ValidationResult:
    """
    Check dimensions against the tarp envelope and practical limits.

    Exceeding the envelope or a negative dimension invalidates the result;
    low, narrow or steep configurations only add advisory warnings.
    """
    warnings: list[str] = []
    is_valid = True

    foot = cross_section(POSITION_FOOT, tarp, tent, padding, profile)
    head = cross_section(POSITION_HEAD, tarp, tent, padding, profile)
    max_width = min(foot.max_tent_width, head.max_tent_width)

    if foot_height > foot.max_tent_height:
        warnings.append(
            tr(translator, "warning.foot_height_exceeds", value=foot_height, limit=foot.max_tent_height)
        )
        is_valid = False

    if head_height > head.max_tent_height:
        warnings.append(
            tr(translator, "warning.head_height_exceeds", value=head_height, limit=head.max_tent_height)
        )
        is_valid = False

    if floor_width > max_width:
        warnings.append(tr(translator, "warning.floor_width_exceeds", value=floor_width, limit=max_width))
        is_valid = False

    for label_key, value in (
        ("label.foot_height", foot_height),
        ("label.head_height", head_height),
        ("label.floor_width", floor_width),
    ):
        if value < 0:
            warnings.append(
                tr(translator, "warning.negative_dimension", label=tr(translator, label_key), value=value)
            )
            is_valid = False

    if foot_height < MIN_FOOT_HEIGHT:
        warnings.append(tr(translator, "warning.foot_height_low"))

    if head_height < MIN_HEAD_HEIGHT:
        warnings.append(tr(translator, "warning.head_height_low"))

    if floor_width < MIN_FLOOR_WIDTH:
        warnings.append(tr(translator, "warning.floor_width_narrow"))

    slope = abs(head_height - foot_height) / tent.length
    if slope > MAX_SLOPE:
        warnings.append(tr(translator, "warning.slope_steep", slope=slope))

    constraints = GeometricConstraints(
        min_height=MIN_FOOT_HEIGHT,
        max_height=max(foot.max_tent_height, head.max_tent_height),
        min_width=MIN_FLOOR_WIDTH,
        max_width=max_width,
        max_slope=MAX_SLOPE,
    )
    return ValidationResult(is_valid=is_valid, warnings=tuple(warnings), constraints=constraints)
