from __future__ import annotations

from .models import (
    CrossSectionData,
    PaddingParameters,
    TarpDimensions,
    TarpProfile,
    TentDimensions,
)


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def tarp_width_at(tarp: TarpDimensions, t: float) -> float:
    return lerp(tarp.short_side, tarp.long_side, t)


def tarp_height_at(profile: TarpProfile, t: float) -> float:
    """
    Quadratic Bezier through the foot pole (t=0), the ridge (t=0.5) and
    the head pole (t=1).

    With both pole heights at zero this is the pinned parabola
    4 * ridge * t * (1 - t).
    """
    p0 = profile.foot_pole_height
    p2 = profile.head_pole_height
    control = 2.0 * profile.ridge_height - 0.5 * (p0 + p2)
    u = 1.0 - t
    return u * u * p0 + 2.0 * t * u * control + t * t * p2


def base_width_at(tent: TentDimensions, t: float) -> float:
    return lerp(tent.foot_base_width, tent.head_base_width, t)


def height_for_width(base_width: float, outer_width: float, wall_slope: float) -> float:
    # Walls lean out symmetrically: each side gains wall_slope per metre of height.
    expansion = (outer_width - base_width) / 2.0
    if expansion <= 0.0:
        return 0.0
    return expansion / wall_slope


def width_for_height(base_width: float, height: float, wall_slope: float) -> float:
    return base_width + 2.0 * max(0.0, height) * wall_slope


def cross_section(
    t: float,
    tarp: TarpDimensions,
    tent: TentDimensions,
    padding: PaddingParameters,
    profile: TarpProfile,
) -> CrossSectionData:
    tarp_height = tarp_height_at(profile, t)
    tarp_width = tarp_width_at(tarp, t)
    available_height = max(0.0, tarp_height - padding.vertical_padding)
    available_width = max(0.0, tarp_width - 2.0 * padding.horizontal_padding)
    return CrossSectionData(
        position=t,
        base_width=base_width_at(tent, t),
        tarp_height=tarp_height,
        tarp_width=tarp_width,
        available_height=available_height,
        available_width=available_width,
        max_tent_height=available_height,
        max_tent_width=available_width,
    )
