from __future__ import annotations

from typing import Iterable

import pandas as pd

from .models import DEFAULT_TARP_PROFILE, PaddingParameters, TarpDimensions, TarpProfile, TentDimensions
from .modes import SolveHeightRequest
from .solver import solve
from .units import m_to_cm

SWEEP_COLUMNS = ["floor_width", "foot_height", "head_height", "is_valid", "warning_count", "higher_end"]
LENGTH_COLUMNS = ("floor_width", "foot_height", "head_height")


def _higher_end(foot_height: float, head_height: float, *, eps: float = 1e-9) -> str:
    if abs(foot_height - head_height) <= eps:
        return "equal"
    return "foot" if foot_height > head_height else "head"


def sweep_floor_widths(
    widths: Iterable[float],
    tarp: TarpDimensions,
    tent: TentDimensions,
    padding: PaddingParameters,
    *,
    profile: TarpProfile = DEFAULT_TARP_PROFILE,
) -> pd.DataFrame:
    """Solve heights for each floor width; one row per width, input order kept."""
    rows = []
    for width in widths:
        result = solve(SolveHeightRequest(floor_width=float(width)), tarp, tent, padding, profile=profile)
        rows.append(
            {
                "floor_width": result.floor_width,
                "foot_height": result.foot_height,
                "head_height": result.head_height,
                "is_valid": result.is_valid,
                "warning_count": len(result.warnings),
                "higher_end": _higher_end(result.foot_height, result.head_height),
            }
        )
    return pd.DataFrame(rows, columns=SWEEP_COLUMNS)


def to_centimetres(df: pd.DataFrame) -> pd.DataFrame:
    out = df.copy()
    for col in LENGTH_COLUMNS:
        if col in out.columns:
            out[col] = out[col].map(m_to_cm)
    return out
