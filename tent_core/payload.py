"""
Plain-dict records for the persistence and display layers.

The solver never stores anything; these builders produce what an outer
layer would persist (named calculations, padding profiles) or print.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone

from .models import CalculationResult, PaddingParameters, TentDimensions
from .modes import normalize_mode
from .units import m_to_cm

UNITS_VALID = ("m", "cm")


def _iso_utc_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


def _require_name(name: object) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValueError("name is required")
    return name.strip()


def _optional_float(value: object) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError("Expected a numeric value") from exc


def build_calculation_payload(
    name: str,
    mode: str,
    tent: TentDimensions,
    padding: PaddingParameters,
    result: CalculationResult,
    *,
    now: str | None = None,
) -> dict:
    """Record of one named calculation; warnings are stored as JSON text."""
    return {
        "name": _require_name(name),
        "target_floor_width": _optional_float(tent.floor_width),
        "target_foot_height": _optional_float(tent.foot_height),
        "target_head_height": _optional_float(tent.head_height),
        "vertical_padding": float(padding.vertical_padding),
        "horizontal_padding": float(padding.horizontal_padding),
        "end_padding": float(padding.end_padding),
        "actual_foot_height": result.foot_height,
        "actual_head_height": result.head_height,
        "actual_floor_width": result.floor_width,
        "calculation_mode": normalize_mode(mode),
        "is_valid": bool(result.is_valid),
        "warnings": json.dumps(list(result.warnings), ensure_ascii=False),
        "created_at": now or _iso_utc_now(),
    }


def build_padding_profile_payload(
    name: str,
    description: str,
    padding: PaddingParameters,
    *,
    is_default: bool = False,
) -> dict:
    return {
        "name": _require_name(name),
        "description": str(description or ""),
        "vertical_padding": float(padding.vertical_padding),
        "horizontal_padding": float(padding.horizontal_padding),
        "end_padding": float(padding.end_padding),
        "is_default": bool(is_default),
    }


def result_to_dict(result: CalculationResult, *, units: str = "m") -> dict:
    if units not in UNITS_VALID:
        raise ValueError(f"units must be one of {UNITS_VALID}")

    def _length(value: float) -> float | int:
        return m_to_cm(value) if units == "cm" else value

    space = result.available_space
    c = result.constraints
    payload = {
        "mode": result.mode,
        "units": units,
        "foot_height": _length(result.foot_height),
        "head_height": _length(result.head_height),
        "floor_width": _length(result.floor_width),
        "is_valid": result.is_valid,
        "warnings": list(result.warnings),
        "available_space": {
            "foot_height": _length(space.foot_height),
            "head_height": _length(space.head_height),
            "foot_width": _length(space.foot_width),
            "head_width": _length(space.head_width),
        },
        "constraints": {
            "min_height": _length(c.min_height),
            "max_height": _length(c.max_height),
            "min_width": _length(c.min_width),
            "max_width": _length(c.max_width),
            "max_slope": c.max_slope,
        },
    }
    if result.padding_headroom is not None:
        h = result.padding_headroom
        payload["padding_headroom"] = {
            "vertical": _length(h.vertical),
            "horizontal": _length(h.horizontal),
            "end": _length(h.end),
        }
    return payload
