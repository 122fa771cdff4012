from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from .models import (
    DEFAULT_PADDING,
    DEFAULT_TARP_DIMENSIONS,
    DEFAULT_TARP_PROFILE,
    DEFAULT_TENT_DIMENSIONS,
    PaddingParameters,
    TarpDimensions,
    TarpProfile,
    TentDimensions,
)
from .presets import get_padding_preset

log = logging.getLogger(__name__)

_SECTIONS = ("tarp", "tent", "profile", "padding")
# Solvable dimensions belong to a request, not to the configuration.
_TENT_KEYS = ("length", "foot_base_width", "head_base_width", "wall_slope")


@dataclass(frozen=True)
class CalcConfig:
    tarp: TarpDimensions
    tent: TentDimensions
    profile: TarpProfile
    padding: PaddingParameters


def default_config() -> CalcConfig:
    return CalcConfig(
        tarp=DEFAULT_TARP_DIMENSIONS,
        tent=DEFAULT_TENT_DIMENSIONS,
        profile=DEFAULT_TARP_PROFILE,
        padding=DEFAULT_PADDING,
    )


def _number(value: Any, ctx: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{ctx} must be a number")
    return float(value)


def _section_values(data: dict, section: str, allowed: tuple[str, ...]) -> dict[str, float]:
    raw = data.get(section)
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config section '{section}' must be a mapping")
    unknown = sorted(set(raw) - set(allowed))
    if unknown:
        raise ValueError(f"Unknown keys in config section '{section}': {', '.join(map(str, unknown))}")
    return {key: _number(value, f"{section}.{key}") for key, value in raw.items()}


def _field_names(cls: type) -> tuple[str, ...]:
    return tuple(f.name for f in fields(cls))


def _padding_from(data: dict) -> PaddingParameters:
    raw = data.get("padding")
    base = DEFAULT_PADDING
    if isinstance(raw, dict) and "preset" in raw:
        base = get_padding_preset(str(raw["preset"]))
        raw = {k: v for k, v in raw.items() if k != "preset"}
    values = _section_values({"padding": raw}, "padding", _field_names(PaddingParameters))
    for key, value in values.items():
        if value < 0:
            raise ValueError(f"padding.{key} must be >= 0")
    return replace(base, **values)


def config_from_mapping(data: dict) -> CalcConfig:
    if not isinstance(data, dict):
        raise ValueError("Config root must be a mapping")
    unknown = sorted(set(data) - set(_SECTIONS))
    if unknown:
        raise ValueError(f"Unknown config sections: {', '.join(map(str, unknown))}")

    tarp = replace(DEFAULT_TARP_DIMENSIONS, **_section_values(data, "tarp", _field_names(TarpDimensions)))
    profile = replace(DEFAULT_TARP_PROFILE, **_section_values(data, "profile", _field_names(TarpProfile)))
    tent = replace(DEFAULT_TENT_DIMENSIONS, **_section_values(data, "tent", _TENT_KEYS))
    return CalcConfig(tarp=tarp, tent=tent, profile=profile, padding=_padding_from(data))


def load_config(path: str | Path) -> CalcConfig:
    config_path = Path(path)
    data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Config root must be a mapping: {config_path}")
    config = config_from_mapping(data)
    log.debug("Loaded config from %s", config_path)
    return config
