from __future__ import annotations

from .models import PaddingParameters
from .units import cm_to_m

# (vertical, horizontal, end) in centimetres
_PRESETS_CM: dict[str, tuple[int, int, int]] = {
    "minimal": (3, 2, 3),
    "standard": (5, 3, 5),
    "conservative": (10, 5, 8),
}


def _from_cm(vertical: int, horizontal: int, end: int) -> PaddingParameters:
    return PaddingParameters(
        vertical_padding=cm_to_m(vertical),
        horizontal_padding=cm_to_m(horizontal),
        end_padding=cm_to_m(end),
    )


PADDING_PRESETS: dict[str, PaddingParameters] = {
    name: _from_cm(*values) for name, values in _PRESETS_CM.items()
}


def list_padding_presets() -> list[str]:
    return list(PADDING_PRESETS)


def get_padding_preset(name: str) -> PaddingParameters:
    key = str(name or "").strip().lower()
    if key not in PADDING_PRESETS:
        raise ValueError(f"Unknown padding preset: {name!r} (expected one of {tuple(PADDING_PRESETS)})")
    return PADDING_PRESETS[key]
