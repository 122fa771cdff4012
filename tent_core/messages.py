from __future__ import annotations

from typing import Any, Callable

Translator = Callable[..., str]

# English catalogue; callers may pass their own translator(key, **kwargs).
_MESSAGES_EN = {
    "warning.foot_height_exceeds": "Foot height {value:.2f}m exceeds maximum {limit:.2f}m",
    "warning.head_height_exceeds": "Head height {value:.2f}m exceeds maximum {limit:.2f}m",
    "warning.floor_width_exceeds": (
        "Floor width {value:.2f}m exceeds maximum available space ({limit:.2f}m)"
    ),
    "warning.negative_dimension": "{label} is negative ({value:.2f}m), configuration impossible",
    "warning.foot_height_low": "Foot height is very low, may not be practical",
    "warning.head_height_low": "Head height is very low, may not be practical",
    "warning.floor_width_narrow": "Floor width is very narrow, may not be practical",
    "warning.slope_steep": "Tent slope is very steep ({slope:.2f}), may be unstable",
    "label.foot_height": "Foot height",
    "label.head_height": "Head height",
    "label.floor_width": "Floor width",
    "validation.mode": "mode must be one of {modes}",
    "validation.field_required": "{field} is required for {mode}",
    "validation.field_number": "{field} must be a number",
    "validation.field_finite": "{field} must be finite",
    "validation.field_gte_zero": "{field} must be >= 0",
    "validation.field_range": "{field} is outside the usual range [{low:.2f}..{high:.2f}] m",
    "validation.name_required": "name is required",
}


def tr(translator: Translator | None, key: str, **kwargs: Any) -> str:
    if translator is None:
        raw = _MESSAGES_EN.get(key, key)
        return raw.format(**kwargs) if kwargs else raw
    return translator(key, **kwargs)
