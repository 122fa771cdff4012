from __future__ import annotations

import math


def m_to_cm(value: float) -> int:
    """Metres to whole centimetres, rounding halves up."""
    return int(math.floor(float(value) * 100.0 + 0.5))


def cm_to_m(value: float) -> float:
    return float(value) / 100.0
