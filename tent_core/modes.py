"""
Calculation modes and their mode-tagged requests.

Each request variant carries exactly the dimensions its mode treats as
known, so the solver never deals with optional fields.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .errors import MissingInputError, UnknownModeError
from .models import TentDimensions

MODE_SOLVE_HEIGHT = "solve_height"
MODE_SOLVE_WIDTH = "solve_width"
MODE_SOLVE_PADDING = "solve_padding"
MODE_VALIDATE = "validate"

MODES_VALID = (MODE_SOLVE_HEIGHT, MODE_SOLVE_WIDTH, MODE_SOLVE_PADDING, MODE_VALIDATE)

_REQUIRED_FIELDS: dict[str, tuple[str, ...]] = {
    MODE_SOLVE_HEIGHT: ("floor_width",),
    MODE_SOLVE_WIDTH: ("foot_height", "head_height"),
    MODE_SOLVE_PADDING: ("floor_width", "foot_height", "head_height"),
    MODE_VALIDATE: ("floor_width", "foot_height", "head_height"),
}


@dataclass(frozen=True)
class SolveHeightRequest:
    floor_width: float

    mode = MODE_SOLVE_HEIGHT


@dataclass(frozen=True)
class SolveWidthRequest:
    foot_height: float
    head_height: float

    mode = MODE_SOLVE_WIDTH


@dataclass(frozen=True)
class SolvePaddingRequest:
    floor_width: float
    foot_height: float
    head_height: float

    mode = MODE_SOLVE_PADDING


@dataclass(frozen=True)
class ValidateRequest:
    floor_width: float
    foot_height: float
    head_height: float

    mode = MODE_VALIDATE


CalculationRequest = Union[SolveHeightRequest, SolveWidthRequest, SolvePaddingRequest, ValidateRequest]


def normalize_mode(mode: object) -> str:
    if not isinstance(mode, str):
        raise UnknownModeError(mode)
    mode_norm = mode.strip().lower()
    if mode_norm not in MODES_VALID:
        raise UnknownModeError(mode)
    return mode_norm


def required_fields(mode: str) -> tuple[str, ...]:
    return _REQUIRED_FIELDS[normalize_mode(mode)]


def request_for_mode(mode: str, tent: TentDimensions) -> CalculationRequest:
    """
    Build the request variant for mode from the optional fields of tent.

    A field counts as missing only when it is None; 0.0 is a valid value.
    """
    mode_norm = normalize_mode(mode)
    missing = tuple(f for f in _REQUIRED_FIELDS[mode_norm] if getattr(tent, f) is None)
    if missing:
        raise MissingInputError(mode_norm, missing)

    if mode_norm == MODE_SOLVE_HEIGHT:
        return SolveHeightRequest(floor_width=float(tent.floor_width))
    if mode_norm == MODE_SOLVE_WIDTH:
        return SolveWidthRequest(
            foot_height=float(tent.foot_height),
            head_height=float(tent.head_height),
        )
    full = {
        "floor_width": float(tent.floor_width),
        "foot_height": float(tent.foot_height),
        "head_height": float(tent.head_height),
    }
    if mode_norm == MODE_SOLVE_PADDING:
        return SolvePaddingRequest(**full)
    return ValidateRequest(**full)
