"""
tent_core — tent frame solver.

Derives foot height, head height and floor width of a truncated triangular
prism tent that must fit under a tarp with the requested clearances.
Pure functions over frozen dataclasses; no I/O in the solver itself.
"""

from .errors import MissingInputError, TentCalcError, UnknownModeError
from .models import (
    DEFAULT_PADDING,
    DEFAULT_TARP_DIMENSIONS,
    DEFAULT_TARP_PROFILE,
    DEFAULT_TENT_DIMENSIONS,
    CalculationResult,
    PaddingParameters,
    TarpDimensions,
    TarpProfile,
    TentDimensions,
)
from .modes import (
    MODE_SOLVE_HEIGHT,
    MODE_SOLVE_PADDING,
    MODE_SOLVE_WIDTH,
    MODE_VALIDATE,
    MODES_VALID,
    SolveHeightRequest,
    SolvePaddingRequest,
    SolveWidthRequest,
    ValidateRequest,
    request_for_mode,
)
from .solver import available_space, calculate, solve, validate_dimensions

__all__ = [
    "DEFAULT_PADDING",
    "DEFAULT_TARP_DIMENSIONS",
    "DEFAULT_TARP_PROFILE",
    "DEFAULT_TENT_DIMENSIONS",
    "MODES_VALID",
    "MODE_SOLVE_HEIGHT",
    "MODE_SOLVE_PADDING",
    "MODE_SOLVE_WIDTH",
    "MODE_VALIDATE",
    "CalculationResult",
    "MissingInputError",
    "PaddingParameters",
    "SolveHeightRequest",
    "SolvePaddingRequest",
    "SolveWidthRequest",
    "TarpDimensions",
    "TarpProfile",
    "TentCalcError",
    "TentDimensions",
    "UnknownModeError",
    "ValidateRequest",
    "available_space",
    "calculate",
    "request_for_mode",
    "solve",
    "validate_dimensions",
]
