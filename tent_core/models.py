from __future__ import annotations

from dataclasses import dataclass

# Fixed frame of the tent (metres)
TENT_LENGTH = 2.0
FOOT_BASE_WIDTH = 0.75
HEAD_BASE_WIDTH = 1.075

# Outward wall expansion per metre of height (1.0 = 45 degree walls)
WALL_SLOPE = 1.0

# Practical limits used by validation
MIN_FOOT_HEIGHT = 0.3
MIN_HEAD_HEIGHT = 0.5
MIN_FLOOR_WIDTH = 0.4
MAX_SLOPE = 0.3

POSITION_FOOT = 0.0
POSITION_MIDDLE = 0.5
POSITION_HEAD = 1.0


@dataclass(frozen=True)
class TarpDimensions:
    short_side: float = 1.5
    long_side: float = 2.15
    diagonal_side: float = 2.175
    usable_length: float = 2.15


@dataclass(frozen=True)
class TarpProfile:
    """Height of the pitched tarp above ground along the tent (foot, middle, head)."""

    foot_pole_height: float = 0.9
    ridge_height: float = 1.2
    head_pole_height: float = 1.2


@dataclass(frozen=True)
class TentDimensions:
    length: float = TENT_LENGTH
    foot_base_width: float = FOOT_BASE_WIDTH
    head_base_width: float = HEAD_BASE_WIDTH
    foot_height: float | None = None
    head_height: float | None = None
    floor_width: float | None = None
    wall_slope: float = WALL_SLOPE

    def __post_init__(self) -> None:
        if not self.foot_base_width < self.head_base_width:
            raise ValueError("foot_base_width must be < head_base_width")
        if self.length <= 0:
            raise ValueError("length must be > 0")
        if self.wall_slope <= 0:
            raise ValueError("wall_slope must be > 0")


@dataclass(frozen=True)
class PaddingParameters:
    vertical_padding: float = 0.1
    horizontal_padding: float = 0.05
    end_padding: float = 0.075

    def __post_init__(self) -> None:
        for name in ("vertical_padding", "horizontal_padding", "end_padding"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0")


@dataclass(frozen=True)
class CrossSectionData:
    position: float
    base_width: float
    tarp_height: float
    tarp_width: float
    available_height: float
    available_width: float
    max_tent_height: float
    max_tent_width: float


@dataclass(frozen=True)
class AvailableSpace:
    foot_height: float
    head_height: float
    foot_width: float
    head_width: float


@dataclass(frozen=True)
class GeometricConstraints:
    min_height: float
    max_height: float
    min_width: float
    max_width: float
    max_slope: float


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    warnings: tuple[str, ...]
    constraints: GeometricConstraints


@dataclass(frozen=True)
class PaddingHeadroom:
    """Largest padding values that still keep a configuration inside the tarp."""

    vertical: float
    horizontal: float
    end: float


@dataclass(frozen=True)
class CalculationResult:
    mode: str
    foot_height: float
    head_height: float
    floor_width: float
    is_valid: bool
    warnings: tuple[str, ...]
    available_space: AvailableSpace
    constraints: GeometricConstraints
    padding_headroom: PaddingHeadroom | None = None


DEFAULT_TARP_DIMENSIONS = TarpDimensions()
DEFAULT_TARP_PROFILE = TarpProfile()
DEFAULT_TENT_DIMENSIONS = TentDimensions()
DEFAULT_PADDING = PaddingParameters()
