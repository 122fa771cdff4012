"""
Operator-side input checks run before a request reaches the solver.

Nothing here raises for bad input: problems come back as message lists so
a form or a batch run can show all of them at once.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

import pandas as pd

from .errors import UnknownModeError
from .messages import Translator, tr
from .modes import MODES_VALID, normalize_mode, required_fields

DIMENSION_FIELDS = ("floor_width", "foot_height", "head_height")
PADDING_FIELDS = ("vertical_padding", "horizontal_padding", "end_padding")

# Usual range of user-entered tent dimensions (metres)
DIMENSION_RANGE = (0.1, 2.0)


@dataclass(frozen=True)
class RowValidationResult:
    errors: list[str]
    warnings: list[str]
    row_status: dict[int, str]

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def _check_number(value: Any, field: str, translator: Translator | None) -> tuple[float | None, str | None]:
    if isinstance(value, bool):
        return None, tr(translator, "validation.field_number", field=field)
    try:
        num = float(value)
    except (TypeError, ValueError):
        return None, tr(translator, "validation.field_number", field=field)
    if not math.isfinite(num):
        return None, tr(translator, "validation.field_finite", field=field)
    if num < 0:
        return None, tr(translator, "validation.field_gte_zero", field=field)
    return num, None


def _check_inputs(
    data: Any,
    translator: Translator | None,
) -> tuple[list[str], list[str]]:
    errors: list[str] = []
    warnings: list[str] = []

    try:
        mode = normalize_mode(data.get("mode"))
    except UnknownModeError:
        errors.append(tr(translator, "validation.mode", modes=", ".join(MODES_VALID)))
        mode = None

    needed = required_fields(mode) if mode else ()
    for field in DIMENSION_FIELDS:
        value = data.get(field)
        if _is_blank(value):
            if field in needed:
                errors.append(tr(translator, "validation.field_required", field=field, mode=mode))
            continue
        num, err = _check_number(value, field, translator)
        if err:
            errors.append(err)
        elif num is not None and not (DIMENSION_RANGE[0] <= num <= DIMENSION_RANGE[1]):
            warnings.append(
                tr(translator, "validation.field_range", field=field, low=DIMENSION_RANGE[0], high=DIMENSION_RANGE[1])
            )

    for field in PADDING_FIELDS:
        value = data.get(field)
        if _is_blank(value):
            continue
        _, err = _check_number(value, field, translator)
        if err:
            errors.append(err)

    return errors, warnings


def validate_calc_inputs(data: dict[str, Any], *, translator: Translator | None = None) -> list[str]:
    """
    Validate one flat request (mode, dimensions, paddings).

    Padding fields may be omitted (defaults apply); dimension fields are
    required only when the mode needs them.
    """
    errors, _ = _check_inputs(data, translator)
    return errors


def validate_request_rows(df: pd.DataFrame, *, translator: Translator | None = None) -> RowValidationResult:
    """
    Validates batch request rows.

    Expects DataFrame with columns:
    name, mode, floor_width, foot_height, head_height and optionally
    vertical_padding, horizontal_padding, end_padding
    """
    errors: list[str] = []
    warnings: list[str] = []
    statuses: dict[int, str] = {}

    for idx, row in df.iterrows():
        name = row.get("name")
        label = str(name).strip() if not _is_blank(name) else f"row#{idx}"

        row_errors, row_warnings = _check_inputs(row, translator)

        if row_errors:
            errors.append(f"{label}: " + "; ".join(row_errors))
            statuses[idx] = "INVALID"
        else:
            statuses[idx] = "OK"

        if row_warnings:
            warnings.append(f"{label}: " + "; ".join(row_warnings))

    return RowValidationResult(errors=errors, warnings=warnings, row_status=statuses)
