#!/usr/bin/env python3

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

import pandas as pd

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from tent_core import calculate  # noqa: E402
from tent_core.config import CalcConfig, default_config, load_config  # noqa: E402
from tent_core.input_validation import PADDING_FIELDS, validate_request_rows  # noqa: E402
from tent_core.log import setup_logging  # noqa: E402

log = logging.getLogger("tools.run_batch")

OUTPUT_COLUMNS = [
    "name",
    "mode",
    "status",
    "floor_width",
    "foot_height",
    "head_height",
    "is_valid",
    "warnings",
]


def _optional(row: pd.Series, field: str) -> float | None:
    value = row.get(field)
    if value is None or pd.isna(value) or (isinstance(value, str) and not value.strip()):
        return None
    return float(value)


def run_rows(df: pd.DataFrame, config: CalcConfig) -> pd.DataFrame:
    checked = validate_request_rows(df)
    for msg in checked.errors:
        log.warning("Skipping row: %s", msg)

    out = []
    for idx, row in df.iterrows():
        name = row.get("name")
        entry = {col: None for col in OUTPUT_COLUMNS}
        entry["name"] = None if name is None or pd.isna(name) else str(name)
        entry["mode"] = row.get("mode")
        entry["status"] = checked.row_status[idx]
        if checked.row_status[idx] == "OK":
            overrides = {f: _optional(row, f) for f in PADDING_FIELDS}
            padding = replace(config.padding, **{f: v for f, v in overrides.items() if v is not None})
            tent = replace(
                config.tent,
                floor_width=_optional(row, "floor_width"),
                foot_height=_optional(row, "foot_height"),
                head_height=_optional(row, "head_height"),
            )
            result = calculate(str(row["mode"]), config.tarp, tent, padding, profile=config.profile)
            entry.update(
                floor_width=result.floor_width,
                foot_height=result.foot_height,
                head_height=result.head_height,
                is_valid=result.is_valid,
                warnings="; ".join(result.warnings),
            )
        out.append(entry)
    return pd.DataFrame(out, columns=OUTPUT_COLUMNS)


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Solve a CSV of tent requests (one per row).")
    ap.add_argument("--in", dest="in_path", required=True, help="Input CSV path.")
    ap.add_argument("--out", required=True, help="Output CSV path.")
    ap.add_argument("--config", default=None, help="YAML config path.")
    args = ap.parse_args(argv)
    setup_logging(logging.INFO)

    config = load_config(args.config) if args.config else default_config()
    df = pd.read_csv(args.in_path)
    result_df = run_rows(df, config)

    out_path = Path(args.out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    result_df.to_csv(out_path, index=False)

    n_ok = int((result_df["status"] == "OK").sum())
    print(f"rows: {len(result_df)} ok: {n_ok} invalid: {len(result_df) - n_ok}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
