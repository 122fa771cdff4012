#!/usr/bin/env python3

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]

# Allow running as "python tools/run_tent_calc.py" (so repo root is importable)
sys.path.insert(0, str(ROOT))

from tent_core import MODES_VALID, TentCalcError, calculate  # noqa: E402
from tent_core.config import default_config, load_config  # noqa: E402
from tent_core.log import setup_logging  # noqa: E402
from tent_core.payload import UNITS_VALID, result_to_dict  # noqa: E402
from tent_core.presets import get_padding_preset, list_padding_presets  # noqa: E402

log = logging.getLogger("tools.run_tent_calc")

EXIT_OK = 0
EXIT_BAD_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Solve tent frame dimensions under a tarp (all lengths in metres)."
    )
    ap.add_argument("--mode", choices=MODES_VALID, default="solve_height", help="Calculation mode.")
    ap.add_argument("--floor-width", type=float, default=None, help="Inner floor width, m.")
    ap.add_argument("--foot-height", type=float, default=None, help="Inner height at the foot end, m.")
    ap.add_argument("--head-height", type=float, default=None, help="Inner height at the head end, m.")
    ap.add_argument("--config", default=None, help="YAML config with tarp/tent/profile/padding sections.")
    ap.add_argument("--preset", choices=list_padding_presets(), default=None, help="Padding preset.")
    ap.add_argument("--vertical-padding", type=float, default=None, help="Peak-to-tarp clearance, m.")
    ap.add_argument("--horizontal-padding", type=float, default=None, help="Side clearance per side, m.")
    ap.add_argument("--end-padding", type=float, default=None, help="Foot/head clearance, m.")
    ap.add_argument("--units", choices=UNITS_VALID, default="m", help="Units of the printed result.")
    ap.add_argument("--out", default=None, help="Write the result JSON to this path.")
    ap.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    config = load_config(args.config) if args.config else default_config()
    padding = get_padding_preset(args.preset) if args.preset else config.padding
    overrides = {
        field: value
        for field, value in (
            ("vertical_padding", args.vertical_padding),
            ("horizontal_padding", args.horizontal_padding),
            ("end_padding", args.end_padding),
        )
        if value is not None
    }
    try:
        padding = replace(padding, **overrides)
    except ValueError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT
    tent = replace(
        config.tent,
        floor_width=args.floor_width,
        foot_height=args.foot_height,
        head_height=args.head_height,
    )

    try:
        result = calculate(args.mode, config.tarp, tent, padding, profile=config.profile)
    except TentCalcError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT

    payload = result_to_dict(result, units=args.units)
    text = json.dumps(payload, ensure_ascii=False, indent=2) + "\n"
    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text, encoding="utf-8")
        log.info("Result written to %s", out_path)
    else:
        sys.stdout.write(text)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
