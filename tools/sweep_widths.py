#!/usr/bin/env python3

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from tent_core.config import default_config, load_config  # noqa: E402
from tent_core.log import setup_logging  # noqa: E402
from tent_core.presets import get_padding_preset, list_padding_presets  # noqa: E402
from tent_core.sweep import sweep_floor_widths, to_centimetres  # noqa: E402
from tent_core.units import cm_to_m  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Tabulate solved heights over a range of floor widths.")
    ap.add_argument("--start-cm", type=int, default=80, help="First floor width, cm (default: 80).")
    ap.add_argument("--stop-cm", type=int, default=120, help="Last floor width, cm (default: 120).")
    ap.add_argument("--step-cm", type=int, default=10, help="Step, cm (default: 10).")
    ap.add_argument("--config", default=None, help="YAML config path.")
    ap.add_argument("--preset", choices=list_padding_presets(), default=None, help="Padding preset.")
    ap.add_argument("--cm", action="store_true", help="Print lengths in whole centimetres.")
    ap.add_argument("--out", default=None, help="Write CSV to this path instead of printing.")
    args = ap.parse_args(argv)
    setup_logging(logging.WARNING)

    if args.step_cm <= 0:
        ap.error("--step-cm must be > 0")
    if args.stop_cm < args.start_cm:
        ap.error("--stop-cm must be >= --start-cm")

    config = load_config(args.config) if args.config else default_config()
    padding = get_padding_preset(args.preset) if args.preset else config.padding
    widths = [cm_to_m(cm) for cm in range(args.start_cm, args.stop_cm + 1, args.step_cm)]

    df = sweep_floor_widths(widths, config.tarp, config.tent, padding, profile=config.profile)
    if args.cm:
        df = to_centimetres(df)

    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(out_path, index=False)
    else:
        print(df.to_string(index=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
