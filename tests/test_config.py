from __future__ import annotations

from pathlib import Path

import pytest

from tent_core.config import default_config, load_config
from tent_core.models import DEFAULT_PADDING, DEFAULT_TARP_DIMENSIONS, PaddingParameters
from tent_core.presets import get_padding_preset

ROOT = Path(__file__).resolve().parents[1]


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "tent.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_example_config_loads() -> None:
    cfg = load_config(ROOT / "config" / "tent.yaml")
    assert cfg.tarp == DEFAULT_TARP_DIMENSIONS
    assert cfg.padding == get_padding_preset("standard")
    assert cfg.tent.wall_slope == 1.0
    assert cfg.tent.floor_width is None


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    cfg = load_config(_write(tmp_path, ""))
    assert cfg == default_config()


def test_partial_sections_override_defaults(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
tarp:
  short_side: 1.6
profile:
  ridge_height: 1.4
padding:
  vertical_padding: 0.07
""",
    )
    cfg = load_config(path)
    assert cfg.tarp.short_side == 1.6
    assert cfg.tarp.long_side == DEFAULT_TARP_DIMENSIONS.long_side
    assert cfg.profile.ridge_height == 1.4
    assert cfg.padding == PaddingParameters(
        vertical_padding=0.07,
        horizontal_padding=DEFAULT_PADDING.horizontal_padding,
        end_padding=DEFAULT_PADDING.end_padding,
    )


def test_preset_with_override(tmp_path: Path) -> None:
    path = _write(tmp_path, "padding:\n  preset: Minimal\n  end_padding: 0.1\n")
    cfg = load_config(path)
    assert cfg.padding.vertical_padding == pytest.approx(0.03)
    assert cfg.padding.horizontal_padding == pytest.approx(0.02)
    assert cfg.padding.end_padding == pytest.approx(0.1)


@pytest.mark.parametrize(
    "text, message",
    [
        ("- 1\n- 2\n", "Config root must be a mapping"),
        ("roof: {}\n", "Unknown config sections: roof"),
        ("tarp:\n  width: 2\n", "Unknown keys in config section 'tarp': width"),
        ("tent:\n  floor_width: 1.1\n", "Unknown keys in config section 'tent': floor_width"),
        ("tarp: 3\n", "Config section 'tarp' must be a mapping"),
        ("profile:\n  ridge_height: high\n", "profile.ridge_height must be a number"),
        ("padding:\n  vertical_padding: -0.1\n", "padding.vertical_padding must be >= 0"),
        ("padding:\n  preset: luxury\n", "Unknown padding preset"),
        ("tent:\n  foot_base_width: 1.2\n", "foot_base_width must be < head_base_width"),
    ],
)
def test_bad_config_raises(tmp_path: Path, text: str, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        load_config(_write(tmp_path, text))
