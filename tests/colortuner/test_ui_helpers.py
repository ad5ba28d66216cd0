from __future__ import annotations

"""colortuner.ui_helpers の補助関数テスト。"""

import pytest

from colortuner import InvalidColorFormat, build_shades_from_values, clamp_shade_count


def test_clamp_shade_count_defaults() -> None:
    """既定のスライダー範囲は 4..50、既定値は 10。"""
    assert clamp_shade_count(None) == 10
    assert clamp_shade_count(1) == 4
    assert clamp_shade_count(4) == 4
    assert clamp_shade_count(100) == 50
    assert clamp_shade_count("7") == 7
    assert clamp_shade_count(7.6) == 8


def test_clamp_shade_count_garbage_falls_back() -> None:
    assert clamp_shade_count("abc") == 10
    assert clamp_shade_count(float("nan")) == 10
    assert clamp_shade_count(True) == 10
    assert clamp_shade_count(object()) == 10


def test_clamp_shade_count_respects_env(set_env) -> None:
    set_env(COLORTUNER_SHADE_COUNT_MIN="6", COLORTUNER_SHADE_COUNT_MAX="8")
    assert clamp_shade_count(2) == 6
    assert clamp_shade_count(20) == 8
    assert clamp_shade_count(None) == 8  # 既定値 10 は範囲内へ丸められる


def test_build_shades_defaults_to_white_base() -> None:
    shades = build_shades_from_values(base_color_value=None, shade_count_value=None)
    assert len(shades) == 10
    assert shades[0] == "#ffffff"
    assert shades[-1] == "#000000"


def test_build_shades_uses_clamped_count() -> None:
    shades = build_shades_from_values(base_color_value="#3366cc", shade_count_value=2)
    assert len(shades) == 4


def test_build_shades_does_not_repair_color_text() -> None:
    with pytest.raises(InvalidColorFormat):
        build_shades_from_values(base_color_value="#fff", shade_count_value=5)
    with pytest.raises(InvalidColorFormat):
        build_shades_from_values(base_color_value=" #3366cc", shade_count_value=5)


def test_build_shades_default_base_from_env(set_env) -> None:
    set_env(COLORTUNER_DEFAULT_BASE_COLOR="#ff0000")
    shades = build_shades_from_values(base_color_value=None, shade_count_value=4)
    assert shades == ["#ffffff", "#ff5555", "#aa0000", "#000000"]
