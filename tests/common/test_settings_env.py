from __future__ import annotations

"""common.env / common.settings の環境変数パーステスト。"""

import logging

import pytest

from common import settings
from common.env import env_bool, env_int, env_str
from common.logging import PACKAGE_LOGGERS, resolve_level, setup_default_logging


def test_env_int(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CT_TEST_INT", raising=False)
    assert env_int("CT_TEST_INT", 3) == 3
    monkeypatch.setenv("CT_TEST_INT", " 12 ")
    assert env_int("CT_TEST_INT", 3) == 12
    monkeypatch.setenv("CT_TEST_INT", "-5")
    assert env_int("CT_TEST_INT", 3, min_value=0) == 0
    monkeypatch.setenv("CT_TEST_INT", "twelve")
    assert env_int("CT_TEST_INT", 3) == 3


def test_env_bool(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CT_TEST_BOOL", "yes")
    assert env_bool("CT_TEST_BOOL") is True
    monkeypatch.setenv("CT_TEST_BOOL", "0")
    assert env_bool("CT_TEST_BOOL", True) is False
    monkeypatch.setenv("CT_TEST_BOOL", "maybe")
    assert env_bool("CT_TEST_BOOL", True) is True


def test_env_str(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CT_TEST_STR", "   ")
    assert env_str("CT_TEST_STR", "x") == "x"
    monkeypatch.setenv("CT_TEST_STR", " debug ")
    assert env_str("CT_TEST_STR", "x") == "debug"


def test_settings_defaults() -> None:
    cfg = settings.get()
    assert cfg.DEFAULT_BASE_COLOR == "#ffffff"
    assert cfg.DEFAULT_SHADE_COUNT == 10
    assert (cfg.SHADE_COUNT_MIN, cfg.SHADE_COUNT_MAX) == (4, 50)
    assert cfg.LOG_LEVEL == "INFO"


def test_settings_zero_is_a_value_not_unset(set_env) -> None:
    set_env(COLORTUNER_DEFAULT_SHADE_COUNT="0", COLORTUNER_SHADE_COUNT_MAX="0")
    cfg = settings.get()
    assert cfg.SHADE_COUNT_MIN == 4
    assert cfg.SHADE_COUNT_MAX == 4
    assert cfg.DEFAULT_SHADE_COUNT == 4


def test_settings_invalid_values_use_defaults(set_env) -> None:
    set_env(COLORTUNER_DEFAULT_SHADE_COUNT="ten", COLORTUNER_SHADE_COUNT_MIN="x")
    cfg = settings.get()
    assert (cfg.SHADE_COUNT_MIN, cfg.SHADE_COUNT_MAX, cfg.DEFAULT_SHADE_COUNT) == (4, 50, 10)


def test_settings_bounds_are_floored(set_env) -> None:
    set_env(
        COLORTUNER_SHADE_COUNT_MIN="1",
        COLORTUNER_SHADE_COUNT_MAX="0",
        COLORTUNER_DEFAULT_SHADE_COUNT="99",
        COLORTUNER_LOG_LEVEL="debug",
    )
    cfg = settings.get()
    assert cfg.SHADE_COUNT_MIN == 2
    assert cfg.SHADE_COUNT_MAX == 2
    assert cfg.DEFAULT_SHADE_COUNT == 2
    assert cfg.LOG_LEVEL == "DEBUG"


def test_resolve_level() -> None:
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level(" WARNING ") == logging.WARNING
    assert resolve_level("nonsense") == logging.INFO
    assert resolve_level(logging.ERROR) == logging.ERROR


def test_setup_default_logging_keeps_existing_handlers() -> None:
    """ルートが設定済みならハンドラは変えず、自パッケージのレベルだけ合わせる。"""
    root = logging.getLogger()
    handler = logging.NullHandler()
    root.addHandler(handler)
    saved = {name: logging.getLogger(name).level for name in PACKAGE_LOGGERS}
    try:
        before = list(root.handlers)
        setup_default_logging("DEBUG")
        assert root.handlers == before
        for name in PACKAGE_LOGGERS:
            assert logging.getLogger(name).level == logging.DEBUG
    finally:
        root.removeHandler(handler)
        for name, lvl in saved.items():
            logging.getLogger(name).setLevel(lvl)
