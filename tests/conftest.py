"""共通フィクスチャ。

- `COLORTUNER_*` 環境変数を隔離し、設定スナップショットを既定値に戻す
"""

from __future__ import annotations

from typing import Callable, Iterator

import pytest

from common import settings

_ENV_KEYS = (
    "COLORTUNER_DEFAULT_BASE_COLOR",
    "COLORTUNER_DEFAULT_SHADE_COUNT",
    "COLORTUNER_SHADE_COUNT_MIN",
    "COLORTUNER_SHADE_COUNT_MAX",
    "COLORTUNER_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """各テストを既定設定で開始し、終了後も既定設定へ戻す。"""
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    settings.reload_from_env()
    yield
    monkeypatch.undo()
    settings.reload_from_env()


@pytest.fixture()
def set_env(monkeypatch: pytest.MonkeyPatch) -> Callable[..., None]:
    """環境変数を設定して設定を再読込するヘルパを返す。"""

    def _apply(**values: str) -> None:
        for key, value in values.items():
            monkeypatch.setenv(key, value)
        settings.reload_from_env()

    return _apply
