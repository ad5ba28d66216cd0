"""
どこで: `common.settings`
何を: colortuner の環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_int, env_str


@dataclass
class _Settings:
    # UI 側の既定値（ColorTuner の初期状態）
    DEFAULT_BASE_COLOR: str = "#ffffff"
    DEFAULT_SHADE_COUNT: int = 10

    # スライダー範囲（エンジン自体は 2 以上なら受理する）
    SHADE_COUNT_MIN: int = 4
    SHADE_COUNT_MAX: int = 50

    # Misc
    LOG_LEVEL: str = "INFO"


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - int は `env_int`、文字列は `env_str` を使用。
    - 範囲は下限丸めを適用し、MIN <= DEFAULT <= MAX を保証する。
    """
    _settings.DEFAULT_BASE_COLOR = env_str("COLORTUNER_DEFAULT_BASE_COLOR", "#ffffff")

    # env_int は既定値が int なら常に int を返す（0 も有効値として扱う）
    count_min = env_int("COLORTUNER_SHADE_COUNT_MIN", 4, min_value=2)
    count_max = env_int("COLORTUNER_SHADE_COUNT_MAX", 50)
    default_count = env_int("COLORTUNER_DEFAULT_SHADE_COUNT", 10)

    _settings.SHADE_COUNT_MIN = count_min
    _settings.SHADE_COUNT_MAX = max(count_min, count_max)
    _settings.DEFAULT_SHADE_COUNT = max(
        _settings.SHADE_COUNT_MIN, min(_settings.SHADE_COUNT_MAX, default_count)
    )

    _settings.LOG_LEVEL = env_str("COLORTUNER_LOG_LEVEL", "INFO").upper()


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
