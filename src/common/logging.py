"""
colortuner 向けの軽量ロギングユーティリティ。

要点:
- 各モジュールは `logging.getLogger(__name__)` でロガーを取得する。
- 変換エンジン（`colortuner.engine`）はログを出さない。出すのは adapter/CLI 層のみ。
- ルートが未設定なら最小構成を 1 度だけ適用し、設定済みなら自パッケージのレベルだけ合わせる。
"""

from __future__ import annotations

import logging

# レベル指定の対象となる自パッケージのロガー名
PACKAGE_LOGGERS = ("colortuner", "cli")

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def resolve_level(level: int | str) -> int:
    """"DEBUG" などの名前/数値をロギングレベル値へ変換する（不明な名前は INFO）。"""
    if isinstance(level, str):
        lvl = logging.getLevelName(level.strip().upper())
        return lvl if isinstance(lvl, int) else logging.INFO
    return int(level)


def setup_default_logging(level: int | str = "INFO") -> None:
    """最小限のロギング設定を適用する。

    - ルートロガーにハンドラが無ければ `basicConfig` で stderr へ出力する
    - 既にあればハンドラ構成には触れず、`PACKAGE_LOGGERS` のレベルのみ設定する
    - 上位のランナー/CLI から呼び出す想定
    """
    lvl = resolve_level(level)
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=lvl, format=_FORMAT)
    for name in PACKAGE_LOGGERS:
        logging.getLogger(name).setLevel(lvl)


__all__ = ["PACKAGE_LOGGERS", "resolve_level", "setup_default_logging"]
