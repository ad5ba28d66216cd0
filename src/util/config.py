"""
どこで: `util.config`
何を: YAML 設定を読み、CLI の既定値（出力形式/JSON 出力）を型付きで返す。
なぜ: 設定ファイルの不正値を CLI 側に持ち込まず、1 か所で検証して既定値へ戻すため。

探索場所:
- ソースチェックアウト時: `<repo>/configs/default.yaml`（ベース）
- カレントディレクトリの `config.yaml`（ベースに上書き）
- パッケージとしてインストールされた場合 `configs/` は同梱されないため、
  カレントの `config.yaml` が無ければ組み込み既定値（`CliDefaults()`）になる。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List

import yaml

from colortuner.export import ExportFormat

logger = logging.getLogger(__name__)

# <repo>/src/util/config.py -> <repo>
_SOURCE_ROOT = Path(__file__).resolve().parents[2]


@dataclass(frozen=True)
class CliDefaults:
    """CLI の既定値。"""

    format: ExportFormat = ExportFormat.HEX
    json: bool = False


def config_paths(project_root: Path | None = None) -> List[Path]:
    """読み込む設定ファイルを優先度の低い順に返す。

    `project_root` を渡すとそのディレクトリだけを見る（テスト/埋め込み用）。
    """
    if project_root is not None:
        return [project_root / "configs" / "default.yaml", project_root / "config.yaml"]
    return [_SOURCE_ROOT / "configs" / "default.yaml", Path.cwd() / "config.yaml"]


def _read_mapping(path: Path) -> Dict[str, Any]:
    if not path.is_file():
        return {}
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("ignoring unreadable config %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("ignoring config %s: top level is not a mapping", path)
        return {}
    return data


def load_config(project_root: Path | None = None) -> Dict[str, Any]:
    """設定ファイル群を読み、トップレベルのキー単位で後勝ちにマージする（フェイルソフト）。"""
    merged: Dict[str, Any] = {}
    for path in config_paths(project_root):
        merged.update(_read_mapping(path))
    return merged


def load_cli_defaults(project_root: Path | None = None) -> CliDefaults:
    """`cli` セクションを検証して `CliDefaults` を返す。

    - `format`: `ExportFormat` の値またはラベル。不正なら HEX。
    - `json`: bool のみ受理。それ以外は False。
    """
    section = load_config(project_root).get("cli")
    if section is None:
        return CliDefaults()
    if not isinstance(section, dict):
        logger.warning("ignoring 'cli' config section: expected a mapping, got %r", section)
        return CliDefaults()

    fmt = ExportFormat.HEX
    raw_fmt = section.get("format")
    if raw_fmt is not None:
        try:
            fmt = ExportFormat.from_value(str(raw_fmt))
        except ValueError:
            logger.warning("unknown cli.format %r in config; using %s", raw_fmt, fmt.value)

    as_json = section.get("json", False)
    if not isinstance(as_json, bool):
        logger.warning("cli.json must be true/false, got %r; using false", as_json)
        as_json = False

    return CliDefaults(format=fmt, json=as_json)


__all__ = ["CliDefaults", "config_paths", "load_config", "load_cli_defaults"]
