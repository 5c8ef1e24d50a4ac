"""TOML レイアウト設定ローダー。

パースのみを担当し、バリデーションは _resolver.py が PlatformLayout で行う。
アクセスエラーは例外として送出する。
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Final

_LAYOUT_SECTION_KEY: Final[str] = "layout"


def load_layout_config(path: Path) -> dict[str, object]:
    """TOML ファイルからレイアウト設定を読み込む。

    [layout] テーブルがあればその内容を、なければトップレベルのテーブルを返す。
    他ツールの設定ファイルに [layout] として同居させることも、
    レイアウト専用ファイルにフラットに書くこともできる。

    Args:
        path: TOML ファイルのパス。

    Returns:
        レイアウト設定の辞書。

    Raises:
        tomllib.TOMLDecodeError: TOML 構文エラーの場合。
        TypeError: layout キーがテーブルでない場合。
        FileNotFoundError: ファイルが存在しない場合。
        PermissionError: 読み取り権限がない場合。
    """
    with path.open("rb") as f:
        data = tomllib.load(f)
    if _LAYOUT_SECTION_KEY not in data:
        return data
    section = data[_LAYOUT_SECTION_KEY]
    if not isinstance(section, dict):
        msg = f"'{_LAYOUT_SECTION_KEY}' must be a table, got {type(section).__name__}"
        raise TypeError(msg)
    return section
