"""TOML ローダーのテスト。

load_layout_config — [layout] テーブルあり, なし, テーブル以外, 空ファイル, 構文エラー, 不在, 権限なし
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path

import pytest

from uapiconf.config._loader import load_layout_config

# =============================================================================
# ヘルパー
# =============================================================================

_SKIP_PERMISSION = pytest.mark.skipif(
    os.name == "nt" or os.getuid() == 0,
    reason="POSIX permissions required and not running as root",
)


def _write_toml(path: Path, content: str) -> Path:
    """TOML ファイルを書き込みパスを返す。"""
    path.write_text(content, encoding="utf-8")
    return path


# =============================================================================
# load_layout_config()
# =============================================================================


class TestLoadLayoutConfig:
    """load_layout_config のテスト。"""

    def test_layout_table(self, tmp_path: Path) -> None:
        """[layout] テーブルあり → その内容。"""
        path = _write_toml(
            tmp_path / "layout.toml",
            '[layout]\nvendor_dir = "/usr/share"\n\n[other]\nx = 1\n',
        )
        assert load_layout_config(path) == {"vendor_dir": "/usr/share"}

    def test_top_level_table(self, tmp_path: Path) -> None:
        """[layout] なし → トップレベルの内容。"""
        path = _write_toml(tmp_path / "layout.toml", 'runtime_dir = "/var/run"\n')
        assert load_layout_config(path) == {"runtime_dir": "/var/run"}

    def test_non_table_layout(self, tmp_path: Path) -> None:
        """layout がテーブルでない → TypeError。"""
        path = _write_toml(tmp_path / "layout.toml", 'layout = "flat"\n')
        with pytest.raises(TypeError, match="layout"):
            load_layout_config(path)

    def test_empty_file(self, tmp_path: Path) -> None:
        """空ファイル → 空辞書。"""
        path = _write_toml(tmp_path / "layout.toml", "")
        assert load_layout_config(path) == {}

    def test_syntax_error(self, tmp_path: Path) -> None:
        """TOML 構文エラー → TOMLDecodeError。"""
        path = _write_toml(tmp_path / "layout.toml", "invalid = = = toml")
        with pytest.raises(tomllib.TOMLDecodeError):
            load_layout_config(path)

    def test_file_not_found(self, tmp_path: Path) -> None:
        """ファイル不在 → FileNotFoundError。"""
        with pytest.raises(FileNotFoundError):
            load_layout_config(tmp_path / "nonexistent.toml")

    @_SKIP_PERMISSION
    def test_permission_error(self, tmp_path: Path) -> None:
        """読み取り権限なし → PermissionError。"""
        path = _write_toml(tmp_path / "layout.toml", 'admin_dir = "/etc"\n')
        path.chmod(0o000)
        try:
            with pytest.raises(PermissionError):
                load_layout_config(path)
        finally:
            path.chmod(0o644)
