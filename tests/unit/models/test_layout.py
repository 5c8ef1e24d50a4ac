"""PlatformLayout のテスト。"""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from pydantic import ValidationError

from uapiconf.models import CLASSIC_LAYOUT, DEFAULT_LAYOUT, MODERN_LAYOUT, PlatformLayout


class TestPlatformLayoutDefaults:
    """デフォルト値。"""

    def test_defaults(self) -> None:
        """/etc, /run, /usr/lib, os.devnull。"""
        layout = PlatformLayout()
        assert layout.admin_dir == Path("/etc")
        assert layout.runtime_dir == Path("/run")
        assert layout.vendor_dir == Path("/usr/lib")
        assert layout.null_device == Path(os.devnull)

    def test_system_roots_order(self) -> None:
        """管理者 → 実行時 → ベンダー。"""
        assert DEFAULT_LAYOUT.system_roots() == (
            Path("/etc"),
            Path("/run"),
            Path("/usr/lib"),
        )

    def test_presets(self) -> None:
        """modern は /usr/etc、classic は /var/run。"""
        assert MODERN_LAYOUT.vendor_dir == Path("/usr/etc")
        assert CLASSIC_LAYOUT.runtime_dir == Path("/var/run")


class TestPlatformLayoutValidation:
    """バリデーション。"""

    def test_strings_coerced_to_path(self) -> None:
        """文字列は Path に変換される。"""
        layout = PlatformLayout.model_validate({"admin_dir": "/srv/etc"})
        assert layout.admin_dir == Path("/srv/etc")

    def test_unknown_key_rejected(self) -> None:
        """未定義キー → ValidationError。"""
        with pytest.raises(ValidationError, match="extra_forbidden"):
            PlatformLayout.model_validate({"home_dir": "/home"})
