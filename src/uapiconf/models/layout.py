"""プラットフォームのディレクトリ配置モデル。

ルートプリセットとヌルデバイスのパスを定義する。
テストや非標準レイアウトのために呼び出し元が上書きできる。
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Final

from uapiconf.models._base import UapiconfBaseModel


class PlatformLayout(UapiconfBaseModel):
    """システム設定ルートの配置。

    デフォルト値のみで有効なインスタンスを構築可能。

    Attributes:
        admin_dir: 管理者による上書き設定のルート（最高優先）。
        runtime_dir: 一時的な実行時設定のルート。
        vendor_dir: OS ベンダー既定設定のルート（最低優先）。
        null_device: マスク判定に使うヌルデバイスのパス。
    """

    admin_dir: Path = Path("/etc")
    runtime_dir: Path = Path("/run")
    vendor_dir: Path = Path("/usr/lib")
    null_device: Path = Path(os.devnull)

    def system_roots(self) -> tuple[Path, Path, Path]:
        """管理者 → 実行時 → ベンダーの順でルートを返す。"""
        return (self.admin_dir, self.runtime_dir, self.vendor_dir)


DEFAULT_LAYOUT: Final[PlatformLayout] = PlatformLayout()

MODERN_LAYOUT: Final[PlatformLayout] = PlatformLayout(vendor_dir=Path("/usr/etc"))
"""ベンダー設定を /usr/etc に置くディストリビューション向け。"""

CLASSIC_LAYOUT: Final[PlatformLayout] = PlatformLayout(runtime_dir=Path("/var/run"))
"""実行時設定を /var/run に置く従来型ディストリビューション向け。"""
