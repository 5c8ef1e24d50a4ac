"""フラグメント（解決候補ファイル）の定義。

メインファイルとドロップインは kind で区別され、
同じ relative_name を持っていても互いに衝突しない。
"""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path

from pydantic import Field

from uapiconf.models._base import UapiconfBaseModel


class FragmentKind(StrEnum):
    """フラグメントの種別。"""

    MAIN = "main"
    DROPIN = "dropin"


class Fragment(UapiconfBaseModel):
    """解決結果に寄与しうる候補ファイル。

    Attributes:
        kind: メインファイルかドロップインか。
        origin_root_rank: 由来ルートの順位（0 が最高優先）。
        relative_name: メインファイルでは設定名そのもの、
            ドロップインでは .d ディレクトリ内のファイル名。
        absolute_path: 候補ファイルの絶対パス（シンボリックリンクは解決しない）。
        is_masked: ヌルデバイスへのシンボリックリンクであれば True。
    """

    kind: FragmentKind
    origin_root_rank: int = Field(ge=0)
    relative_name: str = Field(min_length=1)
    absolute_path: Path
    is_masked: bool = False

    @property
    def key(self) -> tuple[FragmentKind, str]:
        """ルート間で同一視される名前キー。"""
        return (self.kind, self.relative_name)
