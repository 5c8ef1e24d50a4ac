"""ルート走査中の失敗記録。

失敗は例外ではなく値として収集され、ResolvedSet.failures に格納される。
致命的とみなすかどうかは呼び出し元が決定する。
kind フィールドの固定値で型を一意に特定する判別共用体。
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Literal, Union

from pydantic import Field

from uapiconf.models._base import UapiconfBaseModel


class RootUnreadable(UapiconfBaseModel):
    """ルートまたはドロップインディレクトリが存在するが読み取れない。判別キー: kind="root_unreadable"。

    Attributes:
        kind: 判別キー。固定値 "root_unreadable"。
        root_rank: 失敗したルートの順位。
        root: 失敗したルートのパス。
        path: 一覧取得・stat に失敗した具体的なパス。
        message: 元の OSError を要約したメッセージ。
    """

    kind: Literal["root_unreadable"] = "root_unreadable"
    root_rank: int = Field(ge=0)
    root: Path
    path: Path
    message: str = Field(min_length=1)


class SymlinkResolutionFailed(UapiconfBaseModel):
    """シンボリックリンクのリンク先を解決できない。判別キー: kind="symlink_unresolved"。

    リンク切れ・循環の場合に記録される。該当エントリは
    「存在し、マスクされていない」ものとして結果に含まれる。

    Attributes:
        kind: 判別キー。固定値 "symlink_unresolved"。
        root_rank: エントリが属するルートの順位。
        root: エントリが属するルートのパス。
        path: 解決できなかったシンボリックリンクのパス。
        message: 元の例外を要約したメッセージ。
    """

    kind: Literal["symlink_unresolved"] = "symlink_unresolved"
    root_rank: int = Field(ge=0)
    root: Path
    path: Path
    message: str = Field(min_length=1)


ResolutionFailure = Annotated[
    Union[RootUnreadable, SymlinkResolutionFailed],
    Field(discriminator="kind"),
]
"""走査失敗の判別共用体。kind フィールドの値で型を自動選択する。"""
