"""解決結果モデル。

ResolvedSet は resolve() / resolve_dropins() が構築する。fragments は以下の不変条件を持つ:
- (kind, relative_name) の組は一意
- メインファイル（存在すれば）が先頭、続いてドロップインが relative_name のバイト順
- マスクされた名前は含まれない
"""

from __future__ import annotations

from pathlib import Path

from pydantic import model_validator

from uapiconf.models._base import UapiconfBaseModel
from uapiconf.models.failure import ResolutionFailure, RootUnreadable
from uapiconf.models.fragment import Fragment, FragmentKind


class ResolutionError(Exception):
    """読み取れないルートがあった解決結果を致命的として扱う場合のエラー。

    ResolvedSet.raise_for_failures() からのみ送出される。
    """

    def __init__(self, failures: tuple[RootUnreadable, ...]) -> None:
        self.failures = failures
        details = "; ".join(f"{f.path}: {f.message}" for f in failures)
        super().__init__(f"{len(failures)} root(s) could not be read: {details}")


class ResolvedSet(UapiconfBaseModel):
    """設定名の解決結果。

    Attributes:
        fragments: 採用されたフラグメント（出力順）。
        masked_names: マスクにより除外された relative_name（出力順）。
        failures: 走査中に記録された失敗。
    """

    fragments: tuple[Fragment, ...] = ()
    masked_names: tuple[str, ...] = ()
    failures: tuple[ResolutionFailure, ...] = ()

    @model_validator(mode="after")
    def validate_unique_keys(self) -> ResolvedSet:
        """(kind, relative_name) の重複とマスク済みフラグメントの混入を拒否する。"""
        seen: set[tuple[FragmentKind, str]] = set()
        for fragment in self.fragments:
            if fragment.is_masked:
                raise ValueError(
                    f"Masked fragment must not be resolved: {fragment.absolute_path}"
                )
            if fragment.key in seen:
                raise ValueError(
                    f"Duplicate fragment name: {fragment.kind}/{fragment.relative_name}"
                )
            seen.add(fragment.key)
        return self

    @property
    def paths(self) -> tuple[Path, ...]:
        """採用されたフラグメントの絶対パスを出力順で返す。"""
        return tuple(f.absolute_path for f in self.fragments)

    @property
    def unreadable_roots(self) -> tuple[RootUnreadable, ...]:
        """RootUnreadable の失敗のみを返す。"""
        return tuple(f for f in self.failures if isinstance(f, RootUnreadable))

    def raise_for_failures(self) -> None:
        """読み取れないルートがあれば ResolutionError を送出する。

        SymlinkResolutionFailed は情報扱いで、送出の対象にならない。

        Raises:
            ResolutionError: RootUnreadable が1件以上記録されている場合。
        """
        unreadable = self.unreadable_roots
        if unreadable:
            raise ResolutionError(unreadable)
