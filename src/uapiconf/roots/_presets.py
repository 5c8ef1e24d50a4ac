"""ルートリストとプリセット。

ルートリストは優先度の高い順に並んだディレクトリの列で、順位はリスト内の位置と一致する
（0 が最高優先）。構築時にファイルシステムへは一切アクセスしない。
存在しないディレクトリも許容され、解決時にフラグメントを生まないだけである。
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from uapiconf.models._base import UapiconfBaseModel
from uapiconf.models.layout import CLASSIC_LAYOUT, MODERN_LAYOUT
from uapiconf.roots._platform import Platform, SystemPlatform, default_platform

logger = logging.getLogger(__name__)

_PARENT_DIR: str = ".."


class InvalidPathError(ValueError):
    """chroot() / RootList.scoped() に渡されたパスが使えない場合のエラー。

    新しいルートが絶対パスでない場合、いずれかのパスが ".." を含む場合、
    またはプロジェクト名が単一のパス要素でない場合。
    """


class RootList(UapiconfBaseModel):
    """優先度の高い順に並んだルートディレクトリの列。

    Attributes:
        roots: ルートディレクトリ。インデックスがそのまま順位になる。
    """

    roots: tuple[Path, ...] = ()

    def ranked(self) -> Iterator[tuple[int, Path]]:
        """(順位, ルート) の組を優先度の高い順に返す。"""
        return enumerate(self.roots)

    def prepend(self, path: Path | str) -> RootList:
        """path を最高優先として先頭に追加した新しいリストを返す。"""
        return RootList(roots=(Path(path), *self.roots))

    def append(self, path: Path | str) -> RootList:
        """path を最低優先として末尾に追加した新しいリストを返す。"""
        return RootList(roots=(*self.roots, Path(path)))

    def scoped(self, project: str) -> RootList:
        """各ルートに project サブディレクトリを連結した新しいリストを返す。

        <root>/<project>/<config_name> 形式のプロジェクト単位の探索に使う。

        Raises:
            InvalidPathError: project が空・"."・".."、区切り文字や NUL を含む場合。
        """
        if (
            project in ("", ".", _PARENT_DIR)
            or "\0" in project
            or Path(project).name != project
        ):
            raise InvalidPathError(
                f"Project must be a single path component: '{project}'"
            )
        return RootList(roots=tuple(root / project for root in self.roots))


# =============================================================================
# プリセット
# =============================================================================


def default_roots(platform: Platform | None = None) -> RootList:
    """既定のシステムルート（管理者 → 実行時 → ベンダー）を返す。

    Args:
        platform: ルート一覧の取得元。None の場合は default_platform()。

    Returns:
        優先度の高い順に並んだルートリスト。
    """
    effective = platform if platform is not None else default_platform()
    return RootList(roots=effective.default_roots())


def modern_system_roots() -> RootList:
    """/etc → /run → /usr/etc のルートを返す。"""
    return default_roots(SystemPlatform(MODERN_LAYOUT))


def classic_system_roots() -> RootList:
    """/etc → /var/run → /usr/lib のルートを返す。"""
    return default_roots(SystemPlatform(CLASSIC_LAYOUT))


def with_user(
    roots: RootList,
    user_dir: Path | str | None = None,
    *,
    platform: Platform | None = None,
) -> RootList:
    """ユーザー設定ルートを最高優先として先頭に追加する。

    個人の上書き設定はシステム管理者の設定よりも優先される。
    user_dir が None の場合はプラットフォームのユーザー設定ディレクトリ探索を使い、
    それも特定できなければ roots をそのまま返す。

    Args:
        roots: 追加先のルートリスト。
        user_dir: ユーザー設定ディレクトリ。
        platform: user_dir 省略時の探索元。None の場合は default_platform()。

    Returns:
        ユーザールートを先頭に持つルートリスト。
    """
    if user_dir is None:
        effective = platform if platform is not None else default_platform()
        user_dir = effective.user_config_dir()
        if user_dir is None:
            logger.debug("No user config directory; roots left unchanged")
            return roots
    return roots.prepend(user_dir)


def custom_roots(paths: Iterable[Path | str]) -> RootList:
    """呼び出し元が指定した順序のルートリストを返す。

    個数や名前に制約はない。先頭ほど優先度が高い。
    """
    return RootList(roots=tuple(Path(p) for p in paths))


def _has_parent_component(path: Path) -> bool:
    return _PARENT_DIR in path.parts


def chroot(roots: RootList, new_root: Path | str) -> RootList:
    """全ルートを new_root 配下に再配置する。

    "/etc" は "<new_root>/etc" になる。フィクスチャツリーに対するテストや
    イメージ構築時の探索に使う。純粋なパス演算でファイルシステムには触れない。

    Args:
        roots: 再配置するルートリスト。
        new_root: 新しいルート。絶対パスであること。

    Returns:
        再配置されたルートリスト。

    Raises:
        InvalidPathError: new_root が絶対パスでない場合、
            または new_root・いずれかのルートが ".." を含む場合。
    """
    base = Path(new_root)
    if not base.is_absolute():
        raise InvalidPathError(f"chroot target must be an absolute path: '{base}'")
    if _has_parent_component(base):
        raise InvalidPathError(f"chroot target must not contain '..': '{base}'")

    rerooted: list[Path] = []
    for root in roots.roots:
        if _has_parent_component(root):
            raise InvalidPathError(f"Root must not contain '..': '{root}'")
        parts = root.parts[1:] if root.is_absolute() else root.parts
        rerooted.append(base.joinpath(*parts))
    return RootList(roots=tuple(rerooted))
