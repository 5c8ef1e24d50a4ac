"""単一ルートの走査。

メインファイルの lstat とドロップインディレクトリの一覧取得を行い、
フラグメント候補と失敗記録を返す。優先度の判断は行わない（_resolver.py が担当）。
"""

from __future__ import annotations

import logging
import os
import stat as stat_module
from pathlib import Path

from uapiconf.models.failure import (
    ResolutionFailure,
    RootUnreadable,
    SymlinkResolutionFailed,
)
from uapiconf.models.fragment import Fragment, FragmentKind
from uapiconf.resolver._filters import FragmentFilter, accept_any_file

logger = logging.getLogger(__name__)

# 不在として扱う例外。ルートがファイルの場合は NotADirectoryError になる。
_ABSENT_ERRORS: tuple[type[OSError], ...] = (FileNotFoundError, NotADirectoryError)


def _describe(error: BaseException) -> str:
    return f"{type(error).__name__}: {error}"


def _unreadable(rank: int, root: Path, path: Path, error: OSError) -> RootUnreadable:
    logger.warning("Cannot read %s (root #%d %s): %s", path, rank, root, error)
    return RootUnreadable(
        root_rank=rank, root=root, path=path, message=_describe(error)
    )


def _build_fragment(
    kind: FragmentKind,
    rank: int,
    root: Path,
    name: str,
    path: Path,
    mode: int,
    null_device: Path,
    failures: list[ResolutionFailure],
) -> Fragment | None:
    """候補からフラグメントを構築し、シンボリックリンクならマスク判定を行う。

    リンク先がディレクトリの場合は候補なしとして None を返す。
    リンク先を解決できない場合（リンク切れ・循環）はマスクされていないものとして扱い、
    SymlinkResolutionFailed を failures に追加する。
    """
    is_masked = False
    if stat_module.S_ISLNK(mode):
        try:
            target = path.resolve(strict=True)
            is_masked = target == null_device
            if not is_masked and stat_module.S_ISDIR(target.stat().st_mode):
                logger.debug("Ignoring %s: symlink to directory %s", path, target)
                return None
        except (OSError, RuntimeError) as e:
            # Python 3.12 はリンク循環を RuntimeError で報告する
            logger.warning("Cannot resolve symlink %s: %s", path, e)
            failures.append(
                SymlinkResolutionFailed(
                    root_rank=rank, root=root, path=path, message=_describe(e)
                )
            )
    return Fragment(
        kind=kind,
        origin_root_rank=rank,
        relative_name=name,
        absolute_path=path,
        is_masked=is_masked,
    )


def scan_main_file(
    rank: int,
    root: Path,
    config_name: str,
    null_device: Path,
) -> tuple[Fragment | None, list[ResolutionFailure]]:
    """<root>/<config_name> をメインファイル候補として検査する。

    通常ファイルまたはシンボリックリンクのみ候補とし、ディレクトリ・ディレクトリへのリンク等は
    存在しないものとして扱う。

    Args:
        rank: ルートの順位。
        root: 絶対パス化済みのルート。
        config_name: 設定名。
        null_device: 解決済みのヌルデバイスのパス。

    Returns:
        (メインファイルのフラグメントまたは None, 失敗記録リスト)
    """
    path = root / config_name
    failures: list[ResolutionFailure] = []
    try:
        mode = path.lstat().st_mode
    except _ABSENT_ERRORS:
        return None, failures
    except OSError as e:
        failures.append(_unreadable(rank, root, path, e))
        return None, failures

    if not accept_any_file(config_name, mode):
        return None, failures
    fragment = _build_fragment(
        FragmentKind.MAIN, rank, root, config_name, path, mode, null_device, failures
    )
    return fragment, failures


def scan_dropin_dir(
    rank: int,
    root: Path,
    dir_name: str,
    fragment_filter: FragmentFilter,
    null_device: Path,
) -> tuple[list[Fragment], list[ResolutionFailure]]:
    """<root>/<dir_name> 直下のエントリをドロップイン候補として列挙する。

    ディレクトリが存在しない、またはディレクトリでない場合は空を返す。
    エントリはファイル名のバイト順で処理する。個々のエントリの stat 失敗は
    失敗記録として収集し、残りのエントリの走査を続ける。

    Args:
        rank: ルートの順位。
        root: 絶対パス化済みのルート。
        dir_name: ドロップインディレクトリ名（例: "foo.conf.d"）。
        fragment_filter: エントリの受け入れ判定。
        null_device: 解決済みのヌルデバイスのパス。

    Returns:
        (ドロップインのフラグメントリスト, 失敗記録リスト)
    """
    dropin_dir = root / dir_name
    fragments: list[Fragment] = []
    failures: list[ResolutionFailure] = []

    try:
        entries = sorted(dropin_dir.iterdir(), key=lambda p: os.fsencode(p.name))
    except _ABSENT_ERRORS:
        return fragments, failures
    except OSError as e:
        failures.append(_unreadable(rank, root, dropin_dir, e))
        return fragments, failures

    for entry in entries:
        try:
            mode = entry.lstat().st_mode
        except FileNotFoundError:
            # 一覧取得後に削除された
            continue
        except OSError as e:
            failures.append(_unreadable(rank, root, entry, e))
            continue

        if not fragment_filter(entry.name, mode):
            continue
        fragment = _build_fragment(
            FragmentKind.DROPIN,
            rank,
            root,
            entry.name,
            entry,
            mode,
            null_device,
            failures,
        )
        if fragment is not None:
            fragments.append(fragment)

    return fragments, failures
