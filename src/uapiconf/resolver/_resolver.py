"""フラグメントリゾルバー。

ルートを優先度の高い順に走査し、同名フラグメントを優先度で調停して ResolvedSet を構築する。

優先度と出力順序は独立した2段階で扱う:
1. 優先度: 名前ごとに最初に現れた（最も優先度の高い）フラグメントの判断が最終となる。
   最初のフラグメントがマスクされていれば、その名前は恒久的に除外される。
2. 出力順序: メインファイルを先頭に、ドロップインを relative_name のバイト順で並べる。
"""

from __future__ import annotations

import logging
import os
from typing import Final

from uapiconf.models.failure import ResolutionFailure
from uapiconf.models.fragment import Fragment, FragmentKind
from uapiconf.models.resolved import ResolvedSet
from uapiconf.resolver._filters import FragmentFilter, accept_any_file
from uapiconf.resolver._scanner import scan_dropin_dir, scan_main_file
from uapiconf.roots._platform import Platform, default_platform
from uapiconf.roots._presets import RootList

logger = logging.getLogger(__name__)

_DROPIN_DIR_SUFFIX: Final[str] = ".d"
_FORBIDDEN_NAMES: Final[frozenset[str]] = frozenset({".", ".."})

_NameKey = tuple[FragmentKind, str]


class InvalidConfigNameError(ValueError):
    """設定名が単一のパス要素として使えない場合のエラー。"""


def _validate_name(name: str) -> None:
    """設定名が空でなく、パス区切り・NUL を含まず、"." / ".." でないことを検証する。

    ワイルドカード文字は拒否せず、リテラルとして扱う。

    Raises:
        InvalidConfigNameError: 検証に失敗した場合。
    """
    if not name:
        raise InvalidConfigNameError("Config name must not be empty")
    if name in _FORBIDDEN_NAMES:
        raise InvalidConfigNameError(f"Config name must not be '{name}'")
    separators = {"/", os.sep} | ({os.altsep} if os.altsep else set())
    if any(sep in name for sep in separators) or "\0" in name:
        raise InvalidConfigNameError(
            f"Config name must be a single file name without separators: '{name}'"
        )


def _decide(decisions: dict[_NameKey, Fragment | None], fragment: Fragment) -> None:
    """フラグメントの名前について未決定であれば判断を記録する。

    決定表の値: Fragment = 採用, None = マスクにより除外。キー未登録 = 未決定。
    一度記録した判断は低優先度のルートから上書きされない。
    """
    key = fragment.key
    if key in decisions:
        logger.debug(
            "Skipping %s: '%s' already decided by a higher-priority root",
            fragment.absolute_path,
            fragment.relative_name,
        )
        return
    if fragment.is_masked:
        logger.debug("Masked '%s' at %s", fragment.relative_name, fragment.absolute_path)
        decisions[key] = None
    else:
        decisions[key] = fragment


def _assemble(
    decisions: dict[_NameKey, Fragment | None],
    failures: list[ResolutionFailure],
    main_name: str | None,
) -> ResolvedSet:
    """決定表から出力順の ResolvedSet を構築する。"""
    fragments: list[Fragment] = []
    masked: list[str] = []

    if main_name is not None and (FragmentKind.MAIN, main_name) in decisions:
        main = decisions[(FragmentKind.MAIN, main_name)]
        if main is None:
            masked.append(main_name)
        else:
            fragments.append(main)

    dropin_names = sorted(
        (name for kind, name in decisions if kind is FragmentKind.DROPIN),
        key=os.fsencode,
    )
    for name in dropin_names:
        dropin = decisions[(FragmentKind.DROPIN, name)]
        if dropin is None:
            masked.append(name)
        else:
            fragments.append(dropin)

    return ResolvedSet(
        fragments=tuple(fragments),
        masked_names=tuple(masked),
        failures=tuple(failures),
    )


def _resolve(
    roots: RootList,
    main_name: str | None,
    dropin_dir_name: str | None,
    fragment_filter: FragmentFilter,
    platform: Platform | None,
) -> ResolvedSet:
    """全ルートを走査して決定表を構築する。

    main_name が None ならメインファイルを、dropin_dir_name が None ならドロップインを探さない。
    """
    effective = platform if platform is not None else default_platform()
    null_device = effective.null_device().resolve()

    decisions: dict[_NameKey, Fragment | None] = {}
    failures: list[ResolutionFailure] = []

    for rank, raw_root in roots.ranked():
        root = raw_root.absolute()
        if main_name is not None:
            main, main_failures = scan_main_file(rank, root, main_name, null_device)
            failures.extend(main_failures)
            if main is not None:
                _decide(decisions, main)

        if dropin_dir_name is not None:
            dropins, dropin_failures = scan_dropin_dir(
                rank, root, dropin_dir_name, fragment_filter, null_device
            )
            failures.extend(dropin_failures)
            for fragment in dropins:
                _decide(decisions, fragment)

    return _assemble(decisions, failures, main_name)


def resolve(
    roots: RootList,
    config_name: str,
    *,
    fragment_filter: FragmentFilter = accept_any_file,
    platform: Platform | None = None,
    dropins: bool = True,
) -> ResolvedSet:
    """設定名を ResolvedSet に解決する。

    各ルートで <root>/<config_name>（メインファイル）と
    <root>/<config_name>.d/ 直下のエントリ（ドロップイン）を候補とする。
    存在しないルート・ディレクトリはエラーではなく、候補を生まないだけである。

    Args:
        roots: 優先度の高い順のルートリスト。
        config_name: 設定名（例: "foo.conf"）。
        fragment_filter: ドロップインエントリの受け入れ判定。
        platform: ヌルデバイスの取得元。None の場合は default_platform()。
        dropins: False の場合は .d ディレクトリを走査せず、メインファイルのみを解決する。

    Returns:
        メインファイル（あれば）とドロップイン（バイト順）からなる解決結果。
        読み取れなかったルートは failures に記録される。

    Raises:
        InvalidConfigNameError: config_name が単一のファイル名でない場合。
    """
    _validate_name(config_name)
    return _resolve(
        roots,
        config_name,
        config_name + _DROPIN_DIR_SUFFIX if dropins else None,
        fragment_filter,
        platform,
    )


def resolve_dropins(
    roots: RootList,
    stem: str,
    *,
    fragment_filter: FragmentFilter = accept_any_file,
    platform: Platform | None = None,
) -> ResolvedSet:
    """メインファイルを持たないドロップインのみの設定を解決する。

    <root>/<stem>.d/ のみを走査する。マージ・マスク・順序の規則は resolve() と同じ。

    Args:
        roots: 優先度の高い順のルートリスト。
        stem: ドロップインディレクトリ名から ".d" を除いた名前（通常はプロジェクト名）。
        fragment_filter: ドロップインエントリの受け入れ判定。
        platform: ヌルデバイスの取得元。None の場合は default_platform()。

    Returns:
        ドロップイン（バイト順）からなる解決結果。

    Raises:
        InvalidConfigNameError: stem が単一のファイル名でない場合。
    """
    _validate_name(stem)
    return _resolve(
        roots,
        None,
        stem + _DROPIN_DIR_SUFFIX,
        fragment_filter,
        platform,
    )
