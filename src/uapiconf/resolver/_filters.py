"""ドロップインエントリのフィルター。

フィルターは (ファイル名, lstat の st_mode) を受け取り、フラグメントとして扱うかを返す。
既定の accept_any_file は通常ファイルとシンボリックリンクを受け入れ、
隠しファイルも含め、サブディレクトリへは再帰しない。
フィルターは lstat の結果のみを見る。ディレクトリを指すシンボリックリンクは
フィルター通過後に走査側で除外される。
"""

from __future__ import annotations

import stat as stat_module
from collections.abc import Callable
from typing import Final

FragmentFilter = Callable[[str, int], bool]
"""(ファイル名, st_mode) -> 受け入れるなら True。"""

_HIDDEN_PREFIX: Final[str] = "."


def accept_any_file(name: str, mode: int) -> bool:
    """通常ファイルまたはシンボリックリンクを受け入れる。

    シンボリックリンクはここではリンク先を辿らない（マスク判定とディレクトリ除外は走査側で行う）。
    """
    return stat_module.S_ISREG(mode) or stat_module.S_ISLNK(mode)


def suffix_filter(suffix: str, base: FragmentFilter = accept_any_file) -> FragmentFilter:
    """名前が suffix で終わり、かつ base を満たすエントリを受け入れるフィルターを返す。

    拡張子として使う場合は "." を含めること（例: ".conf"）。

    Args:
        suffix: 要求する名前の末尾。
        base: 併せて適用するフィルター。

    Returns:
        合成されたフィルター。

    Raises:
        ValueError: suffix が空文字列の場合。
    """
    if not suffix:
        raise ValueError("suffix must not be empty")

    def _accept(name: str, mode: int) -> bool:
        return name.endswith(suffix) and base(name, mode)

    return _accept


def visible_only(base: FragmentFilter = accept_any_file) -> FragmentFilter:
    """"." で始まる名前を除外し、base を満たすエントリを受け入れるフィルターを返す。"""

    def _accept(name: str, mode: int) -> bool:
        return not name.startswith(_HIDDEN_PREFIX) and base(name, mode)

    return _accept
