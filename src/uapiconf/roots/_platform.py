"""プラットフォーム依存の事実を提供するケーパビリティ。

既定ルートの一覧、ヌルデバイスのパス、ユーザー設定ディレクトリの3つを
Platform プロトコルの背後に隔離し、解決アルゴリズム自体はプラットフォーム非依存に保つ。
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final, Protocol, runtime_checkable

from uapiconf.config._resolver import resolve_layout
from uapiconf.models.layout import DEFAULT_LAYOUT, PlatformLayout

logger = logging.getLogger(__name__)

_XDG_CONFIG_HOME_VAR: Final[str] = "XDG_CONFIG_HOME"
_USER_CONFIG_DIR_NAME: Final[str] = ".config"


# =============================================================================
# Platform Protocol
# =============================================================================


@runtime_checkable
class Platform(Protocol):
    """ルートプリセットと解決処理が参照する実行環境のプロトコル。"""

    def default_roots(self) -> tuple[Path, ...]:
        """既定ルートを優先度の高い順に返す。"""
        ...

    def null_device(self) -> Path:
        """マスク判定に使うヌルデバイスのパスを返す。"""
        ...

    def user_config_dir(self) -> Path | None:
        """ユーザー設定ディレクトリを返す。特定できなければ None。"""
        ...


# =============================================================================
# SystemPlatform
# =============================================================================


def find_user_config_dir(environ: Mapping[str, str] | None = None) -> Path | None:
    """ユーザー設定ディレクトリを探索する。

    $XDG_CONFIG_HOME が絶対パスで設定されていればそれを返す。
    未設定・空・相対パスの場合は無視し、~/.config にフォールバックする。
    存在チェックは行わない（パスのみ構築）。

    Args:
        environ: 参照する環境変数。None の場合は os.environ。

    Returns:
        ユーザー設定ディレクトリのパス。ホームディレクトリを特定できなければ None。
    """
    env = os.environ if environ is None else environ
    xdg = env.get(_XDG_CONFIG_HOME_VAR, "")
    if xdg:
        candidate = Path(xdg)
        if candidate.is_absolute():
            return candidate
        logger.debug("Ignoring relative %s: %s", _XDG_CONFIG_HOME_VAR, xdg)
    try:
        home = Path.home()
    except RuntimeError:
        logger.debug("Home directory could not be determined")
        return None
    return home / _USER_CONFIG_DIR_NAME


class SystemPlatform:
    """PlatformLayout に基づく既定の Platform 実装。"""

    def __init__(
        self,
        layout: PlatformLayout = DEFAULT_LAYOUT,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        """レイアウトと環境変数の参照先を設定する。

        Args:
            layout: ルートとヌルデバイスの配置。
            environ: ユーザー設定ディレクトリ探索に使う環境変数。None の場合は os.environ。
        """
        self._layout = layout
        self._environ = environ

    @classmethod
    def from_config(
        cls,
        config_path: Path | None = None,
        overrides: dict[str, object] | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> SystemPlatform:
        """レイアウト設定ファイルと上書きから SystemPlatform を構築する。

        優先順位: デフォルト値 < config_path の TOML < overrides。
        ファイルが存在しない場合はデフォルト値を使う。

        Raises:
            LayoutConfigError: 設定ファイルの構文・内容が不正な場合。
        """
        return cls(resolve_layout(config_path, overrides), environ)

    def default_roots(self) -> tuple[Path, ...]:
        """管理者 → 実行時 → ベンダーの順でルートを返す。"""
        return self._layout.system_roots()

    def null_device(self) -> Path:
        """レイアウトに定義されたヌルデバイスを返す。"""
        return self._layout.null_device

    def user_config_dir(self) -> Path | None:
        """find_user_config_dir() に委譲する。"""
        return find_user_config_dir(self._environ)


def default_platform() -> Platform:
    """DEFAULT_LAYOUT を使う SystemPlatform を返す。"""
    return SystemPlatform()
