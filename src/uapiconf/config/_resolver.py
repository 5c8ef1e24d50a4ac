"""レイアウト設定リゾルバー。

デフォルト値 < TOML 設定ファイル < 明示的な上書き、の順で PlatformLayout を解決する。
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from pydantic import ValidationError

from uapiconf.config._loader import load_layout_config
from uapiconf.models.layout import PlatformLayout

logger = logging.getLogger(__name__)


class LayoutConfigError(Exception):
    """レイアウト設定ファイルの構文・内容が不正な場合のエラー。"""


def merge_layout_layers(
    *layers: dict[str, object] | None,
) -> dict[str, object]:
    """複数の設定レイヤーを項目単位でマージする。

    後のレイヤーが先のレイヤーを上書きする。None のレイヤーはスキップされる。
    値が None の項目は「未指定」を意味し、先のレイヤーの値を残す。

    Args:
        layers: マージ対象の設定辞書。低優先度から高優先度の順。

    Returns:
        マージ済みの設定辞書。
    """
    result: dict[str, object] = {}
    for layer in layers:
        if layer is None:
            continue
        result.update({k: v for k, v in layer.items() if v is not None})
    return result


def resolve_layout(
    config_path: Path | None = None,
    overrides: dict[str, object] | None = None,
) -> PlatformLayout:
    """設定ソースを解決し PlatformLayout を構築する。

    設定ファイルが存在しない場合は該当レイヤーをスキップする。
    全ソースが空の場合はデフォルト値のみで PlatformLayout を構築する。

    Args:
        config_path: レイアウト設定の TOML ファイル。None の場合はファイルレイヤーなし。
        overrides: 明示的な上書き。None 値は未指定扱い。

    Returns:
        解決済みの PlatformLayout。

    Raises:
        LayoutConfigError: TOML 構文エラー、またはマージ後の設定が不正な場合。
        PermissionError: 設定ファイルの読み取り権限がない場合。
    """
    file_layer: dict[str, object] | None = None
    if config_path is not None:
        try:
            file_layer = load_layout_config(config_path)
            logger.debug("Loaded layout config from %s", config_path)
        except FileNotFoundError:
            logger.debug("Layout config not found, skipping: %s", config_path)
        except (tomllib.TOMLDecodeError, TypeError) as e:
            raise LayoutConfigError(f"Invalid layout config '{config_path}': {e}") from e

    merged = merge_layout_layers(file_layer, overrides)
    try:
        return PlatformLayout.model_validate(merged)
    except ValidationError as e:
        raise LayoutConfigError(f"Invalid layout settings: {e}") from e
