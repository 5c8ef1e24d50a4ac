"""レイアウト設定の読み込みと解決。"""

from uapiconf.config._loader import load_layout_config
from uapiconf.config._resolver import (
    LayoutConfigError,
    merge_layout_layers,
    resolve_layout,
)

__all__ = [
    "LayoutConfigError",
    "load_layout_config",
    "merge_layout_layers",
    "resolve_layout",
]
