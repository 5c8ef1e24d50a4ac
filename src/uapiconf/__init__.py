"""uapiconf: UAPI Configuration Files Specification のルート探索とドロップイン解決。

設定ファイル名から、優先度付きルート群にまたがるメインファイルとドロップインを
重複排除・マスク処理したうえで、適用順のパス列として返す。内容のパースは行わない。

使用例:
    roots = with_user(default_roots())
    for path in resolve(roots, "foo.conf").paths:
        ...
"""

from uapiconf.config import LayoutConfigError, resolve_layout
from uapiconf.models import (
    Fragment,
    FragmentKind,
    PlatformLayout,
    ResolutionError,
    ResolvedSet,
    RootUnreadable,
    SymlinkResolutionFailed,
)
from uapiconf.resolver import (
    InvalidConfigNameError,
    accept_any_file,
    resolve,
    resolve_dropins,
    suffix_filter,
    visible_only,
)
from uapiconf.roots import (
    InvalidPathError,
    Platform,
    RootList,
    SystemPlatform,
    chroot,
    classic_system_roots,
    custom_roots,
    default_roots,
    modern_system_roots,
    with_user,
)

__all__ = [
    "Fragment",
    "FragmentKind",
    "InvalidConfigNameError",
    "InvalidPathError",
    "LayoutConfigError",
    "Platform",
    "PlatformLayout",
    "ResolutionError",
    "ResolvedSet",
    "RootList",
    "RootUnreadable",
    "SymlinkResolutionFailed",
    "SystemPlatform",
    "accept_any_file",
    "chroot",
    "classic_system_roots",
    "custom_roots",
    "default_roots",
    "modern_system_roots",
    "resolve",
    "resolve_dropins",
    "resolve_layout",
    "suffix_filter",
    "visible_only",
    "with_user",
]
