"""ルートリストとプラットフォームケーパビリティ。

公開 API:
    - モデル: RootList
    - プリセット: default_roots, modern_system_roots, classic_system_roots,
      with_user, custom_roots, chroot
    - プラットフォーム: Platform, SystemPlatform, default_platform, find_user_config_dir
"""

from uapiconf.roots._platform import (
    Platform,
    SystemPlatform,
    default_platform,
    find_user_config_dir,
)
from uapiconf.roots._presets import (
    InvalidPathError,
    RootList,
    chroot,
    classic_system_roots,
    custom_roots,
    default_roots,
    modern_system_roots,
    with_user,
)

__all__ = [
    "InvalidPathError",
    "Platform",
    "RootList",
    "SystemPlatform",
    "chroot",
    "classic_system_roots",
    "custom_roots",
    "default_platform",
    "default_roots",
    "find_user_config_dir",
    "modern_system_roots",
    "with_user",
]
