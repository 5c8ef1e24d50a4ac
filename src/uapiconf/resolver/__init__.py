"""フラグメントリゾルバー。

公開 API:
    - リゾルバー: resolve, resolve_dropins
    - フィルター: FragmentFilter, accept_any_file, suffix_filter, visible_only
"""

from uapiconf.resolver._filters import (
    FragmentFilter,
    accept_any_file,
    suffix_filter,
    visible_only,
)
from uapiconf.resolver._resolver import (
    InvalidConfigNameError,
    resolve,
    resolve_dropins,
)

__all__ = [
    "FragmentFilter",
    "InvalidConfigNameError",
    "accept_any_file",
    "resolve",
    "resolve_dropins",
    "suffix_filter",
    "visible_only",
]
