"""uapiconf ドメインモデルパッケージ。"""

from uapiconf.models._base import UapiconfBaseModel
from uapiconf.models.failure import (
    ResolutionFailure,
    RootUnreadable,
    SymlinkResolutionFailed,
)
from uapiconf.models.fragment import Fragment, FragmentKind
from uapiconf.models.layout import (
    CLASSIC_LAYOUT,
    DEFAULT_LAYOUT,
    MODERN_LAYOUT,
    PlatformLayout,
)
from uapiconf.models.resolved import ResolutionError, ResolvedSet

__all__ = [
    "CLASSIC_LAYOUT",
    "DEFAULT_LAYOUT",
    "MODERN_LAYOUT",
    "Fragment",
    "FragmentKind",
    "PlatformLayout",
    "ResolutionError",
    "ResolutionFailure",
    "ResolvedSet",
    "RootUnreadable",
    "SymlinkResolutionFailed",
    "UapiconfBaseModel",
]
