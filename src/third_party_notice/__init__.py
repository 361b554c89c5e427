"""third-party-notice core package.

Scans the npm installation trees of a build task and renders the
``ThirdPartyNotice.txt`` legal notice from the license files it finds.
"""

from .core import generate_notice
from .models import NoticeOutcome, PackageRecord

__all__ = [
    "NoticeOutcome",
    "PackageRecord",
    "generate_notice",
]
