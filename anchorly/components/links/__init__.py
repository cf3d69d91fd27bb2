"""
Links component - Bookmarked links owned by users.
"""

from ._impl import LinkService
from .component import run_create, run_get
from .models import CreateLinkInput, GetLinkInput, LinkOperationOutput
from .ports import LinkRepoPort, UserLookupPort

__all__ = [
    # Service
    "LinkService",
    # Entry points
    "run_create",
    "run_get",
    # Models
    "CreateLinkInput",
    "GetLinkInput",
    "LinkOperationOutput",
    # Ports
    "LinkRepoPort",
    "UserLookupPort",
]
