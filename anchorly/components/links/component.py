"""
Links component - Shell functions.
"""

from __future__ import annotations

from anchorly.domain.errors import CredentialError

from ._impl import LinkService
from .models import CreateLinkInput, GetLinkInput, LinkOperationOutput


def run_create(input_data: CreateLinkInput, service: LinkService) -> LinkOperationOutput:
    """Create a new link."""
    try:
        link = service.create(input_data)
    except CredentialError as e:
        return LinkOperationOutput(link=None, success=False, error=e.message, error_kind=e.kind)
    return LinkOperationOutput(link=link, success=True)


def run_get(input_data: GetLinkInput, service: LinkService) -> LinkOperationOutput:
    """Get a link by ID."""
    try:
        link = service.get_by_id(input_data.link_id)
    except CredentialError as e:
        return LinkOperationOutput(link=None, success=False, error=e.message, error_kind=e.kind)
    return LinkOperationOutput(link=link, success=True)
