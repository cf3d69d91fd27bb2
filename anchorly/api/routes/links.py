from fastapi import APIRouter, Depends, status

from anchorly.api.deps import get_current_user, get_link_service
from anchorly.api.schemas import CreateLinkRequest, LinkResponse
from anchorly.components.links import CreateLinkInput, LinkService
from anchorly.domain.entities import User
from anchorly.domain.errors import PermissionDeniedError

router = APIRouter()


@router.post("", response_model=LinkResponse, status_code=status.HTTP_201_CREATED)
def create_link(
    body: CreateLinkRequest,
    current_user: User = Depends(get_current_user),
    service: LinkService = Depends(get_link_service),
) -> LinkResponse:
    """Bookmark a link for the authenticated user."""
    owner_id = body.user_id or current_user.id or ""
    if owner_id != current_user.id:
        raise PermissionDeniedError()
    link = service.create(CreateLinkInput(title=body.title, href=body.href, user_id=owner_id))
    return LinkResponse.from_link(link)


@router.get("/{link_id}", response_model=LinkResponse)
def get_link(
    link_id: str,
    service: LinkService = Depends(get_link_service),
) -> LinkResponse:
    return LinkResponse.from_link(service.get_by_id(link_id))
