from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer

from anchorly.components.credentials import CredentialService
from anchorly.components.links import LinkService
from anchorly.context import ServiceContext
from anchorly.domain.entities import User
from anchorly.domain.errors import PermissionDeniedError


def get_context(request: Request) -> ServiceContext:
    context: ServiceContext = request.app.state.context
    return context


def get_credential_service(ctx: ServiceContext = Depends(get_context)) -> CredentialService:
    return ctx.credentials


def get_link_service(ctx: ServiceContext = Depends(get_context)) -> LinkService:
    return ctx.links


# --- Auth ---
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)


def get_current_user(
    token: Annotated[str | None, Depends(oauth2_scheme)],
    service: CredentialService = Depends(get_credential_service),
) -> User:
    if not token:
        raise PermissionDeniedError()
    return service.current_user(token)
