from fastapi import APIRouter, Depends

from anchorly.api.deps import get_credential_service, get_current_user
from anchorly.api.schemas import LoginRequest, TokenResponse, UserResponse
from anchorly.components.credentials import CredentialService, LoginInput
from anchorly.domain.entities import User

router = APIRouter()


@router.post("/login", response_model=TokenResponse)
def login(
    body: LoginRequest,
    service: CredentialService = Depends(get_credential_service),
) -> TokenResponse:
    """Exchange email and password for a session token."""
    token = service.login(LoginInput(email=body.email, password=body.password))
    return TokenResponse(access_token=token.value)


@router.get("/me", response_model=UserResponse)
def read_users_me(current_user: User = Depends(get_current_user)) -> UserResponse:
    """Get current user info."""
    return UserResponse.from_user(current_user)
