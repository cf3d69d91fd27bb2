from fastapi import APIRouter, Depends, status

from anchorly.api.deps import get_credential_service, get_current_user
from anchorly.api.schemas import CreateUserRequest, UserResponse
from anchorly.components.credentials import CreateUserInput, CredentialService
from anchorly.domain.entities import User

router = APIRouter()


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    body: CreateUserRequest,
    service: CredentialService = Depends(get_credential_service),
) -> UserResponse:
    """Register a new account."""
    user = service.create_user(
        CreateUserInput(username=body.username, email=body.email, password=body.password)
    )
    return UserResponse.from_user(user)


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: str,
    _: User = Depends(get_current_user),
    service: CredentialService = Depends(get_credential_service),
) -> UserResponse:
    return UserResponse.from_user(service.get_by_id(user_id))
