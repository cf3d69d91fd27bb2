from pydantic import BaseModel, Field

from anchorly.domain.entities import Link, User

# Field rules are enforced by the services so error order and messages stay
# the same for every caller.


class CreateUserRequest(BaseModel):
    username: str = ""
    email: str = ""
    password: str = Field(default="", repr=False)


class UserResponse(BaseModel):
    id: str
    username: str
    email: str

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(id=user.id or "", username=user.username, email=user.email)


class LoginRequest(BaseModel):
    email: str = ""
    password: str = Field(default="", repr=False)


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"


class CreateLinkRequest(BaseModel):
    title: str = ""
    href: str = ""
    user_id: str | None = None  # defaults to the caller


class LinkResponse(BaseModel):
    id: str
    title: str
    href: str
    user_id: str

    @classmethod
    def from_link(cls, link: Link) -> "LinkResponse":
        return cls(id=link.id or "", title=link.title, href=link.href, user_id=link.user_id)