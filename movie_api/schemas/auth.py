# movie_api/schemas/auth.py
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class Credentials(BaseModel):
    email: EmailStr

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        # one account per mailbox, whatever the caller's casing
        return value.lower()


class RegisterRequest(Credentials):
    name: str = Field(min_length=1)
    password: str = Field(min_length=1, description="Plain-text password")


class LoginRequest(Credentials):
    password: str


class UserSummary(BaseModel):
    """Public view of a user; the password hash never leaves the server."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str


class AuthResponse(BaseModel):
    message: str
    token: str
    user: UserSummary
