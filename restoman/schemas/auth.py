"""Authentication-related request and response schemas."""

from pydantic import BaseModel, ConfigDict


class LoginRequest(BaseModel):
    """Payload for user login."""

    username: str | None = None
    password: str | None = None


class RegisterRequest(BaseModel):
    """Payload for admin-driven user registration."""

    username: str | None = None
    password: str | None = None
    role: str | None = None
    status: str | None = None


class UserPublic(BaseModel):
    """The only user fields ever returned over HTTP."""

    id: int
    username: str
    role: str
    status: str

    model_config = ConfigDict(from_attributes=True)


class UserEnvelope(BaseModel):
    success: bool = True
    user: UserPublic


class LoginResponse(BaseModel):
    success: bool = True
    message: str = "Login successful"
    token: str
    user: UserPublic


class RegisterResponse(BaseModel):
    success: bool = True
    message: str = "User registered successfully"
    user: UserPublic
