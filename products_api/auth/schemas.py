"""Authentication transfer objects."""

from pydantic import BaseModel, EmailStr, Field, field_validator

# bcrypt only hashes the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


class LoginDto(BaseModel):
    """Login credentials; ``username`` also accepts an email address."""

    username: str = Field(..., min_length=1, validation_alias="usernameOrEmail")
    password: str = Field(..., min_length=1)

    model_config = {"populate_by_name": True}


class RegisterDto(BaseModel):
    """Registration payload. Only username and password are required."""

    name: str | None = Field(default=None, max_length=100)
    username: str = Field(..., min_length=3, max_length=100)
    email: EmailStr | None = None
    password: str = Field(..., min_length=6)

    @field_validator("username")
    @classmethod
    def strip_username(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("username must not be blank")
        return value

    @field_validator("password")
    @classmethod
    def check_password_bytes(cls, value: str) -> str:
        if len(value.encode()) > MAX_PASSWORD_BYTES:
            raise ValueError(f"password must be at most {MAX_PASSWORD_BYTES} bytes in UTF-8")
        return value


class JwtAuthResponse(BaseModel):
    """Issued bearer token."""

    access_token: str
    token_type: str = "Bearer"
