from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def text_or_none(value: Any) -> Optional[str]:
    """Form and JSON bodies may carry anything; only strings count as given."""
    return value if isinstance(value, str) else None


class LoginRequest(BaseModel):
    """Credentials re-sent with every user-scoped request."""
    username: Optional[str] = Field(default=None, description="Username")
    password: Optional[str] = Field(default=None, description="User password")

    @field_validator("username", "password", mode="before")
    @classmethod
    def _credentials_text(cls, value: Any) -> Optional[str]:
        return text_or_none(value)


class NewUserRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    confirm_password: Optional[str] = Field(default=None, alias="confirmPassword")

    @field_validator("username", "email", "password", "confirm_password", mode="before")
    @classmethod
    def _fields_text(cls, value: Any) -> Optional[str]:
        return text_or_none(value)
