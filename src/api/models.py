"""Pydantic models for API request/response."""

import re
from datetime import datetime
from typing import Annotated, Optional
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic_core import PydanticCustomError

# Plain decimal digits with an optional sign; no spaces, underscores or fractions
_DECIMAL_INTEGER = re.compile(r"[+-]?[0-9]+")


def _require_decimal_integer(value):
    if not isinstance(value, str):
        return value
    if not _DECIMAL_INTEGER.fullmatch(value):
        raise PydanticCustomError(
            "int_parsing",
            "Input should be a valid integer, unable to parse string as an integer",
        )
    return int(value)


# Integer bound from a query or path string in plain decimal notation only
DecimalInt = Annotated[int, BeforeValidator(_require_decimal_integer)]


class UserRequest(BaseModel):
    """Request model for creating a user.

    Every field is optional and unvalidated; unknown fields are ignored.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    username: Optional[str] = None
    email: Optional[str] = None
    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")


class UserResponse(BaseModel):
    """Response model for a registered user."""
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., description="Sequential user ID, starting at 1")
    username: Optional[str] = None
    email: Optional[str] = None
    first_name: Optional[str] = Field(None, alias="firstName")
    last_name: Optional[str] = Field(None, alias="lastName")
    created_at: datetime = Field(..., alias="createdAt")


class TokenResponse(BaseModel):
    """Response model for an issued access token."""
    access_token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Token lifetime in seconds")


class PrincipalResponse(BaseModel):
    username: str


class ErrorResponse(BaseModel):
    """Body returned for request binding failures."""
    error: str
    parameter: Optional[str] = None
    message: str
