"""
Common API schemas.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseResponse(BaseModel):
    """Base response schema."""

    success: bool = True
    message: Optional[str] = None


class ErrorResponse(BaseModel):
    """Error response schema."""

    error: str
    type: str


class CamelRequest(BaseModel):
    """Request body accepting camelCase keys (snake_case also works)."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, str_strip_whitespace=True
    )


class RecordResponse(BaseModel):
    """Record read straight from a domain entity."""

    model_config = ConfigDict(from_attributes=True)
