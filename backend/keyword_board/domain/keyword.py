"""
Keyword Domain Model

Defines Keyword related Data Transfer Objects (DTOs).
JSON field names are camelCase (`createdBy`, `totalPages`); Python attributes are snake_case.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase aliases"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class KeywordCreate(CamelModel):
    """
    Create Keyword Request Model

    `username` and `channels` are optional at the schema level so that the service
    can report them as missing with a 400 instead of a schema error.
    """

    username: Optional[str] = Field(None, description="Username")
    channels: Optional[list[str]] = Field(None, description="Channel names, one record is stored per channel")
    available: bool = Field(False, description="Available flag")
    unavailable: bool = Field(False, description="Unavailable flag")
    created: bool = Field(False, description="Created flag")
    created_by: Optional[str] = Field(None, description="Creator, defaults to username")
    created_at: Optional[datetime] = Field(
        None, description="Creation Time, read as UTC when no offset is given"
    )

    @field_validator("available", "unavailable", "created", mode="before")
    @classmethod
    def _null_flag_is_false(cls, value: Any) -> Any:
        return False if value is None else value


class KeywordModel(CamelModel):
    """Keyword Complete Model"""

    id: str = Field(..., description="Keyword ID")
    username: str
    channels: list[str]
    available: bool = False
    unavailable: bool = False
    created: bool = False
    created_by: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


class KeywordPage(CamelModel):
    """Keyword Paginated Response"""

    records: list[KeywordModel]
    total_pages: int = Field(..., description="ceil(total / limit)")
    total: int = Field(..., description="Total record count")
    page: int = Field(..., description="Effective page number")
    limit: int = Field(..., description="Effective page size")


class KeywordCreateResponse(CamelModel):
    """Keyword Create Response"""

    message: str
    created_records: list[KeywordModel]


class MessageResponse(CamelModel):
    """Plain confirmation response"""

    message: str
