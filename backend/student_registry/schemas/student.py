"""
Student Schemas - Request/Response shapes for the /students endpoints.

These are immutable transfer objects. JSON uses camelCase field names
(firstName, lastName, email, schoolId); Python code may use snake_case.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

# Largest id a 32-bit INTEGER column holds
MAX_ID = 2_147_483_647
FIRST_NAME_MAX_LENGTH = 20


class StudentDto(BaseModel):
    """Body of POST /students."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    first_name: str
    last_name: str
    email: str
    school_id: Optional[int] = Field(default=None, ge=1, le=MAX_ID)

    @field_validator("first_name")
    @classmethod
    def first_name_not_empty_or_too_long(cls, value: str) -> str:
        if not value:
            raise PydanticCustomError("not_empty", "Firstname should not be empty")
        if len(value) > FIRST_NAME_MAX_LENGTH:
            raise PydanticCustomError(
                "too_long", f"Firstname should not exceed {FIRST_NAME_MAX_LENGTH} characters"
            )
        return value

    @field_validator("last_name")
    @classmethod
    def last_name_not_empty(cls, value: str) -> str:
        if not value:
            raise PydanticCustomError("not_empty", "Lastname should not be empty")
        return value


class StudentResponseDto(BaseModel):
    """What the API returns for a student. Identity, age and school stay internal."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    first_name: str
    last_name: str
    email: str
