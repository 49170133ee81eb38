"""
School Schemas - used both as request body and response for /schools.
"""

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_core import PydanticCustomError


class SchoolDto(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, value: str) -> str:
        if not value:
            raise PydanticCustomError("not_empty", "Name should not be empty")
        return value
