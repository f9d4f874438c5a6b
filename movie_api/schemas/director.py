# movie_api/schemas/director.py
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from movie_api.schemas.common import MAX_YEAR, MIN_YEAR


class DirectorBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class DirectorCreate(DirectorBase):
    name: str = Field(min_length=1)
    birth_year: int = Field(alias="birthYear", ge=MIN_YEAR, le=MAX_YEAR)
    nationality: str = Field(min_length=1)


class DirectorUpdate(DirectorBase):
    """Partial update: only the fields present in the body are changed."""

    name: Optional[str] = Field(default=None, min_length=1)
    birth_year: Optional[int] = Field(default=None, alias="birthYear", ge=MIN_YEAR, le=MAX_YEAR)
    nationality: Optional[str] = Field(default=None, min_length=1)

    @field_validator("name", "birth_year", "nationality")
    @classmethod
    def not_null(cls, value):
        if value is None:
            raise ValueError("field cannot be null")
        return value


class DirectorRead(DirectorBase):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: str
    name: str
    birth_year: int = Field(alias="birthYear")
    nationality: str
