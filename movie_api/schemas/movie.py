# movie_api/schemas/movie.py
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from movie_api.schemas.common import MAX_YEAR, MIN_YEAR

from movie_api.schemas.director import DirectorRead


class MovieBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class MovieCreate(MovieBase):
    title: str = Field(min_length=1)
    genre: str = Field(min_length=1)
    release_year: int = Field(alias="releaseYear", ge=MIN_YEAR, le=MAX_YEAR)
    # raw director id; not checked against the directors table
    director: Optional[str] = None


class MovieUpdate(MovieBase):
    """
    Partial update. ``director: null`` clears the reference; the other
    fields may be omitted but not nulled.
    """

    title: Optional[str] = Field(default=None, min_length=1)
    genre: Optional[str] = Field(default=None, min_length=1)
    release_year: Optional[int] = Field(default=None, alias="releaseYear", ge=MIN_YEAR, le=MAX_YEAR)
    director: Optional[str] = None

    @field_validator("title", "genre", "release_year")
    @classmethod
    def not_null(cls, value):
        if value is None:
            raise ValueError("field cannot be null")
        return value


class MovieRead(MovieBase):
    id: str
    title: str
    genre: str
    release_year: int = Field(alias="releaseYear")
    director: Optional[DirectorRead] = None
