# movie_api/models/movie.py
from typing import Optional
from uuid import uuid4
from sqlmodel import SQLModel, Field

class Movie(SQLModel, table=True):
    __tablename__ = "movies"

    id: str = Field(default_factory=lambda: uuid4().hex, primary_key=True)
    title: str = Field(nullable=False)
    genre: str = Field(nullable=False)
    release_year: int = Field(nullable=False)

    # weak reference to directors.id: no FK constraint, may dangle
    director_id: Optional[str] = Field(default=None, index=True)
