# movie_api/models/director.py
from uuid import uuid4
from sqlmodel import SQLModel, Field

class Director(SQLModel, table=True):
    __tablename__ = "directors"

    id: str = Field(default_factory=lambda: uuid4().hex, primary_key=True)
    name: str = Field(nullable=False)
    birth_year: int = Field(nullable=False)
    nationality: str = Field(nullable=False)
