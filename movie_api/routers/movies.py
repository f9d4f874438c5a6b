# movie_api/routers/movies.py
from typing import List

from fastapi import APIRouter, Depends, Path, status
from sqlmodel import Session

from movie_api.database import get_db
from movie_api.core.security import require_user
from movie_api.schemas.common import ErrorResponse, Message
from movie_api.schemas.movie import MovieCreate, MovieRead, MovieUpdate
from movie_api.services import movie_service

router = APIRouter(
    prefix="/movies",
    tags=["movies"],
    responses={404: {"model": ErrorResponse}},
)


@router.get(
    "",
    response_model=List[MovieRead],
    summary="List all movies with their directors",
)
def list_movies(db: Session = Depends(get_db)):
    return movie_service.list_movies(db)


@router.get("/{movie_id}", response_model=MovieRead)
def get_movie(
    movie_id: str = Path(..., description="The ID of the movie to fetch"),
    db: Session = Depends(get_db),
):
    """
    Fetch a movie with its director embedded.
    `director` is null when the movie has no director or the director was deleted.
    """
    return movie_service.get_movie(db, movie_id)


@router.post(
    "",
    response_model=MovieRead,
    status_code=status.HTTP_201_CREATED,
)
def create_movie(
    movie_in: MovieCreate,
    current_user: str = Depends(require_user),
    db: Session = Depends(get_db),
):
    """
    Create a movie. `director` is stored as given, even if no such director exists.
    """
    return movie_service.create_movie(db, movie_in)


@router.put("/{movie_id}", response_model=MovieRead)
def update_movie(
    movie_in: MovieUpdate,
    movie_id: str = Path(..., description="The ID of the movie to update"),
    current_user: str = Depends(require_user),
    db: Session = Depends(get_db),
):
    return movie_service.update_movie(db, movie_id, movie_in)


@router.delete("/{movie_id}", response_model=Message, summary="Delete a movie")
def delete_movie(
    movie_id: str = Path(..., description="The ID of the movie to delete"),
    current_user: str = Depends(require_user),
    db: Session = Depends(get_db),
):
    movie_service.delete_movie(db, movie_id)
    return Message(message="Movie deleted successfully")
