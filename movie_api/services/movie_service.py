import logging
from typing import Any, Dict, List, Optional

from sqlmodel import Session

from movie_api.core.exceptions import NotFoundError
from movie_api.models.director import Director
from movie_api.models.movie import Movie
from movie_api.repositories import movie_repo
from movie_api.schemas.director import DirectorRead
from movie_api.schemas.movie import MovieCreate, MovieRead, MovieUpdate

logger = logging.getLogger(__name__)

def to_movie_read(movie: Movie, director: Optional[Director]) -> MovieRead:
    return MovieRead(
        id=movie.id,
        title=movie.title,
        genre=movie.genre,
        release_year=movie.release_year,
        director=DirectorRead.model_validate(director) if director else None,
    )

def _to_columns(fields: Dict[str, Any]) -> Dict[str, Any]:
    # the API calls the reference "director"; the column is director_id
    if "director" in fields:
        fields["director_id"] = fields.pop("director")
    return fields

def list_movies(db: Session) -> List[MovieRead]:
    return [to_movie_read(m, d) for m, d in movie_repo.list_movies(db)]

def get_movie(db: Session, movie_id: str) -> MovieRead:
    found = movie_repo.get_movie_with_director(db, movie_id)
    if not found:
        raise NotFoundError("Movie not found")
    return to_movie_read(*found)

def create_movie(db: Session, movie_in: MovieCreate) -> MovieRead:
    movie = movie_repo.create_movie(db, _to_columns(movie_in.model_dump()))
    logger.info("Created movie %s", movie.id)
    return to_movie_read(*movie_repo.resolve_directors(db, [movie])[0])

def update_movie(db: Session, movie_id: str, movie_in: MovieUpdate) -> MovieRead:
    movie = movie_repo.get_movie(db, movie_id)
    if not movie:
        raise NotFoundError("Movie not found")
    movie = movie_repo.update_movie(db, movie, _to_columns(movie_in.model_dump(exclude_unset=True)))
    return to_movie_read(*movie_repo.resolve_directors(db, [movie])[0])

def delete_movie(db: Session, movie_id: str) -> None:
    movie = movie_repo.get_movie(db, movie_id)
    if not movie:
        raise NotFoundError("Movie not found")
    movie_repo.delete_movie(db, movie)
    logger.info("Deleted movie %s", movie_id)
