from typing import Any, Dict, List, Optional, Tuple
from sqlmodel import Session, select
from movie_api.models.director import Director
from movie_api.models.movie import Movie
from movie_api.repositories.director_repo import get_directors_by_ids

MovieWithDirector = Tuple[Movie, Optional[Director]]

def resolve_directors(db: Session, movies: List[Movie]) -> List[MovieWithDirector]:
    """
    Pair each movie with its referenced director. A missing or dangling
    reference resolves to None.
    """
    directors = get_directors_by_ids(
        db, (m.director_id for m in movies if m.director_id is not None)
    )
    return [(m, directors.get(m.director_id)) for m in movies]

def list_movies(db: Session) -> List[MovieWithDirector]:
    movies = db.exec(select(Movie)).all()
    return resolve_directors(db, list(movies))

def get_movie(db: Session, movie_id: str) -> Optional[Movie]:
    return db.get(Movie, movie_id)

def get_movie_with_director(db: Session, movie_id: str) -> Optional[MovieWithDirector]:
    movie = get_movie(db, movie_id)
    if movie is None:
        return None
    return resolve_directors(db, [movie])[0]

def create_movie(db: Session, fields: Dict[str, Any]) -> Movie:
    movie = Movie(**fields)
    db.add(movie)
    db.commit()
    db.refresh(movie)
    return movie

def update_movie(db: Session, movie: Movie, fields: Dict[str, Any]) -> Movie:
    for key, value in fields.items():
        setattr(movie, key, value)
    db.add(movie)
    db.commit()
    db.refresh(movie)
    return movie

def delete_movie(db: Session, movie: Movie) -> None:
    db.delete(movie)
    db.commit()
