import logging
from typing import List

from sqlmodel import Session

from movie_api.core.exceptions import NotFoundError
from movie_api.models.director import Director
from movie_api.repositories import director_repo
from movie_api.schemas.director import DirectorCreate, DirectorUpdate

logger = logging.getLogger(__name__)

def list_directors(db: Session) -> List[Director]:
    return director_repo.list_directors(db)

def get_director(db: Session, director_id: str) -> Director:
    director = director_repo.get_director(db, director_id)
    if not director:
        raise NotFoundError("Director not found")
    return director

def create_director(db: Session, director_in: DirectorCreate) -> Director:
    director = director_repo.create_director(db, director_in.model_dump())
    logger.info("Created director %s", director.id)
    return director

def update_director(db: Session, director_id: str, director_in: DirectorUpdate) -> Director:
    director = get_director(db, director_id)
    return director_repo.update_director(db, director, director_in.model_dump(exclude_unset=True))

def delete_director(db: Session, director_id: str) -> None:
    director = get_director(db, director_id)
    director_repo.delete_director(db, director)
    logger.info("Deleted director %s", director_id)
