# movie_api/routers/directors.py
from typing import List

from fastapi import APIRouter, Depends, Path, status
from sqlmodel import Session

from movie_api.database import get_db
from movie_api.core.security import require_user
from movie_api.schemas.common import ErrorResponse, Message
from movie_api.schemas.director import DirectorCreate, DirectorRead, DirectorUpdate
from movie_api.services import director_service

router = APIRouter(
    prefix="/directors",
    tags=["directors"],
    responses={404: {"model": ErrorResponse}},
)


@router.get("", response_model=List[DirectorRead], summary="List all directors")
def list_directors(db: Session = Depends(get_db)):
    return [DirectorRead.model_validate(d) for d in director_service.list_directors(db)]


@router.get("/{director_id}", response_model=DirectorRead)
def get_director(
    director_id: str = Path(..., description="The ID of the director to fetch"),
    db: Session = Depends(get_db),
):
    """
    Fetch a director by ID.
    Raises 404 if not found.
    """
    return DirectorRead.model_validate(director_service.get_director(db, director_id))


@router.post(
    "",
    response_model=DirectorRead,
    status_code=status.HTTP_201_CREATED,
)
def create_director(
    director_in: DirectorCreate,
    current_user: str = Depends(require_user),
    db: Session = Depends(get_db),
):
    return DirectorRead.model_validate(director_service.create_director(db, director_in))


@router.put("/{director_id}", response_model=DirectorRead)
def update_director(
    director_in: DirectorUpdate,
    director_id: str = Path(..., description="The ID of the director to update"),
    current_user: str = Depends(require_user),
    db: Session = Depends(get_db),
):
    """
    Update the fields present in the body; omitted fields keep their value.
    """
    director = director_service.update_director(db, director_id, director_in)
    return DirectorRead.model_validate(director)


@router.delete("/{director_id}", response_model=Message, summary="Delete a director")
def delete_director(
    director_id: str = Path(..., description="The ID of the director to delete"),
    current_user: str = Depends(require_user),
    db: Session = Depends(get_db),
):
    """
    Delete a director. Movies referencing it keep the now-dangling id.
    """
    director_service.delete_director(db, director_id)
    return Message(message="Director deleted successfully")
