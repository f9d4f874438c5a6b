from typing import Any, Dict, Iterable, List, Optional
from sqlmodel import Session, select
from movie_api.models.director import Director

def list_directors(db: Session) -> List[Director]:
    return db.exec(select(Director)).all()

def get_director(db: Session, director_id: str) -> Optional[Director]:
    return db.get(Director, director_id)

def get_directors_by_ids(db: Session, ids: Iterable[str]) -> Dict[str, Director]:
    """
    Load every director whose id is in ``ids`` with a single query.
    Ids without a row are simply missing from the result.
    """
    ids = set(ids)
    if not ids:
        return {}
    stmt = select(Director).where(Director.id.in_(ids))
    return {d.id: d for d in db.exec(stmt).all()}

def create_director(db: Session, fields: Dict[str, Any]) -> Director:
    director = Director(**fields)
    db.add(director)
    db.commit()
    db.refresh(director)
    return director

def update_director(db: Session, director: Director, fields: Dict[str, Any]) -> Director:
    for key, value in fields.items():
        setattr(director, key, value)
    db.add(director)
    db.commit()
    db.refresh(director)
    return director

def delete_director(db: Session, director: Director) -> None:
    # movies pointing at this director are left as they are
    db.delete(director)
    db.commit()
