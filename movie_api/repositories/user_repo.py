from typing import Optional
from sqlmodel import Session, select
from movie_api.models.user import User

def get_user_by_email(db: Session, email: str) -> Optional[User]:
    stmt = select(User).where(User.email == email)
    return db.exec(stmt).first()

def get_user(db: Session, user_id: str) -> Optional[User]:
    return db.get(User, user_id)

def create_user(db: Session, name: str, email: str, hashed_password: str) -> User:
    db_user = User(
        name=name,
        email=email,
        hashed_password=hashed_password,
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user
