import logging

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from movie_api.core.exceptions import ConflictError, InvalidCredentialsError
from movie_api.core.security import TokenService, hash_password, verify_password
from movie_api.repositories.user_repo import get_user_by_email, create_user as repo_create_user
from movie_api.schemas.auth import AuthResponse, LoginRequest, RegisterRequest, UserSummary

logger = logging.getLogger(__name__)

def register_user(db: Session, tokens: TokenService, user_in: RegisterRequest) -> AuthResponse:
    if get_user_by_email(db, user_in.email):
        raise ConflictError("User already exists")

    hashed = hash_password(user_in.password)
    try:
        user = repo_create_user(db, user_in.name, user_in.email, hashed)
    except IntegrityError:
        # lost a race against a concurrent registration for the same email
        db.rollback()
        raise ConflictError("User already exists")

    logger.info("Registered user %s", user.id)
    return AuthResponse(
        message="User registered successfully",
        token=tokens.issue(user.id),
        user=UserSummary.model_validate(user),
    )

def authenticate_user(db: Session, tokens: TokenService, credentials: LoginRequest) -> AuthResponse:
    user = get_user_by_email(db, credentials.email)
    if not user or not verify_password(credentials.password, user.hashed_password):
        logger.info("Failed login attempt")
        raise InvalidCredentialsError()

    return AuthResponse(
        message="Login successful",
        token=tokens.issue(user.id),
        user=UserSummary.model_validate(user),
    )
