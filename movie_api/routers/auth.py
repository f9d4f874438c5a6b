# movie_api/routers/auth.py
from fastapi import APIRouter, Depends, status
from sqlmodel import Session
from movie_api.database import get_db
from movie_api.core.security import TokenService, get_token_service
from movie_api.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from movie_api.schemas.common import ErrorResponse
from movie_api.services.auth_service import register_user, authenticate_user

router = APIRouter(prefix="/auth", tags=["auth"], responses={400: {"model": ErrorResponse}})

@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
def register(
    user_in: RegisterRequest,
    db: Session = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
):
    """
    Register a new user.
    - Rejects an email that is already registered
    - Hashes the password
    - Returns a one-hour token and the public user summary
    """
    return register_user(db, tokens, user_in)

@router.post("/login", response_model=AuthResponse)
def login(
    credentials: LoginRequest,
    db: Session = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
):
    return authenticate_user(db, tokens, credentials)
