# movie_api/core/security.py
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from movie_api.core.config import Settings
from movie_api.core.exceptions import InvalidTokenError, UnauthorizedError

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# auto_error=False so a missing header is reported in our own error shape
bearer_scheme = HTTPBearer(auto_error=False)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


class TokenService:
    """
    Issues and validates signed, time-limited identity tokens.

    The token is the whole session: there is no server-side record of
    issued tokens, and expiry is the only way one stops being valid.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_minutes: int = 60):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            secret_key=settings.SECRET_KEY,
            algorithm=settings.ALGORITHM,
            expire_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
        )

    def issue(self, subject: str, expires_delta: Optional[timedelta] = None) -> str:
        now = datetime.now(timezone.utc)
        expire = now + (expires_delta or timedelta(minutes=self.expire_minutes))
        claims = {"sub": str(subject), "iat": now, "exp": expire}
        return jwt.encode(claims, self.secret_key, algorithm=self.algorithm)

    def decode(self, token: str) -> str:
        """
        Validate ``token`` and return its subject.

        Raises InvalidTokenError on a bad signature, a malformed or expired
        token, or a token without a subject.
        """
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except ExpiredSignatureError:
            raise InvalidTokenError("Token has expired")
        except JWTError:
            raise InvalidTokenError("Invalid token")

        subject = payload.get("sub")
        if not subject:
            raise InvalidTokenError("Invalid token")
        return subject


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def require_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
) -> str:
    """
    Access guard for write endpoints. Admits the request only when it
    carries a valid ``Authorization: Bearer <token>`` header, and records
    the token's subject on ``request.state.user_id``.
    """
    if credentials is None:
        logger.debug("Rejected %s %s: no bearer token", request.method, request.url.path)
        raise UnauthorizedError("Missing bearer token")

    try:
        user_id = tokens.decode(credentials.credentials)
    except InvalidTokenError as exc:
        logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.message)
        raise

    request.state.user_id = user_id
    return user_id
