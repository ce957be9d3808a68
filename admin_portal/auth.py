"""
Authentication utilities: signed tokens, token digests and password hashing.
"""
import hashlib
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Optional
from jose import JWTError, jwt
from passlib.context import CryptContext
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from .database import get_db
from .models.user import User
from .config import Settings, get_settings
from .services.exceptions import UnauthorizedError

SESSION_TOKEN = "session"
ONE_TIME_TOKEN = "one_time"

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """Verify a password against its hash. Accounts without a password never match."""
    if not hashed_password:
        return False
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password for storage."""
    return pwd_context.hash(password)


def hash_token(token: str) -> str:
    """SHA-256 hex digest used to store and look up one-time tokens."""
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


@dataclass
class TokenVerification:
    valid: bool
    claims: Optional[dict] = None
    error: Optional[str] = None

    @property
    def user_id(self) -> Optional[str]:
        return self.claims.get("sub") if self.claims else None


class TokenService:
    """Issues and verifies HS256 tokens with the configured signing key."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def _encode(self, claims: dict, expires_delta: timedelta) -> str:
        to_encode = claims.copy()
        to_encode["exp"] = datetime.now(timezone.utc) + expires_delta
        return jwt.encode(to_encode, self.settings.secret_key, algorithm=self.settings.algorithm)

    def issue_session_token(self, user_id: str, expires_delta: Optional[timedelta] = None) -> str:
        """Bearer credential carried in the session cookie."""
        if expires_delta is None:
            expires_delta = timedelta(hours=self.settings.session_token_expire_hours)
        return self._encode({"sub": str(user_id), "type": SESSION_TOKEN}, expires_delta)

    def issue_one_time_token(self, user_id: str, expires_delta: Optional[timedelta] = None) -> str:
        """Invite/reset token. The random jti makes every link unique."""
        if expires_delta is None:
            expires_delta = timedelta(hours=self.settings.one_time_token_expire_hours)
        claims = {"sub": str(user_id), "jti": secrets.token_hex(16), "type": ONE_TIME_TOKEN}
        return self._encode(claims, expires_delta)

    def verify_token(self, token: str) -> TokenVerification:
        """
        Check signature and expiry only.

        Bad signatures, malformed tokens and expired tokens all come back
        as the same invalid result.
        """
        try:
            claims = jwt.decode(token, self.settings.secret_key, algorithms=[self.settings.algorithm])
        except JWTError:
            return TokenVerification(valid=False, error="invalid_token")
        if not claims.get("sub"):
            return TokenVerification(valid=False, error="invalid_token")
        return TokenVerification(valid=True, claims=claims)


@lru_cache()
def get_token_service() -> TokenService:
    return TokenService(get_settings())


def get_current_user(
    request: Request,
    db: Session = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
) -> Optional[User]:
    """Resolve the user behind the session cookie (optional auth)."""
    token = request.cookies.get(tokens.settings.session_cookie_name)
    if not token:
        return None

    result = tokens.verify_token(token)
    if not result.valid or result.claims.get("type") != SESSION_TOKEN:
        return None

    user = db.query(User).filter(User.id == result.user_id).first()
    if user is None or user.status == "disabled":
        return None
    return user


def get_required_user(
    current_user: Optional[User] = Depends(get_current_user)
) -> User:
    """Get the current user, raising 401 if not authenticated."""
    if not current_user:
        raise UnauthorizedError("Not authenticated")
    return current_user
