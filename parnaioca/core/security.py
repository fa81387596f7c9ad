"""
Password hashing, access tokens and session resolution.

The role claim is read from the user record once, when the token is issued.
Requests rebuild an immutable SessionContext from the token claims and never
look the role up again.
"""

from datetime import timedelta
from typing import Optional

import bcrypt
import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from parnaioca.core.config import settings
from parnaioca.models.base import utcnow
from parnaioca.models.user import User, UserRole
from parnaioca.schemas.user import SessionContext

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/login")


def get_password_hash(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"), hashed_password.encode("utf-8")
        )
    except ValueError:
        # Malformed hash in the store
        return False


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    expire = utcnow() + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def create_session_token(user: User, expires_delta: Optional[timedelta] = None) -> str:
    """Issue a token carrying the identity and role claims of ``user``."""
    return create_access_token(
        data={"sub": user.id, "email": user.email, "role": user.role.value},
        expires_delta=expires_delta,
    )


def decode_session_token(token: str) -> SessionContext:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = jwt.decode(
            token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM]
        )
        return SessionContext(
            user_id=payload["sub"],
            email=payload["email"],
            role=UserRole(payload["role"]),
        )
    except (jwt.PyJWTError, KeyError, ValueError):
        raise credentials_exception


async def get_session_context(token: str = Depends(oauth2_scheme)) -> SessionContext:
    return decode_session_token(token)
