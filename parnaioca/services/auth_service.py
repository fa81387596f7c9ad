import logging
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from parnaioca.core.exceptions import ConflictError, InactiveUserError
from parnaioca.core.security import (
    create_session_token,
    get_password_hash,
    verify_password,
)
from parnaioca.models.user import User
from parnaioca.schemas.user import LoginRequest, UserCreate

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_email(self, email: str) -> Optional[User]:
        result = await self.db.execute(
            select(User).where(User.email == email.strip().lower())
        )
        return result.scalar_one_or_none()

    async def authenticate_user(self, email: str, password: str) -> Optional[User]:
        user = await self.get_by_email(email)

        if not user:
            return None
        if not verify_password(password, user.hashed_password):
            return None
        return user

    async def login(self, login_data: LoginRequest) -> dict:
        user = await self.authenticate_user(login_data.email, login_data.password)
        if not user:
            logger.info(f"Failed login attempt for {login_data.email}")
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Incorrect email or password",
                headers={"WWW-Authenticate": "Bearer"},
            )

        if not user.is_active:
            raise InactiveUserError()

        # The role is read here once and travels inside the token
        access_token = create_session_token(user)
        logger.info(f"User {user.email} signed in as {user.role.value}")

        return {
            "access_token": access_token,
            "token_type": "bearer",
            "role": user.role,
        }

    async def create_user(self, user_data: UserCreate) -> User:
        email = user_data.email.lower()
        if await self.get_by_email(email):
            raise ConflictError("Email already registered", "User")

        db_user = User(
            email=email,
            full_name=user_data.full_name,
            hashed_password=get_password_hash(user_data.password),
            role=user_data.role,
            is_active=user_data.is_active,
        )

        self.db.add(db_user)
        await self.db.commit()
        await self.db.refresh(db_user)
        return db_user
