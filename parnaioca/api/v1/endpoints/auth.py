from fastapi import APIRouter

from parnaioca.core.common_deps import AdminSessionDep, AuthServiceDep, SessionDep
from parnaioca.schemas.responses import (
    MessageResponse,
    SessionResponse,
    UserRegistrationResponse,
)
from parnaioca.schemas.user import LoginRequest, Token, UserCreate

router = APIRouter()


@router.post("/login", response_model=Token)
async def login(login_data: LoginRequest, service: AuthServiceDep):
    return await service.login(login_data)


@router.post("/register", response_model=UserRegistrationResponse)
async def register(
    user_data: UserCreate,
    service: AuthServiceDep,
    session: AdminSessionDep,
):
    new_user = await service.create_user(user_data)
    return UserRegistrationResponse(
        message="User created successfully", user_id=new_user.id
    )


@router.get("/me", response_model=SessionResponse)
async def get_current_session(session: SessionDep):
    return SessionResponse(
        user_id=session.user_id,
        email=session.email,
        role=session.role,
        is_admin=session.is_admin,
    )


@router.post("/logout", response_model=MessageResponse)
async def logout(session: SessionDep):
    # Tokens are stateless; the client drops its copy
    return MessageResponse(message="Signed out successfully")
