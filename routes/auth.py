import logging

from fastapi import APIRouter, Depends, Response, status
from fastapi.concurrency import run_in_threadpool

from config import Settings
from dependencies import get_app_settings, get_user_store
from errors import InvalidCredentials, UserNotFound
from middleware.auth import Identity, require_user
from schemas import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    ProfileResponse,
    RegisterRequest,
    RegisterResponse,
    SessionUser,
    UserResponse,
)
from stores.users import UserStore
from utils.jwt import create_jwt

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    body: RegisterRequest,
    users: UserStore = Depends(get_user_store),
) -> RegisterResponse:
    """
    Register a new account

    Args:
        body: Registration data
        users: User store

    Returns:
        RegisterResponse with the created user
    """
    user = await run_in_threadpool(
        users.register, body.email, body.password, body.first_name, body.role
    )
    return RegisterResponse(
        message="User registered successfully",
        new_user=UserResponse.model_validate(user),
    )


@router.post("/login")
async def login(
    body: LoginRequest,
    response: Response,
    users: UserStore = Depends(get_user_store),
    settings: Settings = Depends(get_app_settings),
) -> LoginResponse:
    """
    Check credentials and set the session cookie

    Args:
        body: Login data
        response: Response used to attach the cookie
        users: User store
        settings: App settings

    Returns:
        LoginResponse with id, email and role
    """
    try:
        user = await run_in_threadpool(users.verify, body.email, body.password)
    except InvalidCredentials:
        logger.info("Login failed: invalid credentials")
        raise

    token = create_jwt(user.id, user.role, settings.jwt_secret, settings.token_ttl_seconds)
    response.set_cookie(
        key=settings.cookie_name,
        value=token,
        max_age=settings.token_ttl_seconds,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="strict",
    )

    logger.info(f"User {user.id} logged in")
    return LoginResponse(message="Login successful", user=SessionUser.model_validate(user))


@router.post("/logout")
async def logout(
    response: Response,
    settings: Settings = Depends(get_app_settings),
) -> MessageResponse:
    """Clear the session cookie; the token itself stays valid until it expires"""
    response.delete_cookie(
        key=settings.cookie_name,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="strict",
    )
    return MessageResponse(message="Logged out successfully")


@router.get("/profile")
async def profile(
    identity: Identity = Depends(require_user),
    users: UserStore = Depends(get_user_store),
) -> ProfileResponse:
    """Return the logged-in user"""
    user = users.find_by_id(identity.user_id)
    if not user:
        raise UserNotFound()
    return ProfileResponse(user=UserResponse.model_validate(user))
