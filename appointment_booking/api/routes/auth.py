from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import Optional

from ...core.database import get_db
from ...core.security import SessionRegistry
from ...api.deps import get_bearer_token, get_session_registry
from ...services.auth_service import AuthService
from ...schemas.auth import MessageResponse, TokenResponse, UserLogin, UserRegister

router = APIRouter(tags=["Authentication"])

@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserRegister,
    db: Session = Depends(get_db),
    sessions: SessionRegistry = Depends(get_session_registry),
):
    """Register a new user."""
    AuthService(db, sessions).register_user(user_data)
    return MessageResponse(message="User registered successfully")

@router.post("/login", response_model=TokenResponse)
def login(
    login_data: UserLogin,
    db: Session = Depends(get_db),
    sessions: SessionRegistry = Depends(get_session_registry),
):
    """Authenticate user and return a bearer token."""
    token = AuthService(db, sessions).authenticate_user(login_data)
    return TokenResponse(message="Login successful", token=token)

@router.post("/logout", response_model=MessageResponse)
def logout(
    token: Optional[str] = Depends(get_bearer_token),
    db: Session = Depends(get_db),
    sessions: SessionRegistry = Depends(get_session_registry),
):
    """Revoke the caller's token; unknown or missing tokens are a no-op."""
    username = AuthService(db, sessions).logout_user(token)
    if username is None:
        return MessageResponse(message="No active session or already logged out")
    return MessageResponse(message="Logged out successfully")
