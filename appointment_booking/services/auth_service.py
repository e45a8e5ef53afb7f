from sqlalchemy.orm import Session
from typing import Optional
import logging

from ..core.database import commit_or_raise
from ..core.exceptions import AuthError, ConflictError, BadRequestError
from ..core.security import SessionRegistry, get_password_hash, verify_password
from ..models.activity import ActivityAction
from ..models.user import User
from ..schemas.auth import UserLogin, UserRegister
from .activity_log import ActivityLog

logger = logging.getLogger(__name__)

class AuthService:
    def __init__(self, db: Session, sessions: SessionRegistry):
        self.db = db
        self.sessions = sessions
        self.activity = ActivityLog(db)

    def register_user(self, user_data: UserRegister) -> User:
        """Register a new user."""
        if not user_data.username or not user_data.password or not user_data.fullname:
            raise BadRequestError("Username, password, and full name are required")

        # Check if user already exists
        if self.get_user(user_data.username):
            raise ConflictError("Username already exists")

        new_user = User(
            username=user_data.username,
            password_hash=get_password_hash(user_data.password),
            full_name=user_data.fullname,
        )
        self.db.add(new_user)
        self.activity.append(
            user_data.username,
            ActivityAction.USER_REGISTERED,
            f"User '{user_data.username}' ({user_data.fullname}) registered.",
            commit=False,
        )

        # A concurrent registration of the same name trips the unique constraint
        commit_or_raise(self.db, on_conflict=ConflictError("Username already exists"))
        self.db.refresh(new_user)

        logger.info(f"Registered user '{new_user.username}'")
        return new_user

    def authenticate_user(self, login_data: UserLogin) -> str:
        """Check credentials and return a fresh bearer token."""
        if not login_data.username or not login_data.password:
            raise BadRequestError("Username and password are required")

        user = self.get_user(login_data.username)
        if not user or not verify_password(login_data.password, user.password_hash):
            self.activity.append(
                login_data.username,
                ActivityAction.LOGIN_FAILED,
                f"Failed login attempt for user '{login_data.username}'.",
            )
            raise AuthError("Invalid username or password")

        self.activity.append(
            user.username,
            ActivityAction.USER_LOGIN,
            f"User '{user.username}' logged in successfully.",
        )
        return self.sessions.issue(user.username)

    def logout_user(self, token: Optional[str]) -> Optional[str]:
        """Revoke ``token``; returns the user it belonged to, or None if it was unknown."""
        username = self.sessions.validate(token)
        if username is None:
            return None

        self.activity.append(
            username,
            ActivityAction.USER_LOGOUT,
            f"User '{username}' logged out.",
        )
        return self.sessions.revoke(token)

    def get_user(self, username: str) -> Optional[User]:
        return self.db.query(User).filter(User.username == username).first()
