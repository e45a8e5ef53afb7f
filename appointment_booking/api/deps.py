from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials
from typing import Optional

from ..core.exceptions import AuthError
from ..core.security import SessionRegistry, security

def get_session_registry(request: Request) -> SessionRegistry:
    """Session registry owned by the running application."""
    return request.app.state.sessions

async def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> Optional[str]:
    """Extract the bearer token from the Authorization header, if any."""
    if credentials is None:
        return None
    return credentials.credentials

async def get_current_username(
    token: Optional[str] = Depends(get_bearer_token),
    sessions: SessionRegistry = Depends(get_session_registry),
) -> str:
    """Resolve the caller's username or reject the request with 401."""
    username = sessions.validate(token)
    if username is None:
        raise AuthError()
    return username
