from typing import Dict, Optional
from passlib.context import CryptContext
from fastapi.security import HTTPBearer
import logging
import secrets
import threading

from .config import settings

logger = logging.getLogger(__name__)

# Password hashing: salted PBKDF2-SHA512, 16-byte salt, 64-byte derived key
pwd_context = CryptContext(
    schemes=["pbkdf2_sha512"],
    deprecated="auto",
    pbkdf2_sha512__default_rounds=max(settings.PASSWORD_HASH_ROUNDS, 1000),
)

# Bearer token extraction; a missing header is handled by the caller
security = HTTPBearer(auto_error=False)

# Password utilities
def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """Verify a plain password against its hash, failing closed on malformed hashes."""
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        logger.warning("Stored password hash is malformed; rejecting credentials")
        return False

def get_password_hash(password: str) -> str:
    """Generate password hash."""
    return pwd_context.hash(password)

def generate_session_token() -> str:
    """Generate an opaque hex bearer token."""
    return secrets.token_hex(settings.SESSION_TOKEN_BYTES)


class SessionRegistry:
    """
    In-memory map of bearer tokens to usernames.

    Tokens live until they are revoked or the process exits; nothing is
    persisted, so a restart logs every user out. A user may hold any number
    of tokens at once.
    """

    def __init__(self) -> None:
        self._tokens: Dict[str, str] = {}
        self._lock = threading.Lock()

    def issue(self, username: str) -> str:
        token = generate_session_token()
        with self._lock:
            while token in self._tokens:
                token = generate_session_token()
            self._tokens[token] = username
        return token

    def validate(self, token: Optional[str]) -> Optional[str]:
        if not token:
            return None
        return self._tokens.get(token)

    def revoke(self, token: Optional[str]) -> Optional[str]:
        if not token:
            return None
        with self._lock:
            return self._tokens.pop(token, None)

    def __len__(self) -> int:
        return len(self._tokens)
