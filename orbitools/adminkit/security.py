"""
Security Module - Nonces and Capabilities

Request verification for admin saves: a nonce proves the request came from
a rendered admin page, a capability check proves the user may save it.

Usage:
    nonces = NonceManager()
    token = nonces.create("orbitools_adminkit_orbitools")
    nonces.verify(token, "orbitools_adminkit_orbitools")   # True

    user = User(user_id="1", capabilities={"manage_options"})
    user.can("manage_options")                             # True
"""

import secrets
from datetime import datetime, timedelta
from typing import Callable, Dict, Optional, Set

from pydantic import BaseModel, Field

from config.constants import NONCE_ACTION_PREFIX, NONCE_LIFETIME_HOURS


class User(BaseModel):
    """Current user as seen by the admin framework"""
    user_id: str = "0"
    username: str = "guest"
    capabilities: Set[str] = Field(default_factory=set)

    def can(self, capability: str) -> bool:
        return capability in self.capabilities


class NonceInfo(BaseModel):
    """Issued nonce"""
    token: str
    action: str
    created_at: datetime
    expires_at: datetime


def nonce_action(slug: str) -> str:
    return f"{NONCE_ACTION_PREFIX}{slug}"


class NonceManager:
    """
    Issues and verifies per-action tokens.

    Tokens stay valid until they expire, so one rendered page can submit
    several times.
    """

    def __init__(
        self,
        lifetime_hours: int = NONCE_LIFETIME_HOURS,
        now: Callable[[], datetime] = datetime.now,
    ):
        self.lifetime_hours = lifetime_hours
        self._now = now
        self.nonces: Dict[str, NonceInfo] = {}

    def create(self, action: str) -> str:
        """Create a nonce for an action and return its token"""
        token = secrets.token_urlsafe(16)
        now = self._now()
        self.nonces[token] = NonceInfo(
            token=token,
            action=action,
            created_at=now,
            expires_at=now + timedelta(hours=self.lifetime_hours),
        )
        self._cleanup_expired()
        return token

    def verify(self, token: Optional[str], action: str) -> bool:
        if not token or token not in self.nonces:
            return False

        info = self.nonces[token]
        if self._now() > info.expires_at:
            del self.nonces[token]
            return False

        return secrets.compare_digest(info.action, action)

    def invalidate(self, token: str) -> None:
        self.nonces.pop(token, None)

    def _cleanup_expired(self) -> None:
        now = self._now()
        expired = [t for t, info in self.nonces.items() if now > info.expires_at]
        for token in expired:
            del self.nonces[token]
