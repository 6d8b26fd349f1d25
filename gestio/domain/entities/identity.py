"""Authenticated caller identity and session."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Identity:
    """The authenticated user as seen by the record store."""

    id: str
    email: Optional[str] = None
    full_name: Optional[str] = None


@dataclass
class Session:
    """An access/refresh token pair issued by the auth provider."""

    access_token: str
    user: Identity
    refresh_token: Optional[str] = None
    expires_at: Optional[datetime] = None
    token_type: str = field(default="bearer")

    def to_dict(self) -> dict:
        return {
            "access_token": self.access_token,
            "refresh_token": self.refresh_token,
            "token_type": self.token_type,
            "expires_at": self.expires_at.isoformat() if self.expires_at else None,
            "user": {
                "id": self.user.id,
                "email": self.user.email,
                "full_name": self.user.full_name,
            },
        }
