"""
Authentication records returned by /auth/login/ and /auth/me/.
"""

from typing import Optional

from pydantic import BaseModel


class AuthTokens(BaseModel):
    """JWT pair issued on login."""
    access: str
    refresh: Optional[str] = None


class UserProfile(BaseModel):
    """The logged-in user as returned by GET /auth/me/."""
    id: int
    username: str
    email: Optional[str] = None
