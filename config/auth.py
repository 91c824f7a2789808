"""
Session Authentication Utilities

Keeps the JWT pair issued by the backend in the Streamlit session.
Each browser tab gets its own session, so tokens never leave the server
process and disappear when the session ends.

Session layout (st.session_state["auth"]):
- access: JWT access token sent as "Authorization: Bearer <access>"
- refresh: JWT refresh token returned by /auth/login/
- user: UserContext loaded from /auth/me/
"""

import logging
import streamlit as st
from dataclasses import dataclass
from typing import Optional

from config.navigation import LOGIN_PAGE

logger = logging.getLogger(__name__)


@dataclass
class UserContext:
    """Represents the authenticated user."""
    user_id: int
    username: str
    email: Optional[str] = None


def _auth_state() -> dict:
    """Get (and lazily create) the auth entry of the session."""
    if "auth" not in st.session_state:
        st.session_state.auth = {"access": None, "refresh": None, "user": None}
    return st.session_state.auth


def store_tokens(access: str, refresh: Optional[str]) -> None:
    """Save the token pair returned by a successful login."""
    state = _auth_state()
    state["access"] = access
    state["refresh"] = refresh


def get_access_token() -> Optional[str]:
    """Return the current access token, if any."""
    return _auth_state().get("access")


def get_refresh_token() -> Optional[str]:
    """Return the current refresh token, if any."""
    return _auth_state().get("refresh")


def set_current_user(user: Optional[UserContext]) -> None:
    """Remember who is logged in."""
    _auth_state()["user"] = user


def get_current_user() -> Optional[UserContext]:
    """Return the logged-in user, or None."""
    return _auth_state().get("user")


def is_authenticated() -> bool:
    """Check if the session holds an access token."""
    return bool(get_access_token())


def logout() -> None:
    """Forget the tokens and user of this session."""
    user = get_current_user()
    st.session_state.auth = {"access": None, "refresh": None, "user": None}
    if user:
        logger.info(f"User {user.username} logged out")


def require_auth() -> Optional[UserContext]:
    """
    Require authentication - stops execution if not authenticated.

    Use this at the top of pages that call the protected API.

    Returns:
        UserContext for the authenticated user (None if the token was
        stored but the profile could not be loaded)

    Raises:
        st.stop() if not authenticated
    """
    if not is_authenticated():
        st.warning("Inicia sesión para acceder a esta sección.")
        if st.button("Ir a iniciar sesión", type="primary"):
            st.switch_page(LOGIN_PAGE)
        st.stop()

    return get_current_user()


def get_user_display_name() -> str:
    """Get the current user's name, or 'Invitado' if not authenticated."""
    user = get_current_user()
    return user.username if user else "Invitado"
