"""
Auth Controller - login, registration and logout.

This controller handles:
- Running the login/register flows through AuthService
- Keeping the issued tokens and user in the session
- Inline success/error messages for the auth forms
"""

import streamlit as st
from typing import Optional

from config.auth import (
    UserContext,
    store_tokens,
    set_current_user,
    get_access_token,
    logout as clear_session,
)
from services.api_client import ApiClient
from services.auth_service import AuthService, passwords_mismatch


class AuthController:
    """Controller for authentication pages."""

    def __init__(self, service: Optional[AuthService] = None):
        self.service = service or AuthService(ApiClient(token_provider=get_access_token))
        self._init_session_state()

    def _init_session_state(self):
        """Initialize session state if not already set."""
        if "auth_forms" not in st.session_state:
            st.session_state.auth_forms = {
                "ok": None,
                "err": None,
            }

    # ==========================================
    # Messages
    # ==========================================

    def get_ok_message(self) -> Optional[str]:
        return st.session_state.auth_forms["ok"]

    def get_error_message(self) -> Optional[str]:
        return st.session_state.auth_forms["err"]

    def clear_messages(self):
        st.session_state.auth_forms["ok"] = None
        st.session_state.auth_forms["err"] = None

    # ==========================================
    # Flows
    # ==========================================

    def login(self, identifier: str, password: str) -> bool:
        """
        Log in and keep the session tokens.

        Returns:
            True on success (the caller redirects to the dashboard)
        """
        self.clear_messages()
        result = self.service.login(identifier, password)

        if not result.success:
            st.session_state.auth_forms["err"] = result.error
            return False

        store_tokens(result.tokens.access, result.tokens.refresh)
        set_current_user(UserContext(
            user_id=result.user.id,
            username=result.user.username,
            email=result.user.email,
        ))
        st.session_state.auth_forms["ok"] = result.message
        return True

    def register(
        self,
        username: str,
        email: str,
        password: str,
        password_confirm: str,
    ) -> bool:
        """
        Create an account.

        Returns:
            True on success (the caller redirects to the payment page)
        """
        self.clear_messages()
        result = self.service.register(username, email, password, password_confirm)

        if not result.success:
            st.session_state.auth_forms["err"] = result.error
            return False

        st.session_state.auth_forms["ok"] = result.message
        return True

    def passwords_mismatch(self, password: str, password_confirm: str) -> bool:
        return passwords_mismatch(password, password_confirm)

    def logout(self):
        """End the session."""
        self.clear_messages()
        clear_session()
