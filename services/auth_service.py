"""
Auth Service - login and registration against the Atgest backend.

Endpoints used:
- POST /auth/login/ - exchange identifier (username or email) + password for a JWT pair
- GET /auth/me/ - profile of the token owner
- POST /register/ - create an account

This service is pure Python with no Streamlit dependencies; the caller
decides where the returned tokens are kept.
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional

from models.user import AuthTokens, UserProfile
from services.api_client import ApiClient, ApiError

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8
EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")


@dataclass
class LoginResult:
    """Result of a login attempt."""
    success: bool
    tokens: Optional[AuthTokens] = None
    user: Optional[UserProfile] = None
    message: Optional[str] = None
    error: Optional[str] = None


@dataclass
class RegisterResult:
    """Result of a registration attempt."""
    success: bool
    message: Optional[str] = None
    error: Optional[str] = None


def validate_login(identifier: str, password: str) -> Optional[str]:
    """Return the first problem with the login form, or None."""
    if not identifier.strip():
        return "Usuario o email es obligatorio."
    if len(password) < 1:
        return "Ingresa tu contraseña."
    return None


def validate_registration(
    username: str,
    email: str,
    password: str,
    password_confirm: str,
) -> Optional[str]:
    """Return the first problem with the registration form, or None."""
    if not username.strip():
        return "El nombre de usuario es obligatorio."
    if not email.strip() or not EMAIL_PATTERN.search(email):
        return "Email inválido."
    if len(password) < MIN_PASSWORD_LENGTH:
        return f"La contraseña debe tener al menos {MIN_PASSWORD_LENGTH} caracteres."
    if password != password_confirm:
        return "Las contraseñas no coinciden. Verifica e inténtalo de nuevo."
    return None


def passwords_mismatch(password: str, password_confirm: str) -> bool:
    """Both fields are filled in and differ (live hint under the form)."""
    return bool(password and password_confirm and password != password_confirm)


class AuthService:
    """Service for authentication flows."""

    def __init__(self, api: Optional[ApiClient] = None):
        self.api = api or ApiClient()

    def login(self, identifier: str, password: str) -> LoginResult:
        """
        Log in and load the user's profile.

        The profile request is sent with the freshly issued access token,
        independent of whatever token the session currently holds.

        Args:
            identifier: Username or email
            password: Plain password

        Returns:
            LoginResult with tokens and profile, or an error message
        """
        problem = validate_login(identifier, password)
        if problem:
            return LoginResult(success=False, error=problem)

        try:
            data = self.api.post(
                "/auth/login/",
                {"identifier": identifier, "password": password},
            )
            tokens = AuthTokens.model_validate(data or {})

            me_api = self.api.with_token(tokens.access)
            user = UserProfile.model_validate(me_api.get("/auth/me/") or {})

        except ApiError as e:
            if e.payload is not None:
                error = e.field_error("detail") or "Credenciales inválidas."
            else:
                error = "Error al iniciar sesión."
            logger.warning(f"Login failed for '{identifier}': {e.message}")
            return LoginResult(success=False, error=error)
        except ValueError as e:
            # Pydantic ValidationError: the backend answered with an unexpected shape
            logger.error(f"Unexpected login response: {e}")
            return LoginResult(success=False, error="Error al iniciar sesión.")

        logger.info(f"User {user.username} logged in")
        return LoginResult(
            success=True,
            tokens=tokens,
            user=user,
            message=f"¡Bienvenido, {user.username}!",
        )

    def register(
        self,
        username: str,
        email: str,
        password: str,
        password_confirm: str,
    ) -> RegisterResult:
        """Create an account. Returns the backend's confirmation message."""
        problem = validate_registration(username, email, password, password_confirm)
        if problem:
            return RegisterResult(success=False, error=problem)

        try:
            data = self.api.post(
                "/register/",
                {
                    "username": username,
                    "email": email,
                    "password": password,
                    "password_confirm": password_confirm,
                },
            )
        except ApiError as e:
            logger.warning(f"Registration failed for '{username}': {e.message}")
            error = e.field_error("password", "username", "email", "detail")
            return RegisterResult(success=False, error=error or "Error en el registro.")

        message = None
        if isinstance(data, dict):
            message = data.get("message")

        logger.info(f"User {username} registered")
        return RegisterResult(
            success=True,
            message=message or "Usuario registrado con éxito.",
        )
