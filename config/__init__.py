"""
Config Package - Application configuration, logging and session auth.
"""

from config.settings import Settings, get_settings
from config.logger import setup_logging
from config.auth import (
    UserContext,
    store_tokens,
    get_access_token,
    get_current_user,
    set_current_user,
    require_auth,
    logout,
    get_user_display_name,
    is_authenticated,
)

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    # Logging
    "setup_logging",
    # Authentication
    "UserContext",
    "store_tokens",
    "get_access_token",
    "get_current_user",
    "set_current_user",
    "require_auth",
    "logout",
    "get_user_display_name",
    "is_authenticated",
]
