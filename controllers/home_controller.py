"""
Home Controller - landing page interest ("lead") form.
"""

import logging
import streamlit as st
from typing import Optional

from services.auth_service import EMAIL_PATTERN

logger = logging.getLogger(__name__)


class HomeController:
    """Controller for the landing page."""

    def __init__(self):
        self._init_session_state()

    def _init_session_state(self):
        """Initialize session state if not already set."""
        if "lead" not in st.session_state:
            st.session_state.lead = {"sent": False, "error": None}

    def is_sent(self) -> bool:
        return st.session_state.lead["sent"]

    def get_error(self) -> Optional[str]:
        return st.session_state.lead["error"]

    def submit_lead(self, name: str, email: str, phone: str = "") -> bool:
        """Record that a visitor wants to be contacted."""
        if not name.strip():
            st.session_state.lead["error"] = "Ingresa tu nombre."
            return False
        if not EMAIL_PATTERN.search(email.strip()):
            st.session_state.lead["error"] = "Email inválido."
            return False

        logger.info(f"New lead from {name.strip()}")
        st.session_state.lead = {"sent": True, "error": None}
        return True

    def reset(self):
        st.session_state.lead = {"sent": False, "error": None}
