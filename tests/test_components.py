"""
Tests for shared view components.
"""

from __future__ import annotations

from unittest.mock import MagicMock, patch

from config.navigation import LOGIN_PAGE
from views.components.navbar import render_navbar


def test_logout_goes_to_login_page() -> None:
    on_logout = MagicMock()

    with patch("views.components.navbar.st") as st:
        st.columns.return_value = (MagicMock(), MagicMock(), MagicMock())
        st.button.return_value = True

        render_navbar("Órdenes", "juan", on_logout=on_logout)

    on_logout.assert_called_once_with()
    st.switch_page.assert_called_once_with(LOGIN_PAGE)


def test_navbar_without_click_keeps_session() -> None:
    on_logout = MagicMock()

    with patch("views.components.navbar.st") as st:
        st.columns.return_value = (MagicMock(), MagicMock(), MagicMock())
        st.button.return_value = False

        render_navbar("Inventario", "juan", on_logout=on_logout)

    on_logout.assert_not_called()
    st.switch_page.assert_not_called()
