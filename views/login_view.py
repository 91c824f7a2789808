"""
Login View - sign in with username or email.
"""

import time
import streamlit as st

from config.auth import is_authenticated, get_user_display_name
from config.navigation import ORDERS_PAGE, REGISTER_PAGE
from controllers.auth_controller import AuthController
from views.components.branding import render_branding
from views.components.messages import render_form_messages

# Seconds the welcome message stays on screen before redirecting
REDIRECT_DELAY = 0.8


class LoginView:
    """View for the login page."""

    def __init__(self):
        self.controller = AuthController()

    def render(self):
        """Main render method."""
        col_brand, col_form = st.columns([1, 1], gap="large")

        with col_brand:
            render_branding("Inicia sesión para gestionar tus servicios.")

        with col_form:
            st.header("Iniciar sesión")
            st.caption("Accede a tu cuenta de Atgest.")

            if is_authenticated():
                self._render_already_logged_in()
                return

            self._render_form()
            self._render_links()

    def _render_already_logged_in(self):
        st.success(f"Sesión iniciada como {get_user_display_name()}.")
        col_go, col_logout = st.columns(2)
        with col_go:
            if st.button("Ir al panel", type="primary", use_container_width=True):
                st.switch_page(ORDERS_PAGE)
        with col_logout:
            if st.button("Cerrar sesión", use_container_width=True):
                self.controller.logout()
                st.rerun()

    def _render_form(self):
        render_form_messages(
            self.controller.get_ok_message(),
            self.controller.get_error_message(),
        )

        with st.form("login_form"):
            identifier = st.text_input("Usuario o Email", placeholder="tu usuario o tu@correo.com")
            password = st.text_input("Contraseña", type="password", placeholder="********")
            submitted = st.form_submit_button("Ingresar", type="primary", use_container_width=True)

        if submitted:
            with st.spinner("Ingresando..."):
                success = self.controller.login(identifier, password)

            if success:
                st.success(self.controller.get_ok_message())
                self.controller.clear_messages()
                time.sleep(REDIRECT_DELAY)
                st.switch_page(ORDERS_PAGE)
            st.rerun()

    def _render_links(self):
        st.markdown("")
        if st.button("Crear una cuenta", use_container_width=True):
            self.controller.clear_messages()
            st.switch_page(REGISTER_PAGE)
        if st.button("Recuperar contraseña", use_container_width=True):
            st.info("La recuperación de contraseña estará disponible próximamente.")
