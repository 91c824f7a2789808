"""
Register View - create an account, then continue to the subscription payment.
"""

import time
import streamlit as st

from config.navigation import LOGIN_PAGE, PAY_PAGE
from controllers.auth_controller import AuthController
from services.auth_service import MIN_PASSWORD_LENGTH
from views.components.branding import render_branding
from views.components.messages import render_form_messages

# Seconds the confirmation stays on screen before redirecting
REDIRECT_DELAY = 1.0


class RegisterView:
    """View for the registration page."""

    def __init__(self):
        self.controller = AuthController()

    def render(self):
        """Main render method."""
        col_brand, col_form = st.columns([1, 1], gap="large")

        with col_brand:
            render_branding("Gestión automotriz moderna para talleres y servicios especializados.")

        with col_form:
            st.header("Crear cuenta")
            st.caption("Regístrate para comenzar a usar Atgest.")
            self._render_form()
            self._render_links()

    def _render_form(self):
        render_form_messages(
            self.controller.get_ok_message(),
            self.controller.get_error_message(),
        )

        # Not inside st.form: the mismatch hint updates as the user types
        username = st.text_input("Usuario", placeholder="Ej. Juan", key="register_username")
        email = st.text_input("Correo electrónico", placeholder="tucorreo@ejemplo.com", key="register_email")
        password = st.text_input(
            "Contraseña",
            type="password",
            placeholder="********",
            help=f"Mínimo {MIN_PASSWORD_LENGTH} caracteres.",
            key="register_password",
        )
        password_confirm = st.text_input(
            "Confirmar contraseña",
            type="password",
            placeholder="********",
            key="register_password_confirm",
        )
        if self.controller.passwords_mismatch(password, password_confirm):
            st.caption(":red[Las contraseñas no coinciden.]")

        if st.button("Crear cuenta", type="primary", use_container_width=True):
            with st.spinner("Registrando..."):
                success = self.controller.register(username, email, password, password_confirm)

            if success:
                st.success(self.controller.get_ok_message())
                self.controller.clear_messages()
                for key in ("register_username", "register_email", "register_password", "register_password_confirm"):
                    st.session_state.pop(key, None)
                time.sleep(REDIRECT_DELAY)
                st.switch_page(PAY_PAGE)
            st.rerun()

    def _render_links(self):
        st.markdown("")
        if st.button("Ya tengo cuenta (Ingresar)", use_container_width=True):
            self.controller.clear_messages()
            st.switch_page(LOGIN_PAGE)
        if st.button("Recuperar contraseña", use_container_width=True):
            st.info("Aquí iría 'Recuperar contraseña' (placeholder).")
