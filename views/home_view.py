"""
Home View - public landing page for Atgest.

Displays the product pitch, benefits, plans, support contacts and an
interest form, with entry points to login and registration.
"""

from datetime import date

import streamlit as st

from config.navigation import LOGIN_PAGE, REGISTER_PAGE
from controllers.home_controller import HomeController


class HomeView:
    """View for the home/landing page."""

    def __init__(self):
        self.controller = HomeController()

    def render(self) -> None:
        """Render the home page."""
        self._render_navbar()
        self._render_hero()

        st.markdown("---")
        self._render_benefits()

        st.markdown("---")
        self._render_plans()

        st.markdown("---")
        col_support, col_form = st.columns(2, gap="large")
        with col_support:
            self._render_support()
        with col_form:
            self._render_lead_form()

        st.markdown("---")
        self._render_footer()

    def _render_navbar(self) -> None:
        """Logo and the login/register buttons."""
        col_logo, col_login, col_register = st.columns([6, 1, 1])

        with col_logo:
            st.markdown("### AtGest")
        with col_login:
            if st.button("Ingresar", type="primary", use_container_width=True):
                st.switch_page(LOGIN_PAGE)
        with col_register:
            if st.button("Registrar", use_container_width=True):
                st.switch_page(REGISTER_PAGE)

    def _render_hero(self) -> None:
        """Headline and feature cards."""
        col_text, col_cards = st.columns([3, 2], gap="large")

        with col_text:
            st.title("Software de gestión para talleres automotrices")
            st.markdown(
                "Aumenta la rentabilidad centralizando y administrando todos los "
                "servicios de tu taller en una sola plataforma digital."
            )
            st.markdown("""
            - ✅ Financiamiento y simulaciones.
            - ✅ Transferencia de dominio digital.
            - ✅ Seguro automotriz y más servicios integrados.
            """)
            if st.button("Ir al software →", type="primary"):
                st.switch_page(LOGIN_PAGE)

        with col_cards:
            for line1, line2 in [
                ("Informe vehicular", "Historial de servicios"),
                ("Crédito automotriz", "Cálculo automático"),
                ("Servicios", "Pagos y comisiones"),
            ]:
                with st.container(border=True):
                    st.caption("AtGest")
                    st.markdown(f"**{line1}**")
                    st.caption(line2)

    def _render_benefits(self) -> None:
        st.header("¿Por qué usar nuestra plataforma?")
        st.markdown("""
        - ✅ Ahorras tiempo gestionando tus servicios de manera autónoma.
        - ✅ Paga servicios mediante billetera digital.
        - ✅ Haz seguimiento a clientes y órdenes.
        - ✅ Controla comisiones y márgenes del negocio.
        """)

    def _render_plans(self) -> None:
        st.header("Añade un plus a tu proceso")
        st.caption("Sin cambiar tus planes actuales.")

        col_starter, col_growth = st.columns(2)

        with col_starter:
            with st.container(border=True):
                st.subheader("Starter")
                st.markdown("**Sin costo**")
                st.caption("Inicia con lo básico para operar y administrar tu negocio.")
                st.markdown("""
                - ✅ Gestión de servicios integrados (créditos, seguros, trámites).
                - ✅ Notificaciones y seguimiento de leads.
                - ✅ Simulaciones rápidas por WhatsApp.
                - ✅ Transferencia de dominio digital.
                - ✅ Pagos con tarjeta y conciliación simple.
                """)
                if st.button("Comenzar", key="plan_starter", use_container_width=True):
                    st.switch_page(REGISTER_PAGE)

        with col_growth:
            with st.container(border=True):
                st.subheader("Growth")
                st.markdown("**6 UF** · :orange[Próximamente]")
                st.caption("Todo lo del plan Starter + servicios premium.")
                st.markdown("""
                - ✅ Integración con CRM y perfiles de usuario.
                - ✅ Reportes avanzados de ventas y comisiones.
                - ✅ Publicidad y sitio web personalizado.
                - ✅ Clientes con crédito preaprobado.
                """)
                st.button("Más información", key="plan_growth", disabled=True, use_container_width=True)

    def _render_support(self) -> None:
        st.header("¿Necesitas ayuda?")
        st.markdown(
            "Horario de atención telefónica: Lunes a Viernes 09:00–18:30, "
            "Sábados 10:00–14:00."
        )
        st.markdown("""
        - 📞 Teléfono: +56 9 1234 5678
        - ✉️ contacto@taller.cl
        - 💬 Escríbenos por WhatsApp
        """)

    def _render_lead_form(self) -> None:
        """Interest form; replaced by a thank-you note once sent."""
        st.header("Me interesa")

        if self.controller.is_sent():
            st.success("¡Gracias! Te contactaremos pronto.")
            if st.button("Enviar otra solicitud"):
                self.controller.reset()
                st.rerun()
            return

        error = self.controller.get_error()
        if error:
            st.error(error)

        with st.form("lead_form", clear_on_submit=True):
            name = st.text_input("Nombre")
            email = st.text_input("Email")
            phone = st.text_input("Teléfono (opcional)")
            submitted = st.form_submit_button("Enviar", type="primary")

        if submitted:
            with st.spinner("Enviando..."):
                self.controller.submit_lead(name, email, phone)
            st.rerun()

    def _render_footer(self) -> None:
        col_services, col_company, col_help = st.columns(3)

        with col_services:
            st.markdown("**Servicios**")
            st.caption("Informe historial · Inspección mecánica · Pago seguro · Transferencia digital")
        with col_company:
            st.markdown("**AtGest**")
            st.caption("Soluciones · Ir al software")
        with col_help:
            st.markdown("**Ayuda**")
            st.caption("Preguntas frecuentes · Contacto · Términos y condiciones")

        st.caption(f"© {date.today().year} AtGest. Todos los derechos reservados.")
