"""
Pay View - initial subscription checkout with PayPal.

The buyer leaves the app to approve the payment on paypal.com and comes
back to this page; the controller captures the order on return.
"""

import time
import streamlit as st

from config.navigation import LOGIN_PAGE
from controllers.payment_controller import PaymentController
from views.components.messages import render_banner

# Seconds the success banner stays on screen before going to login
REDIRECT_DELAY = 3.0


class PayView:
    """View for the subscription payment page."""

    def __init__(self):
        self.controller = PaymentController()

    def render(self):
        """Main render method."""
        params = st.query_params.to_dict()
        if params.get("token"):
            with st.spinner("Confirmando pago..."):
                self.controller.handle_return(params)
            st.query_params.clear()

        render_banner(self.controller.get_banner())

        _, col_card, _ = st.columns([1, 2, 1])
        with col_card:
            with st.container(border=True):
                st.subheader("Pagar con PayPal")
                st.markdown(self.controller.get_description())
                st.metric("Total", self.controller.get_amount_label())

                if self.controller.payment_completed():
                    self._render_receipt()
                    time.sleep(REDIRECT_DELAY)
                    self.controller.clear_banner()
                    st.switch_page(LOGIN_PAGE)
                else:
                    self._render_checkout()

    def _render_checkout(self):
        if not self.controller.is_configured():
            st.warning("PayPal no está configurado.")
            st.caption("Define PAYPAL_CLIENT_ID y PAYPAL_CLIENT_SECRET en el entorno.")
            return

        approve_url = self.controller.get_approve_url()
        if approve_url:
            st.link_button("Continuar en PayPal", approve_url, type="primary", use_container_width=True)
            st.caption("Serás dirigido a PayPal para aprobar el pago.")
            return

        if st.button("Pagar con PayPal", type="primary", use_container_width=True):
            with st.spinner("Conectando con PayPal..."):
                self.controller.start_checkout()
            st.rerun()

    def _render_receipt(self):
        payment = self.controller.get_last_payment() or {}
        st.caption(f"Orden PayPal: {payment.get('id', '-')}")
