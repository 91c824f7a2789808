"""
Payment Controller - subscription checkout after registration.

This controller handles:
- Creating the PayPal order and handing out the approval URL
- Processing the redirect back from PayPal (approve or cancel)
- The banner shown above the checkout card
- Keeping the last payment receipt in the session

PayPal appends ?token=<order id>&PayerID=... to the return URL, and
?token=<order id> to the cancel URL (ours also carries cancelled=1).
"""

import logging
import streamlit as st
from typing import Optional

from config.settings import get_settings
from services.payment_service import PayPalCheckout

logger = logging.getLogger(__name__)

PAY_PAGE_PATH = "Pay"

SUCCESS_TEXT = "Pago exitoso 🎉 Serás redirigido al inicio de sesión…"
CANCEL_TEXT = "Pago cancelado por el usuario."


class PaymentController:
    """Controller for the subscription checkout."""

    def __init__(self, checkout: Optional[PayPalCheckout] = None):
        self.settings = get_settings()
        self.checkout = checkout or PayPalCheckout(self.settings)
        self._init_session_state()

    def _init_session_state(self):
        """Initialize session state if not already set."""
        if "payment" not in st.session_state:
            st.session_state.payment = {
                "banner": None,  # {"type": "success"|"error"|"info", "text": str}
                "approve_url": None,
                "handled_token": None,  # order id already processed
                "last_payment": None,  # PayPal capture details
            }

    # ==========================================
    # Banner
    # ==========================================

    def get_banner(self) -> Optional[dict]:
        return st.session_state.payment["banner"]

    def notify(self, banner_type: str, text: str):
        st.session_state.payment["banner"] = {"type": banner_type, "text": text}

    def clear_banner(self):
        st.session_state.payment["banner"] = None

    def payment_completed(self) -> bool:
        banner = self.get_banner()
        return bool(banner and banner["type"] == "success")

    # ==========================================
    # Checkout
    # ==========================================

    def is_configured(self) -> bool:
        return self.checkout.is_configured()

    def get_amount_label(self) -> str:
        return f"{self.settings.subscription_amount} {self.settings.subscription_currency}"

    def get_description(self) -> str:
        return self.settings.subscription_description

    def _page_url(self) -> str:
        base_url = self.settings.app_base_url.rstrip("/")
        return f"{base_url}/{PAY_PAGE_PATH}"

    def start_checkout(self) -> Optional[str]:
        """Create the PayPal order; returns the approval URL or None."""
        page_url = self._page_url()
        result = self.checkout.create_checkout(
            return_url=page_url,
            cancel_url=f"{page_url}?cancelled=1",
        )
        if not result.success:
            self.notify("error", result.error)
            return None

        st.session_state.payment["approve_url"] = result.approve_url
        return result.approve_url

    def get_approve_url(self) -> Optional[str]:
        return st.session_state.payment["approve_url"]

    def handle_return(self, params: dict) -> None:
        """
        Process the query parameters PayPal redirected back with.

        Each order id is handled once per session, so reruns of the page
        do not capture twice.
        """
        order_id = params.get("token")
        if not order_id or st.session_state.payment["handled_token"] == order_id:
            return

        st.session_state.payment["handled_token"] = order_id
        st.session_state.payment["approve_url"] = None

        if params.get("cancelled"):
            logger.info(f"PayPal order {order_id} cancelled by the buyer")
            self.notify("info", CANCEL_TEXT)
            return

        result = self.checkout.capture(order_id)
        if result.success:
            st.session_state.payment["last_payment"] = result.details
            self.notify("success", SUCCESS_TEXT)
        else:
            self.notify("error", result.error)

    def get_last_payment(self) -> Optional[dict]:
        return st.session_state.payment["last_payment"]
