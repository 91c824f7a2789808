"""
PayPal checkout client for the initial Atgest subscription.

PayPal REST Documentation: https://developer.paypal.com/docs/api/orders/v2/

Authentication: OAuth2 Client Credentials flow
- Obtain access token using client_id and client_secret
- Token lifetime is reported in expires_in (seconds)

Flow:
1. create_checkout() creates an order and returns the buyer approval URL
2. The buyer approves on paypal.com and is redirected back with ?token=<order id>
3. capture() captures the approved order

Endpoints used:
- POST /v1/oauth2/token - Get access token
- POST /v2/checkout/orders - Create order
- POST /v2/checkout/orders/{id}/capture - Capture approved order
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Optional

import httpx

from config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

NOT_CONFIGURED_ERROR = "PayPal no está configurado."
CREATE_ERROR = "Error en PayPal. Intenta nuevamente."
CAPTURE_ERROR = "Ocurrió un error al confirmar el pago."


@dataclass
class CheckoutResult:
    """Result of creating a PayPal order."""
    success: bool
    order_id: Optional[str] = None
    approve_url: Optional[str] = None
    error: Optional[str] = None


@dataclass
class CaptureResult:
    """Result of capturing an approved PayPal order."""
    success: bool
    order_id: Optional[str] = None
    status: Optional[str] = None
    amount: str = "0.00"
    details: dict = field(default_factory=dict)
    error: Optional[str] = None


def captured_amount(details: dict) -> str:
    """Amount of the first capture of the first purchase unit."""
    try:
        unit = details["purchase_units"][0]
        captures = unit.get("payments", {}).get("captures") or []
        if captures:
            return captures[0]["amount"]["value"]
        return unit["amount"]["value"]
    except (KeyError, IndexError, TypeError):
        return "0.00"


class PayPalCheckout:
    """PayPal Orders v2 client."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        self._transport = transport
        self._access_token: Optional[str] = None
        self._token_expires_at: float = 0

    def is_configured(self) -> bool:
        """Check if PayPal credentials are configured."""
        return self.settings.paypal_configured

    def _client(self) -> httpx.Client:
        return httpx.Client(
            base_url=self.settings.paypal_base_url,
            timeout=30.0,
            transport=self._transport,
        )

    def _get_access_token(self) -> str:
        """
        Get a valid access token, refreshing if expired.

        Raises:
            httpx.HTTPError: if PayPal rejects the credentials or is unreachable
        """
        # Return cached token if still valid (with 60s buffer)
        if self._access_token and time.time() < (self._token_expires_at - 60):
            return self._access_token

        with self._client() as client:
            response = client.post(
                "/v1/oauth2/token",
                auth=(
                    self.settings.paypal_client_id.strip(),
                    self.settings.paypal_client_secret.strip(),
                ),
                data={"grant_type": "client_credentials"},
                headers={"Accept": "application/json"},
            )
            response.raise_for_status()

        token_data = response.json()
        self._access_token = token_data["access_token"]
        self._token_expires_at = time.time() + token_data.get("expires_in", 3600)

        logger.info("PayPal access token obtained successfully")
        return self._access_token

    def _auth_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._get_access_token()}",
            "Content-Type": "application/json",
        }

    def create_checkout(self, return_url: str, cancel_url: str) -> CheckoutResult:
        """
        Create an order for the subscription amount.

        Args:
            return_url: Where PayPal sends the buyer after approval
            cancel_url: Where PayPal sends the buyer after cancelling

        Returns:
            CheckoutResult with the approval URL or error
        """
        if not self.is_configured():
            return CheckoutResult(success=False, error=NOT_CONFIGURED_ERROR)

        body = {
            "intent": "CAPTURE",
            "purchase_units": [
                {
                    "description": self.settings.subscription_description,
                    "amount": {
                        "currency_code": self.settings.subscription_currency,
                        "value": self.settings.subscription_amount,
                    },
                }
            ],
            "application_context": {
                "brand_name": "Atgest",
                "user_action": "PAY_NOW",
                "return_url": return_url,
                "cancel_url": cancel_url,
            },
        }

        try:
            headers = self._auth_headers()
            with self._client() as client:
                response = client.post("/v2/checkout/orders", json=body, headers=headers)
                response.raise_for_status()
            data = response.json()
            paypal_order_id = data["id"]
            approve_url = next(
                (link["href"] for link in data.get("links", []) if link.get("rel") in ("approve", "payer-action")),
                None,
            )

        except httpx.HTTPStatusError as e:
            logger.error(f"PayPal order creation failed: {e.response.status_code} - {e.response.text}")
            return CheckoutResult(success=False, error=CREATE_ERROR)
        except httpx.HTTPError as e:
            logger.error(f"PayPal order creation error: {e}")
            return CheckoutResult(success=False, error=CREATE_ERROR)
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            # Non-JSON body or unexpected shape (token or order response)
            logger.error(f"Unexpected PayPal order response: {e!r}")
            return CheckoutResult(success=False, error=CREATE_ERROR)

        if not approve_url:
            logger.error(f"PayPal order {paypal_order_id} has no approval link")
            return CheckoutResult(success=False, error=CREATE_ERROR)

        logger.info(f"PayPal order {paypal_order_id} created")
        return CheckoutResult(success=True, order_id=paypal_order_id, approve_url=approve_url)

    def capture(self, order_id: str) -> CaptureResult:
        """Capture an order the buyer has approved."""
        if not self.is_configured():
            return CaptureResult(success=False, order_id=order_id, error=NOT_CONFIGURED_ERROR)

        try:
            headers = self._auth_headers()
            with self._client() as client:
                response = client.post(f"/v2/checkout/orders/{order_id}/capture", headers=headers)
                response.raise_for_status()
            details = response.json()
            status = details.get("status")
            captured_id = details.get("id", order_id)

        except httpx.HTTPStatusError as e:
            logger.error(f"PayPal capture of {order_id} failed: {e.response.status_code} - {e.response.text}")
            return CaptureResult(success=False, order_id=order_id, error=CAPTURE_ERROR)
        except httpx.HTTPError as e:
            logger.error(f"PayPal capture of {order_id} error: {e}")
            return CaptureResult(success=False, order_id=order_id, error=CAPTURE_ERROR)
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            logger.error(f"Unexpected PayPal capture response for {order_id}: {e!r}")
            return CaptureResult(success=False, order_id=order_id, error=CAPTURE_ERROR)

        if status != "COMPLETED":
            logger.warning(f"PayPal order {order_id} captured with status {status}")
            return CaptureResult(
                success=False,
                order_id=order_id,
                status=status,
                details=details,
                error=CAPTURE_ERROR,
            )

        amount = captured_amount(details)
        logger.info(f"PayPal order {order_id} captured ({amount})")
        return CaptureResult(
            success=True,
            order_id=captured_id,
            status=status,
            amount=amount,
            details=details,
        )
