"""
Services layer - pure business logic, no Streamlit dependencies.

Domain services (auth_service, order_service, inventory_service,
payment_service) are imported from their modules; only the shared HTTP
helper is re-exported here because the repositories depend on it.
"""

from services.api_client import ApiClient, ApiError

__all__ = [
    "ApiClient",
    "ApiError",
]
