from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Backend REST API
    api_base_url: str = "http://localhost:8000/api"
    api_timeout: float = 15.0

    # PayPal REST app (sandbox by default)
    paypal_client_id: str = ""
    paypal_client_secret: str = ""
    paypal_base_url: str = "https://api-m.sandbox.paypal.com"

    # Initial subscription charged after registration
    subscription_amount: str = "10.00"
    subscription_currency: str = "USD"  # PayPal sandbox works best in USD
    subscription_description: str = "Suscripción inicial Atgest"

    # Public URL of this app (for PayPal return/cancel links)
    app_base_url: str = "http://localhost:8501"

    log_level: str = "INFO"

    @property
    def paypal_configured(self) -> bool:
        """Both PayPal credentials are present."""
        return bool(self.paypal_client_id and self.paypal_client_secret)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
