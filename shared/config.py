import os
from dataclasses import dataclass
from typing import Optional

# Defaults match the fixed addresses the services run on locally.
CUSTOMER_SERVICE_URL = os.getenv("CUSTOMER_SERVICE_URL", "http://localhost:3000")
CART_SERVICE_HOST = os.getenv("CART_SERVICE_HOST", "0.0.0.0")
CART_SERVICE_PORT = int(os.getenv("CART_SERVICE_PORT", "4040"))


def _optional_float(name: str) -> Optional[float]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return float(raw)


@dataclass(frozen=True)
class Settings:
    customer_service_url: str = CUSTOMER_SERVICE_URL
    # None means the existence check may block for as long as the customer service does
    customer_service_timeout: Optional[float] = None
    host: str = CART_SERVICE_HOST
    port: int = CART_SERVICE_PORT


def get_settings() -> Settings:
    """Read settings from the environment at call time."""
    return Settings(
        customer_service_url=os.getenv("CUSTOMER_SERVICE_URL", CUSTOMER_SERVICE_URL).rstrip("/"),
        customer_service_timeout=_optional_float("CUSTOMER_SERVICE_TIMEOUT"),
        host=os.getenv("CART_SERVICE_HOST", CART_SERVICE_HOST),
        port=int(os.getenv("CART_SERVICE_PORT", str(CART_SERVICE_PORT))),
    )
