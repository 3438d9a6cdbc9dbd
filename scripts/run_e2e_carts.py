#!/usr/bin/env python3
"""Simple e2e script: creates a cart on a running cart-service, then lists all carts."""
import httpx

from shared.config import get_settings

settings = get_settings()
host = "localhost" if settings.host == "0.0.0.0" else settings.host
URL = f"http://{host}:{settings.port}/carts"

payload = {
    "id": 1,
    "customerId": 999,
    "productIds": [1, 3],
}

try:
    r = httpx.post(URL, json=payload, timeout=15.0)
    print("POST status:", r.status_code)
    print(r.text)

    r = httpx.get(URL, timeout=15.0)
    print("GET status:", r.status_code)
    print("Response:", r.text)
except httpx.HTTPError as e:
    print("Request failed:", e)
