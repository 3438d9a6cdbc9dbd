from shared.config import get_settings


def test_defaults(monkeypatch):
    for name in ("CUSTOMER_SERVICE_URL", "CUSTOMER_SERVICE_TIMEOUT", "CART_SERVICE_HOST", "CART_SERVICE_PORT"):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()
    assert settings.customer_service_url == "http://localhost:3000"
    assert settings.customer_service_timeout is None
    assert settings.host == "0.0.0.0"
    assert settings.port == 4040


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CUSTOMER_SERVICE_URL", "http://customers:3000/")
    monkeypatch.setenv("CUSTOMER_SERVICE_TIMEOUT", "2.5")
    monkeypatch.setenv("CART_SERVICE_PORT", "8080")

    settings = get_settings()
    assert settings.customer_service_url == "http://customers:3000"
    assert settings.customer_service_timeout == 2.5
    assert settings.port == 8080
