import pytest
from services.api.app.config import RelaySettings
from services.api.app.services.shopify_factory import get_shopify_admin


def test_get_shopify_admin_defaults_to_http(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("RELAY_SHOPIFY_ADAPTER", raising=False)
    monkeypatch.setenv("SHOPIFY_URL", "https://shop.example.com/")
    monkeypatch.setenv("SHOPIFY_ACCESS_TOKEN", "shpat_test")

    admin = get_shopify_admin()
    assert admin.vendor == "SHOPIFY"


def test_get_shopify_admin_mock(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RELAY_SHOPIFY_ADAPTER", "mock")
    assert get_shopify_admin().vendor == "SHOPIFY_MOCK"


def test_get_shopify_admin_rejects_unknown(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RELAY_SHOPIFY_ADAPTER", "nope")
    with pytest.raises(ValueError, match="Unknown RELAY_SHOPIFY_ADAPTER"):
        get_shopify_admin()


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SHOPIFY_URL", "https://shop.example.com/")
    monkeypatch.setenv("SHOPIFY_ACCESS_TOKEN", " shpat_test ")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.delenv("SHOPIFY_API_VERSION", raising=False)
    monkeypatch.delenv("SHOPIFY_TIMEOUT_SECONDS", raising=False)

    settings = RelaySettings.from_env()
    assert settings.shop_url == "https://shop.example.com"
    assert settings.access_token == "shpat_test"
    assert settings.api_version == "2024-10"
    assert settings.timeout_seconds is None
    assert settings.port == 8080
