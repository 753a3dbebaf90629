from storefront.config import CheckoutSettings, LogFormat, get_settings
from storefront.payment import ProviderFamily, ProviderTable


def test_defaults():
    settings = CheckoutSettings()

    assert settings.interactive_providers == ("pp_stripe_", "pp_paypal")
    assert "pp_system_default" in settings.deferred_providers
    assert settings.confirmed_statuses == frozenset({"requires_capture", "succeeded"})
    assert settings.log_format is LogFormat.CONSOLE


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("STOREFRONT_MANUAL_PROVIDERS", '["pp_system_default", "pp_invoice"]')
    monkeypatch.setenv("STOREFRONT_LOG_FORMAT", "json")

    settings = CheckoutSettings()

    assert settings.manual_providers == ("pp_system_default", "pp_invoice")
    assert settings.log_format is LogFormat.JSON
    assert ProviderTable.from_settings(settings).classify("pp_invoice_net30") is ProviderFamily.MANUAL


def test_longest_prefix_wins():
    settings = CheckoutSettings(card_providers=("pp_stripe_",), crypto_providers=("pp_stripe_crypto",))

    table = ProviderTable.from_settings(settings)

    assert table.classify("pp_stripe_crypto_usdc") is ProviderFamily.CRYPTO
    assert table.classify("pp_stripe_stripe") is ProviderFamily.CARD


def test_settings_are_cached():
    assert get_settings() is get_settings()
