"""
Provider classification — provider_id prefix → family.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.config import CheckoutSettings
from storefront.payment._types import PaymentMethodInfo, ProviderFamily


@dataclass(frozen=True, slots=True)
class ProviderTable:
    """
    Fixed classification table.

    Longest matching prefix wins, so a specific prefix can override a
    broader one.

    Example:
        table = ProviderTable.from_settings(get_settings())
        table.classify("pp_stripe_stripe")   # ProviderFamily.CARD
        table.classify("pp_unknown")         # None
    """

    entries: tuple[tuple[str, ProviderFamily], ...]

    @classmethod
    def from_settings(cls, settings: CheckoutSettings) -> ProviderTable:
        groups = (
            (settings.card_providers, ProviderFamily.CARD),
            (settings.wallet_providers, ProviderFamily.WALLET),
            (settings.manual_providers, ProviderFamily.MANUAL),
            (settings.bank_transfer_providers, ProviderFamily.BANK_TRANSFER),
            (settings.crypto_providers, ProviderFamily.CRYPTO),
        )
        entries = [(prefix, family) for prefixes, family in groups for prefix in prefixes]
        entries.sort(key=lambda e: len(e[0]), reverse=True)
        return cls(entries=tuple(entries))

    def classify(self, provider_id: str) -> ProviderFamily | None:
        for prefix, family in self.entries:
            if provider_id.startswith(prefix):
                return family
        return None


# Display titles for the providers a default installation ships with.
PAYMENT_INFO: dict[str, PaymentMethodInfo] = {
    "pp_stripe_stripe": PaymentMethodInfo("Credit card", ProviderFamily.CARD),
    "pp_paypal_paypal": PaymentMethodInfo("PayPal", ProviderFamily.WALLET),
    "pp_system_default": PaymentMethodInfo("Manual Payment", ProviderFamily.MANUAL),
}


def payment_method_info(provider_id: str, table: ProviderTable) -> PaymentMethodInfo | None:
    if provider_id in PAYMENT_INFO:
        return PAYMENT_INFO[provider_id]
    family = table.classify(provider_id)
    if family is None:
        return None
    return PaymentMethodInfo(provider_id, family)


__all__ = ("ProviderTable", "PAYMENT_INFO", "payment_method_info")
