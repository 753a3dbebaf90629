"""
Checkout settings — environment-driven configuration.

    from storefront.config import get_settings

    settings = get_settings()          # reads STOREFRONT_* env vars
    settings.interactive_providers     # ("pp_stripe_", "pp_paypal")

List values are read from the environment as JSON:

    STOREFRONT_DEFERRED_PROVIDERS='["pp_system_default", "pp_invoice"]'
"""

from __future__ import annotations

from enum import StrEnum
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogFormat(StrEnum):
    CONSOLE = "console"
    JSON = "json"


class CheckoutSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="STOREFRONT_", extra="ignore")

    # Payment provider classification, matched by provider_id prefix.
    card_providers: tuple[str, ...] = Field(default=("pp_stripe_",))
    wallet_providers: tuple[str, ...] = Field(default=("pp_paypal",))
    manual_providers: tuple[str, ...] = Field(default=("pp_system_default",))
    bank_transfer_providers: tuple[str, ...] = Field(default=("pp_bank", "pp_transfer"))
    crypto_providers: tuple[str, ...] = Field(default=("pp_crypto", "pp_coinbase"))

    # Intent statuses that count as a confirmed interactive payment, even when
    # the provider also attached an error.
    confirmed_statuses: frozenset[str] = Field(
        default=frozenset({"requires_capture", "succeeded"})
    )

    log_level: str = Field(default="INFO")
    log_format: LogFormat = Field(default=LogFormat.CONSOLE)

    @property
    def interactive_providers(self) -> tuple[str, ...]:
        return (*self.card_providers, *self.wallet_providers)

    @property
    def deferred_providers(self) -> tuple[str, ...]:
        return (
            *self.manual_providers,
            *self.bank_transfer_providers,
            *self.crypto_providers,
        )


@lru_cache(maxsize=1)
def get_settings() -> CheckoutSettings:
    return CheckoutSettings()


__all__ = ("LogFormat", "CheckoutSettings", "get_settings")
