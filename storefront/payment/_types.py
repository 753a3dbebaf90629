"""
Payment types — the closed set of payment flows.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import ClassVar

from storefront._types import CheckoutError

# ═══════════════════════════════════════════════════════════════════════════════
# Provider Families
# ═══════════════════════════════════════════════════════════════════════════════


class ProviderFamily(StrEnum):
    CARD = auto()
    WALLET = auto()
    MANUAL = auto()
    BANK_TRANSFER = auto()
    CRYPTO = auto()
    GIFT_CARD = auto()

    @property
    def interactive(self) -> bool:
        """Needs a client-side secret exchange and confirmation round trip."""
        return self in (ProviderFamily.CARD, ProviderFamily.WALLET)


GIFT_CARD_PROVIDER_ID = "gift_card"
"""Pseudo provider of a cart settled entirely by gift cards."""

# ═══════════════════════════════════════════════════════════════════════════════
# PaymentFlow: Interactive | Deferred | Unselected
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Interactive:
    """Confirmation must succeed client-side before the order is placed."""

    provider_id: str
    family: ProviderFamily
    session_id: str
    client_secret: str | None = None


@dataclass(frozen=True, slots=True)
class Deferred:
    """Settled as soon as a session exists; confirmation happens out of band."""

    provider_id: str
    family: ProviderFamily


@dataclass(frozen=True, slots=True)
class Unselected:
    """No usable provider. Submission is disabled."""

    provider_id: str | None = None


type PaymentFlow = Interactive | Deferred | Unselected

# ═══════════════════════════════════════════════════════════════════════════════
# Confirmation
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class ProviderOutcome:
    """
    What the provider reported after the client-side confirmation.

    `status` is the provider's intent status, `error` its error message.
    """

    status: str
    error: str | None = None
    decline_code: str | None = None
    session_id: str | None = None


@dataclass(frozen=True, slots=True)
class PaymentConfirmation:
    provider_id: str
    session_id: str
    status: str


@dataclass(frozen=True, slots=True)
class PaymentDeclinedError(CheckoutError):
    """
    Provider refused the payment.

    Retryable on the same step; the checkout step state is unchanged.
    """

    code: ClassVar[str] = "payment_declined"

    provider_id: str = ""
    decline_code: str | None = None
    retryable: bool = True


# ═══════════════════════════════════════════════════════════════════════════════
# Submit Affordance
# ═══════════════════════════════════════════════════════════════════════════════


class SubmitAction(StrEnum):
    PLACE_ORDER = "place_order"
    CONFIRM_PAYMENT = "confirm_payment"


@dataclass(frozen=True, slots=True)
class SubmitAffordance:
    enabled: bool
    action: SubmitAction | None = None
    reason: str | None = None


@dataclass(frozen=True, slots=True)
class PaymentMethodInfo:
    title: str
    family: ProviderFamily


__all__ = (
    "ProviderFamily",
    "GIFT_CARD_PROVIDER_ID",
    "Interactive",
    "Deferred",
    "Unselected",
    "PaymentFlow",
    "ProviderOutcome",
    "PaymentConfirmation",
    "PaymentDeclinedError",
    "SubmitAction",
    "SubmitAffordance",
    "PaymentMethodInfo",
)
