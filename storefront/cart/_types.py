"""
Cart domain — immutable snapshots of backend documents.

The backend owns the cart. Every command returns a fresh Cart; nothing in
this package mutates one in place.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

# ═══════════════════════════════════════════════════════════════════════════════
# Addresses & Region
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Address:
    first_name: str
    last_name: str
    address_1: str
    city: str
    postal_code: str
    country_code: str
    address_2: str | None = None
    company: str | None = None
    province: str | None = None
    phone: str | None = None


@dataclass(frozen=True, slots=True)
class Region:
    id: str
    name: str
    currency_code: str


# ═══════════════════════════════════════════════════════════════════════════════
# Items & Shipping
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class LineItem:
    """
    One cart line. Amounts are integers in minor currency units.

    original_* is the price before promotions; it is never below the
    discounted counterpart.
    """

    id: str
    title: str
    quantity: int
    unit_price: int
    original_unit_price: int
    total: int
    original_total: int


@dataclass(frozen=True, slots=True)
class ShippingMethod:
    id: str
    name: str
    amount: int
    shipping_option_id: str | None = None


# ═══════════════════════════════════════════════════════════════════════════════
# Payment
# ═══════════════════════════════════════════════════════════════════════════════


class PaymentSessionStatus(StrEnum):
    PENDING = "pending"
    AUTHORIZED = "authorized"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class PaymentSession:
    id: str
    provider_id: str
    status: PaymentSessionStatus
    amount: int = 0
    client_secret: str | None = None

    @property
    def is_active(self) -> bool:
        return self.status is not PaymentSessionStatus.ERROR


@dataclass(frozen=True, slots=True)
class PaymentCollection:
    id: str
    payment_sessions: tuple[PaymentSession, ...] = ()

    @property
    def active_session(self) -> PaymentSession | None:
        """The session a new provider selection supersedes; at most one."""
        for session in self.payment_sessions:
            if session.is_active:
                return session
        return None


# ═══════════════════════════════════════════════════════════════════════════════
# Promotions & Gift Cards
# ═══════════════════════════════════════════════════════════════════════════════


class ApplicationType(StrEnum):
    PERCENTAGE = "percentage"
    FIXED = "fixed"


@dataclass(frozen=True, slots=True)
class ApplicationMethod:
    type: ApplicationType
    value: int
    currency_code: str | None = None


@dataclass(frozen=True, slots=True)
class Promotion:
    """
    A discount attached to the cart.

    Promotions without a code are automatic. A coded promotion may also be
    flagged automatic by the backend; either way the shopper cannot remove it.
    """

    id: str
    code: str | None
    application_method: ApplicationMethod | None = None
    is_automatic: bool = False

    @property
    def removable(self) -> bool:
        return self.code is not None and not self.is_automatic


@dataclass(frozen=True, slots=True)
class GiftCard:
    id: str
    code: str
    balance: int = 0


# ═══════════════════════════════════════════════════════════════════════════════
# Cart
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Cart:
    """
    Pre-order aggregate.

    total == subtotal - discount_total - gift_card_total
             + shipping_total + tax_total

    shipping_total / tax_total are None until the backend computed them.
    """

    id: str
    currency_code: str | None
    region: Region | None = None
    items: tuple[LineItem, ...] = ()
    email: str | None = None
    shipping_address: Address | None = None
    billing_address: Address | None = None
    shipping_methods: tuple[ShippingMethod, ...] = ()
    payment_collection: PaymentCollection | None = None
    promotions: tuple[Promotion, ...] = ()
    gift_cards: tuple[GiftCard, ...] = ()
    subtotal: int = 0
    discount_total: int = 0
    gift_card_total: int = 0
    shipping_total: int | None = None
    tax_total: int | None = None
    total: int = 0

    @property
    def active_payment_session(self) -> PaymentSession | None:
        if self.payment_collection is None:
            return None
        return self.payment_collection.active_session

    @property
    def promotion_codes(self) -> tuple[str, ...]:
        """Codes of all coded promotions, in cart order, without case-insensitive duplicates."""
        codes: dict[str, str] = {}
        for p in self.promotions:
            if p.code:
                codes.setdefault(p.code.casefold(), p.code)
        return tuple(codes.values())

    @property
    def paid_by_gift_cards(self) -> bool:
        return len(self.gift_cards) > 0 and self.total == 0


# ═══════════════════════════════════════════════════════════════════════════════
# Order
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Order:
    """Read-only result of placing a cart."""

    id: str
    display_id: int | None
    cart_id: str | None
    email: str | None
    currency_code: str
    total: int
    items: tuple[LineItem, ...] = ()


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "Address",
    "Region",
    "LineItem",
    "ShippingMethod",
    "PaymentSessionStatus",
    "PaymentSession",
    "PaymentCollection",
    "ApplicationType",
    "ApplicationMethod",
    "Promotion",
    "GiftCard",
    "Cart",
    "Order",
)
