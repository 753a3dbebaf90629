"""
Pricing types — what the presentation layer renders.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ItemPrice:
    """
    Price of a line or a unit.

    original and percent_off are both set or both None.
    """

    current: int
    original: int | None = None
    percent_off: int | None = None

    @property
    def is_discounted(self) -> bool:
        return self.original is not None


@dataclass(frozen=True, slots=True)
class CartTotals:
    """
    Cart summary in minor units.

    Optional lines are None when they must not be rendered: discount and
    gift card when not strictly positive, shipping and tax until computed.
    """

    currency_code: str
    subtotal: int
    total: int
    discount_total: int | None = None
    gift_card_total: int | None = None
    shipping_total: int | None = None
    tax_total: int | None = None


__all__ = ("ItemPrice", "CartTotals")
