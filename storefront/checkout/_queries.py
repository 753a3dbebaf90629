"""
Presentation queries — stateless reads over a cart snapshot.
"""

from __future__ import annotations

from storefront import pricing as P
from storefront import steps as St
from storefront.cart import Cart, LineItem
from storefront.config import CheckoutSettings, get_settings
from storefront.payment import PaymentFlow, ProviderTable, route


def get_active_step(cart: Cart, requested: str | None) -> St.Step:
    return St.active_step(cart, requested)


def get_allowed_steps(cart: Cart) -> frozenset[St.Step]:
    return St.allowed_steps(cart)


def compute_line_item_price(item: LineItem) -> P.ItemPrice:
    return P.price_of(item)


def compute_unit_price(item: LineItem) -> P.ItemPrice:
    return P.unit_price_of(item)


def compute_cart_totals(cart: Cart) -> P.CartTotals:
    return P.cart_totals(cart)


def get_payment_flow(cart: Cart, settings: CheckoutSettings | None = None) -> PaymentFlow:
    table = ProviderTable.from_settings(settings or get_settings())
    return route(cart, table)


__all__ = (
    "get_active_step",
    "get_allowed_steps",
    "compute_line_item_price",
    "compute_unit_price",
    "compute_cart_totals",
    "get_payment_flow",
)
