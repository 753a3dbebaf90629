"""
Pricing — line, unit and cart price computation.

    from storefront import pricing as P

    P.price_of(item)        # ItemPrice(current=9000, original=10000, percent_off=10)
    P.unit_price_of(item)   # same rule on per-unit values
    totals = P.cart_totals(cart)
    P.render_totals(totals) # ("Subtotal: 100.00", "Discount: -10.00", "Total: 90.00")
"""

from storefront.pricing._types import ItemPrice, CartTotals
from storefront.pricing._engine import (
    percent_off,
    price_of,
    unit_price_of,
    cart_totals,
)
from storefront.pricing._format import (
    CURRENCY_EXPONENT,
    currency_exponent,
    format_amount,
    render_totals,
)

__all__ = (
    "ItemPrice",
    "CartTotals",
    "percent_off",
    "price_of",
    "unit_price_of",
    "cart_totals",
    "CURRENCY_EXPONENT",
    "currency_exponent",
    "format_amount",
    "render_totals",
)
