"""
Checkout — presentation queries and the stateful session.

    from storefront import checkout as C

    C.get_active_step(cart, "review")     # Step.DELIVERY without a shipping method
    C.compute_cart_totals(cart)           # CartTotals(subtotal=10000, ...)

    match await C.CheckoutSession.open(client):
        case Ok(session):
            await session.apply_code("SUMMER10")
            result = await session.submit_order()
"""

from storefront.checkout._queries import (
    get_active_step,
    get_allowed_steps,
    compute_line_item_price,
    compute_unit_price,
    compute_cart_totals,
    get_payment_flow,
)
from storefront.checkout._session import CheckoutSession

__all__ = (
    "get_active_step",
    "get_allowed_steps",
    "compute_line_item_price",
    "compute_unit_price",
    "compute_cart_totals",
    "get_payment_flow",
    "CheckoutSession",
)
