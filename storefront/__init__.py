"""
storefront — headless checkout core for a commerce backend.

    from storefront import steps as St       # Address → delivery → payment → review
    from storefront import pricing as P      # Line, unit and cart totals
    from storefront import promotions as Pr  # Promotion code ledger
    from storefront import payment as Pay    # Provider routing and confirmation
    from storefront import submission as Sub # Place the order exactly once
"""

from storefront import lift
from storefront import cart
from storefront import pricing
from storefront import inflight
from storefront import backend
from storefront import steps
from storefront import promotions
from storefront import payment
from storefront import submission
from storefront import checkout
from storefront._types import (
    Lazy,
    CartId,
    ConfigurationError,
    CheckoutError,
    BusyError,
    StaleResponseError,
    BackendError,
    CartNotFoundError,
    CheckoutClosedError,
)
from storefront.checkout import (
    get_active_step,
    get_allowed_steps,
    compute_line_item_price,
    compute_unit_price,
    compute_cart_totals,
    get_payment_flow,
    CheckoutSession,
)

__version__ = "0.1.0"

__all__ = (
    "lift",
    "cart",
    "pricing",
    "inflight",
    "backend",
    "steps",
    "promotions",
    "payment",
    "submission",
    "checkout",
    "Lazy",
    "CartId",
    "ConfigurationError",
    "CheckoutError",
    "BusyError",
    "StaleResponseError",
    "BackendError",
    "CartNotFoundError",
    "CheckoutClosedError",
    "get_active_step",
    "get_allowed_steps",
    "compute_line_item_price",
    "compute_unit_price",
    "compute_cart_totals",
    "get_payment_flow",
    "CheckoutSession",
)
