"""
Backend — the external commerce command interface.

    from storefront import backend as B

    result = await B.apply_promotions(client, cart, ["SUMMER10"])

    match result:
        case Ok(fresh_cart): ...
        case Error(e): print(e.command, e.message)
"""

from storefront.backend._protocol import CommerceBackend
from storefront.backend._commands import (
    retrieve_cart,
    set_addresses,
    set_shipping_method,
    initiate_payment_session,
    apply_promotions,
    place_order,
)

__all__ = (
    "CommerceBackend",
    "retrieve_cart",
    "set_addresses",
    "set_shipping_method",
    "initiate_payment_session",
    "apply_promotions",
    "place_order",
)
