"""
Cart — domain snapshots of the backend's cart and order documents.

    from storefront import cart as K

    cart = K.CartDocument.model_validate(payload).to_domain()
    cart.active_payment_session
    cart.paid_by_gift_cards
"""

from storefront.cart._types import (
    Address,
    Region,
    LineItem,
    ShippingMethod,
    PaymentSessionStatus,
    PaymentSession,
    PaymentCollection,
    ApplicationType,
    ApplicationMethod,
    Promotion,
    GiftCard,
    Cart,
    Order,
)
from storefront.cart._document import (
    AddressDocument,
    CartDocument,
    OrderDocument,
)

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
    "AddressDocument",
    "CartDocument",
    "OrderDocument",
)
