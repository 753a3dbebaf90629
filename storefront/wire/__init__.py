"""
Wire — the checkout session over HTTP (FastAPI).

    from storefront.wire import create_app

    sessions: dict[str, CheckoutSession] = {}

    def current_session(cart_id: str = fastapi.Cookie()) -> CheckoutSession:
        return sessions[cart_id]

    app = create_app(current_session)
    # uvicorn module:app
"""

from storefront.wire._models import (
    AddressesIn,
    ShippingMethodIn,
    PromotionCodeIn,
    PaymentSessionIn,
    PaymentConfirmationIn,
    ErrorOut,
    CheckoutOut,
    OrderOut,
)
from storefront.wire._app import (
    ERROR_STATUS,
    error_response,
    create_router,
    create_app,
)

__all__ = (
    "AddressesIn",
    "ShippingMethodIn",
    "PromotionCodeIn",
    "PaymentSessionIn",
    "PaymentConfirmationIn",
    "ErrorOut",
    "CheckoutOut",
    "OrderOut",
    "ERROR_STATUS",
    "error_response",
    "create_router",
    "create_app",
)
