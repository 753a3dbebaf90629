"""
Payment — provider routing and confirmation.

    from storefront import payment as Pay

    router = Pay.PaymentRouter(client)
    match router.route(cart):
        case Pay.Interactive(client_secret=secret): ...  # confirm client-side
        case Pay.Deferred(): ...                         # place order directly
        case Pay.Unselected(): ...                       # submit disabled

    Pay.not_ready(cart)  # True while address, billing, email or shipping missing
"""

from storefront.payment._types import (
    ProviderFamily,
    GIFT_CARD_PROVIDER_ID,
    Interactive,
    Deferred,
    Unselected,
    PaymentFlow,
    ProviderOutcome,
    PaymentConfirmation,
    PaymentDeclinedError,
    SubmitAction,
    SubmitAffordance,
    PaymentMethodInfo,
)
from storefront.payment._classify import (
    ProviderTable,
    PAYMENT_INFO,
    payment_method_info,
)
from storefront.payment._router import (
    not_ready,
    route,
    submit_affordance,
    confirm,
    PaymentRouter,
)

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
    "ProviderTable",
    "PAYMENT_INFO",
    "payment_method_info",
    "not_ready",
    "route",
    "submit_affordance",
    "confirm",
    "PaymentRouter",
)
