"""
FastAPI surface — the checkout session over HTTP.

Each handler runs one session command and answers with the refreshed
checkout view, or with `{code, message}` and a 4xx status.
"""

from collections.abc import Callable
from typing import Any

import fastapi
from fastapi.responses import JSONResponse
from kungfu import Error, Ok

from storefront._types import CheckoutError, ConfigurationError
from storefront.checkout import CheckoutSession
from storefront.config import CheckoutSettings, get_settings
from storefront.observability import configure_logging, get_logger
from storefront.steps import StepGateError
from storefront.wire._models import (
    AddressesIn,
    CheckoutOut,
    ErrorOut,
    OrderOut,
    PaymentConfirmationIn,
    PaymentSessionIn,
    PromotionCodeIn,
    ShippingMethodIn,
)

log = get_logger("wire")

ERROR_STATUS: dict[str, int] = {
    "cart_not_found": 404,
    "promotion_not_found": 404,
    "busy": 409,
    "stale_response": 409,
    "checkout_closed": 409,
    "step_gate": 409,
    "incomplete_checkout": 409,
    "no_payment_method": 409,
    "payment_not_confirmed": 409,
    "payment_declined": 402,
    "empty_code": 422,
    "automatic_promotion": 422,
    "promotion_rejected": 422,
    "backend_error": 502,
}


def error_response(error: CheckoutError) -> JSONResponse:
    status = ERROR_STATUS.get(error.code, 400)
    return JSONResponse(status_code=status, content=ErrorOut.from_domain(error).model_dump())


def create_router(get_session: Callable[..., Any]) -> fastapi.APIRouter:
    """
    Checkout routes. `get_session` is a FastAPI dependency yielding the
    shopper's CheckoutSession.

    Example:
        router = create_router(lambda: sessions[request_cart_id])
        app.include_router(router)
    """
    router = fastapi.APIRouter(prefix="/checkout", tags=["checkout"])
    SessionDep = fastapi.Depends(get_session)

    async def view(session: CheckoutSession, step: str | None = None) -> CheckoutOut:
        return CheckoutOut.from_domain(
            session, session.progress(step), await session.submit_affordance()
        )

    @router.get("", response_model=CheckoutOut)
    async def get_checkout(
        step: str | None = None,
        session: CheckoutSession = SessionDep,
    ) -> Any:
        match await session.enter_step(step):
            case Ok(_) | Error(StepGateError()):
                return await view(session, step)
            case Error(e):
                return error_response(e)

    @router.post("/addresses", response_model=CheckoutOut)
    async def post_addresses(body: AddressesIn, session: CheckoutSession = SessionDep) -> Any:
        shipping, billing = body.to_domain()
        match await session.submit_addresses(
            shipping, billing, same_as_billing=body.same_as_billing, email=body.email
        ):
            case Ok(_):
                return await view(session)
            case Error(e):
                return error_response(e)

    @router.post("/shipping-method", response_model=CheckoutOut)
    async def post_shipping_method(
        body: ShippingMethodIn, session: CheckoutSession = SessionDep
    ) -> Any:
        match await session.select_shipping_method(body.shipping_method_id):
            case Ok(_):
                return await view(session)
            case Error(e):
                return error_response(e)

    @router.post("/promotions", response_model=CheckoutOut)
    async def post_promotion(body: PromotionCodeIn, session: CheckoutSession = SessionDep) -> Any:
        match await session.apply_code(body.code):
            case Ok(_):
                return await view(session)
            case Error(e):
                return error_response(e)

    @router.delete("/promotions/{code}", response_model=CheckoutOut)
    async def delete_promotion(code: str, session: CheckoutSession = SessionDep) -> Any:
        match await session.remove_code(code):
            case Ok(_):
                return await view(session)
            case Error(e):
                return error_response(e)

    @router.post("/payment-session", response_model=CheckoutOut)
    async def post_payment_session(
        body: PaymentSessionIn, session: CheckoutSession = SessionDep
    ) -> Any:
        match await session.select_payment_provider(body.provider_id):
            case Ok(_):
                return await view(session)
            case Error(e):
                return error_response(e)

    @router.post("/payment-confirmation", response_model=CheckoutOut)
    async def post_payment_confirmation(
        body: PaymentConfirmationIn, session: CheckoutSession = SessionDep
    ) -> Any:
        match session.confirm_payment(body.to_domain()):
            case Ok(_):
                return await view(session)
            case Error(e):
                return error_response(e)

    @router.post("/order", response_model=OrderOut)
    async def post_order(session: CheckoutSession = SessionDep) -> Any:
        match await session.submit_order():
            case Ok(order):
                return OrderOut.from_domain(order)
            case Error(e):
                return error_response(e)

    return router


def create_app(
    get_session: Callable[..., Any],
    settings: CheckoutSettings | None = None,
) -> fastapi.FastAPI:
    configure_logging(settings or get_settings())
    app = fastapi.FastAPI(title="storefront checkout")
    app.include_router(create_router(get_session))

    @app.exception_handler(ConfigurationError)
    async def on_configuration_error(
        request: fastapi.Request, exc: ConfigurationError
    ) -> JSONResponse:
        log.error("configuration_error", cart_id=exc.cart_id, error=exc.message)
        return JSONResponse(
            status_code=500,
            content={"code": "configuration_error", "message": exc.message},
        )

    return app


__all__ = ("ERROR_STATUS", "error_response", "create_router", "create_app")
