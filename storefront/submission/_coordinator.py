"""
Order submission — the only path from a cart to an order.

Preconditions are checked in order and the first failure wins. Placement is
attempted exactly once per submit and never retried: the backend owns
idempotency keys, and a blind retry of a charging call can double-charge.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from kungfu import Error, LazyCoroResult, Ok, Result

from storefront import backend as B
from storefront import steps as St
from storefront.backend import CommerceBackend
from storefront.cart import Cart, Order
from storefront.inflight import InFlightGuard
from storefront.lift import from_result
from storefront.observability import get_logger
from storefront.payment import (
    Interactive,
    PaymentConfirmation,
    PaymentFlow,
    PaymentRouter,
    Unselected,
)
from storefront.submission._types import (
    IncompleteCheckoutError,
    NoPaymentMethodError,
    PaymentNotConfirmedError,
    SubmissionError,
)

log = get_logger("submission")


def check(
    cart: Cart,
    flow: PaymentFlow,
    confirmation: PaymentConfirmation | None,
) -> Result[PaymentFlow, SubmissionError]:
    """
    Submission preconditions, first failure wins:

    1. review step complete
    2. a payment flow is selected
    3. an interactive flow was confirmed for its current session
    """
    if not St.review_complete(cart):
        redirect_to = St.earliest_incomplete(cart)
        return Error(IncompleteCheckoutError(
            f"Complete the {redirect_to.value} step first",
            redirect_to=redirect_to,
        ))

    match flow:
        case Unselected(provider_id=provider_id):
            return Error(NoPaymentMethodError(
                "Select a payment method", provider_id=provider_id,
            ))
        case Interactive(provider_id=provider_id, session_id=session_id):
            if (
                confirmation is None
                or confirmation.provider_id != provider_id
                or confirmation.session_id != session_id
            ):
                return Error(PaymentNotConfirmedError(
                    "Payment has not been confirmed", provider_id=provider_id,
                ))
        case _:
            pass

    return Ok(flow)


@dataclass(slots=True, frozen=True)
class OrderSubmissionCoordinator:
    """
    Example:
        coordinator = OrderSubmissionCoordinator(client, router)
        match await coordinator.submit(cart, confirmation):
            case Ok(order): ...
            case Error(e): show(e.code, e.message)
    """

    backend: CommerceBackend
    router: PaymentRouter
    guard: InFlightGuard = field(default_factory=InFlightGuard)

    def submit(
        self,
        cart: Cart,
        confirmation: PaymentConfirmation | None = None,
    ) -> LazyCoroResult[Order, SubmissionError]:
        flow = self.router.route(cart)
        match check(cart, flow, confirmation):
            case Error(refused):
                log.info("order_submit_refused", cart_id=cart.id, reason=refused.code)
                return from_result(Error(refused))
            case _:
                pass

        log.info("order_submit_requested", cart_id=cart.id, provider_id=flow.provider_id)
        placement = self.guard.run(cart.id, "place_order", B.place_order(self.backend, cart))

        async def execute() -> Result[Order, SubmissionError]:
            result = await placement
            match result:
                case Ok(order):
                    log.info("order_placed", cart_id=cart.id, order_id=order.id)
                case Error(e):
                    log.warning("order_submit_failed", cart_id=cart.id, reason=e.code, error=e.message)
            return result

        return LazyCoroResult(execute)


__all__ = ("check", "OrderSubmissionCoordinator")
