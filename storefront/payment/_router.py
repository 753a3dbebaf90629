"""
Payment router — active session → payment flow.

Dispatch is a lookup in a closed classification table. An unknown provider
is never guessed at: it routes to Unselected and submission stays disabled.
"""

from __future__ import annotations

from collections.abc import Set
from dataclasses import dataclass, field

from kungfu import Error, LazyCoroResult, Ok, Result

from storefront import backend as B
from storefront._types import BackendError, BusyError
from storefront.backend import CommerceBackend
from storefront.cart import Cart
from storefront.config import CheckoutSettings, get_settings
from storefront.inflight import InFlightGuard
from storefront.lift import from_result
from storefront.observability import get_logger
from storefront.payment._classify import ProviderTable
from storefront.payment._types import (
    GIFT_CARD_PROVIDER_ID,
    Deferred,
    Interactive,
    PaymentConfirmation,
    PaymentDeclinedError,
    PaymentFlow,
    ProviderFamily,
    ProviderOutcome,
    SubmitAction,
    SubmitAffordance,
    Unselected,
)

log = get_logger("payment")

# ═══════════════════════════════════════════════════════════════════════════════
# Pure Routing
# ═══════════════════════════════════════════════════════════════════════════════


def not_ready(cart: Cart) -> bool:
    """True while any input the payment attempt needs is missing."""
    return (
        cart.shipping_address is None
        or cart.billing_address is None
        or not cart.email
        or len(cart.shipping_methods) == 0
    )


def route(cart: Cart, table: ProviderTable) -> PaymentFlow:
    """
    Payment flow for the cart's active session.

    Example:
        match route(cart, table):
            case Interactive(provider_id=pid, client_secret=secret): ...
            case Deferred(provider_id=pid): ...
            case Unselected(): ...
    """
    if cart.paid_by_gift_cards:
        return Deferred(GIFT_CARD_PROVIDER_ID, ProviderFamily.GIFT_CARD)

    session = cart.active_payment_session
    if session is None:
        return Unselected()

    family = table.classify(session.provider_id)
    if family is None:
        log.warning("payment_provider_unrecognized", cart_id=cart.id, provider_id=session.provider_id)
        return Unselected(session.provider_id)

    if family.interactive:
        return Interactive(
            provider_id=session.provider_id,
            family=family,
            session_id=session.id,
            client_secret=session.client_secret,
        )
    return Deferred(session.provider_id, family)


def submit_affordance(cart: Cart, flow: PaymentFlow, *, confirmed: bool) -> SubmitAffordance:
    """
    State of the submit control.

    Disabled whenever the cart is not ready, whatever the provider.
    """
    if not_ready(cart):
        return SubmitAffordance(enabled=False, reason="checkout_incomplete")
    match flow:
        case Unselected():
            return SubmitAffordance(enabled=False, reason="no_payment_method")
        case Interactive() if not confirmed:
            return SubmitAffordance(enabled=True, action=SubmitAction.CONFIRM_PAYMENT)
        case _:
            return SubmitAffordance(enabled=True, action=SubmitAction.PLACE_ORDER)


def confirm(
    flow: PaymentFlow,
    outcome: ProviderOutcome,
    *,
    confirmed_statuses: Set[str],
) -> Result[PaymentConfirmation, PaymentDeclinedError]:
    """
    Evaluate the provider's answer to a client-side confirmation.

    An intent already in a confirmed status counts as success even when the
    provider also attached an error.
    """
    match flow:
        case Interactive(provider_id=provider_id, session_id=session_id):
            pass
        case _:
            return Error(PaymentDeclinedError(
                "No interactive payment awaits confirmation",
                retryable=False,
            ))

    if outcome.session_id is not None and outcome.session_id != session_id:
        return Error(PaymentDeclinedError(
            "Confirmation belongs to a superseded payment session",
            provider_id=provider_id,
        ))

    if outcome.status in confirmed_statuses:
        return Ok(PaymentConfirmation(provider_id, session_id, outcome.status))

    return Error(PaymentDeclinedError(
        outcome.error or f"Payment was not completed ({outcome.status})",
        provider_id=provider_id,
        decline_code=outcome.decline_code,
    ))


# ═══════════════════════════════════════════════════════════════════════════════
# Router
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(slots=True, frozen=True)
class PaymentRouter:
    """
    Routing plus the one payment command: provider selection.

    Example:
        router = PaymentRouter(client)
        result = await router.select_provider(cart, "pp_stripe_stripe")
        flow = router.route(fresh_cart)
    """

    backend: CommerceBackend
    guard: InFlightGuard = field(default_factory=InFlightGuard)
    settings: CheckoutSettings = field(default_factory=get_settings)
    table: ProviderTable = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "table", ProviderTable.from_settings(self.settings))

    def route(self, cart: Cart) -> PaymentFlow:
        return route(cart, self.table)

    def confirm(
        self, cart: Cart, outcome: ProviderOutcome
    ) -> Result[PaymentConfirmation, PaymentDeclinedError]:
        result = confirm(
            self.route(cart), outcome, confirmed_statuses=self.settings.confirmed_statuses
        )
        match result:
            case Ok(confirmation):
                log.info("payment_confirmed", cart_id=cart.id, provider_id=confirmation.provider_id)
            case Error(declined):
                log.info("payment_declined", cart_id=cart.id, reason=declined.message)
        return result

    def select_provider(
        self, cart: Cart, provider_id: str
    ) -> LazyCoroResult[Cart, BackendError | BusyError]:
        """
        Start a session with provider_id.

        The active session is re-used when it already belongs to provider_id.
        """
        active = cart.active_payment_session
        if active is not None and active.provider_id == provider_id:
            return from_result(Ok(cart))

        async def request() -> Result[Cart, BackendError]:
            log.info("payment_session_requested", cart_id=cart.id, provider_id=provider_id)
            return await B.initiate_payment_session(self.backend, cart, provider_id)

        return self.guard.run(cart.id, "initiate_payment_session", LazyCoroResult(request))


__all__ = ("not_ready", "route", "submit_affordance", "confirm", "PaymentRouter")
