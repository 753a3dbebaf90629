"""
Checkout step machine — derived, never stored.

The open step is whatever the caller requests, clamped to what the cart
allows. Completion predicates read only the cart.
"""

from __future__ import annotations

from kungfu import Error, Ok, Result

from storefront.cart import Cart
from storefront.steps._types import STEPS, CheckoutProgress, Step, StepGateError

# ═══════════════════════════════════════════════════════════════════════════════
# Completion Predicates
# ═══════════════════════════════════════════════════════════════════════════════


def address_complete(cart: Cart) -> bool:
    return cart.shipping_address is not None


def delivery_complete(cart: Cart) -> bool:
    return address_complete(cart) and len(cart.shipping_methods) > 0


def payment_complete(cart: Cart) -> bool:
    """
    A cart settled entirely by gift cards needs no payment session: two gift
    cards and total == 0 is payment-complete with zero sessions.
    """
    return delivery_complete(cart) and (
        cart.payment_collection is not None or cart.paid_by_gift_cards
    )


def review_complete(cart: Cart) -> bool:
    return payment_complete(cart)


_PREDICATES = {
    Step.ADDRESS: address_complete,
    Step.DELIVERY: delivery_complete,
    Step.PAYMENT: payment_complete,
    Step.REVIEW: review_complete,
}


def is_complete(step: Step, cart: Cart) -> bool:
    return _PREDICATES[step](cart)


def completed_steps(cart: Cart) -> frozenset[Step]:
    return frozenset(s for s in STEPS if is_complete(s, cart))


# ═══════════════════════════════════════════════════════════════════════════════
# Gating
# ═══════════════════════════════════════════════════════════════════════════════


def earliest_incomplete(cart: Cart) -> Step:
    """First step that still needs input; REVIEW once everything is done."""
    for step in STEPS[:-1]:
        if not is_complete(step, cart):
            return step
    return Step.REVIEW


def can_enter(step: Step, cart: Cart) -> bool:
    before = step.predecessor
    return before is None or is_complete(before, cart)


def allowed_steps(cart: Cart) -> frozenset[Step]:
    """
    Steps that may be entered against this cart.

    Never contains DELIVERY before ADDRESS is complete, nor PAYMENT before
    DELIVERY is complete.
    """
    return frozenset(s for s in STEPS if can_enter(s, cart))


def enter(cart: Cart, requested: Step) -> Result[Step, StepGateError]:
    """
    Gate a step request.

    Example:
        match enter(cart, Step.REVIEW):
            case Ok(step): ...
            case Error(gate): redirect(gate.redirect_to)
    """
    if can_enter(requested, cart):
        return Ok(requested)
    redirect_to = earliest_incomplete(cart)
    return Error(StepGateError(
        f"Complete {redirect_to.value} before {requested.value}",
        requested=requested,
        redirect_to=redirect_to,
    ))


def default_step(cart: Cart) -> Step:
    """Step a shopper lands on when no step is requested."""
    return earliest_incomplete(cart)


def active_step(cart: Cart, requested: str | Step | None) -> Step:
    """
    Step to open for a `?step=` value.

    Example:
        # shipping address set, no shipping method yet
        active_step(cart, "review")  # Step.DELIVERY
    """
    step = requested if isinstance(requested, Step) else Step.parse(requested)
    if step is None:
        return default_step(cart)
    match enter(cart, step):
        case Ok(allowed):
            return allowed
        case Error(gate):
            return gate.redirect_to


def progress(cart: Cart, requested: str | Step | None) -> CheckoutProgress:
    return CheckoutProgress(
        active=active_step(cart, requested),
        allowed=allowed_steps(cart),
        completed=completed_steps(cart),
    )


__all__ = (
    "address_complete",
    "delivery_complete",
    "payment_complete",
    "review_complete",
    "is_complete",
    "completed_steps",
    "earliest_incomplete",
    "can_enter",
    "allowed_steps",
    "enter",
    "default_step",
    "active_step",
    "progress",
)
