"""
Steps — the address → delivery → payment → review pipeline.

    from storefront import steps as St

    St.allowed_steps(cart)           # frozenset({Step.ADDRESS, Step.DELIVERY})
    St.active_step(cart, "review")   # Step.DELIVERY when no shipping method yet
    St.enter(cart, St.Step.PAYMENT)  # Ok(Step.PAYMENT) | Error(StepGateError)
"""

from storefront.steps._types import Step, STEPS, StepGateError, CheckoutProgress
from storefront.steps._machine import (
    address_complete,
    delivery_complete,
    payment_complete,
    review_complete,
    is_complete,
    completed_steps,
    earliest_incomplete,
    can_enter,
    allowed_steps,
    enter,
    default_step,
    active_step,
    progress,
)

__all__ = (
    "Step",
    "STEPS",
    "StepGateError",
    "CheckoutProgress",
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
