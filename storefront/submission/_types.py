"""
Submission errors — preconditions that block placing the order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from storefront._types import BackendError, BusyError, CheckoutError
from storefront.steps import Step


@dataclass(frozen=True, slots=True)
class IncompleteCheckoutError(CheckoutError):
    code: ClassVar[str] = "incomplete_checkout"

    redirect_to: Step = Step.ADDRESS


@dataclass(frozen=True, slots=True)
class NoPaymentMethodError(CheckoutError):
    code: ClassVar[str] = "no_payment_method"

    provider_id: str | None = None


@dataclass(frozen=True, slots=True)
class PaymentNotConfirmedError(CheckoutError):
    code: ClassVar[str] = "payment_not_confirmed"

    provider_id: str = ""


type SubmissionError = (
    IncompleteCheckoutError
    | NoPaymentMethodError
    | PaymentNotConfirmedError
    | BusyError
    | BackendError
)


__all__ = (
    "IncompleteCheckoutError",
    "NoPaymentMethodError",
    "PaymentNotConfirmedError",
    "SubmissionError",
)
