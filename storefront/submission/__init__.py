"""
Submission — validate, then place the order exactly once.

    from storefront import submission as Sub

    coordinator = Sub.OrderSubmissionCoordinator(client, router, guard)
    result = await coordinator.submit(cart, confirmation)
    # Error(IncompleteCheckoutError | NoPaymentMethodError
    #       | PaymentNotConfirmedError | BusyError | BackendError)
"""

from storefront.submission._types import (
    IncompleteCheckoutError,
    NoPaymentMethodError,
    PaymentNotConfirmedError,
    SubmissionError,
)
from storefront.submission._coordinator import check, OrderSubmissionCoordinator

__all__ = (
    "IncompleteCheckoutError",
    "NoPaymentMethodError",
    "PaymentNotConfirmedError",
    "SubmissionError",
    "check",
    "OrderSubmissionCoordinator",
)
