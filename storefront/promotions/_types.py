"""
Promotion errors.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from storefront._types import BackendError, BusyError, CheckoutError
from storefront.cart import Cart


@dataclass(frozen=True, slots=True)
class PromotionError(CheckoutError):
    code: ClassVar[str] = "promotion_error"

    promotion_code: str = ""


@dataclass(frozen=True, slots=True)
class EmptyCodeError(PromotionError):
    code: ClassVar[str] = "empty_code"


@dataclass(frozen=True, slots=True)
class PromotionNotFoundError(PromotionError):
    code: ClassVar[str] = "promotion_not_found"


@dataclass(frozen=True, slots=True)
class AutomaticPromotionError(PromotionError):
    """Automatic promotions are applied by the backend and cannot be removed."""

    code: ClassVar[str] = "automatic_promotion"


@dataclass(frozen=True, slots=True)
class PromotionRejectedError(PromotionError):
    """
    Backend accepted the request but did not activate the code.

    `cart` is the backend's fresh cart and must still be applied.
    """

    code: ClassVar[str] = "promotion_rejected"

    cart: Cart | None = None


type LedgerError = PromotionError | BackendError | BusyError


__all__ = (
    "PromotionError",
    "EmptyCodeError",
    "PromotionNotFoundError",
    "AutomaticPromotionError",
    "PromotionRejectedError",
    "LedgerError",
)
