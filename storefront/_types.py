"""
Core types for storefront.

Re-exports from kungfu + the shared error taxonomy.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

# Re-export from kungfu
from kungfu import Result, Ok, Error, LazyCoroResult

# ═══════════════════════════════════════════════════════════════════════════════
# Lazy Computation Aliases
# ═══════════════════════════════════════════════════════════════════════════════

type Lazy[T, E] = LazyCoroResult[T, E]
"""Lazy async computation that may fail."""

type CartId = str
"""Identifier the backend assigns to a cart."""

# ═══════════════════════════════════════════════════════════════════════════════
# Errors
# ═══════════════════════════════════════════════════════════════════════════════


class ConfigurationError(Exception):
    """
    Cart or region data is unusable.

    The only error that is raised instead of returned: nothing downstream
    can compensate for a cart without a currency.
    """

    def __init__(self, message: str, *, cart_id: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cart_id = cart_id


@dataclass(frozen=True, slots=True)
class CheckoutError(Exception):
    """
    Base of every recoverable checkout failure.

    Returned inside Error(...), never raised. `code` is stable and safe to
    hand to the presentation layer.
    """

    code: ClassVar[str] = "checkout_error"

    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class BusyError(CheckoutError):
    """Another command for the same cart is in flight."""

    code: ClassVar[str] = "busy"

    cart_id: str = ""


@dataclass(frozen=True, slots=True)
class StaleResponseError(CheckoutError):
    """Response arrived for a cart revision that is no longer current."""

    code: ClassVar[str] = "stale_response"

    cart_id: str = ""


@dataclass(frozen=True, slots=True)
class BackendError(CheckoutError):
    """Commerce backend command failed. Surfaced verbatim, never retried."""

    code: ClassVar[str] = "backend_error"

    command: str = ""
    cause: Exception | None = None


@dataclass(frozen=True, slots=True)
class CartNotFoundError(CheckoutError):
    code: ClassVar[str] = "cart_not_found"


@dataclass(frozen=True, slots=True)
class CheckoutClosedError(CheckoutError):
    """The cart was already converted into an order."""

    code: ClassVar[str] = "checkout_closed"

    cart_id: str = ""


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Re-exports from kungfu
    "Result",
    "Ok",
    "Error",
    "LazyCoroResult",
    # Type aliases
    "Lazy",
    "CartId",
    # Errors
    "ConfigurationError",
    "CheckoutError",
    "BusyError",
    "StaleResponseError",
    "BackendError",
    "CartNotFoundError",
    "CheckoutClosedError",
)
