"""
Backend commands — lazy, Result-returning wrappers over CommerceBackend.

Nothing here retries: a failed command is surfaced as BackendError with
the backend's message kept verbatim.
"""

from __future__ import annotations

from collections.abc import Sequence

from storefront._types import BackendError, Lazy
from storefront.backend._protocol import CommerceBackend
from storefront.cart import Address, Cart, Order
from storefront.lift import from_awaitable
from storefront.observability import get_logger

log = get_logger("backend")


def _on_error(command: str, cart_id: str | None):
    def convert(e: Exception) -> BackendError:
        log.warning("backend_command_failed", command=command, cart_id=cart_id, error=str(e))
        return BackendError(str(e), command=command, cause=e)
    return convert


def retrieve_cart(backend: CommerceBackend) -> Lazy[Cart | None, BackendError]:
    return from_awaitable(
        lambda: backend.retrieve_cart(),
        on_error=_on_error("retrieve_cart", None),
    )


def set_addresses(
    backend: CommerceBackend,
    cart: Cart,
    shipping: Address,
    billing: Address,
    email: str | None = None,
) -> Lazy[Cart, BackendError]:
    return from_awaitable(
        lambda: backend.set_addresses(cart, shipping, billing, email),
        on_error=_on_error("set_addresses", cart.id),
    )


def set_shipping_method(
    backend: CommerceBackend,
    cart: Cart,
    shipping_method_id: str,
) -> Lazy[Cart, BackendError]:
    return from_awaitable(
        lambda: backend.set_shipping_method(cart, shipping_method_id),
        on_error=_on_error("set_shipping_method", cart.id),
    )


def initiate_payment_session(
    backend: CommerceBackend,
    cart: Cart,
    provider_id: str,
) -> Lazy[Cart, BackendError]:
    return from_awaitable(
        lambda: backend.initiate_payment_session(cart, provider_id),
        on_error=_on_error("initiate_payment_session", cart.id),
    )


def apply_promotions(
    backend: CommerceBackend,
    cart: Cart,
    codes: Sequence[str],
) -> Lazy[Cart, BackendError]:
    submitted = list(codes)
    return from_awaitable(
        lambda: backend.apply_promotions(cart, submitted),
        on_error=_on_error("apply_promotions", cart.id),
    )


def place_order(backend: CommerceBackend, cart: Cart) -> Lazy[Order, BackendError]:
    return from_awaitable(
        lambda: backend.place_order(cart),
        on_error=_on_error("place_order", cart.id),
    )


__all__ = (
    "retrieve_cart",
    "set_addresses",
    "set_shipping_method",
    "initiate_payment_session",
    "apply_promotions",
    "place_order",
)
