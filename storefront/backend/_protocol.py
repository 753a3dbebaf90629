"""
Commerce backend protocol — the command interface that owns the cart.

Implementations live outside this package (an HTTP client for the commerce
API, a fake in tests). Methods raise on failure; storefront.backend wraps
each call into a lazy Result.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from storefront.cart import Address, Cart, Order


class CommerceBackend(Protocol):
    async def retrieve_cart(self) -> Cart | None:
        """Current shopper's cart, or None when no session cart exists."""
        ...

    async def set_addresses(
        self,
        cart: Cart,
        shipping: Address,
        billing: Address,
        email: str | None = None,
    ) -> Cart:
        ...

    async def set_shipping_method(self, cart: Cart, shipping_method_id: str) -> Cart:
        ...

    async def initiate_payment_session(self, cart: Cart, provider_id: str) -> Cart:
        """Start a session with provider_id, superseding the active one."""
        ...

    async def apply_promotions(self, cart: Cart, codes: Sequence[str]) -> Cart:
        """Replace the cart's code-activated promotions with exactly `codes`."""
        ...

    async def place_order(self, cart: Cart) -> Order:
        """Convert the cart into an order. Charges the shopper."""
        ...


__all__ = ("CommerceBackend",)
