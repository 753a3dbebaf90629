import asyncio
from dataclasses import replace
from typing import Any

import pytest

from storefront.cart import (
    Address,
    ApplicationMethod,
    ApplicationType,
    Cart,
    LineItem,
    Order,
    PaymentCollection,
    PaymentSession,
    PaymentSessionStatus,
    Promotion,
    Region,
    ShippingMethod,
)
from storefront.config import CheckoutSettings


class FakeBackend:
    """
    In-memory commerce backend.

    `gate` holds every command until set; `fail` maps a command name to the
    exception it raises.
    """

    def __init__(self, cart: Cart | None = None) -> None:
        self.cart = cart
        self.calls: list[tuple[str, Any]] = []
        self.catalog: dict[str, Promotion] = {}
        self.gate: asyncio.Event | None = None
        self.fail: dict[str, Exception] = {}
        self._sessions = 0

    def commands(self, name: str) -> list[Any]:
        return [payload for command, payload in self.calls if command == name]

    async def _enter(self, command: str, payload: Any) -> None:
        self.calls.append((command, payload))
        if self.gate is not None:
            await self.gate.wait()
        if command in self.fail:
            raise self.fail[command]

    async def retrieve_cart(self) -> Cart | None:
        await self._enter("retrieve_cart", None)
        return self.cart

    async def set_addresses(
        self, cart: Cart, shipping: Address, billing: Address, email: str | None = None
    ) -> Cart:
        await self._enter("set_addresses", (shipping, billing, email))
        self.cart = replace(
            cart,
            shipping_address=shipping,
            billing_address=billing,
            email=email or cart.email,
        )
        return self.cart

    async def set_shipping_method(self, cart: Cart, shipping_method_id: str) -> Cart:
        await self._enter("set_shipping_method", shipping_method_id)
        method = ShippingMethod(
            id="sm_1", name="Standard", amount=0, shipping_option_id=shipping_method_id
        )
        self.cart = replace(cart, shipping_methods=(method,))
        return self.cart

    async def initiate_payment_session(self, cart: Cart, provider_id: str) -> Cart:
        await self._enter("initiate_payment_session", provider_id)
        self._sessions += 1
        session = PaymentSession(
            id=f"ps_{self._sessions}",
            provider_id=provider_id,
            status=PaymentSessionStatus.PENDING,
            amount=cart.total,
            client_secret=f"secret_{self._sessions}" if provider_id.startswith("pp_stripe_") else None,
        )
        self.cart = replace(
            cart, payment_collection=PaymentCollection(id="paycol_1", payment_sessions=(session,))
        )
        return self.cart

    async def apply_promotions(self, cart: Cart, codes: list[str]) -> Cart:
        await self._enter("apply_promotions", list(codes))
        kept = [p for p in cart.promotions if not p.removable]
        kept_codes = {p.code.casefold() for p in kept if p.code}
        for code in codes:
            promotion = self.catalog.get(code.casefold())
            if promotion is not None and code.casefold() not in kept_codes:
                kept.append(promotion)
                kept_codes.add(code.casefold())
        self.cart = replace(cart, promotions=tuple(kept))
        return self.cart

    async def place_order(self, cart: Cart) -> Order:
        await self._enter("place_order", cart.id)
        return Order(
            id="order_1",
            display_id=1,
            cart_id=cart.id,
            email=cart.email,
            currency_code=cart.currency_code or "",
            total=cart.total,
            items=cart.items,
        )


@pytest.fixture
def settings() -> CheckoutSettings:
    return CheckoutSettings()


@pytest.fixture
def backend() -> FakeBackend:
    backend = FakeBackend()
    backend.catalog = {
        "summer10": Promotion(
            id="promo_summer",
            code="SUMMER10",
            application_method=ApplicationMethod(ApplicationType.PERCENTAGE, 10),
        ),
        "welcome": Promotion(
            id="promo_welcome",
            code="WELCOME",
            application_method=ApplicationMethod(ApplicationType.FIXED, 500, "usd"),
        ),
    }
    return backend


@pytest.fixture
def address() -> Address:
    return Address(
        first_name="Ada",
        last_name="Lovelace",
        address_1="12 Analytical Row",
        city="London",
        postal_code="N1 9GU",
        country_code="gb",
    )


@pytest.fixture
def make_item():
    def build(
        id: str = "item_1",
        *,
        quantity: int = 1,
        total: int = 10000,
        original_total: int | None = None,
    ) -> LineItem:
        original = total if original_total is None else original_total
        return LineItem(
            id=id,
            title="Linen shirt",
            quantity=quantity,
            unit_price=total // quantity,
            original_unit_price=original // quantity,
            total=total,
            original_total=original,
        )

    return build


@pytest.fixture
def make_cart(make_item):
    def build(**overrides: Any) -> Cart:
        fields: dict[str, Any] = dict(
            id="cart_1",
            currency_code="usd",
            region=Region(id="reg_us", name="United States", currency_code="usd"),
            items=(make_item(),),
            subtotal=10000,
            total=10000,
        )
        fields.update(overrides)
        return Cart(**fields)

    return build


@pytest.fixture
def ready_cart(make_cart, address):
    """Cart with every step filled in and a session for `provider_id`."""

    def build(provider_id: str | None = "pp_system_default", **overrides: Any) -> Cart:
        collection = None
        if provider_id is not None:
            collection = PaymentCollection(
                id="paycol_1",
                payment_sessions=(
                    PaymentSession(
                        id="ps_ready",
                        provider_id=provider_id,
                        status=PaymentSessionStatus.PENDING,
                        amount=10000,
                        client_secret="secret_ready" if provider_id.startswith("pp_stripe_") else None,
                    ),
                ),
            )
        fields: dict[str, Any] = dict(
            email="ada@example.com",
            shipping_address=address,
            billing_address=address,
            shipping_methods=(ShippingMethod(id="sm_1", name="Standard", amount=0),),
            payment_collection=collection,
        )
        fields.update(overrides)
        return make_cart(**fields)

    return build
