"""
Checkout session — one shopper's cart and the commands that move it.

The session holds the freshest cart snapshot and a revision counter. Every
command captures (cart id, revision) when it is issued; a response is
applied only if both are still current, otherwise it is discarded.

All commands share one InFlightGuard, so an in-flight order submission
blocks step entry, promotion updates and payment switches for that cart.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from kungfu import Error, LazyCoroResult, Ok, Result

from storefront import backend as B
from storefront import pricing as P
from storefront import steps as St
from storefront._types import (
    BackendError,
    BusyError,
    CartNotFoundError,
    CheckoutClosedError,
    StaleResponseError,
)
from storefront.backend import CommerceBackend
from storefront.cart import Address, Cart, Order
from storefront.config import CheckoutSettings, get_settings
from storefront.inflight import InFlightGuard
from storefront.observability import get_logger
from storefront.payment import (
    PaymentConfirmation,
    PaymentDeclinedError,
    PaymentFlow,
    PaymentRouter,
    ProviderOutcome,
    SubmitAffordance,
    submit_affordance,
)
from storefront.promotions import LedgerError, PromotionLedger, PromotionRejectedError
from storefront.submission import OrderSubmissionCoordinator, SubmissionError

log = get_logger("checkout")

type CommandError = BackendError | BusyError | StaleResponseError | CheckoutClosedError


@dataclass(slots=True)
class CheckoutSession:
    """
    Example:
        match await CheckoutSession.open(client):
            case Ok(session): ...
            case Error(e): ...

        await session.apply_code("SUMMER10")
        await session.select_payment_provider("pp_system_default")
        match await session.submit_order():
            case Ok(order): ...
            case Error(e): show(e.code, e.message)
    """

    backend: CommerceBackend
    cart: Cart
    settings: CheckoutSettings = field(default_factory=get_settings)
    guard: InFlightGuard = field(default_factory=InFlightGuard)
    revision: int = 0
    confirmation: PaymentConfirmation | None = None
    order: Order | None = None
    ledger: PromotionLedger = field(init=False)
    router: PaymentRouter = field(init=False)
    coordinator: OrderSubmissionCoordinator = field(init=False)

    def __post_init__(self) -> None:
        self.ledger = PromotionLedger(self.backend, self.guard)
        self.router = PaymentRouter(self.backend, self.guard, self.settings)
        self.coordinator = OrderSubmissionCoordinator(self.backend, self.router, self.guard)

    @classmethod
    async def open(
        cls,
        backend: CommerceBackend,
        *,
        settings: CheckoutSettings | None = None,
        guard: InFlightGuard | None = None,
    ) -> Result[CheckoutSession, CartNotFoundError | BackendError]:
        match await B.retrieve_cart(backend):
            case Ok(None):
                return Error(CartNotFoundError("No cart for this session"))
            case Ok(cart):
                return Ok(cls(
                    backend=backend,
                    cart=cart,
                    settings=settings or get_settings(),
                    guard=guard or InFlightGuard(),
                ))
            case Error(e):
                return Error(e)

    # ═══════════════════════════════════════════════════════════════════════════
    # State
    # ═══════════════════════════════════════════════════════════════════════════

    @property
    def closed(self) -> bool:
        return self.order is not None

    def load(self, cart: Cart) -> None:
        """Replace the snapshot. Late responses for the previous one are discarded."""
        previous = self.cart
        self.cart = cart
        self.revision += 1
        confirmation = self.confirmation
        if confirmation is None:
            return
        session = cart.active_payment_session
        if (
            cart.id != previous.id
            or session is None
            or session.id != confirmation.session_id
        ):
            log.info("payment_confirmation_dropped", cart_id=cart.id)
            self.confirmation = None

    def _closed_error(self) -> CheckoutClosedError:
        return CheckoutClosedError(
            f"Cart {self.cart.id} was already placed as an order", cart_id=self.cart.id,
        )

    async def _apply[E](
        self,
        command: str,
        action: LazyCoroResult[Cart, E],
    ) -> Result[Cart, E | StaleResponseError]:
        cart_id, revision = self.cart.id, self.revision
        result = await action

        fresh: Cart | None = None
        match result:
            case Ok(cart):
                fresh = cart
            case Error(PromotionRejectedError(cart=Cart() as cart)):
                fresh = cart
            case _:
                pass

        if fresh is None or fresh is self.cart:
            return result
        if self.cart.id != cart_id or self.revision != revision:
            log.info("stale_response_discarded", cart_id=cart_id, command=command)
            return Error(StaleResponseError(
                f"Response to {command} arrived for a superseded cart", cart_id=cart_id,
            ))
        self.load(fresh)
        return result

    # ═══════════════════════════════════════════════════════════════════════════
    # Queries
    # ═══════════════════════════════════════════════════════════════════════════

    def progress(self, requested: str | None = None) -> St.CheckoutProgress:
        return St.progress(self.cart, requested)

    def totals(self) -> P.CartTotals:
        return P.cart_totals(self.cart)

    def payment_flow(self) -> PaymentFlow:
        return self.router.route(self.cart)

    async def submit_affordance(self) -> SubmitAffordance:
        """Disabled while any command for this cart is in flight."""
        if self.closed:
            return SubmitAffordance(enabled=False, reason="checkout_closed")
        if await self.guard.is_busy(self.cart.id):
            return SubmitAffordance(enabled=False, reason="busy")
        return submit_affordance(
            self.cart, self.payment_flow(), confirmed=self.confirmation is not None
        )

    # ═══════════════════════════════════════════════════════════════════════════
    # Commands
    # ═══════════════════════════════════════════════════════════════════════════

    async def refresh(self) -> Result[Cart, CartNotFoundError | CommandError]:
        """Re-read the cart from the backend, superseding any in-flight response."""
        if self.closed:
            return Error(self._closed_error())
        match await B.retrieve_cart(self.backend):
            case Ok(None):
                return Error(CartNotFoundError(f"Cart {self.cart.id} no longer exists"))
            case Ok(cart):
                self.load(cart)
                return Ok(cart)
            case Error(e):
                return Error(e)

    async def enter_step(
        self, requested: str | None
    ) -> Result[St.Step, St.StepGateError | BusyError | CheckoutClosedError]:
        if self.closed:
            return Error(self._closed_error())
        if await self.guard.is_busy(self.cart.id):
            return Error(BusyError(
                f"Cart {self.cart.id} is busy; stay on the current step",
                cart_id=self.cart.id,
            ))
        step = St.Step.parse(requested)
        if step is None:
            return Ok(St.default_step(self.cart))
        return St.enter(self.cart, step)

    async def submit_addresses(
        self,
        shipping: Address,
        billing: Address | None = None,
        *,
        same_as_billing: bool = True,
        email: str | None = None,
    ) -> Result[Cart, CommandError]:
        if self.closed:
            return Error(self._closed_error())
        billing_address = shipping if same_as_billing or billing is None else billing
        action = self.guard.run(
            self.cart.id,
            "set_addresses",
            B.set_addresses(self.backend, self.cart, shipping, billing_address, email),
        )
        return await self._apply("set_addresses", action)

    async def select_shipping_method(self, shipping_method_id: str) -> Result[Cart, CommandError]:
        if self.closed:
            return Error(self._closed_error())
        action = self.guard.run(
            self.cart.id,
            "set_shipping_method",
            B.set_shipping_method(self.backend, self.cart, shipping_method_id),
        )
        return await self._apply("set_shipping_method", action)

    async def apply_code(
        self, code: str
    ) -> Result[Cart, LedgerError | StaleResponseError | CheckoutClosedError]:
        if self.closed:
            return Error(self._closed_error())
        return await self._apply("apply_promotions", self.ledger.apply_code(self.cart, code))

    async def remove_code(
        self, code: str
    ) -> Result[Cart, LedgerError | StaleResponseError | CheckoutClosedError]:
        if self.closed:
            return Error(self._closed_error())
        return await self._apply("apply_promotions", self.ledger.remove_code(self.cart, code))

    async def select_payment_provider(self, provider_id: str) -> Result[Cart, CommandError]:
        if self.closed:
            return Error(self._closed_error())
        if await self.guard.is_busy(self.cart.id):
            return Error(BusyError(
                f"Cart {self.cart.id} is busy; keep the current payment method",
                cart_id=self.cart.id,
            ))
        return await self._apply(
            "initiate_payment_session",
            self.router.select_provider(self.cart, provider_id),
        )

    def confirm_payment(
        self, outcome: ProviderOutcome
    ) -> Result[PaymentConfirmation, PaymentDeclinedError | CheckoutClosedError]:
        """Record the provider's confirmation. A decline leaves the step state untouched."""
        if self.closed:
            return Error(self._closed_error())
        result = self.router.confirm(self.cart, outcome)
        match result:
            case Ok(confirmation):
                self.confirmation = confirmation
            case _:
                pass
        return result

    async def submit_order(self) -> Result[Order, SubmissionError | CheckoutClosedError]:
        if self.closed:
            return Error(self._closed_error())
        result = await self.coordinator.submit(self.cart, self.confirmation)
        match result:
            case Ok(order):
                self.order = order
            case _:
                pass
        return result


__all__ = ("CheckoutSession",)
