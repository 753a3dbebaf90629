"""
Wire models — request bodies in, checkout views out.

Requests convert with `to_domain()`, responses build with `from_domain()`.
"""

from __future__ import annotations

from pydantic import BaseModel

from storefront import pricing as P
from storefront._types import CheckoutError
from storefront.cart import Address, AddressDocument, Order
from storefront.checkout import CheckoutSession
from storefront.payment import (
    Deferred,
    Interactive,
    PaymentFlow,
    ProviderOutcome,
    SubmitAffordance,
    Unselected,
)
from storefront.promotions import describe
from storefront.steps import STEPS, CheckoutProgress, StepGateError
from storefront.submission import IncompleteCheckoutError

# ═══════════════════════════════════════════════════════════════════════════════
# Requests
# ═══════════════════════════════════════════════════════════════════════════════


class AddressesIn(BaseModel):
    shipping_address: AddressDocument
    billing_address: AddressDocument | None = None
    same_as_billing: bool = True
    email: str | None = None

    def to_domain(self) -> tuple[Address, Address | None]:
        billing = self.billing_address.to_domain() if self.billing_address else None
        return self.shipping_address.to_domain(), billing


class ShippingMethodIn(BaseModel):
    shipping_method_id: str


class PromotionCodeIn(BaseModel):
    code: str


class PaymentSessionIn(BaseModel):
    provider_id: str


class PaymentConfirmationIn(BaseModel):
    status: str
    error: str | None = None
    decline_code: str | None = None
    session_id: str | None = None

    def to_domain(self) -> ProviderOutcome:
        return ProviderOutcome(
            status=self.status,
            error=self.error,
            decline_code=self.decline_code,
            session_id=self.session_id,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# Responses
# ═══════════════════════════════════════════════════════════════════════════════


class ErrorOut(BaseModel):
    code: str
    message: str
    redirect_to: str | None = None

    @classmethod
    def from_domain(cls, dom: CheckoutError) -> ErrorOut:
        match dom:
            case StepGateError(redirect_to=step) | IncompleteCheckoutError(redirect_to=step):
                return cls(code=dom.code, message=dom.message, redirect_to=step.value)
            case _:
                return cls(code=dom.code, message=dom.message)


class StepOut(BaseModel):
    step: str
    allowed: bool
    completed: bool
    open: bool
    editable: bool


class LineItemOut(BaseModel):
    id: str
    title: str
    quantity: int
    total: int
    original_total: int | None = None
    percent_off: int | None = None
    unit_price: int
    original_unit_price: int | None = None


class PromotionOut(BaseModel):
    code: str | None
    value: str
    removable: bool


class PaymentFlowOut(BaseModel):
    kind: str
    provider_id: str | None = None
    family: str | None = None
    session_id: str | None = None
    client_secret: str | None = None

    @classmethod
    def from_domain(cls, dom: PaymentFlow) -> PaymentFlowOut:
        match dom:
            case Interactive(provider_id=pid, family=family, session_id=sid, client_secret=secret):
                return cls(
                    kind="interactive",
                    provider_id=pid,
                    family=family.value,
                    session_id=sid,
                    client_secret=secret,
                )
            case Deferred(provider_id=pid, family=family):
                return cls(kind="deferred", provider_id=pid, family=family.value)
            case Unselected(provider_id=pid):
                return cls(kind="unselected", provider_id=pid)


class SubmitOut(BaseModel):
    enabled: bool
    action: str | None = None
    reason: str | None = None

    @classmethod
    def from_domain(cls, dom: SubmitAffordance) -> SubmitOut:
        return cls(
            enabled=dom.enabled,
            action=dom.action.value if dom.action else None,
            reason=dom.reason,
        )


class CheckoutOut(BaseModel):
    cart_id: str
    active_step: str
    steps: list[StepOut]
    items: list[LineItemOut]
    promotions: list[PromotionOut]
    totals: list[str]
    total: int
    currency_code: str
    payment: PaymentFlowOut
    submit: SubmitOut

    @classmethod
    def from_domain(
        cls,
        session: CheckoutSession,
        progress: CheckoutProgress,
        submit: SubmitAffordance,
    ) -> CheckoutOut:
        cart = session.cart
        totals = session.totals()
        steps = [
            StepOut(
                step=step.value,
                allowed=step in progress.allowed,
                completed=step in progress.completed,
                open=progress.is_open(step),
                editable=progress.can_edit(step),
            )
            for step in STEPS
        ]
        items = []
        for item in cart.items:
            line = P.price_of(item)
            unit = P.unit_price_of(item)
            items.append(LineItemOut(
                id=item.id,
                title=item.title,
                quantity=item.quantity,
                total=line.current,
                original_total=line.original,
                percent_off=line.percent_off,
                unit_price=unit.current,
                original_unit_price=unit.original,
            ))
        promotions = [
            PromotionOut(
                code=p.code,
                value=describe(p, totals.currency_code),
                removable=p.removable,
            )
            for p in cart.promotions
        ]
        return cls(
            cart_id=cart.id,
            active_step=progress.active.value,
            steps=steps,
            items=items,
            promotions=promotions,
            totals=list(P.render_totals(totals)),
            total=totals.total,
            currency_code=totals.currency_code,
            payment=PaymentFlowOut.from_domain(session.payment_flow()),
            submit=SubmitOut.from_domain(submit),
        )


class OrderOut(BaseModel):
    id: str
    display_id: int | None = None
    email: str | None = None
    currency_code: str
    total: int
    total_display: str

    @classmethod
    def from_domain(cls, dom: Order) -> OrderOut:
        return cls(
            id=dom.id,
            display_id=dom.display_id,
            email=dom.email,
            currency_code=dom.currency_code,
            total=dom.total,
            total_display=P.format_amount(dom.total, dom.currency_code),
        )


__all__ = (
    "AddressesIn",
    "ShippingMethodIn",
    "PromotionCodeIn",
    "PaymentSessionIn",
    "PaymentConfirmationIn",
    "ErrorOut",
    "StepOut",
    "LineItemOut",
    "PromotionOut",
    "PaymentFlowOut",
    "SubmitOut",
    "CheckoutOut",
    "OrderOut",
)
