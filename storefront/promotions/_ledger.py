"""
Promotion ledger — a thin reconciliation layer over the backend.

The backend decides which combination of codes is valid. The ledger only
computes the full code set to submit, from the freshest cart, on every add
or remove. It never diffs locally and never computes a discount.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from kungfu import Error, LazyCoroResult, Ok, Result

from storefront import backend as B
from storefront._types import BackendError
from storefront.backend import CommerceBackend
from storefront.cart import ApplicationType, Cart, Promotion
from storefront.inflight import InFlightGuard
from storefront.lift import from_result
from storefront.observability import get_logger
from storefront.pricing import format_amount
from storefront.promotions._types import (
    AutomaticPromotionError,
    EmptyCodeError,
    LedgerError,
    PromotionNotFoundError,
    PromotionRejectedError,
)

log = get_logger("promotions")

# ═══════════════════════════════════════════════════════════════════════════════
# Code Sets
# ═══════════════════════════════════════════════════════════════════════════════


def _same_code(a: str, b: str) -> bool:
    return a.casefold() == b.casefold()


def codes_with(cart: Cart, code: str) -> tuple[str, ...]:
    """
    Every code on the cart plus `code`, in order, without duplicates.

    Example:
        codes_with(cart, "SUMMER")  # ("WELCOME", "SUMMER")
    """
    codes = list(cart.promotion_codes)
    if not any(_same_code(c, code) for c in codes):
        codes.append(code)
    return tuple(codes)


def codes_without(cart: Cart, code: str) -> tuple[str, ...]:
    """
    Every code on the cart except `code`.

    Codeless (automatic) promotions never appear: there is nothing to submit
    for them, and the backend re-applies them on its own.
    """
    return tuple(c for c in cart.promotion_codes if not _same_code(c, code))


def describe(promotion: Promotion, currency_code: str) -> str:
    """
    Display value of a promotion.

    Example:
        describe(percent_promo, "usd")  # "10%"
        describe(fixed_promo, "usd")    # "5.00"
    """
    method = promotion.application_method
    if method is None:
        return ""
    if method.type is ApplicationType.PERCENTAGE:
        return f"{method.value}%"
    return format_amount(method.value, method.currency_code or currency_code)


# ═══════════════════════════════════════════════════════════════════════════════
# Ledger
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(slots=True, frozen=True)
class PromotionLedger:
    """
    Apply and remove promotion codes.

    Example:
        ledger = PromotionLedger(client)
        result = await ledger.apply_code(cart, "SUMMER10")

        match result:
            case Ok(fresh_cart): ...
            case Error(PromotionRejectedError(cart=fresh_cart)): ...
            case Error(e): print(e.code, e.message)
    """

    backend: CommerceBackend
    guard: InFlightGuard = field(default_factory=InFlightGuard)

    def apply_code(self, cart: Cart, code: str) -> LazyCoroResult[Cart, LedgerError]:
        normalized = code.strip()
        if not normalized:
            return from_result(Error(EmptyCodeError(
                "Enter a promotion code", promotion_code=code,
            )))

        codes = codes_with(cart, normalized)

        async def request() -> Result[Cart, BackendError]:
            log.info("promotion_apply_requested", cart_id=cart.id, code=normalized, codes=codes)
            return await B.apply_promotions(self.backend, cart, codes)

        submit = self.guard.run(cart.id, "apply_promotions", LazyCoroResult(request))

        async def execute() -> Result[Cart, LedgerError]:
            match await submit:
                case Ok(fresh):
                    if not any(_same_code(c, normalized) for c in fresh.promotion_codes):
                        log.info("promotion_rejected", cart_id=cart.id, code=normalized)
                        return Error(PromotionRejectedError(
                            f"Code {normalized} is not valid for this cart",
                            promotion_code=normalized,
                            cart=fresh,
                        ))
                    return Ok(fresh)
                case Error(e):
                    return Error(e)

        return LazyCoroResult(execute)

    def remove_code(self, cart: Cart, code: str) -> LazyCoroResult[Cart, LedgerError]:
        normalized = code.strip()
        if not normalized:
            return from_result(Error(EmptyCodeError(
                "Enter a promotion code", promotion_code=code,
            )))

        matching = [p for p in cart.promotions if p.code and _same_code(p.code, normalized)]
        if not matching:
            return from_result(Error(PromotionNotFoundError(
                f"Code {normalized} is not applied to this cart",
                promotion_code=normalized,
            )))
        if not any(p.removable for p in matching):
            return from_result(Error(AutomaticPromotionError(
                f"Code {normalized} is applied automatically",
                promotion_code=normalized,
            )))

        codes = codes_without(cart, normalized)

        async def request() -> Result[Cart, BackendError]:
            log.info("promotion_remove_requested", cart_id=cart.id, code=normalized, codes=codes)
            return await B.apply_promotions(self.backend, cart, codes)

        return self.guard.run(cart.id, "apply_promotions", LazyCoroResult(request))


__all__ = ("codes_with", "codes_without", "describe", "PromotionLedger")
