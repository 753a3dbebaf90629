"""
Pricing engine — pure functions over cart snapshots.

All arithmetic is integer arithmetic in minor units. Rounding is
nearest-integer with ties rounding up.
"""

from __future__ import annotations

from storefront._types import ConfigurationError
from storefront.cart import Cart, LineItem
from storefront.observability import get_logger
from storefront.pricing._types import CartTotals, ItemPrice

log = get_logger("pricing")

# ═══════════════════════════════════════════════════════════════════════════════
# Rounding
# ═══════════════════════════════════════════════════════════════════════════════


def _div_half_up(numerator: int, denominator: int) -> int:
    """numerator / denominator rounded to nearest, ties up. denominator > 0."""
    return (2 * numerator + denominator) // (2 * denominator)


def percent_off(original: int, current: int) -> int:
    """
    Percentage difference between two prices.

    Example:
        percent_off(3000, 2000)  # 33
        percent_off(200, 199)    # 1  (0.5 rounds up)
    """
    if original <= 0:
        return 0
    return _div_half_up((original - current) * 100, original)


# ═══════════════════════════════════════════════════════════════════════════════
# Line & Unit Prices
# ═══════════════════════════════════════════════════════════════════════════════


def _price(current: int, original: int, *, item_id: str) -> ItemPrice:
    if current == original:
        return ItemPrice(current=current)
    if current > original:
        log.warning(
            "item_price_above_original",
            item_id=item_id,
            current=current,
            original=original,
        )
        return ItemPrice(current=current)
    return ItemPrice(
        current=current,
        original=original,
        percent_off=percent_off(original, current),
    )


def price_of(item: LineItem) -> ItemPrice:
    """
    Line total with its pre-promotion original.

    Example:
        price_of(item)  # ItemPrice(current=9000, original=10000, percent_off=10)
    """
    return _price(item.total, item.original_total, item_id=item.id)


def unit_price_of(item: LineItem) -> ItemPrice:
    """
    Per-unit price.

    Both totals are divided by quantity first and the percentage is taken on
    the divided values, so a single-unit line reports the same percentage as
    price_of().
    """
    if item.quantity < 1:
        raise ValueError(f"Line item {item.id} has quantity {item.quantity}")
    current = _div_half_up(item.total, item.quantity)
    original = _div_half_up(item.original_total, item.quantity)
    return _price(current, original, item_id=item.id)


# ═══════════════════════════════════════════════════════════════════════════════
# Cart Totals
# ═══════════════════════════════════════════════════════════════════════════════


def _positive(amount: int | None) -> int | None:
    return amount if amount is not None and amount > 0 else None


def cart_totals(cart: Cart) -> CartTotals:
    """
    Summary block of a cart.

    Raises:
        ConfigurationError: cart has no currency. The engine never guesses one.
    """
    currency_code = cart.currency_code
    if not currency_code:
        raise ConfigurationError(
            f"Cart {cart.id} has no currency_code", cart_id=cart.id
        )

    expected = (
        cart.subtotal
        - cart.discount_total
        - cart.gift_card_total
        + (cart.shipping_total or 0)
        + (cart.tax_total or 0)
    )
    if expected != cart.total:
        log.warning(
            "cart_total_mismatch",
            cart_id=cart.id,
            expected=expected,
            total=cart.total,
        )

    return CartTotals(
        currency_code=currency_code,
        subtotal=cart.subtotal,
        total=cart.total,
        discount_total=_positive(cart.discount_total),
        gift_card_total=_positive(cart.gift_card_total),
        shipping_total=cart.shipping_total,
        tax_total=cart.tax_total,
    )


__all__ = ("percent_off", "price_of", "unit_price_of", "cart_totals")
