"""
Amount display — minor units to a plain major-unit decimal string.

No symbols, no grouping, no locale: that is the presentation layer's job.
Formatting happens strictly after arithmetic.
"""

from __future__ import annotations

from decimal import Decimal

from storefront.pricing._types import CartTotals

# ISO 4217 minor-unit exponents that differ from 2.
CURRENCY_EXPONENT: dict[str, int] = {
    # Zero-decimal currencies
    "BIF": 0,
    "CLP": 0,
    "DJF": 0,
    "GNF": 0,
    "ISK": 0,
    "JPY": 0,
    "KMF": 0,
    "KRW": 0,
    "PYG": 0,
    "RWF": 0,
    "UGX": 0,
    "VND": 0,
    "VUV": 0,
    "XAF": 0,
    "XOF": 0,
    "XPF": 0,
    # 3-decimal currencies
    "BHD": 3,
    "IQD": 3,
    "JOD": 3,
    "KWD": 3,
    "LYD": 3,
    "OMR": 3,
    "TND": 3,
}


def currency_exponent(currency_code: str) -> int:
    return CURRENCY_EXPONENT.get(currency_code.upper(), 2)


def format_amount(amount: int, currency_code: str) -> str:
    """
    Example:
        format_amount(10000, "usd")  # "100.00"
        format_amount(-1000, "eur")  # "-10.00"
        format_amount(1500, "jpy")   # "1500"
    """
    exponent = currency_exponent(currency_code)
    value = Decimal(amount).scaleb(-exponent)
    return f"{value:.{exponent}f}"


def render_totals(totals: CartTotals) -> tuple[str, ...]:
    """
    Summary lines in display order.

    Example:
        render_totals(totals)
        # ("Subtotal: 100.00", "Discount: -10.00", "Total: 90.00")
    """
    cur = totals.currency_code
    lines = [f"Subtotal: {format_amount(totals.subtotal, cur)}"]
    if totals.discount_total is not None:
        lines.append(f"Discount: {format_amount(-totals.discount_total, cur)}")
    if totals.shipping_total is not None:
        lines.append(f"Shipping: {format_amount(totals.shipping_total, cur)}")
    if totals.tax_total is not None:
        lines.append(f"Taxes: {format_amount(totals.tax_total, cur)}")
    if totals.gift_card_total is not None:
        lines.append(f"Gift card: {format_amount(-totals.gift_card_total, cur)}")
    lines.append(f"Total: {format_amount(totals.total, cur)}")
    return tuple(lines)


__all__ = ("CURRENCY_EXPONENT", "currency_exponent", "format_amount", "render_totals")
