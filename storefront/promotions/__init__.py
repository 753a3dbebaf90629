"""
Promotions — code-activated discounts, reconciled against the backend.

    from storefront import promotions as Pr

    ledger = Pr.PromotionLedger(client)
    result = await ledger.apply_code(cart, "SUMMER10")
    result = await ledger.remove_code(cart, "SUMMER10")

Automatic promotions (no code) are never submitted for removal.
"""

from storefront.promotions._types import (
    PromotionError,
    EmptyCodeError,
    PromotionNotFoundError,
    AutomaticPromotionError,
    PromotionRejectedError,
    LedgerError,
)
from storefront.promotions._ledger import (
    codes_with,
    codes_without,
    describe,
    PromotionLedger,
)

__all__ = (
    "PromotionError",
    "EmptyCodeError",
    "PromotionNotFoundError",
    "AutomaticPromotionError",
    "PromotionRejectedError",
    "LedgerError",
    "codes_with",
    "codes_without",
    "describe",
    "PromotionLedger",
)
