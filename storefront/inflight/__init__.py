"""
In-flight — one outstanding backend command per cart.

    from storefront import inflight as F

    guard = F.InFlightGuard(F.MemoryFlightStore())
    result = await guard.run(cart.id, "apply_promotions", command)
    # Error(BusyError) if another command for cart.id is still running
"""

from storefront.inflight._store import (
    StoreError,
    Flight,
    FlightStore,
    MemoryFlightStore,
)
from storefront.inflight._guard import InFlightGuard

__all__ = (
    "StoreError",
    "Flight",
    "FlightStore",
    "MemoryFlightStore",
    "InFlightGuard",
)
