"""
In-flight guard — refuse, never queue.

A second command for a cart that already has one outstanding is refused
with BusyError. There is no waiting and no coalescing.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from kungfu import Error, LazyCoroResult, Ok, Result

from storefront._types import BackendError, BusyError, CartId
from storefront.inflight._store import FlightStore, MemoryFlightStore
from storefront.observability import get_logger

log = get_logger("inflight")


@dataclass(slots=True, frozen=True)
class InFlightGuard:
    """
    Per-cart mutual exclusion for backend commands.

    Example:
        guard = InFlightGuard()
        result = await guard.run(cart.id, "place_order", B.place_order(client, cart))
    """

    store: FlightStore = field(default_factory=MemoryFlightStore)

    def run[T, E](
        self,
        cart_id: CartId,
        command: str,
        action: LazyCoroResult[T, E],
    ) -> LazyCoroResult[T, E | BusyError | BackendError]:
        store = self.store

        async def execute() -> Result[T, E | BusyError | BackendError]:
            match await store.set_pending(cart_id, command):
                case Error(store_error):
                    return Error(BackendError(store_error.message, command=command))
                case Ok(False):
                    log.info("command_refused_busy", cart_id=cart_id, command=command)
                    return Error(BusyError(
                        f"Cart {cart_id} is busy; {command} refused",
                        cart_id=cart_id,
                    ))
                case _:
                    pass

            try:
                return await action
            finally:
                await store.clear(cart_id)

        return LazyCoroResult(execute)

    async def is_busy(self, cart_id: CartId) -> bool:
        match await self.store.get(cart_id):
            case Ok(flight):
                return flight is not None
            case _:
                return False


__all__ = ("InFlightGuard",)
