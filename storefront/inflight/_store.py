"""
In-flight store — one busy flag per cart.

FlightStore is a protocol; every method returns a Result.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from kungfu import Result, Ok


# ═══════════════════════════════════════════════════════════════════════════════
# Store Error
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class StoreError:
    """Storage operation error."""

    message: str
    cause: Exception | None = None


@dataclass(frozen=True, slots=True)
class Flight:
    """An outstanding backend command for a cart."""

    key: str
    command: str
    started_at: datetime


# ═══════════════════════════════════════════════════════════════════════════════
# Store Protocol
# ═══════════════════════════════════════════════════════════════════════════════


class FlightStore(Protocol):
    async def get(self, key: str) -> Result[Flight | None, StoreError]:
        """Outstanding flight for key. Returns Ok(None) if idle."""
        ...

    async def set_pending(self, key: str, command: str) -> Result[bool, StoreError]:
        """
        Atomically mark key busy.

        Returns Ok(True) if set, Ok(False) if a flight already exists.
        Must be atomic (compare-and-swap).
        """
        ...

    async def clear(self, key: str) -> Result[bool, StoreError]:
        """Mark key idle. Returns Ok(True) if a flight existed."""
        ...


# ═══════════════════════════════════════════════════════════════════════════════
# Memory Store
# ═══════════════════════════════════════════════════════════════════════════════


class MemoryFlightStore:
    """
    In-memory flight store.

    Note: single process only. Busy flags do not survive a restart, which is
    fine: a restart also drops every outstanding request.
    """

    def __init__(self) -> None:
        self._flights: dict[str, Flight] = {}
        self._lock = asyncio.Lock()

    async def get(self, key: str) -> Result[Flight | None, StoreError]:
        async with self._lock:
            return Ok(self._flights.get(key))

    async def set_pending(self, key: str, command: str) -> Result[bool, StoreError]:
        async with self._lock:
            if key in self._flights:
                return Ok(False)
            self._flights[key] = Flight(
                key=key, command=command, started_at=datetime.now()
            )
            return Ok(True)

    async def clear(self, key: str) -> Result[bool, StoreError]:
        async with self._lock:
            if key in self._flights:
                del self._flights[key]
                return Ok(True)
            return Ok(False)


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "StoreError",
    "Flight",
    "FlightStore",
    "MemoryFlightStore",
)
