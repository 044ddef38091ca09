import asyncio


class HealthGauge:
    """
    Failure gauge backing the readiness check.

    Every resolution that ends in an internal error (the ledger node is unreachable,
    returns garbage, times out) adds to the gauge, and a background task drains it by one
    on every tick. A node outage therefore shows up as a burst that pushes the gauge
    over its threshold and fails readiness until the failures stop and the gauge decays.

    Not found and invalid DID results are ordinary outcomes and are not recorded.
    """

    def __init__(self, value: int = 0, failure_threshold: int = 100) -> None:
        self._value = value
        self._failure_threshold = failure_threshold
        self._lock = asyncio.Lock()

    async def record_failure(self, weight: int = 1) -> int:
        async with self._lock:
            self._value += int(weight)
            return self._value

    async def decay(self) -> None:
        async with self._lock:
            if self._value > 0:
                self._value -= 1

    async def is_healthy(self) -> bool:
        async with self._lock:
            return self._value <= self._failure_threshold
