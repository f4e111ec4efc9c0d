"""
Result Cache

Single-slot, time-to-live cache in front of the aggregation pipeline.

- The whole envelope is cached or rebuilt as a unit, including sources that
  failed on the run that produced it.
- An entry is served while clock() - fetched_at < ttl. Stale entries stay in
  the slot until the next successful rebuild overwrites them.
- At most one rebuild is in flight: callers arriving during a rebuild await
  the same task instead of starting their own.
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from .envelope import ResultEnvelope

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 3600


@dataclass(frozen=True)
class CacheEntry:
    envelope: ResultEnvelope
    fetched_at: float


class ResultCache:
    """TTL cache holding the most recent result envelope"""

    def __init__(self, ttl_seconds: float = DEFAULT_TTL_SECONDS,
                 clock: Callable[[], float] = time.monotonic):
        """
        Args:
            ttl_seconds: Validity window of a cached envelope
            clock: Monotonic time source in seconds
        """
        self.ttl_seconds = ttl_seconds
        self.clock = clock
        self._entry: Optional[CacheEntry] = None
        self._inflight: Optional[asyncio.Future] = None

    def get(self) -> Optional[ResultEnvelope]:
        """Return the cached envelope if it is still fresh"""
        entry = self._entry
        if entry is None:
            return None
        if self.clock() - entry.fetched_at >= self.ttl_seconds:
            return None
        return entry.envelope

    def put(self, envelope: ResultEnvelope) -> None:
        """Store an envelope, replacing whatever was cached"""
        self._entry = CacheEntry(envelope=envelope, fetched_at=self.clock())

    async def get_or_build(self, builder: Callable[[], Awaitable[ResultEnvelope]]) -> ResultEnvelope:
        """
        Serve the cached envelope, or rebuild it with builder.

        Errors raised by builder reach every caller waiting on that rebuild and
        leave the cache untouched.
        """
        envelope = self.get()
        if envelope is not None:
            logger.info("Returning cached data")
            return envelope

        if self._inflight is None:
            logger.info("Cache empty or expired, rebuilding")
            self._inflight = asyncio.ensure_future(self._rebuild(builder))
            self._inflight.add_done_callback(self._release_inflight)
        else:
            logger.info("Waiting for rebuild already in progress")

        # A cancelled caller must not cancel the rebuild other callers share
        return await asyncio.shield(self._inflight)

    def _release_inflight(self, future: asyncio.Future) -> None:
        if self._inflight is future:
            self._inflight = None

    async def _rebuild(self, builder: Callable[[], Awaitable[ResultEnvelope]]) -> ResultEnvelope:
        envelope = await builder()
        self.put(envelope)
        return envelope
