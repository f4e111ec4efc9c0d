"""Tests for the single-slot TTL result cache."""

import asyncio

import pytest

from breach_db.orchestration import ResultCache, ResultEnvelope
from breach_db.sources.base import SessionException, SourceResult
from tests.fakes import FIXED_TIME


def make_envelope(tag: str = "a") -> ResultEnvelope:
    results = {"hhs": SourceResult.ok("hhs", [{"Name": tag}])}
    return ResultEnvelope.from_results(["hhs", "maine", "texas"], results, FIXED_TIME)


class TestResultCacheSlot:

    def test_empty_cache_returns_none(self, fake_clock):
        cache = ResultCache(clock=fake_clock)

        assert cache.get() is None

    def test_fresh_entry_is_served(self, fake_clock):
        cache = ResultCache(ttl_seconds=3600, clock=fake_clock)
        envelope = make_envelope()
        cache.put(envelope)

        fake_clock.advance(3599.9)

        assert cache.get() is envelope

    def test_entry_expires_at_ttl(self, fake_clock):
        cache = ResultCache(ttl_seconds=3600, clock=fake_clock)
        cache.put(make_envelope())

        fake_clock.advance(3600)

        assert cache.get() is None

    def test_put_overwrites_and_restarts_ttl(self, fake_clock):
        cache = ResultCache(ttl_seconds=10, clock=fake_clock)
        cache.put(make_envelope("old"))
        fake_clock.advance(8)
        newer = make_envelope("new")

        cache.put(newer)
        fake_clock.advance(8)

        assert cache.get() is newer
        fake_clock.advance(2)
        assert cache.get() is None

    def test_envelope_with_failed_sources_is_cached(self, fake_clock):
        cache = ResultCache(clock=fake_clock)
        envelope = make_envelope()
        assert envelope.meta.status["maine"] is False

        cache.put(envelope)

        assert cache.get() is envelope


class TestGetOrBuild:

    async def test_hit_does_not_rebuild(self, fake_clock):
        cache = ResultCache(clock=fake_clock)
        calls = []

        async def builder():
            calls.append(1)
            return make_envelope()

        first = await cache.get_or_build(builder)
        fake_clock.advance(60)
        second = await cache.get_or_build(builder)

        assert len(calls) == 1
        assert second is first
        assert second.model_dump_json() == first.model_dump_json()

    async def test_expired_entry_triggers_rebuild(self, fake_clock):
        cache = ResultCache(ttl_seconds=3600, clock=fake_clock)
        envelopes = iter([make_envelope("first"), make_envelope("second")])

        async def builder():
            return next(envelopes)

        first = await cache.get_or_build(builder)
        fake_clock.advance(3600 + 0.001)
        second = await cache.get_or_build(builder)

        assert second is not first
        assert second.data["hhs"] == [{"Name": "second"}]

    async def test_concurrent_callers_share_one_rebuild(self, fake_clock):
        cache = ResultCache(clock=fake_clock)
        release = asyncio.Event()
        calls = []

        async def builder():
            calls.append(1)
            await release.wait()
            return make_envelope()

        waiters = [asyncio.ensure_future(cache.get_or_build(builder)) for _ in range(3)]
        await asyncio.sleep(0)
        release.set()
        results = await asyncio.gather(*waiters)

        assert len(calls) == 1
        assert results[0] is results[1] is results[2]
        assert cache.get() is results[0]

    async def test_builder_error_reaches_all_waiters_and_is_not_cached(self, fake_clock):
        cache = ResultCache(clock=fake_clock)
        release = asyncio.Event()
        calls = []

        async def failing_builder():
            calls.append(1)
            await release.wait()
            raise SessionException("Failed to launch browser")

        waiters = [asyncio.ensure_future(cache.get_or_build(failing_builder)) for _ in range(2)]
        await asyncio.sleep(0)
        release.set()
        outcomes = await asyncio.gather(*waiters, return_exceptions=True)

        assert len(calls) == 1
        assert all(isinstance(o, SessionException) for o in outcomes)
        assert cache.get() is None

        async def builder():
            return make_envelope()

        assert await cache.get_or_build(builder) is cache.get()

    async def test_cancelled_caller_does_not_cancel_rebuild(self, fake_clock):
        cache = ResultCache(clock=fake_clock)
        release = asyncio.Event()

        async def builder():
            await release.wait()
            return make_envelope()

        impatient = asyncio.ensure_future(cache.get_or_build(builder))
        patient = asyncio.ensure_future(cache.get_or_build(builder))
        await asyncio.sleep(0)
        impatient.cancel()
        release.set()

        with pytest.raises(asyncio.CancelledError):
            await impatient
        envelope = await patient

        assert cache.get() is envelope
