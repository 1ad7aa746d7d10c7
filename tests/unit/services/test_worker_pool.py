"""Unit tests for the bounded worker pool."""

from __future__ import annotations

import asyncio

import pytest

from jira_ai_fields.services.enrichment.pool import run_bounded


class _Tracker:
    """Handler that records peak concurrency; delay per item."""

    def __init__(self, delays: dict[int, float] | None = None):
        self.delays = delays or {}
        self.in_flight = 0
        self.peak = 0
        self.started: list[int] = []

    async def __call__(self, item: int) -> int:
        self.started.append(item)
        self.in_flight += 1
        self.peak = max(self.peak, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(item, 0.001))
            return item * 10
        finally:
            self.in_flight -= 1


class TestRunBounded:
    @pytest.mark.asyncio
    async def test_results_follow_input_order(self):
        # Earlier items finish last
        tracker = _Tracker({0: 0.05, 1: 0.03, 2: 0.01})

        results = await run_bounded([0, 1, 2, 3], tracker, concurrency=4)

        assert results == [0, 10, 20, 30]

    @pytest.mark.asyncio
    async def test_concurrency_is_bounded(self):
        tracker = _Tracker()

        await run_bounded(list(range(20)), tracker, concurrency=3)

        assert tracker.peak == 3

    @pytest.mark.asyncio
    async def test_concurrency_one_runs_sequentially(self):
        tracker = _Tracker()

        results = await run_bounded([3, 1, 2], tracker, concurrency=1)

        assert tracker.peak == 1
        assert tracker.started == [3, 1, 2]
        assert results == [30, 10, 20]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("concurrency", [0, -5])
    async def test_non_positive_concurrency_still_runs(self, concurrency):
        tracker = _Tracker()

        results = await run_bounded([1, 2], tracker, concurrency=concurrency)

        assert results == [10, 20]
        assert tracker.peak == 1

    @pytest.mark.asyncio
    async def test_each_item_handled_once(self):
        tracker = _Tracker()

        await run_bounded(list(range(7)), tracker, concurrency=10)

        assert sorted(tracker.started) == list(range(7))

    @pytest.mark.asyncio
    async def test_empty_input(self):
        tracker = _Tracker()

        assert await run_bounded([], tracker, concurrency=5) == []
        assert tracker.started == []

    @pytest.mark.asyncio
    async def test_raising_handler_does_not_strand_siblings(self):
        handled: list[int] = []

        async def handler(item: int) -> int:
            await asyncio.sleep(0.001)
            if item in (2, 4):
                raise ValueError(f"bad item {item}")
            handled.append(item)
            return item

        with pytest.raises(ValueError, match="bad item 2"):
            await run_bounded([1, 2, 3, 4, 5, 6], handler, concurrency=2)

        assert sorted(handled) == [1, 3, 5, 6]
