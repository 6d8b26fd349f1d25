"""
Unit tests for scheduled refresh.

These tests verify:
1. The scheduler runs its coroutine on an interval until stopped
2. A failing refresh does not stop the schedule
3. The async context manager ties the schedule to a scope
"""

import asyncio

import pytest

from gestio.application.refresh import RefreshScheduler
from gestio.application.repositories import TransactionRepository
from gestio.domain.interfaces import EntityTable
from tests.unit.conftest import FakeRecordStore


class TestRefreshScheduler:

    def test_interval_must_be_positive(self):
        async def noop():
            return None

        with pytest.raises(ValueError):
            RefreshScheduler(noop, interval=0)

    def test_default_interval(self):
        async def noop():
            return None

        assert RefreshScheduler(noop).interval == 30.0

    @pytest.mark.asyncio
    async def test_runs_until_stopped(self):
        calls = []

        async def refresh():
            calls.append(1)

        scheduler = RefreshScheduler(refresh, interval=0.01)
        scheduler.start()
        await asyncio.sleep(0.1)
        await scheduler.stop()

        count = len(calls)
        assert count >= 2
        assert not scheduler.running

        await asyncio.sleep(0.05)
        assert len(calls) == count

    @pytest.mark.asyncio
    async def test_failures_do_not_stop_schedule(self):
        calls = []

        async def refresh():
            calls.append(1)
            raise RuntimeError("boom")

        async with RefreshScheduler(refresh, interval=0.01) as scheduler:
            await asyncio.sleep(0.1)
            assert scheduler.running

        assert len(calls) >= 2
        assert not scheduler.running

    @pytest.mark.asyncio
    async def test_start_twice_is_noop(self):
        async def refresh():
            return None

        scheduler = RefreshScheduler(refresh, interval=10)
        scheduler.start()
        task = scheduler._task
        scheduler.start()
        assert scheduler._task is task
        await scheduler.stop()

    @pytest.mark.asyncio
    async def test_stop_without_start(self):
        async def refresh():
            return None

        await RefreshScheduler(refresh, interval=1).stop()


class TestTransactionAutoRefresh:

    @pytest.mark.asyncio
    async def test_picks_up_new_rows(self, store: FakeRecordStore):
        repo = TransactionRepository(store)
        seen = []

        async with repo.auto_refresh(interval=0.01, on_refresh=seen.append):
            store.seed(EntityTable.TRANSACTIONS, amount="5", currency_code="USD", type="income")
            await asyncio.sleep(0.1)

        assert len(repo.items) == 1
        assert seen and len(seen[-1]) == 1
