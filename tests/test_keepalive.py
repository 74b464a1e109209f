"""
Keep-alive pinger: at most one ping per interval, failures swallowed.
"""
from __future__ import annotations

import asyncio
import json
from datetime import datetime, timedelta, timezone

from core.exceptions import StoreError
from service.keepalive import KeepAlive


class CountingStore:
    def __init__(self, fail: bool = False):
        self.pings = 0
        self.fail = fail

    async def ping(self):
        self.pings += 1
        if self.fail:
            raise StoreError("ping", ConnectionError("paused"))


class Clock:
    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now


T0 = datetime(2026, 10, 19, 23, 30, tzinfo=timezone.utc)


def test_first_run_pings_and_persists_instant(tmp_path):
    store = CountingStore()
    state = tmp_path / "var" / "keepalive.json"
    ka = KeepAlive(store, state, now=Clock(T0))

    assert asyncio.run(ka.run_once()) is True

    assert store.pings == 1
    assert json.loads(state.read_text())["last_ping_at"] == T0.isoformat()
    assert ka.last_ping_at() == T0


def test_many_loads_within_window_ping_once(tmp_path):
    store = CountingStore()
    clock = Clock(T0)
    state = tmp_path / "keepalive.json"

    for minutes in (0, 1, 45, 60 * 23):
        clock.now = T0 + timedelta(minutes=minutes)
        # fresh instance each time, like an app restart
        asyncio.run(KeepAlive(store, state, now=clock).run_once())

    assert store.pings == 1


def test_crossing_midnight_is_not_enough(tmp_path):
    store = CountingStore()
    clock = Clock(T0)
    ka = KeepAlive(store, tmp_path / "k.json", now=clock)
    asyncio.run(ka.run_once())

    clock.now = T0 + timedelta(hours=1)  # next calendar day, same window
    assert asyncio.run(ka.run_once()) is False

    clock.now = T0 + timedelta(hours=24)
    assert asyncio.run(ka.run_once()) is True
    assert store.pings == 2


def test_failed_ping_is_not_recorded(tmp_path):
    store = CountingStore(fail=True)
    state = tmp_path / "k.json"
    ka = KeepAlive(store, state, now=Clock(T0))

    assert asyncio.run(ka.run_once()) is False
    assert not state.exists()

    # retried on the next scheduled check
    store.fail = False
    assert asyncio.run(ka.run_once()) is True
    assert store.pings == 2


def test_corrupt_state_file_counts_as_never_pinged(tmp_path):
    state = tmp_path / "k.json"
    state.write_text("{not json")
    ka = KeepAlive(CountingStore(), state, now=Clock(T0))

    assert ka.last_ping_at() is None
    assert ka.is_due() is True


def test_naive_timestamp_read_as_utc(tmp_path):
    state = tmp_path / "k.json"
    state.write_text(json.dumps({"last_ping_at": "2026-10-19T10:00:00"}))
    ka = KeepAlive(CountingStore(), state, now=Clock(T0))

    assert ka.last_ping_at() == datetime(2026, 10, 19, 10, 0, tzinfo=timezone.utc)
