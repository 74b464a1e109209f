# service/keepalive.py
from __future__ import annotations

import json
import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Callable, Optional, Protocol

from core.exceptions import StoreError

log = logging.getLogger("keepalive")

class Pingable(Protocol):
    async def ping(self) -> None: ...

def _utcnow() -> datetime:
    return datetime.now(timezone.utc)

class KeepAlive:
    """
    Hosted postgres 가 idle 로 pause 되지 않도록 가벼운 read 를 보낸다.

    The last successful ping is persisted as a UTC instant; a new ping is sent
    only once `interval` has elapsed since then, however often the check runs
    or the app restarts.
    """

    def __init__(
        self,
        store: Pingable,
        state_file: str | Path,
        *,
        interval: timedelta = timedelta(hours=24),
        now: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._store = store
        self._state_file = Path(state_file)
        self._interval = interval
        self._now = now

    # -------------------------
    # persisted state
    # -------------------------
    def last_ping_at(self) -> Optional[datetime]:
        try:
            raw = json.loads(self._state_file.read_text(encoding="utf-8"))
            ts = datetime.fromisoformat(raw["last_ping_at"])
        except FileNotFoundError:
            return None
        except (ValueError, KeyError, TypeError) as e:
            log.warning("unreadable keep-alive state %s: %s", self._state_file, e)
            return None
        if ts.tzinfo is None:
            ts = ts.replace(tzinfo=timezone.utc)
        return ts

    def _save(self, ts: datetime) -> None:
        self._state_file.parent.mkdir(parents=True, exist_ok=True)
        self._state_file.write_text(
            json.dumps({"last_ping_at": ts.astimezone(timezone.utc).isoformat()}),
            encoding="utf-8",
        )

    def is_due(self) -> bool:
        last = self.last_ping_at()
        return last is None or self._now() - last >= self._interval

    # -------------------------
    # job body
    # -------------------------
    async def run_once(self) -> bool:
        """True when a ping was sent. Failures are logged and swallowed."""
        if not self.is_due():
            return False
        try:
            await self._store.ping()
        except StoreError as e:
            log.exception("keep-alive ping failed: %s", e.cause)
            return False

        ts = self._now()
        try:
            self._save(ts)
        except OSError:
            log.exception("keep-alive state not saved: %s", self._state_file)
        log.info("database pinged to keep project active at %s", ts.isoformat())
        return True
