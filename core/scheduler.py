from __future__ import annotations
from datetime import datetime, timedelta
from zoneinfo import ZoneInfo
from apscheduler.schedulers.asyncio import AsyncIOScheduler
import logging

import core.config as config
from service.customer_store import get_store
from service.keepalive import KeepAlive

### keep-alive: 부팅 직후 1회 + KEEPALIVE_CHECK_MINUTES 마다 점검.
### 실제 ping 은 마지막 성공 후 KEEPALIVE_INTERVAL_HOURS 가 지났을 때만.

TZ = ZoneInfo(config.SCHEDULER_TZ)
log = logging.getLogger("scheduler")

_SCHED: AsyncIOScheduler | None = None

def _now() -> datetime:
    return datetime.now(TZ)

def build_keepalive() -> KeepAlive:
    return KeepAlive(
        get_store(),
        config.KEEPALIVE_STATE_FILE,
        interval=timedelta(hours=config.KEEPALIVE_INTERVAL_HOURS),
    )

def init_scheduler(keepalive: KeepAlive | None = None, start_immediately: bool = True) -> AsyncIOScheduler:
    global _SCHED
    keepalive = keepalive or build_keepalive()
    sched = AsyncIOScheduler(
        timezone=TZ,
        job_defaults={"coalesce": True, "max_instances": 1},
    )
    sched.add_job(
        keepalive.run_once,
        trigger="interval",
        minutes=config.KEEPALIVE_CHECK_MINUTES,
        # 부팅 직후 한 번 바로 점검 (아니면 첫 interval 후)
        **({"next_run_time": _now()} if start_immediately else {}),
        id="db_keepalive",
        replace_existing=True,
        misfire_grace_time=300,
    )
    log.info(
        "keep-alive scheduled every %d min (ping interval %sh)",
        config.KEEPALIVE_CHECK_MINUTES,
        config.KEEPALIVE_INTERVAL_HOURS,
    )
    _SCHED = sched
    return sched

def shutdown_scheduler(sched: AsyncIOScheduler | None = None) -> None:
    global _SCHED
    sched = sched or _SCHED
    if sched and sched.running:
        sched.remove_all_jobs()
        sched.shutdown(wait=False)
    _SCHED = None
