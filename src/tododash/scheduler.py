"""Periodic dashboard refresh."""

import logging
from collections.abc import Callable
from datetime import datetime

from apscheduler.schedulers.blocking import BlockingScheduler
from apscheduler.triggers.interval import IntervalTrigger

from .config import Config
from .ports.errors import TododashError
from .workflows import DashboardData

logger = logging.getLogger(__name__)


def create_scheduler(
    config: Config,
    refresh: Callable[[], DashboardData],
    on_update: Callable[[DashboardData], None],
    on_error: Callable[[TododashError], None] | None = None,
    interval_minutes: int | None = None,
) -> BlockingScheduler:
    """
    Build a scheduler that refreshes the dashboard on a fixed interval.

    At most one refresh runs at a time; runs missed while one is in flight
    are coalesced into a single run.
    """
    minutes = interval_minutes or config.refresh_minutes

    def job() -> None:
        try:
            data = refresh()
        except TododashError as e:
            logger.warning(f"Dashboard refresh failed: {e}")
            if on_error:
                on_error(e)
            return
        on_update(data)

    scheduler = BlockingScheduler()
    scheduler.add_job(
        job,
        IntervalTrigger(minutes=minutes),
        id="dashboard_refresh",
        name="Dashboard refresh",
        max_instances=1,
        coalesce=True,
        next_run_time=datetime.now(),
    )
    logger.info(f"Scheduled dashboard refresh every {minutes} minutes")
    return scheduler
