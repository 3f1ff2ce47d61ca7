"""Tests for the periodic refresh scheduler."""

from unittest.mock import MagicMock

import pytest

from tododash.config import Config
from tododash.ports.errors import RequestError
from tododash.scheduler import create_scheduler


@pytest.fixture
def config():
    return Config(refresh_minutes=10)


def get_job(scheduler):
    return scheduler.get_job("dashboard_refresh")


class TestCreateScheduler:
    def test_single_instance_coalesced_job(self, config):
        scheduler = create_scheduler(config, refresh=MagicMock(), on_update=MagicMock())
        job = get_job(scheduler)

        assert job.max_instances == 1
        assert job.coalesce is True
        assert job.trigger.interval.total_seconds() == 600

    def test_interval_override(self, config):
        scheduler = create_scheduler(config, MagicMock(), MagicMock(), interval_minutes=2)
        assert get_job(scheduler).trigger.interval.total_seconds() == 120

    def test_job_passes_data_to_callback(self, config):
        refresh = MagicMock(return_value="data")
        on_update = MagicMock()
        scheduler = create_scheduler(config, refresh, on_update)

        get_job(scheduler).func()

        on_update.assert_called_once_with("data")

    def test_job_reports_errors(self, config):
        error = RequestError("offline")
        on_update = MagicMock()
        on_error = MagicMock()
        scheduler = create_scheduler(config, MagicMock(side_effect=error), on_update, on_error)

        get_job(scheduler).func()

        on_update.assert_not_called()
        on_error.assert_called_once_with(error)
