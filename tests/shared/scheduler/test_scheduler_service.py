# -*- coding: utf-8 -*-
"""
backend/tests/shared/scheduler/test_scheduler_service.py

SchedulerService (APScheduler) y registro del job de recordatorios.

Autor: Atelier
Fecha: 12/08/2026
"""

from types import SimpleNamespace

import pytest

from app.modules.notifications import facades as notifications_facades
from app.shared.scheduler import SchedulerService
from app.shared.scheduler.jobs import JOB_ID, register_due_date_reminder_job, run_due_date_reminders


async def _noop(**kwargs):
    return kwargs


def test_add_interval_job_and_inspect():
    scheduler = SchedulerService()

    job_id = scheduler.add_interval_job(_noop, "cleanup", minutes=30, batch=10)

    assert job_id == "cleanup"
    [job] = scheduler.get_jobs()
    assert job["id"] == "cleanup"
    assert "interval" in job["trigger"]
    status = scheduler.get_job_status("cleanup")
    # Sin arrancar el scheduler el job queda pendiente
    assert status["pending"] is True
    assert scheduler.get_job_status("missing") is None


def test_interval_must_be_positive():
    with pytest.raises(ValueError):
        SchedulerService().add_interval_job(_noop, "bad")


def test_add_cron_job_variants():
    scheduler = SchedulerService()

    scheduler.add_cron_job(_noop, "daily", cron_expression="0 8 * * *")
    scheduler.add_cron_job(_noop, "simple", hour="6", minute="30")
    # Mismo id: se reemplaza
    scheduler.add_cron_job(_noop, "daily", cron_expression="15 9 * * 1")

    assert sorted(j["id"] for j in scheduler.get_jobs()) == ["daily", "simple"]
    assert "minute='15'" in scheduler.get_job_status("daily")["trigger"]

    with pytest.raises(ValueError):
        scheduler.add_cron_job(_noop, "broken", cron_expression="0 8 * *")


def test_reregistering_interval_job_replaces_it():
    scheduler = SchedulerService()
    scheduler.add_interval_job(_noop, "sync", minutes=5)
    scheduler.add_interval_job(_noop, "sync", hours=2)

    [job] = scheduler.get_jobs()
    assert job["trigger"] == "interval[2:00:00]"


def test_remove_job():
    scheduler = SchedulerService()
    scheduler.add_interval_job(_noop, "tmp", seconds=5)

    assert scheduler.remove_job("tmp") is True
    assert scheduler.remove_job("tmp") is False
    assert scheduler.get_jobs() == []


async def test_start_and_shutdown():
    scheduler = SchedulerService()
    scheduler.add_interval_job(_noop, "tick", hours=1)
    assert scheduler.is_running is False

    scheduler.start()
    try:
        assert scheduler.is_running is True
        assert scheduler.get_job_status("tick")["pending"] is False
    finally:
        scheduler.shutdown()

    assert scheduler.is_running is False
    # Segunda parada: no-op
    scheduler.shutdown()


def test_register_due_date_reminder_job():
    scheduler = SchedulerService()
    settings = SimpleNamespace(due_date_reminder_cron="0 7 * * *", due_date_reminder_window_days=3)

    assert register_due_date_reminder_job(scheduler, settings) == JOB_ID

    status = scheduler.get_job_status(JOB_ID)
    assert status["name"] == "due_date_reminders"
    assert "cron" in status["trigger"]


async def test_run_due_date_reminders_passes_window(mocker):
    fake = mocker.patch.object(
        notifications_facades,
        "send_due_date_reminders",
        new=mocker.AsyncMock(return_value={"checked": 0, "created": 0, "skipped": 0}),
    )

    assert await run_due_date_reminders(window_days=5) == {"checked": 0, "created": 0, "skipped": 0}
    fake.assert_awaited_once()
    assert fake.await_args.kwargs == {"window_days": 5}


async def test_run_due_date_reminders_swallows_errors(mocker):
    mocker.patch.object(
        notifications_facades,
        "send_due_date_reminders",
        new=mocker.AsyncMock(side_effect=RuntimeError("db down")),
    )

    assert await run_due_date_reminders() == {"error": "db down", "created": 0}

# Fin del archivo backend/tests/shared/scheduler/test_scheduler_service.py
