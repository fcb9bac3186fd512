"""Tests for application wiring and lifecycle."""

from datetime import time

from habit_tracker.core.dependencies import create_habit_store, get_reminder_scheduler, log_notification
from habit_tracker.main import configure_logging, lifespan
from habit_tracker.models.habit import RGBAColor
from habit_tracker.models.reminder import HabitReminder
from habit_tracker.services.habits.repository import InMemoryRepository
from habit_tracker.services.notifications.service import NotificationService, format_daily_goals_completed


def test_configure_logging():
    configure_logging("DEBUG")


def test_log_notification_always_succeeds():
    assert log_notification("hello") is True


def test_create_habit_store_initializes(repository):
    scheduler = get_reminder_scheduler()

    store = create_habit_store(repository=repository, scheduler=scheduler)

    assert store.habits == []
    assert store.repository is repository


def test_create_habit_store_celebrates_daily_goals(repository):
    delivered = []
    service = NotificationService(lambda m: delivered.append(m) or True)
    store = create_habit_store(repository=repository, notification_service=service)
    habit = store.add_habit(name="Meditar", icon="🧘", color=RGBAColor(red=0.2, green=0.8, blue=0.4), target=7)

    result = store.toggle_habit(habit.id)

    assert result.all_daily_goals_completed is True
    assert delivered == [format_daily_goals_completed()]


def test_lifespan_starts_and_stops_scheduler():
    repository = InMemoryRepository()
    delivered = []

    with lifespan(repository=repository, send_callback=lambda m: delivered.append(m) or True) as store:
        habit = store.add_habit(
            name="Ler", icon="📚", color=RGBAColor(red=1.0, green=0.5, blue=0.0), target=6,
            reminders=[HabitReminder(time=time(22, 0), is_enabled=True)]
        )
        assert store.scheduler.scheduler.running
        assert len(store.scheduler.scheduled_job_ids(habit.id)) == 1

    assert not store.scheduler.scheduler.running
    assert "habits" in repository.blobs


def test_lifespan_sends_celebration_through_callback():
    delivered = []

    with lifespan(repository=InMemoryRepository(), send_callback=lambda m: delivered.append(m) or True) as store:
        habit = store.add_habit(name="Água", icon="💧", color=RGBAColor(red=0.0, green=0.8, blue=0.9), target=7)
        store.toggle_habit(habit.id)

    assert delivered == [format_daily_goals_completed()]
