"""Shared fixtures: a controllable clock, in-memory storage and an unstarted scheduler."""

from datetime import datetime, timedelta

import pytest

from habit_tracker.models.habit import RGBAColor, Habit
from habit_tracker.services.habits.repository import InMemoryRepository
from habit_tracker.services.habits.service import HabitStore
from habit_tracker.services.notifications.service import NotificationService
from habit_tracker.services.scheduler.service import APSchedulerReminderScheduler
from habit_tracker.utils.timezone import get_local_tz

# Wednesday, weekday code 4
FIXED_NOW = get_local_tz().localize(datetime(2025, 7, 16, 9, 0))


class FakeClock:
    """Callable clock whose time only moves when told to."""

    def __init__(self, now):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock(FIXED_NOW)


@pytest.fixture
def today():
    return FIXED_NOW.date()


@pytest.fixture
def repository():
    return InMemoryRepository()


@pytest.fixture
def sent_messages():
    return []


@pytest.fixture
def scheduler(sent_messages):
    """APScheduler-backed scheduler that is never started; jobs stay pending."""
    def record(message):
        sent_messages.append(message)
        return True

    reminder_scheduler = APSchedulerReminderScheduler(NotificationService(record))
    yield reminder_scheduler
    reminder_scheduler.cancel_all()


@pytest.fixture
def store(repository, scheduler, clock):
    habit_store = HabitStore(repository, scheduler, clock=clock)
    habit_store.initialize()
    return habit_store


@pytest.fixture
def habit_factory():
    """Build habits with sensible defaults created at FIXED_NOW."""
    def make(**overrides):
        data = {
            "name": "Ler",
            "icon": "📚",
            "color": RGBAColor(red=1.0, green=0.584, blue=0.0),
            "target": 7,
            "created_date": FIXED_NOW,
        }
        data.update(overrides)
        return Habit(**data)

    return make
