"""
Dependency wiring for the store and its collaborators
"""
import logging

from habit_tracker.core.config import settings
from habit_tracker.services.habits.repository import HabitRepository, JsonFileRepository
from habit_tracker.services.habits.service import HabitStore
from habit_tracker.services.notifications.service import NotificationService
from habit_tracker.services.scheduler.service import APSchedulerReminderScheduler, ReminderScheduler

logger = logging.getLogger(__name__)


def log_notification(message: str) -> bool:
    """Default delivery channel: write the notification to the log"""
    logger.info(f"[NOTIFICATION] {message}")
    return True


def get_repository() -> HabitRepository:
    """Get the file-backed repository under HABITS_DATA_DIR"""
    return JsonFileRepository(settings.HABITS_DATA_DIR)


def get_reminder_scheduler(notification_service: NotificationService = None) -> APSchedulerReminderScheduler:
    """Get a reminder scheduler delivering through the given service (log by default)"""
    return APSchedulerReminderScheduler(notification_service or NotificationService(log_notification))


def create_habit_store(repository: HabitRepository = None, scheduler: ReminderScheduler = None,
                       notification_service: NotificationService = None) -> HabitStore:
    """
    Build and initialize a habit store

    The daily-goals event is delivered as a celebration message through the
    notification service.

    Args:
        repository: Defaults to get_repository()
        scheduler: Defaults to get_reminder_scheduler(notification_service)
        notification_service: Defaults to logging the notification

    Returns:
        Initialized HabitStore
    """
    notification_service = notification_service or NotificationService(log_notification)
    store = HabitStore(
        repository=repository or get_repository(),
        scheduler=scheduler or get_reminder_scheduler(notification_service),
        seed_sample_habits=settings.SEED_SAMPLE_HABITS
    )
    store.subscribe_daily_goals_completed(notification_service.send_daily_goals_completed)
    store.initialize()
    return store
