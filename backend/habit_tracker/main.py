"""
Application bootstrap - logging setup and store lifecycle
"""
from contextlib import contextmanager
from typing import Callable, Iterator, Optional
import logging

from habit_tracker.core.config import settings
from habit_tracker.core.dependencies import create_habit_store, get_reminder_scheduler, log_notification
from habit_tracker.services.habits.repository import HabitRepository
from habit_tracker.services.habits.service import HabitStore
from habit_tracker.services.notifications.service import NotificationService

logger = logging.getLogger(__name__)


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging and silence noisy third-party loggers"""
    logging.basicConfig(
        level=level or settings.LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    logging.getLogger('apscheduler.scheduler').setLevel(logging.WARNING)
    logging.getLogger('apscheduler.executors').setLevel(logging.WARNING)
    logging.getLogger('apscheduler.executors.default').setLevel(logging.WARNING)


@contextmanager
def lifespan(repository: Optional[HabitRepository] = None,
             send_callback: Optional[Callable[[str], bool]] = None) -> Iterator[HabitStore]:
    """
    Run a habit store with its reminder scheduler started

    Args:
        repository: Defaults to the file-backed repository
        send_callback: Delivery channel for reminders and the daily-goals
                       celebration, callback(message) -> bool

    Yields:
        Initialized HabitStore
    """
    notification_service = NotificationService(send_callback if send_callback else log_notification)
    scheduler = get_reminder_scheduler(notification_service)
    store = create_habit_store(repository=repository, scheduler=scheduler,
                               notification_service=notification_service)

    # Startup
    try:
        scheduler.start()
        logger.info("✓ Habit reminder scheduler started")
    except Exception as e:
        logger.warning(f"Could not start scheduler: {e}")

    try:
        yield store
    finally:
        # Shutdown
        try:
            scheduler.shutdown()
            logger.info("✓ Habit reminder scheduler stopped")
        except Exception as e:
            logger.warning(f"Error stopping scheduler: {e}")
