"""
Scheduler Service - Reminder registration on a background scheduler
Each enabled reminder becomes a daily cron job at its hour and minute
"""
from abc import ABC, abstractmethod
from typing import List, Optional
import logging

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.cron import CronTrigger

from habit_tracker.core.exceptions import SchedulerError
from habit_tracker.models.habit import Habit
from habit_tracker.services.habits.reminders import enabled_reminders, job_id_prefix, reminder_job_id
from habit_tracker.services.notifications.service import NotificationService
from habit_tracker.utils.timezone import get_local_tz
from .jobs import send_habit_reminder

logger = logging.getLogger(__name__)


class ReminderScheduler(ABC):
    """Registers and cancels the reminders of habits"""

    @abstractmethod
    def schedule_reminders(self, habit: Habit) -> None:
        """Replace every registration of the habit with its enabled reminders"""

    @abstractmethod
    def cancel_reminders(self, habit_id: str) -> None:
        """Remove every registration of the habit"""

    @abstractmethod
    def cancel_all(self) -> None:
        """Remove every registration"""

    @abstractmethod
    def scheduled_job_ids(self, habit_id: Optional[str] = None) -> List[str]:
        """Ids of registered reminders, optionally for one habit"""


class APSchedulerReminderScheduler(ReminderScheduler):
    """
    Reminder scheduler backed by an APScheduler BackgroundScheduler

    Jobs can be registered before start(); they stay pending until the
    scheduler runs.
    """

    def __init__(self, notification_service: Optional[NotificationService] = None,
                 timezone=None, scheduler: Optional[BackgroundScheduler] = None):
        self.notification_service = notification_service or NotificationService()
        self.timezone = timezone or get_local_tz()
        self.scheduler = scheduler or BackgroundScheduler(timezone=self.timezone)

    def start(self) -> None:
        """Start the background scheduler"""
        if self.scheduler.running:
            logger.warning("Scheduler already running")
            return
        self.scheduler.start()
        logger.info(f"Scheduler started with {len(self.scheduler.get_jobs())} reminder job(s)")

    def shutdown(self) -> None:
        """Stop the background scheduler"""
        if self.scheduler.running:
            self.scheduler.shutdown(wait=False)
            logger.info("Scheduler stopped")

    def schedule_reminders(self, habit: Habit) -> None:
        """
        Register a daily job for each enabled reminder of the habit

        Args:
            habit: The habit whose reminders should fire

        Raises:
            SchedulerError: If a job cannot be registered
        """
        self.cancel_reminders(habit.id)

        for reminder in enabled_reminders(habit.reminders):
            job_id = reminder_job_id(habit.id, reminder.id)
            try:
                self.scheduler.add_job(
                    func=send_habit_reminder,
                    trigger=CronTrigger(
                        hour=reminder.time.hour,
                        minute=reminder.time.minute,
                        timezone=self.timezone
                    ),
                    args=[self.notification_service, habit.name, reminder.message],
                    id=job_id,
                    name=f"Reminder for {habit.name}",
                    replace_existing=True
                )
            except Exception as e:
                logger.error(f"[SCHEDULER] Failed to schedule reminder {job_id}: {e}")
                raise SchedulerError(f"Failed to schedule reminder for habit '{habit.name}': {e}")

            logger.info(f"[SCHEDULER] Reminder scheduled for {habit.name} at {reminder.time.strftime('%H:%M')}")

    def cancel_reminders(self, habit_id: str) -> None:
        """
        Remove every job registered for the habit

        Args:
            habit_id: The habit ID

        Raises:
            SchedulerError: If a job cannot be removed
        """
        for job_id in self.scheduled_job_ids(habit_id):
            try:
                self.scheduler.remove_job(job_id)
            except Exception as e:
                logger.error(f"[SCHEDULER] Failed to remove reminder {job_id}: {e}")
                raise SchedulerError(f"Failed to cancel reminder {job_id}: {e}")

    def cancel_all(self) -> None:
        """Remove every registered reminder"""
        try:
            self.scheduler.remove_all_jobs()
            logger.info("[SCHEDULER] All reminders cancelled")
        except Exception as e:
            logger.error(f"[SCHEDULER] Failed to cancel all reminders: {e}")
            raise SchedulerError(f"Failed to cancel reminders: {e}")

    def scheduled_job_ids(self, habit_id: Optional[str] = None) -> List[str]:
        job_ids = [job.id for job in self.scheduler.get_jobs()]
        if habit_id is None:
            return job_ids
        prefix = job_id_prefix(habit_id)
        return [job_id for job_id in job_ids if job_id.startswith(prefix)]
