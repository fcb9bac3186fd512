"""
Scheduler Job Definitions
Functions executed by the background scheduler when a reminder fires
"""
import logging

from habit_tracker.services.notifications.service import NotificationService

logger = logging.getLogger(__name__)


def send_habit_reminder(notification_service: NotificationService, habit_name: str, message: str = "") -> None:
    """
    Deliver one reminder
    Called by the scheduler at the reminder's hour and minute every day

    Args:
        notification_service: Delivery channel
        habit_name: Name of the habit the reminder belongs to
        message: Custom reminder message, may be empty
    """
    try:
        logger.info(f"[SCHEDULER] Sending reminder for: {habit_name}")

        sent = notification_service.send_reminder(habit_name, message)

        if sent:
            logger.info(f"[SCHEDULER] Reminder sent for: {habit_name}")
        else:
            logger.warning(f"[SCHEDULER] Failed to send reminder for: {habit_name}")

    except Exception as e:
        logger.error(f"[SCHEDULER] Error in send_habit_reminder: {e}", exc_info=True)
