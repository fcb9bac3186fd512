"""
Notifications Service - Message formatting and delivery
Centralizes all notification message templates and sending logic
"""
import logging
from typing import Callable, Optional

from habit_tracker.core.constants import (
    DAILY_GOALS_COMPLETED_MESSAGE,
    REMINDER_FALLBACK_BODY,
    REMINDER_TITLE,
)

logger = logging.getLogger(__name__)


# ============================================================================
# MESSAGE FORMATTING
# ============================================================================

def format_reminder_body(habit_name: str, message: str = "") -> str:
    """
    Body text of a habit reminder

    Args:
        habit_name: The habit name
        message: Custom reminder message, may be empty

    Returns:
        The custom message, or a generated one referencing the habit
    """
    if message.strip():
        return message
    return REMINDER_FALLBACK_BODY.format(habit_name=habit_name)


def format_reminder(habit_name: str, message: str = "") -> str:
    """
    Format a full reminder notification

    Args:
        habit_name: The habit name
        message: Custom reminder message, may be empty

    Returns:
        Formatted reminder message
    """
    return f"🔔 {REMINDER_TITLE}\n\n{format_reminder_body(habit_name, message)}"


def format_daily_goals_completed() -> str:
    """Format the celebration message sent when every due habit is done"""
    return f"🎉 {DAILY_GOALS_COMPLETED_MESSAGE}"


# ============================================================================
# NOTIFICATION SENDING
# ============================================================================

class NotificationService:
    """
    Service for sending notifications via a pluggable channel
    """

    def __init__(self, send_callback: Optional[Callable[[str], bool]] = None):
        """
        Initialize notification service

        Args:
            send_callback: Optional callback function for sending messages
                          Should have signature: callback(message: str) -> bool
        """
        self.send_callback = send_callback

    def send_notification(self, message: str) -> bool:
        """
        Send a notification message

        Args:
            message: The message to send

        Returns:
            True if sent successfully, False otherwise
        """
        if not self.send_callback:
            logger.warning("No send callback configured - notification not sent")
            logger.info(f"Would have sent: {message}")
            return False

        try:
            result = self.send_callback(message)
            if result:
                logger.info("Notification sent successfully")
            else:
                logger.warning("Notification send callback returned False")
            return bool(result)
        except Exception as e:
            logger.error(f"Failed to send notification: {e}")
            return False

    def send_reminder(self, habit_name: str, message: str = "") -> bool:
        """
        Send a habit reminder

        Args:
            habit_name: The habit name
            message: Custom reminder message, may be empty

        Returns:
            True if sent successfully, False otherwise
        """
        return self.send_notification(format_reminder(habit_name, message))

    def send_daily_goals_completed(self) -> bool:
        """Send the all-goals-done celebration message"""
        return self.send_notification(format_daily_goals_completed())
