"""
Notifications module
Message formatting and delivery for habit reminders
"""
from .service import (
    NotificationService,
    format_reminder,
    format_reminder_body,
    format_daily_goals_completed
)

__all__ = [
    'NotificationService',
    'format_reminder',
    'format_reminder_body',
    'format_daily_goals_completed'
]
