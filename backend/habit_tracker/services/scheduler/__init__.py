"""
Scheduler module
Background registration of daily habit reminders
"""
from .service import ReminderScheduler, APSchedulerReminderScheduler
from . import jobs

__all__ = ['ReminderScheduler', 'APSchedulerReminderScheduler', 'jobs']
