"""
Habit reminder helpers
Shared rules for which reminders are kept and how their scheduled jobs are named
"""
from typing import Iterable, List

from habit_tracker.core.constants import REMINDER_JOB_PREFIX
from habit_tracker.models.reminder import HabitReminder


def enabled_reminders(reminders: Iterable[HabitReminder]) -> List[HabitReminder]:
    """
    Keep only enabled reminders, preserving order

    Args:
        reminders: Draft reminder list from the caller

    Returns:
        Reminders with is_enabled set
    """
    return [r for r in reminders if r.is_enabled]


def job_id_prefix(habit_id: str) -> str:
    """Prefix shared by every scheduled job of one habit"""
    return f"{REMINDER_JOB_PREFIX}-{habit_id}-"


def reminder_job_id(habit_id: str, reminder_id: str) -> str:
    """Scheduled job id of one reminder: habit-<habit id>-<reminder id>"""
    return f"{job_id_prefix(habit_id)}{reminder_id}"
