"""
Pydantic models for the application
"""
from habit_tracker.models.habit import (
    RGBAColor,
    Habit,
    HabitDraft,
    HabitUpdate,
    ToggleResult
)
from habit_tracker.models.reminder import HabitReminder
from habit_tracker.models.profile import UserProfile, ThemePreference
from habit_tracker.models.statistics import DayStatus, DayCount

__all__ = [
    "RGBAColor",
    "Habit",
    "HabitDraft",
    "HabitUpdate",
    "ToggleResult",
    "HabitReminder",
    "UserProfile",
    "ThemePreference",
    "DayStatus",
    "DayCount"
]
