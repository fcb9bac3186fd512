"""
Demonstration habits seeded on first run when SEED_SAMPLE_HABITS is enabled
"""
from datetime import date, datetime
from typing import List

from habit_tracker.models.habit import BLUE, CYAN, GREEN, ORANGE, Habit
from habit_tracker.utils.timezone import day_key, last_n_days


def _recent_days(count: int, today: date) -> set:
    return {day_key(d) for d in last_n_days(count, today)}


def create_sample_habits(now: datetime) -> List[Habit]:
    """
    Build the demonstration habits, each with a run of recent completions

    Args:
        now: Current local time; completions end on its day

    Returns:
        List of sample habits
    """
    today = now.date()
    return [
        Habit(name="Exercitar", icon="🏃", color=BLUE, streak=5,
              completed_dates=_recent_days(5, today), target=5, created_date=now),
        Habit(name="Meditar", icon="🧘", color=GREEN, streak=3,
              completed_dates=_recent_days(3, today), target=7, created_date=now),
        Habit(name="Ler", icon="📚", color=ORANGE, streak=7,
              completed_dates=_recent_days(7, today), target=6, created_date=now,
              selected_days={2, 3, 4, 5, 6, 7}, is_all_days=False),
        Habit(name="Água", icon="💧", color=CYAN, streak=10,
              completed_dates=_recent_days(10, today), target=7, created_date=now),
    ]
