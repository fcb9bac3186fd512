"""
Habit statistics - Read-only aggregates over a snapshot of the habit collection
All functions are pure: they take the habits and the local day they refer to
"""
from datetime import date, timedelta
from typing import List, Sequence

from habit_tracker.core.constants import DAY_SHORT_NAMES, TRAILING_WINDOW_DAYS
from habit_tracker.models.habit import Habit
from habit_tracker.models.statistics import DayCount, DayStatus
from habit_tracker.utils.timezone import day_key, last_n_days, weekday_code


def total_habits_completed(habits: Sequence[Habit]) -> int:
    """Sum of completions across all habits"""
    return sum(h.total_completions for h in habits)


def average_completion_rate(habits: Sequence[Habit], today: date) -> float:
    """Mean completion rate, 0.0 for an empty collection"""
    if not habits:
        return 0.0
    return sum(h.completion_rate(today) for h in habits) / len(habits)


def longest_streak(habits: Sequence[Habit]) -> int:
    return max((h.streak for h in habits), default=0)


def completed_today_count(habits: Sequence[Habit], today: date) -> int:
    """Habits completed today, whether or not they are due"""
    key = day_key(today)
    return sum(1 for h in habits if key in h.completed_dates)


def due_today_count(habits: Sequence[Habit], today: date) -> int:
    return sum(1 for h in habits if h.should_be_done_today(today))


def due_today_completed_count(habits: Sequence[Habit], today: date) -> int:
    key = day_key(today)
    return sum(1 for h in habits if h.should_be_done_today(today) and key in h.completed_dates)


def has_completed_all_daily_goals(habits: Sequence[Habit], today: date) -> bool:
    """
    True when at least one habit is due today and every due habit is done

    An empty due set never counts as complete.
    """
    due = due_today_count(habits, today)
    return due > 0 and due_today_completed_count(habits, today) == due


def today_progress(habits: Sequence[Habit], today: date) -> float:
    """Share of all habits completed today, 0.0 for an empty collection"""
    if not habits:
        return 0.0
    return completed_today_count(habits, today) / len(habits)


def habit_weekly_grid(habit: Habit, today: date) -> List[DayStatus]:
    """Trailing 7-day completion grid of one habit, oldest first"""
    return habit.weekly_grid(today)


def weekly_histogram(habits: Sequence[Habit], today: date) -> List[DayCount]:
    """
    Number of habits completed on each of the last 7 days

    Args:
        habits: Habit collection snapshot
        today: Last day of the window

    Returns:
        One entry per day, oldest first
    """
    histogram = []
    for day in last_n_days(TRAILING_WINDOW_DAYS, today):
        key = day_key(day)
        histogram.append(DayCount(
            day=day,
            key=key,
            label=DAY_SHORT_NAMES[weekday_code(day) - 1],
            count=sum(1 for h in habits if key in h.completed_dates)
        ))
    return histogram


def consecutive_completed_days(habit: Habit, today: date) -> int:
    """
    Length of the run of consecutive completed days ending today

    If today is not completed yet the run may end yesterday, so an
    unfinished day does not break a streak before it is over.
    """
    day = today if habit.is_completed_on(today) else today - timedelta(days=1)
    run = 0
    while habit.is_completed_on(day):
        run += 1
        day -= timedelta(days=1)
    return run
