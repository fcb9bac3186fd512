"""
Habits Service - The habit store
Sole owner and mutator of the habit collection and the user profile.
Persists every change and keeps the reminder scheduler in sync.
"""
from datetime import date, datetime
from typing import Any, Callable, Dict, Iterable, List, Optional
import logging

from pydantic import ValidationError

from habit_tracker.core.exceptions import InvalidHabitDataError, StorageError
from habit_tracker.models.habit import Habit, HabitDraft, HabitUpdate, RGBAColor, ToggleResult
from habit_tracker.models.profile import UserProfile
from habit_tracker.models.reminder import HabitReminder
from habit_tracker.models.statistics import DayCount, DayStatus
from habit_tracker.services.scheduler.service import ReminderScheduler
from habit_tracker.utils.timezone import day_key, get_local_now
from . import statistics
from .reminders import enabled_reminders
from .repository import HabitRepository
from .samples import create_sample_habits

logger = logging.getLogger(__name__)

DailyGoalsListener = Callable[[], None]


def validate_habit_draft(**data: Any) -> HabitDraft:
    """
    Validate user input for a new habit

    Args:
        **data: HabitDraft fields (name, icon, color, target, selected_days, reminders, is_all_days)

    Returns:
        The validated draft

    Raises:
        InvalidHabitDataError: If the name is empty, the target is out of range,
                               or no day is selected for a scheduled habit
    """
    try:
        return HabitDraft(**data)
    except ValidationError as e:
        raise InvalidHabitDataError(f"Invalid habit data: {e}")


class HabitStore:
    """
    In-memory source of truth for habits and the profile

    Commands run to completion one at a time; the store is not meant to be
    mutated from several threads. Persistence, scheduler and listener failures
    are logged and never raised to the caller.
    """

    def __init__(self, repository: HabitRepository, scheduler: ReminderScheduler,
                 clock: Callable[[], datetime] = get_local_now, seed_sample_habits: bool = False):
        """
        Args:
            repository: Where habits and the profile are persisted
            scheduler: Registers reminders for delivery
            clock: Returns the current timezone-aware local time
            seed_sample_habits: Seed demonstration habits when nothing is stored
        """
        self.repository = repository
        self.scheduler = scheduler
        self.clock = clock
        self.seed_sample_habits = seed_sample_habits
        self._habits: List[Habit] = []
        self._profile = UserProfile(join_date=clock())
        self._listeners: List[DailyGoalsListener] = []

    # ========================================================================
    # STATE
    # ========================================================================

    @property
    def habits(self) -> List[Habit]:
        """Snapshot of the collection in display order"""
        return list(self._habits)

    @property
    def profile(self) -> UserProfile:
        return self._profile

    def today(self) -> date:
        return self.clock().date()

    def get_habit(self, habit_id: str) -> Optional[Habit]:
        for habit in self._habits:
            if habit.id == habit_id:
                return habit
        return None

    def initialize(self) -> None:
        """
        Load persisted state

        Unreadable habits fall back to an empty collection and an unreadable
        profile to the defaults. Stored reminders are registered again since
        scheduler registrations do not outlive the process.
        """
        try:
            self._habits = self.repository.load_habits()
        except StorageError as e:
            logger.warning(f"Could not load habits, starting empty: {e}")
            self._habits = []

        try:
            profile = self.repository.load_profile()
        except StorageError as e:
            logger.warning(f"Could not load profile, using defaults: {e}")
            profile = None
        self._profile = profile or UserProfile(join_date=self.clock())

        if not self._habits and self.seed_sample_habits:
            self._habits = create_sample_habits(self.clock())
            self._save_habits()
            logger.info(f"Seeded {len(self._habits)} sample habit(s)")

        self._register_all_reminders()
        logger.info(f"Habit store initialized with {len(self._habits)} habit(s)")

    # ========================================================================
    # COMMANDS
    # ========================================================================

    def add_habit(self, name: str, icon: str, color: RGBAColor, target: int,
                  selected_days: Iterable[int] = (), reminders: Iterable[HabitReminder] = (),
                  is_all_days: bool = True) -> Habit:
        """
        Create a habit, persist it and register its reminders

        Inputs are trusted; use create_habit() or validate_habit_draft() to
        validate user input first.

        Returns:
            The new habit
        """
        habit = Habit(
            name=name,
            icon=icon,
            color=color,
            target=target,
            created_date=self.clock(),
            selected_days=set() if is_all_days else set(selected_days),
            reminders=enabled_reminders(reminders),
            is_all_days=is_all_days
        )
        self._habits.append(habit)
        self._save_habits()
        self._register_reminders(habit)

        logger.info(f"Habit '{habit.name}' added ({habit.id})")
        return habit

    def create_habit(self, draft: HabitDraft) -> Habit:
        """Add a habit from an already validated draft"""
        return self.add_habit(
            name=draft.name,
            icon=draft.icon,
            color=draft.color,
            target=draft.target,
            selected_days=draft.selected_days,
            reminders=draft.reminders,
            is_all_days=draft.is_all_days
        )

    def update_habit(self, habit_id: str, changes: Optional[HabitUpdate] = None, **fields: Any) -> Optional[Habit]:
        """
        Apply changes to a habit, re-register its reminders and persist

        Args:
            habit_id: The habit ID
            changes: Partial update; alternatively pass the fields as keywords

        Returns:
            The updated habit, or None if no habit has this ID or the changes
            are invalid (the habit is then left untouched)
        """
        habit = self.get_habit(habit_id)
        if habit is None:
            logger.info(f"Update skipped, habit {habit_id} not found")
            return None

        try:
            update = changes if changes is not None else HabitUpdate(**fields)
        except ValidationError as e:
            logger.warning(f"Update rejected for habit {habit_id}: {e}")
            return None

        for field in update.model_fields_set:
            value = getattr(update, field)
            if value is None:
                continue
            if field == "reminders":
                value = enabled_reminders(value)
            setattr(habit, field, value)

        if habit.is_all_days and habit.selected_days:
            habit.selected_days = set()

        self._register_reminders(habit)
        self._save_habits()

        logger.info(f"Habit '{habit.name}' updated ({habit.id})")
        return habit

    def toggle_habit(self, habit_id: str) -> Optional[ToggleResult]:
        """
        Mark or unmark a habit as completed today

        Marking adds today's key and increments the streak; unmarking removes
        it and decrements the streak, never below zero. A marking toggle that
        leaves every due habit complete notifies the daily-goals listeners.

        Returns:
            ToggleResult, or None if no habit has this ID
        """
        habit = self.get_habit(habit_id)
        if habit is None:
            logger.info(f"Toggle skipped, habit {habit_id} not found")
            return None

        key = day_key(self.today())
        if key in habit.completed_dates:
            habit.completed_dates.discard(key)
            habit.streak = max(0, habit.streak - 1)
            completed = False
        else:
            habit.completed_dates.add(key)
            habit.streak += 1
            completed = True

        self._save_habits()

        all_done = completed and self.has_completed_all_daily_goals()
        if all_done:
            logger.info(f"All daily goals completed for {key}")
            self._emit_daily_goals_completed()

        return ToggleResult(
            habit_id=habit.id,
            completed=completed,
            streak=habit.streak,
            all_daily_goals_completed=all_done
        )

    def delete_habit(self, habit_id: str) -> bool:
        """
        Cancel a habit's reminders, remove it and persist

        Returns:
            True if a habit was removed, False if no habit has this ID
        """
        habit = self.get_habit(habit_id)
        if habit is None:
            logger.info(f"Delete skipped, habit {habit_id} not found")
            return False

        self._cancel_reminders(habit_id)
        self._habits = [h for h in self._habits if h.id != habit_id]
        self._save_habits()

        logger.info(f"Habit '{habit.name}' deleted ({habit_id})")
        return True

    def update_profile(self, profile: UserProfile) -> None:
        """
        Replace the profile and persist it

        Switching notifications off cancels every reminder; switching them
        back on registers every habit's reminders again.
        """
        was_enabled = self._profile.notifications_enabled
        self._profile = profile
        self._save_profile()

        if was_enabled and not profile.notifications_enabled:
            self._cancel_all_reminders()
        elif not was_enabled and profile.notifications_enabled:
            self._register_all_reminders()

    # ========================================================================
    # EVENTS
    # ========================================================================

    def subscribe_daily_goals_completed(self, listener: DailyGoalsListener) -> Callable[[], None]:
        """
        Register a no-argument callback fired when every due habit is completed

        Returns:
            Function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit_daily_goals_completed(self) -> None:
        for listener in list(self._listeners):
            try:
                listener()
            except Exception as e:
                logger.error(f"Daily goals listener failed: {e}", exc_info=True)

    # ========================================================================
    # STATISTICS
    # ========================================================================

    @property
    def total_habits_completed(self) -> int:
        return statistics.total_habits_completed(self._habits)

    @property
    def average_completion_rate(self) -> float:
        return statistics.average_completion_rate(self._habits, self.today())

    @property
    def longest_streak(self) -> int:
        return statistics.longest_streak(self._habits)

    @property
    def completed_today_count(self) -> int:
        return statistics.completed_today_count(self._habits, self.today())

    @property
    def due_today_count(self) -> int:
        return statistics.due_today_count(self._habits, self.today())

    @property
    def today_progress(self) -> float:
        return statistics.today_progress(self._habits, self.today())

    def has_completed_all_daily_goals(self) -> bool:
        return statistics.has_completed_all_daily_goals(self._habits, self.today())

    def weekly_history(self) -> List[DayCount]:
        return statistics.weekly_histogram(self._habits, self.today())

    def habit_weekly_grid(self, habit_id: str) -> Optional[List[DayStatus]]:
        habit = self.get_habit(habit_id)
        if habit is None:
            return None
        return statistics.habit_weekly_grid(habit, self.today())

    def derived_streak(self, habit_id: str) -> Optional[int]:
        """Consecutive completed days computed from the completion history"""
        habit = self.get_habit(habit_id)
        if habit is None:
            return None
        return statistics.consecutive_completed_days(habit, self.today())

    def get_daily_summary(self) -> Dict[str, Any]:
        """
        Get today's summary of habit completion

        Returns:
            Dict with status, date, totals, completion_rate (percent of all
            habits completed today), completed_habits and pending_habits
            (due today but not yet completed)
        """
        today = self.today()
        key = day_key(today)

        completed_habits = [h.name for h in self._habits if key in h.completed_dates]
        pending_habits = [
            h.name for h in self._habits
            if h.should_be_done_today(today) and key not in h.completed_dates
        ]

        return {
            "status": "success",
            "date": key,
            "total_habits": len(self._habits),
            "due_today": self.due_today_count,
            "completed": len(completed_habits),
            "completion_rate": round(self.today_progress * 100, 2),
            "all_daily_goals_completed": self.has_completed_all_daily_goals(),
            "completed_habits": completed_habits,
            "pending_habits": pending_habits
        }

    # ========================================================================
    # SIDE EFFECTS (best effort)
    # ========================================================================

    def _save_habits(self) -> None:
        try:
            self.repository.save_habits(self._habits)
        except StorageError as e:
            logger.error(f"Failed to save habits: {e}")

    def _save_profile(self) -> None:
        try:
            self.repository.save_profile(self._profile)
        except StorageError as e:
            logger.error(f"Failed to save profile: {e}")

    def _register_reminders(self, habit: Habit) -> None:
        if not self._profile.notifications_enabled:
            return
        try:
            self.scheduler.schedule_reminders(habit)
        except Exception as e:
            logger.error(f"Failed to schedule reminders for habit {habit.id}: {e}")

    def _register_all_reminders(self) -> None:
        for habit in self._habits:
            if habit.reminders:
                self._register_reminders(habit)

    def _cancel_reminders(self, habit_id: str) -> None:
        try:
            self.scheduler.cancel_reminders(habit_id)
        except Exception as e:
            logger.error(f"Failed to cancel reminders for habit {habit_id}: {e}")

    def _cancel_all_reminders(self) -> None:
        try:
            self.scheduler.cancel_all()
        except Exception as e:
            logger.error(f"Failed to cancel all reminders: {e}")
