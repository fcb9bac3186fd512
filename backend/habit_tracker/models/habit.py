"""
Pydantic models for habits
"""
from datetime import date, datetime
from typing import Iterable, List, Optional, Set, Union
from uuid import uuid4
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator
from pydantic.alias_generators import to_camel

from habit_tracker.core.constants import DAY_NAMES, MAX_TARGET, MIN_TARGET, TRAILING_WINDOW_DAYS
from habit_tracker.models.reminder import HabitReminder
from habit_tracker.models.statistics import DayStatus
from habit_tracker.utils.timezone import (
    day_key,
    get_local_now,
    get_local_today,
    last_n_days,
    localize,
    parse_day_key,
    weekday_code,
)


def _validate_weekdays(days: Iterable[int]) -> Set[int]:
    days = set(days)
    invalid = sorted(d for d in days if not 1 <= d <= 7)
    if invalid:
        raise ValueError(f"Invalid weekday code(s) {invalid}. Use 1 (Sunday) to 7 (Saturday)")
    return days


class RGBAColor(BaseModel):
    """Display color as four channels in [0, 1]"""
    red: float = Field(..., ge=0.0, le=1.0)
    green: float = Field(..., ge=0.0, le=1.0)
    blue: float = Field(..., ge=0.0, le=1.0)
    alpha: float = Field(1.0, ge=0.0, le=1.0)


# System palette used by the sample habits
BLUE = RGBAColor(red=0.0, green=0.478, blue=1.0)
GREEN = RGBAColor(red=0.204, green=0.78, blue=0.349)
ORANGE = RGBAColor(red=1.0, green=0.584, blue=0.0)
CYAN = RGBAColor(red=0.196, green=0.678, blue=0.902)


class Habit(BaseModel):
    """
    A recurring habit and its completion history.

    Derived values (completion rate, days active, due today) are computed on
    read from the stored fields and never persisted. Methods that depend on
    the current day accept an explicit ``today``/``now`` and fall back to the
    application clock.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, validate_assignment=True)

    id: str = Field(default_factory=lambda: str(uuid4()), frozen=True, description="Habit ID")
    name: str = Field(..., description="Habit name")
    icon: str = Field(..., description="Emoji or icon reference")
    color: RGBAColor
    streak: int = Field(0, ge=0, description="Consecutive-completion counter")
    completed_dates: Set[str] = Field(default_factory=set, description="YYYY-MM-DD keys of completed days")
    target: int = Field(..., ge=MIN_TARGET, le=MAX_TARGET, description="Days per week")
    created_date: datetime = Field(default_factory=get_local_now, frozen=True)
    selected_days: Set[int] = Field(default_factory=set, description="Weekday codes, 1 = Sunday")
    reminders: List[HabitReminder] = Field(default_factory=list)
    is_all_days: bool = Field(True, description="Due every day, ignoring selected_days")

    @field_validator('completed_dates')
    @classmethod
    def validate_day_keys(cls, v: Set[str]) -> Set[str]:
        """Every completed date must be a well-formed YYYY-MM-DD key"""
        for key in v:
            try:
                canonical = day_key(parse_day_key(key))
            except ValueError:
                canonical = None
            if canonical != key:
                raise ValueError(f"Invalid day key '{key}'. Use YYYY-MM-DD")
        return v

    @field_validator('selected_days')
    @classmethod
    def validate_selected_days(cls, v: Set[int]) -> Set[int]:
        return _validate_weekdays(v)

    @field_validator('created_date')
    @classmethod
    def make_aware(cls, v: datetime) -> datetime:
        return localize(v)

    @field_serializer('completed_dates', 'selected_days')
    def serialize_sorted(self, v: set) -> list:
        return sorted(v)

    # ------------------------------------------------------------------
    # Derived values

    @property
    def total_completions(self) -> int:
        return len(self.completed_dates)

    def completion_rate(self, today: Optional[date] = None) -> float:
        """
        Completions in the trailing 7-day window relative to the weekly target

        Args:
            today: Last day of the window (defaults to local today)

        Returns:
            Rate in [0.0, 1.0]
        """
        if self.target <= 0:
            return 0.0
        window = {day_key(d) for d in last_n_days(TRAILING_WINDOW_DAYS, today)}
        completed = len(window & self.completed_dates)
        return min(completed / self.target, 1.0)

    def days_active(self, now: Optional[datetime] = None) -> int:
        """Whole days since creation, counting the creation day, at least 1"""
        now = localize(now) if now else get_local_now()
        elapsed = (now - self.created_date).days
        return max(1, elapsed + 1)

    def day_names(self) -> List[str]:
        """Weekday names of selected_days in weekday order"""
        return [DAY_NAMES[d - 1] for d in sorted(self.selected_days)]

    def should_be_done_today(self, today: Optional[date] = None) -> bool:
        if self.is_all_days:
            return True
        today = today or get_local_today()
        return weekday_code(today) in self.selected_days

    def is_completed_on(self, day: Union[date, str]) -> bool:
        key = day if isinstance(day, str) else day_key(day)
        return key in self.completed_dates

    def weekly_grid(self, today: Optional[date] = None) -> List[DayStatus]:
        """Trailing 7 days, oldest first, with completion flags"""
        return [
            DayStatus(day=d, key=day_key(d), completed=day_key(d) in self.completed_dates)
            for d in last_n_days(TRAILING_WINDOW_DAYS, today)
        ]


class HabitDraft(BaseModel):
    """Validated input for creating a new habit"""
    name: str = Field(..., min_length=1, max_length=200, description="Habit name")
    icon: str = Field(..., min_length=1, description="Emoji or icon reference")
    color: RGBAColor
    target: int = Field(..., ge=MIN_TARGET, le=MAX_TARGET, description="Days per week")
    selected_days: Set[int] = Field(default_factory=set)
    reminders: List[HabitReminder] = Field(default_factory=list)
    is_all_days: bool = True

    @field_validator('name')
    @classmethod
    def strip_name(cls, v: str) -> str:
        """Reject names that are only whitespace"""
        v = v.strip()
        if not v:
            raise ValueError("Habit name cannot be empty")
        return v

    @field_validator('selected_days')
    @classmethod
    def validate_selected_days(cls, v: Set[int]) -> Set[int]:
        return _validate_weekdays(v)

    @model_validator(mode='after')
    def require_schedule(self) -> 'HabitDraft':
        if not self.is_all_days and not self.selected_days:
            raise ValueError("Select at least one day for a habit that is not done every day")
        return self


class HabitUpdate(BaseModel):
    """Partial update of an existing habit; None means keep the current value"""
    model_config = ConfigDict(extra='forbid')

    name:Optional[str] = Field(None, min_length=1, max_length=200)
    icon: Optional[str] = None
    color: Optional[RGBAColor] = None
    target: Optional[int] = Field(None, ge=MIN_TARGET, le=MAX_TARGET)
    selected_days: Optional[Set[int]] = None
    reminders: Optional[List[HabitReminder]] = None
    is_all_days: Optional[bool] = None

    @field_validator('selected_days')
    @classmethod
    def validate_selected_days(cls, v: Optional[Set[int]]) -> Optional[Set[int]]:
        if v is None:
            return v
        return _validate_weekdays(v)


class ToggleResult(BaseModel):
    """Outcome of toggling today's completion of a habit"""
    habit_id: str
    completed: bool = Field(..., description="Whether the habit is now completed today")
    streak: int
    all_daily_goals_completed: bool = Field(False, description="True when this toggle left every due habit complete")
