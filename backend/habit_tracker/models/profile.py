"""
Pydantic models for the user profile
"""
from datetime import datetime
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from habit_tracker.core.constants import (
    DAILY_GOAL_RANGE,
    DEFAULT_DAILY_GOAL,
    DEFAULT_PROFILE_NAME,
    DEFAULT_WEEKLY_GOAL,
    WEEKLY_GOAL_RANGE,
)
from habit_tracker.utils.timezone import get_local_now, localize


class ThemePreference(str, Enum):
    """Display theme preference"""
    SYSTEM = "system"
    LIGHT = "light"
    DARK = "dark"


class UserProfile(BaseModel):
    """Single per-installation preference record"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = Field(DEFAULT_PROFILE_NAME, description="Display name")
    join_date: datetime = Field(default_factory=get_local_now, description="When the profile was created")
    daily_goal: int = Field(DEFAULT_DAILY_GOAL, ge=DAILY_GOAL_RANGE[0], le=DAILY_GOAL_RANGE[1])
    weekly_goal: int = Field(DEFAULT_WEEKLY_GOAL, ge=WEEKLY_GOAL_RANGE[0], le=WEEKLY_GOAL_RANGE[1])
    notifications_enabled: bool = Field(True, alias="notifications", description="Whether reminders are delivered")
    theme: ThemePreference = Field(ThemePreference.SYSTEM)

    @field_validator('join_date')
    @classmethod
    def make_aware(cls, v: datetime) -> datetime:
        return localize(v)
