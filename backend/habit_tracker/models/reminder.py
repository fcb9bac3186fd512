"""
Pydantic models for habit reminders
"""
from datetime import datetime, time as clock_time
from uuid import uuid4
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from habit_tracker.utils.timezone import get_local_now


def _current_minute() -> clock_time:
    return get_local_now().time().replace(second=0, microsecond=0)


class HabitReminder(BaseModel):
    """A daily reminder attached to exactly one habit"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(default_factory=lambda: str(uuid4()), frozen=True, description="Reminder ID")
    time: clock_time = Field(default_factory=_current_minute, description="Time of day the reminder fires")
    is_enabled: bool = Field(False, description="Only enabled reminders are kept and scheduled")
    message: str = Field("", description="Custom text; empty falls back to a message built from the habit name")

    @field_validator('time', mode='before')
    @classmethod
    def reduce_to_time_of_day(cls, v):
        """Accept a full datetime and keep only its clock time"""
        if isinstance(v, datetime):
            return v.time()
        return v

    @field_validator('time')
    @classmethod
    def truncate_to_minute(cls, v: clock_time) -> clock_time:
        """Only hour and minute matter when scheduling"""
        return v.replace(second=0, microsecond=0, tzinfo=None)
