"""
Pydantic models for statistics results
"""
from datetime import date
from pydantic import BaseModel, Field


class DayStatus(BaseModel):
    """Completion state of a single habit on one calendar day"""
    day: date
    key: str = Field(..., description="YYYY-MM-DD day key")
    completed: bool


class DayCount(BaseModel):
    """Number of habits completed on one calendar day"""
    day: date
    key: str = Field(..., description="YYYY-MM-DD day key")
    label: str = Field(..., description="Short weekday label")
    count: int = Field(..., ge=0)
