"""
Habits module - Core habit management functionality
"""
from . import repository
from . import reminders
from . import statistics
from . import samples
from . import service

# Export commonly used names for convenience
from .service import HabitStore, validate_habit_draft

from .repository import (
    HabitRepository,
    JsonFileRepository,
    InMemoryRepository
)

__all__ = [
    # Modules
    'repository',
    'reminders',
    'statistics',
    'samples',
    'service',

    # Store
    'HabitStore',
    'validate_habit_draft',

    # Repositories
    'HabitRepository',
    'JsonFileRepository',
    'InMemoryRepository'
]
