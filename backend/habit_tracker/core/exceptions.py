"""
Custom Exceptions - Application-specific error types
"""


class HabitTrackerException(Exception):
    """Base exception for all habit tracker errors"""
    pass


class InvalidHabitDataError(HabitTrackerException):
    """Raised when habit data validation fails"""
    pass


class StorageError(HabitTrackerException):
    """Raised when persisted state cannot be read or written"""
    pass


class SchedulerError(HabitTrackerException):
    """Raised when reminder scheduler operations fail"""
    pass
