"""
Habit tracker core - habits, streaks, statistics and reminders
"""
