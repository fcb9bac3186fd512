"""
Application-wide constants
"""

# Repository keys (one serialized blob per key)
HABITS_STORAGE_KEY = "habits"
PROFILE_STORAGE_KEY = "userProfile"

# Day keys inside completed_dates
DAY_KEY_FORMAT = "%Y-%m-%d"

# Weekday codes: 1 = Sunday ... 7 = Saturday
DAY_NAMES = ["Domingo", "Segunda", "Terça", "Quarta", "Quinta", "Sexta", "Sábado"]
DAY_SHORT_NAMES = ["Dom", "Seg", "Ter", "Qua", "Qui", "Sex", "Sáb"]

# Trailing window used for completion rate and weekly charts
TRAILING_WINDOW_DAYS = 7

# Habit target bounds (days per week)
MIN_TARGET = 1
MAX_TARGET = 7

# User profile defaults and editor bounds
DEFAULT_PROFILE_NAME = "Usuário"
DEFAULT_DAILY_GOAL = 3
DEFAULT_WEEKLY_GOAL = 21
DAILY_GOAL_RANGE = (1, 10)
WEEKLY_GOAL_RANGE = (1, 70)

# Reminder delivery
REMINDER_TITLE = "Lembrete de Hábito"
REMINDER_FALLBACK_BODY = "Hora de {habit_name}!"
REMINDER_JOB_PREFIX = "habit"
DAILY_GOALS_COMPLETED_MESSAGE = "Parabéns! Você completou todos os seus objetivos de hoje!"
