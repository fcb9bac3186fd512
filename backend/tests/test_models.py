"""Tests for the habit, reminder and profile models and their derived values."""

import json
from datetime import date, datetime, time, timedelta

import pytest
from pydantic import ValidationError

from habit_tracker.models.habit import RGBAColor, Habit, HabitDraft
from habit_tracker.models.profile import ThemePreference, UserProfile
from habit_tracker.models.reminder import HabitReminder
from habit_tracker.utils.timezone import day_key, weekday_code

from conftest import FIXED_NOW


def _keys(today, offsets):
    return {day_key(today - timedelta(days=o)) for o in offsets}


class TestCompletionRate:
    """Trailing 7-day completion rate relative to the weekly target."""

    def test_rate_capped_at_one(self, habit_factory, today):
        habit = habit_factory(target=5, completed_dates=_keys(today, range(5)))

        assert habit.completion_rate(today) == 1.0

    def test_rate_below_target(self, habit_factory, today):
        habit = habit_factory(target=7, completed_dates=_keys(today, [0, 2, 5]))

        assert habit.completion_rate(today) == pytest.approx(3 / 7)
        assert round(habit.completion_rate(today), 4) == 0.4286

    def test_rate_ignores_days_outside_window(self, habit_factory, today):
        habit = habit_factory(target=7, completed_dates=_keys(today, [7, 8, 30]))

        assert habit.completion_rate(today) == 0.0

    def test_rate_stays_in_unit_interval(self, habit_factory, today):
        for target in range(1, 8):
            habit = habit_factory(target=target, completed_dates=_keys(today, range(60)))
            assert 0.0 <= habit.completion_rate(today) <= 1.0

    def test_empty_history(self, habit_factory, today):
        assert habit_factory().completion_rate(today) == 0.0


class TestSchedule:
    """Weekday codes, day names and the due-today predicate."""

    def test_weekday_codes_start_on_sunday(self):
        assert weekday_code(date(2025, 7, 13)) == 1  # Sunday
        assert weekday_code(date(2025, 7, 14)) == 2  # Monday
        assert weekday_code(date(2025, 7, 19)) == 7  # Saturday

    def test_day_names_sorted_by_weekday(self, habit_factory):
        habit = habit_factory(is_all_days=False, selected_days={4, 2})

        assert habit.day_names() == ["Segunda", "Quarta"]

    def test_day_names_full_week(self, habit_factory):
        habit = habit_factory(is_all_days=False, selected_days={7, 1, 3, 5, 2, 4, 6})

        assert habit.day_names() == ["Domingo", "Segunda", "Terça", "Quarta", "Quinta", "Sexta", "Sábado"]

    def test_all_days_habit_is_always_due(self, habit_factory, today):
        habit = habit_factory(is_all_days=True)

        assert all(habit.should_be_done_today(today + timedelta(days=n)) for n in range(14))

    def test_scheduled_habit_due_only_on_selected_days(self, habit_factory, today):
        habit = habit_factory(is_all_days=False, selected_days={2, 4})

        due = [d for d in (today + timedelta(days=n) for n in range(7)) if habit.should_be_done_today(d)]
        assert sorted(weekday_code(d) for d in due) == [2, 4]

    def test_selected_days_ignored_when_all_days(self, habit_factory, today):
        habit = habit_factory(is_all_days=True, selected_days={1})

        assert habit.should_be_done_today(today)

    def test_invalid_weekday_rejected(self, habit_factory):
        with pytest.raises(ValidationError):
            habit_factory(is_all_days=False, selected_days={0, 8})


class TestHabitFields:
    """Field invariants and the remaining derived values."""

    def test_defaults(self, habit_factory):
        habit = habit_factory()

        assert habit.streak == 0
        assert habit.completed_dates == set()
        assert habit.reminders == []
        assert habit.is_all_days is True
        assert habit.id

    def test_ids_are_unique(self, habit_factory):
        assert habit_factory().id != habit_factory().id

    def test_id_is_immutable(self, habit_factory):
        habit = habit_factory()

        with pytest.raises(ValidationError):
            habit.id = "other"

    @pytest.mark.parametrize("target", [0, 8, -1])
    def test_target_out_of_range(self, habit_factory, target):
        with pytest.raises(ValidationError):
            habit_factory(target=target)

    def test_negative_streak_rejected(self, habit_factory):
        habit = habit_factory()

        with pytest.raises(ValidationError):
            habit.streak = -1

    @pytest.mark.parametrize("key", ["2025-7-16", "16/07/2025", "2025-02-30", "today"])
    def test_malformed_day_keys_rejected(self, habit_factory, key):
        with pytest.raises(ValidationError):
            habit_factory(completed_dates={key})

    def test_total_completions(self, habit_factory, today):
        habit = habit_factory(completed_dates=_keys(today, range(12)))

        assert habit.total_completions == 12

    def test_days_active(self, habit_factory):
        assert habit_factory().days_active(FIXED_NOW) == 1
        assert habit_factory(created_date=FIXED_NOW - timedelta(days=3)).days_active(FIXED_NOW) == 4
        assert habit_factory(created_date=FIXED_NOW + timedelta(days=2)).days_active(FIXED_NOW) == 1

    def test_naive_created_date_is_localized(self, habit_factory):
        habit = habit_factory(created_date=datetime(2025, 7, 1, 8, 0))

        assert habit.created_date.tzinfo is not None

    def test_weekly_grid_oldest_first(self, habit_factory, today):
        habit = habit_factory(completed_dates=_keys(today, [0, 6]))

        grid = habit.weekly_grid(today)

        assert [s.day for s in grid] == [today - timedelta(days=o) for o in range(6, -1, -1)]
        assert [s.completed for s in grid] == [True, False, False, False, False, False, True]
        assert grid[-1].key == "2025-07-16"


class TestSerialization:
    """JSON round trip with camelCase keys."""

    def test_round_trip(self, habit_factory, today):
        habit = habit_factory(
            color=RGBAColor(red=0.2, green=0.4, blue=0.6, alpha=0.8),
            streak=3,
            completed_dates=_keys(today, range(3)),
            target=4,
            is_all_days=False,
            selected_days={2, 6},
            reminders=[
                HabitReminder(time=time(7, 30), is_enabled=True, message="Bora ler"),
                HabitReminder(time=time(21, 0), is_enabled=True),
            ],
        )

        restored = Habit.model_validate_json(habit.model_dump_json(by_alias=True))

        assert restored == habit
        assert restored.reminders[0].id == habit.reminders[0].id
        assert restored.created_date == habit.created_date

    def test_serialized_layout(self, habit_factory, today):
        habit = habit_factory(completed_dates={"2025-07-16", "2025-07-14"}, selected_days={4, 2}, is_all_days=False)

        data = json.loads(habit.model_dump_json(by_alias=True))

        assert data["completedDates"] == ["2025-07-14", "2025-07-16"]
        assert data["selectedDays"] == [2, 4]
        assert data["isAllDays"] is False
        assert set(data["color"]) == {"red", "green", "blue", "alpha"}
        assert "createdDate" in data

    def test_accepts_python_field_names(self, today):
        habit = Habit.model_validate({
            "name": "Água",
            "icon": "💧",
            "color": {"red": 0.1, "green": 0.2, "blue": 0.3, "alpha": 1.0},
            "target": 7,
            "completed_dates": ["2025-07-16"],
        })

        assert habit.is_completed_on(today)


class TestReminder:
    def test_datetime_reduced_to_time_of_day(self):
        reminder = HabitReminder(time=datetime(2020, 1, 1, 18, 45, 33))

        assert reminder.time == time(18, 45)

    def test_defaults_disabled_with_empty_message(self):
        reminder = HabitReminder(time=time(8, 0))

        assert reminder.is_enabled is False
        assert reminder.message == ""

    def test_serialized_keys(self):
        data = json.loads(HabitReminder(time=time(8, 5), is_enabled=True).model_dump_json(by_alias=True))

        assert data["isEnabled"] is True
        assert data["time"] == "08:05:00"


class TestHabitDraft:
    """Caller-side validation of new habits."""

    def _draft(self, **overrides):
        data = {
            "name": "Meditar",
            "icon": "🧘",
            "color": RGBAColor(red=0.2, green=0.78, blue=0.35),
            "target": 5,
        }
        data.update(overrides)
        return HabitDraft(**data)

    def test_valid_draft(self):
        draft = self._draft(name="  Meditar  ")

        assert draft.name == "Meditar"
        assert draft.is_all_days is True

    @pytest.mark.parametrize("name", ["", "   "])
    def test_empty_name_rejected(self, name):
        with pytest.raises(ValidationError):
            self._draft(name=name)

    def test_scheduled_habit_needs_a_day(self):
        with pytest.raises(ValidationError, match="at least one day"):
            self._draft(is_all_days=False, selected_days=set())

    def test_scheduled_habit_with_days(self):
        draft = self._draft(is_all_days=False, selected_days={2, 4})

        assert draft.selected_days == {2, 4}


class TestUserProfile:
    def test_defaults(self):
        profile = UserProfile()

        assert profile.name == "Usuário"
        assert profile.daily_goal == 3
        assert profile.weekly_goal == 21
        assert profile.notifications_enabled is True
        assert profile.theme == ThemePreference.SYSTEM

    def test_serialized_keys(self):
        data = json.loads(UserProfile(notifications_enabled=False).model_dump_json(by_alias=True))

        assert data["notifications"] is False
        assert data["dailyGoal"] == 3
        assert data["theme"] == "system"
        assert "joinDate" in data

    @pytest.mark.parametrize("field, value", [("daily_goal", 0), ("daily_goal", 11), ("weekly_goal", 71)])
    def test_goal_ranges(self, field, value):
        with pytest.raises(ValidationError):
            UserProfile(**{field: value})
