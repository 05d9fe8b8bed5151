"""Tests for core task logic."""

from datetime import date, time, timedelta

import pytest

from tasklist.core.tasks import (
    DueTag,
    ParseError,
    Task,
    TaskPriority,
    classify_due,
    current_date,
    parse_date,
    parse_time,
)


# Fixtures
@pytest.fixture
def today():
    return date(2023, 6, 15)


class TestClassifyDue:
    def test_due_today(self, today):
        assert classify_due(date(2023, 6, 15), today) is DueTag.TODAY

    def test_due_in_future(self, today):
        assert classify_due(date(2023, 6, 20), today) is DueTag.IN_TIME

    def test_overdue(self, today):
        assert classify_due(date(2023, 6, 1), today) is DueTag.OVERDUE

    def test_one_day_either_side(self, today):
        assert classify_due(today + timedelta(days=1), today) is DueTag.IN_TIME
        assert classify_due(today - timedelta(days=1), today) is DueTag.OVERDUE

    def test_across_year_boundary(self):
        assert classify_due(date(2024, 1, 1), date(2023, 12, 31)) is DueTag.IN_TIME


class TestTaskPriority:
    def test_tags(self):
        assert [p.tag for p in TaskPriority] == ["C", "H", "N", "L"]

    def test_from_tag_case_insensitive(self):
        assert TaskPriority.from_tag("h") is TaskPriority.HIGH
        assert TaskPriority.from_tag(" L ") is TaskPriority.LOW

    def test_from_tag_unknown(self):
        with pytest.raises(ValueError):
            TaskPriority.from_tag("X")

    def test_parse_accepts_name_or_tag(self):
        assert TaskPriority.parse("CRITICAL") is TaskPriority.CRITICAL
        assert TaskPriority.parse("normal") is TaskPriority.NORMAL
        assert TaskPriority.parse("C") is TaskPriority.CRITICAL

    def test_colors_are_single_space_swatches(self):
        for priority in TaskPriority:
            assert priority.color.startswith("\x1b[")
            assert priority.color.endswith("m \x1b[0m")

    def test_due_tag_colors(self):
        assert DueTag.OVERDUE.color == TaskPriority.CRITICAL.color
        assert DueTag.TODAY.color == TaskPriority.HIGH.color
        assert DueTag.IN_TIME.color == TaskPriority.NORMAL.color


class TestTask:
    def test_default_due_date_is_utc_today(self):
        assert Task(content=["x"]).due_date == current_date("UTC")

    def test_display_strings(self):
        task = Task(content=["x"], due_date=date(2023, 6, 5), due_time=time(9, 5))
        assert task.date_str == "2023-06-05"
        assert task.time_str == "09:05"

    def test_due_tag_uses_given_today(self, today):
        task = Task(content=["x"], due_date=today, due_time=time(12, 0))
        assert task.due_tag(today) is DueTag.TODAY

    def test_to_dict(self):
        task = Task(
            content=["line one", "line two"],
            priority=TaskPriority.HIGH,
            due_date=date(2023, 6, 15),
            due_time=time(18, 30),
        )
        assert task.to_dict() == {
            "task": ["line one", "line two"],
            "priority": "HIGH",
            "taskDate": "2023-06-15",
            "taskTime": "18:30",
        }

    def test_from_dict_with_tag_priority(self):
        task = Task.from_dict(
            {"task": ["a"], "priority": "L", "taskDate": "2023-06-15", "taskTime": "07:00"}
        )
        assert task.priority is TaskPriority.LOW
        assert task.due_date == date(2023, 6, 15)
        assert task.due_time == time(7, 0)

    def test_from_dict_missing_field(self):
        with pytest.raises(KeyError):
            Task.from_dict({"task": ["a"], "priority": "L", "taskDate": "2023-06-15"})

    @pytest.mark.parametrize("content", [[], [""], ["  ", ""], "abc", ["a", None]])
    def test_from_dict_rejects_content_without_text(self, content):
        with pytest.raises(ValueError):
            Task.from_dict({"task": content, "priority": "N", "taskDate": "2023-06-15", "taskTime": "07:00"})


class TestParseDate:
    def test_iso(self):
        assert parse_date("2023-06-15") == date(2023, 6, 15)

    def test_unpadded_components(self):
        assert parse_date("2023-6-5") == date(2023, 6, 5)

    def test_strips_whitespace(self):
        assert parse_date("  2023-06-15 ") == date(2023, 6, 15)

    @pytest.mark.parametrize("text", ["2023-02-30", "2023-13-01", "2023/06/15", "tomorrow", "", "2023-06"])
    def test_invalid(self, text):
        with pytest.raises(ParseError):
            parse_date(text)

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_date("nope")


class TestParseTime:
    def test_padded(self):
        assert parse_time("18:30") == time(18, 30)

    def test_unpadded(self):
        assert parse_time("9:5") == time(9, 5)

    def test_midnight(self):
        assert parse_time("0:0") == time(0, 0)

    @pytest.mark.parametrize("text", ["24:00", "12:60", "12", "12:00:00", "ab:cd", "", "-1:30"])
    def test_invalid(self, text):
        with pytest.raises(ParseError):
            parse_time(text)
