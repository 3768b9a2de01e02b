from datetime import time

import pytest

from lecturer_portal.errors import ValidationFailed
from lecturer_portal.repositories.timetable import TimetableRepository
from lecturer_portal.utils.conflict import find_conflicts, is_conflict


def slot(day, start, end, subject="Algorithms", **extra):
    fields = {
        "day_of_week": day,
        "start_time": start,
        "end_time": end,
        "subject": subject,
        "class": "CS101",
    }
    fields.update(extra)
    return fields


def test_list_orders_by_weekday_then_start_time(client, lecturer):
    repo = TimetableRepository(client)
    repo.create(lecturer, slot("Wednesday", "09:00", "10:00"))
    repo.create(lecturer, slot("Monday", "13:00", "14:00"))
    repo.create(lecturer, slot("Friday", "08:00", "09:00"))
    repo.create(lecturer, slot("Monday", "08:00", "09:30"))

    rows = repo.list(lecturer)

    assert [(r.day_of_week, r.start_time) for r in rows] == [
        ("Monday", time(8, 0)),
        ("Monday", time(13, 0)),
        ("Wednesday", time(9, 0)),
        ("Friday", time(8, 0)),
    ]


def test_weekend_days_are_rejected(client, lecturer):
    with pytest.raises(ValidationFailed):
        TimetableRepository(client).create(lecturer, slot("Saturday", "09:00", "10:00"))


def test_start_after_end_is_stored_as_given(client, lecturer):
    row = TimetableRepository(client).create(lecturer, slot("Tuesday", "15:00", "14:00"))
    assert row.start_time > row.end_time


def test_week_groups_slots_and_reports_clashes(client, lecturer):
    repo = TimetableRepository(client)
    repo.create(lecturer, slot("Monday", "09:00", "11:00", subject="Algorithms", room="B12"))
    repo.create(lecturer, slot("Monday", "10:00", "12:00", subject="Databases"))
    repo.create(lecturer, slot("Monday", "12:00", "13:00", subject="Networks"))

    week = repo.week(lecturer)

    assert list(week.grid) == ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]
    assert [s.subject for s in week.grid["Monday"]] == ["Algorithms", "Databases", "Networks"]
    assert week.grid["Friday"] == []
    assert len(week.conflicts) == 1
    assert (week.conflicts[0].first.subject, week.conflicts[0].second.subject) == ("Algorithms", "Databases")


def test_touching_slots_do_not_conflict(client, lecturer):
    repo = TimetableRepository(client)
    a = repo.create(lecturer, slot("Thursday", "09:00", "10:00"))
    b = repo.create(lecturer, slot("Thursday", "10:00", "11:00"))
    c = repo.create(lecturer, slot("Friday", "09:30", "10:30"))

    assert find_conflicts([a, b, c]) == []
    assert not is_conflict([a, b], [c])
