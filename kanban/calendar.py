"""Date bucketing and dashboard summaries over cached boards, columns and tasks."""

import calendar as _calendar
import math
from collections.abc import Iterable
from datetime import date, timedelta
from enum import Enum

from kanban.schemas.board import BoardResponse
from kanban.schemas.column import ColumnResponse
from kanban.schemas.task import TaskResponse

DONE_COLUMN_TITLES = frozenset({"done", "completed", "finished"})
DUE_SOON_DAYS = 2


class CalendarView(str, Enum):
    MONTH = "month"
    WEEK = "week"
    DAY = "day"


def start_of_week(day: date) -> date:
    """Sunday on or before ``day``."""
    return day - timedelta(days=(day.weekday() + 1) % 7)


def _days(start: date, end: date) -> list[date]:
    return [start + timedelta(days=offset) for offset in range((end - start).days + 1)]


def calendar_days(view: CalendarView, current: date) -> list[date]:
    """Days shown by the view.

    A month is padded out to whole Sunday-first weeks, so the grid may start
    in the previous month and end in the next one.
    """
    view = CalendarView(view)
    if view == CalendarView.MONTH:
        first = current.replace(day=1)
        last = current.replace(day=_calendar.monthrange(current.year, current.month)[1])
        return _days(start_of_week(first), start_of_week(last) + timedelta(days=6))
    if view == CalendarView.WEEK:
        start = start_of_week(current)
        return _days(start, start + timedelta(days=6))
    return [current]


def tasks_in_view(
    tasks: Iterable[TaskResponse], view: CalendarView, current: date
) -> list[TaskResponse]:
    """Tasks with a due date inside the month, week or day containing ``current``."""
    view = CalendarView(view)
    if view == CalendarView.MONTH:
        def visible(due: date) -> bool:
            return (due.year, due.month) == (current.year, current.month)
    elif view == CalendarView.WEEK:
        start = start_of_week(current)
        def visible(due: date) -> bool:
            return start <= due <= start + timedelta(days=6)
    else:
        def visible(due: date) -> bool:
            return due == current

    return [t for t in tasks if t.due_date is not None and visible(t.due_date)]


def tasks_for_day(tasks: Iterable[TaskResponse], day: date) -> list[TaskResponse]:
    return [t for t in tasks if t.due_date == day]


def done_column_ids(columns: Iterable[ColumnResponse]) -> set[str]:
    return {c.id for c in columns if c.title.lower() in DONE_COLUMN_TITLES}


def completion_percentage(
    tasks: Iterable[TaskResponse], columns: Iterable[ColumnResponse]
) -> int:
    """Whole-number share of tasks sitting in a done column (half rounds up)."""
    tasks = list(tasks)
    if not tasks:
        return 0
    done = done_column_ids(columns)
    finished = sum(1 for t in tasks if t.column_id in done)
    return math.floor(finished / len(tasks) * 100 + 0.5)


def due_soon(
    tasks: Iterable[TaskResponse], columns: Iterable[ColumnResponse], today: date
) -> list[TaskResponse]:
    """Open tasks due after today and within the next two days, earliest first."""
    done = done_column_ids(columns)
    horizon = today + timedelta(days=DUE_SOON_DAYS)
    soon = [
        t
        for t in tasks
        if t.due_date is not None and today < t.due_date <= horizon and t.column_id not in done
    ]
    return sorted(soon, key=lambda t: t.due_date)


def overdue(
    tasks: Iterable[TaskResponse], columns: Iterable[ColumnResponse], today: date
) -> list[TaskResponse]:
    """Open tasks whose due date has passed, earliest first."""
    done = done_column_ids(columns)
    late = [
        t for t in tasks if t.due_date is not None and t.due_date < today and t.column_id not in done
    ]
    return sorted(late, key=lambda t: t.due_date)


def last_viewed_board(boards: Iterable[BoardResponse]) -> BoardResponse | None:
    """Most recently opened board; never-viewed boards rank last."""
    return max(boards, key=lambda b: b.last_viewed or 0, default=None)
