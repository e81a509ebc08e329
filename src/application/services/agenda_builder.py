"""Agenda builder.

Turns the flat session list returned by the conference API into the data an
agenda page renders: the list of conference days for navigation, and the
selected day's sessions grouped into time slots.

Algorithm:
    1. start_date = earliest calendar date among sessions with a start time.
    2. end_date   = latest calendar date among sessions with an end time.
    3. number_of_days = (end_date - start_date).days + 1, or 0 if either
       date is unknown.
    4. day_offsets = (offset, weekday) for every offset in [0, number_of_days).
    5. The selected day is start_date + day_offset (not bounds-checked; an
       out-of-range offset simply matches nothing).
    6. Sessions starting on the selected day are grouped by exact start
       timestamp, slots ascending by time, sessions in a slot ascending by
       track id (no track first, ties keep input order).

Calendar dates are taken in each timestamp's own UTC offset.

Pure and deterministic: no I/O, the input is never mutated.

Usage:
    from src.application.services.agenda_builder import build_agenda

    agenda = build_agenda(sessions, day_offset=1)
    for day in agenda.day_offsets:
        print(day.offset, day.day_name)
    for slot in agenda.time_slots:
        print(slot.start_time, [s.title for s in slot.sessions])
"""

from calendar import Day
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from itertools import groupby

from src.schemas.conference_schemas import Session


@dataclass(frozen=True, slots=True, kw_only=True)
class DayOffset:
    """One entry of the day navigation list.

    Attributes:
        offset: Days since the first conference day (0-based).
        day_of_week: Weekday of that day.
    """

    offset: int
    day_of_week: Day

    @property
    def day_name(self) -> str:
        """Weekday as a display name (e.g., "Monday")."""
        return self.day_of_week.name.title()


@dataclass(frozen=True, slots=True, kw_only=True)
class TimeSlot:
    """Sessions sharing one start timestamp, ordered by track."""

    start_time: datetime
    sessions: tuple[Session, ...]


@dataclass(frozen=True, slots=True, kw_only=True)
class Agenda:
    """View data for one day of the agenda.

    Attributes:
        day_offsets: Navigation list covering every conference day.
        time_slots: Selected day's sessions grouped by start time.
        current_day_offset: Requested day offset, echoed back.
        start_date: First conference day, or None with no dated session.
    """

    day_offsets: tuple[DayOffset, ...]
    time_slots: tuple[TimeSlot, ...]
    current_day_offset: int
    start_date: date | None = None

    @property
    def number_of_days(self) -> int:
        """Number of conference days."""
        return len(self.day_offsets)


def _conference_dates(sessions: Sequence[Session]) -> tuple[date | None, date | None]:
    """Earliest start date and latest end date, each None if unknown."""
    start_dates = [s.start_time.date() for s in sessions if s.start_time is not None]
    end_dates = [s.end_time.date() for s in sessions if s.end_time is not None]
    return (
        min(start_dates) if start_dates else None,
        max(end_dates) if end_dates else None,
    )


def count_days(sessions: Sequence[Session]) -> int:
    """Inclusive number of days between first start and last end.

    Returns 0 when no session has a start time or none has an end time.
    """
    start_date, end_date = _conference_dates(sessions)
    if start_date is None or end_date is None:
        return 0
    return max((end_date - start_date).days + 1, 0)


def _track_order(session: Session) -> tuple[bool, int]:
    # Sessions without a track sort before every numbered track
    return (session.track_id is not None, session.track_id or 0)


def group_by_start_time(sessions: Iterable[Session]) -> tuple[TimeSlot, ...]:
    """Group sessions by exact start timestamp.

    Sessions without a start time are dropped. Slots come out in ascending
    time order; within a slot sessions are ordered by track id, stable.
    """
    dated = sorted(
        (s for s in sessions if s.start_time is not None),
        key=lambda s: s.start_time,
    )
    return tuple(
        TimeSlot(
            start_time=start_time,
            sessions=tuple(sorted(slot, key=_track_order)),
        )
        for start_time, slot in groupby(dated, key=lambda s: s.start_time)
    )


def build_agenda(sessions: Sequence[Session], day_offset: int = 0) -> Agenda:
    """Build the agenda view for one conference day.

    Args:
        sessions: Every session fetched from the API.
        day_offset: Day to show, counted from the first conference day.

    Returns:
        Agenda with the full day navigation list and the selected day's
        time slots. Empty when no session is dated.
    """
    start_date, _ = _conference_dates(sessions)
    if start_date is None:
        return Agenda(day_offsets=(), time_slots=(), current_day_offset=day_offset)

    day_offsets = tuple(
        DayOffset(
            offset=offset,
            day_of_week=Day((start_date + timedelta(days=offset)).weekday()),
        )
        for offset in range(count_days(sessions))
    )

    try:
        filter_date: date | None = start_date + timedelta(days=day_offset)
    except OverflowError:
        filter_date = None  # Offset lands outside the representable calendar

    selected = [
        s
        for s in sessions
        if s.start_time is not None and s.start_time.date() == filter_date
    ]

    return Agenda(
        day_offsets=day_offsets,
        time_slots=group_by_start_time(selected),
        current_day_offset=day_offset,
        start_date=start_date,
    )
