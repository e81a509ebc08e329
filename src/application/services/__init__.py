"""Application services.

Usage:
    from src.application.services import build_agenda, format_abstract
"""

from src.application.services.abstract_formatter import TextEscaper, format_abstract
from src.application.services.agenda_builder import (
    Agenda,
    DayOffset,
    TimeSlot,
    build_agenda,
    count_days,
    group_by_start_time,
)

__all__ = [
    "Agenda",
    "DayOffset",
    "TextEscaper",
    "TimeSlot",
    "build_agenda",
    "count_days",
    "format_abstract",
    "group_by_start_time",
]
