from __future__ import annotations

import logging
from datetime import date, datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from models import Lesson

LOGGER = logging.getLogger(__name__)

DEFAULT_TZ_NAME = "Europe/London"


def get_school_tz(name: str = DEFAULT_TZ_NAME) -> tzinfo:
    """Return the school's timezone with a fallback to UTC."""

    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        LOGGER.warning("Falling back to UTC, unknown timezone %s: %s", name, exc)
        return timezone.utc


def lesson_date(lesson: Lesson, term_start: date) -> date:
    """Calendar date of a lesson in a term opening on ``term_start``."""

    return term_start + timedelta(weeks=lesson.week - 1, days=lesson.day.offset)


def lesson_start(lesson: Lesson, term_start: date, tz: tzinfo) -> datetime:
    return datetime.combine(lesson_date(lesson, term_start), lesson.time.start, tzinfo=tz)


def lesson_end(lesson: Lesson, term_start: date, tz: tzinfo) -> datetime:
    return datetime.combine(lesson_date(lesson, term_start), lesson.time.end, tzinfo=tz)


__all__ = ["DEFAULT_TZ_NAME", "get_school_tz", "lesson_date", "lesson_end", "lesson_start"]
