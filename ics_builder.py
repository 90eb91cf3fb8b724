from __future__ import annotations

import logging
from datetime import date, timedelta, timezone, tzinfo
from typing import Iterable

from icalendar import Alarm, Calendar, Event

from models import Lesson
from text_utils import slugify_name
from time_utils import lesson_end, lesson_start

LOGGER = logging.getLogger(__name__)

REMINDER_LEAD = timedelta(minutes=-30)


def build_ics(
    lessons: Iterable[Lesson],
    term_start: date,
    school_name: str,
    tz: tzinfo,
    utc: bool = False,
) -> bytes:
    """Build an iCalendar document with one event per lesson.

    Local calendars carry the school timezone and a reminder per lesson;
    ``utc=True`` produces plain UTC events for calendar imports.
    """

    calendar = Calendar()
    calendar.add("prodid", f"-//{slugify_name(school_name)}//timetable//EN")
    calendar.add("version", "2.0")
    calendar.add("calscale", "GREGORIAN")
    calendar.add("X-WR-CALNAME", f"{school_name} lessons")
    if not utc:
        calendar.add("X-WR-TIMEZONE", str(tz))

    count = 0
    for lesson in lessons:
        calendar.add_component(_build_event(lesson, term_start, school_name, tz, utc))
        count += 1

    LOGGER.debug("Built calendar with %s events", count)
    return calendar.to_ical()


def _build_event(
    lesson: Lesson, term_start: date, school_name: str, tz: tzinfo, utc: bool
) -> Event:
    start = lesson_start(lesson, term_start, tz)
    end = lesson_end(lesson, term_start, tz)
    if utc:
        start = start.astimezone(timezone.utc)
        end = end.astimezone(timezone.utc)

    event = Event()
    event.add("summary", f"{lesson.grade} swimming lesson")
    event.add("description", f"Coach: {lesson.coach.name} | Week {lesson.week}")
    event.add("dtstart", start)
    event.add("dtend", end)
    event.add("location", school_name)
    event.add("uid", f"lesson-{lesson.id}@{slugify_name(school_name)}")
    if not utc:
        event.add_component(_build_reminder(lesson))
    return event


def _build_reminder(lesson: Lesson) -> Alarm:
    alarm = Alarm()
    alarm.add("action", "DISPLAY")
    alarm.add("description", f"Swimming soon: {lesson.grade} with {lesson.coach.name}")
    alarm.add("trigger", REMINDER_LEAD)
    return alarm


__all__ = ["build_ics"]
