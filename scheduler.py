from __future__ import annotations

import logging
import random
from typing import Callable, List, Optional, Sequence

from errors import InvalidInputError
from models import Coach, Day, Grade, Lesson, TimeSlot, Timetable

LOGGER = logging.getLogger(__name__)

TERM_WEEKS = 4

WEEKDAY_TIMES = (
    TimeSlot.TIME_4PM_TO_5PM,
    TimeSlot.TIME_5PM_TO_6PM,
    TimeSlot.TIME_6PM_TO_7PM,
)
WEEKEND_TIMES = (TimeSlot.TIME_2PM_TO_3PM, TimeSlot.TIME_3PM_TO_4PM)

CoachPicker = Callable[[Sequence[Coach], random.Random], Coach]


def pick_coach_uniformly(coaches: Sequence[Coach], rng: random.Random) -> Coach:
    """Draw any coach with equal probability; repeats and overlaps are allowed."""

    return coaches[rng.randrange(len(coaches))]


def slot_times(day: Day) -> Sequence[TimeSlot]:
    """Return the time pattern used on ``day``."""

    return WEEKEND_TIMES if day.is_weekend else WEEKDAY_TIMES


def generate_lessons(
    coaches: Sequence[Coach],
    rng: Optional[random.Random] = None,
    pick_coach: CoachPicker = pick_coach_uniformly,
) -> List[Lesson]:
    """Build the lessons of a full term.

    Every week repeats the same day/time pattern. Grades are taken from a
    single cursor that starts at the highest grade, steps down once per
    lesson and wraps back to the top, so grade order drifts across days and
    weeks instead of restarting. Ids are 1-based and follow creation order.
    """

    if not coaches:
        raise InvalidInputError("At least one coach is required to generate lessons")

    rng = rng or random.Random()
    grades = list(Grade)
    top = len(grades) - 1
    grade_cursor = top

    lessons: List[Lesson] = []
    for week in range(1, TERM_WEEKS + 1):
        for day in Day:
            for slot in slot_times(day):
                lessons.append(
                    Lesson(
                        id=len(lessons) + 1,
                        grade=grades[grade_cursor],
                        day=day,
                        time=slot,
                        coach=pick_coach(coaches, rng),
                    )
                )
                grade_cursor -= 1
                if grade_cursor < 0:
                    grade_cursor = top
        LOGGER.debug("Week %s scheduled, %s lessons so far", week, len(lessons))

    LOGGER.info("Generated %s lessons for %s coaches", len(lessons), len(coaches))
    return lessons


def build_timetable(
    coaches: Sequence[Coach], rng: Optional[random.Random] = None
) -> Timetable:
    """Generate a term and wrap it in a read-only :class:`Timetable`."""

    return Timetable(tuple(generate_lessons(coaches, rng=rng)))


__all__ = [
    "TERM_WEEKS",
    "WEEKDAY_TIMES",
    "WEEKEND_TIMES",
    "build_timetable",
    "generate_lessons",
    "pick_coach_uniformly",
    "slot_times",
]
