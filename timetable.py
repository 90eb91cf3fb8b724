from __future__ import annotations

import logging
from typing import Iterable, List

from errors import UnorderedLessonsError
from models import LESSONS_PER_WEEK, Lesson

LOGGER = logging.getLogger(__name__)


def render_timetable(lessons: Iterable[Lesson]) -> str:
    """Render lessons as text split into ``Week N`` sections.

    ``lessons`` must be sorted ascending by id, which holds for the full
    timetable and for every filter on it. Week membership is read from the
    id, so weeks missing from a filtered view are skipped and the next
    header carries the right number.
    """

    chunks: List[str] = []
    week_count = 1
    week_boundary = LESSONS_PER_WEEK
    previous_id = 0

    for lesson in lessons:
        if lesson.id <= previous_id:
            raise UnorderedLessonsError(
                f"Lesson {lesson.id} follows lesson {previous_id}; expected ascending ids"
            )

        crossed = False
        while week_boundary < lesson.id:
            week_count += 1
            week_boundary += LESSONS_PER_WEEK
            crossed = True

        if crossed or not chunks:
            chunks.append(f"Week {week_count}\n")
        chunks.append(f"{format_lesson(lesson)}\n\n")
        previous_id = lesson.id

    LOGGER.debug("Rendered %s timetable chunks", len(chunks))
    return "".join(chunks)


def format_lesson(lesson: Lesson) -> str:
    return str(lesson)


def render_heading(title: str, count: int) -> str:
    """Caption shown above a rendered timetable."""

    noun = "lesson" if count == 1 else "lessons"
    return f"{title} ({count} {noun})"


__all__ = ["format_lesson", "render_heading", "render_timetable"]
