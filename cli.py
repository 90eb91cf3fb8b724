"""
Command-line timetable for the swim school.

Generates the term's lessons from the coach roster and prints them grouped
by week, optionally filtered by day, coach or grade.

Example:
    python cli.py --day saturday --seed 7
    python cli.py --grade 3 --ics grade-3.ics
"""
from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from config import Settings, get_settings
from errors import InvalidInputError
from ics_builder import build_ics
from models import Coach, Lesson, Timetable
from roster import default_coaches, parse_day, parse_grade
from scheduler import build_timetable
from timetable import format_lesson, render_heading, render_timetable
from time_utils import get_school_tz

LOGGER = logging.getLogger(__name__)

EXIT_NOT_FOUND = 1
EXIT_BAD_INPUT = 2


def build_arg_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""

    parser = argparse.ArgumentParser(
        description="Print the swim-school lesson timetable for the term",
    )
    filters = parser.add_mutually_exclusive_group()
    filters.add_argument("-d", "--day", help="Show lessons on this day (e.g. monday, sat)")
    filters.add_argument("-c", "--coach", type=int, help="Show lessons taught by this coach id")
    filters.add_argument("-g", "--grade", help="Show lessons for this grade (1-5)")
    filters.add_argument("-l", "--lesson", type=int, help="Show a single lesson by id")
    filters.add_argument(
        "--coaches", action="store_true", help="List the coach roster and exit"
    )
    parser.add_argument("-s", "--seed", type=int, help="Seed for coach assignment")
    parser.add_argument("--ics", type=Path, help="Also write shown lessons to this .ics file")
    parser.add_argument(
        "--utc", action="store_true", help="Write .ics events in UTC instead of local time"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug output",
    )
    return parser


def select_lessons(
    timetable: Timetable, args: argparse.Namespace, coaches: Sequence[Coach]
) -> Tuple[str, List[Lesson]]:
    """Apply the requested filter and return a caption with the lessons."""

    if args.day:
        day = parse_day(args.day)
        return f"{day} lessons", timetable.by_day(day)
    if args.coach is not None:
        coach = next((item for item in coaches if item.id == args.coach), None)
        if coach is None:
            raise InvalidInputError(f"Unknown coach id: {args.coach}")
        return f"Lessons with {coach.name}", timetable.by_coach(coach.id)
    if args.grade:
        grade = parse_grade(args.grade)
        return f"{grade} lessons", timetable.by_grade(grade.value)
    return "All lessons", list(timetable)


def _configure_logging(settings: Settings, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point."""

    args = build_arg_parser().parse_args(argv)
    settings = get_settings()
    _configure_logging(settings, args.verbose)

    coaches = default_coaches()
    if args.coaches:
        for coach in coaches:
            print(f"{coach.id}. {coach.name}")
        return 0

    seed = args.seed if args.seed is not None else settings.random_seed
    timetable = build_timetable(coaches, rng=random.Random(seed))

    if args.lesson is not None:
        lesson = timetable.by_id(args.lesson)
        if lesson is None:
            print(f"Lesson {args.lesson} not found.")
            return EXIT_NOT_FOUND
        print(f"Week {lesson.week}")
        print(format_lesson(lesson))
        lessons = [lesson]
    else:
        try:
            title, lessons = select_lessons(timetable, args, coaches)
        except InvalidInputError as exc:
            LOGGER.error("%s", exc)
            return EXIT_BAD_INPUT
        print(render_heading(title, len(lessons)))
        print()
        print(render_timetable(lessons), end="")

    if args.ics:
        payload = build_ics(
            lessons,
            term_start=settings.term_start,
            school_name=settings.school_name,
            tz=get_school_tz(settings.school_timezone),
            utc=args.utc,
        )
        args.ics.parent.mkdir(parents=True, exist_ok=True)
        args.ics.write_bytes(payload)
        LOGGER.info("Saved %s lessons to %s", len(lessons), args.ics)
    return 0


if __name__ == "__main__":
    sys.exit(main())
