from __future__ import annotations

from dataclasses import dataclass, field
from datetime import time
from enum import Enum
from typing import List, Optional, Tuple

from errors import InvalidAgeError

LESSONS_PER_WEEK = 11
MIN_STUDENT_AGE = 4
MAX_STUDENT_AGE = 11


class Grade(Enum):
    """Swimming skill levels, lowest to highest."""

    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5

    def __str__(self) -> str:
        return f"Grade {self.value}"


class Day(Enum):
    """Days on which lessons run, in timetable order."""

    MONDAY = ("Monday", 0)
    WEDNESDAY = ("Wednesday", 2)
    FRIDAY = ("Friday", 4)
    SATURDAY = ("Saturday", 5)

    @property
    def label(self) -> str:
        return self.value[0]

    @property
    def offset(self) -> int:
        """Days since the Monday that opens the week."""

        return self.value[1]

    @property
    def is_weekend(self) -> bool:
        return self is Day.SATURDAY

    def __str__(self) -> str:
        return self.label


class TimeSlot(Enum):
    """One-hour lesson slots."""

    TIME_2PM_TO_3PM = (time(14, 0), time(15, 0))
    TIME_3PM_TO_4PM = (time(15, 0), time(16, 0))
    TIME_4PM_TO_5PM = (time(16, 0), time(17, 0))
    TIME_5PM_TO_6PM = (time(17, 0), time(18, 0))
    TIME_6PM_TO_7PM = (time(18, 0), time(19, 0))

    @property
    def start(self) -> time:
        return self.value[0]

    @property
    def end(self) -> time:
        return self.value[1]

    @property
    def label(self) -> str:
        return f"{self.start:%H:%M}-{self.end:%H:%M}"

    def __str__(self) -> str:
        return self.label


class Gender(Enum):
    MALE = "Male"
    FEMALE = "Female"


@dataclass(frozen=True)
class Coach:
    """Swimming instructor from the school roster."""

    id: int
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass
class Student:
    """Enrolled learner."""

    id: int
    name: str
    grade: Grade
    gender: Gender
    contact_number: str
    age: int

    def __post_init__(self) -> None:
        if not MIN_STUDENT_AGE <= self.age <= MAX_STUDENT_AGE:
            raise InvalidAgeError(
                f"Age must be between {MIN_STUDENT_AGE} and {MAX_STUDENT_AGE}, got {self.age}"
            )


@dataclass(frozen=True)
class Lesson:
    """Single scheduled lesson."""

    id: int
    grade: Grade
    day: Day
    time: TimeSlot
    coach: Coach

    @property
    def week(self) -> int:
        """Term week the lesson belongs to, derived from its id."""

        return (self.id - 1) // LESSONS_PER_WEEK + 1

    def __str__(self) -> str:
        return (
            f"Lesson {self.id}: {self.day} {self.time} | {self.grade} | "
            f"Coach: {self.coach.name}"
        )


@dataclass(frozen=True)
class Timetable:
    """Read-only store of the lessons generated for a term."""

    lessons: Tuple[Lesson, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.lessons)

    def __iter__(self):
        return iter(self.lessons)

    def by_id(self, lesson_id: int) -> Optional[Lesson]:
        """Return the lesson with the given id or ``None``."""

        for lesson in self.lessons:
            if lesson.id == lesson_id:
                return lesson
        return None

    def by_day(self, day: Day) -> List[Lesson]:
        return [lesson for lesson in self.lessons if lesson.day is day]

    def by_coach(self, coach_id: int) -> List[Lesson]:
        return [lesson for lesson in self.lessons if lesson.coach.id == coach_id]

    def by_grade(self, grade_value: int) -> List[Lesson]:
        """Return lessons whose grade rank equals ``grade_value``."""

        return [lesson for lesson in self.lessons if lesson.grade.value == grade_value]

    def grouped_by_week(self) -> dict[int, list[Lesson]]:
        """Return lessons grouped by term week preserving order."""

        grouped: dict[int, list[Lesson]] = {}
        for lesson in self.lessons:
            grouped.setdefault(lesson.week, []).append(lesson)
        return grouped


__all__ = [
    "Coach",
    "Day",
    "Gender",
    "Grade",
    "Lesson",
    "LESSONS_PER_WEEK",
    "Student",
    "TimeSlot",
    "Timetable",
]
