from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from errors import InvalidInputError
from models import Coach, Day, Gender, Grade, Student

LOGGER = logging.getLogger(__name__)

_COACH_NAMES = ("Helen Carter", "Tom Baker", "Priya Shah", "Daniel Moss")

_SEED_STUDENTS = (
    ("Elizabeth", Grade.ONE, Gender.FEMALE, "123456", 4),
    ("Amaka", Grade.TWO, Gender.FEMALE, "1234567", 5),
    ("Chibuzor", Grade.THREE, Gender.MALE, "1234566", 6),
    ("Jake", Grade.FOUR, Gender.MALE, "1234567", 7),
    ("John", Grade.FIVE, Gender.MALE, "1234567", 8),
    ("Mary", Grade.ONE, Gender.FEMALE, "1234568", 8),
    ("Michael", Grade.TWO, Gender.MALE, "1234569", 9),
    ("Sarah", Grade.THREE, Gender.FEMALE, "1234570", 10),
    ("David", Grade.FOUR, Gender.MALE, "1234571", 11),
    ("Jennifer", Grade.FIVE, Gender.FEMALE, "1234572", 7),
    ("Daniel", Grade.ONE, Gender.MALE, "1234573", 8),
    ("Jessica", Grade.TWO, Gender.FEMALE, "1234574", 9),
    ("Joseph", Grade.THREE, Gender.MALE, "1234575", 10),
    ("Sophia", Grade.FOUR, Gender.FEMALE, "1234576", 11),
    ("Ethan", Grade.FIVE, Gender.MALE, "1234577", 7),
)


def default_coaches() -> List[Coach]:
    """Return the school's coach roster."""

    return [Coach(id=index, name=name) for index, name in enumerate(_COACH_NAMES, start=1)]


def default_students() -> List[Student]:
    """Return the seed enrollment list."""

    return [
        Student(
            id=index,
            name=name,
            grade=grade,
            gender=gender,
            contact_number=contact,
            age=age,
        )
        for index, (name, grade, gender, contact, age) in enumerate(_SEED_STUDENTS, start=1)
    ]


def register_student(
    students: List[Student],
    name: str,
    grade: Grade,
    gender: Gender,
    contact_number: str,
    age: int,
) -> Student:
    """Validate and append a new student, returning it.

    The id continues the enrollment list numbering.
    """

    cleaned_name = name.strip()
    cleaned_contact = contact_number.strip()
    if not cleaned_name:
        raise InvalidInputError("Student name must not be empty")
    if not cleaned_contact:
        raise InvalidInputError("Emergency contact number must not be empty")

    student = Student(
        id=len(students) + 1,
        name=cleaned_name,
        grade=grade,
        gender=gender,
        contact_number=cleaned_contact,
        age=age,
    )
    students.append(student)
    LOGGER.info("Registered student %s (%s)", student.id, student.name)
    return student


def find_student(students: Sequence[Student], student_id: int) -> Optional[Student]:
    for student in students:
        if student.id == student_id:
            return student
    return None


def parse_grade(value: str) -> Grade:
    """Accept a grade rank (``"3"``) or name (``"three"``)."""

    cleaned = value.strip()
    if cleaned.isdigit():
        try:
            return Grade(int(cleaned))
        except ValueError:
            pass
    else:
        member = Grade.__members__.get(cleaned.upper())
        if member is not None:
            return member
    raise InvalidInputError(f"Unknown grade: {value!r}")


def parse_day(value: str) -> Day:
    """Accept a day name in any case, full or three-letter."""

    cleaned = value.strip().lower()
    if cleaned:
        for day in Day:
            if day.label.lower() == cleaned or day.label.lower()[:3] == cleaned:
                return day
    raise InvalidInputError(f"Unknown lesson day: {value!r}")


__all__ = [
    "default_coaches",
    "default_students",
    "find_student",
    "parse_day",
    "parse_grade",
    "register_student",
]
