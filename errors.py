from __future__ import annotations


class SchedulingError(Exception):
    """Base class for swim-school scheduling errors."""


class InvalidInputError(SchedulingError, ValueError):
    """Raised when caller supplied data cannot be used."""


class InvalidAgeError(InvalidInputError):
    """Raised when a student's age is outside the accepted range."""


class UnorderedLessonsError(SchedulingError, ValueError):
    """Raised when lessons are not sorted ascending by id."""


__all__ = [
    "SchedulingError",
    "InvalidInputError",
    "InvalidAgeError",
    "UnorderedLessonsError",
]
