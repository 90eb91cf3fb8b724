import random
from collections import Counter

import pytest

from errors import InvalidInputError
from models import Coach, Day, Grade, TimeSlot
from scheduler import generate_lessons, pick_coach_uniformly


def test_generates_full_term_with_sequential_ids(coaches):
    lessons = generate_lessons(coaches, rng=random.Random(1))
    assert len(lessons) == 44
    assert [lesson.id for lesson in lessons] == list(range(1, 45))


def test_lessons_per_day_follow_slot_pattern(coaches):
    counts = Counter(lesson.day for lesson in generate_lessons(coaches, rng=random.Random(1)))
    assert counts == {Day.MONDAY: 12, Day.WEDNESDAY: 12, Day.FRIDAY: 12, Day.SATURDAY: 8}


def test_week_pattern_repeats_in_day_order(coaches):
    lessons = generate_lessons(coaches, rng=random.Random(1))
    first_week = [(lesson.day, lesson.time) for lesson in lessons[:11]]
    assert first_week[:3] == [
        (Day.MONDAY, TimeSlot.TIME_4PM_TO_5PM),
        (Day.MONDAY, TimeSlot.TIME_5PM_TO_6PM),
        (Day.MONDAY, TimeSlot.TIME_6PM_TO_7PM),
    ]
    assert first_week[-2:] == [
        (Day.SATURDAY, TimeSlot.TIME_2PM_TO_3PM),
        (Day.SATURDAY, TimeSlot.TIME_3PM_TO_4PM),
    ]
    for week in range(1, 4):
        chunk = lessons[week * 11 : (week + 1) * 11]
        assert [(lesson.day, lesson.time) for lesson in chunk] == first_week
        assert {lesson.week for lesson in chunk} == {week + 1}


def test_grade_cursor_runs_across_whole_term(coaches):
    lessons = generate_lessons(coaches, rng=random.Random(1))
    assert [lesson.grade for lesson in lessons[:7]] == [
        Grade.FIVE,
        Grade.FOUR,
        Grade.THREE,
        Grade.TWO,
        Grade.ONE,
        Grade.FIVE,
        Grade.FOUR,
    ]
    # week 2 does not restart at the top grade
    assert lessons[11].grade is Grade.FOUR
    assert Counter(lesson.grade for lesson in lessons) == {
        Grade.FIVE: 9,
        Grade.FOUR: 9,
        Grade.THREE: 9,
        Grade.TWO: 9,
        Grade.ONE: 8,
    }


def test_grades_do_not_depend_on_coach_draws(coaches):
    first = generate_lessons(coaches, rng=random.Random(1))
    second = generate_lessons(coaches, rng=random.Random(99))
    assert [(l.grade, l.day, l.time) for l in first] == [(l.grade, l.day, l.time) for l in second]


def test_same_seed_gives_same_coaches(coaches):
    first = generate_lessons(coaches, rng=random.Random(5))
    second = generate_lessons(coaches, rng=random.Random(5))
    assert [lesson.coach for lesson in first] == [lesson.coach for lesson in second]


def test_single_coach_teaches_every_lesson():
    coach = Coach(id=7, name="Solo")
    lessons = generate_lessons([coach])
    assert len(lessons) == 44
    assert all(lesson.coach == coach for lesson in lessons)


def test_empty_roster_is_rejected():
    with pytest.raises(InvalidInputError):
        generate_lessons([])


def test_custom_coach_picker_is_used(coaches):
    lessons = generate_lessons(coaches, pick_coach=lambda roster, rng: roster[-1])
    assert {lesson.coach for lesson in lessons} == {coaches[-1]}


def test_uniform_picker_stays_within_roster(coaches):
    rng = random.Random(3)
    picked = {pick_coach_uniformly(coaches, rng) for _ in range(200)}
    assert picked <= set(coaches)
    assert len(picked) > 1
