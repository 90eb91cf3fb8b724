import cli


def test_prints_full_timetable(capsys):
    assert cli.main(["--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("All lessons (44 lessons)")
    assert "Week 4" in out


def test_day_filter(capsys):
    assert cli.main(["--day", "sat", "--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert "Saturday lessons (8 lessons)" in out
    assert "Monday" not in out


def test_grade_filter(capsys):
    assert cli.main(["--grade", "1", "--seed", "3"]) == 0
    assert "Grade 1 lessons (8 lessons)" in capsys.readouterr().out


def test_coach_filter_unknown_coach(capsys):
    assert cli.main(["--coach", "99"]) == cli.EXIT_BAD_INPUT


def test_invalid_day(capsys):
    assert cli.main(["--day", "sunday"]) == cli.EXIT_BAD_INPUT


def test_single_lesson(capsys):
    assert cli.main(["--lesson", "12", "--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Week 2\nLesson 12:")


def test_missing_lesson(capsys):
    assert cli.main(["--lesson", "45"]) == cli.EXIT_NOT_FOUND
    assert "not found" in capsys.readouterr().out


def test_coach_list(capsys):
    assert cli.main(["--coaches"]) == 0
    assert "1. Helen Carter" in capsys.readouterr().out


def test_seed_from_settings_is_reproducible(monkeypatch, capsys):
    monkeypatch.setenv("RANDOM_SEED", "8")
    cli.main([])
    first = capsys.readouterr().out
    cli.get_settings.cache_clear()
    cli.main([])
    assert capsys.readouterr().out == first


def test_writes_ics(tmp_path, capsys):
    target = tmp_path / "out" / "monday.ics"
    assert cli.main(["--day", "monday", "--ics", str(target)]) == 0
    assert target.read_bytes().count(b"BEGIN:VEVENT") == 12
