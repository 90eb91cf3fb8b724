import random
import sys
from pathlib import Path

import pytest

# Makes the flat repository root importable for the test modules
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config import get_settings  # noqa: E402
from roster import default_coaches  # noqa: E402
from scheduler import build_timetable  # noqa: E402


@pytest.fixture
def coaches():
    return default_coaches()


@pytest.fixture
def timetable(coaches):
    return build_timetable(coaches, rng=random.Random(42))


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    for name in ("SCHOOL_NAME", "RANDOM_SEED", "TERM_START", "SCHOOL_TIMEZONE", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
