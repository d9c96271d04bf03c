import os
from pathlib import Path
import sys
import tempfile

import pytest

# Keep Kivy from parsing pytest's command line and from writing to ~/.kivy
os.environ.setdefault("KIVY_NO_ARGS", "1")
os.environ.setdefault("KIVY_NO_CONSOLELOG", "1")
os.environ.setdefault("KIVY_HOME", str(Path(tempfile.gettempdir()) / "workout-log-kivy"))
os.environ["KIVY_WINDOW"] = "mock"

sys.path.append(str(Path(__file__).resolve().parents[1]))

from backend import settings as app_settings
from backend.routines import ExerciseSpec
from backend.sessions import SessionStore
from backend.storage import LocalStorage
from utils import FakeClock, FakeScheduler


@pytest.fixture(autouse=True)
def _isolated_data_dir(tmp_path, monkeypatch):
    """Point every persisted file at a per-test directory."""
    monkeypatch.setenv("WORKOUT_LOG_DATA_DIR", str(tmp_path / "data"))
    app_settings.reset_cache()
    yield
    app_settings.reset_cache()


@pytest.fixture
def storage(tmp_path) -> LocalStorage:
    return LocalStorage(tmp_path / "storage")


@pytest.fixture
def store(storage) -> SessionStore:
    return SessionStore(storage)


@pytest.fixture
def catalog():
    """A small routine with one regular day and one empty day."""
    return {
        "Test": {
            "Push": [ExerciseSpec("Bench Press", 2), ExerciseSpec("Dips", 3)],
            "Rest": [],
        }
    }


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()
