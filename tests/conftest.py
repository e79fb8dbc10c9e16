"""Pytest fixtures for smart_directory tests."""

import tempfile
from collections.abc import Iterator
from pathlib import Path

import pytest

from tests.helpers import FakeSiblingLister


@pytest.fixture
def temp_dir() -> Iterator[Path]:
    """Create a temporary directory for test trees."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def home(temp_dir: Path) -> Path:
    """A fake home directory inside the temporary tree."""
    home_dir = temp_dir / "home" / "me"
    home_dir.mkdir(parents=True)
    return home_dir


@pytest.fixture
def fake_lister() -> FakeSiblingLister:
    """A lister that reports no siblings anywhere."""
    return FakeSiblingLister()


@pytest.fixture(autouse=True)
def no_color_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep colour output deterministic regardless of the caller's terminal."""
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
