from pathlib import Path

import pytest

from mk.domain.validation.path_expander import PathExpander

from tests.fakes.fake_opener import FakeOpener


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep tests away from the developer's editor settings and ~/.mk config.

    If a test needs an editor variable, it should set it explicitly via monkeypatch.
    """
    monkeypatch.delenv("_MK_FILE_EDITOR", raising=False)
    monkeypatch.delenv("_MK_DIR_EDITOR", raising=False)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))


@pytest.fixture
def home_dir(tmp_path: Path) -> Path:
    return tmp_path / "home"


@pytest.fixture
def work_dir(tmp_path: Path) -> Path:
    """Hermetic invocation directory."""
    d = tmp_path / "work"
    d.mkdir()
    return d


@pytest.fixture
def expander(home_dir: Path, work_dir: Path) -> PathExpander:
    return PathExpander(home=home_dir, invoke_dir=work_dir)


@pytest.fixture
def fake_opener() -> FakeOpener:
    return FakeOpener()
