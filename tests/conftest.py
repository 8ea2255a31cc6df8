import contextlib
import copy
import io
import logging
import sys
from pathlib import Path
from typing import Sequence

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import nugget.__main__ as nugget_main  # noqa: E402
from nugget.config import Config  # noqa: E402


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch, tmp_path):
    """Keep temporary files in the test's folder and restore settings afterwards."""
    saved = {
        name: copy.deepcopy(getattr(Config, name))
        for name in dir(Config)
        if name.isupper()
    }
    monkeypatch.setattr(Config, "TMP_FOLDER", (tmp_path / "tmp").as_posix())
    yield
    for name, value in saved.items():
        setattr(Config, name, value)


@pytest.fixture(autouse=True)
def _silence_halo(monkeypatch):
    """Replace Halo spinners with a no-op context manager for tests."""

    class _DummyHalo:
        def __init__(self, *args, **kwargs):
            self.text = kwargs.get("text")

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc, tb):
            return False

    monkeypatch.setattr("nugget.pipeline.Halo", _DummyHalo, raising=False)
    monkeypatch.setattr("nugget.video.download.Halo", _DummyHalo, raising=False)


@pytest.fixture
def run_cli(monkeypatch):
    """Run the nugget CLI with a custom argv list."""
    monkeypatch.setattr(nugget_main, "load_dotenv", lambda: None)
    monkeypatch.setattr(nugget_main, "reload_settings", lambda: Config)

    def _run_cli(args: Sequence[str]) -> tuple[int, str]:
        stdout = io.StringIO()
        with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stdout):
            try:
                nugget_main.main(list(args))
            except SystemExit as exc:
                return exc.code, stdout.getvalue()
        return 0, stdout.getvalue()

    return _run_cli


@pytest.fixture
def caplog_info(caplog):
    caplog.set_level(logging.INFO)
    return caplog
