"""Shared test fixtures and configuration."""

import logging
import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from gitwok.logs import ROOT_LOGGER_NAME


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def reset_gitwok_logger():
    """Drop handlers attached by configure_logging between tests."""
    yield
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.addHandler(logging.NullHandler())
    root.setLevel(logging.NOTSET)


@pytest.fixture(autouse=True)
def clean_prompt_env(monkeypatch):
    """Make sure no GITWOK_COMMIT_PROMPT_* variable leaks into tests."""
    for name in ("SCOPE", "BREAKING", "BODY", "FOOTERS"):
        monkeypatch.delenv(f"GITWOK_COMMIT_PROMPT_{name}", raising=False)


@pytest.fixture
def sample_footer_block():
    """Raw footer block as typed into the footers prompt."""
    return (
        "Acked-By: RT fix readme\n"
        "with second line\n"
        "\n"
        "Reviewed-By: RT\n"
        "fix #1\n"
        "  BREAKING CHANGE: asdf"
    )


@pytest.fixture
def sample_status_output():
    """Sample `git status --short` output."""
    return (
        "M  staged.py\n"
        " M modified.py\n"
        " D deleted.py\n"
        "?? new_file.py\n"
        " R old.py -> renamed.py\n"
        "A  staged_new.py\n"
    )


@pytest.fixture
def mock_git_run(mocker):
    """Mock subprocess.run for git commands."""
    mock_result = MagicMock()
    mock_result.stdout = ""
    mock_result.returncode = 0
    return mocker.patch("subprocess.run", return_value=mock_result)
