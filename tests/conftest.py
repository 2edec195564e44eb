"""Shared test fixtures for loctext."""

import os
import shutil
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from loctext.config import clear_config_cache
from loctext.logging import clear_operation_context


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test isolation."""
    dir_path = tempfile.mkdtemp()
    yield Path(dir_path)
    shutil.rmtree(dir_path, ignore_errors=True)


@pytest.fixture
def word_list() -> list[str]:
    """Return a small mixed-script word list used by sorting tests."""
    return ["zebra", "öl", "apple", "Äpfel", "cz", "çay", "hrad", "chata", ""]


@pytest.fixture(autouse=True)
def isolated_config(temp_dir: Path):
    """Point loctext at an empty per-test config for all tests.

    This fixture writes a minimal config.toml in a temporary directory,
    sets LOCTEXT_CONFIG_PATH to it and removes any other LOCTEXT_*
    variables, so a developer's own ~/.loctext/config.toml and environment
    never leak into test results.

    The fixture is autouse=True so it applies to all tests automatically.
    """
    config_path = temp_dir / ".loctext" / "config.toml"
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text('[logging]\nlevel = "warning"\n')

    env = {k: v for k, v in os.environ.items() if not k.startswith("LOCTEXT_")}
    env["LOCTEXT_CONFIG_PATH"] = str(config_path)

    clear_config_cache()
    with patch.dict(os.environ, env, clear=True):
        yield config_path
    clear_config_cache()
    clear_operation_context()
