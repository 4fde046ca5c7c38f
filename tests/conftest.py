"""Shared fixtures for the PatternGuide test suite."""

import os
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]

# Allow running the suite from a source checkout without installing
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture
def clean_cli_env(monkeypatch, tmp_path):
    """Run CLI commands without picking up local config files or PATTERNGUIDE_* variables."""
    from patternguide.config import ConfigurationManager

    for name in list(os.environ):
        if name.startswith("PATTERNGUIDE_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(ConfigurationManager, "DEFAULT_CONFIG_PATHS", ["patternguide.json"])
    return tmp_path
