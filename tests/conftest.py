"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest

from moodle_scaffold.core import context


# Answers for a full generation run, in prompt order:
# driver, user, password, name, host, prefix, wwwroot, dataroot
REFERENCE_ANSWERS = [
    "pgsql",
    "u",
    "p",
    "moodle",
    "localhost",
    "mdl_",
    "https://example.org",
    "moodledata",
]


@pytest.fixture
def install_root(tmp_path: Path) -> Path:
    """A fresh installation root registered in the process context."""
    root = tmp_path / "site"
    root.mkdir()
    context.set_install_root(root)
    yield root
    context.set_install_root(None)


@pytest.fixture
def reference_answers() -> list:
    """Scripted answers producing the reference configuration."""
    return list(REFERENCE_ANSWERS)
