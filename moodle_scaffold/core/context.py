"""
Install context — the single source of truth for "which Moodle installation."

The root is set ONCE at startup by whichever entry point launches
the scaffolder:

    - CLI:    main.py  → context.set_install_root(root)
    - Tests:  conftest → context.set_install_root(tmp_path)

Generators resolve their fixed target paths relative to this root
when they are not given one explicitly.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


_install_root: Optional[Path] = None


def set_install_root(root: Optional[Path]) -> None:
    """Register the installation root for the current process."""
    global _install_root
    _install_root = root


def get_install_root() -> Optional[Path]:
    """Return the current installation root, or None if not yet set."""
    return _install_root


def resolve_install_root() -> Path:
    """Return the registered root, falling back to the working directory."""
    return _install_root if _install_root is not None else Path.cwd()
