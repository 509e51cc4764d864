"""
Generator base — shared plumbing for files scaffolded into a Moodle install.

Each generator owns one fixed target path under the installation root,
renders its full content as a GeneratedFile (pure, no I/O), then
writes it in a single operation.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from moodle_scaffold.adapters.io.base import ScaffoldIO
from moodle_scaffold.core.context import resolve_install_root
from moodle_scaffold.core.models.template import GeneratedFile

logger = logging.getLogger(__name__)


class ScaffoldError(Exception):
    """Raised when a generator is asked to do something it cannot."""


class BaseGenerator(ABC):
    """Abstract base class for scaffolding generators.

    Subclasses set ``relative_path`` and implement ``render()``.
    """

    relative_path: str = ""

    def __init__(self, io: ScaffoldIO, root: Path | None = None):
        self.io = io
        self.root = root if root is not None else resolve_install_root()

    @property
    def path(self) -> Path:
        """Absolute path of the generated file."""
        return self.root / self.relative_path

    def exists(self) -> bool:
        """Whether the target file is already present."""
        return self.path.exists()

    @abstractmethod
    def render(self) -> GeneratedFile:
        """Produce the complete file content without touching disk."""

    @abstractmethod
    def generate(self) -> Path:
        """Render and write the file; return the path written."""

    def _write(self, generated: GeneratedFile) -> Path:
        """Write ``generated`` under the root in one operation.

        Raises ScaffoldError, before touching disk, if the target exists
        and ``generated.overwrite`` is false.
        """
        target = self.root / generated.path
        if target.exists() and not generated.overwrite:
            raise ScaffoldError(f"Refusing to overwrite existing {generated.path}")
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(generated.content, encoding="utf-8")
        logger.info("Wrote %s (%d bytes): %s", target, len(generated.content), generated.reason)
        return target

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} path={str(self.path)!r}>"
