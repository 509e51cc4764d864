"""
Lifecycle hooks — named points the scaffolder announces to listeners.

Two events exist: ``moodle-pre-scaffold`` before any file is touched
and ``moodle-post-scaffold`` once scaffolding has finished.  The
scaffolder dispatches them unconditionally and does not care what,
if anything, is listening.

Listeners are plain callables receiving keyword arguments.  They run
synchronously, in registration order.  A listener that raises fails
the scaffold run; nothing is swallowed here.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable

from moodle_scaffold.adapters.shell.command import run_command
from moodle_scaffold.core.models.settings import (
    LIFECYCLE_EVENTS,
    POST_MOODLE_SCAFFOLD,
    PRE_MOODLE_SCAFFOLD,
    ScaffoldSettings,
)

logger = logging.getLogger(__name__)

Listener = Callable[..., Any]

__all__ = [
    "HookError",
    "HookRegistry",
    "POST_MOODLE_SCAFFOLD",
    "PRE_MOODLE_SCAFFOLD",
    "command_listener",
]


class HookError(Exception):
    """Raised when a lifecycle script exits unsuccessfully."""


class HookRegistry:
    """Synchronous listener registry for the scaffold lifecycle events."""

    def __init__(self) -> None:
        self._listeners: dict[str, list[Listener]] = {event: [] for event in LIFECYCLE_EVENTS}

    def register(self, event: str, listener: Listener) -> None:
        """Attach ``listener`` to ``event``."""
        if event not in self._listeners:
            raise ValueError(
                f"Unknown lifecycle event {event!r}. Valid: {', '.join(LIFECYCLE_EVENTS)}"
            )
        self._listeners[event].append(listener)

    def listeners(self, event: str) -> list[Listener]:
        """Listeners currently attached to ``event``."""
        return list(self._listeners.get(event, []))

    def dispatch(self, event: str, **payload: Any) -> int:
        """Call every listener of ``event``; return how many ran."""
        listeners = self.listeners(event)
        logger.debug("Dispatching %s to %d listener(s)", event, len(listeners))
        for listener in listeners:
            listener(event=event, **payload)
        return len(listeners)

    @classmethod
    def from_settings(cls, settings: ScaffoldSettings, root: Path) -> "HookRegistry":
        """Registry with one shell listener per configured script."""
        registry = cls()
        for event in LIFECYCLE_EVENTS:
            for command in settings.scripts_for(event):
                registry.register(event, command_listener(command, root))
        return registry


def command_listener(command: str, cwd: Path) -> Listener:
    """Build a listener that runs ``command`` in ``cwd`` through the shell."""

    def _run(event: str, **_payload: Any) -> None:
        logger.info("Running %s script: %s", event, command)
        result = run_command(command, cwd)
        if not result.ok:
            detail = result.stderr or result.output or f"exit code {result.returncode}"
            raise HookError(f"{event} script failed: {command}: {detail}")
        if result.output:
            logger.info("%s", result.output)

    _run.command = command  # type: ignore[attr-defined]
    return _run
