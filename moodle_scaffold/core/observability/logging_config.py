"""
Logging configuration for the scaffolder CLI.

Called once at startup by main.py.  Operator-facing prompts and
messages go through the ScaffoldIO collaborator; logging carries
diagnostics only (hook dispatch, file writes, overwrite intent) and
is sent to stderr so it never interleaves with the prompts on stdout.

Level precedence:
    CLI flag  >  MOODLE_SCAFFOLD_LOG_LEVEL env var  >  WARNING
"""

from __future__ import annotations

import logging
import sys

# Below INFO: where each record came from matters more than brevity.
_FMT_DETAILED = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d %(message)s"
_FMT_SHORT = "%(levelname)s: %(message)s"


def setup_logging(level: str = "WARNING", log_file: str | None = None) -> None:
    """Send scaffolder diagnostics to stderr, and to ``log_file`` if given.

    The log file records at the same level as the console, always in the
    detailed format, so a deployment script can keep a trace of the run.
    """
    numeric_level = _parse_level(level)
    fmt = _FMT_DETAILED if numeric_level <= logging.INFO else _FMT_SHORT

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter(fmt, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)

    if log_file:
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(logging.Formatter(_FMT_DETAILED, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(fh)

    root.setLevel(numeric_level)


def _parse_level(level: str | None) -> int:
    """Level name → numeric constant; unknown or empty names mean WARNING."""
    numeric = getattr(logging, (level or "").upper(), None)
    return numeric if isinstance(numeric, int) else logging.WARNING
