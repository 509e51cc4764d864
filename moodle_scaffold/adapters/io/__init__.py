"""Interactive I/O backends for the scaffolder."""

from moodle_scaffold.adapters.io.base import ScaffoldIO, Validator
from moodle_scaffold.adapters.io.console import ConsoleIO
from moodle_scaffold.adapters.io.scripted import ScriptedIO, ScriptExhaustedError

__all__ = ["ConsoleIO", "ScaffoldIO", "ScriptedIO", "ScriptExhaustedError", "Validator"]
