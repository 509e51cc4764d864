"""
Scripted I/O — ScaffoldIO that replays a fixed list of answers.

Used by the test-suite and by unattended tooling that drives the
scaffolder with pre-recorded answers.  Every message and question is
recorded so callers can assert on what the operator would have seen.
"""

from __future__ import annotations

from collections import deque
from typing import Iterable

from moodle_scaffold.adapters.io.base import STYLES, ScaffoldIO


class ScriptExhaustedError(RuntimeError):
    """Raised when a prompt is reached after the last scripted answer."""


class ScriptedIO(ScaffoldIO):
    """Replays answers in order, one per prompt.

    An answer of ``None`` or ``""`` means "just press enter" and yields
    the prompt's default.  Confirmation answers may be booleans or
    ``y``/``n`` strings.
    """

    def __init__(self, answers: Iterable[object] = (), interactive: bool = True):
        self._answers: deque[object] = deque(answers)
        self._interactive = interactive
        self.messages: list[tuple[str | None, str]] = []
        self.questions: list[str] = []

    def is_interactive(self) -> bool:
        return self._interactive

    @property
    def remaining(self) -> int:
        """Number of answers not yet consumed."""
        return len(self._answers)

    @property
    def output(self) -> str:
        """Everything written, as it would appear on a console."""
        return "".join(text for _, text in self.messages)

    def messages_with_style(self, style: str) -> list[str]:
        """Messages written with ``style`` (newline stripped)."""
        return [text.rstrip("\n") for s, text in self.messages if s == style]

    def write(self, message: str = "", *, newline: bool = True, style: str | None = None) -> None:
        if style is not None and style not in STYLES:
            raise ValueError(f"Unknown style {style!r}. Valid: {', '.join(STYLES)}")
        self.messages.append((style, message + ("\n" if newline else "")))

    def select(self, question: str, choices: dict[str, str], default: str) -> str:
        while True:
            answer = self._next(question)
            if answer in (None, ""):
                return default
            if answer in choices:
                return str(answer)
            self.write(f'Value "{answer}" is invalid', style="error")

    def ask(self, question: str, default: str | None = None) -> str | None:
        answer = self._next(question)
        if answer in (None, ""):
            return default
        return str(answer)

    def ask_and_hide_answer(self, question: str) -> str | None:
        answer = self._next(question)
        return None if answer is None else str(answer)

    def ask_confirmation(self, question: str, default: bool = True) -> bool:
        answer = self._next(question)
        if isinstance(answer, bool):
            return answer
        if answer in (None, ""):
            return default
        return str(answer).strip().lower().startswith("y")

    def _next(self, question: str) -> object:
        self.questions.append(question)
        if not self._answers:
            raise ScriptExhaustedError(f"No scripted answer left for: {question!r}")
        return self._answers.popleft()
