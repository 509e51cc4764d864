"""
Scaffold I/O base — the contract between the scaffolder and the operator.

The scaffolder never talks to a terminal directly.  Every message and
prompt goes through a ScaffoldIO, so the same workflow runs against a
real console, a scripted answer list (tests, unattended tooling), or a
host application's own I/O layer.

To create a new I/O backend:
    1. Subclass ScaffoldIO
    2. Implement is_interactive, write, select, ask,
       ask_and_hide_answer, ask_confirmation
    3. ask_and_validate comes for free (loops over ``ask``)
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable

logger = logging.getLogger(__name__)

# A validator returns (True, accepted_value) or (False, rejection_reason).
Validator = Callable[[str], tuple[bool, str]]

# Message styles, named after the console tags of the host tooling.
STYLES = ("info", "comment", "warning", "error", "question")


class ScaffoldIO(ABC):
    """Abstract interactive I/O collaborator."""

    @abstractmethod
    def is_interactive(self) -> bool:
        """Whether a human is available to answer prompts."""

    @abstractmethod
    def write(self, message: str = "", *, newline: bool = True, style: str | None = None) -> None:
        """Emit a line (or a fragment, with ``newline=False``)."""

    @abstractmethod
    def select(self, question: str, choices: dict[str, str], default: str) -> str:
        """Single choice from ``{value: label}``; returns the chosen value."""

    @abstractmethod
    def ask(self, question: str, default: str | None = None) -> str | None:
        """Free-text answer; an empty answer yields ``default``."""

    @abstractmethod
    def ask_and_hide_answer(self, question: str) -> str | None:
        """Free-text answer with echo suppressed."""

    @abstractmethod
    def ask_confirmation(self, question: str, default: bool = True) -> bool:
        """Yes/no answer; an empty answer yields ``default``."""

    def ask_and_validate(
        self,
        question: str,
        validator: Validator,
        default: str | None = None,
    ) -> str:
        """Ask until ``validator`` accepts; return the accepted value.

        Each rejection is written in the error style and the question
        is asked again.  Rejections never propagate to the caller.
        """
        while True:
            answer = self.ask(question, default)
            accepted, result = validator(answer or "")
            if accepted:
                return result
            logger.debug("Answer rejected for %r: %s", question, result)
            self.write(result, style="error")

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} interactive={self.is_interactive()!r}>"
