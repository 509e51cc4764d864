"""
Console I/O — ScaffoldIO backed by click prompts on the terminal.
"""

from __future__ import annotations

import sys

import click

from moodle_scaffold.adapters.io.base import ScaffoldIO

_STYLE_ARGS: dict[str, dict] = {
    "info": {"fg": "green"},
    "comment": {"fg": "yellow"},
    "warning": {"fg": "yellow", "bold": True},
    "error": {"fg": "red", "bold": True},
    "question": {"fg": "cyan"},
}


class ConsoleIO(ScaffoldIO):
    """Terminal I/O.

    Questions are passed through as written (they carry their own
    trailing ``": "`` or ``"(y/N)"``), so click's prompt suffix and
    default display are turned off.
    """

    def __init__(self, interactive: bool | None = None):
        self._interactive = sys.stdin.isatty() if interactive is None else interactive

    def is_interactive(self) -> bool:
        return self._interactive

    def write(self, message: str = "", *, newline: bool = True, style: str | None = None) -> None:
        click.secho(message, nl=newline, **_STYLE_ARGS.get(style or "", {}))

    def select(self, question: str, choices: dict[str, str], default: str) -> str:
        self.write(question, style="question")
        for value, label in choices.items():
            marker = " (default)" if value == default else ""
            click.echo(f"  [{value}] {label}{marker}")
        return click.prompt(
            "> ",
            type=click.Choice(list(choices)),
            default=default,
            show_default=False,
            show_choices=False,
            prompt_suffix="",
        )

    def ask(self, question: str, default: str | None = None) -> str | None:
        return click.prompt(
            click.style(question, **_STYLE_ARGS["question"]),
            default=default if default is not None else "",
            show_default=False,
            prompt_suffix="",
        )

    def ask_and_hide_answer(self, question: str) -> str | None:
        return click.prompt(
            click.style(question, **_STYLE_ARGS["question"]),
            default="",
            hide_input=True,
            show_default=False,
            prompt_suffix="",
        )

    def ask_confirmation(self, question: str, default: bool = True) -> bool:
        return click.confirm(
            click.style(question, **_STYLE_ARGS["question"]),
            default=default,
            show_default=False,
            prompt_suffix="",
        )
