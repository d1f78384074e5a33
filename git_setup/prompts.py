"""
prompts.py

Responsibility: Collect typed answers from the user.

`Prompter` is the seam the orchestrator talks to. `ConsolePrompter` renders
questions with questionary when attached to a terminal and falls back to plain
`input()` otherwise (pipes, CI). A cancelled question raises `PromptAborted`.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, Iterable, Protocol

import questionary
from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document


class PromptAborted(RuntimeError):
    pass


@dataclass(frozen=True)
class Candidate:
    """One searchable option: `value` is returned, `title` is displayed."""

    value: str
    title: str


Validator = Callable[[str], "bool | str"]
CandidateSource = Callable[[str], list[Candidate]]


class Prompter(Protocol):
    def text(self, message: str, *, default: str = "", validate: Validator | None = None) -> str: ...

    def confirm(self, message: str, *, default: bool = True) -> bool: ...

    def search(
        self,
        message: str,
        source: CandidateSource,
        *,
        default: str = "",
        validate: Validator | None = None,
    ) -> str: ...


class CandidateCompleter(Completer):
    """
    Recompute the candidate list from `source` on every keystroke.
    """

    def __init__(self, source: CandidateSource) -> None:
        self._source = source

    def get_completions(self, document: Document, complete_event: CompleteEvent) -> Iterable[Completion]:
        query = document.text_before_cursor
        for candidate in self._source(query):
            meta = candidate.value if candidate.value != candidate.title else None
            yield Completion(
                candidate.value,
                start_position=-len(query),
                display=candidate.title,
                display_meta=meta,
            )


def _use_questionary() -> bool:
    return sys.stdin.isatty() and sys.stdout.isatty()


def _check(validate: Validator | None, value: str) -> str | None:
    """Return an error message when `value` is rejected, else None."""
    if validate is None:
        return None
    result = validate(value)
    if result is True:
        return None
    return result if isinstance(result, str) else "Invalid value"


class ConsolePrompter:
    def text(self, message: str, *, default: str = "", validate: Validator | None = None) -> str:
        if _use_questionary():
            answer = questionary.text(message, default=default, validate=validate).ask()
            return self._answered(answer)
        while True:
            suffix = f" ({default})" if default else ""
            value = self._read(f"{message}{suffix} ").strip() or default
            problem = _check(validate, value)
            if problem is None:
                return value
            print(problem, file=sys.stderr)

    def confirm(self, message: str, *, default: bool = True) -> bool:
        if _use_questionary():
            answer = questionary.confirm(message, default=default).ask()
            if answer is None:
                raise PromptAborted("Prompt cancelled by user")
            return bool(answer)
        suffix = "(Y/n)" if default else "(y/N)"
        response = self._read(f"{message} {suffix} ").strip().lower()
        if response == "":
            return default
        return response in {"y", "yes"}

    def search(
        self,
        message: str,
        source: CandidateSource,
        *,
        default: str = "",
        validate: Validator | None = None,
    ) -> str:
        if _use_questionary():
            choices = [c.value for c in source("")]
            answer = questionary.autocomplete(
                message,
                choices=choices,
                default=default,
                completer=CandidateCompleter(source),
                validate=validate,
            ).ask()
            return self._answered(answer)
        while True:
            suffix = f" ({default})" if default else ""
            value = self._read(f"{message}{suffix} ").strip() or default
            problem = _check(validate, value)
            if problem is None:
                return value
            matches = source(value)
            if matches:
                print("Matches: " + ", ".join(c.value for c in matches[:10]), file=sys.stderr)
            print(problem, file=sys.stderr)

    @staticmethod
    def _answered(answer: object) -> str:
        if answer is None:
            raise PromptAborted("Prompt cancelled by user")
        return str(answer).strip()

    @staticmethod
    def _read(label: str) -> str:
        try:
            return input(label)
        except EOFError as e:
            raise PromptAborted("Input closed before the prompt was answered") from e
