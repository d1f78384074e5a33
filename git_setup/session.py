"""
session.py

Responsibility: The answers collected for one run and the run's outcome.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class SetupState(str, Enum):
    IDLE = "idle"
    COLLECTING_ANSWERS = "collecting_answers"
    BOOTSTRAPPING = "bootstrapping"
    GENERATING_ARTIFACTS = "generating_artifacts"
    COMMITTING = "committing"
    DONE = "done"
    ABORTED = "aborted"


TERMINAL_STATES = frozenset({SetupState.DONE, SetupState.ABORTED})


@dataclass
class SetupSession:
    """
    Answers for a single run, filled in as prompts resolve.

    Only `remote_name`, `remote_url` and `branch_name` are used by an express
    setup; the rest stay at their defaults.
    """

    remote_name: str = ""
    remote_url: str = ""
    branch_name: str = ""
    add_gitignore: bool = False
    gitignore_template: str | None = None
    license: str | None = None
    license_label: str | None = None
    project_name: str = ""
    description: str = ""
    initial_commit: bool = False

    def require_bootstrap_fields(self) -> None:
        if not self.remote_url.strip():
            raise ValueError("Remote URL is required")
        if not self.branch_name.strip():
            raise ValueError("Branch name is required")


@dataclass
class SetupResult:
    """Outcome of a run: DONE (possibly with warnings) or ABORTED."""

    state: SetupState = SetupState.IDLE
    history: list[SetupState] = field(default_factory=lambda: [SetupState.IDLE])
    warnings: list[str] = field(default_factory=list)
    error: str | None = None
    written: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.state is SetupState.DONE

    @property
    def completed_with_warnings(self) -> bool:
        return self.ok and bool(self.warnings)

    def advance(self, state: SetupState) -> None:
        if self.state in TERMINAL_STATES:
            raise RuntimeError(f"Run already finished in state {self.state.value}")
        self.state = state
        self.history.append(state)

    def abort(self, message: str) -> None:
        self.error = message
        self.advance(SetupState.ABORTED)
