from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from git_setup import log
from git_setup.catalog_client import CatalogError, LicenseInfo
from git_setup.vcs import GitError

LICENSES = [
    LicenseInfo(key="agpl-3.0", name="GNU Affero General Public License v3.0", spdx_id="AGPL-3.0"),
    LicenseInfo(key="apache-2.0", name="Apache License 2.0", spdx_id="Apache-2.0"),
    LicenseInfo(key="mit", name="MIT License", spdx_id="MIT"),
    LicenseInfo(key="unlicense", name="The Unlicense", spdx_id="Unlicense"),
]
TEMPLATES = ["Go", "Node", "Python", "Rust"]


class ScriptedPrompter:
    """Answers prompts from a fixed script; `None` means "accept the default"."""

    def __init__(self, answers: list[Any]) -> None:
        self.answers = list(answers)
        self.asked: list[str] = []
        self.searched: dict[str, list[str]] = {}

    def _next(self, message: str) -> Any:
        self.asked.append(message)
        if not self.answers:
            raise AssertionError(f"prompted unexpectedly: {message}")
        return self.answers.pop(0)

    @staticmethod
    def _validated(value: str, validate: Any) -> str:
        if validate is not None:
            outcome = validate(value)
            if outcome is not True:
                raise AssertionError(f"answer {value!r} rejected: {outcome}")
        return value

    def text(self, message: str, *, default: str = "", validate: Any = None) -> str:
        answer = self._next(message)
        return self._validated(default if answer is None else answer, validate)

    def confirm(self, message: str, *, default: bool = True) -> bool:
        answer = self._next(message)
        return default if answer is None else bool(answer)

    def search(self, message: str, source: Any, *, default: str = "", validate: Any = None) -> str:
        answer = self._next(message)
        value = default if answer is None else answer
        self.searched[message] = [c.value for c in source(value)]
        return self._validated(value, validate)


class FakeGit:
    def __init__(self, *, has_repository: bool = False, fail_on: set[str] | None = None) -> None:
        self._has_repository = has_repository
        self.fail_on = fail_on or set()
        self.calls: list[tuple[str, ...]] = []

    def _record(self, name: str, *args: str) -> None:
        self.calls.append((name, *args))
        if name in self.fail_on:
            raise GitError(f"Command failed: git {name}")

    def has_repository(self) -> bool:
        return self._has_repository

    def init(self) -> None:
        self._record("init")

    def remote_add(self, name: str, url: str) -> None:
        self._record("remote_add", name, url)

    def switch_create(self, branch: str) -> None:
        self._record("switch_create", branch)

    def add_all(self) -> None:
        self._record("add_all")

    def commit(self, message: str = "Initial commit") -> None:
        self._record("commit", message)


class FakeCatalogClient:
    def __init__(
        self,
        *,
        templates: list[str] | None = None,
        licenses: list[LicenseInfo] | None = None,
        fail: set[str] | None = None,
    ) -> None:
        self.templates = TEMPLATES if templates is None else templates
        self.licenses = LICENSES if licenses is None else licenses
        self.fail = fail or set()
        self.calls: list[tuple[str, ...]] = []

    def _record(self, name: str, *args: str) -> None:
        self.calls.append((name, *args))
        if name in self.fail:
            raise CatalogError(f"Catalog error 404 {name}")

    def list_gitignore_templates(self) -> list[str]:
        self._record("list_gitignore_templates")
        return list(self.templates)

    def fetch_gitignore(self, template: str) -> str:
        self._record("fetch_gitignore", template)
        return f"# {template}\n__pycache__/\n"

    def list_licenses(self) -> list[LicenseInfo]:
        self._record("list_licenses")
        return list(self.licenses)

    def fetch_license_body(self, key: str) -> str:
        self._record("fetch_license_body", key)
        return f"{key.upper()} License text\n"


@pytest.fixture(autouse=True)
def _reset_log_level() -> None:
    log.set_level("info")


@pytest.fixture
def fake_git() -> FakeGit:
    return FakeGit()


@pytest.fixture
def fake_client() -> FakeCatalogClient:
    return FakeCatalogClient()


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    path = tmp_path / "my-project"
    path.mkdir()
    return path
