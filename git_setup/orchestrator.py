"""
orchestrator.py

Responsibility: Drive the express and manual setup workflows.

Each run walks IDLE -> COLLECTING_ANSWERS -> BOOTSTRAPPING ->
GENERATING_ARTIFACTS (manual) -> COMMITTING (manual, optional) -> DONE,
or ends in ABORTED.

Failure handling has two tiers:
- Bootstrap steps (git init, remote add, branch create) and the prompt layer
  are fatal: the run stops at the first failure and ends ABORTED. Steps that
  already succeeded are not rolled back.
- Artifact writes (.gitignore, LICENSE, README.md) and the initial commit are
  independent: a failure becomes a warning and the next step still runs. The
  run still ends DONE.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from git_setup import artifacts, log
from git_setup.catalog import (
    NO_LICENSE,
    filter_licenses,
    filter_templates,
    find_license,
    gitignore_catalog,
    license_catalog,
)
from git_setup.catalog_client import CatalogClient, CatalogError
from git_setup.config import Settings
from git_setup.prompts import Candidate, PromptAborted, Prompter
from git_setup.renderer import RenderError
from git_setup.session import SetupResult, SetupSession, SetupState
from git_setup.vcs import INITIAL_COMMIT_MESSAGE, Git, GitError


def _required(label: str) -> Callable[[str], bool | str]:
    def validate(value: str) -> bool | str:
        return len(value.strip()) > 0 or f"{label} is required"

    return validate


class SetupOrchestrator:
    def __init__(
        self,
        prompter: Prompter,
        *,
        settings: Settings | None = None,
        git: Git | None = None,
        client: CatalogClient | None = None,
        workdir: Path | None = None,
    ) -> None:
        self.prompter = prompter
        self.settings = settings or Settings()
        self.workdir = Path(workdir or Path.cwd())
        self.git = git or Git(self.workdir)
        self.client = client or CatalogClient(
            self.settings.catalog.api_base,
            self.settings.catalog.gitignore_raw_base,
            timeout=self.settings.catalog.timeout,
        )
        # Fetched lazily, at most once per run.
        self.templates = gitignore_catalog(self.client)
        self.licenses = license_catalog(self.client)

    # Public workflows

    def run_express(self) -> SetupResult:
        result = SetupResult()
        session = SetupSession()
        if not self._collect(result, lambda: self.collect_express(session)):
            return result
        if not self._bootstrap(session, result):
            return result
        result.advance(SetupState.DONE)
        log.success("✨ Express setup completed!")
        self._print_next_steps(session)
        return result

    def run_manual(self) -> SetupResult:
        result = SetupResult()
        session = SetupSession()
        if not self._collect(result, lambda: self.collect_manual(session)):
            return result
        if not self._bootstrap(session, result):
            return result

        result.advance(SetupState.GENERATING_ARTIFACTS)
        self._generate_artifacts(session, result)

        if session.initial_commit:
            result.advance(SetupState.COMMITTING)
            self._commit(result)

        result.advance(SetupState.DONE)
        if result.warnings:
            log.success(f"✨ Git repository setup completed with {len(result.warnings)} warning(s).")
        else:
            log.success("✨ Git repository setup completed!")
        self._print_next_steps(session)
        return result

    # Answer collection

    def collect_express(self, session: SetupSession) -> SetupSession:
        s = self.settings
        session.remote_name = self.prompter.text(
            "What is the remote name?", default=s.remote_name, validate=_required("Remote name")
        )
        session.remote_url = self.prompter.text(
            "What is the remote repository URL?", validate=_required("Remote URL")
        )
        session.branch_name = self.prompter.text(
            "What is your main branch name?", default=s.branch_name, validate=_required("Branch name")
        )
        return session

    def collect_manual(self, session: SetupSession) -> SetupSession:
        s = self.settings
        self.collect_express(session)
        session.add_gitignore = self.prompter.confirm(
            "Would you like to add a .gitignore file?", default=s.add_gitignore
        )
        if session.add_gitignore:
            session.gitignore_template = self._ask_template()
        self._ask_license(session)
        session.project_name = self.prompter.text("What is your project name?", default=self.workdir.resolve().name)
        session.description = self.prompter.text("Brief project description:", default=s.description)
        session.initial_commit = self.prompter.confirm("Create initial commit?", default=s.initial_commit)
        return session

    def template_candidates(self, query: str) -> list[Candidate]:
        return [Candidate(t, t) for t in filter_templates(self.templates.get(), query)]

    def license_candidates(self, query: str) -> list[Candidate]:
        return [Candidate(lic.key, lic.name) for lic in filter_licenses(self.licenses.get(), query)]

    def _ask_template(self) -> str:
        def validate(value: str) -> bool | str:
            if not value.strip():
                return "Choose a template"
            templates = self.templates.get()
            if templates and self._canonical_template(value) is None:
                return f"Unknown template: {value}"
            return True

        answer = self.prompter.search(
            "Choose a .gitignore template (type to search):",
            self.template_candidates,
            validate=validate,
        )
        return self._canonical_template(answer) or answer

    def _canonical_template(self, value: str) -> str | None:
        wanted = value.strip().lower()
        for template in self.templates.get():
            if template.lower() == wanted:
                return template
        return None

    def _ask_license(self, session: SetupSession) -> None:
        def validate(value: str) -> bool | str:
            if not value.strip():
                return "Choose a license"
            if self.licenses.error is None and find_license(self.licenses.get(), value) is None:
                return f"Unknown license: {value}"
            return True

        answer = self.prompter.search(
            "Choose a license for your repository:",
            self.license_candidates,
            default=self.settings.license,
            validate=validate,
        )
        chosen = find_license(self.licenses.get(), answer)
        if chosen is None:
            # Catalog unavailable: keep the typed value as both key and label.
            session.license = answer
            session.license_label = answer
        elif chosen.key == NO_LICENSE:
            session.license = NO_LICENSE
            session.license_label = NO_LICENSE
        else:
            session.license = chosen.key
            session.license_label = chosen.spdx_id if chosen.spdx_id and chosen.spdx_id != "NOASSERTION" else chosen.name

    def _collect(self, result: SetupResult, collect: Callable[[], object]) -> bool:
        result.advance(SetupState.COLLECTING_ANSWERS)
        try:
            collect()
        except PromptAborted as e:
            self._abort(result, f"Setup cancelled: {e}")
            return False
        return True

    # Execution

    def _bootstrap(self, session: SetupSession, result: SetupResult) -> bool:
        result.advance(SetupState.BOOTSTRAPPING)
        try:
            session.require_bootstrap_fields()
            if not self.git.has_repository():
                log.info("Initializing git repository...")
                self.git.init()
            log.info("Adding remote repository...")
            self.git.remote_add(session.remote_name, session.remote_url)
            log.info(f"Setting up {session.branch_name} branch...")
            self.git.switch_create(session.branch_name)
        except (GitError, ValueError) as e:
            self._abort(result, f"Error setting up repository: {e}")
            return False
        return True

    def _generate_artifacts(self, session: SetupSession, result: SetupResult) -> None:
        if session.add_gitignore and session.gitignore_template:
            template = session.gitignore_template
            self._artifact_step(
                result,
                artifacts.GITIGNORE_FILENAME,
                lambda: artifacts.write_gitignore(self.client, template, self.workdir),
            )

        if session.license and session.license != NO_LICENSE:
            key = session.license
            self._artifact_step(
                result,
                artifacts.LICENSE_FILENAME,
                lambda: artifacts.write_license(self.client, key, self.workdir),
            )

        if session.project_name and session.description:
            readme = self.settings.readme
            self._artifact_step(
                result,
                artifacts.README_FILENAME,
                lambda: artifacts.write_readme(
                    session.project_name,
                    session.description,
                    session.license_label or session.license or NO_LICENSE,
                    self.workdir,
                    install_command=readme.install_command,
                    usage_command=readme.usage_command,
                ),
            )

    def _artifact_step(self, result: SetupResult, filename: str, write: Callable[[], Path | None]) -> None:
        try:
            path = write()
        except CatalogError as e:
            self._warn(result, f"Could not create {filename} file (network): {e}")
            return
        except (OSError, RenderError) as e:
            self._warn(result, f"Could not create {filename} file (filesystem): {e}")
            return
        if path is not None:
            result.written.append(filename)
            log.success(f"✨ Created {filename} file")

    def _commit(self, result: SetupResult) -> None:
        log.info("Creating initial commit...")
        try:
            self.git.add_all()
            self.git.commit(INITIAL_COMMIT_MESSAGE)
        except GitError as e:
            self._warn(result, f"Could not create initial commit (git): {e}")

    # Reporting

    @staticmethod
    def _warn(result: SetupResult, message: str) -> None:
        result.warnings.append(message)
        log.warning(f"Warning: {message}")

    @staticmethod
    def _abort(result: SetupResult, message: str) -> None:
        result.abort(message)
        log.error(message)

    @staticmethod
    def _print_next_steps(session: SetupSession) -> None:
        log.info("\nNext steps:", style="yellow")
        log.info("1. Add your files: git add .", style="")
        log.info(f'2. Make your first commit: git commit -m "{INITIAL_COMMIT_MESSAGE}"', style="")
        log.info(f"3. Push to remote: git push -u {session.remote_name} {session.branch_name}", style="")
