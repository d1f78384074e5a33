"""
vcs.py

Responsibility: Isolate all git subprocess calls.

Arguments are always passed as a list to `subprocess.run`; nothing is ever
interpolated into a shell string, so remote URLs or branch names containing
spaces or shell metacharacters reach git unchanged.
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Sequence

from git_setup import log


class GitError(RuntimeError):
    pass


INITIAL_COMMIT_MESSAGE = "Initial commit"


class Git:
    def __init__(self, workdir: Path | None = None, *, executable: str = "git") -> None:
        self.workdir = Path(workdir or Path.cwd())
        self._executable = executable

    def run(self, args: Sequence[str]) -> str:
        """
        Run `git <args>` in the working directory, raising GitError on failure.

        Returns the combined stdout/stderr text.
        """
        cmd = [self._executable, *args]
        log.debug(f"$ {' '.join(cmd)}")
        try:
            proc = subprocess.run(
                cmd,
                cwd=str(self.workdir),
                check=True,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
            )
        except OSError as e:
            if not self.workdir.is_dir():
                raise GitError(f"Working directory not found: {self.workdir}") from e
            if isinstance(e, FileNotFoundError):
                raise GitError(f"git executable not found: {self._executable}") from e
            raise GitError(f"Could not run {' '.join(cmd)}: {e}") from e
        except subprocess.CalledProcessError as e:
            raise GitError(f"Command failed: {' '.join(cmd)}\n\n{(e.stdout or '').strip()}") from e
        return proc.stdout or ""

    def has_repository(self) -> bool:
        return (self.workdir / ".git").exists()

    def init(self) -> None:
        self.run(["init"])

    def remote_add(self, name: str, url: str) -> None:
        self.run(["remote", "add", name, url])

    def switch_create(self, branch: str) -> None:
        self.run(["switch", "-c", branch])

    def add_all(self) -> None:
        self.run(["add", "."])

    def commit(self, message: str = INITIAL_COMMIT_MESSAGE) -> None:
        self.run(["commit", "-m", message])
