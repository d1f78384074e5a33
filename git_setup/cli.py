"""
cli.py

Responsibility: CLI entrypoint for git-setup.

Flags:
- `-e/--express` (default): remote + branch only
- `-m/--manual`: remote + branch, .gitignore, LICENSE, README.md, initial commit
- `-d/--documentation`, `-h/--help`: print usage and exit 0

The workflows themselves live in `orchestrator.py`; this module only parses
flags, loads settings and maps the run outcome to an exit code.
"""

from __future__ import annotations

import argparse

from git_setup import __version__, log
from git_setup.config import Settings, SettingsError, load_settings
from git_setup.orchestrator import SetupOrchestrator
from git_setup.prompts import ConsolePrompter, Prompter

USAGE_TEXT = """
[bold]Git Setup CLI[/bold] - Quick repository setup tool

[yellow]Usage:[/yellow]
  git-setup -e    Express setup (basic configuration)
  git-setup -m    Manual setup (full configuration)
  git-setup -d    Show this documentation

[yellow]Options:[/yellow]
  -c, --config PATH   Read prompt defaults and catalog settings from a YAML file
  -v, --verbose       Show the git commands being run
  -V, --version       Show the version and exit

[yellow]Express Setup Example:[/yellow]
  git-setup -e
  > What is the remote name? (origin)
  > What is the remote repository URL?
  > What is your main branch name? (main)

[yellow]Manual Setup adds:[/yellow]
  .gitignore template, LICENSE, README.md and an optional initial commit

[yellow]Requirements:[/yellow]
  - Git installed on your system
  - Valid repository URL
"""


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="git-setup",
        description="Git Setup CLI - quick repository setup tool",
        add_help=False,
    )
    mode = p.add_mutually_exclusive_group()
    mode.add_argument("-e", "--express", dest="mode", action="store_const", const="express", help="Express setup")
    mode.add_argument("-m", "--manual", dest="mode", action="store_const", const="manual", help="Manual setup")
    p.add_argument("-d", "--documentation", action="store_true", help="Show documentation")
    p.add_argument("-h", "--help", dest="documentation", action="store_true", help="Show documentation")
    p.add_argument("-c", "--config", default=None, help="YAML settings file")
    p.add_argument("-v", "--verbose", action="store_true", help="Show debug output")
    p.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    p.set_defaults(mode="express")
    return p


def run(args: argparse.Namespace, settings: Settings, prompter: Prompter) -> int:
    orchestrator = SetupOrchestrator(prompter, settings=settings)
    if args.mode == "manual":
        result = orchestrator.run_manual()
    else:
        result = orchestrator.run_express()
    return 0 if result.ok else 1


def main(argv: list[str] | None = None, *, prompter: Prompter | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.documentation:
        log.markup(USAGE_TEXT)
        return 0

    log.set_level("debug" if args.verbose else "info")
    try:
        settings = load_settings(args.config)
        return run(args, settings, prompter or ConsolePrompter())
    except SettingsError as e:
        log.error(f"Error setting up repository: {e}")
        return 1
    except KeyboardInterrupt:
        log.error("Setup interrupted")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
