"""
git_setup package

This package implements git-setup, an interactive CLI that bootstraps a local
repository: remote, main branch and (optionally) starter files.

Key responsibilities are split across modules:
- `orchestrator.py`: express/manual workflows and the two-tier failure policy
- `vcs.py`: git subprocess calls (argument lists, no shell)
- `catalog_client.py`: GitHub gitignore/license catalog endpoints
- `catalog.py`: lazily fetched candidate lists and search filtering
- `artifacts.py`: `.gitignore`, `LICENSE` and `README.md` generators
- `prompts.py`: interactive prompt layer
- `cli.py`: CLI entrypoint (flag parsing, usage text, exit codes)
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
