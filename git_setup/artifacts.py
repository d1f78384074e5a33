"""
artifacts.py

Responsibility: Produce the starter files written by a manual setup.

Each generator is independent: it takes already-collected answers, builds one
file's content and writes it into `directory`. Failures propagate to the caller
with their own type so the orchestrator can tell them apart:
- CatalogError: the catalog could not be reached or returned an error
- OSError / RenderError: the file could not be rendered or written
"""

from __future__ import annotations

import re
from pathlib import Path

from git_setup.catalog import NO_LICENSE
from git_setup.catalog_client import CatalogClient
from git_setup.renderer import render_text, write_text_file

GITIGNORE_FILENAME = ".gitignore"
LICENSE_FILENAME = "LICENSE"
README_FILENAME = "README.md"

DEFAULT_INSTALL_COMMAND = "pip install ."

README_TEMPLATE = """\
# {{ project_name }}

{{ description }}

## Installation

```bash
{{ install_command }}
```

## Usage

```bash
{{ usage_command }}
```

## License

This project is licensed under the {{ license }} License - see the [LICENSE](LICENSE) file for details.
"""


def write_gitignore(client: CatalogClient, template: str, directory: Path) -> Path:
    """
    Fetch the named template and write it verbatim to `.gitignore`.
    """
    content = client.fetch_gitignore(template)
    return write_text_file(directory / GITIGNORE_FILENAME, content)


def write_license(client: CatalogClient, license_key: str, directory: Path) -> Path | None:
    """
    Fetch the license text and write it verbatim to `LICENSE`.

    Returns None without touching the network when the key is the "None" sentinel.
    """
    if license_key == NO_LICENSE:
        return None
    body = client.fetch_license_body(license_key.lower())
    return write_text_file(directory / LICENSE_FILENAME, body)


def default_usage_command(project_name: str) -> str:
    slug = re.sub(r"[^0-9a-zA-Z]+", "_", project_name).strip("_").lower() or "app"
    return f"python -m {slug}"


def render_readme(
    project_name: str,
    description: str,
    license_name: str,
    *,
    install_command: str | None = None,
    usage_command: str | None = None,
) -> str:
    return render_text(
        README_TEMPLATE,
        {
            "project_name": project_name,
            "description": description,
            "license": license_name,
            "install_command": install_command or DEFAULT_INSTALL_COMMAND,
            "usage_command": usage_command or default_usage_command(project_name),
        },
    )


def write_readme(
    project_name: str,
    description: str,
    license_name: str,
    directory: Path,
    *,
    install_command: str | None = None,
    usage_command: str | None = None,
) -> Path:
    content = render_readme(
        project_name,
        description,
        license_name,
        install_command=install_command,
        usage_command=usage_command,
    )
    return write_text_file(directory / README_FILENAME, content)
