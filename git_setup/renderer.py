"""
renderer.py

Responsibility: Render text templates and write generated files.

Rules:
- Templates are rendered with Jinja2 using StrictUndefined, so a missing
  context key is an error rather than an empty string.
- Output files are UTF-8 with "\\n" newlines and are overwritten if present.

This module intentionally does NOT know about git, the catalogs, or prompts.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, StrictUndefined, TemplateError


class RenderError(RuntimeError):
    pass


_env = Environment(
    autoescape=False,
    undefined=StrictUndefined,
    keep_trailing_newline=True,
)


def render_text(template_text: str, context: dict[str, Any]) -> str:
    try:
        return _env.from_string(template_text).render(**context)
    except TemplateError as e:
        raise RenderError(f"Failed rendering template: {e}") from e


def write_text_file(path: str | Path, content: str) -> Path:
    """
    Write `content` to `path` (UTF-8, overwrite-if-exists) and return the path.

    OSError is left to the caller; it is the filesystem failure kind.
    """
    out = Path(path)
    out.write_text(content, encoding="utf-8", newline="\n")
    return out
