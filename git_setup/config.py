"""
config.py

Responsibility: Load optional settings from a YAML file into a typed model.

Nothing is persisted and no file is read implicitly: without `--config` the
built-in defaults below apply. A settings file may override prompt defaults,
README commands and catalog endpoints, e.g.:

    remote_name: upstream
    branch_name: trunk
    license: Apache-2.0
    readme:
      install_command: poetry install
    catalog:
      timeout: 10
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from git_setup.catalog_client import DEFAULT_API_BASE, DEFAULT_GITIGNORE_RAW_BASE


class SettingsError(ValueError):
    pass


@dataclass(frozen=True)
class CatalogSettings:
    """Where the gitignore/license catalogs live and how long to wait for them."""

    api_base: str = DEFAULT_API_BASE
    gitignore_raw_base: str = DEFAULT_GITIGNORE_RAW_BASE
    timeout: float | None = None


@dataclass(frozen=True)
class ReadmeSettings:
    install_command: str | None = None
    usage_command: str | None = None


@dataclass(frozen=True)
class Settings:
    """Prompt defaults and collaborator settings for one run."""

    remote_name: str = "origin"
    branch_name: str = "main"
    add_gitignore: bool = True
    license: str = "MIT"
    description: str = "A new awesome project"
    initial_commit: bool = True
    readme: ReadmeSettings = field(default_factory=ReadmeSettings)
    catalog: CatalogSettings = field(default_factory=CatalogSettings)


def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
    raw = data.get(key)
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise SettingsError(f"`{key}` must be an object/mapping when provided.")
    return raw


def _string(data: dict[str, Any], key: str, default: str) -> str:
    value = data.get(key)
    if value is None:
        return default
    value = str(value).strip()
    if not value:
        raise SettingsError(f"`{key}` must not be empty.")
    return value


def _optional_string(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    return str(value).strip() or None


def _bool(data: dict[str, Any], key: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise SettingsError(f"`{key}` must be true or false.")
    return value


def _timeout(data: dict[str, Any]) -> float | None:
    value = data.get("timeout")
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        raise SettingsError("`catalog.timeout` must be a positive number of seconds.")
    return float(value)


def parse_settings(data: dict[str, Any]) -> Settings:
    defaults = Settings()
    readme = _section(data, "readme")
    catalog = _section(data, "catalog")
    return Settings(
        remote_name=_string(data, "remote_name", defaults.remote_name),
        branch_name=_string(data, "branch_name", defaults.branch_name),
        add_gitignore=_bool(data, "add_gitignore", defaults.add_gitignore),
        license=_string(data, "license", defaults.license),
        description=_string(data, "description", defaults.description),
        initial_commit=_bool(data, "initial_commit", defaults.initial_commit),
        readme=ReadmeSettings(
            install_command=_optional_string(readme, "install_command"),
            usage_command=_optional_string(readme, "usage_command"),
        ),
        catalog=CatalogSettings(
            api_base=_string(catalog, "api_base", defaults.catalog.api_base),
            gitignore_raw_base=_string(catalog, "gitignore_raw_base", defaults.catalog.gitignore_raw_base),
            timeout=_timeout(catalog),
        ),
    )


def load_settings(path: str | Path | None = None) -> Settings:
    """
    Return `Settings` from a YAML file, or the defaults when `path` is None.
    """
    if path is None:
        return Settings()
    p = Path(path)
    if not p.exists():
        raise SettingsError(f"Settings file does not exist: {p}")
    try:
        data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise SettingsError(f"Settings file is not valid YAML: {p}") from e
    if not isinstance(data, dict):
        raise SettingsError("Settings file must be a mapping/object at the top level.")
    return parse_settings(data)
