"""
catalog.py

Responsibility: Per-run candidate lists for the searchable prompts.

A `LazyCatalog` wraps one fetch function and calls it at most once, on first
access. A failed fetch degrades to the fallback list (usually empty) so the
interactive flow keeps going; the failure is reported once as a warning.

Filtering is a plain function over an explicit candidate list: the lists are
values owned by the run, never module-level state.
"""

from __future__ import annotations

from typing import Callable, Generic, Iterable, TypeVar

from git_setup import log
from git_setup.catalog_client import CatalogClient, CatalogError, LicenseInfo

T = TypeVar("T")

NO_LICENSE = "None"
NO_LICENSE_ENTRY = LicenseInfo(key=NO_LICENSE, name="None (no license file)")


class LazyCatalog(Generic[T]):
    def __init__(
        self,
        label: str,
        fetch: Callable[[], list[T]],
        *,
        fallback: Iterable[T] = (),
    ) -> None:
        self.label = label
        self._fetch = fetch
        self._fallback = list(fallback)
        self._items: list[T] | None = None
        self.error: str | None = None

    @property
    def fetched(self) -> bool:
        return self._items is not None

    def get(self) -> list[T]:
        if self._items is None:
            try:
                self._items = list(self._fetch())
                log.debug(f"Fetched {len(self._items)} {self.label}")
            except CatalogError as e:
                self.error = str(e)
                self._items = list(self._fallback)
                log.warning(f"Error fetching {self.label}: {e}")
        return self._items


def gitignore_catalog(client: CatalogClient) -> LazyCatalog[str]:
    return LazyCatalog("gitignore templates", client.list_gitignore_templates)


def license_catalog(client: CatalogClient) -> LazyCatalog[LicenseInfo]:
    """
    License candidates in upstream order, followed by the "None" sentinel.

    The sentinel is also the fallback, so it stays selectable when the catalog
    is unreachable.
    """

    def fetch() -> list[LicenseInfo]:
        return [*client.list_licenses(), NO_LICENSE_ENTRY]

    return LazyCatalog("licenses", fetch, fallback=[NO_LICENSE_ENTRY])


def filter_templates(templates: list[str], query: str | None) -> list[str]:
    """
    Case-insensitive substring filter over template names, upstream order kept.
    """
    if not query:
        return list(templates)
    q = query.lower()
    return [t for t in templates if q in t.lower()]


def filter_licenses(licenses: list[LicenseInfo], query: str | None) -> list[LicenseInfo]:
    """
    Case-insensitive substring filter over license name or key, upstream order kept.
    """
    if not query:
        return list(licenses)
    q = query.lower()
    return [lic for lic in licenses if q in lic.name.lower() or q in lic.key.lower()]


def find_license(licenses: list[LicenseInfo], choice: str) -> LicenseInfo | None:
    """
    Resolve a typed choice to a catalog entry by key, SPDX id or name.
    """
    wanted = choice.strip().lower()
    for lic in licenses:
        if wanted in (lic.key.lower(), (lic.spdx_id or "").lower(), lic.name.lower()):
            return lic
    return None
