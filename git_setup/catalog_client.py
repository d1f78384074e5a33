"""
catalog_client.py

Responsibility: Isolate all HTTP interaction with the template catalogs.

This module must be the only place that:
- Constructs catalog endpoints (GitHub gitignore templates and licenses)
- Sends HTTP requests
- Interprets response payloads / error statuses

Every call is a single unauthenticated GET; there is no caching or retrying.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import requests

DEFAULT_API_BASE = "https://api.github.com"
DEFAULT_GITIGNORE_RAW_BASE = "https://raw.githubusercontent.com/github/gitignore/main"


class CatalogError(RuntimeError):
    pass


@dataclass(frozen=True)
class LicenseInfo:
    key: str
    name: str
    spdx_id: str | None = None


class CatalogClient:
    def __init__(
        self,
        api_base: str = DEFAULT_API_BASE,
        gitignore_raw_base: str = DEFAULT_GITIGNORE_RAW_BASE,
        *,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self._api_base = api_base.rstrip("/")
        self._gitignore_raw_base = gitignore_raw_base.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()

    def _headers(self) -> dict[str, str]:
        return {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": "git-setup",
        }

    def _get(self, url: str) -> requests.Response:
        try:
            r = self._session.get(url, headers=self._headers(), timeout=self._timeout)
        except requests.RequestException as e:
            raise CatalogError(f"GET {url} failed: {e}") from e
        if r.status_code >= 400:
            try:
                payload = r.json()
            except ValueError:
                payload = {"message": r.text}
            message = payload.get("message", payload) if isinstance(payload, dict) else payload
            raise CatalogError(f"Catalog error {r.status_code} GET {url}: {message}")
        return r

    def _get_json(self, url: str) -> Any:
        r = self._get(url)
        try:
            return r.json()
        except ValueError as e:
            raise CatalogError(f"GET {url} returned a non-JSON body") from e

    def list_gitignore_templates(self) -> list[str]:
        """
        Return the template names offered by the catalog, in upstream order.
        """
        data = self._get_json(f"{self._api_base}/gitignore/templates")
        if not isinstance(data, list):
            raise CatalogError("Unexpected API response format for gitignore templates")
        return [str(name) for name in data]

    def fetch_gitignore(self, template: str) -> str:
        """
        Return the raw `.gitignore` text for a template name (e.g. "Python").
        """
        return self._get(f"{self._gitignore_raw_base}/{template}.gitignore").text

    def list_licenses(self) -> list[LicenseInfo]:
        data = self._get_json(f"{self._api_base}/licenses")
        if not isinstance(data, list):
            raise CatalogError("Unexpected API response format for licenses")
        licenses: list[LicenseInfo] = []
        for item in data:
            if not isinstance(item, dict) or not item.get("key"):
                continue
            licenses.append(
                LicenseInfo(
                    key=str(item["key"]),
                    name=str(item.get("name") or item["key"]),
                    spdx_id=item.get("spdx_id"),
                )
            )
        return licenses

    def fetch_license_body(self, key: str) -> str:
        """
        Return the canonical license text (the detail payload's `body`).
        """
        data = self._get_json(f"{self._api_base}/licenses/{key}")
        body = data.get("body") if isinstance(data, dict) else None
        if not isinstance(body, str):
            raise CatalogError(f"License '{key}' has no body text")
        return body
