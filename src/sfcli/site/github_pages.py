"""GitHub Pages site-root derivation."""

from __future__ import annotations

import re

_PAGES_URL_RE = re.compile(r"^https://(?P<owner>[^./]+)\.github\.io(?:/.*)?$")


def derive_site_root(owner: str, repo_name: str) -> str:
    """Map a GitHub ``owner/repo`` pair to its Pages URL.

    A personal site repository named ``<owner>.github.io`` is served from the
    bare domain; every other repository is served from a sub-path.
    """
    domain = f"https://{owner}.github.io"
    if repo_name == f"{owner}.github.io":
        return domain
    return f"{domain}/{repo_name}"


def owner_from_site_root(site_root: str) -> str | None:
    """Return ``<owner>`` from a ``https://<owner>.github.io...`` URL."""
    match = _PAGES_URL_RE.match(site_root.strip())
    if match is None:
        return None
    return match.group("owner")
