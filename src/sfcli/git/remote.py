"""Git remote inspection for site-root inference."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import assert_never

from sfcli.contracts.identity import GitHost, GitRemoteInfo

logger = logging.getLogger(__name__)

GITHUB_HOST = "github.com"

_URL_LINE_RE = re.compile(r"^\s*url\s*=\s*(?P<url>\S.*?)\s*$", re.MULTILINE)
_SSH_RE = re.compile(r"^git@(?P<host>[^:/]+):(?P<owner>[^/]+)/(?P<repo>[^/]+?)(?:\.git)?/?$")
_HTTPS_RE = re.compile(r"^https?://(?P<host>[^/@]+)/(?P<owner>[^/]+)/(?P<repo>[^/]+?)(?:\.git)?/?$")


@dataclass(frozen=True)
class SshRemote:
    host: str
    owner: str
    repo: str


@dataclass(frozen=True)
class HttpsRemote:
    host: str
    owner: str
    repo: str


@dataclass(frozen=True)
class UnrecognizedRemote:
    raw: str


GitRemoteUrl = SshRemote | HttpsRemote | UnrecognizedRemote


def parse_remote_url(url: str) -> GitRemoteUrl:
    """Parse a remote URL into one of the supported shapes.

    A trailing ``.git`` is stripped from the repository name.
    """
    candidate = url.strip()
    match = _SSH_RE.match(candidate)
    if match:
        return SshRemote(host=match.group("host"), owner=match.group("owner"), repo=match.group("repo"))
    match = _HTTPS_RE.match(candidate)
    if match:
        return HttpsRemote(host=match.group("host"), owner=match.group("owner"), repo=match.group("repo"))
    return UnrecognizedRemote(raw=candidate)


def find_remote_url(config_text: str) -> str | None:
    """Return the first ``url = ...`` value in git config text.

    Repositories with several remotes are not disambiguated: the first
    occurrence wins.
    """
    match = _URL_LINE_RE.search(config_text)
    if match is None:
        return None
    return match.group("url")


def remote_info_from_url(url: str) -> GitRemoteInfo:
    remote = parse_remote_url(url)
    if isinstance(remote, SshRemote | HttpsRemote):
        host = GitHost.GITHUB if remote.host.lower() == GITHUB_HOST else GitHost.OTHER
        if host is GitHost.GITHUB:
            return GitRemoteInfo(host=host, owner=remote.owner, repo_name=remote.repo, raw_url=url)
        return GitRemoteInfo(host=host, raw_url=url, detail=f"remote host {remote.host} is not GitHub")
    if isinstance(remote, UnrecognizedRemote):
        return GitRemoteInfo(host=GitHost.OTHER, raw_url=remote.raw, detail="unrecognized git URL format")
    assert_never(remote)


def inspect_git_remote(path: Path) -> GitRemoteInfo:
    """Best-effort extraction of the GitHub remote for *path*.

    Never raises: a missing ``.git`` directory, an unreadable config or a
    config without a remote URL all yield ``GitHost.NONE`` with a ``detail``
    explaining why.
    """
    git_dir = path / ".git"
    if not git_dir.exists():
        return GitRemoteInfo(host=GitHost.NONE, detail="no .git directory found")

    config_path = git_dir / "config"
    try:
        config_text = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Reading %s failed", config_path, exc_info=True)
        return GitRemoteInfo(host=GitHost.NONE, detail=f"failed to read {config_path}: {exc}")

    url = find_remote_url(config_text)
    if url is None:
        return GitRemoteInfo(host=GitHost.NONE, detail=f"no remote URL found in {config_path}")

    info = remote_info_from_url(url)
    logger.debug("Remote %s classified as %s", url, info.host)
    return info
