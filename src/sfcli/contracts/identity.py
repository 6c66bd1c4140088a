"""Site identity contracts."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class GitHost(StrEnum):
    """Classification of the first remote found in ``.git/config``."""

    GITHUB = "github"
    OTHER = "other"
    NONE = "none"


class ValueSource(StrEnum):
    """Precedence tier that produced a resolved or pre-filled value."""

    EXPLICIT = "explicit"
    INFERRED = "inferred"
    EXISTING = "existing"
    DEFAULT = "default"


class GitRemoteInfo(BaseModel):
    host: GitHost
    owner: str | None = None
    repo_name: str | None = None
    raw_url: str | None = None
    detail: str | None = None

    model_config = ConfigDict(frozen=True)


class SiteIdentity(BaseModel):
    site_root: str = Field(min_length=1)
    creator: str = Field(min_length=1)

    model_config = ConfigDict(frozen=True)
