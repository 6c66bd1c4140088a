"""Pure precedence rules for site identity.

Each ``decide_*`` function returns what to ask and with which pre-filled
value, without touching the terminal, the filesystem or git.
"""

from __future__ import annotations

from dataclasses import dataclass

from sfcli.contracts.config import ConfigDocument, InitDefaults, ScaffoldRequest
from sfcli.contracts.identity import GitHost, GitRemoteInfo, ValueSource
from sfcli.site.github_pages import derive_site_root, owner_from_site_root


@dataclass(frozen=True)
class PromptDecision:
    value: str
    source: ValueSource
    ask: bool = True
    warnings: tuple[str, ...] = ()


def decide_site_root(
    request: ScaffoldRequest,
    remote: GitRemoteInfo | None,
    *,
    root_name: str,
    defaults: InitDefaults,
) -> PromptDecision:
    """Apply explicit > inferred > default precedence for the site root.

    An explicit value is final and never prompted. Inferred and default
    values are pre-filled into the prompt for confirmation.
    """
    if request.explicit_site_root is not None:
        return PromptDecision(value=request.explicit_site_root, source=ValueSource.EXPLICIT, ask=False)

    if remote is not None and remote.host is GitHost.GITHUB and remote.owner and remote.repo_name:
        return PromptDecision(value=derive_site_root(remote.owner, remote.repo_name), source=ValueSource.INFERRED)

    warnings: tuple[str, ...] = ()
    if remote is not None and remote.host is GitHost.OTHER:
        reason = remote.detail or "unrecognized git URL format"
        warnings = (f"Cannot infer site root from {remote.raw_url}: {reason}.",)
    elif remote is not None:
        reason = remote.detail or "no GitHub remote found"
        warnings = (f"Site root not provided and could not be inferred: {reason}.",)

    return PromptDecision(
        value=defaults.default_site_root(root_name),
        source=ValueSource.DEFAULT,
        warnings=warnings,
    )


def decide_creator(
    *,
    user_name: str | None,
    user_email: str | None,
    site_root: str,
    defaults: InitDefaults,
) -> PromptDecision:
    """Apply git ``user.name`` > ``user.email`` > Pages owner > default."""
    if user_name:
        return PromptDecision(value=user_name, source=ValueSource.INFERRED)
    if user_email:
        return PromptDecision(value=user_email, source=ValueSource.INFERRED)
    owner = owner_from_site_root(site_root)
    if owner:
        return PromptDecision(value=owner, source=ValueSource.INFERRED)
    return PromptDecision(
        value=defaults.creator,
        source=ValueSource.DEFAULT,
        warnings=("Could not determine creator from git config or site root.",),
    )


def decide_description(existing: ConfigDocument | None, *, defaults: InitDefaults) -> PromptDecision:
    if existing is not None:
        return PromptDecision(value=existing.site_description, source=ValueSource.EXISTING)
    return PromptDecision(value=defaults.description, source=ValueSource.DEFAULT)
