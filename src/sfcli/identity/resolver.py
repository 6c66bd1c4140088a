"""Site identity resolution shell: runs inspection and prompts."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from sfcli.contracts.config import ConfigDocument, InitDefaults, ScaffoldRequest
from sfcli.contracts.identity import GitRemoteInfo, SiteIdentity
from sfcli.contracts.prompt import Prompter
from sfcli.git.identity import get_git_config
from sfcli.git.remote import inspect_git_remote
from sfcli.identity.decisions import PromptDecision, decide_creator, decide_description, decide_site_root

logger = logging.getLogger(__name__)


def _log_warning(message: str) -> None:
    logger.warning(message)


@dataclass
class IdentityResolver:
    """Resolve ``SiteIdentity`` using injected collaborators.

    ``interactive=False`` on :meth:`resolve` accepts every pre-filled value
    without prompting, which is used when the config document will not be
    written. Inference warnings are reported in both modes.
    """

    prompter: Prompter
    defaults: InitDefaults = field(default_factory=InitDefaults)
    inspect_remote: Callable[[Path], GitRemoteInfo] = inspect_git_remote
    read_git_config: Callable[..., str | None] = get_git_config
    warn: Callable[[str], None] = _log_warning

    def resolve(self, request: ScaffoldRequest, *, root_name: str, interactive: bool = True) -> SiteIdentity:
        target = Path(request.path)

        remote = None if request.explicit_site_root is not None else self.inspect_remote(target)
        site_decision = decide_site_root(request, remote, root_name=root_name, defaults=self.defaults)
        logger.debug("Site root pre-fill %s from %s", site_decision.value, site_decision.source)
        site_root = self._settle("Site root URL:", site_decision, interactive=interactive)

        user_name = self.read_git_config("user.name", cwd=target)
        user_email = None if user_name else self.read_git_config("user.email", cwd=target)
        creator_decision = decide_creator(
            user_name=user_name,
            user_email=user_email,
            site_root=site_root,
            defaults=self.defaults,
        )
        logger.debug("Creator pre-fill %s from %s", creator_decision.value, creator_decision.source)
        creator = self._settle("Creator:", creator_decision, interactive=interactive)

        return SiteIdentity(site_root=site_root, creator=creator)

    def resolve_description(self, existing: ConfigDocument | None, *, interactive: bool = True) -> str:
        decision = decide_description(existing, defaults=self.defaults)
        return self._settle("Site description:", decision, interactive=interactive)

    def _settle(self, message: str, decision: PromptDecision, *, interactive: bool) -> str:
        for warning in decision.warnings:
            self.warn(warning)
        if not decision.ask or not interactive:
            return decision.value
        answer = self.prompter.text(message, default=decision.value)
        return answer.strip() or decision.value
