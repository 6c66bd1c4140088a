"""Sequential init pipeline.

Steps run strictly in this order, each a named method so tests can
substitute collaborators:

1. ``load_existing``     read an existing ``config.jsonld`` if present
2. ``plan_folders``      validate the root name and settle folder names
3. ``confirm_overwrite`` decide whether the document will be written
4. ``resolve_identity``  settle site root, creator and description
5. ``build_document``    compose the JSON-LD document
6. ``write_scaffold``    create directories and write the document
7. ``report``            print the outcome
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from sfcli.contracts.config import ConfigDocument, FolderPlan, InitDefaults, ScaffoldRequest
from sfcli.contracts.exceptions import ConfigError
from sfcli.contracts.identity import GitRemoteInfo, SiteIdentity
from sfcli.contracts.prompt import Prompter
from sfcli.contracts.report import InitReporter
from sfcli.git.identity import get_git_config
from sfcli.git.remote import inspect_git_remote
from sfcli.identity.resolver import IdentityResolver
from sfcli.scaffold.document import build_config_document, load_config_document
from sfcli.scaffold.planner import ScaffoldPlanner, root_name_from_path
from sfcli.scaffold.writer import WriteOutcome, confirm_overwrite, write_scaffold

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InitResult:
    root: Path
    folder_plan: FolderPlan
    identity: SiteIdentity
    document: ConfigDocument | None
    outcome: WriteOutcome


@dataclass
class InitPipeline:
    prompter: Prompter
    reporter: InitReporter
    defaults: InitDefaults = field(default_factory=InitDefaults)
    inspect_remote: Callable[[Path], GitRemoteInfo] = inspect_git_remote
    read_git_config: Callable[..., str | None] = get_git_config

    def run(self, request: ScaffoldRequest) -> InitResult:
        # Fail on an empty root name before reading anything under the path.
        root_name_from_path(request.path)
        root = Path(request.path).expanduser()
        config_path = root / self.defaults.config_filename

        existing = self.load_existing(config_path)
        folder_plan = self.plan_folders(request, existing=existing, config_exists=config_path.exists())
        write_document = self.confirm_overwrite(config_path)
        if write_document or existing is None:
            identity, description = self.resolve_identity(
                request, root_name=folder_plan.root_name, existing=existing, interactive=write_document
            )
        else:
            identity = SiteIdentity(site_root=existing.site_root, creator=existing.creator)
            description = existing.site_description
        document = self.build_document(identity, folder_plan, description) if write_document else None
        outcome = self.write_scaffold(root, folder_plan, document)

        result = InitResult(root=root, folder_plan=folder_plan, identity=identity, document=document, outcome=outcome)
        self.report(result)
        return result

    def load_existing(self, config_path: Path) -> ConfigDocument | None:
        if not config_path.exists():
            return None
        try:
            return load_config_document(config_path)
        except ConfigError as exc:
            self.reporter.warn(f"Ignoring existing {config_path}: {exc}")
            return None

    def plan_folders(
        self, request: ScaffoldRequest, *, existing: ConfigDocument | None, config_exists: bool
    ) -> FolderPlan:
        planner = ScaffoldPlanner(prompter=self.prompter, defaults=self.defaults)
        folder_plan = planner.plan(request, existing=existing, config_exists=config_exists)
        logger.debug("plan_folders: %s", folder_plan)
        return folder_plan

    def confirm_overwrite(self, config_path: Path) -> bool:
        allowed = confirm_overwrite(config_path, self.prompter)
        logger.debug("confirm_overwrite: %s -> %s", config_path, allowed)
        return allowed

    def resolve_identity(
        self,
        request: ScaffoldRequest,
        *,
        root_name: str,
        existing: ConfigDocument | None,
        interactive: bool,
    ) -> tuple[SiteIdentity, str]:
        resolver = IdentityResolver(
            prompter=self.prompter,
            defaults=self.defaults,
            inspect_remote=self.inspect_remote,
            read_git_config=self.read_git_config,
            warn=self.reporter.warn,
        )
        identity = resolver.resolve(request, root_name=root_name, interactive=interactive)
        description = resolver.resolve_description(existing, interactive=interactive)
        logger.debug("resolve_identity: %s", identity)
        return identity, description

    def build_document(self, identity: SiteIdentity, folder_plan: FolderPlan, description: str) -> ConfigDocument:
        return build_config_document(identity, folder_plan, description)

    def write_scaffold(self, root: Path, folder_plan: FolderPlan, document: ConfigDocument | None) -> WriteOutcome:
        return write_scaffold(root, folder_plan, document, defaults=self.defaults)

    def report(self, result: InitResult) -> None:
        if not result.outcome.config_written:
            self.reporter.config_not_written(result.outcome.config_path)
        site_root = result.identity.site_root
        if site_root == self.defaults.default_site_root(result.folder_plan.root_name):
            self.reporter.initialized(result.root, None)
        else:
            self.reporter.initialized(result.root, site_root)
