"""Folder planning for a Semantic Flow root repository."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from sfcli.contracts.config import ConfigDocument, FolderPlan, InitDefaults, ScaffoldRequest, is_plain_folder_name
from sfcli.contracts.exceptions import InvalidPathError
from sfcli.contracts.prompt import Prompter

logger = logging.getLogger(__name__)


def root_name_from_path(path: str) -> str:
    """Return the last non-empty segment of *path*.

    ``.`` and ``..`` are resolved against the working directory. Raises
    :class:`InvalidPathError` when no name remains (empty path, ``/``).
    """
    raw = path.strip()
    if raw.startswith("~"):
        raw = str(Path(raw).expanduser())
    segments = [segment for segment in raw.replace("\\", "/").split("/") if segment]
    if not segments:
        raise InvalidPathError("Invalid path provided.", path=path)

    name = segments[-1]
    if name in {".", ".."}:
        name = Path(raw).resolve().name
    if not name:
        raise InvalidPathError("Invalid path provided.", path=path)
    return name


def checked_folder_name(name: str) -> str:
    """Return *name* or raise :class:`InvalidPathError` unless it is a plain folder name."""
    if not is_plain_folder_name(name):
        raise InvalidPathError(f"Invalid folder name: {name!r} must be a single directory name.", path=name)
    return name


def plan_folders(
    request: ScaffoldRequest,
    *,
    defaults: InitDefaults,
    existing: ConfigDocument | None = None,
) -> FolderPlan:
    """Compute folder names: flags > existing document > defaults."""
    root_name = root_name_from_path(request.path)
    output_dir = request.explicit_output_dir or (existing.output_folder if existing else defaults.output_dir)
    src_dir = request.explicit_src_dir or (existing.source_folder if existing else defaults.src_dir)
    return FolderPlan(
        root_name=root_name,
        output_dir_name=checked_folder_name(output_dir),
        src_dir_name=checked_folder_name(src_dir),
        templates_dir_name=defaults.templates_dir,
    )


@dataclass
class ScaffoldPlanner:
    """Plan folders, prompting for names on first run only."""

    prompter: Prompter
    defaults: InitDefaults = field(default_factory=InitDefaults)

    def plan(
        self,
        request: ScaffoldRequest,
        *,
        existing: ConfigDocument | None = None,
        config_exists: bool = False,
    ) -> FolderPlan:
        folder_plan = plan_folders(request, defaults=self.defaults, existing=existing)
        if config_exists:
            logger.debug("Existing config found; keeping folder layout %s", folder_plan)
            return folder_plan

        output_dir = request.explicit_output_dir or self._ask("Output folder name:", folder_plan.output_dir_name)
        src_dir = request.explicit_src_dir or self._ask("Source folder name:", folder_plan.src_dir_name)
        return FolderPlan(
            root_name=folder_plan.root_name,
            output_dir_name=output_dir,
            src_dir_name=src_dir,
            templates_dir_name=folder_plan.templates_dir_name,
        )

    def _ask(self, message: str, default: str) -> str:
        answer = self.prompter.text(message, default=default)
        return checked_folder_name(answer.strip() or default)
