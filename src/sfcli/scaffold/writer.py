"""Filesystem side effects for the scaffold."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from sfcli.contracts.config import ConfigDocument, FolderPlan, InitDefaults
from sfcli.contracts.prompt import Prompter
from sfcli.scaffold.document import serialize_config_document

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WriteOutcome:
    directories: tuple[Path, ...]
    config_path: Path
    config_written: bool


def scaffold_directories(root: Path, folder_plan: FolderPlan, *, defaults: InitDefaults) -> tuple[Path, ...]:
    output_dir = root / folder_plan.output_dir_name
    return (
        root,
        output_dir,
        output_dir / defaults.assets_dir,
        root / folder_plan.src_dir_name,
        root / folder_plan.templates_dir_name,
    )


def ensure_directories(directories: tuple[Path, ...]) -> None:
    """Create each directory in order; existing directories are left alone."""
    for directory in directories:
        directory.mkdir(parents=True, exist_ok=True)
        logger.debug("Ensured %s", directory)


def confirm_overwrite(config_path: Path, prompter: Prompter) -> bool:
    """Return whether the config document at *config_path* may be written."""
    if not config_path.exists():
        return True
    return prompter.confirm(f"{config_path} already exists. Overwrite?", default=False)


def write_config_document(document: ConfigDocument, config_path: Path) -> None:
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(serialize_config_document(document), encoding="utf-8")


def write_scaffold(
    root: Path,
    folder_plan: FolderPlan,
    document: ConfigDocument | None,
    *,
    defaults: InitDefaults,
) -> WriteOutcome:
    """Materialise the directory skeleton and, when given, the config document.

    ``document=None`` means the overwrite was declined: directories are still
    ensured and the existing file is left untouched.
    """
    directories = scaffold_directories(root, folder_plan, defaults=defaults)
    ensure_directories(directories)

    config_path = root / defaults.config_filename
    if document is None:
        logger.debug("Skipping %s", config_path)
        return WriteOutcome(directories=directories, config_path=config_path, config_written=False)

    write_config_document(document, config_path)
    logger.debug("Wrote %s", config_path)
    return WriteOutcome(directories=directories, config_path=config_path, config_written=True)
