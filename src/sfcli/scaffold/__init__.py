"""Scaffold planning, document building and writing."""

from sfcli.scaffold.document import build_config_document, load_config_document, serialize_config_document
from sfcli.scaffold.planner import ScaffoldPlanner, checked_folder_name, plan_folders, root_name_from_path
from sfcli.scaffold.writer import (
    WriteOutcome,
    confirm_overwrite,
    ensure_directories,
    scaffold_directories,
    write_config_document,
    write_scaffold,
)

__all__ = [
    "ScaffoldPlanner",
    "WriteOutcome",
    "build_config_document",
    "checked_folder_name",
    "confirm_overwrite",
    "ensure_directories",
    "load_config_document",
    "plan_folders",
    "root_name_from_path",
    "scaffold_directories",
    "serialize_config_document",
    "write_config_document",
    "write_scaffold",
]
