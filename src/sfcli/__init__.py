"""Public API surface for sf-cli."""

__version__ = "0.1.0"

from sfcli.contracts import (
    ConfigDocument,
    ConfigError,
    FolderPlan,
    GitHost,
    GitRemoteInfo,
    InitDefaults,
    InvalidPathError,
    ScaffoldRequest,
    SfCliError,
    SiteIdentity,
)
from sfcli.git import get_git_config, inspect_git_remote, parse_remote_url
from sfcli.identity import IdentityResolver
from sfcli.pipeline import InitPipeline, InitResult
from sfcli.scaffold import (
    ScaffoldPlanner,
    build_config_document,
    load_config_document,
    plan_folders,
    write_scaffold,
)
from sfcli.site import derive_site_root

__all__ = [
    "ConfigDocument",
    "ConfigError",
    "FolderPlan",
    "GitHost",
    "GitRemoteInfo",
    "IdentityResolver",
    "InitDefaults",
    "InitPipeline",
    "InitResult",
    "InvalidPathError",
    "ScaffoldPlanner",
    "ScaffoldRequest",
    "SfCliError",
    "SiteIdentity",
    "__version__",
    "build_config_document",
    "derive_site_root",
    "get_git_config",
    "inspect_git_remote",
    "load_config_document",
    "parse_remote_url",
    "plan_folders",
    "write_scaffold",
]
