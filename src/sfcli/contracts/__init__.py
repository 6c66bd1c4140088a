"""Typed contracts shared across sf-cli layers."""

from sfcli.contracts.config import (
    DC_NAMESPACE,
    SFLO_NAMESPACE,
    SITE_TYPE,
    ConfigDocument,
    FolderPlan,
    InitDefaults,
    JsonLdContext,
    ScaffoldRequest,
)
from sfcli.contracts.exceptions import ConfigError, InvalidPathError, SfCliError
from sfcli.contracts.identity import GitHost, GitRemoteInfo, SiteIdentity, ValueSource
from sfcli.contracts.prompt import Prompter
from sfcli.contracts.report import InitReporter

__all__ = [
    "DC_NAMESPACE",
    "SFLO_NAMESPACE",
    "SITE_TYPE",
    "ConfigDocument",
    "ConfigError",
    "FolderPlan",
    "GitHost",
    "GitRemoteInfo",
    "InitDefaults",
    "InitReporter",
    "InvalidPathError",
    "JsonLdContext",
    "Prompter",
    "ScaffoldRequest",
    "SfCliError",
    "SiteIdentity",
    "ValueSource",
]
