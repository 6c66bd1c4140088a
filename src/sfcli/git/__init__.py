"""Git inspection helpers."""

from sfcli.git.identity import get_git_config
from sfcli.git.remote import (
    GitRemoteUrl,
    HttpsRemote,
    SshRemote,
    UnrecognizedRemote,
    find_remote_url,
    inspect_git_remote,
    parse_remote_url,
    remote_info_from_url,
)

__all__ = [
    "GitRemoteUrl",
    "HttpsRemote",
    "SshRemote",
    "UnrecognizedRemote",
    "find_remote_url",
    "get_git_config",
    "inspect_git_remote",
    "parse_remote_url",
    "remote_info_from_url",
]
