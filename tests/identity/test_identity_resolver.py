"""Tests for the identity resolution shell."""

from __future__ import annotations

from pathlib import Path

from sfcli.contracts.config import ScaffoldRequest
from sfcli.contracts.identity import GitHost, GitRemoteInfo
from sfcli.identity.resolver import IdentityResolver
from tests.fakes import FakePrompter


def _remote(info: GitRemoteInfo):
    calls: list[Path] = []

    def _inspect(path: Path) -> GitRemoteInfo:
        calls.append(path)
        return info

    return _inspect, calls


def _git_config(values: dict[str, str]):
    calls: list[str] = []

    def _read(key: str, *, cwd: Path | None = None) -> str | None:
        del cwd
        calls.append(key)
        return values.get(key)

    return _read, calls


def test_explicit_site_root_skips_inspection_and_prompt() -> None:
    prompter = FakePrompter()
    inspect, inspect_calls = _remote(GitRemoteInfo(host=GitHost.GITHUB, owner="alice", repo_name="blog"))
    read_config, _ = _git_config({"user.name": "Alice"})
    resolver = IdentityResolver(prompter=prompter, inspect_remote=inspect, read_git_config=read_config)

    identity = resolver.resolve(
        ScaffoldRequest(path="blog", explicit_site_root="https://example.org"), root_name="blog"
    )

    assert identity.site_root == "https://example.org"
    assert inspect_calls == []
    assert not any("Site root" in message for message in prompter.messages())


def test_inferred_site_root_is_prefilled_and_can_be_overridden() -> None:
    prompter = FakePrompter({"Site root": "https://blog.example.org"})
    inspect, _ = _remote(GitRemoteInfo(host=GitHost.GITHUB, owner="alice", repo_name="blog"))
    read_config, _ = _git_config({"user.name": "Alice"})
    resolver = IdentityResolver(prompter=prompter, inspect_remote=inspect, read_git_config=read_config)

    identity = resolver.resolve(ScaffoldRequest(path="blog"), root_name="blog")

    assert ("Site root URL:", "https://alice.github.io/blog") in prompter.asked
    assert identity.site_root == "https://blog.example.org"


def test_blank_answer_falls_back_to_prefill() -> None:
    prompter = FakePrompter({"Site root": "   ", "Creator": ""})
    inspect, _ = _remote(GitRemoteInfo(host=GitHost.NONE, detail="no .git directory found"))
    read_config, _ = _git_config({})
    resolver = IdentityResolver(prompter=prompter, inspect_remote=inspect, read_git_config=read_config)

    identity = resolver.resolve(ScaffoldRequest(path="my-site"), root_name="my-site")

    assert identity.site_root == "http://localhost/my-site"
    assert identity.creator == "unknown"


def test_email_only_read_when_name_missing() -> None:
    prompter = FakePrompter()
    inspect, _ = _remote(GitRemoteInfo(host=GitHost.NONE))
    read_config, keys = _git_config({"user.name": "Alice", "user.email": "alice@example.org"})
    resolver = IdentityResolver(prompter=prompter, inspect_remote=inspect, read_git_config=read_config)

    identity = resolver.resolve(ScaffoldRequest(path="site"), root_name="site")

    assert keys == ["user.name"]
    assert identity.creator == "Alice"


def test_creator_from_prompted_pages_site_root() -> None:
    prompter = FakePrompter({"Site root": "https://carol.github.io/notes"})
    inspect, _ = _remote(GitRemoteInfo(host=GitHost.NONE))
    read_config, keys = _git_config({})
    resolver = IdentityResolver(prompter=prompter, inspect_remote=inspect, read_git_config=read_config)

    identity = resolver.resolve(ScaffoldRequest(path="notes"), root_name="notes")

    assert keys == ["user.name", "user.email"]
    assert ("Creator:", "carol") in prompter.asked
    assert identity.creator == "carol"


def test_warnings_are_emitted_before_prompting() -> None:
    events: list[str] = []

    class _RecordingPrompter(FakePrompter):
        def text(self, message: str, default: str = "") -> str:
            events.append(f"prompt:{message}")
            return super().text(message, default)

    remote = GitRemoteInfo(host=GitHost.OTHER, raw_url="/srv/site.git", detail="unrecognized git URL format")
    inspect, _ = _remote(remote)
    read_config, _ = _git_config({})
    resolver = IdentityResolver(
        prompter=_RecordingPrompter(),
        inspect_remote=inspect,
        read_git_config=read_config,
        warn=lambda message: events.append(f"warn:{message}"),
    )

    resolver.resolve(ScaffoldRequest(path="site"), root_name="site")

    assert events[0].startswith("warn:") and "unrecognized git URL format" in events[0]
    assert events[1] == "prompt:Site root URL:"
    assert events[2].startswith("warn:Could not determine creator")
    assert events[3] == "prompt:Creator:"


def test_non_interactive_resolution_never_prompts() -> None:
    prompter = FakePrompter()
    warnings: list[str] = []
    inspect, _ = _remote(GitRemoteInfo(host=GitHost.GITHUB, owner="acme", repo_name="acme.github.io"))
    read_config, _ = _git_config({})
    resolver = IdentityResolver(
        prompter=prompter, inspect_remote=inspect, read_git_config=read_config, warn=warnings.append
    )

    identity = resolver.resolve(ScaffoldRequest(path="acme.github.io"), root_name="acme.github.io", interactive=False)

    assert prompter.asked == []
    assert warnings == []
    assert identity.site_root == "https://acme.github.io"
    assert identity.creator == "acme"


def test_resolve_description_uses_default_for_blank_answer() -> None:
    prompter = FakePrompter({"description": ""})
    resolver = IdentityResolver(prompter=prompter)

    assert resolver.resolve_description(None) == "A Semantic Flow site"


def test_non_interactive_resolution_still_reports_warnings() -> None:
    prompter = FakePrompter()
    warnings: list[str] = []
    inspect, _ = _remote(GitRemoteInfo(host=GitHost.NONE, detail="no .git directory found"))
    read_config, _ = _git_config({})
    resolver = IdentityResolver(
        prompter=prompter, inspect_remote=inspect, read_git_config=read_config, warn=warnings.append
    )

    identity = resolver.resolve(ScaffoldRequest(path="site"), root_name="site", interactive=False)

    assert prompter.asked == []
    assert identity.site_root == "http://localhost/site"
    assert any("no .git directory found" in warning for warning in warnings)
    assert any(warning.startswith("Could not determine creator") for warning in warnings)
