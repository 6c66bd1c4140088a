"""Contracts for the interactive prompt collaborator."""

from __future__ import annotations

from typing import Protocol


class Prompter(Protocol):
    def text(self, message: str, default: str = "") -> str: ...

    def confirm(self, message: str, default: bool = False) -> bool: ...
