"""Contracts for user-facing init reporting."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class InitReporter(Protocol):
    def warn(self, message: str) -> None: ...

    def config_not_written(self, config_path: Path) -> None: ...

    def initialized(self, root: Path, site_root: str | None) -> None: ...
