"""Rich-based console output for the init command."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape


class RichInitReporter:
    """Colored init messages: warnings and errors on stderr, results on stdout."""

    def __init__(self) -> None:
        self._out = Console(highlight=False, soft_wrap=True)
        self._err = Console(stderr=True, highlight=False, soft_wrap=True)

    def warn(self, message: str) -> None:
        self._err.print(f"[yellow]warning:[/] {escape(message)}")

    def error(self, message: str) -> None:
        self._err.print(f"[red]error:[/] {escape(message)}")

    def config_not_written(self, config_path: Path) -> None:
        self._out.print(f"[yellow]Configuration file was not written:[/] {escape(str(config_path))}")

    def initialized(self, root: Path, site_root: str | None) -> None:
        self._out.print(f"[green]SFRootRepo initialized successfully at [bold]{escape(str(root))}[/bold][/green]")
        if site_root is not None:
            self._out.print(f"[green]Site Root: [bold]{escape(site_root)}[/bold][/green]")
