"""Local git identity lookup."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)


def get_git_config(key: str, *, cwd: Path | None = None) -> str | None:
    """Return ``git config --get <key>`` or ``None`` when unavailable.

    Runs inside *cwd* when it is an existing directory so repository-local
    settings take effect; otherwise falls back to the caller's cwd.
    """
    run_dir = cwd if cwd is not None and cwd.is_dir() else None
    try:
        result = subprocess.run(
            ["git", "config", "--get", key],
            capture_output=True,
            text=True,
            timeout=5,
            cwd=run_dir,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("git config --get %s failed: %s", key, exc)
        return None
    if result.returncode != 0:
        return None
    value = result.stdout.strip()
    return value or None
