from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import Callable

from .errors import FetchError, ToolMissing

GIT_DOWNLOAD_URL = "https://git-scm.com/downloads"

Fetcher = Callable[[str, Path], None]


def require_tool(tool: str) -> str:
    """Return the resolved executable path for ``tool`` or raise ToolMissing."""
    resolved = shutil.which(tool)
    if resolved is None:
        raise ToolMissing(tool, hint=f"Please install {tool} first: {GIT_DOWNLOAD_URL}")
    return resolved


def git_clone_command(git: str, url: str, dest: Path) -> list[str]:
    return [git, "clone", "--quiet", "--depth", "1", "--single-branch", url, str(dest)]


def shallow_clone(url: str, dest: Path, *, git: str = "git") -> None:
    """Single attempt; any failure surfaces as FetchError."""
    try:
        r = subprocess.run(
            git_clone_command(git, url, dest),
            text=True,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=False,
        )
    except OSError as e:
        raise FetchError(url, str(e)) from e
    if r.returncode != 0:
        raise FetchError(url, (r.stderr or "").strip())
