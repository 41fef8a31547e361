from __future__ import annotations

from pathlib import Path


class InstallerError(Exception):
    """Fatal installer condition. Carries the process exit code."""

    exit_code = 1

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ToolMissing(InstallerError):
    exit_code = 2

    def __init__(self, tool: str, *, hint: str | None = None) -> None:
        super().__init__(f"{tool} is not installed", hint=hint)
        self.tool = tool


class FetchError(InstallerError):
    exit_code = 3

    def __init__(self, url: str, detail: str = "") -> None:
        hint = f"Repository: {url}"
        if detail:
            hint += f"\n{detail}"
        super().__init__("Failed to clone repository", hint=hint)
        self.url = url
        self.detail = detail


class TemplateExtractionError(InstallerError):
    exit_code = 4

    def __init__(self, path: Path, reason: str = "empty snippet") -> None:
        super().__init__(
            "Failed to extract configuration template",
            hint=f"Template: {path} ({reason})",
        )
        self.path = path
        self.reason = reason


class DestinationConflict(InstallerError):
    """An install path exists but has the wrong type (file vs directory)."""

    exit_code = 5

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot install to {path}: {reason}", hint="Move it out of the way and re-run the installer.")
        self.path = path
        self.reason = reason
