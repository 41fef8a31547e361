"""Pure install decisions.

Plan functions look at the filesystem through the ``FileSystem`` protocol and
ask the operator through ``Confirm``; they never mutate anything. The caller
applies the returned plan.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Protocol

from .console import Confirm
from .errors import DestinationConflict
from .layout import InstallTarget

DestinationAction = Literal["create", "overwrite", "cancel"]
RegistrationAction = Literal["create", "append", "already-configured", "declined"]


class FileSystem(Protocol):
    def exists(self, path: Path) -> bool: ...
    def is_dir(self, path: Path) -> bool: ...
    def is_file(self, path: Path) -> bool: ...
    def read_text(self, path: Path) -> str: ...


class LocalFileSystem:
    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def is_file(self, path: Path) -> bool:
        return path.is_file()

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8", errors="replace")


@dataclass(frozen=True)
class DestinationPlan:
    action: DestinationAction
    content_dir: Path


@dataclass(frozen=True)
class RegistrationPlan:
    action: RegistrationAction
    config_file: Path
    snippet: str


def plan_destination(target: InstallTarget, fs: FileSystem, confirm: Confirm) -> DestinationPlan:
    dst = target.content_dir
    if fs.exists(dst) and not fs.is_dir(dst):
        raise DestinationConflict(dst, "exists and is not a directory")
    if not fs.is_dir(dst):
        return DestinationPlan("create", dst)
    if confirm(f"Directory {dst} already exists. Overwrite?"):
        return DestinationPlan("overwrite", dst)
    return DestinationPlan("cancel", dst)


def plan_registration(
    target: InstallTarget,
    snippet: str,
    fs: FileSystem,
    confirm: Confirm,
) -> RegistrationPlan:
    config_file = target.config_file
    if fs.exists(config_file) and not fs.is_file(config_file):
        raise DestinationConflict(config_file, "exists and is not a regular file")
    if not fs.exists(config_file):
        if confirm(f"Create {config_file} with Code Zen configuration?"):
            return RegistrationPlan("create", config_file, snippet)
        return RegistrationPlan("declined", config_file, snippet)

    if not confirm(f"Append Code Zen configuration to existing {config_file.name}?"):
        return RegistrationPlan("declined", config_file, snippet)
    if target.layout.sentinel in fs.read_text(config_file):
        return RegistrationPlan("already-configured", config_file, snippet)
    return RegistrationPlan("append", config_file, snippet)
