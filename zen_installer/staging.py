"""Materialize bundle subtrees into the profile directory."""

from __future__ import annotations

import shutil
from pathlib import Path

from . import console
from .layout import InstallTarget
from .plan import DestinationPlan


def stage_content(bundle_dir: Path, target: InstallTarget, plan: DestinationPlan) -> list[str]:
    """
    Apply a ``create``/``overwrite`` destination plan.

    Returns the names of the subtrees that were copied. Subtrees missing from
    the bundle are skipped.
    """
    if plan.action == "cancel":
        raise ValueError("cannot stage a cancelled destination plan")

    dst = plan.content_dir
    if plan.action == "overwrite" and dst.exists():
        shutil.rmtree(dst)
    dst.mkdir(parents=True, exist_ok=True)

    src_root = bundle_dir / target.layout.content_dir
    copied: list[str] = []
    for subtree in target.layout.subtrees:
        src = src_root / subtree.name
        if not src.is_dir():
            continue
        shutil.copytree(src, dst / subtree.name)
        console.success(f"Copied {subtree.name}/ ({subtree.description})")
        copied.append(subtree.name)
    return copied


def stage_optional_dir(src: Path, dst: Path) -> list[Path]:
    """
    Best-effort copy of ``src/*.md`` into ``dst``.

    Never raises: a missing source yields an empty list and copy errors are
    reported as a notice.
    """
    if not src.is_dir():
        return []
    copied: list[Path] = []
    try:
        dst.mkdir(parents=True, exist_ok=True)
        for md in sorted(src.glob("*.md")):
            if not md.is_file():
                continue
            target = dst / md.name
            shutil.copy2(md, target)
            copied.append(target)
    except OSError as e:
        console.notice(f"Could not fully copy {src.name}/: {e}")
    return copied


def stage_optional_dirs(bundle_dir: Path, target: InstallTarget) -> dict[str, list[Path]]:
    staged: dict[str, list[Path]] = {}
    for name in target.layout.optional_dirs:
        src = bundle_dir / name
        if not src.is_dir():
            continue
        staged[name] = stage_optional_dir(src, target.optional_dir(name))
        console.success(f"Installed {name} globally")
    return staged
