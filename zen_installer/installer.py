"""End-to-end install flow.

    preflight -> fetch -> prepare destination -> extract snippet -> register

Every step after preflight runs inside the temporary workspace scope, so the
clone is removed however the run ends.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import partial
from pathlib import Path

from . import console
from .console import Confirm
from .errors import DestinationConflict
from .fetch import Fetcher, require_tool, shallow_clone
from .layout import REPO_URL, BundleLayout, CODE_ZEN, InstallTarget, default_profile_dir
from .plan import FileSystem, LocalFileSystem, plan_destination, plan_registration
from .registration import apply_registration
from .snippet import extract_snippet
from .staging import stage_content, stage_optional_dirs
from .workspace import temporary_workspace

BUNDLE_SUBDIR = "bundle"


@dataclass
class InstallOptions:
    profile_dir: Path = field(default_factory=default_profile_dir)
    layout: BundleLayout = CODE_ZEN
    repo_url: str = REPO_URL
    git: str = "git"
    tmp_root: Path | None = None

    @property
    def target(self) -> InstallTarget:
        return InstallTarget(self.profile_dir, self.layout)


def git_fetcher(git: str, url: str, dest: Path) -> None:
    shallow_clone(url, dest, git=git)


def print_next_steps(target: InstallTarget) -> None:
    print()
    console.info("Next steps:")
    print(f"1. Check {target.config_file} to ensure configuration is correct")
    print("2. Use Code Zen in any project by referencing it in project CLAUDE.md")
    print("3. See https://github.com/daviguides/code-zen for usage examples")
    print()
    console.info("Documentation: https://github.com/daviguides/code-zen")


def run_install(
    options: InstallOptions,
    confirm: Confirm,
    *,
    fetcher: Fetcher | None = None,
    fs: FileSystem | None = None,
) -> int:
    """
    Run the full install. Returns 0 on completion or a benign decline.

    Fatal conditions raise ``InstallerError`` subclasses; the caller maps them
    to exit codes.
    """
    fs = fs or LocalFileSystem()
    target = options.target

    if fetcher is None:
        fetcher = partial(git_fetcher, require_tool(options.git))

    with temporary_workspace(options.layout.name, tmp_root=options.tmp_root) as workspace:
        bundle_dir = workspace / BUNDLE_SUBDIR

        console.info("Cloning Code Zen repository...")
        fetcher(options.repo_url, bundle_dir)
        console.success("Repository cloned successfully")
        print()

        if fs.exists(target.profile_dir) and not fs.is_dir(target.profile_dir):
            raise DestinationConflict(target.profile_dir, "not a directory")
        if not target.profile_dir.is_dir():
            console.notice(f"Creating {target.profile_dir} directory...")
        target.profile_dir.mkdir(parents=True, exist_ok=True)

        console.info(f"Installing Code Zen bundle to {target.content_dir}...")
        dest_plan = plan_destination(target, fs, confirm)
        if dest_plan.action == "cancel":
            console.notice("Installation cancelled.")
            return 0

        copied = stage_content(bundle_dir, target, dest_plan)
        stage_optional_dirs(bundle_dir, target)
        if copied:
            console.success("Code Zen bundle installed successfully!")
        else:
            console.notice(
                f"No bundle content found under {options.layout.content_dir}/ in the repository; "
                f"{target.content_dir} is empty."
            )
        print()

        console.info("Reading configuration template...")
        start, end = options.layout.snippet_lines
        snippet = extract_snippet(
            bundle_dir / options.layout.template_file, start, end, sentinel=options.layout.sentinel
        )

        if not fs.exists(target.config_file):
            console.info(f"No {target.config_file.name} found in {target.profile_dir}")
        else:
            console.notice(f"{target.config_file} already exists.")
        reg_plan = plan_registration(target, snippet, fs, confirm)
        apply_registration(reg_plan)

    console.success("Installation complete!")
    print_next_steps(target)
    return 0
