from __future__ import annotations

import argparse
import sys
from pathlib import Path

from . import VERSION, console
from .errors import InstallerError
from .installer import InstallOptions, run_install
from .layout import DEFAULT_LAYOUT, LAYOUTS, REPO_URL, default_profile_dir, get_layout
from .workspace import Interrupted


def parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Install the Code Zen bundle into the Claude profile directory.")
    p.add_argument(
        "--claude-dir",
        type=Path,
        default=None,
        help="Override the profile directory (default: ~/.claude).",
    )
    p.add_argument("--repo-url", default=REPO_URL, help="Bundle repository URL (default: %(default)s).")
    p.add_argument(
        "--layout",
        choices=sorted(LAYOUTS),
        default=DEFAULT_LAYOUT,
        help="Bundle layout to install (default: %(default)s).",
    )
    p.add_argument("--yes", action="store_true", help="Answer yes to every confirmation prompt.")
    p.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return p.parse_args(argv)


def banner() -> None:
    console.info("Code Zen Installer")
    console.info("==================")
    print()


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)

    options = InstallOptions(
        profile_dir=args.claude_dir if args.claude_dir is not None else default_profile_dir(),
        layout=get_layout(args.layout),
        repo_url=args.repo_url,
    )
    confirm = console.assume_yes if args.yes else console.prompt_confirm

    banner()
    try:
        return run_install(options, confirm)
    except InstallerError as e:
        console.error(str(e), e.hint)
        return e.exit_code
    except Interrupted as e:
        console.eprint(f"\nInterrupted (signal {e.signum}).")
        return e.code
    except KeyboardInterrupt:
        console.eprint("\nInterrupted.")
        return 130
