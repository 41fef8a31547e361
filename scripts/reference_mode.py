#!/usr/bin/env python3
"""Switch bundle @-references between development and production form.

Markdown files reference each other through the installed location
(``@~/.claude/code-zen/...``). While editing the bundle in its own checkout
the same references must point at the working tree (``@./code-zen/...``).

Usage:
    python3 scripts/reference_mode.py dev      # -> @./code-zen/
    python3 scripts/reference_mode.py prod     # -> @~/.claude/code-zen/
    python3 scripts/reference_mode.py status
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

REPO_ROOT = Path(__file__).resolve().parents[1]

BUNDLE_NAME = "code-zen"

Mode = Literal["dev", "prod"]


def relative_ref(bundle: str = BUNDLE_NAME) -> str:
    return f"@./{bundle}/"


def absolute_ref(bundle: str = BUNDLE_NAME) -> str:
    return f"@~/.claude/{bundle}/"


@dataclass(frozen=True)
class ReferenceCounts:
    relative: int
    absolute: int

    @property
    def mode(self) -> str:
        return "DEVELOPMENT" if self.relative else "PRODUCTION"


def iter_markdown(root: Path) -> list[Path]:
    return sorted(p for p in root.rglob("*.md") if p.is_file() and ".git" not in p.parts)


def convert_text(text: str, mode: Mode, bundle: str = BUNDLE_NAME) -> str:
    if mode == "dev":
        return text.replace(absolute_ref(bundle), relative_ref(bundle))
    return text.replace(relative_ref(bundle), absolute_ref(bundle))


def convert_tree(root: Path, mode: Mode, bundle: str = BUNDLE_NAME) -> list[Path]:
    """Rewrite references in place; returns the files that changed."""
    changed: list[Path] = []
    for path in iter_markdown(root):
        text = path.read_text(encoding="utf-8")
        new = convert_text(text, mode, bundle)
        if new != text:
            with path.open("w", encoding="utf-8", newline="") as f:
                f.write(new)
            changed.append(path)
    return changed


def count_references(root: Path, bundle: str = BUNDLE_NAME) -> ReferenceCounts:
    # counts matching lines, like `grep -r ... | wc -l`
    rel = relative_ref(bundle)
    abs_ = absolute_ref(bundle)
    n_rel = n_abs = 0
    for path in iter_markdown(root):
        for line in path.read_text(encoding="utf-8").splitlines():
            if rel in line:
                n_rel += 1
            if abs_ in line:
                n_abs += 1
    return ReferenceCounts(relative=n_rel, absolute=n_abs)


def parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Convert Code Zen @-references between dev and prod form.")
    p.add_argument("command", choices=["dev", "prod", "status"])
    p.add_argument("--root", type=Path, default=REPO_ROOT, help="Tree to scan (default: repository root).")
    p.add_argument("--bundle", default=BUNDLE_NAME, help="Bundle directory name (default: %(default)s).")
    return p.parse_args(argv)


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    root: Path = args.root

    if not root.is_dir():
        print(f"❌ Not a directory: {root}", file=sys.stderr)
        return 2

    if args.command == "status":
        counts = count_references(root, args.bundle)
        print("Reference Status:")
        print()
        print(f"Relative references ({relative_ref(args.bundle)}):")
        print(f"  Count: {counts.relative}")
        print()
        print(f"Absolute references ({absolute_ref(args.bundle)}):")
        print(f"  Count: {counts.absolute}")
        print()
        suffix = "" if counts.relative else " (ready to commit)"
        print(f"Status: {counts.mode} mode{suffix}")
        return 0

    label = "development mode (relative references)" if args.command == "dev" else "production mode (absolute references)"
    print(f"Converting to {label}...")
    changed = convert_tree(root, args.command, args.bundle)
    for path in changed:
        print(f"  ✅ {path.relative_to(root).as_posix()}")
    target = relative_ref(args.bundle) if args.command == "dev" else absolute_ref(args.bundle)
    print(f"✓ Converted {len(changed)} file(s) to {target}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
