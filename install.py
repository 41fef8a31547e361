#!/usr/bin/env python3
"""
Code Zen - Installer
Installs the Code Zen bundle into the Claude profile directory (~/.claude).

Steps:
- shallow clone of the bundle repository into a temporary workspace
- copy spec/, context/, prompts/ into ~/.claude/code-zen (confirm before overwrite)
- best-effort copy of commands/*.md and agents/*.md into ~/.claude/{commands,agents}
- create or append the Code Zen block in ~/.claude/CLAUDE.md (skipped if already present)

The temporary workspace is removed on every exit path.
"""

from __future__ import annotations

import sys

from zen_installer.cli import main

if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
