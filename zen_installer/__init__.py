"""Code Zen installer: fetch the bundle, stage it under ~/.claude, register it in CLAUDE.md."""

VERSION = "1.0.0"
