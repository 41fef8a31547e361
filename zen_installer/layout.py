"""Bundle layouts and install targets.

A ``BundleLayout`` describes where things live inside the fetched bundle and
where they land under the profile directory. ``code-zen`` is the only layout
registered in ``LAYOUTS``; other layouts can be passed through
``InstallOptions``. The sentinel must occur in the snippet, which the
installer verifies after extraction.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

REPO_URL = "https://github.com/daviguides/code-zen.git"
CONFIG_FILE_NAME = "CLAUDE.md"
TEMPLATE_FILE_NAME = "claude-plug-in-sample.md"

# 1-based, inclusive (sed -n '3,12p')
SNIPPET_LINES = (3, 12)


@dataclass(frozen=True)
class Subtree:
    name: str
    description: str


@dataclass(frozen=True)
class BundleLayout:
    name: str
    content_dir: str
    target_name: str
    subtrees: tuple[Subtree, ...]
    optional_dirs: tuple[str, ...] = ("commands", "agents")
    template_file: str = TEMPLATE_FILE_NAME
    snippet_lines: tuple[int, int] = SNIPPET_LINES
    sentinel: str = "code-zen"


CODE_ZEN = BundleLayout(
    name="code-zen",
    content_dir="code-zen",
    target_name="code-zen",
    subtrees=(
        Subtree("spec", "normative standards"),
        Subtree("context", "examples and guides"),
        Subtree("prompts", "workflows"),
    ),
)

LAYOUTS: dict[str, BundleLayout] = {
    CODE_ZEN.name: CODE_ZEN,
}

DEFAULT_LAYOUT = CODE_ZEN.name


def default_profile_dir() -> Path:
    return Path.home() / ".claude"


@dataclass(frozen=True)
class InstallTarget:
    profile_dir: Path
    layout: BundleLayout

    @property
    def content_dir(self) -> Path:
        return self.profile_dir / self.layout.target_name

    @property
    def config_file(self) -> Path:
        return self.profile_dir / CONFIG_FILE_NAME

    def optional_dir(self, name: str) -> Path:
        return self.profile_dir / name


def get_layout(name: str) -> BundleLayout:
    try:
        return LAYOUTS[name]
    except KeyError:
        raise ValueError(f"Unknown bundle layout: {name!r} (known: {', '.join(sorted(LAYOUTS))})") from None
