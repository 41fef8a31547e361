from __future__ import annotations

import os
import shutil
import subprocess
import sys
from pathlib import Path

from zen_installer.layout import CODE_ZEN, BundleLayout, Subtree

REPO_ROOT = Path(__file__).resolve().parents[1]

# a non-default layout for exercising layout-driven paths and sentinels
HOUSE_STYLE = BundleLayout(
    name="house-style",
    content_dir="house-style",
    target_name="house-style",
    subtrees=(
        Subtree("spec", "normative standards"),
        Subtree("prompts", "workflows"),
    ),
    sentinel="house-style",
)

TEMPLATE_LINES = [
    "# Claude plug-in sample",
    "",
    "# Project Coding Standards",
    "",
    "## Standards Inheritance",
    "",
    "This project inherits from @~/.claude/code-zen/zen_of_code.md",
    "",
    "- Project-specific rules override inherited standards.",
    "- When a rule is not specified, fall back to Code Zen.",
    "",
    "See code-zen/spec for the full standard.",
    "",
    "## Usage notes (not part of the snippet)",
]
TEMPLATE_TEXT = "\n".join(TEMPLATE_LINES) + "\n"
# lines 3..12
EXPECTED_SNIPPET = "\n".join(TEMPLATE_LINES[2:12])


def template_for(layout: BundleLayout) -> str:
    return TEMPLATE_TEXT.replace(CODE_ZEN.sentinel, layout.sentinel)


def snippet_for(layout: BundleLayout) -> str:
    return EXPECTED_SNIPPET.replace(CODE_ZEN.sentinel, layout.sentinel)


def run(
    cmd: list[str],
    *,
    env: dict[str, str] | None = None,
    cwd: Path | None = None,
    input: str | None = None,
) -> subprocess.CompletedProcess:
    e = os.environ.copy()
    e["NO_COLOR"] = "1"
    if env:
        e.update(env)
    return subprocess.run(
        cmd,
        cwd=str(cwd or REPO_ROOT),
        env=e,
        input=input if input is not None else "",
        text=True,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        check=False,
    )


def run_install(args: list[str], *, input: str | None = None, env: dict[str, str] | None = None) -> subprocess.CompletedProcess:
    # Always use the current interpreter (matrix python-version).
    return run([sys.executable, "-X", "utf8", "install.py", *args], input=input, env=env)


def read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def snapshot(root: Path) -> dict[str, bytes]:
    if not root.exists():
        return {}
    return {p.relative_to(root).as_posix(): p.read_bytes() for p in sorted(root.rglob("*")) if p.is_file()}


def build_bundle(
    root: Path,
    *,
    layout: BundleLayout = CODE_ZEN,
    with_optional: bool = True,
    template: str | None = None,
    with_template: bool = True,
) -> Path:
    """Write a minimal bundle tree (what a clone of the bundle repository contains).

    The template defaults to the sample whose snippet mentions the layout's sentinel.
    """
    content = root / layout.content_dir
    files = {
        "spec/zen_of_code.md": "# Zen of Code\n\nBeautiful is better than ugly.\n",
        "spec/python/naming.md": "# Naming\n",
        "context/examples.md": "# Examples\n",
        "prompts/review.md": "Review with @~/.claude/code-zen/spec/zen_of_code.md\n",
    }
    for rel, text in files.items():
        if rel.split("/", 1)[0] not in {s.name for s in layout.subtrees}:
            continue
        path = content / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")

    if with_optional:
        (root / "commands").mkdir(parents=True, exist_ok=True)
        (root / "commands" / "zen-review.md").write_text("# /zen-review\n", encoding="utf-8")
        (root / "commands" / "NOTES.txt").write_text("not a command\n", encoding="utf-8")
        (root / "agents").mkdir(parents=True, exist_ok=True)
        (root / "agents" / "zen-reviewer.md").write_text("# zen-reviewer\n", encoding="utf-8")

    if with_template:
        text = template if template is not None else template_for(layout)
        (root / layout.template_file).write_text(text, encoding="utf-8")
    return root


class CopyFetcher:
    """Stands in for the git clone: copies a prepared bundle tree."""

    def __init__(self, src: Path) -> None:
        self.src = src
        self.calls: list[tuple[str, Path]] = []

    def __call__(self, url: str, dest: Path) -> None:
        self.calls.append((url, dest))
        shutil.copytree(self.src, dest)


class ScriptedConfirm:
    def __init__(self, *answers: bool) -> None:
        self.answers = list(answers)
        self.questions: list[str] = []

    def __call__(self, question: str) -> bool:
        self.questions.append(question)
        if not self.answers:
            raise AssertionError(f"unexpected prompt: {question}")
        return self.answers.pop(0)


def init_git_repo(root: Path) -> str:
    """Commit ``root`` as a local repository and return its file:// URL."""
    git = ["git", "-c", "user.name=Zen Tests", "-c", "user.email=zen@example.invalid", "-c", "commit.gpgsign=false"]
    for cmd in (["init", "-q"], ["add", "-A"], ["commit", "-q", "-m", "bundle"]):
        r = run([*git, *cmd], cwd=root)
        if r.returncode != 0:
            raise RuntimeError(f"git {' '.join(cmd)} failed: {r.stderr}\n{r.stdout}")
    return root.resolve().as_uri()
