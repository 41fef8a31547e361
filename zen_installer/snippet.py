from __future__ import annotations

from pathlib import Path

from .errors import TemplateExtractionError


def extract_lines(text: str, start: int, end: int) -> str:
    """
    Return lines ``start..end`` (1-based, inclusive) of ``text``.

    Mirrors ``$(sed -n 'start,endp' file)``: only ``"\\n"`` ends a line, every
    other byte (``\\r`` included) is kept as-is, and trailing ``"\\n"`` of the
    result are stripped. Lines past the end of the text are simply absent.
    """
    if start < 1 or end < start:
        raise ValueError(f"invalid line range: {start},{end}")
    lines = text.split("\n")
    return "\n".join(lines[start - 1 : end]).rstrip("\n")


def read_template(path: Path) -> str:
    # newline="" keeps CRLF and lone CR untouched
    with path.open("r", encoding="utf-8", newline="") as f:
        return f.read()


def extract_snippet(path: Path, start: int, end: int, *, sentinel: str | None = None) -> str:
    """
    Extract the configuration snippet from the bundle template.

    When ``sentinel`` is given the snippet must contain it, otherwise the
    already-configured check could never match and re-runs would append the
    block again.
    """
    try:
        text = read_template(path)
    except FileNotFoundError:
        raise TemplateExtractionError(path, "template file not found") from None
    except (OSError, UnicodeDecodeError) as e:
        raise TemplateExtractionError(path, str(e)) from e

    snippet = extract_lines(text, start, end)
    if not snippet.strip():
        raise TemplateExtractionError(path, f"lines {start}-{end} are empty")
    if sentinel is not None and sentinel not in snippet:
        raise TemplateExtractionError(path, f"lines {start}-{end} do not mention {sentinel!r}")
    return snippet
