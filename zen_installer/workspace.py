"""Process-scoped temporary workspace.

The workspace is removed when the ``with`` block exits, whether it completes,
raises, or the process receives SIGTERM/SIGHUP while inside it.
"""

from __future__ import annotations

import os
import shutil
import signal
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from . import console

_CAUGHT_SIGNALS = tuple(
    sig for sig in (getattr(signal, "SIGTERM", None), getattr(signal, "SIGHUP", None)) if sig is not None
)


class Interrupted(SystemExit):
    """Raised from a signal handler so the workspace scope unwinds."""

    def __init__(self, signum: int) -> None:
        super().__init__(128 + signum)
        self.signum = signum


def _raise_interrupted(signum, frame):
    raise Interrupted(signum)


def _install_signal_handlers() -> dict:
    previous = {}
    for sig in _CAUGHT_SIGNALS:
        try:
            previous[sig] = signal.signal(sig, _raise_interrupted)
        except ValueError:
            # not in the main thread; rely on try/finally alone
            break
    return previous


def _restore_signal_handlers(previous: dict) -> None:
    for sig, handler in previous.items():
        # None: handler was installed outside Python
        signal.signal(sig, handler if handler is not None else signal.SIG_DFL)


def remove_workspace(path: Path) -> None:
    if path.is_dir():
        console.info("Cleaning up temporary files...")
        shutil.rmtree(path, ignore_errors=True)


@contextmanager
def temporary_workspace(prefix: str, *, tmp_root: Path | None = None) -> Iterator[Path]:
    """Create ``<tmp_root>/<prefix>-<pid>-XXXX`` and always remove it afterwards."""
    if tmp_root is not None:
        tmp_root.mkdir(parents=True, exist_ok=True)
    path = Path(
        tempfile.mkdtemp(
            prefix=f"{prefix}-{os.getpid()}-",
            dir=str(tmp_root) if tmp_root is not None else None,
        )
    )
    previous = _install_signal_handlers()
    try:
        yield path
    finally:
        try:
            remove_workspace(path)
        finally:
            _restore_signal_handlers(previous)
