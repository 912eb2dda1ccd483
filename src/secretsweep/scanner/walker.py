"""Directory traversal — yields candidate files for the scan pipeline.

Per-entry I/O errors never abort the walk: the entry is dropped, the
optional ``on_error`` callback is told, and traversal continues.
"""

from __future__ import annotations

import logging
import os
import stat
import threading
from typing import Callable, Iterator, List, Optional

from secretsweep.scanner.filters import ExtensionFilter

logger = logging.getLogger(__name__)

# Directories never descended into
SKIP_DIRS = frozenset({
    ".git",
    "node_modules",
    "vendor",
    ".idea",
    ".vscode",
    "__pycache__",
    ".next",
    "dist",
    "build",
    "target",
    ".gradle",
    ".npm",
    ".cache",
})

_SNIFF_BYTES = 8192

ErrorCallback = Callable[[str, OSError], None]


def should_prune(dir_name: str) -> bool:
    """Return True for directories the walker must not enter."""
    return dir_name in SKIP_DIRS or dir_name.startswith(".")


def is_text_file(path: str, sample_size: int = _SNIFF_BYTES) -> bool:
    """Heuristic binary check: a NUL byte in the first *sample_size* bytes."""
    with open(path, "rb") as f:
        chunk = f.read(sample_size)
    return bool(chunk) and b"\x00" not in chunk


def walk(
    root: str,
    file_filter: ExtensionFilter,
    *,
    cancel: Optional[threading.Event] = None,
    on_error: Optional[ErrorCallback] = None,
) -> Iterator[str]:
    """Yield paths of files under *root* accepted by *file_filter*.

    The generator is single-pass and its order is whatever the file
    system returns. Setting *cancel* stops further yields.
    """

    def _report(path: str, exc: OSError) -> None:
        logger.debug("skipping %s: %s", path, exc.strerror or exc)
        if on_error is not None:
            on_error(path, exc)

    def _onerror(exc: OSError) -> None:
        _report(exc.filename or root, exc)

    for dirpath, dirnames, filenames in os.walk(root, onerror=_onerror):
        if cancel is not None and cancel.is_set():
            logger.info("walk cancelled under %s", dirpath)
            return

        # Prune in place so os.walk never descends
        kept: List[str] = [d for d in dirnames if not should_prune(d)]
        dirnames[:] = kept

        for name in filenames:
            if cancel is not None and cancel.is_set():
                logger.info("walk cancelled under %s", dirpath)
                return
            if not file_filter.accepts_name(name):
                continue

            path = os.path.join(dirpath, name)
            try:
                # Follow symlinks like a plain open() would; dangling ones raise.
                st = os.stat(path)
            except OSError as exc:
                _report(path, exc)
                continue
            if not stat.S_ISREG(st.st_mode):
                continue
            if not file_filter.should_scan(name, st.st_size):
                continue

            if file_filter.is_permissive:
                try:
                    if not is_text_file(path):
                        continue
                except OSError as exc:
                    _report(path, exc)
                    continue

            yield path
