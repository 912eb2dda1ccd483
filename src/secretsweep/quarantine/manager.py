"""Quarantine manager — copy first, ask later.

Every exposed file is copied into the vault, then the operator decides
whether the original goes. The loop is strictly sequential: each step
waits for a human answer before touching the file system again.
"""

from __future__ import annotations

import logging
import os
import shutil
import stat
from datetime import datetime
from pathlib import Path
from typing import IO, Callable, Iterable, List, Optional, Union

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt

from secretsweep.quarantine.models import MoveResult

logger = logging.getLogger(__name__)

VAULT_MODE = 0o700
TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"

PathLike = Union[str, "os.PathLike[str]"]


class QuarantineError(Exception):
    """Raised when the vault cannot be prepared; no file has been touched."""


class _CopyError(Exception):
    """Copy step failed; message is safe to show the operator."""


def _dedupe(paths: Iterable[PathLike]) -> List[str]:
    seen: dict[str, None] = {}
    for p in paths:
        key = os.path.normpath(os.fspath(p))
        seen.setdefault(key, None)
    return list(seen)


class QuarantineManager:
    """Relocates exposed files into *target_dir* with per-file disposal.

    ``stream`` replaces stdin for the prompts and ``clock`` supplies the
    collision timestamp; both exist for tests and embedding.
    """

    def __init__(
        self,
        target_dir: PathLike,
        *,
        console: Optional[Console] = None,
        stream: Optional[IO[str]] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.target_dir = Path(target_dir)
        self.console = console or Console()
        self.stream = stream
        self.clock = clock

    # ---- prompts ----

    def _ask(self, prompt: str) -> str:
        try:
            answer = Prompt.ask(
                prompt,
                console=self.console,
                default="",
                show_default=False,
                stream=self.stream,
            )
        except EOFError:
            return ""
        return answer.strip().lower()

    def confirm(self, file_count: int) -> bool:
        """Global go/no-go. Anything other than yes/y declines."""
        self.console.print()
        self.console.print(
            Panel(
                "[bold yellow]This operation will COPY files to a secure location.[/bold yellow]\n"
                "You will be asked whether to delete each original file after copying.\n\n"
                f"📁 Files to process: [bold]{file_count}[/bold]\n"
                f"📂 Target vault:     [bold]{escape(str(self.target_dir))}[/bold]\n\n"
                "[cyan]Copy first, ask later.[/cyan]",
                title="⚠️  WARNING",
                border_style="bold red",
            )
        )
        answer = self._ask("  Type 'yes' to confirm, or anything else to cancel")
        return answer in ("yes", "y")

    # ---- file system steps ----

    def _prepare_vault(self) -> None:
        try:
            self.target_dir.mkdir(mode=VAULT_MODE, parents=True, exist_ok=True)
        except OSError as exc:
            raise QuarantineError(
                f"failed to create quarantine directory {self.target_dir}: {exc.strerror or exc}"
            ) from exc
        if not self.target_dir.is_dir():
            raise QuarantineError(f"quarantine target is not a directory: {self.target_dir}")

    def resolve_destination(self, src: str) -> Path:
        """Vault path for *src* that does not exist yet.

        A taken name gets ``_YYYYMMDD_HHMMSS`` between stem and extension,
        then a counter if the timestamped name is taken too.
        """
        candidate = self.target_dir / os.path.basename(src)
        if not os.path.lexists(candidate):
            return candidate

        stem, ext = os.path.splitext(candidate.name)
        stamp = self.clock().strftime(TIMESTAMP_FORMAT)
        candidate = self.target_dir / f"{stem}_{stamp}{ext}"
        counter = 1
        while os.path.lexists(candidate):
            candidate = self.target_dir / f"{stem}_{stamp}_{counter}{ext}"
            counter += 1
        return candidate

    @staticmethod
    def copy_file(src: str, dst: Path) -> None:
        """Copy bytes and permission bits, fsync, never overwrite *dst*."""
        try:
            src_f = open(src, "rb")
        except OSError as exc:
            raise _CopyError(f"failed to open source file: {exc.strerror or exc}") from exc

        with src_f:
            try:
                mode = stat.S_IMODE(os.fstat(src_f.fileno()).st_mode)
            except OSError as exc:
                raise _CopyError(f"failed to stat source file: {exc.strerror or exc}") from exc

            flags = os.O_WRONLY | os.O_CREAT | os.O_EXCL | getattr(os, "O_BINARY", 0)
            try:
                fd = os.open(dst, flags, mode)
            except OSError as exc:
                raise _CopyError(
                    f"failed to create destination file: {exc.strerror or exc}"
                ) from exc

            try:
                with os.fdopen(fd, "wb") as dst_f:
                    try:
                        shutil.copyfileobj(src_f, dst_f)
                    except OSError as exc:
                        raise _CopyError(
                            f"failed to copy file contents: {exc.strerror or exc}"
                        ) from exc
                    try:
                        dst_f.flush()
                        os.fsync(dst_f.fileno())
                    except OSError as exc:
                        raise _CopyError(
                            f"failed to sync destination file: {exc.strerror or exc}"
                        ) from exc
                # os.open honours the umask; restore the source's exact bits.
                try:
                    os.chmod(dst, mode)
                except OSError as exc:
                    raise _CopyError(
                        f"failed to set destination permissions: {exc.strerror or exc}"
                    ) from exc
            except _CopyError:
                try:
                    os.remove(dst)
                except OSError:
                    logger.warning("could not remove partial copy %s", dst)
                raise

    # ---- relocation ----

    def _relocate(self, src: str) -> MoveResult:
        dst = self.resolve_destination(src)
        try:
            self.copy_file(src, dst)
        except _CopyError as exc:
            logger.warning("quarantine copy failed for %s: %s", src, exc)
            return MoveResult(
                original_path=src,
                new_path=None,
                success=False,
                outcome="copy_failed",
                error=str(exc),
            )

        logger.info("copied %s to %s", src, dst)
        self.console.print(f"  [green]✅[/green] File securely copied to {escape(str(dst))}")

        answer = self._ask(f"  Delete original file at {escape(src)}? (y/N)")
        if answer not in ("y", "yes"):
            self.console.print("  Skipped: original file kept.")
            return MoveResult(
                original_path=src, new_path=str(dst), success=True, outcome="copied"
            )

        try:
            os.remove(src)
        except OSError as exc:
            logger.warning("copied %s but could not delete the original", src)
            return MoveResult(
                original_path=src,
                new_path=str(dst),
                success=False,
                outcome="delete_failed",
                error=(
                    "copied successfully but failed to delete original "
                    f"(file now exists in both places): {exc.strerror or exc}"
                ),
            )
        logger.info("removed original %s", src)
        return MoveResult(original_path=src, new_path=str(dst), success=True, outcome="moved")

    def quarantine(self, paths: Iterable[PathLike]) -> List[MoveResult]:
        """Relocate each distinct path once, in input order.

        Raises QuarantineError only when the vault cannot be prepared.
        """
        unique = _dedupe(paths)
        self._prepare_vault()
        return [self._relocate(src) for src in unique]

    def confirm_and_quarantine(self, paths: Iterable[PathLike]) -> Optional[List[MoveResult]]:
        """Ask once, then relocate. Returns None when the operator declines."""
        unique = _dedupe(paths)
        if not self.confirm(len(unique)):
            logger.info("quarantine declined by operator")
            return None
        return self.quarantine(unique)


def confirm_quarantine(file_count: int, target_dir: PathLike, **kwargs) -> bool:
    """Module-level form of :meth:`QuarantineManager.confirm`."""
    return QuarantineManager(target_dir, **kwargs).confirm(file_count)


def quarantine_files(
    paths: Iterable[PathLike], target_dir: PathLike, **kwargs
) -> List[MoveResult]:
    """Module-level form of :meth:`QuarantineManager.quarantine`."""
    return QuarantineManager(target_dir, **kwargs).quarantine(paths)
