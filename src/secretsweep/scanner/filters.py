"""Extension filter — decides which files are worth reading."""

from __future__ import annotations

import os
from typing import FrozenSet, Iterable, Optional

MAX_FILE_SIZE = 5 * 1024 * 1024

# Text-based files that commonly contain secrets. Dotted entries match the
# lower-case extension (or the whole name); bare entries match
# extensionless file names such as Dockerfile.
DEFAULT_TEXT_EXTENSIONS: FrozenSet[str] = frozenset({
    # Configuration
    ".env", ".env.local", ".env.development", ".env.production",
    ".json", ".yaml", ".yml", ".toml", ".xml",
    ".ini", ".cfg", ".conf", ".config", ".properties",
    # Source code
    ".go", ".py", ".js", ".ts", ".jsx", ".tsx",
    ".java", ".kt", ".scala", ".rb", ".php",
    ".cs", ".cpp", ".c", ".h", ".hpp",
    ".rs", ".swift", ".m", ".mm",
    ".sh", ".bash", ".zsh", ".fish",
    ".ps1", ".bat", ".cmd",
    # Web
    ".html", ".htm", ".css", ".scss", ".less",
    ".vue", ".svelte",
    # Documentation
    ".md", ".markdown", ".txt", ".rst",
    # Data
    ".sql", ".graphql", ".gql",
    ".csv", ".tsv",
    # DevOps / IaC
    ".tf", ".tfvars", ".hcl",
    ".dockerfile", ".dockerignore",
    ".gitignore", ".gitattributes",
    ".editorconfig", ".prettierrc", ".eslintrc",
    "dockerfile", "makefile", "jenkinsfile", "procfile",
    # Keys and certificates
    ".pem", ".key", ".crt", ".cer",
    ".pub", ".ppk",
    # Notebooks
    ".ipynb", ".rmd",
    # Other
    ".log", ".htaccess", ".htpasswd",
    ".gradle", ".plist", ".xcconfig",
})


def normalize_extension(ext: str) -> str:
    """Lower-case *ext* and make sure it carries a leading dot."""
    ext = ext.strip().lower()
    if not ext.startswith("."):
        ext = "." + ext
    return ext


def merge_extensions(
    base: Iterable[str], additional: Iterable[str]
) -> FrozenSet[str]:
    """Union of *base* with user-supplied extensions (normalized)."""
    merged = set(base)
    merged.update(normalize_extension(e) for e in additional if e.strip())
    return frozenset(merged)


def _is_env_name(name: str) -> bool:
    return name == ".env" or name.startswith(".env.")


class ExtensionFilter:
    """Pure predicate over a file name and its size.

    ``allowed=None`` is the permissive mode (scan everything); size and
    hidden-file rules still apply there.
    """

    def __init__(
        self,
        allowed: Optional[Iterable[str]] = DEFAULT_TEXT_EXTENSIONS,
        max_file_size: int = MAX_FILE_SIZE,
    ) -> None:
        self.allowed: Optional[FrozenSet[str]] = (
            None if allowed is None else frozenset(a.lower() for a in allowed)
        )
        self.max_file_size = max_file_size

    @classmethod
    def permissive(cls, max_file_size: int = MAX_FILE_SIZE) -> "ExtensionFilter":
        return cls(None, max_file_size)

    @classmethod
    def with_extras(
        cls, extras: Iterable[str], max_file_size: int = MAX_FILE_SIZE
    ) -> "ExtensionFilter":
        return cls(merge_extensions(DEFAULT_TEXT_EXTENSIONS, extras), max_file_size)

    @property
    def is_permissive(self) -> bool:
        return self.allowed is None

    def accepts_name(self, file_name: str) -> bool:
        """Name-only half of :meth:`should_scan`."""
        lowered = file_name.lower()

        if file_name.startswith(".") and not _is_env_name(file_name):
            if self.allowed is None or lowered not in self.allowed:
                return False

        if self.allowed is None:
            return True

        # os.path.splitext treats a leading dot as part of the name, so
        # ".env" and ".gitignore" fall through to the whole-name check.
        ext = os.path.splitext(lowered)[1]
        if not ext:
            return lowered in self.allowed
        return ext in self.allowed or lowered in self.allowed

    def accepts_size(self, size: int) -> bool:
        return 0 < size <= self.max_file_size

    def should_scan(self, file_name: str, size: int) -> bool:
        """Return True when a file named *file_name* of *size* bytes should be read."""
        return self.accepts_size(size) and self.accepts_name(file_name)
