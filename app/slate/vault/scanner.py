"""Vault scanner for markdown notes.

Walks a vault directory under the user's home, pruning hidden
directories, and collects every regular file with the configured
extension. Results are sorted by their path relative to the vault
root so that repeated scans of an unchanged tree are identical.
"""

import logging
import os
import time
from pathlib import Path

from slate.vault.models import FileEntry

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION: str = "md"

# Leading character that marks a hidden file or directory
_HIDDEN_PREFIX: str = "."


class VaultError(Exception):
    """Base exception for vault scan errors."""


class HomeDirectoryError(VaultError):
    """Raised when the current user's home directory cannot be resolved."""


class VaultNotFoundError(VaultError):
    """Raised when the resolved vault root does not exist.

    Attributes:
        path: The vault root that was looked up.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Vault path does not exist: {path}")


def is_hidden(name: str) -> bool:
    """Check if a file or directory name marks a hidden entry."""
    return name.startswith(_HIDDEN_PREFIX)


def matches_extension(path: Path, extension: str) -> bool:
    """Check if a path carries the given extension (case-sensitive).

    Args:
        path: Path to check.
        extension: Extension without leading dot (e.g. "md").

    Returns:
        True if the final suffix of the path equals ``.<extension>``.
    """
    return path.suffix == f".{extension}"


def path_exists(path: Path) -> bool:
    """Check if a path exists, treating a path that cannot be stat'd as missing."""
    try:
        return path.exists()
    except OSError as e:
        logger.debug("Cannot stat %s: %s", path, e)
        return False


def _lossy(path: str) -> str:
    """Re-decode a filesystem string, replacing undecodable bytes."""
    return os.fsencode(path).decode("utf-8", errors="replace")


def _decode_name(name: str) -> str:
    """Return the name if it is valid text, otherwise an empty string."""
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return ""
    return name


class VaultScanner:
    """Scans a vault directory for files with a given extension.

    Each call to :meth:`scan` is independent: nothing is cached between
    calls and the instance holds no per-scan state, so one scanner may
    serve overlapping requests.

    Args:
        extension: Extension to match, without leading dot. Defaults to "md".
        home: Optional home directory override. Defaults to ``Path.home()``
            resolved on every call.
    """

    def __init__(self, extension: str = DEFAULT_EXTENSION, *, home: Path | None = None) -> None:
        extension = extension.lstrip(".")
        if not extension:
            msg = "Extension cannot be empty"
            raise ValueError(msg)
        self._extension = extension
        self._home = home

    @property
    def extension(self) -> str:
        """Extension matched by this scanner, without leading dot."""
        return self._extension

    def resolve_root(self, vault_relative_path: str) -> Path:
        """Join a vault path onto the user's home directory.

        Does not check that the result exists.

        Args:
            vault_relative_path: Vault location relative to home.

        Returns:
            Absolute vault root path.

        Raises:
            HomeDirectoryError: If the home directory cannot be determined.
        """
        return self._get_home() / vault_relative_path

    def scan(self, vault_relative_path: str) -> list[FileEntry]:
        """Scan a vault and return matching files sorted by relative path.

        Hidden directories are never descended into and hidden files are
        never returned. Unreadable subtrees and entries that disappear
        mid-walk are skipped. An empty list is a valid result.

        Args:
            vault_relative_path: Vault location relative to home.

        Returns:
            FileEntry list ordered by ``relative_path``.

        Raises:
            HomeDirectoryError: If the home directory cannot be determined.
            VaultNotFoundError: If the vault root does not exist.
        """
        start = time.perf_counter()
        logger.info("Starting vault scan: %s", vault_relative_path)

        vault_root = self.resolve_root(vault_relative_path)

        if not path_exists(vault_root):
            logger.warning("Vault path does not exist: %s", vault_root)
            raise VaultNotFoundError(vault_root)

        results = self._walk(vault_root)
        results.sort(key=lambda entry: entry.relative_path)

        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info("Scan complete: %d files in %.2fms", len(results), elapsed_ms)

        return results

    def _get_home(self) -> Path:
        """Resolve the home directory.

        Raises:
            HomeDirectoryError: If no home directory is available.
        """
        if self._home is not None:
            return self._home

        try:
            home = Path.home()
        except (RuntimeError, KeyError) as e:
            raise HomeDirectoryError("Could not determine home directory") from e

        # expanduser leaves "~" untouched when it cannot resolve it
        if str(home) == "~":
            raise HomeDirectoryError("Could not determine home directory")
        return home

    def _walk(self, vault_root: Path) -> list[FileEntry]:
        """Collect matching entries under the vault root in walk order.

        Args:
            vault_root: Existing vault root directory.

        Returns:
            Unsorted list of matching entries.
        """
        entries: list[FileEntry] = []

        # A root ending in ".." has no file name of its own and is never hidden
        if vault_root.name not in ("", "..") and is_hidden(vault_root.name):
            return entries

        for dirpath, dirnames, filenames in os.walk(
            vault_root, onerror=self._on_walk_error, followlinks=False
        ):
            # Prune in place so os.walk never descends into hidden directories
            dirnames[:] = [d for d in dirnames if not is_hidden(d)]

            for filename in filenames:
                if is_hidden(filename):
                    continue

                path = Path(dirpath) / filename
                if not matches_extension(path, self._extension):
                    continue

                try:
                    if not path.is_file():
                        continue
                except OSError:
                    logger.debug("Cannot stat entry, skipping: %s", path)
                    continue

                entries.append(self._make_entry(path, vault_root))

        return entries

    @staticmethod
    def _make_entry(path: Path, vault_root: Path) -> FileEntry:
        """Build a FileEntry for a matching path.

        Falls back to the file name when the path cannot be expressed
        relative to the vault root.
        """
        name = _decode_name(path.name)

        try:
            relative_path = _lossy(str(path.relative_to(vault_root)))
        except ValueError:
            relative_path = name or _lossy(path.name)

        return FileEntry(name=name, path=_lossy(str(path)), relative_path=relative_path)

    @staticmethod
    def _on_walk_error(error: OSError) -> None:
        """Skip directories that cannot be listed."""
        logger.debug("Skipping unreadable directory %s: %s", error.filename, error)
