"""Vault domain models.

This module defines the data structures returned by a vault scan:
the per-file entry handed to the front end, and the export envelope
used for JSON output.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


@dataclass(frozen=True, slots=True)
class FileEntry:
    """A matching file discovered in the vault.

    Attributes:
        name: Base name of the file (empty if it is not valid text).
        path: Absolute path as traversed.
        relative_path: Path relative to the vault root.
    """

    name: str
    path: str
    relative_path: str

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)
        if not self.relative_path:
            msg = "Relative path cannot be empty"
            raise ValueError(msg)

    def to_dict(self) -> dict[str, str]:
        """Convert to the wire format consumed by the front end."""
        return {
            "name": self.name,
            "path": self.path,
            "relativePath": self.relative_path,
        }


@dataclass(frozen=True, slots=True)
class ScanMetadata:
    """Metadata for a vault scan.

    Attributes:
        timestamp: ISO format timestamp when the scan finished.
        hostname: Name of the machine that was scanned.
        slate_version: Version of slate that performed the scan.
        vault_root: Absolute vault root that was scanned.
        extension: File extension that was matched.
        elapsed_ms: Wall-clock scan duration in milliseconds.
    """

    timestamp: str
    hostname: str
    slate_version: str
    vault_root: str
    extension: str
    elapsed_ms: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "timestamp": self.timestamp,
            "hostname": self.hostname,
            "slate_version": self.slate_version,
            "vault_root": self.vault_root,
            "extension": self.extension,
            "elapsed_ms": round(self.elapsed_ms, 2),
        }


@dataclass(frozen=True, slots=True)
class VaultScanResult:
    """Complete scan result for export.

    Attributes:
        metadata: Scan metadata including vault root and timing.
        files: Matching files in relative-path order.
        summary: File count summary.
    """

    metadata: ScanMetadata
    files: list[FileEntry]
    summary: dict[str, int] = field(default_factory=lambda: {})

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "metadata": self.metadata.to_dict(),
            "files": [entry.to_dict() for entry in self.files],
            "summary": self.summary,
        }

    @classmethod
    def create(
        cls,
        files: list[FileEntry],
        vault_root: str,
        extension: str,
        elapsed_ms: float,
    ) -> "VaultScanResult":
        """Create a VaultScanResult with auto-generated metadata.

        Args:
            files: Matching files from the scan.
            vault_root: Absolute vault root that was scanned.
            extension: Extension that was matched.
            elapsed_ms: Scan duration in milliseconds.

        Returns:
            VaultScanResult with populated metadata and summary.
        """
        import socket

        from slate import __version__

        metadata = ScanMetadata(
            timestamp=datetime.now(UTC).isoformat(),
            hostname=socket.gethostname(),
            slate_version=__version__,
            vault_root=vault_root,
            extension=extension,
            elapsed_ms=elapsed_ms,
        )
        return cls(metadata=metadata, files=files, summary={"total": len(files)})
