"""Tests for vault domain models."""

import pytest
from slate import __version__
from slate.vault.models import FileEntry, ScanMetadata, VaultScanResult


def _entry(relative_path: str = "notes/a.md") -> FileEntry:
    return FileEntry(
        name=relative_path.rsplit("/", 1)[-1],
        path=f"/home/user/Vault/{relative_path}",
        relative_path=relative_path,
    )


class TestFileEntry:
    """Tests for FileEntry dataclass."""

    def test_to_dict_uses_wire_field_names(self) -> None:
        entry = _entry()

        assert entry.to_dict() == {
            "name": "a.md",
            "path": "/home/user/Vault/notes/a.md",
            "relativePath": "notes/a.md",
        }

    def test_empty_name_allowed(self) -> None:
        entry = FileEntry(name="", path="/v/x.md", relative_path="x.md")
        assert entry.name == ""

    def test_empty_path_rejected(self) -> None:
        with pytest.raises(ValueError, match="Path cannot be empty"):
            FileEntry(name="a.md", path="", relative_path="a.md")

    def test_empty_relative_path_rejected(self) -> None:
        with pytest.raises(ValueError, match="Relative path cannot be empty"):
            FileEntry(name="a.md", path="/v/a.md", relative_path="")

    def test_is_immutable(self) -> None:
        entry = _entry()
        with pytest.raises(AttributeError):
            entry.name = "other.md"  # type: ignore[misc]


class TestVaultScanResult:
    """Tests for the export envelope."""

    def test_create_populates_metadata(self) -> None:
        files = [_entry("a.md"), _entry("b/c.md")]

        result = VaultScanResult.create(
            files=files,
            vault_root="/home/user/Vault",
            extension="md",
            elapsed_ms=12.3456,
        )

        assert result.metadata.slate_version == __version__
        assert result.metadata.vault_root == "/home/user/Vault"
        assert result.metadata.extension == "md"
        assert result.metadata.hostname
        assert result.summary == {"total": 2}

    def test_to_dict(self) -> None:
        metadata = ScanMetadata(
            timestamp="2026-01-01T00:00:00+00:00",
            hostname="host",
            slate_version="0.1.0",
            vault_root="/home/user/Vault",
            extension="md",
            elapsed_ms=1.23456,
        )
        result = VaultScanResult(metadata=metadata, files=[_entry("a.md")], summary={"total": 1})

        data = result.to_dict()

        assert data["metadata"]["elapsed_ms"] == 1.23
        assert data["metadata"]["vault_root"] == "/home/user/Vault"
        assert data["files"] == [
            {"name": "a.md", "path": "/home/user/Vault/a.md", "relativePath": "a.md"}
        ]
        assert data["summary"] == {"total": 1}
