"""Vault scanning module.

This module provides the vault scanner, its result models, and the
named commands that expose scanning to a front end.
"""

from slate.vault.commands import COMMANDS, CommandResponse, get_vault_path, invoke, scan_vault
from slate.vault.models import FileEntry, ScanMetadata, VaultScanResult
from slate.vault.scanner import (
    DEFAULT_EXTENSION,
    HomeDirectoryError,
    VaultError,
    VaultNotFoundError,
    VaultScanner,
    is_hidden,
    matches_extension,
    path_exists,
)

__all__ = [
    "COMMANDS",
    "DEFAULT_EXTENSION",
    "CommandResponse",
    "FileEntry",
    "HomeDirectoryError",
    "ScanMetadata",
    "VaultError",
    "VaultNotFoundError",
    "VaultScanResult",
    "VaultScanner",
    "get_vault_path",
    "invoke",
    "is_hidden",
    "matches_extension",
    "path_exists",
    "scan_vault",
]
