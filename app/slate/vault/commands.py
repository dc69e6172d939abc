"""Named commands exposed to the front end.

Each command is a plain function registered under a stable name so any
transport (direct call, IPC, RPC) can dispatch to it by name. The
:func:`invoke` dispatcher converts vault errors into the human-readable
error strings the front end displays.
"""

import inspect
import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from slate.core.config import ConfigError, load_config
from slate.vault.scanner import VaultError, VaultScanner

logger = logging.getLogger(__name__)

CommandFunc = Callable[..., Any]

# Registry of dispatchable commands, keyed by function name
COMMANDS: dict[str, CommandFunc] = {}

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


@dataclass(frozen=True, slots=True)
class CommandResponse:
    """Outcome of a dispatched command.

    Attributes:
        ok: True if the command completed without error.
        data: Command return value on success.
        error: Human-readable error message on failure.
    """

    ok: bool
    data: Any = None
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        if self.ok:
            return {"ok": True, "data": self.data}
        return {"ok": False, "error": self.error}


def command(func: CommandFunc) -> CommandFunc:
    """Register a function as a dispatchable command."""
    COMMANDS[func.__name__] = func
    return func


def _make_scanner() -> VaultScanner:
    """Create a scanner using the configured extension."""
    try:
        config = load_config()
    except ConfigError as e:
        logger.warning("Ignoring invalid config, using defaults: %s", e)
        return VaultScanner()
    return VaultScanner(config.extension)


@command
def scan_vault(vault_relative_path: str) -> list[dict[str, str]]:
    """Scan a vault and return its files in wire format.

    Args:
        vault_relative_path: Vault location relative to the home directory.

    Returns:
        List of ``{"name", "path", "relativePath"}`` dicts sorted by relative path.

    Raises:
        VaultError: If the home directory or vault root cannot be resolved.
    """
    return [entry.to_dict() for entry in _make_scanner().scan(vault_relative_path)]


@command
def get_vault_path(vault_relative_path: str) -> str:
    """Return the absolute vault root for a home-relative vault path."""
    return str(VaultScanner().resolve_root(vault_relative_path))


def _to_snake_case(key: str) -> str:
    """Convert a camelCase argument name (as sent by the front end) to snake_case."""
    return _CAMEL_BOUNDARY.sub("_", key).lower()


def invoke(name: str, args: dict[str, Any] | None = None) -> CommandResponse:
    """Dispatch a command by name.

    Args:
        name: Registered command name.
        args: Keyword arguments for the command. camelCase keys are
            accepted and mapped to the snake_case parameter names.

    Returns:
        CommandResponse carrying either the result or an error string.
    """
    func = COMMANDS.get(name)
    if func is None:
        return CommandResponse(ok=False, error=f"Unknown command: {name}")

    kwargs = {_to_snake_case(key): value for key, value in (args or {}).items()}
    try:
        inspect.signature(func).bind(**kwargs)
    except TypeError as e:
        return CommandResponse(ok=False, error=f"Invalid arguments for {name}: {e}")

    try:
        data = func(**kwargs)
    except VaultError as e:
        return CommandResponse(ok=False, error=str(e))

    return CommandResponse(ok=True, data=data)
