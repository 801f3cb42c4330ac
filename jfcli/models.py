"""Exit codes and error types shared across the CLI."""

from enum import IntEnum

__all__ = [
    "ConfigError",
    "DuplicateAliasError",
    "EmbeddedPluginError",
    "ExitCode",
    "JfError",
    "PluginError",
    "ServiceNotAvailableError",
    "SpecError",
    "UsageError",
]


class ExitCode(IntEnum):
    """Process exit codes."""

    SUCCESS = 0
    ERROR = 1


class JfError(Exception):
    """Base error; the message is meant to be shown to the user as is."""

    exit_code: ExitCode = ExitCode.ERROR


class UsageError(JfError):
    """Invalid flags or arguments on the command line."""


class ConfigError(JfError):
    """Invalid CLI settings (environment or jfcli.toml)."""


class SpecError(JfError):
    """Invalid file spec."""


class ServiceNotAvailableError(JfError):
    """No service client is installed for a delegated command."""

    def __init__(self, operation: str, group: str) -> None:
        super().__init__(f"'{operation}' is handled by an external service client which is not installed (entry point group '{group}').")
        self.operation = operation


class PluginError(JfError):
    """A plugin command could not be converted to a CLI command."""


class EmbeddedPluginError(JfError):
    """Startup failure while registering an embedded plugin."""

    def __init__(self, plugin: str, cause: Exception) -> None:
        super().__init__(f"failed adding '{plugin}' embedded plugin commands. Last error: {cause}")
        self.plugin = plugin


class DuplicateAliasError(JfError):
    """Two sibling subcommands share an alias."""

    def __init__(self, alias: str, namespace: str, subcommand: str) -> None:
        super().__init__(f"Duplicate alias '{alias}' found on {namespace} {subcommand} command.")
        self.alias = alias
        self.namespace = namespace
        self.subcommand = subcommand
