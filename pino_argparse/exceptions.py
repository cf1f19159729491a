# Pino Argparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes raised by pino-argparse.

Parse-stage errors abort `Cli.run` before any handler is called, so a handler
never sees a partially parsed command line. Handler failures are wrapped in
`UserError`, which keeps the original exception as its cause.

All exceptions inherit from `ArgParseError`, the base exception for the library.

Exception Hierarchy:
- ArgParseError
    ├── InvalidCommandError
    ├── InvalidFlagError
    ├── MissingFlagValueError
    ├── UserError
    └── ConfigError
"""


class ArgParseError(Exception):
    """Base exception for pino-argparse."""


class InvalidCommandError(ArgParseError):
    """Raised when a command name matches none of the declared subcommands."""

    def __init__(self, command_name: str):
        self.command_name = command_name
        super().__init__(f"invalid command: {command_name}")


class InvalidFlagError(ArgParseError):
    """Raised when a flag-shaped token matches no flag of the active command."""

    def __init__(self, flag: str):
        self.flag = flag
        super().__init__(f"invalid flag: {flag}")


class MissingFlagValueError(ArgParseError):
    """Raised when a flag expecting a value is the last token."""

    def __init__(self, flag: str):
        self.flag = flag
        super().__init__(f"missing flag value: {flag}")


class UserError(ArgParseError):
    """Raised when a command handler fails. The handler's exception is kept as `error`."""

    def __init__(self, error: Exception):
        self.error = error
        super().__init__(str(error))


class ConfigError(ArgParseError):
    """Raised when a schema file references a handler that cannot be loaded."""
