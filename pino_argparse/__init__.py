"""
Pino Argparse

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .cli import Cli
from .command import Command
from .exceptions import (
    ArgParseError,
    ConfigError,
    InvalidCommandError,
    InvalidFlagError,
    MissingFlagValueError,
    UserError,
)
from .flag import Flag
from .logger import logger
from .parser import FlagLookup, FlagParse, LookupStatus

__all__ = [
    "ArgParseError",
    "Cli",
    "Command",
    "ConfigError",
    "Flag",
    "FlagLookup",
    "FlagParse",
    "InvalidCommandError",
    "InvalidFlagError",
    "LookupStatus",
    "MissingFlagValueError",
    "UserError",
    "logger",
]
