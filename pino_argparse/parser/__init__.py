"""
Pino Argparse

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .engine import parse_arguments, resolve_command
from .flag_parse import FlagLookup, FlagParse, LookupStatus
from .matcher import find_command, looks_like_flag, match_flag
from .utils import coerce_value

__all__ = [
    "FlagLookup",
    "FlagParse",
    "LookupStatus",
    "coerce_value",
    "find_command",
    "looks_like_flag",
    "match_flag",
    "parse_arguments",
    "resolve_command",
]
