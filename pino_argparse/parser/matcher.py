# Pino Argparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Token classification and lookup helpers used by the parse engine.

- `looks_like_flag`: whether a token is flag-shaped (starts with `-`).
- `match_flag`: find the flag a token names, by long name for `--name` and by
  the single character after the dash for `-c`.
- `find_command`: find a subcommand by exact name.

Lookups scan in declaration order and the first match wins, so duplicate
names in a schema silently shadow the later declarations.
"""
from typing import Iterable

from pino_argparse.command import Command
from pino_argparse.flag import Flag


def looks_like_flag(token: str) -> bool:
    return token.startswith("-")


def match_flag(token: str, flags: Iterable[Flag]) -> Flag | None:
    """
    Return the first flag named by `token`, or None.

    Only the first character after a single dash is examined, so `-abc`
    looks up the short name `a`. A bare `-` names no flag.
    """
    if token.startswith("--"):
        long = token[2:]
        return next((flag for flag in flags if flag.long == long), None)
    if token.startswith("-"):
        short = token[1:2]
        if not short:
            return None
        return next((flag for flag in flags if flag.short == short), None)
    return None


def find_command(command_name: str, commands: Iterable[Command]) -> Command | None:
    return next(
        (command for command in commands if command.command_name == command_name),
        None,
    )
