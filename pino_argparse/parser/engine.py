# Pino Argparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Implements the parse stage of `Cli.run()`.

The command line is read left to right:

    <program> [<command>] (--<long> [<value>] | -<short> [<value>])* [<arg> ...]

1. The first token (the program invocation) is skipped.
2. If the schema declares subcommands and the next token is not flag-shaped,
   it names the command. An unknown name raises `InvalidCommandError`.
   Otherwise the root command is used.
3. Flag-shaped tokens are matched against the command's flags. A flag that
   takes a parameter consumes the following token as its value, whatever it
   looks like.
4. The first token that is not flag-shaped ends the flag region. It and every
   token after it are positional arguments.

Any error aborts the parse; no partial result is produced.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from pino_argparse.command import Command
from pino_argparse.exceptions import (
    InvalidCommandError,
    InvalidFlagError,
    MissingFlagValueError,
)
from pino_argparse.logger import logger
from pino_argparse.parser.flag_parse import FlagParse
from pino_argparse.parser.matcher import find_command, looks_like_flag, match_flag

if TYPE_CHECKING:
    from pino_argparse.cli import Cli


def resolve_command(cli: Cli, tokens: Sequence[str]) -> tuple[Command, int]:
    """
    Select the command named by the leading token.

    Returns:
        tuple[Command, int]: The command and the number of tokens it consumed.

    Raises:
        InvalidCommandError: If the token names no declared subcommand.
    """
    if not tokens or not cli.subcommands or looks_like_flag(tokens[0]):
        return cli.root_command, 0

    command_name = tokens[0]
    command = find_command(command_name, cli.subcommands)
    if command is None:
        logger.debug("No subcommand named '%s'.", command_name)
        raise InvalidCommandError(command_name)
    return command, 1


def parse_arguments(cli: Cli, args: Sequence[str]) -> tuple[Command, FlagParse]:
    """
    Parse a full argument list (including the program invocation) against `cli`.

    Raises:
        InvalidCommandError: If the command name is unknown.
        InvalidFlagError: If a flag-shaped token matches no flag.
        MissingFlagValueError: If a flag expecting a value is the last token.
    """
    tokens = list(args[1:])
    command, position = resolve_command(cli, tokens)
    logger.debug("Resolved command '%s'.", command.command_name or "<root>")

    flag_parse = FlagParse()
    while position < len(tokens):
        token = tokens[position]
        if not looks_like_flag(token):
            break

        flag = match_flag(token, command.flags)
        if flag is None:
            raise InvalidFlagError(token)

        if flag.parameter:
            if position + 1 >= len(tokens):
                raise MissingFlagValueError(token)
            flag_parse.add_flag_with_value(flag, tokens[position + 1])
            position += 2
        else:
            flag_parse.add_flag(flag)
            position += 1
        logger.debug("Matched %s as --%s.", token, flag.long)

    flag_parse.args.extend(tokens[position:])
    return command, flag_parse
