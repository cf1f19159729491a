# Pino Argparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""cli.py

Defines `Cli`, the top-level schema of a command-line application, and the
`run()` entry point that parses a command line and dispatches it to the
selected command's handler.

Example:
    cli = Cli(
        program_name="deploy",
        synopsis="Ship builds to an environment.",
        root_command=Command(handler=show_status),
        subcommands=[
            Command(
                command_name="push",
                desc="Push a build",
                handler=push,
                flags=[Flag.new("env").with_short("e").with_parameter()],
            ),
        ],
    )
    cli.run()  # uses sys.argv
"""
from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Any, Sequence

from rich.console import Console

from pino_argparse.command import Command
from pino_argparse.console import console as default_console
from pino_argparse.exceptions import UserError
from pino_argparse.flag import Flag
from pino_argparse.logger import logger
from pino_argparse.parser.engine import parse_arguments
from pino_argparse.parser.flag_parse import FlagParse


@dataclass
class Cli:
    """
    Schema of a CLI application.

    Attributes:
        program_name (str): Name of the application.
        synopsis (str): Brief description of the application.
        root_command (Command): Command used when no subcommand is given.
        subcommands (list[Command]): Named commands selected by the first argument.
        global_flags (list[Flag]): Reserved. Not used by the parser.
    """

    program_name: str = ""
    synopsis: str = ""
    root_command: Command = field(default_factory=Command)
    subcommands: list[Command] = field(default_factory=list)
    global_flags: list[Flag] = field(default_factory=list)

    def parse(self, args: Sequence[str]) -> tuple[Command, FlagParse]:
        """Parse `args` (including the program invocation) without dispatching."""
        return parse_arguments(self, args)

    def run(self, args: Sequence[str] | None = None) -> Any:
        """
        Parse the command line and call the selected command's handler.

        Args:
            args (Sequence[str] | None): Full argument list, program invocation
                first. Defaults to `sys.argv`.

        Returns:
            Any: Whatever the handler returns.

        Raises:
            InvalidCommandError | InvalidFlagError | MissingFlagValueError:
                If the command line does not match the schema.
            UserError: If the handler raises.
        """
        if args is None:
            args = sys.argv
        command, flag_parse = self.parse(args)
        return self.dispatch(command, flag_parse)

    def dispatch(self, command: Command, flag_parse: FlagParse) -> Any:
        """Call `command.handler` with `flag_parse`, wrapping failures in `UserError`."""
        name = command.command_name or self.program_name or "<root>"
        logger.debug("[%s] Dispatching with %r", name, flag_parse)
        try:
            return command.handler(flag_parse)
        except Exception as error:
            logger.debug("[%s] Handler failed: %s", name, error, exc_info=True)
            raise UserError(error) from error

    def help_message(self) -> str:
        """Build a plain-text usage summary of the program and its commands."""
        program = self.program_name or "program"
        usage = f"usage: {program}"
        if self.subcommands:
            usage += " [command]"
        usage += " [flags] [args ...]"
        lines = [usage]
        if self.synopsis:
            lines += ["", self.synopsis]
        if self.root_command.flags:
            lines += ["", "flags:"]
            lines += _flag_lines(self.root_command.flags, indent=2)
        if self.subcommands:
            lines += ["", "commands:"]
            width = max(len(command.command_name) for command in self.subcommands)
            for command in self.subcommands:
                name = command.command_name.ljust(width)
                lines.append(f"  {name}  {command.desc}".rstrip())
                lines += _flag_lines(command.flags, indent=4)
        return "\n".join(lines)

    def print_help(self, console: Console | None = None) -> None:
        (console or default_console).print(
            self.help_message(), markup=False, highlight=False
        )


def _flag_lines(flags: Sequence[Flag], indent: int) -> list[str]:
    if not flags:
        return []
    texts = [flag.get_flag_text() for flag in flags]
    width = max(len(text) for text in texts)
    lines = []
    for flag, text in zip(flags, texts):
        desc = flag.desc
        if flag.required:
            desc = f"{desc} (required)".strip()
        lines.append(f"{' ' * indent}{text.ljust(width)}  {desc}".rstrip())
    return lines
