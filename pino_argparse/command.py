# Pino Argparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""command.py

Defines the `Command` dataclass: a named entry point with its own flags and
the handler called once the command line has been parsed.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable

from pino_argparse.flag import Flag

if TYPE_CHECKING:
    from pino_argparse.parser.flag_parse import FlagParse

Handler = Callable[["FlagParse"], Any]


def _noop(_flag_parse: FlagParse) -> None:
    return None


@dataclass
class Command:
    """
    Represents a command of a CLI application.

    Attributes:
        command_name (str): Name used to select the command on the command line.
        desc (str): Short description shown in help output.
        handler (Callable[[FlagParse], Any]): Called with the parse result.
            Raising an exception signals failure.
        flags (list[Flag]): Flags the command accepts, matched in order.
    """

    command_name: str = ""
    desc: str = ""
    handler: Handler = _noop
    flags: list[Flag] = field(default_factory=list)
