# Pino Argparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `FlagParse`, the parse result handed to a command handler.

A `FlagParse` records every matched flag occurrence in command-line order,
together with its captured value (if the flag takes one), and the positional
arguments left after the flag region. Handlers query it by the flag's long name:

    def build(flag_parse: FlagParse) -> None:
        if flag_parse.get_flag("verbose"):
            ...
        jobs = flag_parse.get_flag_value("jobs", int)

`get_flag_value()` returns None whether the flag is absent, was given no value,
or its value failed to convert. Use `lookup()` to tell these cases apart.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pino_argparse.flag import Flag
from pino_argparse.logger import logger
from pino_argparse.parser.utils import coerce_value


class LookupStatus(Enum):
    """Outcome of a `FlagParse.lookup()` call."""

    FOUND = "found"
    ABSENT = "absent"
    NO_VALUE = "no_value"
    INVALID = "invalid"


@dataclass(frozen=True)
class FlagLookup:
    """Result of looking up a flag value, with the reason when there is no value."""

    status: LookupStatus
    value: Any = None
    error: str | None = None

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND


class FlagParse:
    """
    Flags and positional arguments parsed for a single command invocation.

    Attributes:
        args (list[str]): Positional arguments, in command-line order.
    """

    def __init__(self) -> None:
        self._flags: list[tuple[Flag, str | None]] = []
        self.args: list[str] = []

    @property
    def flags(self) -> tuple[tuple[Flag, str | None], ...]:
        """Matched `(flag, value)` pairs in command-line order."""
        return tuple(self._flags)

    def add_flag(self, flag: Flag) -> None:
        self._flags.append((flag, None))

    def add_flag_with_value(self, flag: Flag, value: str) -> None:
        self._flags.append((flag, value))

    def _find(self, long: str) -> tuple[Flag, str | None] | None:
        return next((pair for pair in self._flags if pair[0].long == long), None)

    def get_flag(self, long: str) -> bool:
        """Check if a flag was passed."""
        return self._find(long) is not None

    def lookup(self, long: str, target_type: Any = str) -> FlagLookup:
        """
        Look up the value of the first occurrence of a flag.

        Args:
            long (str): Long name of the flag.
            target_type (Any): Type the raw value is converted to.

        Returns:
            FlagLookup: FOUND with the converted value, or ABSENT, NO_VALUE or
            INVALID (with the conversion error message).
        """
        pair = self._find(long)
        if pair is None:
            return FlagLookup(LookupStatus.ABSENT)
        raw_value = pair[1]
        if raw_value is None:
            return FlagLookup(LookupStatus.NO_VALUE)
        try:
            return FlagLookup(LookupStatus.FOUND, coerce_value(raw_value, target_type))
        except ValueError as error:
            logger.debug("Value '%s' for --%s rejected: %s", raw_value, long, error)
            return FlagLookup(LookupStatus.INVALID, error=str(error))

    def get_flag_value(self, long: str, target_type: Any = str) -> Any | None:
        """
        Get the value of a flag, converted to `target_type`.

        Returns None if the flag was not passed, took no value, or its value
        could not be converted.
        """
        return self.lookup(long, target_type).value

    def get_flag_values(self, long: str, target_type: Any = str) -> list[Any]:
        """Get the converted values of every occurrence of a repeated flag."""
        values = []
        for flag, raw_value in self._flags:
            if flag.long != long or raw_value is None:
                continue
            try:
                values.append(coerce_value(raw_value, target_type))
            except ValueError as error:
                logger.debug("Value '%s' for --%s rejected: %s", raw_value, long, error)
        return values

    def __repr__(self) -> str:
        pairs = ", ".join(f"--{flag.long}={value!r}" for flag, value in self._flags)
        return f"FlagParse(flags=[{pairs}], args={self.args!r})"
