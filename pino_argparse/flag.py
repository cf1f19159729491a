# Pino Argparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Flag` dataclass describing a single command-line flag.

A flag is identified by its long name (`--verbose`) and may also carry a
single-character short name (`-v`). Flags are immutable: the builder methods
return updated copies, so a `Flag` can be shared between commands and held by
parse results without being changed underneath them.

Example:
    Flag.new("out").with_short("o").with_parameter().with_desc("Output file")
"""
from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Flag:
    """
    Represents a flag accepted by a command.

    Attributes:
        long (str): Long flag name, passed as `--long`. Used as the query key.
        desc (str): Help text for the flag.
        required (bool): Documentation only. The parser does not enforce it.
        parameter (bool): True if the token after the flag is its value.
        short (str | None): Optional short flag name, passed as `-s`.
    """

    long: str
    desc: str = ""
    required: bool = False
    parameter: bool = False
    short: str | None = None

    @classmethod
    def new(cls, long: str) -> Flag:
        """Create a flag with the given long name and no other settings."""
        return cls(long=long)

    def with_desc(self, desc: str) -> Flag:
        return replace(self, desc=desc)

    def with_required(self) -> Flag:
        return replace(self, required=True)

    def with_parameter(self) -> Flag:
        return replace(self, parameter=True)

    def with_short(self, short: str) -> Flag:
        return replace(self, short=short)

    def get_flag_text(self) -> str:
        """Get the flag names as shown in help output, e.g. `-o, --out <value>`."""
        names = []
        if self.short:
            names.append(f"-{self.short}")
        if self.long:
            names.append(f"--{self.long}")
        text = ", ".join(names)
        if self.parameter:
            text = f"{text} <value>"
        return text
