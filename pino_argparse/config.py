# Pino Argparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Schema loader for pino-argparse applications declared in YAML or TOML.

Example (YAML):
    program_name: deploy
    synopsis: Ship builds to an environment.
    root:
      handler: deploy.handlers.status
    commands:
      - name: push
        desc: Push a build
        handler: deploy.handlers.push
        flags:
          - long: env
            short: e
            parameter: true
"""
from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any, Callable

import toml
import yaml
from pydantic import BaseModel, Field, field_validator

from pino_argparse.cli import Cli
from pino_argparse.command import Command
from pino_argparse.exceptions import ConfigError
from pino_argparse.flag import Flag
from pino_argparse.logger import logger


def import_handler(dotted_path: str) -> Callable[..., Any]:
    """Import a callable from a dotted path like 'my.module.func'."""
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        raise ConfigError(f"Invalid handler path: {dotted_path}")
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        raise ConfigError(
            f"Could not import '{dotted_path}': {error}. Ensure the module is "
            "installed and discoverable via PYTHONPATH."
        ) from error
    try:
        handler = getattr(module, attr)
    except AttributeError as error:
        logger.error(
            "Module '%s' does not have attribute '%s': %s", module_path, attr, error
        )
        raise ConfigError(f"Module '{module_path}' has no attribute '{attr}'") from error
    if not callable(handler):
        raise ConfigError(f"Handler '{dotted_path}' is not callable")
    return handler


class RawFlag(BaseModel):
    """Raw flag model for pino-argparse configuration."""

    long: str
    desc: str = ""
    required: bool = False
    parameter: bool = False
    short: str | None = None

    @field_validator("short")
    @classmethod
    def validate_short(cls, value: str | None) -> str | None:
        if value is not None and len(value) != 1:
            raise ValueError("short must be a single character.")
        return value

    def to_flag(self) -> Flag:
        return Flag(**self.model_dump())


class RawCommand(BaseModel):
    """Raw command model for pino-argparse configuration."""

    name: str = ""
    desc: str = ""
    handler: str | None = None
    flags: list[RawFlag] = Field(default_factory=list)

    def to_command(self) -> Command:
        command = Command(
            command_name=self.name,
            desc=self.desc,
            flags=[raw_flag.to_flag() for raw_flag in self.flags],
        )
        if self.handler:
            command.handler = import_handler(self.handler)
        return command


class CliConfig(BaseModel):
    """pino-argparse configuration model."""

    program_name: str = ""
    synopsis: str = ""
    root: RawCommand = Field(default_factory=RawCommand)
    commands: list[RawCommand] = Field(default_factory=list)
    global_flags: list[RawFlag] = Field(default_factory=list)

    def to_cli(self) -> Cli:
        return Cli(
            program_name=self.program_name,
            synopsis=self.synopsis,
            root_command=self.root.to_command(),
            subcommands=[raw_command.to_command() for raw_command in self.commands],
            global_flags=[raw_flag.to_flag() for raw_flag in self.global_flags],
        )


def loader(file_path: Path | str) -> Cli:
    """
    Load a CLI schema from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the config file (`.yaml`, `.yml` or `.toml`).

    Returns:
        Cli: The schema, with handlers imported.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the format is unsupported or the content is malformed.
        ConfigError: If a handler cannot be imported.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            try:
                raw_config = yaml.safe_load(config_file)
            except yaml.YAMLError as error:
                raise ValueError(f"Malformed YAML in {path}: {error}") from error
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict):
        raise ValueError(
            "Configuration file must contain a dictionary.\n"
            "Example:\n"
            "program_name: 'my-cli'\n"
            "commands:\n"
            "  - name: 'build'\n"
            "    handler: 'my_module.build'"
        )

    logger.debug("Loading CLI schema from '%s'.", path)
    return CliConfig.model_validate(raw_config).to_cli()
