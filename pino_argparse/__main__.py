"""
Pino Argparse

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import os
import sys
from pathlib import Path
from typing import Sequence

from rich.markup import escape

from pino_argparse.config import loader
from pino_argparse.console import console
from pino_argparse.exceptions import ArgParseError, ConfigError, UserError
from pino_argparse.logger import logger


def find_pino_config() -> Path | None:
    candidates = [
        Path.cwd() / "pino.yaml",
        Path.cwd() / "pino.toml",
        Path.cwd() / ".pino.yaml",
        Path.cwd() / ".pino.toml",
    ]
    if os.environ.get("PINO_CONFIG"):
        candidates.append(Path(os.environ["PINO_CONFIG"]))
    return next((p for p in candidates if p.is_file()), None)


def bootstrap() -> Path | None:
    config_path = find_pino_config()
    if config_path and str(config_path.parent) not in sys.path:
        sys.path.insert(0, str(config_path.parent))
    return config_path


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI declared in the nearest pino config file. Returns the exit code."""
    config_path = bootstrap()
    if not config_path:
        console.print(
            "[bold red]No pino config found.[/] Create pino.yaml or pino.toml, "
            "or set PINO_CONFIG."
        )
        return 1

    try:
        cli = loader(config_path)
    except (ConfigError, ValueError) as error:
        console.print(
            f"[bold red]Invalid config {escape(str(config_path))}:[/] "
            f"{escape(str(error))}"
        )
        return 1

    try:
        cli.run(sys.argv if argv is None else argv)
    except UserError as error:
        logger.debug("Handler failed.", exc_info=error.error)
        console.print(f"[bold red]error:[/] {escape(str(error))}")
        return 1
    except ArgParseError as error:
        console.print(f"[bold red]error:[/] {escape(str(error))}")
        cli.print_help()
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
