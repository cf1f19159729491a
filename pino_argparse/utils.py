# Pino Argparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os

import pythonjsonlogger.json
from rich.logging import RichHandler

JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
LOG_MODES = ("cli", "json")


def running_in_container() -> bool:
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as f:
            content = f.read()
    except OSError:
        return False
    return any(name in content for name in ("docker", "kubepods", "containerd"))


def _console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(show_path=False, markup=False, rich_tracebacks=True)
    handler = logging.StreamHandler()
    handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
    return handler


def _file_handler(log_filename: str, as_json: bool) -> logging.Handler:
    handler = logging.FileHandler(log_filename, "a", "UTF-8")
    if as_json:
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(name)s] [%(levelname)s] %(message)s")
        )
    return handler


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = "pino_argparse.log",
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
) -> None:
    """
    Route the `pino_argparse` logger (and the rest of the application's logs)
    to the console and, optionally, a log file.

    The parser logs command resolution and flag matches at DEBUG, and handler
    failures at DEBUG with their traceback, so lower `console_log_level` to
    see why a command line was rejected.

    Args:
        mode (str | None): "cli" for Rich console output, "json" for one JSON
            object per line. Falls back to `PINO_LOG_MODE`, then to "json"
            inside containers and "cli" elsewhere.
        log_filename (str | None): File to append logs to, or None for no file.
        json_log_to_file (bool): Write the log file as JSON lines.
        file_log_level (int): Level for the log file.
        console_log_level (int): Level for the console.

    Raises:
        ValueError: If `mode` is not "cli" or "json".
    """
    if not mode:
        mode = os.getenv("PINO_LOG_MODE") or (
            "json" if running_in_container() else "cli"
        )
    if mode not in LOG_MODES:
        raise ValueError(f"Invalid log mode: {mode}")

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()

    console_handler = _console_handler(mode)
    console_handler.setLevel(console_log_level)
    root.addHandler(console_handler)

    if log_filename:
        file_handler = _file_handler(log_filename, json_log_to_file)
        file_handler.setLevel(file_log_level)
        root.addHandler(file_handler)

    logging.getLogger("pino_argparse").debug("Logging initialized in '%s' mode.", mode)
