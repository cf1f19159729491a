"""handlers.py

Handlers referenced by pino.yaml.
"""
from pino_argparse import FlagParse


def status(flag_parse: FlagParse) -> None:
    print("Nothing to deploy." if not flag_parse.args else f"Pending: {flag_parse.args}")


def push(flag_parse: FlagParse) -> None:
    env = flag_parse.get_flag_value("env") or "staging"
    dry_run = flag_parse.get_flag("dry-run")
    suffix = " (dry run)" if dry_run else ""
    print(f"Pushing {flag_parse.args or ['latest']} to {env}{suffix}.")
