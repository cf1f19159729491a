"""simple.py"""
import sys

from pino_argparse import ArgParseError, Cli, Command, Flag, FlagParse
from pino_argparse.utils import setup_logging

setup_logging(log_filename=None)


def status(flag_parse: FlagParse) -> None:
    verbose = flag_parse.get_flag("verbose")
    print(f"All systems nominal{' (verbose)' if verbose else ''}.")


def build(flag_parse: FlagParse) -> None:
    jobs = flag_parse.get_flag_value("jobs", int) or 1
    targets = flag_parse.args or ["all"]
    print(f"Building {', '.join(targets)} with {jobs} job(s).")


def test(flag_parse: FlagParse) -> None:
    if flag_parse.get_flag("fail-fast"):
        raise RuntimeError("a test failed and --fail-fast was given")
    print("Tests passed.")


cli = Cli(
    program_name="make-lite",
    synopsis="A tiny build tool.",
    root_command=Command(
        handler=status,
        flags=[Flag.new("verbose").with_short("v").with_desc("Show more output")],
    ),
    subcommands=[
        Command(
            command_name="build",
            desc="Build targets",
            handler=build,
            flags=[
                Flag.new("jobs")
                .with_short("j")
                .with_parameter()
                .with_desc("Number of parallel jobs"),
            ],
        ),
        Command(
            command_name="test",
            desc="Run the test suite",
            handler=test,
            flags=[
                Flag.new("fail-fast").with_short("x").with_desc("Stop at first failure")
            ],
        ),
    ],
)

if __name__ == "__main__":
    try:
        cli.run()
    except ArgParseError as error:
        print(f"error: {error}", file=sys.stderr)
        cli.print_help()
        sys.exit(1)
