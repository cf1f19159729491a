from decimal import Decimal
from io import StringIO

import pytest
from rich.console import Console

from pino_argparse import (
    ArgParseError,
    Cli,
    Command,
    Flag,
    FlagParse,
    InvalidFlagError,
    UserError,
)


class Recorder:
    def __init__(self, result=None, error: Exception | None = None):
        self.calls: list[FlagParse] = []
        self.result = result
        self.error = error

    def __call__(self, flag_parse: FlagParse):
        self.calls.append(flag_parse)
        if self.error:
            raise self.error
        return self.result


def make_cli(root: Recorder, build: Recorder) -> Cli:
    return Cli(
        program_name="prog",
        synopsis="Does things.",
        root_command=Command(handler=root, flags=[Flag.new("verbose").with_short("v")]),
        subcommands=[
            Command(
                command_name="build",
                desc="Build targets",
                handler=build,
                flags=[
                    Flag.new("jobs").with_short("j").with_parameter().with_desc("Jobs"),
                    Flag.new("token").with_required(),
                ],
            ),
            Command(command_name="test"),
        ],
    )


def test_run_dispatches_to_subcommand():
    root, build = Recorder(), Recorder(result="built")
    cli = make_cli(root, build)
    assert cli.run(["prog", "build", "-j", "4", "app"]) == "built"
    assert root.calls == []
    assert len(build.calls) == 1
    flag_parse = build.calls[0]
    assert flag_parse.get_flag_value("jobs", int) == 4
    assert flag_parse.args == ["app"]


def test_run_dispatches_to_root():
    root, build = Recorder(result=0), Recorder()
    cli = make_cli(root, build)
    assert cli.run(["prog", "-v"]) == 0
    assert root.calls[0].get_flag("verbose") is True
    assert build.calls == []


def test_default_handler_is_noop():
    cli = make_cli(Recorder(), Recorder())
    assert cli.run(["prog", "test"]) is None


def test_closure_handler_captures_context():
    seen = []
    cli = Cli(
        root_command=Command(handler=lambda flag_parse: seen.extend(flag_parse.args))
    )
    cli.run(["prog", "a", "b"])
    assert seen == ["a", "b"]


def test_run_defaults_to_sys_argv(monkeypatch):
    root = Recorder()
    cli = make_cli(root, Recorder())
    monkeypatch.setattr("sys.argv", ["prog", "--verbose", "file"])
    cli.run()
    assert root.calls[0].args == ["file"]


def test_handler_error_is_wrapped():
    cause = RuntimeError("disk full")
    cli = make_cli(Recorder(), Recorder(error=cause))
    with pytest.raises(UserError) as excinfo:
        cli.run(["prog", "build"])
    assert excinfo.value.error is cause
    assert excinfo.value.__cause__ is cause
    assert str(excinfo.value) == "disk full"
    assert isinstance(excinfo.value, ArgParseError)


def test_handler_raising_parse_error_is_still_wrapped():
    cause = InvalidFlagError("--inner")
    cli = make_cli(Recorder(error=cause), Recorder())
    with pytest.raises(UserError) as excinfo:
        cli.run(["prog"])
    assert excinfo.value.error is cause


def test_parse_error_skips_handler():
    root, build = Recorder(), Recorder()
    cli = make_cli(root, build)
    with pytest.raises(InvalidFlagError):
        cli.run(["prog", "build", "--jobs", "2", "--nope"])
    assert build.calls == []


def test_parse_does_not_dispatch():
    root, build = Recorder(), Recorder()
    cli = make_cli(root, build)
    command, flag_parse = cli.parse(["prog", "build", "x"])
    assert command.command_name == "build"
    assert flag_parse.args == ["x"]
    assert build.calls == []


def test_help_message():
    cli = make_cli(Recorder(), Recorder())
    assert cli.help_message() == "\n".join(
        [
            "usage: prog [command] [flags] [args ...]",
            "",
            "Does things.",
            "",
            "flags:",
            "  -v, --verbose",
            "",
            "commands:",
            "  build  Build targets",
            "    -j, --jobs <value>  Jobs",
            "    --token             (required)",
            "  test",
        ]
    )


def test_help_message_minimal():
    assert Cli().help_message() == "usage: program [flags] [args ...]"


def test_print_help():
    output = StringIO()
    cli = Cli(program_name="prog", synopsis="Uses [brackets].")
    cli.print_help(Console(file=output, width=120))
    assert "Uses [brackets]." in output.getvalue()


def test_handler_sees_none_for_unconvertible_decimal():
    seen = []
    cli = Cli(
        root_command=Command(
            handler=lambda flag_parse: seen.append(
                flag_parse.get_flag_value("amount", Decimal)
            ),
            flags=[Flag.new("amount").with_parameter()],
        )
    )
    cli.run(["prog", "--amount", "abc"])
    assert seen == [None]
