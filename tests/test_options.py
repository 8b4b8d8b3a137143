import pytest

from modulename.options import (
    CommandSpec,
    ParsedOptions,
    default_command_spec,
    default_options,
    format_help,
    parse_args,
    program_name,
)


@pytest.fixture
def spec() -> CommandSpec:
    return default_command_spec("modulename")


def test_parse_args_collects_files_and_verbosity(spec):
    outcome = parse_args(["a.txt", "-v", "b.txt", "--quiet", "-v"], spec)

    assert outcome.kind == "ok"
    assert outcome.options == ParsedOptions(files=("a.txt", "b.txt"), verbosity=1)


def test_parse_args_double_dash_ends_options(spec):
    outcome = parse_args(["-v", "--", "-q", "--help"], spec)

    assert outcome.kind == "ok"
    assert outcome.options.files == ("-q", "--help")
    assert outcome.options.verbosity == 1


def test_parse_args_lone_dash_is_positional(spec):
    outcome = parse_args(["-"], spec)

    assert outcome.options.files == ("-",)


def test_parse_args_reports_first_unknown_option(spec):
    outcome = parse_args(["--nope", "--other"], spec)

    assert outcome.kind == "error"
    assert outcome.message == "error: unknown option '--nope'"
    assert outcome.exit_code == 1


@pytest.mark.parametrize(
    ("token", "reported"), [("-xv", "-xv"), ("-vx", "-x"), ("-vxq", "-xq")]
)
def test_parse_args_reports_combined_flags_from_unknown_letter(spec, token, reported):
    outcome = parse_args([token], spec)

    assert outcome.message == f"error: unknown option '{reported}'"


def test_parse_args_rejects_value_on_flag_option(spec):
    outcome = parse_args(["--verbose=2"], spec)

    assert outcome.message == "error: unknown option '--verbose=2'"


def test_parse_args_version_in_combined_flags(spec):
    assert parse_args(["-vV"], spec).kind == "version"


def test_parse_args_version_after_double_dash_is_positional(spec):
    outcome = parse_args(["--", "--version"], spec)

    assert outcome.kind == "ok"
    assert outcome.options.files == ("--version",)


@pytest.mark.parametrize(
    ("tokens", "kind"),
    [
        (["--help", "--version"], "version"),
        (["--nope", "--version"], "version"),
        (["--version", "--nope"], "version"),
        (["--nope", "-h"], "help"),
        (["-h", "--nope"], "help"),
    ],
)
def test_parse_args_precedence(spec, tokens, kind):
    assert parse_args(tokens, spec).kind == kind


def test_parse_args_excess_arguments():
    spec = CommandSpec(name="tool", options=default_options(), max_files=1)

    outcome = parse_args(["a", "b"], spec)

    assert outcome.kind == "error"
    assert outcome.message == "error: too many arguments. Expected 1 argument but got 2."
    assert outcome.exit_code == 1


def test_parse_args_unknown_option_wins_over_excess_arguments():
    spec = CommandSpec(name="tool", options=default_options(), max_files=0)

    outcome = parse_args(["a", "--nope"], spec)

    assert outcome.message == "error: unknown option '--nope'"


def test_format_help_aligns_descriptions(spec):
    assert format_help(spec) == (
        "Usage: modulename [options] [file...]\n"
        "\n"
        "Command description.\n"
        "\n"
        "Options:\n"
        "  -q, --quiet    Print less output\n"
        "  -v, --verbose  Print more output\n"
        "  -V, --version  output the version number\n"
        "  -h, --help     display help for command\n"
    )


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("modulename", "modulename"),
        ("/usr/bin/modulename", "modulename"),
        ("bin/cmd.py", "cmd"),
    ],
)
def test_program_name(path, expected):
    assert program_name(path) == expected
