import pytest

from modulename.config import CommandOptions
from modulename.options import ParsedOptions


def test_command_options_from_parsed_keeps_flag_verbosity():
    parsed = ParsedOptions(files=("a", "b"), verbosity=-1)

    options = CommandOptions.from_parsed(parsed)

    assert options.files == ("a", "b")
    assert options.verbosity == -1


def test_command_options_normalizes_files_to_tuple():
    options = CommandOptions(files=["a", "b"])  # type: ignore[arg-type]

    assert options.files == ("a", "b")


def test_command_options_rejects_bool_verbosity():
    with pytest.raises(TypeError):
        CommandOptions(verbosity=True)


def test_command_options_rejects_non_str_files():
    with pytest.raises(TypeError):
        CommandOptions(files=("a", 1))  # type: ignore[arg-type]
