import io

import pytest

from modulename.io_context import IOContext, validate_args, validate_io


def _context(**overrides) -> IOContext:
    values = {"stdin": io.StringIO(), "stdout": io.StringIO(), "stderr": io.StringIO()}
    values.update(overrides)
    return IOContext(**values)


def test_validate_args_accepts_tuple():
    validate_args(("python", "modulename", "-v"))


@pytest.mark.parametrize("args", ["python modulename", b"ab", None, {"a", "b"}])
def test_validate_args_rejects_non_sequence(args):
    with pytest.raises(TypeError):
        validate_args(args)


def test_validate_args_rejects_short_list():
    with pytest.raises(ValueError):
        validate_args([])


def test_validate_io_checks_stdin_before_stdout():
    with pytest.raises(TypeError, match="stdin"):
        validate_io(_context(stdin=None, stdout=None))


def test_validate_io_rejects_write_only_stdin():
    class _WriteOnly:
        def write(self, data):
            return len(data)

    with pytest.raises(TypeError, match="stdin"):
        validate_io(_context(stdin=_WriteOnly()))


def test_validate_io_rejects_non_mapping_env():
    with pytest.raises(TypeError, match="env"):
        validate_io(_context(env=["A=1"]))


def test_validate_io_rejects_non_callable_operation():
    with pytest.raises(TypeError, match="operation"):
        validate_io(_context(operation="run"))


def test_from_process_uses_environment(monkeypatch):
    monkeypatch.setenv("MODULENAME_TEST_VALUE", "3")

    context = IOContext.from_process()

    assert context.env["MODULENAME_TEST_VALUE"] == "3"
    assert context.operation is None
    validate_io(context)
