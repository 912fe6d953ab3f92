import pytest

from cmdtree.exceptions import ArityError, CommandDeclarationError
from cmdtree.parser import UNBOUNDED, ArgumentSpec


def test_default_spec_accepts_nothing():
    spec = ArgumentSpec()
    assert spec.name == "argument"
    assert spec.values == []
    spec.validate()
    spec.capture(["extra"])
    with pytest.raises(ArityError):
        spec.validate()


@pytest.mark.parametrize("minimum, maximum", [(-1, 1), (2, 1), (0, -1)])
def test_invalid_bounds(minimum, maximum):
    with pytest.raises(CommandDeclarationError):
        ArgumentSpec("files", minimum, maximum)


def test_values_start_as_defaults():
    defaults = ["./"]
    spec = ArgumentSpec("source_dir", 1, 1, defaults)
    assert spec.values == ["./"]
    spec.values.append("other")
    assert spec.defaults == ["./"]
    assert defaults == ["./"]


def test_capture_replaces_values():
    spec = ArgumentSpec("source_dir", 1, 2, ["./"])
    spec.capture(["src", "lib"])
    assert spec.values == ["src", "lib"]
    spec.validate()


def test_validate_too_few():
    spec = ArgumentSpec("program_name", 1, 1)
    with pytest.raises(ArityError) as excinfo:
        spec.validate()
    error = excinfo.value
    assert (error.argument_name, error.got, error.minimum, error.maximum) == (
        "program_name",
        0,
        1,
        1,
    )
    assert "Missing argument" in str(error)


def test_validate_too_many():
    spec = ArgumentSpec("program_name", 1, 1)
    spec.capture(["A", "B"])
    with pytest.raises(ArityError) as excinfo:
        spec.validate()
    assert excinfo.value.got == 2
    assert "Too many arguments" in str(excinfo.value)


def test_unbounded():
    spec = ArgumentSpec("files", 0, UNBOUNDED)
    assert spec.is_unbounded
    spec.capture([str(n) for n in range(100)])
    spec.validate()


def test_reset_restores_defaults():
    spec = ArgumentSpec("source_dir", 1, 1, ["./"])
    spec.capture(["src"])
    spec.reset()
    assert spec.values == ["./"]


@pytest.mark.parametrize(
    "minimum, maximum, expected",
    [
        (0, 0, ""),
        (1, 1, "<file>"),
        (0, 1, "[<file>]"),
        (2, 2, "<file> <file>"),
        (1, 5, "<file> [<file> ...]"),
        (2, 5, "<file> <file> ..."),
        (0, UNBOUNDED, "[<file> <file> ...]"),
    ],
)
def test_usage_text(minimum, maximum, expected):
    assert ArgumentSpec("file", minimum, maximum).get_usage_text() == expected


def test_unbounded_never_reports_too_many():
    spec = ArgumentSpec("files", 1, UNBOUNDED)
    spec.capture(["a"] * 1000)
    spec.validate()
    assert spec.get_usage_text() == "<files> [<files> ...]"
