import pytest

from argweave.exceptions import (
    ArgumentDefinitionError,
    ArgumentParseError,
    EmptyValueError,
)
from argweave.parser import ArgumentParser


def test_str():
    """Test the string representation of ArgumentParser."""
    parser = ArgumentParser()
    assert str(parser) == "ArgumentParser(args=0, flags=0, positional=0, required=0)"

    parser.add_argument("test", help="Test argument")
    assert str(parser) == "ArgumentParser(args=1, flags=0, positional=1, required=1)"

    parser.add_argument("-o", "--optional", help="Optional argument")
    assert str(parser) == "ArgumentParser(args=2, flags=2, positional=1, required=1)"

    parser.add_argument("--flag", help="Flag argument", required=True)
    assert str(parser) == "ArgumentParser(args=3, flags=3, positional=1, required=2)"
    assert repr(parser) == str(parser)


def test_dest_from_flags():
    parser = ArgumentParser()
    assert parser.add_argument("-v", "--dry-run").dest == "dry_run"
    assert parser.add_argument("-q").dest == "q"
    assert parser.add_argument("input-file").dest == "input_file"
    assert parser.add_argument("--x", dest="custom").dest == "custom"
    assert parser.get_argument("custom") is not None
    assert parser.get_argument("missing") is None


@pytest.mark.parametrize(
    "flags",
    [
        (),
        ("--",),
        ("-ab",),
        ("--a", "b"),
        ("a", "b"),
        ("--x=y",),
    ],
)
def test_invalid_flags(flags):
    parser = ArgumentParser()
    with pytest.raises(ArgumentDefinitionError):
        parser.add_argument(*flags)


def test_duplicate_declarations():
    parser = ArgumentParser()
    parser.add_argument("-n", "--name")
    with pytest.raises(ArgumentDefinitionError):
        parser.add_argument("--name", dest="other")
    with pytest.raises(ArgumentDefinitionError):
        parser.add_argument("--other", dest="name")


def test_invalid_declarations():
    parser = ArgumentParser()
    with pytest.raises(ArgumentDefinitionError):
        parser.add_argument("path", required=True)
    with pytest.raises(ArgumentDefinitionError):
        parser.add_argument("--x", bind=(1,))
    with pytest.raises(ArgumentDefinitionError):
        parser.add_argument("--y", nargs="x")
    with pytest.raises(ArgumentDefinitionError):
        parser.add_argument("--z", nargs=-1)
    with pytest.raises(ArgumentDefinitionError):
        parser.add_argument("pos", nargs=0)


def test_type_conversion_and_defaults():
    parser = ArgumentParser()
    parser.add_argument("--port", type=int, default=80)
    parser.add_argument("--host", default="localhost")
    parser.add_argument("--ratio", type=float)

    parsed = parser.parse_args(["--port", "8080"])
    assert parsed.get("port", int) == 8080
    assert parsed.get("host", str) == "localhost"
    assert parsed.present("port")
    assert not parsed.present("host")
    assert not parsed.has_value("ratio")
    with pytest.raises(EmptyValueError):
        parsed.get("ratio", float)
    assert parsed.as_dict() == {"port": 8080, "host": "localhost"}
    assert "ratio" in parsed
    assert list(parsed) == ["port", "host", "ratio"]
    assert len(parsed) == 3


def test_inline_value():
    parser = ArgumentParser()
    parser.add_argument("--name")
    assert parser.parse_args(["--name=a=b"]).get("name") == "a=b"


def test_flag_with_implicit_value():
    parser = ArgumentParser()
    parser.add_argument("-v", "--verbose", nargs=0, default=False, implicit=True)
    assert parser.parse_args([]).get("verbose", bool) is False
    assert parser.parse_args(["-v"]).get("verbose", bool) is True
    with pytest.raises(ArgumentParseError):
        parser.parse_args(["--verbose=yes"])


def test_required_option():
    parser = ArgumentParser()
    parser.add_argument("--token", required=True, help="API token")
    with pytest.raises(ArgumentParseError) as excinfo:
        parser.parse_args([])
    assert "token" in str(excinfo.value)
    assert parser.parse_args(["--token", "t"]).get("token") == "t"


def test_missing_positional():
    parser = ArgumentParser()
    parser.add_argument("path")
    with pytest.raises(ArgumentParseError):
        parser.parse_args([])


def test_unrecognized_option():
    parser = ArgumentParser()
    parser.add_argument("--verbose", nargs=0)
    with pytest.raises(ArgumentParseError) as excinfo:
        parser.parse_args(["--verb"])
    assert "--verbose" in str(excinfo.value)

    with pytest.raises(ArgumentParseError):
        parser.parse_args(["--unknown"])


def test_option_requires_value():
    parser = ArgumentParser()
    parser.add_argument("--name")
    parser.add_argument("--other")
    with pytest.raises(ArgumentParseError):
        parser.parse_args(["--name"])
    with pytest.raises(ArgumentParseError):
        parser.parse_args(["--name", "--other", "x"])


def test_repeated_argument_rejected():
    parser = ArgumentParser()
    parser.add_argument("--name")
    with pytest.raises(ArgumentParseError):
        parser.parse_args(["--name", "a", "--name", "b"])


def test_unexpected_positional():
    parser = ArgumentParser()
    parser.add_argument("one")
    with pytest.raises(ArgumentParseError) as excinfo:
        parser.parse_args(["a", "b"])
    assert "b" in str(excinfo.value)


def test_double_dash_ends_options():
    parser = ArgumentParser()
    parser.add_argument("--flag", nargs=0, implicit=True)
    parser.add_argument("rest", nargs="*")
    parsed = parser.parse_args(["--flag", "--", "--not-a-flag", "x"])
    assert parsed.get("flag", bool) is True
    assert parsed.get("rest", list) == ["--not-a-flag", "x"]


def test_get_before_parse():
    parser = ArgumentParser()
    parser.add_argument("--x", default=1)
    with pytest.raises(ArgumentParseError):
        parser.get("x")
    parser.parse_args([])
    assert parser.get("x", int) == 1
    with pytest.raises(KeyError):
        parser.get("y")


def test_exit_on_error(capsys):
    parser = ArgumentParser(prog="tool", exit_on_error=True)
    parser.add_argument("--n", type=int)
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["--n", "abc"])
    assert excinfo.value.code == 2
    captured = capsys.readouterr()
    assert "usage:" in captured.err
    assert "abc" in captured.err


def test_usage():
    parser = ArgumentParser(prog="tool")
    parser.add_argument("--n", type=int)
    parser.add_argument("--token", required=True)
    parser.add_argument("files", nargs="+")
    assert parser.get_usage() == "tool [--n N] --token TOKEN files [files ...]"


def test_defaults_from_sys_argv(monkeypatch):
    parser = ArgumentParser()
    parser.add_argument("--n", type=int)
    monkeypatch.setattr("sys.argv", ["tool", "--n", "3"])
    assert parser.parse_args().get("n", int) == 3
