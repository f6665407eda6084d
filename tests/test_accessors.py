from __future__ import annotations

import pytest

from cmdargs import ArgumentError, MissingKeyError, parse


def test_has_and_get() -> None:
    args = parse(["--name", "nox"])
    assert args.has("name")
    assert args.get("name") == "nox"
    assert not args.has("missing")
    assert args.get("missing") == ""


def test_get_bool_textual() -> None:
    args = parse(["--a", "true", "--b", "false", "--c", "yes", "--d", "True"])
    assert args.get_bool("a") is True
    assert args.get_bool("b") is False
    assert args.get_bool("c") is False
    assert args.get_bool("d") is False


def test_get_bool_numeric() -> None:
    args = parse(["--a", "1", "--b", "0", "--c", "true"])
    assert args.get_bool("a", numeric=True) is True
    assert args.get_bool("b", numeric=True) is False
    assert args.get_bool("c", numeric=True) is False


def test_get_bool_numeric_reads_leading_integer() -> None:
    args = parse(["--a", "2", "--b", "01", "--c", " 1", "--d", "-1", "--e", "+1", "--f", "1x"])
    for key in ("a", "b", "c", "d", "e", "f"):
        assert args.get_bool(key, numeric=True) is True, key

    zeros = parse(["--a", "0", "--b", " -0", "--c", "x1", "--d", ""])
    for key in ("a", "b", "c", "d"):
        assert zeros.get_bool(key, numeric=True) is False, key


def test_get_bool_textual_skips_leading_space_and_ignores_suffix() -> None:
    args = parse(["--a", " true", "--b", "truex", "--c", "tru", "--d", " false"])
    assert args.get_bool("a") is True
    assert args.get_bool("b") is True
    assert args.get_bool("c") is False
    assert args.get_bool("d") is False


def test_get_bool_missing_key_raises() -> None:
    args = parse([])
    with pytest.raises(MissingKeyError) as excinfo:
        args.get_bool("flag")
    assert excinfo.value.key == "flag"
    assert str(excinfo.value) == "'flag' does not exist in args."


def test_get_as_converts() -> None:
    args = parse(["--count", "42", "--ratio", "0.5"])
    assert args.get_as("count", int) == 42
    assert args.get_as("ratio", float) == 0.5


def test_get_as_missing_key_raises() -> None:
    with pytest.raises(MissingKeyError):
        parse([]).get_as("count", int)


def test_get_as_converter_errors_propagate() -> None:
    args = parse(["--count", "many"])
    with pytest.raises(ValueError):
        args.get_as("count", int)


def test_missing_key_error_is_catchable_as_base_and_keyerror() -> None:
    args = parse([])
    with pytest.raises(ArgumentError):
        args.get_as("x", str)
    with pytest.raises(KeyError):
        args.get_bool("x")
