"""Smoke tests: every walkthrough runs its assertions to completion."""

import runpy
from pathlib import Path

import pytest

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"


@pytest.mark.parametrize(
    "script",
    ["either_example.py", "traverse_example.py", "free_applicative_example.py"],
)
def test_walkthrough_runs(script: str, capsys: pytest.CaptureFixture[str]) -> None:
    runpy.run_path(str(EXAMPLES_DIR / script), run_name="__main__")
    assert "All assertions passed!" in capsys.readouterr().out


def test_walkthrough_functions_are_importable() -> None:
    namespace = runpy.run_path(str(EXAMPLES_DIR / "either_example.py"))
    magic = namespace["EitherStyle"].magic
    assert namespace["describe_exception_result"](magic("100")) == "Got reciprocal: 0.01"


def test_traverse_walkthrough_parser_is_strict() -> None:
    namespace = runpy.run_path(str(EXAMPLES_DIR / "traverse_example.py"))
    parse = namespace["parse_int_either"]
    assert parse("-12").get() == -12
    for lenient in (" 1", "1_0", "+3"):
        assert parse(lenient).is_left
    assert str(parse("1_0").value) == "invalid literal for int() with base 10: '1_0'"
