"""Instruction text parsing and its fail-fast errors."""

import io

import pytest

from reactor.data.reboot_input import ParseError, load_instructions, parse_instruction, parse_text
from reactor.models.geometry import Interval

from .conftest import cube


def test_parse_on_and_off():
    on = parse_instruction("on x=-20..26,y=-36..17,z=-47..7")
    assert on.turn_on is True
    assert on.region == cube(-20, 26, -36, 17, -47, 7)
    assert on.region.x == Interval(-20, 27)

    off = parse_instruction("off x=9..11,y=9..11,z=9..11")
    assert off.turn_on is False
    assert off.region.volume() == 27


def test_single_point_range():
    assert parse_instruction("on x=5..5,y=5..5,z=5..5").region.volume() == 1


def test_blank_lines_and_surrounding_whitespace_are_ignored():
    instrs = parse_text("\n  on x=0..1,y=0..1,z=0..1  \n\noff x=0..0,y=0..0,z=0..0\n")
    assert [i.turn_on for i in instrs] == [True, False]


def test_empty_text():
    assert parse_text("") == []


@pytest.mark.parametrize(
    "line",
    [
        "toggle x=0..1,y=0..1,z=0..1",
        "x=0..1,y=0..1,z=0..1",
        "on x=0..a,y=0..1,z=0..1",
        "on y=0..1,x=0..1,z=0..1",
        "on x=0..1,y=0..1",
        "on x=0..1,y=0..1,z=0..1,w=0..1",
        "ON x=0..1,y=0..1,z=0..1",
    ],
)
def test_malformed_lines_raise(line):
    with pytest.raises(ParseError):
        parse_instruction(line)


def test_backwards_range_is_rejected():
    with pytest.raises(ParseError) as exc:
        parse_instruction("on x=0..1,y=5..2,z=0..1", line_no=7)
    assert exc.value.line_no == 7
    assert "y=5..2" in str(exc.value)


def test_error_names_offending_line_and_nothing_is_returned():
    text = "on x=0..1,y=0..1,z=0..1\non x=0..1,y=0..1,z=0..1\nof x=0..1,y=0..1,z=0..1\n"
    with pytest.raises(ParseError) as exc:
        parse_text(text)
    assert exc.value.line_no == 3
    assert exc.value.line.startswith("of ")
    assert "line 3" in str(exc.value)


def test_parse_error_is_runtime_error():
    assert issubclass(ParseError, RuntimeError)


def test_load_from_path_and_stream(small_example_file):
    from_path = load_instructions(small_example_file)
    from_str_path = load_instructions(str(small_example_file))
    with small_example_file.open(encoding="utf-8") as fh:
        from_stream = load_instructions(fh)
    assert len(from_path) == 4
    assert from_path == from_str_path == from_stream


def test_load_from_stdin(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("on x=0..1,y=0..1,z=0..1\n"))
    assert load_instructions("-")[0].region.volume() == 8
