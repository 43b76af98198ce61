# reactor/data/reboot_input.py
from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import Iterable, List, TextIO

from reactor.models.geometry import Cuboid, Interval
from reactor.models.instructions import Instruction


class ParseError(RuntimeError):
    def __init__(self, message: str, line_no: int, line: str) -> None:
        super().__init__(f"line {line_no}: {message}: {line!r}")
        self.line_no = line_no
        self.line = line


_INT = r"(-?\d+)"
_RANGE = rf"{_INT}\.\.{_INT}"
_LINE_RE = re.compile(rf"^(\S+) x={_RANGE},y={_RANGE},z={_RANGE}$")


def _as_interval(lo_txt: str, hi_txt: str, axis: str, line_no: int, line: str) -> Interval:
    lo, hi = int(lo_txt), int(hi_txt)
    if hi < lo:
        raise ParseError(f"invalid region, {axis}={lo}..{hi} runs backwards", line_no, line)
    return Interval.inclusive(lo, hi)


def parse_instruction(line: str, line_no: int = 1) -> Instruction:
    """
    Parse one line: "<on|off> x=<lo>..<hi>,y=<lo>..<hi>,z=<lo>..<hi>".
    Bounds are inclusive; the region becomes [lo, hi + 1) per axis.
    """
    text = line.strip()
    m = _LINE_RE.match(text)
    if m is None:
        raise ParseError("expected '<on|off> x=<lo>..<hi>,y=<lo>..<hi>,z=<lo>..<hi>'", line_no, line)

    keyword = m.group(1)
    if keyword not in ("on", "off"):
        raise ParseError(f"unknown keyword {keyword!r}", line_no, line)

    x = _as_interval(m.group(2), m.group(3), "x", line_no, line)
    y = _as_interval(m.group(4), m.group(5), "y", line_no, line)
    z = _as_interval(m.group(6), m.group(7), "z", line_no, line)

    return Instruction(turn_on=(keyword == "on"), region=Cuboid(x, y, z))


def parse_instructions(lines: Iterable[str]) -> List[Instruction]:
    """All-or-nothing: the first bad line raises and nothing is returned."""
    out: List[Instruction] = []
    for i, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        out.append(parse_instruction(line, i))
    return out


def parse_text(text: str) -> List[Instruction]:
    return parse_instructions(text.splitlines())


def load_instructions(source: str | Path | TextIO) -> List[Instruction]:
    """
    Loads instructions from a path, from "-" (stdin), or from an open text stream.
    """
    if source == "-":
        return parse_instructions(sys.stdin)
    if hasattr(source, "read"):
        return parse_instructions(source)  # type: ignore[arg-type]

    src = Path(source)  # type: ignore[arg-type]
    return parse_text(src.read_text(encoding="utf-8"))
