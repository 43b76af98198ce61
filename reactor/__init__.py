"""
reactor - exact cuboid set algebra for on/off reboot instructions.

Counts the lattice points left lit after a sequence of instructions, each
switching an axis-aligned box on or off, without visiting individual points.
"""

__version__ = "0.1.0"

from reactor.models.geometry import Cuboid, Interval
from reactor.models.instructions import Instruction
from reactor.engine.cuboid_set import CuboidSet
from reactor.engine.driver import apply_instructions, count_in_region, evaluate
from reactor.data.reboot_input import ParseError, parse_instructions, parse_text

__all__ = [
    "Cuboid",
    "CuboidSet",
    "Instruction",
    "Interval",
    "ParseError",
    "apply_instructions",
    "count_in_region",
    "evaluate",
    "parse_instructions",
    "parse_text",
]
