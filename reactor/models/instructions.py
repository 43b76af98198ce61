from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from reactor.models.geometry import Cuboid


@dataclass(frozen=True)
class Instruction:
    """One reboot step: turn every point of `region` on or off."""
    turn_on: bool
    region: Cuboid

    def __repr__(self) -> str:
        state = "on" if self.turn_on else "off"
        return f"Instruction({state} {self.region!r})"

    def clipped(self, bounds: Cuboid) -> Optional["Instruction"]:
        """Same instruction restricted to `bounds`; None when it falls outside."""
        inter = self.region.intersection(bounds)
        if inter is None:
            return None
        return Instruction(turn_on=self.turn_on, region=inter)


@dataclass(frozen=True)
class StepStats:
    """Size of the lit set right after one instruction was applied."""
    index: int
    turn_on: bool
    cuboid_count: int
    volume: int

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "turn_on": self.turn_on,
            "cuboid_count": self.cuboid_count,
            "volume": self.volume,
        }


def clip_instructions(instructions: List[Instruction], bounds: Cuboid) -> List[Instruction]:
    out: List[Instruction] = []
    for instr in instructions:
        clipped = instr.clipped(bounds)
        if clipped is not None:
            out.append(clipped)
    return out
