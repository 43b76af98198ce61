from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from reactor import configurations as cfg
from reactor.models.geometry import Cuboid, Interval
from reactor.models.instructions import Instruction, StepStats, clip_instructions
from reactor.engine.cuboid_set import CuboidSet


logger = logging.getLogger(__name__)


def region_cube(lo: int, hi: int) -> Cuboid:
    """Cube spanning lo..hi (inclusive) on every axis."""
    iv = Interval.inclusive(lo, hi)
    return Cuboid(iv, iv, iv)


INIT_REGION = region_cube(*cfg.INIT_REGION_BOUNDS)


def apply_instructions(
    instructions: Sequence[Instruction],
    coalesce: bool = cfg.COALESCE,
    trace: Optional[List[StepStats]] = None,
) -> CuboidSet:
    """
    Fold the instructions, in order, over an initially empty set.

    If `trace` is a list, one StepStats row per instruction is appended to it.
    """
    lit = CuboidSet(auto_coalesce=coalesce)

    for i, instr in enumerate(instructions):
        lit = lit.apply(instr.turn_on, instr.region)

        if trace is not None or logger.isEnabledFor(logging.DEBUG):
            volume = lit.volume()
            logger.debug(
                "step %d (%s): %d cuboids, volume=%d",
                i, "on" if instr.turn_on else "off", len(lit), volume,
            )
            if trace is not None:
                trace.append(StepStats(index=i, turn_on=instr.turn_on, cuboid_count=len(lit), volume=volume))

    return lit


def evaluate(instructions: Sequence[Instruction], coalesce: bool = cfg.COALESCE) -> int:
    """Number of lit lattice points after every instruction has been applied."""
    return apply_instructions(instructions, coalesce=coalesce).volume()


def count_in_region(
    instructions: Sequence[Instruction],
    region: Cuboid = INIT_REGION,
    coalesce: bool = cfg.COALESCE,
) -> int:
    """Lit points inside `region` only; instructions are clipped to it first."""
    return evaluate(clip_instructions(list(instructions), region), coalesce=coalesce)
