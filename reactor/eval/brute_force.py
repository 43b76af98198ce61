from __future__ import annotations

from typing import List, Sequence

from reactor import configurations as cfg
from reactor.models.geometry import Cuboid
from reactor.models.instructions import Instruction


def count_lit_points(
    instructions: Sequence[Instruction],
    region: Cuboid,
    max_points: int = cfg.BRUTE_FORCE_MAX_POINTS,
) -> int:
    """
    Reference count: visit every lattice point of `region` and let the last
    instruction containing it decide its state.

    Instructions are narrowed axis by axis (x, then y, then z) so the inner
    loop only looks at instructions that can still contain the point.
    """
    if region.volume() > max_points:
        raise ValueError(
            f"region has {region.volume()} points, brute force is capped at {max_points}"
        )

    # reversed: the first hit is the last instruction touching the point
    ordered: List[Instruction] = list(reversed(instructions))

    lit = 0
    for px in range(region.x.start, region.x.end):
        on_x = [i for i in ordered if i.region.x.contains(px)]
        if not on_x:
            continue
        for py in range(region.y.start, region.y.end):
            on_xy = [i for i in on_x if i.region.y.contains(py)]
            if not on_xy:
                continue
            for pz in range(region.z.start, region.z.end):
                for instr in on_xy:
                    if instr.region.z.contains(pz):
                        if instr.turn_on:
                            lit += 1
                        break
    return lit
