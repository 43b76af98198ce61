from __future__ import annotations

from itertools import product
from typing import Callable, List, Sequence

from reactor.models.geometry import Coverage, Cuboid
from reactor.engine.split import split


# ---------- Keep predicates ----------

# tags: one Coverage per axis (x, y, z) of a candidate piece
KeepFn = Callable[[Sequence[Coverage]], bool]


def all_cover(tags: Sequence[Coverage], side: Coverage) -> bool:
    """True if every axis tag includes `side` (the piece lies inside that source cuboid)."""
    return all(side in t for t in tags)


def keep_union(tags: Sequence[Coverage]) -> bool:
    # inside existing, or inside incoming; the shared part is emitted once
    return all_cover(tags, Coverage.EXISTING) or all_cover(tags, Coverage.INCOMING)


def keep_subtract(tags: Sequence[Coverage]) -> bool:
    return all_cover(tags, Coverage.EXISTING) and not all_cover(tags, Coverage.INCOMING)


# ---------- Decomposition ----------

def decompose_tagged(existing: Cuboid, incoming: Cuboid, keep: KeepFn):
    """
    Yield (piece, tags) for every kept cell of the per-axis split grid.

    Cells come from the cross product of split(existing.axis, incoming.axis)
    over x, y and z; they are pairwise disjoint by construction.
    """
    xs = split(existing.x, incoming.x)
    ys = split(existing.y, incoming.y)
    zs = split(existing.z, incoming.z)

    for sx, sy, sz in product(xs, ys, zs):
        tags = (sx.coverage, sy.coverage, sz.coverage)
        if keep(tags):
            yield Cuboid(sx.interval, sy.interval, sz.interval), tags


def decompose(existing: Cuboid, incoming: Cuboid, keep: KeepFn) -> List[Cuboid]:
    return [piece for piece, _ in decompose_tagged(existing, incoming, keep)]
