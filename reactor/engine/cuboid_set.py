from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Iterator, List, Set, Tuple

from reactor.models.geometry import Coverage, Cuboid, overlaps, total_volume
from reactor.engine.coalesce import coalesce as coalesce_cuboids
from reactor.engine.decompose import all_cover, decompose, decompose_tagged, keep_subtract, keep_union


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CuboidSet:
    """
    Immutable collection of pairwise disjoint cuboids covering the lit region.

    union() and subtract() return a new set; members are never edited in place.
    """
    cuboids: Tuple[Cuboid, ...] = ()
    auto_coalesce: bool = field(default=True, compare=False)

    def __len__(self) -> int:
        return len(self.cuboids)

    def __iter__(self) -> Iterator[Cuboid]:
        return iter(self.cuboids)

    def volume(self) -> int:
        return total_volume(self.cuboids)

    def _with(self, cuboids) -> "CuboidSet":
        if self.auto_coalesce:
            cuboids = coalesce_cuboids(cuboids)
        return CuboidSet(tuple(cuboids), auto_coalesce=self.auto_coalesce)

    def coalesce(self) -> "CuboidSet":
        return CuboidSet(coalesce_cuboids(self.cuboids), auto_coalesce=self.auto_coalesce)

    def union(self, new_cuboid: Cuboid) -> "CuboidSet":
        """Add new_cuboid's points, keeping members disjoint."""
        result: List[Cuboid] = []
        intersecting: List[Cuboid] = []

        for c in self.cuboids:
            if overlaps(c, new_cuboid):
                intersecting.append(c)
            else:
                result.append(c)

        if not intersecting:
            result.append(new_cuboid)
            return self._with(result)

        logger.debug("union: %d of %d members intersect", len(intersecting), len(self.cuboids))

        consumed: Set[int] = set()
        pending: Deque[Cuboid] = deque([new_cuboid])

        while pending:
            piece = pending.popleft()

            hit = next(
                (i for i, c in enumerate(intersecting) if i not in consumed and overlaps(c, piece)),
                None,
            )
            if hit is None:
                # clear of every remaining member: final
                result.append(piece)
                continue

            consumed.add(hit)
            for part, tags in decompose_tagged(intersecting[hit], piece, keep_union):
                if all_cover(tags, Coverage.EXISTING):
                    # sibling fragments of `piece` may still overlap it
                    intersecting.append(part)
                else:
                    pending.append(part)

        result.extend(c for i, c in enumerate(intersecting) if i not in consumed)
        return self._with(result)

    def subtract(self, region: Cuboid) -> "CuboidSet":
        """Remove region's points from every member."""
        result: List[Cuboid] = []
        for c in self.cuboids:
            if overlaps(c, region):
                result.extend(decompose(c, region, keep_subtract))
            else:
                result.append(c)
        return self._with(result)

    def apply(self, turn_on: bool, region: Cuboid) -> "CuboidSet":
        return self.union(region) if turn_on else self.subtract(region)


EMPTY = CuboidSet()


def is_disjoint(cuboids) -> bool:
    """Pairwise check; quadratic, meant for tests and diagnostics."""
    items = list(cuboids)
    for i, a in enumerate(items):
        for b in items[i + 1:]:
            if overlaps(a, b):
                return False
    return True
