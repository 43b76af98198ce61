from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Tuple

from reactor.models.geometry import Cuboid, Interval


logger = logging.getLogger(__name__)


def try_merge(a: Cuboid, b: Cuboid) -> Cuboid | None:
    """
    Merge two cuboids that match exactly on two axes and touch on the third.
    Returns None when they cannot be joined into a single box.
    """
    same = [ia == ib for ia, ib in zip(a.intervals(), b.intervals())]
    if sum(same) != 2:
        return None
    axis = same.index(False)
    merged = a.interval(axis).try_merge(b.interval(axis))
    if merged is None:
        return None
    return a.replace_axis(axis, merged)


def _fixed_key(c: Cuboid, axis: int) -> Tuple[Interval, Interval]:
    ivs = c.intervals()
    return tuple(iv for i, iv in enumerate(ivs) if i != axis)  # type: ignore[return-value]


def _merge_along(cuboids: List[Cuboid], axis: int) -> Tuple[List[Cuboid], int]:
    """One sweep along `axis`: group by the two fixed axes, join contiguous runs."""
    groups: Dict[Tuple[Interval, Interval], List[Cuboid]] = {}
    for c in cuboids:
        groups.setdefault(_fixed_key(c, axis), []).append(c)

    out: List[Cuboid] = []
    merges = 0
    for members in groups.values():
        if len(members) == 1:
            out.append(members[0])
            continue

        members.sort(key=lambda c: c.interval(axis).start)
        cur = members[0]
        for nxt in members[1:]:
            joined = try_merge(cur, nxt)
            if joined is not None:
                cur = joined
                merges += 1
            else:
                out.append(cur)
                cur = nxt
        out.append(cur)

    return out, merges


def coalesce(cuboids: Iterable[Cuboid]) -> Tuple[Cuboid, ...]:
    """
    Merge face-adjacent cuboids until no further merge is possible.

    Candidates are bucketed by their two fixed axes, so each sweep is
    O(n log n). Total volume and disjointness are preserved; the result is
    a smaller cover, not necessarily the minimal one.
    """
    current = list(cuboids)
    before = len(current)

    while True:
        merged_this_round = 0
        for axis in range(3):
            current, merges = _merge_along(current, axis)
            merged_this_round += merges
        if merged_this_round == 0:
            break

    if len(current) != before:
        logger.debug("coalesce: %d -> %d cuboids", before, len(current))
    return tuple(current)
