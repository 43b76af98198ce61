from __future__ import annotations

from typing import List

from reactor.models.geometry import Coverage, Interval, Subrange


def _covered(interval: Interval, lo: int, hi: int) -> bool:
    # [lo, hi) never straddles a boundary of `interval`, so containment is enough
    return interval.start <= lo and hi <= interval.end


def split(a: Interval, b: Interval) -> List[Subrange]:
    """
    Partition the extents of `a` and `b` into ordered, non-overlapping
    subranges tagged with the side(s) covering them.

    Boundary sweep: every consecutive pair of the sorted distinct bounds
    {a.start, a.end, b.start, b.end} is a candidate; the gap between two
    disjoint intervals is covered by neither side and is dropped.

      a == b             -> [AB]
      a contains b       -> [A, AB, A]
      a, b disjoint      -> [A, B] (or [B, A])
    """
    bounds = sorted({a.start, a.end, b.start, b.end})

    out: List[Subrange] = []
    for lo, hi in zip(bounds, bounds[1:]):
        coverage = Coverage.NONE
        if _covered(a, lo, hi):
            coverage |= Coverage.EXISTING
        if _covered(b, lo, hi):
            coverage |= Coverage.INCOMING
        if coverage:
            out.append(Subrange(Interval(lo, hi), coverage))
    return out
