from __future__ import annotations

from dataclasses import dataclass
from enum import Flag
from typing import Optional, Tuple


@dataclass(frozen=True)
class Interval:
    """Half-open integer range [start, end)."""
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start >= self.end:
            raise ValueError(
                f"Interval start ({self.start}) must be < end ({self.end})"
            )

    def __repr__(self) -> str:
        return f"[{self.start}..{self.end - 1}]"

    @classmethod
    def inclusive(cls, lo: int, hi: int) -> "Interval":
        return cls(lo, hi + 1)

    @property
    def length(self) -> int:
        return self.end - self.start

    def contains(self, value: int) -> bool:
        return self.start <= value < self.end

    def intersects(self, other: "Interval") -> bool:
        """
        True only if the ranges share at least one value.
        Touching ends (self.end == other.start) is NOT overlap.
        """
        return not (other.end <= self.start or self.end <= other.start)

    def intersection(self, other: "Interval") -> Optional["Interval"]:
        lo = max(self.start, other.start)
        hi = min(self.end, other.end)
        if hi <= lo:
            return None
        return Interval(lo, hi)

    def try_merge(self, other: "Interval") -> Optional["Interval"]:
        """Join two contiguous intervals; None unless one ends where the other starts."""
        if self.end == other.start:
            return Interval(self.start, other.end)
        if other.end == self.start:
            return Interval(other.start, self.end)
        return None


class Coverage(Flag):
    """Which of the two split sources cover a subrange."""
    NONE = 0
    EXISTING = 1   # side A
    INCOMING = 2   # side B
    BOTH = EXISTING | INCOMING


@dataclass(frozen=True)
class Subrange:
    interval: Interval
    coverage: Coverage

    def __repr__(self) -> str:
        side_a = "A" if Coverage.EXISTING in self.coverage else ""
        side_b = "B" if Coverage.INCOMING in self.coverage else ""
        return f"{self.interval!r}({side_a}{side_b})"


@dataclass(frozen=True)
class Cuboid:
    x: Interval
    y: Interval
    z: Interval

    def __repr__(self) -> str:
        return f"Cuboid(x={self.x!r}, y={self.y!r}, z={self.z!r})"

    @classmethod
    def from_inclusive(
        cls,
        x: Tuple[int, int],
        y: Tuple[int, int],
        z: Tuple[int, int],
    ) -> "Cuboid":
        """Build from puzzle-style inclusive lo..hi bounds per axis."""
        return cls(Interval.inclusive(*x), Interval.inclusive(*y), Interval.inclusive(*z))

    def intervals(self) -> Tuple[Interval, Interval, Interval]:
        return (self.x, self.y, self.z)

    def interval(self, axis: int) -> Interval:
        return self.intervals()[axis]

    def replace_axis(self, axis: int, interval: Interval) -> "Cuboid":
        parts = list(self.intervals())
        parts[axis] = interval
        return Cuboid(*parts)

    def volume(self) -> int:
        return self.x.length * self.y.length * self.z.length

    def contains(self, px: int, py: int, pz: int) -> bool:
        return self.x.contains(px) and self.y.contains(py) and self.z.contains(pz)

    def intersects(self, other: "Cuboid") -> bool:
        return (
            self.x.intersects(other.x) and
            self.y.intersects(other.y) and
            self.z.intersects(other.z)
        )

    def intersection(self, other: "Cuboid") -> Optional["Cuboid"]:
        x = self.x.intersection(other.x)
        y = self.y.intersection(other.y)
        z = self.z.intersection(other.z)
        if x is None or y is None or z is None:
            return None
        return Cuboid(x, y, z)


#* Geometry utility functions

def overlaps(a: Cuboid, b: Cuboid) -> bool:
    """
    True only if there is positive-volume intersection.
    Touching faces/edges/corners is NOT overlap.
    """
    return a.intersects(b)


def overlap_volume(a: Cuboid, b: Cuboid) -> int:
    inter = a.intersection(b)
    return inter.volume() if inter is not None else 0


def total_volume(cuboids) -> int:
    return sum(c.volume() for c in cuboids)
