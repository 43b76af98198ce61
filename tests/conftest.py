"""
pytest configuration and fixtures for reactor tests
"""
import random
from pathlib import Path
from typing import List

import pytest

from reactor.data.reboot_input import parse_text, load_instructions
from reactor.engine.cuboid_set import CuboidSet
from reactor.models.geometry import Cuboid
from reactor.models.instructions import Instruction

DATA_DIR = Path(__file__).resolve().parent / "data"

# the four-step example: 27 -> 46 -> 38 -> 39
SMALL_EXAMPLE = """\
on x=10..12,y=10..12,z=10..12
on x=11..13,y=11..13,z=11..13
off x=9..11,y=9..11,z=9..11
on x=10..10,y=10..10,z=10..10
"""


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def small_example() -> List[Instruction]:
    return parse_text(SMALL_EXAMPLE)


@pytest.fixture
def small_example_file(tmp_path) -> Path:
    path = tmp_path / "small.txt"
    path.write_text(SMALL_EXAMPLE, encoding="utf-8")
    return path


@pytest.fixture
def sample_init() -> List[Instruction]:
    """22 steps, 20 of them inside -50..50 plus two far-away ones."""
    return load_instructions(DATA_DIR / "sample_init.txt")


@pytest.fixture
def sample_reboot() -> List[Instruction]:
    """60 steps spread over a large region."""
    return load_instructions(DATA_DIR / "sample_reboot.txt")


@pytest.fixture
def sample_small_region() -> List[Instruction]:
    """10 mixed on/off steps confined to -50..50."""
    return load_instructions(DATA_DIR / "sample_small_region.txt")


def cube(x0, x1, y0, y1, z0, z1) -> Cuboid:
    """Inclusive bounds, like the input format."""
    return Cuboid.from_inclusive((x0, x1), (y0, y1), (z0, z1))


def random_instructions(seed: int, count: int, lo: int = -6, hi: int = 6) -> List[Instruction]:
    rng = random.Random(seed)
    out = []
    for _ in range(count):
        bounds = []
        for _axis in range(3):
            a, b = rng.randint(lo, hi), rng.randint(lo, hi)
            bounds.append((min(a, b), max(a, b)))
        out.append(Instruction(turn_on=rng.random() < 0.6, region=Cuboid.from_inclusive(*bounds)))
    return out


def same_region(a: CuboidSet, b: CuboidSet) -> bool:
    """True if both sets cover exactly the same points."""
    rest_a = a
    for c in b:
        rest_a = rest_a.subtract(c)
    rest_b = b
    for c in a:
        rest_b = rest_b.subtract(c)
    return rest_a.volume() == 0 and rest_b.volume() == 0
