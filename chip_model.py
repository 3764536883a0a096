# chip_model.py
import random
import time
from dataclasses import dataclass
from enum import IntEnum


class ChipType(IntEnum):
    SMALL = 1
    MEDIUM = 2
    BIG = 3


class ChipInvariantError(AssertionError):
    """Raised when a chip is built from a value outside the cost tiers."""


COLORS = {
    ChipType.SMALL: "#10B981",
    ChipType.MEDIUM: "#F59E0B",
    ChipType.BIG: "#EF4444",
}


@dataclass(frozen=True)
class ChipModel:
    """
    Pure Data Class representing a single chip on the line.
    The cost tier decides how long soldering blocks.
    """
    chip_id: int
    chip_type: ChipType

    @property
    def cost(self):
        return int(self.chip_type)

    @property
    def color(self):
        return COLORS[self.chip_type]

    @classmethod
    def from_value(cls, chip_id, raw):
        try:
            chip_type = ChipType(raw)
        except ValueError:
            raise ChipInvariantError(f"Incorrect random value: {raw!r}") from None
        return cls(chip_id, chip_type)

    @classmethod
    def make(cls, chip_id, rng=None):
        rng = rng or random
        return cls.from_value(chip_id, rng.randint(1, len(ChipType)))

    def solder(self, time_unit=1.0):
        time.sleep(self.cost * time_unit)
