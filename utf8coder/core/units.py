"""UTF-16 code unit buffers."""

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

MAX_UNIT = 0xFFFF


@dataclass(frozen=True)
class UnitBuffer:
    """Immutable, indexable view over UTF-16 code units.

    Surrogates are accepted in any order; only the 16-bit range is checked.
    """

    units: Tuple[int, ...] = ()

    def __post_init__(self) -> None:
        collected = tuple(self.units)
        for index, unit in enumerate(collected):
            if not 0 <= unit <= MAX_UNIT:
                raise ValueError(f"code unit {unit!r} at index {index} does not fit in 16 bits")
        object.__setattr__(self, "units", collected)

    @classmethod
    def from_units(cls, units: Iterable[int]) -> "UnitBuffer":
        """Build a buffer from raw 16-bit values."""
        return cls(tuple(units))

    def __len__(self) -> int:
        return len(self.units)

    def __getitem__(self, index: int) -> int:
        return self.units[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self.units)


def units_from_string(text: str) -> UnitBuffer:
    """Return the UTF-16 code units of ``text`` in order.

    Lone surrogates in ``text`` are kept as single units.
    """
    units = []
    for char in text:
        value = ord(char)
        if value <= MAX_UNIT:
            units.append(value)
        else:
            value -= 0x10000
            units.append(0xD800 | (value >> 10))
            units.append(0xDC00 | (value & 0x3FF))
    return UnitBuffer(tuple(units))
