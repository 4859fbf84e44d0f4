"""In-memory unit source with non-destructive lookahead."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

UNIT_WIDTHS = (8, 16, 32)


@dataclass
class UnitSource:
    """
    Cursor over a sequence of code units.

    Decoders peek and read through the cursor and use `mark`/`reset` to undo a
    multi-unit attempt, so a failed attempt never leaves the position advanced.
    """

    units: List[int]
    width: int = 8
    _pos: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        if self.width not in UNIT_WIDTHS:
            raise ValueError(f"Unsupported unit width: {self.width}")
        limit = 1 << self.width
        for unit in self.units:
            if not 0 <= unit < limit:
                raise ValueError(f"Unit out of range for {self.width}-bit source: {unit:#x}")

    @classmethod
    def from_bytes(cls, data: bytes) -> "UnitSource":
        return cls(list(bytes(data)), width=8)

    @classmethod
    def from_units(cls, units: Iterable[int], width: int) -> "UnitSource":
        return cls(list(units), width=width)

    @property
    def position(self) -> int:
        return self._pos

    def peek(self) -> Optional[int]:
        if self._pos >= len(self.units):
            return None
        return self.units[self._pos]

    def consume(self, count: int = 1) -> None:
        if count < 0:
            raise ValueError(f"Cannot consume a negative count: {count}")
        if self._pos + count > len(self.units):
            raise EOFError(
                f"Insufficient units: need {count}, have {self.remaining()} remaining"
            )
        self._pos += count

    def read(self) -> Optional[int]:
        unit = self.peek()
        if unit is not None:
            self._pos += 1
        return unit

    def at_end(self) -> bool:
        return self._pos >= len(self.units)

    def remaining(self) -> int:
        return len(self.units) - self._pos

    def mark(self) -> int:
        return self._pos

    def reset(self, mark: int) -> None:
        if not 0 <= mark <= len(self.units):
            raise ValueError(f"Mark outside source: {mark}")
        if mark > self._pos:
            raise ValueError(f"Cannot reset forward to {mark} from {self._pos}")
        self._pos = mark

    def rest(self) -> List[int]:
        return self.units[self._pos :]
