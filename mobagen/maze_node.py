"""The four walls around one cell of a maze."""

from __future__ import annotations

from dataclasses import dataclass

_BIT_COUNT = 4


@dataclass(frozen=True)
class Node:
    """Walls on each side of a maze cell; True means the wall is present."""

    north: bool = False
    east: bool = False
    south: bool = False
    west: bool = False

    def to_bits(self) -> int:
        """Pack the walls into an int: north is bit 0, then east, south, west."""
        return (
            int(self.north)
            | int(self.east) << 1
            | int(self.south) << 2
            | int(self.west) << 3
        )

    @classmethod
    def from_bits(cls, data: int) -> Node:
        """Unpack walls from the layout produced by ``to_bits``."""
        if not 0 <= data < 1 << _BIT_COUNT:
            raise ValueError(f"node bits must be in 0..15, got {data}")
        return cls(
            north=bool(data & 1),
            east=bool(data >> 1 & 1),
            south=bool(data >> 2 & 1),
            west=bool(data >> 3 & 1),
        )