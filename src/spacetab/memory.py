"""
Memory Stores
=============

The machine addresses memory by non-negative integer and stores signed
32-bit values. Two stores are provided:

- SparseMemory: grows on demand, unset cells read as zero. This is the
  default, and with it an out-of-bounds access cannot happen.
- FixedMemory: a bounded array of cells. Any access at or beyond its
  capacity raises OutOfBoundsError. FixedMemory(0) has no cells at all,
  so the first memory access of a program fails.
"""

from typing import Optional, Protocol

from spacetab.errors import OutOfBoundsError, SourceLocation


class MemoryProtocol(Protocol):
    """Interface the machine expects from a memory store."""

    def read(self, address: int, location: Optional[SourceLocation] = None) -> int:
        ...

    def write(self, address: int, value: int, location: Optional[SourceLocation] = None) -> None:
        ...

    def cells(self) -> dict[int, int]:
        ...


class SparseMemory:
    """Growable dict-backed store; unset cells read 0."""

    def __init__(self):
        self._data: dict[int, int] = {}

    def read(self, address: int, location: Optional[SourceLocation] = None) -> int:
        return self._data.get(address, 0)

    def write(self, address: int, value: int, location: Optional[SourceLocation] = None) -> None:
        if value:
            self._data[address] = value
        else:
            self._data.pop(address, None)

    def cells(self) -> dict[int, int]:
        """Return a copy of all non-zero cells."""
        return dict(self._data)

    def __len__(self) -> int:
        return len(self._data)


class FixedMemory:
    """
    Bounded store of `capacity` cells, all initialised to zero.

    Attributes:
        capacity: Number of addressable cells
    """

    def __init__(self, capacity: int):
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self._data = [0] * capacity

    def _check(self, address: int, location: Optional[SourceLocation]) -> None:
        if not 0 <= address < self.capacity:
            raise OutOfBoundsError(address, self.capacity, location=location)

    def read(self, address: int, location: Optional[SourceLocation] = None) -> int:
        self._check(address, location)
        return self._data[address]

    def write(self, address: int, value: int, location: Optional[SourceLocation] = None) -> None:
        self._check(address, location)
        self._data[address] = value

    def cells(self) -> dict[int, int]:
        """Return all non-zero cells keyed by address."""
        return {address: value for address, value in enumerate(self._data) if value}

    def __len__(self) -> int:
        return self.capacity
