from __future__ import annotations

from typing import Iterable, List, Optional

from .kind import EMPTY, Kind, kinds_from_labels


class Stack:
    """A capacity-bounded pile of units. The last element of `units` is the top."""

    def __init__(self, capacity: int, units: Iterable[Kind] = ()):
        self.capacity = capacity
        self.units: List[Kind] = list(units)
        if len(self.units) > capacity:
            raise ValueError(f'{len(self.units)} units exceed capacity {capacity}')

    @classmethod
    def from_labels(cls, capacity: int, labels: str) -> 'Stack':
        return cls(capacity, kinds_from_labels(labels))

    def __len__(self) -> int:
        return len(self.units)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stack):
            return NotImplemented
        return self.capacity == other.capacity and self.units == other.units

    def __repr__(self) -> str:
        return f'Stack({self.capacity}, {self.labels()!r})'

    def is_empty(self) -> bool:
        return not self.units

    def top_unit(self) -> Kind:
        return self.units[-1] if self.units else EMPTY

    def vacancy(self) -> int:
        return self.capacity - len(self.units)

    def labels(self) -> str:
        """Bottom-first label string, the inverse of from_labels."""
        return ''.join(k.label for k in self.units)

    def pop_immigrants(self, limit: Optional[int] = None) -> 'Stack':
        """Removes the maximal top run of the top kind, at most `limit` units when given.

        The run comes back as its own Stack, filled to capacity.
        """
        top = self.top_unit()
        count = 0
        while count < len(self.units) and self.units[-1 - count] == top:
            if limit is not None and count >= limit:
                break
            count += 1
        run = self.units[len(self.units) - count:]
        del self.units[len(self.units) - count:]
        return Stack(len(run), run)

    def push_immigrants(self, immigrants: 'Stack') -> None:
        if len(immigrants) > self.vacancy():
            raise ValueError(f'no room for {len(immigrants)} units (vacancy {self.vacancy()})')
        self.units.extend(immigrants.units)

    def copy(self) -> 'Stack':
        return Stack(self.capacity, self.units)
