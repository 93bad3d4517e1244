from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, order=True)
class Kind:
    """A unit type. Kinds compare and sort by their label."""
    label: str

    def is_empty(self) -> bool:
        return self.label == ''

    def __str__(self) -> str:
        return self.label or '.'


# Sentinel returned when the top of an empty stack is inspected.
EMPTY = Kind('')


def kinds_from_labels(text: str) -> Tuple[Kind, ...]:
    """Turns a bottom-first layout string such as 'AAB' into kinds."""
    return tuple(Kind(ch) for ch in text)
