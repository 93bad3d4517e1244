from __future__ import annotations

from dataclasses import dataclass

from .kind import Kind


@dataclass(frozen=True)
class Entry:
    """One accepted player move, as recorded in the ledger."""
    source: int
    dest: int
    kind: Kind
    quantity: int
