from __future__ import annotations

from collections import Counter
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence

from .entry import Entry
from .kind import Kind
from .stack import Stack


class StackIndexError(ValueError):
    """Raised when a move names a stack the game does not have."""


class Game:
    """The state of one stage: stacks, completion bitmask, turn counter and move ledger.

    `units_per_kind` and `kind_indices` are derived once from the initial stacks
    and never change. Bit `kind_indices[k]` of `kinds_status` is set once a move
    leaves every unit of kind `k` as one contiguous run on top of a stack.
    """

    def __init__(self, stacks: Sequence[Stack], stage_name: Optional[str] = None):
        self.stacks: List[Stack] = list(stacks)
        self.units_per_kind: Mapping[Kind, int] = MappingProxyType(Game.count_kinds(self.stacks))
        self.kind_indices: Mapping[Kind, int] = MappingProxyType(Game.index_kinds(self.units_per_kind))
        self.kinds_status = 0
        self.turn = 1
        self.stage_name = stage_name or ''
        self.ledger: List[Entry] = []

    def copy(self) -> 'Game':
        """A fresh game over copies of the current stacks (turn 1, empty ledger)."""
        return Game([stack.copy() for stack in self.stacks], self.stage_name)

    @staticmethod
    def count_kinds(stacks: Sequence[Stack]) -> Dict[Kind, int]:
        counts: Dict[Kind, int] = {}
        for stack in stacks:
            for unit in stack.units:
                counts[unit] = counts.get(unit, 0) + 1
        return counts

    @staticmethod
    def index_kinds(units_per_kind: Mapping[Kind, int]) -> Dict[Kind, int]:
        return {kind: i for i, kind in enumerate(sorted(units_per_kind))}

    @property
    def num_kinds(self) -> int:
        return len(self.units_per_kind)

    def kind_totals(self) -> Dict[Kind, int]:
        """Current per-kind unit counts across all stacks."""
        return dict(Counter(unit for stack in self.stacks for unit in stack.units))

    def move_is_legal(self, immigrants: Stack, residents: Stack) -> bool:
        top_immigrant = immigrants.top_unit()
        top_resident = residents.top_unit()
        tops_match = (
            top_immigrant == top_resident
            or top_immigrant.is_empty()
            or top_resident.is_empty()
        )
        there_is_room = len(immigrants) <= residents.vacancy()
        return tops_match and there_is_room

    def _update_kind_status(self, stack_ind: int) -> None:
        stack = self.stacks[stack_ind]
        immigrants = stack.pop_immigrants()
        kind = immigrants.top_unit()
        if not kind.is_empty():
            bit = 1 << self.kind_indices[kind]
            self.kinds_status |= bit
            if len(immigrants) != self.units_per_kind[kind]:
                self.kinds_status &= ~bit
        stack.push_immigrants(immigrants)

    def _check_index(self, stack_ind: int) -> None:
        if not 0 <= stack_ind < len(self.stacks):
            raise StackIndexError(f'no stack {stack_ind} (have {len(self.stacks)})')

    def move_units(self, source: int, dest: int, limit: Optional[int] = None) -> bool:
        """Moves the top run of `source` onto `dest`; returns whether the move was approved.

        A limited move is an undo replay: it skips the legality check and is not ledged.
        A rejected move puts the run back where it came from.
        """
        self._check_index(source)
        self._check_index(dest)
        immigrants = self.stacks[source].pop_immigrants(limit)
        kind = immigrants.top_unit()
        quantity = len(immigrants)
        approved = limit is not None or self.move_is_legal(immigrants, self.stacks[dest])
        self.stacks[dest if approved else source].push_immigrants(immigrants)
        if not approved:
            return False

        self._update_kind_status(source)
        self._update_kind_status(dest)
        if not self.stage_complete():
            self.turn += 1
        if limit is None:
            self.ledger.append(Entry(source, dest, kind, quantity))
        return True

    def move_legally(self, source: int, dest: int) -> bool:
        return self.move_units(source, dest)

    def move_forcefully(self, source: int, dest: int, quantity: int) -> bool:
        return self.move_units(source, dest, quantity)

    def stage_complete(self) -> bool:
        return self.kinds_status == (1 << self.num_kinds) - 1

    def undo_move(self) -> Optional[Entry]:
        """Reverses the most recent ledger entry. Returns it, or None if there was nothing to undo."""
        if not self.ledger:
            return None
        entry = self.ledger.pop()
        self.move_forcefully(entry.dest, entry.source, entry.quantity)
        return entry
