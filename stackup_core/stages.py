from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .engine import Game
from .stack import Stack


@dataclass(frozen=True)
class Stage:
    """One puzzle: a display name, a per-stack capacity and bottom-first stack layouts."""
    name: str
    capacity: int
    layout: Tuple[str, ...]

    def build(self) -> Game:
        if not self.layout:
            raise ValueError(f'Stage {self.name!r} has no stacks')
        stacks = [Stack.from_labels(self.capacity, labels) for labels in self.layout]
        return Game(stacks, self.name)


STAGES: Tuple[Stage, ...] = (
    Stage('Warm Up', 3, ('AAB', 'BBA', '')),
    Stage('Three of a Kind', 3, ('ABC', 'BCA', 'CAB', '', '')),
    Stage('Zipper', 4, ('ABAB', 'BABA', '', '')),
    Stage('Crowded Yard', 4, ('ABCA', 'BCAB', 'CABC', '', '')),
    Stage('Final Sort', 4, ('ABCD', 'BCDA', 'CDAB', 'DABC', '', '')),
)


def get_stages() -> List[Game]:
    """Builds a fresh Game for every catalog stage, in play order."""
    return [stage.build() for stage in STAGES]


def stage_by_number(number: int) -> Stage:
    """Looks up a stage by its 1-based position in the catalog."""
    if not 1 <= number <= len(STAGES):
        raise ValueError(f'Unknown stage {number}: expected 1..{len(STAGES)}')
    return STAGES[number - 1]
