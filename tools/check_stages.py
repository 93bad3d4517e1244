#!/usr/bin/env python3
"""
Check that every catalog stage can be solved, by breadth-first search over legal moves.

- Explores player moves only (no undo), deduplicating positions by stack contents
  and completion bitmask.
- Prints a JSON summary per stage: solvable, shortest solution, final turn count,
  and the number of positions explored.

Usage:
  python tools/check_stages.py                 # every stage
  python tools/check_stages.py 2 200000        # stage 2 only, explore at most 200k positions
"""
from __future__ import annotations

import json
import os
import sys
from collections import deque
from typing import Deque, Dict, List, Optional, Set, Tuple

# Allow running from the repo root or from tools/
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from stackup_core.engine import Game  # noqa: E402
from stackup_core.stages import STAGES, stage_by_number  # noqa: E402

Move = Tuple[int, int]
Key = Tuple[Tuple[str, ...], int]


def _clone(g: Game) -> Game:
    c = g.copy()
    c.kinds_status = g.kinds_status
    c.turn = g.turn
    return c


def _key(g: Game) -> Key:
    return tuple(s.labels() for s in g.stacks), g.kinds_status


def shortest_solution(game: Game, max_states: int = 500_000) -> Tuple[Optional[List[Move]], Optional[Game], int]:
    """Returns (moves, final game, positions explored); moves is None if no solution was found."""
    start = _clone(game)
    if start.stage_complete():
        return [], start, 1
    seen: Set[Key] = {_key(start)}
    queue: Deque[Tuple[Game, List[Move]]] = deque([(start, [])])
    n = len(start.stacks)
    while queue and len(seen) < max_states:
        g, path = queue.popleft()
        for source in range(n):
            if g.stacks[source].is_empty():
                continue
            for dest in range(n):
                if dest == source:
                    continue
                nxt = _clone(g)
                if not nxt.move_legally(source, dest):
                    continue
                k = _key(nxt)
                if k in seen:
                    continue
                seen.add(k)
                if nxt.stage_complete():
                    return path + [(source, dest)], nxt, len(seen)
                queue.append((nxt, path + [(source, dest)]))
    return None, None, len(seen)


def check(numbers: List[int], max_states: int) -> List[Dict[str, object]]:
    report: List[Dict[str, object]] = []
    for number in numbers:
        stage = stage_by_number(number)
        moves, final, explored = shortest_solution(stage.build(), max_states)
        report.append({
            "stage": number,
            "name": stage.name,
            "solvable": moves is not None,
            "moves": [[s + 1, d + 1] for s, d in moves] if moves is not None else None,
            "turn": final.turn if final is not None else None,
            "explored": explored,
        })
    return report


if __name__ == "__main__":
    which = [int(sys.argv[1])] if len(sys.argv) > 1 else list(range(1, len(STAGES) + 1))
    cap = int(sys.argv[2]) if len(sys.argv) > 2 else 500_000
    result = check(which, cap)
    print(json.dumps(result, indent=2))
    sys.exit(0 if all(r["solvable"] for r in result) else 1)
