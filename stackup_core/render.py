from __future__ import annotations

from typing import List

from .engine import Game

HELP_TEXT = """\
Move the top run of one stack onto another by typing the two stack numbers,
e.g. "1 3", "1,3" or "13". A run may land on an empty stack or on a stack
topped by the same kind, if there is room for all of it.
Menu: (u)ndo the last move, (r)eset the stage, (h)elp, (q)uit."""


def pretty(game: Game) -> str:
    """Draws the stacks as columns, top row first, with 1-based stack numbers underneath."""
    height = max((stack.capacity for stack in game.stacks), default=0)
    width = len(str(len(game.stacks)))
    lines: List[str] = []
    if game.stage_name:
        lines.append(game.stage_name)
    lines.append(f'Turn {game.turn}')
    for row in range(height - 1, -1, -1):
        cells: List[str] = []
        for stack in game.stacks:
            if row >= stack.capacity:
                cell = ' '
            elif row < len(stack):
                cell = str(stack.units[row])
            else:
                cell = '.'
            cells.append(cell.rjust(width))
        lines.append(' '.join(cells).rstrip())
    lines.append(' '.join(str(i + 1).rjust(width) for i in range(len(game.stacks))))
    return '\n'.join(lines)
