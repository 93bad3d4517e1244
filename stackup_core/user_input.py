from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple


class MenuOption(Enum):
    RESET = 'reset'
    UNDO = 'undo'
    HELP = 'help'
    QUIT = 'quit'


_MENU_WORDS = {
    'r': MenuOption.RESET, 'reset': MenuOption.RESET,
    'u': MenuOption.UNDO, 'undo': MenuOption.UNDO,
    'h': MenuOption.HELP, 'help': MenuOption.HELP, '?': MenuOption.HELP,
    'q': MenuOption.QUIT, 'quit': MenuOption.QUIT,
}


@dataclass(frozen=True)
class UserInput:
    """Exactly one of a 0-based (from, to) stack pair or a menu option."""
    stack_move: Optional[Tuple[int, int]] = None
    menu_option: Optional[MenuOption] = None


def parse_user_input(text: str, num_stacks: int) -> UserInput:
    """Parses '1 3', '1,3', '13' (1-based stack numbers) or a menu word.

    Only checks that the stacks exist; whether the move is legal is up to the game.
    """
    text = text.strip().lower()
    if text in _MENU_WORDS:
        return UserInput(menu_option=_MENU_WORDS[text])
    sep = ',' if ',' in text else ' '
    parts = [t.strip() for t in text.split(sep) if t.strip() != '']
    if len(parts) == 1 and len(parts[0]) == 2:
        parts = [parts[0][0], parts[0][1]]
    if len(parts) != 2 or not all(p.isdigit() for p in parts):
        raise ValueError(f'Could not parse {text!r}')
    source, dest = int(parts[0]), int(parts[1])
    for n in (source, dest):
        if not 1 <= n <= num_stacks:
            raise ValueError(f'No stack {n}: pick 1..{num_stacks}')
    return UserInput(stack_move=(source - 1, dest - 1))


def read_valid_input(
    num_stacks: int,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> UserInput:
    while True:
        text = read('Move (from to) or u/r/h/q: ')
        try:
            return parse_user_input(text, num_stacks)
        except ValueError as e:
            write(f'{e}. Try again.')
