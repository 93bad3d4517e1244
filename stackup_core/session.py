"""
Turn loop and stage driver.

Each iteration renders the game, stops once the stage is complete, and
otherwise reads one validated input and hands it to `apply_input`, which owns
the live game and returns the game to continue with (a fresh copy of the
stage-start backup after a reset).
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, List, Optional, Tuple

from .engine import Game
from .render import HELP_TEXT, pretty
from .stages import get_stages
from .user_input import MenuOption, UserInput, read_valid_input

Reader = Callable[[str], str]
Writer = Callable[[str], None]


class LoopState(Enum):
    PLAYING = 'playing'
    STAGE_COMPLETE = 'stage_complete'
    QUIT = 'quit'


def apply_input(game: Game, user_input: UserInput, backup: Game) -> Tuple[Game, LoopState]:
    """Applies one decision and returns the game to keep playing with."""
    if user_input.stack_move is not None:
        source, dest = user_input.stack_move
        game.move_legally(source, dest)
    elif user_input.menu_option is MenuOption.RESET:
        game = backup.copy()
    elif user_input.menu_option is MenuOption.UNDO:
        game.undo_move()
    elif user_input.menu_option is MenuOption.QUIT:
        return game, LoopState.QUIT
    return game, LoopState.PLAYING


def turn_loop(game: Game, read: Reader = input, write: Writer = print) -> Tuple[Game, LoopState]:
    backup = game.copy()
    while True:
        write(pretty(game))
        if game.stage_complete():
            return game, LoopState.STAGE_COMPLETE
        user_input = read_valid_input(len(game.stacks), read=read, write=write)
        if user_input.menu_option is MenuOption.HELP:
            write(HELP_TEXT)
            continue
        ledger_size = len(game.ledger)
        game, state = apply_input(game, user_input, backup)
        if state is LoopState.QUIT:
            return game, state
        if user_input.stack_move is not None and len(game.ledger) == ledger_size:
            write("That move isn't allowed.")


def stage_complete_prompt(game: Game, is_last: bool, read: Reader = input, write: Writer = print) -> None:
    name = game.stage_name or 'Stage'
    write(f'{name} complete in {game.turn} turns!')
    if is_last:
        write('You have cleared every stage. Well played!')
    else:
        read('Press Enter for the next stage...')


def play(stages: Optional[List[Game]] = None, read: Reader = input, write: Writer = print) -> LoopState:
    """Plays the stages in order. Returns QUIT if the player gave up, else STAGE_COMPLETE."""
    if stages is None:
        stages = get_stages()
    state = LoopState.STAGE_COMPLETE
    for ind, stage in enumerate(stages):
        game, state = turn_loop(stage, read=read, write=write)
        if state is LoopState.QUIT:
            write('Bye!')
            return state
        stage_complete_prompt(game, ind == len(stages) - 1, read=read, write=write)
    return state
