from __future__ import annotations

import argparse

from .render import HELP_TEXT
from .session import LoopState, play
from .stages import STAGES, stage_by_number


def main() -> None:
    parser = argparse.ArgumentParser(description='Stackup: sort every kind onto its own stack')
    parser.add_argument('--stage', type=int, default=1, help='Stage number to start from (1-based)')
    parser.add_argument('--list', action='store_true', help='List the stages and exit')
    args = parser.parse_args()

    if args.list:
        for number, stage in enumerate(STAGES, start=1):
            print(f'{number}. {stage.name} ({len(stage.layout)} stacks of {stage.capacity})')
        return

    try:
        stage_by_number(args.stage)
    except ValueError as e:
        parser.error(str(e))

    print(HELP_TEXT)
    print()
    games = [stage.build() for stage in STAGES[args.stage - 1:]]
    try:
        state = play(games)
    except (EOFError, KeyboardInterrupt):
        print()
        state = LoopState.QUIT
    if state is LoopState.QUIT:
        raise SystemExit(1)


if __name__ == '__main__':
    main()
