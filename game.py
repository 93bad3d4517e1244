from __future__ import annotations

# Facade module that re-exports Stackup core functionality.
# Used by the Flask app and tests; single-responsibility modules live under stackup_core/*.

try:
    from .stackup_core.kind import EMPTY, Kind, kinds_from_labels  # type: ignore
    from .stackup_core.stack import Stack  # type: ignore
    from .stackup_core.entry import Entry  # type: ignore
    from .stackup_core.engine import Game, StackIndexError  # type: ignore
    from .stackup_core.stages import STAGES, Stage, get_stages, stage_by_number  # type: ignore
    from .stackup_core.render import HELP_TEXT, pretty  # type: ignore
    from .stackup_core.user_input import (  # type: ignore
        MenuOption,
        UserInput,
        parse_user_input,
        read_valid_input,
    )
    from .stackup_core.session import (  # type: ignore
        LoopState,
        apply_input,
        play,
        stage_complete_prompt,
        turn_loop,
    )
except ImportError:
    from stackup_core.kind import EMPTY, Kind, kinds_from_labels  # type: ignore
    from stackup_core.stack import Stack  # type: ignore
    from stackup_core.entry import Entry  # type: ignore
    from stackup_core.engine import Game, StackIndexError  # type: ignore
    from stackup_core.stages import STAGES, Stage, get_stages, stage_by_number  # type: ignore
    from stackup_core.render import HELP_TEXT, pretty  # type: ignore
    from stackup_core.user_input import (  # type: ignore
        MenuOption,
        UserInput,
        parse_user_input,
        read_valid_input,
    )
    from stackup_core.session import (  # type: ignore
        LoopState,
        apply_input,
        play,
        stage_complete_prompt,
        turn_loop,
    )


def main() -> None:
    # CLI driver delegated to stackup_core.cli
    try:
        from .stackup_core.cli import main as _main  # type: ignore
    except ImportError:
        from stackup_core.cli import main as _main  # type: ignore
    _main()


if __name__ == '__main__':
    main()
