"""
Stackup core Python package.

Pure-logic building blocks for the Stackup puzzle, kept apart from the CLI
and the Flask app so they can be tested directly.
Modules:
- kind.py: Kind, EMPTY
- stack.py: Stack
- entry.py: Entry (ledger record)
- engine.py: Game
- stages.py: Stage catalog
- render.py, user_input.py: terminal collaborators
- session.py: turn loop and stage driver
"""
