from __future__ import annotations

import os
import sys
from typing import Any, Dict, List, Tuple

from flask import Flask, jsonify, request

# Ensure package imports work when executed directly from repo root or as module
if __package__ in (None, ""):
    sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

try:
    from .game import (  # type: ignore
        STAGES,
        Entry as GEntry,
        Game as GGame,
        Kind as GKind,
        Stack as GStack,
        StackIndexError,
        stage_by_number,
    )
except ImportError:
    from game import (  # type: ignore
        STAGES,
        Entry as GEntry,
        Game as GGame,
        Kind as GKind,
        Stack as GStack,
        StackIndexError,
        stage_by_number,
    )

app = Flask(__name__)


def _catalog() -> List[Dict[str, Any]]:
    return [
        {"number": n, "name": s.name, "stacks": len(s.layout), "capacity": int(s.capacity)}
        for n, s in enumerate(STAGES, start=1)
    ]


def _entry_to_json(e: GEntry) -> Dict[str, Any]:
    return {"from": int(e.source), "to": int(e.dest), "kind": e.kind.label, "quantity": int(e.quantity)}


def state_to_json(g: GGame, stage: int) -> Dict[str, Any]:
    return {
        "stage": int(stage),
        "stageName": g.stage_name,
        "capacities": [int(s.capacity) for s in g.stacks],
        "stacks": [s.labels() for s in g.stacks],
        "turn": int(g.turn),
        "kindsStatus": int(g.kinds_status),
        "ledger": [_entry_to_json(e) for e in g.ledger],
        "complete": g.stage_complete(),
        "lastStage": stage == len(STAGES),
    }


def json_to_state(obj: Dict[str, Any]) -> Tuple[GGame, int]:
    """Rebuilds a Game (and its stage number) from state_to_json output."""
    stage = int(obj["stage"])
    stage_by_number(stage)
    capacities = [int(c) for c in obj["capacities"]]
    labels = [str(s) for s in obj["stacks"]]
    if len(capacities) != len(labels):
        raise ValueError("capacities and stacks differ in length")
    g = GGame([GStack.from_labels(c, s) for c, s in zip(capacities, labels)], str(obj.get("stageName", "")))
    g.turn = int(obj.get("turn", 1))
    status = int(obj.get("kindsStatus", 0))
    if not 0 <= status < (1 << g.num_kinds):
        raise ValueError(f"kindsStatus {status} out of range")
    g.kinds_status = status
    g.ledger = [
        GEntry(int(e["from"]), int(e["to"]), GKind(str(e["kind"])), int(e["quantity"]))
        for e in obj.get("ledger", [])
    ]
    return g, stage


def _load_state() -> Tuple[GGame, int, Dict[str, Any]]:
    body = request.get_json(force=True, silent=True) or {}
    s_in = body.get("state")
    if not isinstance(s_in, dict):
        raise ValueError("state required")
    g, stage = json_to_state(s_in)
    return g, stage, body


def _bad_request(msg: str) -> Any:
    return jsonify({"ok": False, "error": msg}), 400


@app.get("/")
def index() -> Any:
    return jsonify({"ok": True, "name": "Stackup", "stages": _catalog()})


@app.get("/api/stages")
def api_stages() -> Any:
    return jsonify({"ok": True, "stages": _catalog()})


@app.post("/api/new")
def api_new() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        stage = int(body.get("stage", 1))
        g = stage_by_number(stage).build()
    except (TypeError, ValueError) as e:
        return _bad_request(str(e))
    return jsonify({"ok": True, "state": state_to_json(g, stage)})


@app.post("/api/move")
def api_move() -> Any:
    try:
        g, stage, body = _load_state()
        source, dest = (int(i) for i in body["move"])
        moved = g.move_legally(source, dest)
    except StackIndexError as e:
        return _bad_request(str(e))
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(f"bad state: {e}")
    if not moved:
        return jsonify({"ok": False, "error": "Illegal move", "state": state_to_json(g, stage)}), 400
    return jsonify({"ok": True, "state": state_to_json(g, stage)})


@app.post("/api/undo")
def api_undo() -> Any:
    try:
        g, stage, _ = _load_state()
        undone = g.undo_move()
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(f"bad state: {e}")
    return jsonify({
        "ok": True,
        "undone": _entry_to_json(undone) if undone is not None else None,
        "state": state_to_json(g, stage),
    })


@app.post("/api/reset")
def api_reset() -> Any:
    try:
        _, stage, _ = _load_state()
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(f"bad state: {e}")
    g = stage_by_number(stage).build()
    return jsonify({"ok": True, "state": state_to_json(g, stage)})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="127.0.0.1", port=int(os.getenv("PORT", "5000")), debug=debug)
