"""
Deal result serialization.

Converts DealResult records to and from JSON-compatible dicts, and saves or
loads a list of them (e.g. a simulation run) to a JSON file.
"""
from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

from .bidding import Bid
from .deal import Player
from .game import DealResult

SCHEMA_VERSION = 1


def result_to_dict(result: DealResult) -> Dict[str, Any]:
    return {
        "player_score": result.player_score,
        "defender_score": result.defender_score,
        "won": result.won,
        "game": result.game.name.lower(),
        "declarer": result.declarer.value if result.declarer is not None else None,
    }


def result_from_dict(d: Dict[str, Any]) -> DealResult:
    declarer = d.get("declarer")
    return DealResult(
        player_score=int(d["player_score"]),
        defender_score=int(d["defender_score"]),
        won=bool(d["won"]),
        game=Bid[str(d.get("game", "passed")).upper()],
        declarer=Player(declarer) if declarer is not None else None,
    )


def save_results(path: str | Path, results: List[DealResult]) -> None:
    payload = {
        "schema_version": SCHEMA_VERSION,
        "saved_at": datetime.now(timezone.utc).isoformat(),
        "results": [result_to_dict(r) for r in results],
    }
    Path(path).write_text(json.dumps(payload, indent=2), encoding="utf-8")


def load_results(path: str | Path) -> List[DealResult]:
    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    version = payload.get("schema_version")
    if version != SCHEMA_VERSION:
        raise ValueError(f"Unsupported schema version: {version!r}")
    return [result_from_dict(d) for d in payload.get("results", [])]
