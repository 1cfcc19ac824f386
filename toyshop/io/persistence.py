"""JSON persistence helpers for the toy file."""

from __future__ import annotations

from pathlib import Path
import json
from typing import Any, List

from ..core.errors import PersistenceError
from ..core.types import ToyRecord


def write_json(path: str | Path, obj: Any):
    p = Path(path)
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        with p.open("w", encoding="utf-8") as f:
            json.dump(obj, f, indent=2, allow_nan=False)
    except (OSError, TypeError, ValueError) as exc:
        raise PersistenceError(p, f"could not write: {exc}") from exc


def read_json(path: str | Path, default: Any = None) -> Any:
    """Parse a JSON file, returning ``default`` when it is absent or blank."""
    p = Path(path)
    try:
        if not p.exists():
            return default
        text = p.read_text(encoding="utf-8")
    except OSError as exc:
        raise PersistenceError(p, f"could not read: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise PersistenceError(p, f"could not decode: {exc}") from exc
    if not text.strip():
        return default
    try:
        return json.loads(text)
    except ValueError as exc:
        raise PersistenceError(p, f"malformed JSON: {exc}") from exc


def load_toys(path: str | Path) -> List[ToyRecord]:
    data = read_json(path, default=[])
    if not isinstance(data, list):
        raise PersistenceError(path, f"expected a list of toys, got {type(data).__name__}")
    toys: List[ToyRecord] = []
    seen = set()
    for i, entry in enumerate(data):
        try:
            toy = ToyRecord.from_payload(entry)
        except ValueError as exc:
            raise PersistenceError(path, f"entry {i}: {exc}") from exc
        if toy.id in seen:
            raise PersistenceError(path, f"entry {i}: duplicate toy id {toy.id}")
        seen.add(toy.id)
        toys.append(toy)
    return toys


def save_toys(path: str | Path, toys: List[ToyRecord]):
    write_json(path, [t.to_payload() for t in toys])
