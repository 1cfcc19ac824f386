"""Exceptions raised by the inventory and persistence layers."""

from __future__ import annotations

from pathlib import Path


class PersistenceError(Exception):
    """Raised when the toy file cannot be read, written or parsed."""

    def __init__(self, path: str | Path, message: str):
        super().__init__(f"{path}: {message}")
        self.path = Path(path)


class ToyNotFoundError(KeyError):
    """Raised when an operation targets a toy id the store does not hold."""

    def __init__(self, toy_id: int):
        super().__init__(toy_id)
        self.toy_id = toy_id

    def __str__(self) -> str:
        return f"no toy with id {self.toy_id}"
