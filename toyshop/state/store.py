"""Inventory store backed by a JSON file.

The store owns the toy list and its file. Every mutating call ends with a
synchronous flush of the whole list (last write wins). One process is assumed
to be the only writer of the file; there is no locking, and a second writer
would silently overwrite this one's changes.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional

from ..core.errors import PersistenceError, ToyNotFoundError
from ..core.types import ToyRecord
from ..core.utils import next_id
from ..io import metrics
from ..io.persistence import load_toys, save_toys

logger = logging.getLogger(__name__)


@dataclass
class InventoryStore:
    path: Path
    toys: List[ToyRecord] = field(default_factory=list)

    def __post_init__(self):
        self.path = Path(self.path)

    @classmethod
    def open(cls, path: str | Path) -> "InventoryStore":
        """Load the store, falling back to an empty inventory on a bad file."""
        store = cls(Path(path))
        try:
            store.load()
        except PersistenceError as exc:
            metrics.inc_persistence_failures("load")
            logger.error("Could not load toys, starting empty: %s", exc)
            store.toys = []
        return store

    def load(self):
        self.toys = load_toys(self.path)
        logger.debug("Loaded %d toys from %s", len(self.toys), self.path)

    def save(self):
        save_toys(self.path, self.toys)

    def commit(self) -> bool:
        """Flush to disk; a failure is logged and the in-memory state kept."""
        try:
            self.save()
        except PersistenceError as exc:
            metrics.inc_persistence_failures("save")
            logger.error("Could not save toys: %s", exc)
            return False
        return True

    def next_id(self) -> int:
        return next_id(self.toys)

    def add(self, name: str, quantity: int, drop_rate: float) -> int:
        toy = ToyRecord(self.next_id(), name, quantity, drop_rate)
        self.toys.append(toy)
        metrics.inc_toys_added()
        logger.info("Added toy %d (%s) x%d at %.2f%%", toy.id, name, quantity, toy.drop_rate)
        self.commit()
        return toy.id

    def add_record(self, toy: ToyRecord):
        if self.get(toy.id) is not None:
            raise ValueError(f"toy id {toy.id} already exists")
        self.toys.append(toy)
        metrics.inc_toys_added()
        logger.info("Added toy %d (%s)", toy.id, toy.name)
        self.commit()

    def change_drop_rate(self, toy_id: int, new_drop_rate: float):
        toy = self.get(toy_id)
        if toy is None:
            logger.warning("Drop rate change for unknown toy id %d", toy_id)
            raise ToyNotFoundError(toy_id)
        if not math.isfinite(new_drop_rate) or new_drop_rate < 0:
            raise ValueError(f"drop rate must be a finite number >= 0, got {new_drop_rate}")
        toy.drop_rate = float(new_drop_rate)
        logger.info("Toy %d drop rate set to %.2f%%", toy_id, toy.drop_rate)
        self.commit()

    def get(self, toy_id: int) -> Optional[ToyRecord]:
        for toy in self.toys:
            if toy.id == toy_id:
                return toy
        return None

    def list_all(self) -> List[ToyRecord]:
        # live list, not a copy
        return self.toys

    def __len__(self) -> int:
        return len(self.toys)

    def __iter__(self) -> Iterator[ToyRecord]:
        return iter(self.toys)
