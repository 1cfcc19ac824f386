"""Prize pool: weighted draws without replacement over the inventory.

The pool is materialised once, when it is constructed: each toy contributes
``ticket_count(drop_rate, quantity)`` tickets and the result is shuffled.
After that the pool only shrinks.

Each ticket is a reference to the live ``ToyRecord``, so the weight used at
draw time is the record's current drop rate. Changing a drop rate after the
pool is built reweights that toy's remaining tickets but never adds or removes
tickets.
"""

from __future__ import annotations

import logging
import random
from typing import Dict, List, Optional, Tuple

from ..core.types import DrawResult, DrawStatus, ToyRecord
from ..core.utils import ticket_count
from ..io import metrics
from ..state.store import InventoryStore

logger = logging.getLogger(__name__)


class PrizePool:
    def __init__(self, store: InventoryStore, rng: Optional[random.Random] = None):
        self.store = store
        self.rng = rng or random.Random()
        self._tickets: List[ToyRecord] = []
        self._initialize()

    def _initialize(self):
        for toy in self.store.list_all():
            self._tickets.extend([toy] * ticket_count(toy.drop_rate, toy.quantity))
        self.rng.shuffle(self._tickets)
        metrics.set_pool_tickets(len(self._tickets))
        logger.info(
            "Prize pool built: %d tickets from %d toys", len(self._tickets), len(self.store)
        )

    @property
    def size(self) -> int:
        return len(self._tickets)

    def __len__(self) -> int:
        return len(self._tickets)

    @property
    def tickets(self) -> Tuple[ToyRecord, ...]:
        return tuple(self._tickets)

    def counts(self) -> Dict[int, int]:
        """Remaining tickets per toy id."""
        out: Dict[int, int] = {}
        for toy in self._tickets:
            out[toy.id] = out.get(toy.id, 0) + 1
        return out

    def _pick_index(self, total: float) -> int:
        r = self.rng.random() * total
        last_weighted = -1
        for i, toy in enumerate(self._tickets):
            weight = toy.drop_rate
            if weight <= 0:
                continue
            last_weighted = i
            r -= weight
            if r <= 0:
                return i
        # float drift can leave a sliver of r after the last ticket
        return last_weighted

    def draw(self) -> DrawResult:
        if not self._tickets:
            metrics.inc_draws(DrawStatus.EMPTY.value)
            return DrawResult(DrawStatus.EMPTY)

        total = sum(toy.drop_rate for toy in self._tickets)
        if total <= 0:
            metrics.inc_draws(DrawStatus.NO_WEIGHT.value)
            logger.warning("All %d remaining tickets have a zero drop rate", len(self._tickets))
            return DrawResult(DrawStatus.NO_WEIGHT)

        toy = self._tickets.pop(self._pick_index(total))
        metrics.inc_draws(DrawStatus.WON.value)
        metrics.set_pool_tickets(len(self._tickets))
        logger.info("Drew toy %d (%s), %d tickets left", toy.id, toy.name, len(self._tickets))
        self.store.commit()
        return DrawResult(DrawStatus.WON, toy)
