"""App bootstrap: wires the inventory store and prize pool together."""

from __future__ import annotations

import random
from typing import List, Optional

from ..core.config import Settings, load_settings
from ..core.types import DrawResult, ToyRecord
from ..pool.prize_pool import PrizePool
from ..state.store import InventoryStore


class ToyShop:
    """Entry points used by a front end (console, bot, web handler)."""

    def __init__(self, store: InventoryStore, pool: PrizePool):
        self.store = store
        self.pool = pool

    def add_toy(self, name: str, quantity: int, drop_rate: float) -> int:
        return self.store.add(name, quantity, drop_rate)

    def change_drop_rate(self, toy_id: int, new_drop_rate: float):
        self.store.change_drop_rate(toy_id, new_drop_rate)

    def draw(self) -> DrawResult:
        return self.pool.draw()

    def list_all(self) -> List[ToyRecord]:
        return self.store.list_all()


def build_shop(settings: Optional[Settings] = None) -> ToyShop:
    settings = settings or load_settings()
    store = InventoryStore.open(settings.data_file)
    pool = PrizePool(store, rng=random.Random(settings.seed))
    return ToyShop(store, pool)
