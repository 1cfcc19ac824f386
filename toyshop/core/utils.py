"""Small utilities."""

from __future__ import annotations

import math
from typing import Iterable

from .types import ToyRecord


def ticket_count(drop_rate: float, quantity: int) -> int:
    """Number of prize tickets a toy contributes to the pool.

    Round-half-up of ``drop_rate / 100 * quantity``. The product is formed
    before dividing and a tolerance relative to the value is added so exact
    halves (50% of 5, 12.5% of 4) always round up instead of falling on float
    noise, while values just below a half still round down.
    """
    raw = drop_rate * quantity / 100.0
    return max(0, math.floor(raw + 0.5 + 1e-12 * max(1.0, abs(raw))))


def next_id(toys: Iterable[ToyRecord]) -> int:
    return max((t.id for t in toys), default=0) + 1
