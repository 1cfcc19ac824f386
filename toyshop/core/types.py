"""Core type definitions for the toy shop.

A toy record is the persisted unit; prize tickets are plain references to
records held by the prize pool, so they carry no type of their own.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


@dataclass
class ToyRecord:
    id: int
    name: str
    quantity: int
    drop_rate: float  # percentage, e.g. 12.5 means 12.5%

    def __post_init__(self):
        if not isinstance(self.name, str):
            raise ValueError(f"toy name must be a string, got {self.name!r}")
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise ValueError(f"toy id must be an integer, got {self.id!r}")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValueError(f"quantity must be an integer, got {self.quantity!r}")
        if self.quantity < 0:
            raise ValueError(f"quantity must be >= 0, got {self.quantity}")
        self.drop_rate = float(self.drop_rate)
        if not math.isfinite(self.drop_rate) or self.drop_rate < 0:
            raise ValueError(f"drop rate must be a finite number >= 0, got {self.drop_rate}")

    def to_payload(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "quantity": self.quantity,
            "dropRate": self.drop_rate,
        }

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "ToyRecord":
        """Build a record from its JSON object form.

        Extra keys are ignored; missing keys raise ``ValueError``.
        """
        if not isinstance(payload, dict):
            raise ValueError(f"toy entry must be an object, got {type(payload).__name__}")
        try:
            return cls(
                id=payload["id"],
                name=payload["name"],
                quantity=payload["quantity"],
                drop_rate=payload["dropRate"],
            )
        except KeyError as exc:
            raise ValueError(f"toy entry is missing field {exc.args[0]!r}") from exc
        except TypeError as exc:
            raise ValueError(f"toy entry has a bad field: {exc}") from exc


class DrawStatus(str, Enum):
    WON = "won"
    EMPTY = "empty"  # no tickets left
    NO_WEIGHT = "no_weight"  # tickets left but every drop rate is 0


@dataclass
class DrawResult:
    status: DrawStatus
    toy: Optional[ToyRecord] = None

    @property
    def won(self) -> bool:
        return self.status == DrawStatus.WON
