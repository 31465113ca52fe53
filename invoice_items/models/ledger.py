"""Ledger snapshots, derived totals and the session that holds them.

A :class:`Ledger` is immutable: ``add``, ``update`` and ``remove`` return a
new snapshot and leave the receiver untouched. Operations that reference an
id not present in the ledger return the receiver itself, so callers can tell
a no-op apart with an identity check. :class:`LedgerSession` is the single
place that swaps snapshots and tells the UI about them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Tuple

from invoice_items import config
from invoice_items.models.item import EDITABLE_FIELDS, Item

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Totals:
    subtotal: float
    tax: float
    total: float


@dataclass(frozen=True)
class Ledger:
    items: Tuple[Item, ...] = ()

    @classmethod
    def seeded(cls) -> "Ledger":
        """Ledger holding the lines a new form starts with."""
        return cls(tuple(Item(**seed) for seed in config.SEED_ITEMS))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)

    def find(self, item_id: int) -> Optional[Item]:
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def next_id(self) -> int:
        return max((item.id for item in self.items), default=0) + 1

    def add(self) -> "Ledger":
        """Append a blank line with the next free id."""
        item = Item(id=self.next_id())
        logger.debug("Adding line %s", item.id)
        return Ledger(self.items + (item,))

    def update(self, item_id: int, field: str, raw_value: str) -> "Ledger":
        """Replace one field of a line from raw form text."""
        if field not in EDITABLE_FIELDS:
            raise ValueError(f"Unknown item field '{field}'.")
        for index, item in enumerate(self.items):
            if item.id == item_id:
                updated = item.with_field(field, raw_value)
                return Ledger(self.items[:index] + (updated,) + self.items[index + 1 :])
        logger.debug("Ignoring update of %s on missing line %s", field, item_id)
        return self

    def remove(self, item_id: int) -> "Ledger":
        remaining = tuple(item for item in self.items if item.id != item_id)
        if len(remaining) == len(self.items):
            logger.debug("Ignoring removal of missing line %s", item_id)
            return self
        logger.debug("Removing line %s", item_id)
        return Ledger(remaining)

    def compute_totals(self) -> Totals:
        subtotal = sum((item.line_subtotal for item in self.items), 0.0)
        return Totals(
            subtotal=subtotal,
            tax=subtotal * config.TAX_RATE,
            total=subtotal * (1 + config.TAX_RATE),
        )


Listener = Callable[[Ledger], None]


class LedgerSession:
    """Holds the current ledger snapshot for one open form."""

    def __init__(self, ledger: Optional[Ledger] = None) -> None:
        self._ledger = ledger if ledger is not None else Ledger.seeded()
        self._listeners: List[Listener] = []

    @property
    def ledger(self) -> Ledger:
        return self._ledger

    @property
    def totals(self) -> Totals:
        return self._ledger.compute_totals()

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def add(self) -> Item:
        """Append a blank line and return it."""
        self._commit(self._ledger.add())
        return self._ledger.items[-1]

    def update(self, item_id: int, field: str, raw_value: str) -> bool:
        """Apply a field edit; returns False when the line does not exist."""
        return self._commit(self._ledger.update(item_id, field, raw_value))

    def remove(self, item_id: int) -> bool:
        """Drop a line; returns False when the line does not exist."""
        return self._commit(self._ledger.remove(item_id))

    def _commit(self, ledger: Ledger) -> bool:
        if ledger is self._ledger:
            return False
        self._ledger = ledger
        for listener in list(self._listeners):
            listener(ledger)
        return True
