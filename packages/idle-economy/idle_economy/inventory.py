"""Inventory component and helper functions."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Any, Mapping

from idle_economy.goods import GOODS, Good, GoodCatalog
from idle_economy.types import to_fraction

logger = logging.getLogger(__name__)


@dataclass
class Inventory:
    """Mutable inventory storing exact good quantities.

    Attributes:
        slots: Mapping of good -> quantity.
    """

    slots: dict[Good, Fraction] = field(default_factory=dict)


class InventoryHelper:
    """Pure functions for inventory manipulation."""

    @staticmethod
    def seeded(catalog: GoodCatalog = GOODS) -> Inventory:
        """Build an inventory with a zero entry for every cataloged good."""
        return Inventory(slots={good: Fraction(0) for good in catalog.goods()})

    @staticmethod
    def get(inv: Inventory, good: Good) -> Fraction:
        """Get current quantity of a good (exact zero if absent)."""
        return inv.slots.get(good, Fraction(0))

    @staticmethod
    def credit(inv: Inventory, good: Good, amount: int | Fraction = 1) -> None:
        """Add *amount* of *good*."""
        amount = to_fraction(amount)
        if amount < 0:
            raise ValueError(f"amount must be >= 0, got {amount}")
        inv.slots[good] = inv.slots.get(good, Fraction(0)) + amount

    @staticmethod
    def debit(inv: Inventory, good: Good, amount: int | Fraction = 1) -> None:
        """Subtract *amount* of *good*. Does not clamp at zero."""
        amount = to_fraction(amount)
        if amount < 0:
            raise ValueError(f"amount must be >= 0, got {amount}")
        inv.slots[good] = inv.slots.get(good, Fraction(0)) - amount

    @staticmethod
    def has(inv: Inventory, good: Good, amount: int | Fraction = 1) -> bool:
        """Check if at least *amount* of *good* exists."""
        amount = to_fraction(amount)
        if amount < 0:
            raise ValueError(f"amount must be >= 0, got {amount}")
        return inv.slots.get(good, Fraction(0)) >= amount

    @staticmethod
    def rows(inv: Inventory) -> list[tuple[Good, Fraction]]:
        """Quantities sorted by good identifier, for display."""
        return sorted(inv.slots.items(), key=lambda item: item[0].value)

    @staticmethod
    def snapshot(inv: Inventory) -> dict[str, str]:
        """Serialize quantities as ``"p/q"`` strings keyed by good name."""
        return {good.name: str(amount) for good, amount in InventoryHelper.rows(inv)}

    @staticmethod
    def restore(data: Mapping[str, Any], catalog: GoodCatalog = GOODS) -> Inventory:
        """Rebuild an inventory, defaulting missing goods to zero.

        Unknown goods and unparseable quantities are dropped with a warning.
        """
        inv = InventoryHelper.seeded(catalog)
        for name, raw in data.items():
            good = Good.__members__.get(name)
            if good is None or not catalog.has(good):
                logger.warning("dropping unknown good %r from saved inventory", name)
                continue
            try:
                inv.slots[good] = to_fraction(raw)
            except (TypeError, ValueError, ZeroDivisionError):
                logger.warning("bad quantity %r for %s, using 0", raw, good.name)
        return inv
