"""Good identifiers and the good catalog."""
from __future__ import annotations

from enum import Enum
from typing import Iterator, Mapping

from idle_economy.types import CatalogError, GoodGroup, GoodProperties


class Good(Enum):
    """Every good in the game, in display order.

    Values carry no data; everything about a good lives in a catalog.
    """

    MONEY = 1
    IRON_ORE = 2
    GOLD_ORE = 3
    SILVER_ORE = 4
    COAL = 5

    def properties(self, catalog: GoodCatalog | None = None) -> GoodProperties:
        return (catalog or GOODS).properties(self)

    def __str__(self) -> str:
        return GOODS.name(self)


_GROUP_DEFAULTS: dict[GoodGroup, Good] = {
    GoodGroup.MONEY: Good.MONEY,
    GoodGroup.ORE: Good.IRON_ORE,
}


class GoodCatalog:
    """Lookup table from ``Good`` to ``GoodProperties``."""

    def __init__(self, definitions: Mapping[Good, GoodProperties] | None = None) -> None:
        self._definitions: dict[Good, GoodProperties] = dict(definitions or {})

    def define(self, good: Good, properties: GoodProperties) -> None:
        """Register a good. Overwrites if already defined."""
        self._definitions[good] = properties

    def properties(self, good: Good) -> GoodProperties:
        """Look up properties. Raises CatalogError if not defined."""
        try:
            return self._definitions[good]
        except KeyError:
            raise CatalogError(good, f"No catalog entry for good {good!r}") from None

    def has(self, good: Good) -> bool:
        return good in self._definitions

    def name(self, good: Good) -> str:
        return self.properties(good).name

    def goods(self) -> list[Good]:
        """All defined goods in declaration order."""
        return [good for good in Good if good in self._definitions]

    def group_iter(self, group: GoodGroup) -> Iterator[Good]:
        """Lazily yield the goods of *group* in declaration order."""
        return (
            good for good in Good
            if good in self._definitions and self._definitions[good].group == group
        )

    def default_for_group(self, group: GoodGroup) -> Good:
        return _GROUP_DEFAULTS[group]

    def validate(self) -> None:
        """Raise CatalogError unless every ``Good`` has an entry."""
        for good in Good:
            if good not in self._definitions:
                raise CatalogError(good, f"Catalog is missing good {good.name}")


def default_good_catalog() -> GoodCatalog:
    return GoodCatalog({
        Good.MONEY: GoodProperties("Money", GoodGroup.MONEY, difficulty=0),
        Good.IRON_ORE: GoodProperties("Iron Ore", GoodGroup.ORE, difficulty=3),
        Good.GOLD_ORE: GoodProperties("Gold Ore", GoodGroup.ORE, difficulty=5),
        Good.SILVER_ORE: GoodProperties("Silver Ore", GoodGroup.ORE, difficulty=4),
        Good.COAL: GoodProperties("Coal", GoodGroup.ORE, difficulty=2),
    })


GOODS = default_good_catalog()
