"""Producer identifiers and the producer catalog.

A producer is just an identity: a kind plus, for drills, the good it
works on. Everything economic about it (cost, rates) comes from a
``ProducerCatalog`` lookup, so two equal producers always behave alike.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from typing import Any, Callable, Mapping

from idle_economy.goods import GOODS, Good, GoodCatalog
from idle_economy.types import CatalogError, GoodGroup, ProducerProperties

PropertiesFactory = Callable[[Good | None], ProducerProperties]


class ProducerKind(Enum):
    NONE = "none"
    GRAVITY_DRILL = "gravity_drill"
    COAL_DRILL = "coal_drill"


# Kinds that take no good parameter.
_UNPARAMETERIZED = frozenset({ProducerKind.NONE})


@dataclass(frozen=True)
class Producer:
    """Producer identity. Equality and hashing use ``(kind, good)``."""

    kind: ProducerKind
    good: Good | None = None

    def __post_init__(self) -> None:
        if self.kind in _UNPARAMETERIZED:
            if self.good is not None:
                raise ValueError(f"{self.kind.name} takes no good, got {self.good.name}")
        elif self.good is None:
            raise ValueError(f"{self.kind.name} requires a good")

    def properties(self, catalog: ProducerCatalog | None = None) -> ProducerProperties:
        return (catalog or PRODUCERS).properties(self)

    @classmethod
    def default_for_group(cls, group: GoodGroup) -> Producer:
        if group == GoodGroup.MONEY:
            return cls(ProducerKind.NONE)
        return cls(ProducerKind.GRAVITY_DRILL, GOODS.default_for_group(group))

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.name,
            "good": None if self.good is None else self.good.name,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Producer:
        good = data.get("good")
        return cls(ProducerKind[data["kind"]], None if good is None else Good[good])

    def display_name(
        self, catalog: ProducerCatalog | None = None, goods: GoodCatalog | None = None
    ) -> str:
        """Name shown to the player, e.g. 'Gravity Drill (Iron Ore)'."""
        name = self.properties(catalog).name
        if self.good is None:
            return name
        return f"{name} ({(goods or GOODS).name(self.good)})"

    def __str__(self) -> str:
        return self.display_name()


class ProducerCatalog:
    """Maps each ``ProducerKind`` to a factory building its properties."""

    def __init__(self) -> None:
        self._factories: dict[ProducerKind, PropertiesFactory] = {}

    def define(self, kind: ProducerKind, factory: PropertiesFactory) -> None:
        """Register a kind. Overwrites if already defined."""
        self._factories[kind] = factory

    def has(self, kind: ProducerKind) -> bool:
        return kind in self._factories

    def kinds(self) -> list[ProducerKind]:
        return list(self._factories)

    def properties(self, producer: Producer) -> ProducerProperties:
        """Look up properties. Raises CatalogError if the kind is unknown."""
        factory = self._factories.get(producer.kind)
        if factory is None:
            raise CatalogError(
                producer.kind, f"No catalog entry for producer kind {producer.kind.name}"
            )
        return factory(producer.good)


def _none(good: Good | None) -> ProducerProperties:
    return ProducerProperties(name="None")


def _require_good(kind: ProducerKind, good: Good | None) -> Good:
    if good is None:
        raise ValueError(f"{kind.name} requires a good")
    return good


def _gravity_drill(good: Good | None) -> ProducerProperties:
    # Free ore; a debugging aid rather than a balanced building.
    good = _require_good(ProducerKind.GRAVITY_DRILL, good)
    return ProducerProperties(
        name="Gravity Drill",
        cost=Fraction(10),
        outputs={good: Fraction(1)},
    )


def _coal_drill(good: Good | None) -> ProducerProperties:
    good = _require_good(ProducerKind.COAL_DRILL, good)
    return ProducerProperties(
        name="Coal Drill",
        cost=Fraction(10),
        outputs={good: Fraction(1)},
        inputs={Good.COAL: Fraction(1, 4)},
    )


def default_producer_catalog() -> ProducerCatalog:
    catalog = ProducerCatalog()
    catalog.define(ProducerKind.NONE, _none)
    catalog.define(ProducerKind.GRAVITY_DRILL, _gravity_drill)
    catalog.define(ProducerKind.COAL_DRILL, _coal_drill)
    return catalog


PRODUCERS = default_producer_catalog()
