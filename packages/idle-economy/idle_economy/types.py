"""Core data types for goods and producers."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from fractions import Fraction
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from idle_economy.goods import Good


class GoodGroup(Enum):
    MONEY = "money"
    ORE = "ore"


class CatalogError(KeyError):
    """Raised when an identifier has no catalog entry.

    Catalogs are total over their enumerations, so this signals a broken
    catalog rather than bad player input.
    """

    def __init__(self, identifier: object, message: str) -> None:
        self.identifier = identifier
        super().__init__(message)


def to_fraction(value: int | Fraction | str) -> Fraction:
    """Coerce an exact quantity to ``Fraction``. Floats are rejected."""
    if isinstance(value, Fraction):
        return value
    if isinstance(value, bool) or isinstance(value, float):
        raise TypeError(f"quantities must be exact, got {type(value).__name__}")
    return Fraction(value)


@dataclass(frozen=True)
class GoodProperties:
    """Immutable description of a good.

    Attributes:
        name: Display name.
        group: Group used for iteration and default selection.
        difficulty: Length of the ore minigame sequence (0 for none).
    """

    name: str
    group: GoodGroup
    difficulty: int = 0

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("GoodProperties name must be non-empty")
        if self.difficulty < 0:
            raise ValueError(f"difficulty must be >= 0, got {self.difficulty}")


@dataclass(frozen=True)
class ProducerProperties:
    """Immutable economic description of a producer.

    Attributes:
        name: Display name of the producer kind.
        cost: Price in Money.
        outputs: Goods produced per second (good -> rate).
        inputs: Goods consumed per second (good -> rate). Empty means the
            producer is unconstrained.
    """

    name: str
    cost: Fraction = Fraction(0)
    outputs: dict[Good, Fraction] = field(default_factory=dict)
    inputs: dict[Good, Fraction] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("ProducerProperties name must be non-empty")
        if self.cost < 0:
            raise ValueError(f"cost must be >= 0, got {self.cost}")
        for good, rate in (*self.outputs.items(), *self.inputs.items()):
            if rate < 0:
                raise ValueError(f"rate for {good.name} must be >= 0, got {rate}")
