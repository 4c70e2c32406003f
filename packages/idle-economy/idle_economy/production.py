"""Production engine: advance producers against an inventory.

A producer with inputs is throttled to the share of the time slice its
scarcest input can pay for (``ThrottlePolicy.PROPORTIONAL``). The older
all-or-nothing rule is kept as ``ThrottlePolicy.ALL_OR_NOTHING``: the
producer runs the full slice only if every input covers it.

Neither policy ever debits more than the current balance, so producers
cannot drive a non-negative balance below zero.
"""
from __future__ import annotations

from enum import Enum
from fractions import Fraction
from typing import Iterable, NamedTuple

from idle_economy.goods import Good
from idle_economy.inventory import Inventory, InventoryHelper
from idle_economy.producers import PRODUCERS, Producer, ProducerCatalog
from idle_economy.types import ProducerProperties, to_fraction


class ThrottlePolicy(Enum):
    PROPORTIONAL = "proportional"
    ALL_OR_NOTHING = "all_or_nothing"


class ProductionRates(NamedTuple):
    """Unthrottled per-second totals for one good."""

    output: Fraction
    input: Fraction

    @property
    def net(self) -> Fraction:
        return self.output - self.input


def _check_dt(dt: int | Fraction) -> Fraction:
    dt = to_fraction(dt)
    if dt < 0:
        raise ValueError(f"dt must be >= 0, got {dt}")
    return dt


def affordable_scale(
    props: ProducerProperties,
    inventory: Inventory,
    dt: Fraction,
    policy: ThrottlePolicy = ThrottlePolicy.PROPORTIONAL,
) -> Fraction:
    """Seconds of *dt* the producer can actually run, in ``[0, dt]``."""
    if policy == ThrottlePolicy.ALL_OR_NOTHING:
        for good, rate in props.inputs.items():
            if rate > 0 and InventoryHelper.get(inventory, good) < rate * dt:
                return Fraction(0)
        return dt

    scale = dt
    for good, rate in props.inputs.items():
        if rate == 0:
            continue
        scale = min(scale, InventoryHelper.get(inventory, good) / rate)
    return max(Fraction(0), scale)


def advance_producer(
    producer: Producer,
    inventory: Inventory,
    dt: int | Fraction,
    catalog: ProducerCatalog = PRODUCERS,
    policy: ThrottlePolicy = ThrottlePolicy.PROPORTIONAL,
) -> Fraction:
    """Run one producer for *dt* seconds. Returns the seconds actually run."""
    dt = _check_dt(dt)
    props = catalog.properties(producer)
    scale = affordable_scale(props, inventory, dt, policy)
    if scale == 0:
        return scale
    for good, rate in props.outputs.items():
        InventoryHelper.credit(inventory, good, rate * scale)
    for good, rate in props.inputs.items():
        InventoryHelper.debit(inventory, good, rate * scale)
    return scale


def advance_all(
    producers: Iterable[Producer],
    inventory: Inventory,
    dt: int | Fraction,
    catalog: ProducerCatalog = PRODUCERS,
    policy: ThrottlePolicy = ThrottlePolicy.PROPORTIONAL,
) -> list[Fraction]:
    """Run every producer in collection order.

    Earlier producers get first claim on scarce inputs. Returns the
    applied scale of each producer, in order.
    """
    dt = _check_dt(dt)
    return [
        advance_producer(producer, inventory, dt, catalog, policy)
        for producer in producers
    ]


def theoretical_rates(
    producers: Iterable[Producer],
    catalog: ProducerCatalog = PRODUCERS,
) -> dict[Good, ProductionRates]:
    """Sum every producer's unthrottled outputs and inputs per good.

    Recomputed on each call; fine while producer counts stay small.
    """
    totals: dict[Good, list[Fraction]] = {}
    for producer in producers:
        props = catalog.properties(producer)
        for good, rate in props.outputs.items():
            totals.setdefault(good, [Fraction(0), Fraction(0)])[0] += rate
        for good, rate in props.inputs.items():
            totals.setdefault(good, [Fraction(0), Fraction(0)])[1] += rate
    return {good: ProductionRates(out, inp) for good, (out, inp) in totals.items()}
