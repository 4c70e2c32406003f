"""idle-economy - Goods, producers and exact-arithmetic production."""
from idle_economy.goods import GOODS, Good, GoodCatalog, default_good_catalog
from idle_economy.inventory import Inventory, InventoryHelper
from idle_economy.producers import (
    PRODUCERS,
    Producer,
    ProducerCatalog,
    ProducerKind,
    default_producer_catalog,
)
from idle_economy.production import (
    ProductionRates,
    ThrottlePolicy,
    advance_all,
    advance_producer,
    theoretical_rates,
)
from idle_economy.roster import ProducerRoster, RosterEntry
from idle_economy.systems import make_production_system
from idle_economy.types import CatalogError, GoodGroup, GoodProperties, ProducerProperties

__all__ = [
    "CatalogError",
    "GOODS",
    "Good",
    "GoodCatalog",
    "GoodGroup",
    "GoodProperties",
    "Inventory",
    "InventoryHelper",
    "PRODUCERS",
    "Producer",
    "ProducerCatalog",
    "ProducerKind",
    "ProducerProperties",
    "ProducerRoster",
    "ProductionRates",
    "RosterEntry",
    "ThrottlePolicy",
    "advance_all",
    "advance_producer",
    "default_good_catalog",
    "default_producer_catalog",
    "make_production_system",
    "theoretical_rates",
]
