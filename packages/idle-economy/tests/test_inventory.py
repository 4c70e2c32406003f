"""Tests for Inventory and InventoryHelper."""
from __future__ import annotations

import json
from fractions import Fraction

import pytest
from idle_economy import GOODS, Good, GoodCatalog, GoodGroup, GoodProperties, Inventory, InventoryHelper


class TestInventoryConstruction:
    def test_empty(self) -> None:
        inv = Inventory()
        assert inv.slots == {}

    def test_seeded_has_every_good_at_zero(self) -> None:
        inv = InventoryHelper.seeded()
        assert set(inv.slots) == set(Good)
        assert all(amount == 0 for amount in inv.slots.values())
        assert all(isinstance(amount, Fraction) for amount in inv.slots.values())


class TestInventoryHelperGet:
    def test_get_existing(self) -> None:
        inv = Inventory(slots={Good.MONEY: Fraction(7, 2)})
        assert InventoryHelper.get(inv, Good.MONEY) == Fraction(7, 2)

    def test_get_absent_is_exact_zero(self) -> None:
        amount = InventoryHelper.get(Inventory(), Good.COAL)
        assert amount == 0
        assert isinstance(amount, Fraction)


class TestInventoryHelperCredit:
    def test_credit_inserts_entry(self) -> None:
        inv = Inventory()
        InventoryHelper.credit(inv, Good.COAL, Fraction(1, 3))
        assert inv.slots[Good.COAL] == Fraction(1, 3)

    def test_credit_accumulates_exactly(self) -> None:
        inv = Inventory()
        for _ in range(3):
            InventoryHelper.credit(inv, Good.COAL, Fraction(1, 10))
        assert inv.slots[Good.COAL] == Fraction(3, 10)

    def test_credit_accepts_int(self) -> None:
        inv = Inventory()
        InventoryHelper.credit(inv, Good.MONEY, 5)
        assert inv.slots[Good.MONEY] == 5

    def test_credit_negative_raises(self) -> None:
        with pytest.raises(ValueError, match="amount must be >= 0"):
            InventoryHelper.credit(Inventory(), Good.MONEY, -1)

    def test_credit_float_raises(self) -> None:
        with pytest.raises(TypeError, match="quantities must be exact"):
            InventoryHelper.credit(Inventory(), Good.MONEY, 0.1)


class TestInventoryHelperDebit:
    def test_debit_partial(self) -> None:
        inv = Inventory(slots={Good.MONEY: Fraction(10)})
        InventoryHelper.debit(inv, Good.MONEY, Fraction(5, 2))
        assert inv.slots[Good.MONEY] == Fraction(15, 2)

    def test_debit_does_not_clamp(self) -> None:
        inv = Inventory(slots={Good.MONEY: Fraction(1)})
        InventoryHelper.debit(inv, Good.MONEY, 3)
        assert inv.slots[Good.MONEY] == -2

    def test_debit_negative_raises(self) -> None:
        with pytest.raises(ValueError, match="amount must be >= 0"):
            InventoryHelper.debit(Inventory(), Good.MONEY, -1)


class TestInventoryHelperHas:
    def test_has_sufficient(self) -> None:
        inv = Inventory(slots={Good.MONEY: Fraction(10)})
        assert InventoryHelper.has(inv, Good.MONEY, 10) is True
        assert InventoryHelper.has(inv, Good.MONEY, 11) is False

    def test_has_negative_raises(self) -> None:
        with pytest.raises(ValueError, match="amount must be >= 0"):
            InventoryHelper.has(Inventory(), Good.MONEY, -1)


class TestInventoryRows:
    def test_rows_sorted_by_identifier(self) -> None:
        inv = Inventory(slots={Good.COAL: Fraction(1), Good.MONEY: Fraction(2), Good.GOLD_ORE: Fraction(3)})
        assert [good for good, _ in InventoryHelper.rows(inv)] == [
            Good.MONEY,
            Good.GOLD_ORE,
            Good.COAL,
        ]


class TestInventorySnapshot:
    def test_round_trip_preserves_every_good(self) -> None:
        inv = InventoryHelper.seeded()
        InventoryHelper.credit(inv, Good.MONEY, Fraction(7, 2))
        data = json.loads(json.dumps(InventoryHelper.snapshot(inv)))
        restored = InventoryHelper.restore(data)
        for good in GOODS.goods():
            assert InventoryHelper.get(restored, good) == InventoryHelper.get(inv, good)
        assert restored.slots[Good.MONEY] == Fraction(7, 2)
        assert restored.slots[Good.IRON_ORE] == 0

    def test_snapshot_format(self) -> None:
        inv = Inventory(slots={Good.MONEY: Fraction(7, 2), Good.IRON_ORE: Fraction(0)})
        assert InventoryHelper.snapshot(inv) == {"MONEY": "7/2", "IRON_ORE": "0"}

    def test_restore_defaults_missing_goods(self) -> None:
        restored = InventoryHelper.restore({"MONEY": "3"})
        assert restored.slots[Good.MONEY] == 3
        assert restored.slots[Good.COAL] == 0
        assert set(restored.slots) == set(Good)

    def test_restore_drops_unknown_goods(self) -> None:
        restored = InventoryHelper.restore({"UNOBTAINIUM": "3"})
        assert set(restored.slots) == set(Good)

    def test_restore_bad_quantity_falls_back_to_zero(self) -> None:
        restored = InventoryHelper.restore({"MONEY": "lots", "COAL": "1/0"})
        assert restored.slots[Good.MONEY] == 0
        assert restored.slots[Good.COAL] == 0

    def test_restore_rejects_inexact_quantities(self) -> None:
        restored = InventoryHelper.restore({"MONEY": 0.1, "COAL": True, "GOLD_ORE": 3})
        assert restored.slots[Good.MONEY] == 0
        assert restored.slots[Good.COAL] == 0
        assert restored.slots[Good.GOLD_ORE] == Fraction(3)

    def test_restore_reads_decimal_strings_exactly(self) -> None:
        restored = InventoryHelper.restore({"MONEY": "0.1"})
        assert restored.slots[Good.MONEY] == Fraction(1, 10)

    def test_restore_respects_catalog(self) -> None:
        catalog = GoodCatalog({Good.MONEY: GoodProperties("Money", GoodGroup.MONEY)})
        restored = InventoryHelper.restore({"MONEY": "1", "COAL": "2"}, catalog)
        assert restored.slots == {Good.MONEY: Fraction(1)}
