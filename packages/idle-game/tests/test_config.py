"""Tests for GameConfig validation and defaults."""
from __future__ import annotations

import dataclasses

import pytest
from idle_economy import ThrottlePolicy
from idle_game import GameConfig
from idle_game.config import DEBUG_AMOUNT_LIMIT, clamp_debug_amount


def test_defaults() -> None:
    config = GameConfig()
    assert config.tps == 20
    assert config.max_ticks_per_frame == 100
    assert config.seed is None
    assert config.policy == ThrottlePolicy.PROPORTIONAL
    assert config.debug is True
    assert config.debug_amount == 100


def test_frozen() -> None:
    config = GameConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.tps = 30  # type: ignore[misc]


@pytest.mark.parametrize("tps", [0, -5])
def test_rejects_non_positive_tps(tps: int) -> None:
    with pytest.raises(ValueError, match="tps must be positive"):
        GameConfig(tps=tps)


def test_rejects_non_positive_cap() -> None:
    with pytest.raises(ValueError, match="max_ticks_per_frame"):
        GameConfig(max_ticks_per_frame=0)


@pytest.mark.parametrize("amount", [1001, -1001])
def test_rejects_debug_amount_out_of_range(amount: int) -> None:
    with pytest.raises(ValueError, match="debug_amount"):
        GameConfig(debug_amount=amount)


def test_accepts_debug_amount_at_limits() -> None:
    assert GameConfig(debug_amount=-1000).debug_amount == -1000
    assert GameConfig(debug_amount=1000).debug_amount == 1000


def test_clamp_debug_amount() -> None:
    assert clamp_debug_amount(5) == 5
    assert clamp_debug_amount(2000) == DEBUG_AMOUNT_LIMIT
    assert clamp_debug_amount(-2000) == -DEBUG_AMOUNT_LIMIT
