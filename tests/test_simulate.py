"""Tests for headless simulation."""
import numpy as np
import pytest

from callbreak.config import GameConfig, Variant
from callbreak.simulate import simulate


def test_simulate_shapes_and_totals():
    summary = simulate(20, seed=0)
    assert summary.num_rounds == 20
    assert summary.bids.shape == (20, 4)
    assert summary.tricks.shape == (20, 4)
    assert np.all(summary.tricks.sum(axis=1) == 13)
    assert np.all((summary.bids >= 0) & (summary.bids <= 13))
    np.testing.assert_array_equal(summary.totals, summary.deltas.sum(axis=0))
    assert np.all((summary.bid_success_rate >= 0) & (summary.bid_success_rate <= 1))
    assert np.all(summary.mean_overtricks >= 0)


def test_simulate_is_reproducible():
    a = simulate(10, seed=42)
    b = simulate(10, seed=42)
    np.testing.assert_array_equal(a.deltas, b.deltas)
    np.testing.assert_array_equal(a.bids, b.bids)


def test_simulate_ignores_human_seat():
    summary = simulate(3, config=GameConfig(human_seat=2, variant=Variant.NO_TRUMP), seed=1)
    assert summary.num_rounds == 3


def test_simulate_simple_bidding_never_bids_more():
    simple = simulate(15, config=GameConfig(advanced_bidding=False), seed=9)
    advanced = simulate(15, config=GameConfig(advanced_bidding=True), seed=9)
    # same seed gives the same first deal
    assert np.all(simple.bids[0] <= advanced.bids[0])


def test_summary_to_dict():
    d = simulate(4, seed=2).to_dict()
    assert d["rounds"] == 4
    assert len(d["totals"]) == 4
    assert set(d) == {"rounds", "totals", "mean_delta", "std_delta", "bid_success_rate", "mean_overtricks"}


def test_simulate_rejects_zero_rounds():
    with pytest.raises(ValueError):
        simulate(0)
