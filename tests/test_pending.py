"""Tests for the pending amount calculation."""

import math

import pytest

from pending import calculate_pending


@pytest.mark.parametrize("total, advance", [(1000, 300), (0, 0), (50, 50), (10.5, 0.25)])
def test_no_refund_is_total_minus_advance(total, advance):
    assert calculate_pending(total, advance, 0) == total - advance


@pytest.mark.parametrize("total", [0, 300, 1000, 99999])
def test_refund_is_advance_minus_refund_regardless_of_total(total):
    assert calculate_pending(total, 300, 100) == 200


def test_missing_inputs_count_as_zero():
    assert calculate_pending() == 0
    assert calculate_pending(None, 300, None) == -300
    assert calculate_pending(1000, None) == 1000


def test_zero_total_with_advance_goes_negative():
    """Result is not clamped."""
    assert calculate_pending(0, 500, 0) == -500


def test_refund_larger_than_advance_goes_negative():
    assert calculate_pending(1000, 100, 400) == -300


def test_negative_refund_takes_total_branch():
    assert calculate_pending(1000, 300, -50) == 700


def test_nan_propagates():
    assert math.isnan(calculate_pending(float("nan"), 300, 0))
