import pytest

from enclaveregistry import constants
from enclaveregistry.constants import THRESHOLDS, bag_upper_threshold, deposit


def test_deposit_of_nothing_is_zero():
    assert deposit(0, 0) == 0


def test_deposit_is_additive():
    assert deposit(1, 0) + deposit(0, 88) == deposit(1, 88)
    assert deposit(2, 64) == deposit(1, 32) * 2


def test_deposit_item_costs_more_than_byte():
    assert deposit(1, 0) > deposit(0, 1) > 0
    assert deposit(0, 1) % constants.CENTS == 0


def test_deposit_pinned_values():
    assert deposit(1, 0) == 150_000_000_000_000_000
    assert deposit(0, 1) == 60_000_000_000_000_000


@pytest.mark.parametrize("items,byte_count", [(-1, 0), (0, -1), (2**32, 0), (0, 2**32)])
def test_deposit_rejects_out_of_range(items, byte_count):
    with pytest.raises(ValueError):
        deposit(items, byte_count)


def test_bag_for_zero_weight_is_first():
    assert bag_upper_threshold(0) == 100_000_000_000_000


def test_bag_just_above_first_threshold():
    assert bag_upper_threshold(100_000_000_000_001) == 106_282_535_907_434


def test_bag_for_max_weight_is_top():
    assert bag_upper_threshold(18_446_744_073_709_551_615) == 18_446_744_073_709_551_615


def test_thresholds_map_to_themselves_and_next():
    for lower, upper in zip(THRESHOLDS, THRESHOLDS[1:]):
        assert bag_upper_threshold(lower) == lower
        assert bag_upper_threshold(lower + 1) == upper


def test_bags_are_distinct_and_increasing():
    bags = [bag_upper_threshold(weight) for weight in THRESHOLDS]
    assert len(bags) == 200
    assert all(a < b for a, b in zip(bags, bags[1:]))
    assert bag_upper_threshold(constants.EXISTENTIAL_WEIGHT) == bags[0]


@pytest.mark.parametrize("weight", [-1, 2**64])
def test_bag_rejects_out_of_range(weight):
    with pytest.raises(ValueError):
        bag_upper_threshold(weight)