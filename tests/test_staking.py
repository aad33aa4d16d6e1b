import pytest

from enclaveregistry import staking
from enclaveregistry.fees import MAXIMUM_BLOCK_LENGTH
from enclaveregistry.staking import (
    miner_max_length,
    random_balancing_iterations,
    report_longevity,
)


def test_no_iterations_allowed_gives_zero():
    assert random_balancing_iterations(b"\xff" * 32, 0) == (0, 0)


def test_small_seed_value_is_kept():
    assert random_balancing_iterations(b"\x05\x00\x00\x00", 10) == (5, 0)


def test_short_seed_is_padded_with_zeros():
    assert random_balancing_iterations(b"\x07", 10) == (7, 0)
    assert random_balancing_iterations(b"", 10) == (0, 0)


def test_only_first_four_bytes_matter():
    seed = b"\x03\x01\x00\x00"
    assert random_balancing_iterations(seed + b"\xaa" * 28, 1000) == (
        random_balancing_iterations(seed, 1000)
    )


@pytest.mark.parametrize("max_iterations", [1, 2, 10, 255, 70_000])
def test_result_never_exceeds_maximum(max_iterations):
    for first in range(0, 256, 7):
        seed = bytes([first, 0x9C, first ^ 0x55, 0x41]) + b"\x00" * 28
        iterations, tolerance = random_balancing_iterations(seed, max_iterations)
        assert 0 <= iterations <= max_iterations
        assert tolerance == 0


def test_default_maximum_is_miner_max_iterations():
    for value in range(40):
        seed = value.to_bytes(4, "little")
        iterations, _ = random_balancing_iterations(seed)
        assert iterations <= staking.MINER_MAX_ITERATIONS
    assert random_balancing_iterations(b"\x0b\x00\x00\x00") == (0, 0)


def test_modulus_saturates_at_u32_limit():
    assert random_balancing_iterations(b"\xff\xff\xff\xff", staking.U32_MAX) == (0, 0)


@pytest.mark.parametrize("bad", [-1, 2**32])
def test_out_of_range_maximum_is_rejected(bad):
    with pytest.raises(ValueError):
        random_balancing_iterations(b"\x01", bad)


def test_report_longevity_value():
    assert report_longevity() == 100_800


def test_report_longevity_is_whole_epochs():
    assert report_longevity() % staking.EPOCH_DURATION == 0
    assert report_longevity() // staking.BONDING_DURATION > 0


def test_miner_max_length_value():
    assert miner_max_length() == 3_538_944


def test_miner_max_length_fits_in_normal_block():
    assert miner_max_length() < staking.NORMAL_BLOCK_LENGTH < MAXIMUM_BLOCK_LENGTH