"""Staking, session and election parameters of the runtime."""

from __future__ import annotations

from .constants import CENTS, EPOCH_DURATION_IN_SLOTS, EUROS, deposit
from .fees import MAXIMUM_BLOCK_LENGTH, NORMAL_DISPATCH_RATIO

U32_MAX = 2**32 - 1
U64_MAX = 2**64 - 1
PERBILL_ONE = 1_000_000_000

# Babe and session.
EPOCH_DURATION = EPOCH_DURATION_IN_SLOTS
SESSION_DURATION = EPOCH_DURATION_IN_SLOTS
BABE_MAX_AUTHORITIES = 100_000
MAX_AUTHORITIES = 100
MAX_KEYS = 10_000
MAX_PEER_IN_HEARTBEATS = 10_000
MAX_PEER_DATA_ENCODING_SIZE = 1_000
UNCLE_GENERATIONS = 5
DISABLED_VALIDATORS_THRESHOLD_PERCENT = 17

# Transaction priorities: heartbeats go before election solutions.
IM_ONLINE_UNSIGNED_PRIORITY = U64_MAX
STAKING_UNSIGNED_PRIORITY = U64_MAX // 2
MULTI_PHASE_UNSIGNED_PRIORITY = STAKING_UNSIGNED_PRIORITY - 1

# Staking.
SESSIONS_PER_ERA = 6
BONDING_DURATION = 28
SLASH_DEFER_DURATION = 27
MAX_NOMINATOR_REWARDED_PER_VALIDATOR = 256
OFFCHAIN_REPEAT = 5
OFFENDING_VALIDATORS_THRESHOLD_PERCENT = 17
MAX_ITERATIONS = 10

# Reward curve, in millionths.
REWARD_CURVE = {
    "min_inflation": 25_000,
    "max_inflation": 100_000,
    "ideal_stake": 500_000,
    "falloff": 50_000,
    "max_piece_count": 40,
    "test_precision": 5_000,
}

# Election: each phase takes a quarter of the last session.
SIGNED_PHASE = EPOCH_DURATION_IN_SLOTS // 4
UNSIGNED_PHASE = EPOCH_DURATION_IN_SLOTS // 4
SIGNED_MAX_SUBMISSIONS = 10
SIGNED_REWARD_BASE = 1 * EUROS
SIGNED_DEPOSIT_BASE = 1 * EUROS
SIGNED_DEPOSIT_BYTE = 1 * CENTS
MINER_MAX_ITERATIONS = 10
VOTER_SNAPSHOT_PER_BLOCK = 22_500

# Multisig, indices and preimages.
MULTISIG_DEPOSIT_BASE = deposit(1, 88)
MULTISIG_DEPOSIT_FACTOR = deposit(0, 32)
MAX_SIGNATORIES = 100
INDEX_DEPOSIT = 1 * EUROS
PREIMAGE_MAX_SIZE = 4096 * 1024
PREIMAGE_BASE_DEPOSIT = deposit(2, 64)
PREIMAGE_BYTE_DEPOSIT = deposit(0, 1)


def _perbill_mul(parts: int, value: int) -> int:
    """Apply a parts-per-billion ratio, rounding to nearest with ties going down."""
    quotient, remainder = divmod(parts * value, PERBILL_ONE)
    if remainder * 2 > PERBILL_ONE:
        quotient += 1
    return quotient


NORMAL_BLOCK_LENGTH = _perbill_mul(NORMAL_DISPATCH_RATIO, MAXIMUM_BLOCK_LENGTH)


def random_balancing_iterations(
    seed: bytes, max_iterations: int = MINER_MAX_ITERATIONS
) -> tuple[int, int]:
    """Balancing iterations and tolerance for the election miner.

    The first four bytes of ``seed``, padded with zeros and read as a
    little-endian integer, are reduced modulo ``max_iterations + 1``
    (saturating at the 32-bit limit). With no iterations allowed the result
    is zero. The tolerance is always zero.
    """
    if not 0 <= max_iterations <= U32_MAX:
        raise ValueError(
            f"max iterations must be an unsigned 32-bit integer, got {max_iterations}"
        )
    if max_iterations == 0:
        return 0, 0
    random = int.from_bytes(bytes(seed[:4]).ljust(4, b"\x00"), "little")
    return random % min(max_iterations + 1, U32_MAX), 0


def report_longevity() -> int:
    """How long, in blocks, an equivocation report stays valid."""
    return BONDING_DURATION * SESSIONS_PER_ERA * EPOCH_DURATION


def miner_max_length() -> int:
    """Largest election solution, in bytes: 90% of a normal block's length."""
    return _perbill_mul(900_000_000, NORMAL_BLOCK_LENGTH)