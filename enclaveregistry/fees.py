"""Transaction fee handling and block weight parameters of the runtime."""

from __future__ import annotations

from .constants import CENTS, MILLICENTS

U32_MAX = 2**32 - 1
U64_MAX = 2**64 - 1
U128_MAX = 2**128 - 1

PERBILL_ONE = 1_000_000_000
WEIGHT_PER_SECOND = 1_000_000_000_000

BLOCK_HASH_COUNT = 2400
SS58_PREFIX = 42

# A single extrinsic may not consume more than the available ratio minus the
# share assumed for block initialisation.
AVERAGE_ON_INITIALIZE_RATIO = 10_000_000  # parts per billion, 1%
NORMAL_DISPATCH_RATIO = 750_000_000  # parts per billion, 75%
MAXIMUM_BLOCK_WEIGHT = 2 * WEIGHT_PER_SECOND
MAXIMUM_BLOCK_LENGTH = 5 * 1024 * 1024

TRANSACTION_BYTE_FEE = 10 * MILLICENTS
OPERATIONAL_FEE_MULTIPLIER = 5
TARGET_BLOCK_FULLNESS_PERCENT = 25
EXISTENTIAL_DEPOSIT = 5 * CENTS
MAX_LOCKS = 50
MAX_RESERVES = 50

# Share of fees and tips going to the first and second destination.
FEE_SPLIT = (80, 20)

if NORMAL_DISPATCH_RATIO < AVERAGE_ON_INITIALIZE_RATIO:
    raise RuntimeError("normal dispatch ratio must cover block initialisation")


def _check_range(name: str, value: int, maximum: int) -> None:
    if not 0 <= value <= maximum:
        raise ValueError(f"{name} must lie between 0 and {maximum}, got {value}")


def _perbill_mul(parts: int, value: int) -> int:
    """Apply a parts-per-billion ratio to ``value``, rounding to nearest, ties down."""
    quotient, remainder = divmod(parts * value, PERBILL_ONE)
    if remainder * 2 > PERBILL_ONE:
        quotient += 1
    return quotient


def transaction_period(block_hash_count: int = BLOCK_HASH_COUNT) -> int:
    """Longest mortality period for a transaction, in blocks.

    It is half the smallest power of two not below ``block_hash_count``; when
    that power does not fit in 32 bits the period is 2.
    """
    _check_range("block hash count", block_hash_count, U32_MAX)
    power = 1 if block_hash_count <= 1 else 1 << (block_hash_count - 1).bit_length()
    if power > U32_MAX:
        return 2
    return power // 2


def ration(amount: int, first: int, second: int) -> tuple[int, int]:
    """Split ``amount`` in the proportion ``first`` to ``second``.

    The first share is rounded down; the second takes what is left. When both
    proportions are zero nothing is handed out.
    """
    _check_range("amount", amount, U128_MAX)
    _check_range("first", first, U32_MAX)
    _check_range("second", second, U32_MAX)
    total = min(first + second, U32_MAX)
    if total == 0:
        return 0, 0
    share = min(amount * first, U128_MAX) // total
    share = min(share, amount)
    return share, amount - share


def deal_with_fees(fees: int | None, tips: int | None = None) -> tuple[int, int]:
    """Split the fees, and the tips if any, into the two parts paid to the treasury.

    Fees and tips are each rationed 80 to 20 and the shares merged. Without
    fees nothing is split, tips included.
    """
    if fees is None:
        return 0, 0
    first, second = ration(fees, *FEE_SPLIT)
    if tips is not None:
        tip_first, tip_second = ration(tips, *FEE_SPLIT)
        first = min(first + tip_first, U128_MAX)
        second = min(second + tip_second, U128_MAX)
    return first, second


def operational_reserved_weight() -> int:
    """Extra weight reserved for operational extrinsics beyond the normal share."""
    return MAXIMUM_BLOCK_WEIGHT - _perbill_mul(NORMAL_DISPATCH_RATIO, MAXIMUM_BLOCK_WEIGHT)