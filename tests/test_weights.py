import pytest

from enclaveregistry.constants import U64_MAX
from enclaveregistry.weights import DbWeight, SgxWeights, TimedEscrowWeights

FREE = DbWeight(read=0, write=0)
READ_ONLY = DbWeight(read=1, write=0)
WRITE_ONLY = DbWeight(read=0, write=1)


@pytest.mark.parametrize(
    "name, base, reads, writes",
    [
        ("register_enclave", 66_551_000, 2, 3),
        ("assign_enclave", 33_980_000, 3, 2),
        ("unassign_enclave", 34_610_000, 3, 2),
        ("update_enclave", 28_110_000, 2, 1),
        ("change_enclave_owner", 35_830_000, 3, 2),
        ("create_cluster", 21_880_000, 1, 2),
        ("remove_cluster", 23_880_000, 1, 1),
    ],
)
def test_sgx_weights(name, base, reads, writes):
    free = getattr(SgxWeights(FREE), name)()
    assert free == base
    assert getattr(SgxWeights(READ_ONLY), name)() - free == reads
    assert getattr(SgxWeights(WRITE_ONLY), name)() - free == writes


@pytest.mark.parametrize(
    "name, base, reads, writes",
    [
        ("create", 126_000_000, 3, 3),
        ("cancel", 118_000_000, 3, 3),
        ("complete_transfer", 92_000_000, 1, 1),
    ],
)
def test_timed_escrow_weights(name, base, reads, writes):
    free = getattr(TimedEscrowWeights(FREE), name)()
    assert free == base
    assert getattr(TimedEscrowWeights(READ_ONLY), name)() - free == reads
    assert getattr(TimedEscrowWeights(WRITE_ONLY), name)() - free == writes


def test_default_db_weight_is_used_and_increases_cost():
    weights = SgxWeights()
    assert weights.register_enclave() > SgxWeights(FREE).register_enclave()
    assert weights.db == DbWeight()


def test_reads_writes_combines_both():
    db = DbWeight(read=7, write=11)
    assert db.reads_writes(4, 5) == db.reads(4) + db.writes(5)


def test_reads_saturate():
    db = DbWeight(read=U64_MAX, write=U64_MAX)
    assert db.reads(2) == U64_MAX
    assert db.writes(3) == U64_MAX
    assert db.reads_writes(1, 1) == U64_MAX
    assert SgxWeights(db).register_enclave() == U64_MAX


def test_invalid_db_weight():
    with pytest.raises(ValueError):
        DbWeight(read=-1)
    with pytest.raises(ValueError):
        DbWeight(write=U64_MAX + 1)