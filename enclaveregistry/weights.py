"""Dispatch weights of the enclave registry and the timed escrow calls."""

from __future__ import annotations

from dataclasses import dataclass, field

WEIGHT_MAX = 2**64 - 1


def _saturating_add(left: int, right: int) -> int:
    return min(left + right, WEIGHT_MAX)


def _saturating_mul(left: int, right: int) -> int:
    return min(left * right, WEIGHT_MAX)


@dataclass(frozen=True)
class DbWeight:
    """Cost of one storage read and one storage write."""

    read: int = 25_000_000
    write: int = 100_000_000

    def __post_init__(self) -> None:
        for name in ("read", "write"):
            value = getattr(self, name)
            if not 0 <= value <= WEIGHT_MAX:
                raise ValueError(f"{name} weight must be an unsigned 64-bit integer")

    def reads(self, count: int) -> int:
        """Weight of ``count`` storage reads, saturating at the maximum weight."""
        return _saturating_mul(self.read, count)

    def writes(self, count: int) -> int:
        """Weight of ``count`` storage writes, saturating at the maximum weight."""
        return _saturating_mul(self.write, count)

    def reads_writes(self, reads: int, writes: int) -> int:
        """Weight of the given numbers of reads and writes together."""
        return _saturating_add(self.reads(reads), self.writes(writes))


def _weight(db: DbWeight, base: int, reads: int, writes: int) -> int:
    return _saturating_add(_saturating_add(base, db.reads(reads)), db.writes(writes))


@dataclass(frozen=True)
class SgxWeights:
    """Weights of the enclave and cluster registry calls."""

    db: DbWeight = field(default_factory=DbWeight)

    def register_enclave(self) -> int:
        # EnclaveIndex (r:1 w:1), EnclaveIdGenerator (r:1 w:1), EnclaveRegistry (w:1)
        return _weight(self.db, 66_551_000, 2, 3)

    def assign_enclave(self) -> int:
        # EnclaveIndex (r:1), ClusterIndex (r:1 w:1), ClusterRegistry (r:1 w:1)
        return _weight(self.db, 33_980_000, 3, 2)

    def unassign_enclave(self) -> int:
        # EnclaveIndex (r:1), ClusterIndex (r:1 w:1), ClusterRegistry (r:1 w:1)
        return _weight(self.db, 34_610_000, 3, 2)

    def update_enclave(self) -> int:
        # EnclaveIndex (r:1), EnclaveRegistry (r:1 w:1)
        return _weight(self.db, 28_110_000, 2, 1)

    def change_enclave_owner(self) -> int:
        # EnclaveIndex (r:2 w:2), EnclaveRegistry (r:1)
        return _weight(self.db, 35_830_000, 3, 2)

    def create_cluster(self) -> int:
        # EnclaveIdGenerator (r:1), ClusterIdGenerator (w:1), ClusterRegistry (w:1)
        return _weight(self.db, 21_880_000, 1, 2)

    def remove_cluster(self) -> int:
        # ClusterRegistry (r:1 w:1)
        return _weight(self.db, 23_880_000, 1, 1)


@dataclass(frozen=True)
class TimedEscrowWeights:
    """Weights of the timed escrow calls."""

    db: DbWeight = field(default_factory=DbWeight)

    def create(self) -> int:
        return _weight(self.db, 126_000_000, 3, 3)

    def cancel(self) -> int:
        return _weight(self.db, 118_000_000, 3, 3)

    def complete_transfer(self) -> int:
        return _weight(self.db, 92_000_000, 1, 1)