"""Registry of secure enclaves and of the clusters they are grouped into."""

from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .primitives import U32_MAX, TextFormat

EnclaveId = int
ClusterId = int


@dataclass
class Enclave:
    """A registered enclave and the URI of its API."""

    api_uri: TextFormat


@dataclass
class Cluster:
    """A group of enclaves."""

    enclaves: list[EnclaveId] = field(default_factory=list)


class BadOrigin(Exception):
    """The call was made by an origin not allowed to make it."""


class InsufficientBalance(Exception):
    """An account cannot pay the amount asked of it."""


@dataclass(frozen=True)
class Origin:
    """Who makes a call: a signed account or the root authority."""

    account: Hashable | None = None
    is_root: bool = False

    @classmethod
    def signed(cls, account: Hashable) -> "Origin":
        if account is None:
            raise ValueError("a signed origin needs an account")
        return cls(account=account)

    @classmethod
    def root(cls) -> "Origin":
        return cls(is_root=True)

    def ensure_signed(self) -> Hashable:
        """The signing account; raises BadOrigin for any other origin."""
        if self.is_root or self.account is None:
            raise BadOrigin("a signed origin is required")
        return self.account

    def ensure_root(self) -> None:
        """Raise BadOrigin unless this is the root origin."""
        if not self.is_root:
            raise BadOrigin("the root origin is required")


class SgxErrorKind(Enum):
    UNKNOWN_ENCLAVE_ID = "UnknownEnclaveId"
    UNKNOWN_CLUSTER_ID = "UnknownClusterId"
    NOT_ENCLAVE_OWNER = "NotEnclaveOwner"
    PUBLIC_KEY_ALREADY_TIED_TO_A_CLUSTER = "PublicKeyAlreadyTiedToACluster"
    URI_TOO_SHORT = "UriTooShort"
    URI_TOO_LONG = "UriTooLong"
    ENCLAVE_ID_OVERFLOW = "EnclaveIdOverflow"
    CLUSTER_ID_OVERFLOW = "ClusterIdOverflow"
    CLUSTER_IS_ALREADY_FULL = "ClusterIsAlreadyFull"
    ENCLAVE_ALREADY_ASSIGNED = "EnclaveAlreadyAssigned"
    ENCLAVE_NOT_ASSIGNED = "EnclaveNotAssigned"
    CANNOT_ASSIGN_TO_SAME_CLUSTER = "CannotAssignToSameCluster"
    INTERNAL_LOGICAL_ERROR = "InternalLogicalError"


class SgxError(Exception):
    """A registry call was refused."""

    def __init__(self, kind: SgxErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


class Balances:
    """Free balances of accounts."""

    def __init__(self, existential_deposit: int = 0) -> None:
        if existential_deposit < 0:
            raise ValueError("existential deposit cannot be negative")
        self.existential_deposit = existential_deposit
        self._free: dict[Hashable, int] = {}

    def set_balance(self, account: Hashable, amount: int) -> None:
        if amount < 0:
            raise ValueError("balance cannot be negative")
        self._free[account] = amount

    def free_balance(self, account: Hashable) -> int:
        return self._free.get(account, 0)

    def withdraw(self, account: Hashable, amount: int) -> int:
        """Take ``amount`` from the account, keeping it alive; return the amount taken."""
        if amount < 0:
            raise ValueError("amount cannot be negative")
        balance = self.free_balance(account)
        if balance < amount:
            raise InsufficientBalance(f"account {account!r} cannot pay {amount}")
        remaining = balance - amount
        if self.existential_deposit and remaining < self.existential_deposit:
            raise InsufficientBalance(
                f"account {account!r} would fall below the existential deposit"
            )
        self._free[account] = remaining
        return amount


@dataclass(frozen=True)
class SgxConfig:
    """Parameters of the registry."""

    enclave_fee: int
    cluster_size: int
    min_uri_len: int
    max_uri_len: int
    fees_collector: Callable[[int], None] | None = None


@dataclass(frozen=True)
class SgxEvent:
    """Something the registry did; ``kind`` names what, the other fields say to what."""

    kind: str
    account: Any = None
    owner: Any = None
    api_uri: TextFormat | None = None
    enclave_id: EnclaveId | None = None
    cluster_id: ClusterId | None = None


@dataclass
class GenesisConfig:
    """Enclaves and clusters present from the start."""

    enclaves: list[tuple[Hashable, EnclaveId, TextFormat]] = field(default_factory=list)
    clusters: list[tuple[ClusterId, list[EnclaveId]]] = field(default_factory=list)

    def build(self, pallet: "Sgx") -> None:
        """Write this configuration into the registry's storage."""
        if self.enclaves:
            pallet.enclave_id_generator = self.enclaves[-1][1] + 1
        for account, enclave_id, api_uri in self.enclaves:
            pallet.enclave_index[account] = enclave_id
            pallet.enclave_registry[enclave_id] = Enclave(api_uri)

        if self.clusters:
            pallet.cluster_id_generator = self.clusters[-1][0] + 1
        for cluster_id, enclave_ids in self.clusters:
            for enclave_id in enclave_ids:
                pallet.cluster_index[enclave_id] = cluster_id
            pallet.cluster_registry[cluster_id] = Cluster(list(enclave_ids))


class Sgx:
    """Enclave and cluster registry.

    Every call either succeeds and records an event, or raises and leaves
    storage unchanged.
    """

    def __init__(self, config: SgxConfig, balances: Balances | None = None) -> None:
        self.config = config
        self.balances = balances if balances is not None else Balances()
        self.enclave_registry: dict[EnclaveId, Enclave] = {}
        self.enclave_id_generator: EnclaveId = 0
        self.enclave_index: dict[Hashable, EnclaveId] = {}
        self.cluster_registry: dict[ClusterId, Cluster] = {}
        self.cluster_id_generator: ClusterId = 0
        self.cluster_index: dict[EnclaveId, ClusterId] = {}
        self.events: list[SgxEvent] = []

    def _check_uri(self, api_uri: TextFormat) -> None:
        if len(api_uri) < self.config.min_uri_len:
            raise SgxError(SgxErrorKind.URI_TOO_SHORT)
        if len(api_uri) > self.config.max_uri_len:
            raise SgxError(SgxErrorKind.URI_TOO_LONG)

    def _owned_enclave(self, account: Hashable) -> EnclaveId:
        try:
            return self.enclave_index[account]
        except KeyError:
            raise SgxError(SgxErrorKind.NOT_ENCLAVE_OWNER) from None

    def _cluster(self, cluster_id: ClusterId) -> Cluster:
        try:
            return self.cluster_registry[cluster_id]
        except KeyError:
            raise SgxError(SgxErrorKind.UNKNOWN_CLUSTER_ID) from None

    def new_enclave_id(self) -> tuple[EnclaveId, EnclaveId]:
        """The next enclave id and the one after it."""
        current = self.enclave_id_generator
        if current >= U32_MAX:
            raise SgxError(SgxErrorKind.ENCLAVE_ID_OVERFLOW)
        return current, current + 1

    def register_enclave(self, origin: Origin, api_uri: TextFormat) -> None:
        account = origin.ensure_signed()
        api_uri = bytes(api_uri)
        self._check_uri(api_uri)
        if account in self.enclave_index:
            raise SgxError(SgxErrorKind.PUBLIC_KEY_ALREADY_TIED_TO_A_CLUSTER)
        enclave_id, next_id = self.new_enclave_id()

        paid = self.balances.withdraw(account, self.config.enclave_fee)
        if self.config.fees_collector is not None:
            self.config.fees_collector(paid)

        self.enclave_index[account] = enclave_id
        self.enclave_registry[enclave_id] = Enclave(api_uri)
        self.enclave_id_generator = next_id
        self.events.append(
            SgxEvent("AddedEnclave", account=account, api_uri=api_uri, enclave_id=enclave_id)
        )

    def assign_enclave(self, origin: Origin, cluster_id: ClusterId) -> None:
        account = origin.ensure_signed()
        enclave_id = self._owned_enclave(account)
        if enclave_id in self.cluster_index:
            raise SgxError(SgxErrorKind.ENCLAVE_ALREADY_ASSIGNED)
        cluster = self._cluster(cluster_id)
        if len(cluster.enclaves) >= self.config.cluster_size:
            raise SgxError(SgxErrorKind.CLUSTER_IS_ALREADY_FULL)

        cluster.enclaves.append(enclave_id)
        self.cluster_index[enclave_id] = cluster_id
        self.events.append(
            SgxEvent("AssignedEnclave", enclave_id=enclave_id, cluster_id=cluster_id)
        )

    def unassign_enclave(self, origin: Origin) -> None:
        account = origin.ensure_signed()
        enclave_id = self._owned_enclave(account)
        try:
            cluster_id = self.cluster_index[enclave_id]
        except KeyError:
            raise SgxError(SgxErrorKind.ENCLAVE_NOT_ASSIGNED) from None
        cluster = self._cluster(cluster_id)
        if enclave_id not in cluster.enclaves:
            raise SgxError(SgxErrorKind.INTERNAL_LOGICAL_ERROR)

        cluster.enclaves.remove(enclave_id)
        del self.cluster_index[enclave_id]
        self.events.append(SgxEvent("UnAssignedEnclave", enclave_id=enclave_id))

    def update_enclave(self, origin: Origin, api_uri: TextFormat) -> None:
        account = origin.ensure_signed()
        enclave_id = self._owned_enclave(account)
        api_uri = bytes(api_uri)
        self._check_uri(api_uri)
        enclave = self.enclave_registry.get(enclave_id)
        if enclave is None:
            raise SgxError(SgxErrorKind.UNKNOWN_ENCLAVE_ID)

        enclave.api_uri = api_uri
        self.events.append(SgxEvent("UpdatedEnclave", enclave_id=enclave_id, api_uri=api_uri))

    def change_enclave_owner(self, origin: Origin, new_owner: Hashable) -> None:
        old_owner = origin.ensure_signed()
        enclave_id = self._owned_enclave(old_owner)
        if new_owner in self.enclave_index:
            raise SgxError(SgxErrorKind.PUBLIC_KEY_ALREADY_TIED_TO_A_CLUSTER)
        if enclave_id not in self.enclave_registry:
            raise SgxError(SgxErrorKind.UNKNOWN_ENCLAVE_ID)

        del self.enclave_index[old_owner]
        self.enclave_index[new_owner] = enclave_id
        self.events.append(SgxEvent("NewEnclaveOwner", enclave_id=enclave_id, owner=new_owner))

    def create_cluster(self, origin: Origin) -> None:
        origin.ensure_root()
        cluster_id = self.cluster_id_generator
        if cluster_id >= U32_MAX:
            raise SgxError(SgxErrorKind.CLUSTER_ID_OVERFLOW)

        self.cluster_registry[cluster_id] = Cluster()
        self.cluster_id_generator = cluster_id + 1
        self.events.append(SgxEvent("AddedCluster", cluster_id=cluster_id))

    def remove_cluster(self, origin: Origin, cluster_id: ClusterId) -> None:
        origin.ensure_root()
        cluster = self._cluster(cluster_id)
        if any(enclave_id not in self.cluster_index for enclave_id in cluster.enclaves):
            raise SgxError(SgxErrorKind.INTERNAL_LOGICAL_ERROR)

        for enclave_id in cluster.enclaves:
            del self.cluster_index[enclave_id]
        del self.cluster_registry[cluster_id]
        self.events.append(SgxEvent("RemovedCluster", cluster_id=cluster_id))