# enclaveregistry

An in-memory model of an enclave and cluster registry, together with the
runtime constants, version data, fee splitting and call weights that go
with it. It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `enclaveregistry.sgx`

The registry itself.

- `Sgx(config, balances=None)` keeps its state in plain attributes:
  `enclave_registry`, `enclave_index` (account to enclave id),
  `enclave_id_generator`, `cluster_registry`, `cluster_index` (enclave id to
  cluster id), `cluster_id_generator`, and `events`, a list of `SgxEvent`
  appended to by every successful call.
- Calls take an `Origin`, built with `Origin.signed(account)` or
  `Origin.root()`:
  - `register_enclave(origin, api_uri)` checks the URI length, refuses an
    account that already owns an enclave, withdraws `enclave_fee` from the
    account (handing it to `fees_collector` if one is configured) and stores
    the enclave under the next id.
  - `assign_enclave(origin, cluster_id)` and `unassign_enclave(origin)` add
    the caller's enclave to a cluster of at most `cluster_size` enclaves, or
    take it out again.
  - `update_enclave(origin, api_uri)` replaces the caller's enclave URI.
  - `change_enclave_owner(origin, new_owner)` moves the caller's enclave to
    an account that owns none.
  - `create_cluster(origin)` and `remove_cluster(origin, cluster_id)` need
    the root origin.
  - `new_enclave_id()` returns the next id and the one after it.
- A refused call raises `SgxError` (its `kind` is an `SgxErrorKind`),
  `BadOrigin` for the wrong kind of origin, or `InsufficientBalance` when the
  fee cannot be paid. Checks are made before storage is written.
- `SgxConfig(enclave_fee, cluster_size, min_uri_len, max_uri_len,
  fees_collector=None)` holds the parameters.
- `Balances(existential_deposit=0)` holds free balances:
  `set_balance`, `free_balance` and `withdraw`.
- `GenesisConfig(enclaves, clusters).build(pallet)` seeds a registry with
  enclaves and clusters and sets the id generators past the last ones given.
- `Enclave` and `Cluster` are the stored records.

### `enclaveregistry.weights`

`DbWeight` (a read costs 25,000,000 and a write 100,000,000 by default) with
`reads`, `writes` and `reads_writes`; `SgxWeights` gives the weight of each
registry call and `TimedEscrowWeights` that of `create`, `cancel` and
`complete_transfer`. All sums saturate at the largest unsigned 64-bit value.

### `enclaveregistry.primitives`

Data types: `NFTData` (with `NFTData.new_default(owner, ipfs_reference,
series_id)`), `NFTSeriesDetails`, `MarketplaceType` and
`MarketplaceInformation`.

### `enclaveregistry.constants`

Currency units (`UNITS`, `EUROS`, `CENTS`, `MILLICENTS`), `deposit(items,
byte_count)`, time units in blocks (`MINUTES`, `HOURS`, `DAYS`, `WEEKS`,
`EPOCH_DURATION_IN_SLOTS`), the 200 voter bag `THRESHOLDS` and
`bag_upper_threshold(weight)`.

### `enclaveregistry.version`

`RuntimeVersion` with `can_use_native(other)`, the `VERSION` constant,
`NativeVersion` and `native_version()`.

### `enclaveregistry.fees`

`ration(amount, first, second)`, `deal_with_fees(fees, tips=None)` (an
80/20 split of fees and tips), `transaction_period(block_hash_count)` and
`operational_reserved_weight()`, with the block weight and fee constants.

### `enclaveregistry.staking`

`random_balancing_iterations(seed, max_iterations)`, `report_longevity()`
and `miner_max_length()`, with the staking, session and election constants.

## Example

```python
from enclaveregistry.sgx import Balances, Origin, Sgx, SgxConfig, SgxError

balances = Balances()
balances.set_balance(1, 100)

registry = Sgx(
    SgxConfig(enclave_fee=5, cluster_size=2, min_uri_len=1, max_uri_len=5),
    balances,
)
registry.create_cluster(Origin.root())
registry.register_enclave(Origin.signed(1), b"\x01")
registry.assign_enclave(Origin.signed(1), 0)

assert balances.free_balance(1) == 95

try:
    registry.register_enclave(Origin.signed(1), b"\x01")
except SgxError as error:
    print(error.kind)  # SgxErrorKind.PUBLIC_KEY_ALREADY_TIED_TO_A_CLUSTER
```

## What it does not do

- State lives only in memory; nothing is stored on disk and there is no
  network node, command or server.
- NFTs, marketplaces and the timed escrow are present only as data types
  and call weights: there is no NFT ownership tracking, no scheduler and no
  escrow transfer logic.