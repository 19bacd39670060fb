# snarknode

Building blocks for a peer-to-peer ledger node: per-role environment
profiles, a thread-safe node status, a bounded map, a registry of tasks that
are stopped together, a bounded log cache, tab selection state, a start-up
banner, and the logic that decides which blocks to request from a peer while
syncing.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Environments

`snarknode.environment` describes each kind of node as a frozen
`Environment` dataclass of limits, timeouts and bootstrap peers:

```python
from snarknode.environment import client, NodeType

env = client(network_id=2)
env.node_type is NodeType.CLIENT   # True
str(env.node_type)                 # "Client"
env.default_node_port()            # 4132
env.default_rpc_port()             # 3032
env.maximum_number_of_peers        # 21
env.maximum_fork_depth             # 4096
env.maximum_block_request          # 250
```

`miner`, `sync_node`, `client_trial` and `miner_trial` build the other
profiles. The bootstrap addresses are available as `LOCAL_SYNC_NODES` and
`TRIAL_SYNC_NODES`.

## Node status

`snarknode.status.Status` holds a `State` behind a lock, so it may be shared
between threads. A new status starts out as `State.PEERING`.

```python
from snarknode.status import Status, State

status = Status()
status.is_peering()           # True
status.update(State.SYNCING)
status.get()                  # State.SYNCING
status.is_syncing()           # True
str(State.SHUTTING_DOWN)      # "ShuttingDown"
```

## Bounded map

`snarknode.circular_map.CircularMap` keeps at most `capacity` key/value pairs
in insertion order; once full, adding a pair drops the oldest. An existing
key is never overwritten. Keys are compared by equality, so they need not be
hashable.

```python
from snarknode.circular_map import CircularMap

seen = CircularMap(2)
seen.insert("a", 1)   # True
seen.insert("a", 9)   # False, the key is already present
seen.insert("b", 2)
seen.insert("c", 3)   # "a" is dropped
seen.get("a")         # None
"c" in seen           # True
seen.remove("b")
len(seen)             # 1
```

## Syncing decisions

`snarknode.ancestry.find_common_ancestor` takes a peer's block locators
(a mapping of block height to block hash) and a function giving the local
height of a hash (returning `None` or raising `LookupError` when the hash is
unknown). It returns the highest locator height known locally and the lowest
height that is not:

```python
from snarknode.ancestry import find_common_ancestor

local_heights = {"genesis": 0, "hash-1": 1}
locators = {0: "genesis", 1: "hash-1", 2: "hash-2"}
find_common_ancestor(locators, local_heights.get)   # (1, 2)
```

If a known hash sits at a different height locally than the peer claims,
`InvalidBlockLocatorError` (a `ValueError`) is raised.

`snarknode.block_requests.handle_block_requests` then decides what to do:

```python
from snarknode.block_requests import handle_block_requests, Proceed, Case
from snarknode.environment import client

outcome = handle_block_requests(
    client(2),
    100,                # latest block height
    100,                # latest cumulative weight
    "127.0.0.1:4132",   # the peer
    False,              # whether the peer says this ledger is on a fork
    500,                # peer's block height
    500,                # peer's cumulative weight
    100,                # common ancestor
    101,                # first deviating locator
)
isinstance(outcome, Proceed)           # True
outcome.case is Case.TWO_B             # True
outcome.proceed.start_block_height     # 101
outcome.proceed.end_block_height       # 350
```

The outcome is one of `Abort`, `AbortAndDisconnect` (with a reason) or
`Proceed` (with a `BlockRequestProceed` range and whether the ledger must
revert), each carrying the `Case` that led to it. At most the environment's
`maximum_block_request` blocks are requested at once.

## Other helpers

- `snarknode.tasks.Tasks` collects asyncio tasks and futures, threads, and
  objects with a `destroy()` method. `flush()` cancels the futures, joins the
  threads in the background and calls `destroy()` on the rest; `close()` does
  the same and ignores anything appended afterwards. It is also a context
  manager that closes on exit.
- `snarknode.logs.LogCache` holds up to `limit` log entries (128 by default).
  Byte entries are decoded as UTF-8, and become empty strings if they are not
  valid. When a batch would push the cache past its limit, the older entries
  are discarded and only the first `limit` entries of the batch are kept.
  `text()` joins the cached entries.
- `snarknode.tabs.TabsState` holds tab titles (`" Overview "` and `" Logs "`
  by default) and the selected index; `next()` and `previous()` wrap around,
  and `title()` returns the selected title.
- `snarknode.banner.welcome_message()` returns the start-up logo and greeting
  as bold ANSI-coloured text.

## What this package does not do

It contains no network server or peer connections, no ledger storage, no RPC
server, no command-line program and no terminal dashboard: `LogCache` and
`TabsState` hold the state such a dashboard would display, but nothing here
draws to a terminal. The syncing functions decide what to request; sending
the requests and applying the blocks is left to the caller.