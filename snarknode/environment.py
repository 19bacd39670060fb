"""Node types and the per-role network environment settings."""

from __future__ import annotations

import enum
from dataclasses import dataclass

__all__ = [
    "NodeType",
    "Environment",
    "LOCAL_SYNC_NODES",
    "TRIAL_SYNC_NODES",
    "client",
    "miner",
    "sync_node",
    "client_trial",
    "miner_trial",
]


class NodeType(enum.IntEnum):
    """The role a node plays in the network."""

    #: A full node, capable of sending and receiving blocks.
    CLIENT = 0
    #: A full node, capable of producing new blocks.
    MINER = 1
    #: A discovery node, capable of sharing peers of the network.
    BEACON = 2
    #: A discovery node, capable of syncing nodes for the network.
    SYNC = 3

    def __str__(self) -> str:
        return self.name.capitalize()


LOCAL_SYNC_NODES: tuple[str, ...] = (
    "127.0.0.1:4131",
    "127.0.0.1:4133",
    "127.0.0.1:4134",
    "127.0.0.1:4135",
    "127.0.0.1:4136",
    "127.0.0.1:4137",
    "127.0.0.1:4138",
    "127.0.0.1:4139",
    "127.0.0.1:4140",
    "127.0.0.1:4141",
    "127.0.0.1:4142",
    "127.0.0.1:4143",
    "127.0.0.1:4144",
)

TRIAL_SYNC_NODES: tuple[str, ...] = (
    "144.126.219.193:4132",
    "165.232.145.194:4132",
    "143.198.164.241:4132",
    "188.166.7.13:4132",
    "167.99.40.226:4132",
    "159.223.124.150:4132",
    "137.184.192.155:4132",
    "147.182.213.228:4132",
    "137.184.202.162:4132",
    "159.223.118.35:4132",
    "161.35.106.91:4132",
    "157.245.133.62:4132",
    "143.198.166.150:4132",
)


@dataclass(frozen=True)
class Environment:
    """Tunable parameters of a node, fixed by its role and network."""

    network_id: int
    node_type: NodeType
    minimum_number_of_peers: int
    maximum_number_of_peers: int
    #: Version of the network protocol; raised to force users to update.
    message_version: int = 11
    #: Whether a mining node crafts public coinbase transactions.
    coinbase_is_public: bool = False
    beacon_nodes: tuple[str, ...] = ()
    sync_nodes: tuple[str, ...] = LOCAL_SYNC_NODES
    heartbeat_in_secs: int = 9
    connection_timeout_in_millis: int = 500
    ping_sleep_in_secs: int = 60
    #: After this long without a message a peer is considered gone.
    radio_silence_in_secs: int = 210
    failure_expiry_time_in_secs: int = 7200
    maximum_connection_failures: int = 3
    maximum_candidate_peers: int = 10_000
    maximum_message_size: int = 128 * 1024 * 1024
    maximum_block_request: int = 250
    maximum_fork_depth: int = 4096
    maximum_number_of_failures: int = 1024

    def default_node_port(self) -> int:
        """Port on which the node server listens by default."""
        return 4130 + self.network_id

    def default_rpc_port(self) -> int:
        """Port on which the RPC server listens by default."""
        return 3030 + self.network_id


def client(network_id: int) -> Environment:
    """Environment of a client node."""
    return Environment(
        network_id=network_id,
        node_type=NodeType.CLIENT,
        minimum_number_of_peers=2,
        maximum_number_of_peers=21,
    )


def miner(network_id: int) -> Environment:
    """Environment of a mining node."""
    return Environment(
        network_id=network_id,
        node_type=NodeType.MINER,
        coinbase_is_public=True,
        minimum_number_of_peers=1,
        maximum_number_of_peers=21,
    )


def sync_node(network_id: int) -> Environment:
    """Environment of a sync node."""
    return Environment(
        network_id=network_id,
        node_type=NodeType.SYNC,
        minimum_number_of_peers=35,
        maximum_number_of_peers=2048,
        heartbeat_in_secs=5,
    )


def client_trial(network_id: int) -> Environment:
    """Environment of a client node on the trial network."""
    return Environment(
        network_id=network_id,
        node_type=NodeType.CLIENT,
        sync_nodes=TRIAL_SYNC_NODES,
        minimum_number_of_peers=11,
        maximum_number_of_peers=31,
    )


def miner_trial(network_id: int) -> Environment:
    """Environment of a mining node on the trial network."""
    return Environment(
        network_id=network_id,
        node_type=NodeType.MINER,
        sync_nodes=TRIAL_SYNC_NODES,
        minimum_number_of_peers=11,
        maximum_number_of_peers=21,
        coinbase_is_public=True,
    )