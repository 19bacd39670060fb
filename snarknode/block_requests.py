"""Deciding which blocks to request from the peer with the heaviest chain."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Optional, Union

from snarknode.environment import Environment

__all__ = [
    "Case",
    "BlockRequestProceed",
    "Abort",
    "AbortAndDisconnect",
    "Proceed",
    "BlockRequestOutcome",
    "handle_block_requests",
]

_log = logging.getLogger(__name__)


class Case(enum.Enum):
    """The situation the block request handler found itself in."""

    #: The common ancestor exceeds the latest block height; an internal error.
    ZERO = "0"
    #: This ledger is ahead of the peer; nothing to request.
    ONE = "1"
    #: Behind the peer, but the peer did not say whether we are on a fork.
    TWO_A = "2a"
    #: Behind the peer on the same canonical chain; request from the latest block.
    TWO_B = "2b"
    #: On a fork whose common ancestor lies within the maximum fork depth.
    TWO_CA = "2ca"
    #: On a fork that provably lies beyond the maximum fork depth; disconnect.
    TWO_CBA = "2cba"
    #: On a fork that may lie within the maximum fork depth; revert anyway.
    TWO_CBB = "2cbb"
    #: On a fork beyond the maximum fork depth with no deviating locator; abort.
    TWO_CC = "2cc"


@dataclass(frozen=True)
class BlockRequestProceed:
    """The range of blocks to request, and whether the ledger must revert."""

    start_block_height: int
    end_block_height: int
    ledger_is_on_fork: bool


@dataclass(frozen=True)
class Abort:
    """Send no block requests."""

    case: Case


@dataclass(frozen=True)
class AbortAndDisconnect:
    """Send no block requests and drop the peer."""

    case: Case
    reason: str


@dataclass(frozen=True)
class Proceed:
    """Send block requests for the given range."""

    case: Case
    proceed: BlockRequestProceed


BlockRequestOutcome = Union[Abort, AbortAndDisconnect, Proceed]


def _saturating_sub(a: int, b: int) -> int:
    return max(a - b, 0)


def handle_block_requests(
    environment: Environment,
    latest_block_height: int,
    latest_cumulative_weight: int,
    maximal_peer: str,
    maximal_peer_is_on_fork: Optional[bool],
    maximum_block_height: int,
    maximum_cumulative_weight: int,
    maximum_common_ancestor: int,
    first_deviating_locator: Optional[int],
) -> BlockRequestOutcome:
    """Decide how to sync with the maximal peer; see :class:`Case`."""
    if latest_block_height < maximum_common_ancestor:
        _log.warning(
            "Common ancestor %s cannot exceed the latest block %s",
            maximum_common_ancestor,
            latest_block_height,
        )
        return Abort(Case.ZERO)

    if latest_cumulative_weight >= maximum_cumulative_weight:
        return Abort(Case.ONE)

    if maximal_peer_is_on_fork is None:
        return Abort(Case.TWO_A)

    if not maximal_peer_is_on_fork:
        case = Case.TWO_B
        latest_common_ancestor = (
            maximum_common_ancestor if first_deviating_locator is None else latest_block_height
        )
        ledger_is_on_fork = False
    elif (
        _saturating_sub(latest_block_height, maximum_common_ancestor)
        <= environment.maximum_fork_depth
    ):
        _log.info(
            "Discovered a canonical chain from %s with common ancestor %s and cumulative weight %s",
            maximal_peer,
            maximum_common_ancestor,
            maximum_cumulative_weight,
        )
        case = Case.TWO_CA
        latest_common_ancestor = maximum_common_ancestor
        # Revert only if the latest block is not itself the common ancestor.
        ledger_is_on_fork = latest_block_height != maximum_common_ancestor
    elif first_deviating_locator is not None:
        if (
            _saturating_sub(latest_block_height, first_deviating_locator)
            >= environment.maximum_fork_depth
        ):
            _log.debug("Peer %s exceeded the permitted fork range, disconnecting", maximal_peer)
            return AbortAndDisconnect(Case.TWO_CBA, "exceeded fork range")
        _log.info(
            "Discovered a potentially better canonical chain from %s with common ancestor %s "
            "and cumulative weight %s",
            maximal_peer,
            maximum_common_ancestor,
            maximum_cumulative_weight,
        )
        case = Case.TWO_CBB
        latest_common_ancestor = maximum_common_ancestor
        ledger_is_on_fork = True
    else:
        _log.warning("Peer %s is missing first deviating locator", maximal_peer)
        return Abort(Case.TWO_CC)

    if maximum_block_height < latest_common_ancestor:
        raise ValueError(
            f"maximum block height {maximum_block_height} is below "
            f"the common ancestor {latest_common_ancestor}"
        )
    number_of_block_requests = min(
        maximum_block_height - latest_common_ancestor, environment.maximum_block_request
    )
    start_block_height = latest_common_ancestor + 1
    end_block_height = start_block_height + number_of_block_requests - 1

    return Proceed(
        case,
        BlockRequestProceed(
            start_block_height=start_block_height,
            end_block_height=end_block_height,
            ledger_is_on_fork=ledger_is_on_fork,
        ),
    )