"""Locating where a peer's chain and the local ledger part ways."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Mapping
from typing import Optional

__all__ = ["InvalidBlockLocatorError", "find_common_ancestor"]


class InvalidBlockLocatorError(ValueError):
    """A peer's block locator pairs a known block hash with the wrong height."""

    def __init__(self, expected_block_height: int, block_hash: Hashable) -> None:
        super().__init__(
            f"Invalid block height {expected_block_height} for block hash {block_hash}"
        )
        self.expected_block_height = expected_block_height
        self.block_hash = block_hash


def _lookup(
    block_height_of: Callable[[Hashable], Optional[int]], block_hash: Hashable
) -> Optional[int]:
    try:
        return block_height_of(block_hash)
    except LookupError:
        return None


def find_common_ancestor(
    block_locators: Mapping[int, Hashable],
    block_height_of: Callable[[Hashable], Optional[int]],
) -> tuple[int, Optional[int]]:
    """Return the common ancestor height and the first deviating locator.

    ``block_locators`` maps block heights to block hashes as advertised by a
    peer. ``block_height_of`` gives the local height of a block hash, and
    returns None or raises ``LookupError`` when the hash is unknown locally.

    The common ancestor is the greatest locator height known locally (0 if
    none is); the first deviating locator is the smallest height whose hash
    is unknown locally, or None. Raises ``InvalidBlockLocatorError`` if a
    known hash sits at a different height locally than the peer claims.
    """
    maximum_common_ancestor = 0
    deviating_heights: list[int] = []

    for block_height, block_hash in block_locators.items():
        expected_block_height = _lookup(block_height_of, block_hash)
        if expected_block_height is None:
            deviating_heights.append(block_height)
        elif expected_block_height != block_height:
            raise InvalidBlockLocatorError(expected_block_height, block_hash)
        else:
            maximum_common_ancestor = max(maximum_common_ancestor, expected_block_height)

    first_deviating_locator = min(deviating_heights, default=None)
    return maximum_common_ancestor, first_deviating_locator