"""
=============================================================================
Price Feed Registry (registry.py)
=============================================================================

Fixed name -> price source lookup table. Built once at startup; there is no
API to add, remove or replace entries afterwards.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Mapping, Tuple, TYPE_CHECKING

from hello_blockchain.errors import NameNotFound
from hello_blockchain.price_feed import ChainlinkPriceFeed, PriceSource, StaticPriceFeed

if TYPE_CHECKING:
    from hello_blockchain.chain import Chain

logger = logging.getLogger("hello-blockchain.registry")


class NameRegistry:
    """Immutable mapping from display name to price source.

    Entries are taken in order; if a name appears more than once the last
    entry wins.
    """

    def __init__(self, entries: Iterable[Tuple[str, PriceSource]]):
        self._entries: Dict[str, PriceSource] = {}
        for name, source in entries:
            if name in self._entries:
                logger.warning(f"Duplicate registry name {name!r}, keeping the last entry")
            self._entries[name] = source

    @classmethod
    def from_feeds(cls, feeds: Mapping[str, str], chain: "Chain") -> "NameRegistry":
        """Build a registry of on-chain feeds from a {name: address} mapping."""
        return cls((name, ChainlinkPriceFeed(address, chain)) for name, address in feeds.items())

    @classmethod
    def from_static(cls, prices: Mapping[str, Tuple[int, int]]) -> "NameRegistry":
        """Build a registry of in-memory feeds from {name: (price, precision)}."""
        return cls(
            (name, StaticPriceFeed(price, precision)) for name, (price, precision) in prices.items()
        )

    def lookup(self, name: str) -> PriceSource:
        try:
            return self._entries[name]
        except KeyError:
            raise NameNotFound(name) from None

    def names(self) -> List[str]:
        return list(self._entries)

    def items(self) -> Iterator[Tuple[str, PriceSource]]:
        return iter(list(self._entries.items()))

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)
