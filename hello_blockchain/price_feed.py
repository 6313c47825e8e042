"""
=============================================================================
Price Feeds (price_feed.py)
=============================================================================

Read-only price sources used by the price greeter:
- ChainlinkPriceFeed: wraps a deployed AggregatorV3Interface contract
- StaticPriceFeed: fixed in-memory values for simulation and local runs
"""

from __future__ import annotations

import abc
import logging
from typing import Optional, TYPE_CHECKING

from hello_blockchain.errors import SourceUnavailable

if TYPE_CHECKING:
    from hello_blockchain.chain import Chain

logger = logging.getLogger("hello-blockchain.price_feed")


# =============================================================================
# ABI Definition (AggregatorV3Interface, read-only subset)
# =============================================================================

AGGREGATOR_V3_ABI = [
    {
        "inputs": [],
        "name": "decimals",
        "outputs": [{"internalType": "uint8", "name": "", "type": "uint8"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [],
        "name": "description",
        "outputs": [{"internalType": "string", "name": "", "type": "string"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [],
        "name": "latestRoundData",
        "outputs": [
            {"internalType": "uint80", "name": "roundId", "type": "uint80"},
            {"internalType": "int256", "name": "answer", "type": "int256"},
            {"internalType": "uint256", "name": "startedAt", "type": "uint256"},
            {"internalType": "uint256", "name": "updatedAt", "type": "uint256"},
            {"internalType": "uint80", "name": "answeredInRound", "type": "uint80"},
        ],
        "stateMutability": "view",
        "type": "function",
    },
]


class PriceSource(abc.ABC):
    """A source of scaled integer prices."""

    @abc.abstractmethod
    def latest_price(self) -> int:
        """Return the most recent price, scaled by 10 ** precision()."""
        raise NotImplementedError

    @abc.abstractmethod
    def precision(self) -> int:
        """Return the number of implied fractional decimal digits."""
        raise NotImplementedError

    def description(self) -> str:
        """Return a human-readable label for the feed, e.g. "AVAX / USD"."""
        return ""


class ChainlinkPriceFeed(PriceSource):
    """Read-only wrapper for a Chainlink AggregatorV3 contract."""

    def __init__(self, address: str, chain: "Chain"):
        self.address = address
        self.chain = chain
        self._decimals: Optional[int] = None
        self._description: Optional[str] = None

    def _call(self, fn_name: str):
        try:
            return self.chain.call(self.address, AGGREGATOR_V3_ABI, fn_name)
        except Exception as e:
            logger.warning(f"Price feed {self.address} {fn_name}() failed: {e}")
            raise SourceUnavailable(f"{fn_name}() failed on {self.address}: {e}") from e

    def latest_price(self) -> int:
        # (roundId, answer, startedAt, updatedAt, answeredInRound)
        round_data = self._call("latestRoundData")
        return int(round_data[1])

    def precision(self) -> int:
        # decimals() is fixed for a deployed aggregator
        if self._decimals is None:
            self._decimals = int(self._call("decimals"))
        return self._decimals

    def description(self) -> str:
        if self._description is None:
            self._description = self._call("description")
        return self._description

    def __repr__(self) -> str:
        return f"ChainlinkPriceFeed({self.address!r})"


class StaticPriceFeed(PriceSource):
    """In-memory price source with fixed values."""

    def __init__(self, price: int, precision: int = 8, address: str = "", description: str = ""):
        if precision < 0:
            raise ValueError("precision must be non-negative")
        self.address = address
        self._price = price
        self._precision = precision
        self._description = description

    def set_price(self, price: int) -> None:
        self._price = price

    def latest_price(self) -> int:
        return self._price

    def precision(self) -> int:
        return self._precision

    def description(self) -> str:
        return self._description

    def __repr__(self) -> str:
        return f"StaticPriceFeed(price={self._price}, precision={self._precision})"
