"""
=============================================================================
Greeters (greeter.py)
=============================================================================

HelloBlockchain stores a name and echoes a greeting.

PriceGreeter resolves a name through the NameRegistry, keeps the matching
price feed as the active source and renders its latest price:

    "Hello! Avalanche's Price is: $35!"

Prices are scaled integers; the readable price drops the fractional part,
truncating toward zero.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Optional, Tuple

from hello_blockchain.errors import NoActiveSource, SourceUnavailable
from hello_blockchain.price_feed import PriceSource
from hello_blockchain.registry import NameRegistry

logger = logging.getLogger("hello-blockchain.greeter")


def format_price(price: int, precision: int) -> int:
    """Return price / 10**precision as an integer, truncated toward zero.

    >>> format_price(3599999999, 8)
    35
    >>> format_price(-3599999999, 8)
    -35
    """
    if precision < 0:
        raise ValueError("precision must be non-negative")
    whole = abs(price) // 10 ** precision
    return -whole if price < 0 else whole


def render_greeting(name: str, readable_price: int) -> str:
    return "Hello! " + name + "'s Price is: $" + str(readable_price) + "!"


@dataclass(frozen=True)
class PriceQuote:
    name: str
    price: int
    precision: int

    @property
    def readable_price(self) -> int:
        return format_price(self.price, self.precision)

    @property
    def greeting(self) -> str:
        return render_greeting(self.name, self.readable_price)


class HelloBlockchain:
    """Stores a blockchain name and says hello to it."""

    def __init__(self, name: str = ""):
        self._lock = threading.Lock()
        self._name = name

    @property
    def blockchain_name(self) -> str:
        with self._lock:
            return self._name

    def set_blockchain_name(self, name: str) -> None:
        with self._lock:
            self._name = name

    def say_hello(self) -> str:
        return "Hello " + self.blockchain_name + "!"


class PriceGreeter:
    """Greets the active blockchain with the latest price of its feed."""

    def __init__(self, registry: NameRegistry):
        self.registry = registry
        self._lock = threading.Lock()
        self._active_name = ""
        self._active_source: Optional[PriceSource] = None

    @property
    def active_name(self) -> str:
        with self._lock:
            return self._active_name

    @property
    def active_source(self) -> Optional[PriceSource]:
        with self._lock:
            return self._active_source

    def set_active_name(self, name: str) -> None:
        """Switch the active feed to the one registered under *name*.

        Raises:
            NameNotFound: If *name* is not registered. The active name and
                source are left unchanged.
        """
        source = self.registry.lookup(name)
        with self._lock:
            self._active_name = name
            self._active_source = source
        logger.info(f"Active price feed set to {name!r} ({source!r})")

    def _snapshot(self) -> Tuple[str, PriceSource]:
        with self._lock:
            if self._active_source is None:
                raise NoActiveSource()
            return self._active_name, self._active_source

    def quote(self) -> PriceQuote:
        """Read the active feed once.

        Raises:
            NoActiveSource: If no feed has been selected yet.
            SourceUnavailable: If the feed could not be read.
        """
        name, source = self._snapshot()
        try:
            price = source.latest_price()
            precision = source.precision()
        except SourceUnavailable:
            raise
        except Exception as e:
            logger.warning(f"Price source {source!r} failed: {e}")
            raise SourceUnavailable(str(e)) from e
        return PriceQuote(name=name, price=price, precision=precision)

    def latest_price(self) -> int:
        """Return the raw scaled price of the active feed."""
        return self.quote().price

    def describe(self) -> str:
        """Render the greeting for the active feed."""
        return self.quote().greeting
