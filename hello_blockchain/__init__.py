"""Hello Blockchain: greet a blockchain with the latest price of its oracle feed."""

from .errors import GreeterError, NameNotFound, NoActiveSource, SourceUnavailable
from .greeter import HelloBlockchain, PriceGreeter, PriceQuote, format_price
from .price_feed import ChainlinkPriceFeed, PriceSource, StaticPriceFeed
from .registry import NameRegistry

__all__ = [
    'GreeterError', 'NameNotFound', 'NoActiveSource', 'SourceUnavailable',
    'HelloBlockchain', 'PriceGreeter', 'PriceQuote', 'format_price',
    'ChainlinkPriceFeed', 'PriceSource', 'StaticPriceFeed',
    'NameRegistry',
]
