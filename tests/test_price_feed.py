import unittest
from unittest.mock import MagicMock

from hello_blockchain.errors import SourceUnavailable
from hello_blockchain.price_feed import AGGREGATOR_V3_ABI, ChainlinkPriceFeed, StaticPriceFeed

FEED_ADDRESS = "0x5498BB86BC934c8D34FDA08E81D444153d0D06aD"


class TestChainlinkPriceFeed(unittest.TestCase):
    def setUp(self) -> None:
        self.results = {
            "latestRoundData": (18446744073709562000, 3512000000, 1700000000, 1700000000, 18446744073709562000),
            "decimals": 8,
            "description": "AVAX / USD",
        }
        self.chain = MagicMock()
        self.chain.call.side_effect = lambda address, abi, fn_name: self.results[fn_name]
        self.feed = ChainlinkPriceFeed(FEED_ADDRESS, self.chain)

    def test_reads_aggregator_contract(self) -> None:
        self.feed.latest_price()

        self.chain.call.assert_called_once_with(FEED_ADDRESS, AGGREGATOR_V3_ABI, "latestRoundData")

    def test_latest_price_uses_answer(self) -> None:
        self.assertEqual(self.feed.latest_price(), 3512000000)

    def test_precision_read_once(self) -> None:
        self.assertEqual(self.feed.precision(), 8)
        self.assertEqual(self.feed.precision(), 8)

        decimals_calls = [c for c in self.chain.call.call_args_list if c.args[2] == "decimals"]
        self.assertEqual(len(decimals_calls), 1)

    def test_description_read_once(self) -> None:
        self.assertEqual(self.feed.description(), "AVAX / USD")
        self.assertEqual(self.feed.description(), "AVAX / USD")

        self.assertEqual(self.chain.call.call_count, 1)

    def test_rpc_failure_raises_source_unavailable(self) -> None:
        self.chain.call.side_effect = RuntimeError("All RPC URLs failed")

        with self.assertRaises(SourceUnavailable) as ctx:
            self.feed.latest_price()

        self.assertIsInstance(ctx.exception.__cause__, RuntimeError)


class TestStaticPriceFeed(unittest.TestCase):
    def test_values(self) -> None:
        feed = StaticPriceFeed(1800000000, 8)
        self.assertEqual(feed.latest_price(), 1800000000)
        self.assertEqual(feed.precision(), 8)

        feed.set_price(1900000000)
        self.assertEqual(feed.latest_price(), 1900000000)

    def test_negative_precision_rejected(self) -> None:
        with self.assertRaises(ValueError):
            StaticPriceFeed(1, -2)


if __name__ == "__main__":
    unittest.main()
