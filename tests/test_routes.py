import unittest
from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from hello_blockchain.app import create_app
from hello_blockchain.errors import SourceUnavailable
from hello_blockchain.price_feed import StaticPriceFeed
from hello_blockchain.registry import NameRegistry


class TestRoutes(unittest.TestCase):
    def setUp(self) -> None:
        self.broken = MagicMock()
        self.broken.latest_price.side_effect = SourceUnavailable("rpc down")
        self.broken.address = ""
        self.broken.description.side_effect = SourceUnavailable("rpc down")
        registry = NameRegistry(
            [
                ("Avalanche", StaticPriceFeed(
                    3512000000, 8,
                    address="0x5498BB86BC934c8D34FDA08E81D444153d0D06aD",
                    description="AVAX / USD",
                )),
                ("Chainlink", StaticPriceFeed(1800000000, 8)),
                ("Broken", self.broken),
            ]
        )
        self.client = TestClient(create_app(registry))
        self.client.__enter__()
        self.addCleanup(self.client.__exit__, None, None, None)

    def test_health(self) -> None:
        res = self.client.get("/health")
        self.assertEqual(res.json(), {"status": "healthy"})

    def test_hello(self) -> None:
        res = self.client.post("/api/hello", json={"name": "Avalanche"})
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json()["greeting"], "Hello Avalanche!")

        res = self.client.get("/api/hello")
        self.assertEqual(res.json()["greeting"], "Hello Avalanche!")

    def test_list_feeds(self) -> None:
        res = self.client.get("/api/feeds")

        body = res.json()
        self.assertEqual(body["active"], "")
        self.assertEqual([f["name"] for f in body["feeds"]], ["Avalanche", "Chainlink", "Broken"])
        self.assertEqual(body["feeds"][0]["address"], "0x5498BB86BC934c8D34FDA08E81D444153d0D06aD")
        self.assertEqual(body["feeds"][0]["description"], "AVAX / USD")
        self.assertIsNone(body["feeds"][1]["description"])
        self.assertIsNone(body["feeds"][2]["description"])

    def test_price_before_selection(self) -> None:
        res = self.client.get("/api/price")
        self.assertEqual(res.status_code, 409)

    def test_select_and_read_price(self) -> None:
        res = self.client.post("/api/feed", json={"name": "Avalanche"})
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json()["active"], "Avalanche")

        res = self.client.get("/api/price")
        self.assertEqual(res.status_code, 200)
        self.assertEqual(
            res.json(),
            {"name": "Avalanche", "price": 3512000000, "greeting": "Hello! Avalanche's Price is: $35!"},
        )

        self.client.post("/api/feed", json={"name": "Chainlink"})
        res = self.client.get("/api/price")
        self.assertEqual(res.json()["greeting"], "Hello! Chainlink's Price is: $18!")

    def test_unknown_feed(self) -> None:
        self.client.post("/api/feed", json={"name": "Avalanche"})

        res = self.client.post("/api/feed", json={"name": "Ethereum"})

        self.assertEqual(res.status_code, 404)
        self.assertEqual(self.client.get("/api/feeds").json()["active"], "Avalanche")

    def test_source_unavailable(self) -> None:
        self.client.post("/api/feed", json={"name": "Broken"})

        res = self.client.get("/api/price")

        self.assertEqual(res.status_code, 502)


if __name__ == "__main__":
    unittest.main()
