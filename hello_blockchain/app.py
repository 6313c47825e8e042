"""
=============================================================================
Hello Blockchain - Main Application (app.py)
=============================================================================

Serves the two greeters over HTTP:
    - HelloBlockchain: store a name, say hello
    - PriceGreeter:    pick a price feed by name, greet with its latest price

Run locally:
    SIMULATION_MODE=1 python -m hello_blockchain.app
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from hello_blockchain import config, routes
from hello_blockchain.chain import get_chain
from hello_blockchain.greeter import HelloBlockchain, PriceGreeter
from hello_blockchain.registry import NameRegistry

logger = logging.getLogger("hello-blockchain")


def build_registry() -> NameRegistry:
    """Build the feed registry from config (in-memory feeds in simulation mode)."""
    if config.SIMULATION_MODE:
        return NameRegistry.from_static(config.SIMULATION_PRICES)
    return NameRegistry.from_feeds(config.PRICE_FEEDS, get_chain())


def create_app(registry: Optional[NameRegistry] = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        feeds = registry if registry is not None else build_registry()
        routes.init(HelloBlockchain(), PriceGreeter(feeds))
        logger.info(f"Hello Blockchain started with feeds: {', '.join(feeds.names())}")
        yield
        logger.info("Hello Blockchain shutdown complete")

    app = FastAPI(
        title="Hello Blockchain",
        description="Greets a blockchain with the latest price of its oracle feed",
        version="1.0.0",
        lifespan=lifespan,
    )

    @app.get("/health")
    def health_check():
        """Health check endpoint for load balancers."""
        return {"status": "healthy"}

    app.include_router(routes.router)
    return app


app = create_app()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    uvicorn.run(app, host=config.HOST, port=config.PORT)
