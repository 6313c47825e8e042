"""
=============================================================================
API Routes (routes.py)
=============================================================================

Endpoints (all prefixed with /api):
    - GET  /api/hello  → Greeting for the stored blockchain name
    - POST /api/hello  → Store a blockchain name
    - GET  /api/feeds  → List the registered price feeds
    - POST /api/feed   → Select the active price feed by name
    - GET  /api/price  → Latest price and greeting for the active feed
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from hello_blockchain.errors import NameNotFound, NoActiveSource, SourceUnavailable
from hello_blockchain.greeter import HelloBlockchain, PriceGreeter

logger = logging.getLogger("hello-blockchain.routes")

# =============================================================================
# Shared References (set by app.py during startup)
# =============================================================================
hello: Optional[HelloBlockchain] = None
greeter: Optional[PriceGreeter] = None


def init(hello_ref: HelloBlockchain, greeter_ref: PriceGreeter):
    """Initialize the routes module with the greeters built at startup."""
    global hello, greeter
    hello = hello_ref
    greeter = greeter_ref
    logger.info("Routes module initialized")


router = APIRouter(prefix="/api", tags=["greeter"])


# =============================================================================
# Request/Response Models
# =============================================================================
class NameRequest(BaseModel):
    name: str

class GreetingResponse(BaseModel):
    greeting: str

class FeedInfo(BaseModel):
    name: str
    address: str
    description: Optional[str] = None

class FeedsResponse(BaseModel):
    active: str
    feeds: List[FeedInfo]

class PriceResponse(BaseModel):
    name: str
    price: int
    greeting: str


def _require_hello() -> HelloBlockchain:
    if hello is None:
        raise HTTPException(status_code=503, detail="Greeter not initialized")
    return hello


def _require_greeter() -> PriceGreeter:
    if greeter is None:
        raise HTTPException(status_code=503, detail="Greeter not initialized")
    return greeter


def _describe_feed(name: str, source) -> FeedInfo:
    try:
        description = source.description() or None
    except SourceUnavailable as e:
        logger.warning(f"Could not read description of feed {name!r}: {e}")
        description = None
    return FeedInfo(name=name, address=getattr(source, "address", "") or "", description=description)


# =============================================================================
# Part 1: Hello Blockchain
# =============================================================================

@router.get("/hello", response_model=GreetingResponse)
def say_hello():
    return GreetingResponse(greeting=_require_hello().say_hello())


@router.post("/hello", response_model=GreetingResponse)
def set_blockchain_name(req: NameRequest):
    h = _require_hello()
    h.set_blockchain_name(req.name)
    return GreetingResponse(greeting=h.say_hello())


# =============================================================================
# Part 2: Hello Blockchain with price
# =============================================================================

@router.get("/feeds", response_model=FeedsResponse)
def list_feeds():
    g = _require_greeter()
    feeds = [_describe_feed(name, source) for name, source in g.registry.items()]
    return FeedsResponse(active=g.active_name, feeds=feeds)


@router.post("/feed", response_model=FeedsResponse)
def set_active_feed(req: NameRequest):
    """Select the active price feed. 404 if the name is not registered."""
    g = _require_greeter()
    try:
        g.set_active_name(req.name)
    except NameNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    return list_feeds()


@router.get("/price", response_model=PriceResponse)
def get_price():
    """
    Read the active feed and render its greeting.

    409 if no feed is selected, 502 if the feed cannot be read.
    """
    g = _require_greeter()
    try:
        quote = g.quote()
    except NoActiveSource as e:
        raise HTTPException(status_code=409, detail=str(e))
    except SourceUnavailable as e:
        raise HTTPException(status_code=502, detail=f"Price feed unavailable: {e}")
    return PriceResponse(name=quote.name, price=quote.price, greeting=quote.greeting)
