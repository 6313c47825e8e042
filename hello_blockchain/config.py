"""
=============================================================================
Configuration (config.py)
=============================================================================

Centralized configuration for the Hello Blockchain service:
- RPC URLs / chain ID (Avalanche Fuji by default)
- the name -> price feed registry seed
- simulation mode for running without a chain

Defaults are constants; a few can be overridden from the environment for
deployment.
"""

from __future__ import annotations

import logging
import os
from typing import Dict, List, Tuple

logger = logging.getLogger("hello-blockchain.config")


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name, "")
    values = [v.strip() for v in raw.split(",") if v.strip()]
    return values or default


# =============================================================================
# Chain config
# =============================================================================

# JSON-RPC endpoints (Avalanche Fuji C-Chain) - multiple URLs for failover
RPC_URLS: List[str] = _env_list(
    "RPC_URLS",
    [
        "https://api.avax-test.network/ext/bc/C/rpc",
        "https://avalanche-fuji-c-chain-rpc.publicnode.com",
    ],
)

CHAIN_ID: int = int(os.getenv("CHAIN_ID", "43113"))

# =============================================================================
# Price feed registry
# =============================================================================

# Chainlink AggregatorV3 feeds on Fuji. Order is the registry seed order.
PRICE_FEEDS: Dict[str, str] = {
    "Avalanche": "0x5498BB86BC934c8D34FDA08E81D444153d0D06aD",  # AVAX / USD
    "Chainlink": "0x34C4c526902d88a3Aa98DB8a9b802603EB1E3470",  # LINK / USD
}

# =============================================================================
# Simulation
# =============================================================================

# When set, feeds are served from memory instead of the chain.
SIMULATION_MODE: bool = os.getenv("SIMULATION_MODE", "0").lower() in ("1", "true", "yes")

# (price, decimals) per feed name used in simulation mode
SIMULATION_PRICES: Dict[str, Tuple[int, int]] = {
    "Avalanche": (3512000000, 8),
    "Chainlink": (1800000000, 8),
}

# =============================================================================
# Server
# =============================================================================

HOST: str = os.getenv("HOST", "0.0.0.0")
PORT: int = int(os.getenv("PORT", "8000"))

if SIMULATION_MODE:
    logger.warning("SIMULATION_MODE is enabled: price feeds are served from memory.")
