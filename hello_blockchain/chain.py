"""
=============================================================================
Blockchain Interaction (chain.py)
=============================================================================

Read-only helper for talking to the chain over JSON-RPC.
Supports multiple RPC URLs with automatic failover.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, List, Optional

from web3 import Web3
from web3.contract import Contract

from hello_blockchain.config import CHAIN_ID, RPC_URLS

logger = logging.getLogger("hello-blockchain.chain")


# =============================================================================
# Chain (RPC wrapper)
# =============================================================================

class Chain:
    """Low-level RPC helper bound to the first reachable RPC URL."""

    def __init__(self, rpc_urls: Optional[List[str]] = None, chain_id: int = CHAIN_ID):
        self.rpc_urls = list(RPC_URLS if rpc_urls is None else rpc_urls)
        if not self.rpc_urls:
            raise ValueError("RPC_URLS not configured")
        self.chain_id = chain_id
        self.endpoint = self.rpc_urls[0]
        self.w3 = Web3(Web3.HTTPProvider(self.endpoint))

    def connect(self) -> Web3:
        """Switch to the first URL that answers on CHAIN_ID, starting with the current one.

        Raises:
            RuntimeError: If no RPC URL is reachable on the expected chain
        """
        errors = []
        start = self.rpc_urls.index(self.endpoint)
        for i in range(len(self.rpc_urls)):
            url = self.rpc_urls[(start + i) % len(self.rpc_urls)]
            w3 = self.w3 if url == self.endpoint else Web3(Web3.HTTPProvider(url))
            try:
                if not w3.is_connected():
                    errors.append(f"{url}: not connected")
                elif w3.eth.chain_id != self.chain_id:
                    errors.append(f"{url}: chain id {w3.eth.chain_id} != {self.chain_id}")
                else:
                    if url != self.endpoint:
                        logger.info(f"RPC failover: switched to {url}")
                        self.endpoint = url
                        self.w3 = w3
                    return self.w3
            except Exception as e:
                errors.append(f"{url}: {e}")
            logger.warning(f"RPC endpoint {url} unavailable: {errors[-1]}")

        raise RuntimeError(f"All RPC URLs failed: {'; '.join(errors)}")

    def contract(self, address: str, abi: List[dict]) -> Contract:
        """Bind a contract to the current endpoint."""
        return self.w3.eth.contract(address=Web3.to_checksum_address(address), abi=abi)

    def call(self, address: str, abi: List[dict], fn_name: str, *args: Any) -> Any:
        """Execute a read-only contract call, retrying once after failover."""
        try:
            return self.contract(address, abi).get_function_by_name(fn_name)(*args).call()
        except Exception as exc:
            logger.warning(f"{fn_name}() on {address} failed: {exc}")
            self.connect()
            return self.contract(address, abi).get_function_by_name(fn_name)(*args).call()


# =============================================================================
# Module-level singleton
# =============================================================================

_chain: Optional[Chain] = None
_chain_lock = threading.Lock()


def get_chain() -> Chain:
    global _chain
    with _chain_lock:
        if _chain is None:
            _chain = Chain()
        return _chain
