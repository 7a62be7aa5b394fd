"""Chain identity lookup over JSON-RPC for deployment-tracking library."""

import logging
import os
from typing import Optional, Union

import requests

from .constants import DEFAULT_RPC_ENV

logger = logging.getLogger(__name__)


def get_block_hash(block: Union[int, str], rpc_url: str) -> str:
    """
    Get the hash of a block via RPC.

    Args:
        block: Block number, or a block tag such as "earliest" or "latest"
        rpc_url: RPC endpoint URL

    Returns:
        0x-prefixed block hash

    Raises:
        KeyError: If RPC response is missing required fields
        ValueError: If RPC returns an error or the block does not exist
        RuntimeError: If network error occurs
    """
    block_param = hex(block) if isinstance(block, int) else block

    try:
        response = requests.post(
            rpc_url,
            json={
                "jsonrpc": "2.0",
                "method": "eth_getBlockByNumber",
                "params": [block_param, False],  # No full txs
                "id": 1,
            },
            timeout=30,
        )

        # Check for HTTP errors
        if response.status_code != 200:
            raise RuntimeError(f"RPC request failed with status {response.status_code}")

        result = response.json()

        # Check for RPC errors
        if "error" in result:
            raise ValueError(f"RPC error: {result['error']}")

        if result["result"] is None:
            raise ValueError(f"Block {block_param} not found")

        block_hash = result["result"]["hash"]
        logger.debug("Block %s has hash %s", block_param, block_hash)
        return block_hash

    except requests.RequestException as e:
        raise RuntimeError(f"Network error during RPC call: {e}") from e


def get_genesis_block_hash(rpc_url: Optional[str] = None) -> str:
    """
    Get the genesis block hash, which identifies a chain for tracking.

    Args:
        rpc_url: RPC endpoint URL (defaults to $ETH_RPC_URL)

    Returns:
        0x-prefixed block hash

    Raises:
        ValueError: If no RPC URL is given or configured
    """
    if rpc_url is None:
        rpc_url = os.environ.get(DEFAULT_RPC_ENV)
    if rpc_url is None:
        raise ValueError(
            f"RPC URL required: set ${DEFAULT_RPC_ENV} environment variable "
            "or pass rpc_url parameter"
        )

    return get_block_hash("earliest", rpc_url)
