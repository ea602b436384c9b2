"""
Fetch a quote on every configured network, one network at a time.

Run: cd backend && uv run python -m pool_quotes
"""

import asyncio
import logging
import os
import re
from dataclasses import replace

from dotenv import load_dotenv

from .config import NETWORKS
from .models import NetworkConfig, NetworkQuote
from .quoter import fetch_quote

logger = logging.getLogger(__name__)

BANNER = "=" * 37


def rpc_env_var(network_name: str) -> str:
    """'IMX Testnet' -> 'RPC_URL_IMX_TESTNET'"""
    return "RPC_URL_" + re.sub(r"[^A-Z0-9]+", "_", network_name.upper()).strip("_")


def apply_rpc_overrides(networks: list[NetworkConfig]) -> list[NetworkConfig]:
    """Swap in RPC endpoints from the environment where one is set."""
    result = []
    for network in networks:
        url = os.getenv(rpc_env_var(network.name))
        if url:
            logger.info("Using %s for %s", rpc_env_var(network.name), network.name)
            network = replace(network, rpc_url=url)
        result.append(network)
    return result


async def quote_network(network: NetworkConfig) -> NetworkQuote:
    """Quote one network; failures are logged and returned, never raised."""
    try:
        quote = await fetch_quote(
            network.quoter,
            network.deployer,
            network.init_code_hash,
            network.token_in,
            network.token_out,
            network.amount_in,
            network.fee,
            network.rpc_url,
            suppress_errors=False,
        )
    except Exception as e:
        logger.exception("Failed to fetch quote for %s", network.name)
        return NetworkQuote(network=network.name, error=f"{type(e).__name__}: {e}")
    return NetworkQuote(network=network.name, quote=quote)


async def run_quotes(networks: list[NetworkConfig]) -> list[NetworkQuote]:
    """Quote each network in order; the next starts only after the previous finished."""
    results = []
    for network in networks:
        print(BANNER)
        print(f"Fetching quotes for {network.name}")
        print(BANNER)
        result = await quote_network(network)
        print(f"Quote for {network.name}: {result.quote}")
        results.append(result)
    return results


def log_level(name: str | None) -> int:
    """Numeric level for a LOG_LEVEL name; unknown names fall back to INFO."""
    level = logging.getLevelName((name or "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def main() -> int:
    load_dotenv()
    logging.basicConfig(
        level=log_level(os.getenv("LOG_LEVEL")),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    results = asyncio.run(run_quotes(apply_rpc_overrides(NETWORKS)))
    failed = [r.network for r in results if not r.ok]
    if failed:
        logger.warning("No quote for: %s", ", ".join(failed))
    # Per-network failures are reported above, not through the exit status
    return 0
