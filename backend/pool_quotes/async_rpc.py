"""
Async RPC client for parallel Ethereum calls.

Uses aiohttp for efficient concurrent HTTP requests to the RPC provider.
"""

import asyncio
import logging
from typing import Any

import aiohttp

logger = logging.getLogger(__name__)


class RpcError(Exception):
    """JSON-RPC error object (or malformed response) returned by the node."""

    def __init__(self, message: str, code: int | None = None, data: Any = None):
        super().__init__(message if code is None else f"[{code}] {message}")
        self.code = code
        self.data = data


def _unwrap(response: Any) -> str:
    """Return the result field of a JSON-RPC response, raising on errors."""
    if not isinstance(response, dict):
        raise RpcError(f"Malformed JSON-RPC response: {response!r}")
    if response.get("error") is not None:
        error = response["error"]
        if isinstance(error, dict):
            raise RpcError(
                error.get("message", "unknown error"),
                code=error.get("code"),
                data=error.get("data"),
            )
        raise RpcError(str(error))
    if "result" not in response:
        raise RpcError(f"JSON-RPC response has no result: {response!r}")
    return response["result"]


def client_session(timeout: float = 30.0) -> aiohttp.ClientSession:
    """Fresh session for one group of calls; not shared across reads."""
    return aiohttp.ClientSession(
        connector=aiohttp.TCPConnector(limit=100),
        timeout=aiohttp.ClientTimeout(total=timeout),
    )


async def async_eth_call(
    session: aiohttp.ClientSession,
    rpc_url: str,
    to: str,
    data: str,
    request_id: int = 1,
    block: str = "latest",
) -> str:
    """
    Execute an async eth_call.

    Args:
        session: aiohttp session for connection pooling
        rpc_url: RPC endpoint URL
        to: Contract address
        data: Encoded call data (hex string with 0x prefix)
        request_id: JSON-RPC request ID
        block: Block tag or hex block number

    Returns:
        Raw return data (hex string with 0x prefix)

    Raises:
        RpcError: if the node answers with a JSON-RPC error (e.g. a revert)
        aiohttp.ClientResponseError: on a non-2xx HTTP status
    """
    payload = {
        "jsonrpc": "2.0",
        "method": "eth_call",
        "params": [{"to": to, "data": data}, block],
        "id": request_id,
    }

    logger.debug("eth_call #%d to %s via %s", request_id, to, rpc_url)
    async with session.post(rpc_url, json=payload) as response:
        response.raise_for_status()
        return _unwrap(await response.json(content_type=None))


async def gather_eth_calls(
    rpc_url: str,
    calls: list[tuple[str, str]],
    timeout: float = 30.0,
) -> list[str]:
    """
    Execute multiple eth_calls in parallel.

    If any call fails, the calls still in flight are cancelled and awaited
    before the first exception propagates; no partial results.

    Args:
        rpc_url: RPC endpoint URL
        calls: List of (contract_address, call_data_hex) tuples
        timeout: Request timeout in seconds

    Returns:
        List of raw return data hex strings in same order as calls
    """
    async with client_session(timeout) as session:
        tasks = [
            asyncio.ensure_future(async_eth_call(session, rpc_url, to, data, i))
            for i, (to, data) in enumerate(calls)
        ]
        try:
            return await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
