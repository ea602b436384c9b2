"""
Call data encoding and return data decoding for raw eth_calls.

web3 Contract objects (no provider, no address) build the call data; the
raw return data is decoded with eth_abi over the function's output types
into a dict keyed by output name.
"""

from typing import Any

from eth_abi.abi import decode
from eth_utils.abi import get_abi_output_types
from web3 import Web3
from web3.contract import Contract

from .abis import QUOTER_V2_ABI, UNISWAP_V3_POOL_ABI


class ContractCallError(Exception):
    """A contract call returned data that cannot be decoded."""


def create_contract(abi: list[dict[str, Any]]) -> Contract:
    """Contract used only for encoding; calls go through async_rpc."""
    return Web3().eth.contract(abi=abi)


POOL_CONTRACT = create_contract(UNISWAP_V3_POOL_ABI)
QUOTER_V2_CONTRACT = create_contract(QUOTER_V2_ABI)


def encode_function_call(contract: Contract, name: str, args: tuple | list = ()) -> str:
    """
    Encode call data for an eth_call.

    Args:
        contract: Contract built with create_contract
        name: Function name
        args: Positional arguments, in ABI order

    Returns:
        Hex string with 0x prefix
    """
    return contract.functions[name](*args)._encode_transaction_data()


def decode_function_result(
    contract: Contract, name: str, data: str | bytes
) -> dict[str, Any]:
    """
    Decode eth_call return data.

    Unnamed outputs are keyed by position ("0", "1", ...).

    Raises:
        ContractCallError: if the call returned no data (usually no contract
            deployed at the target address)
    """
    if isinstance(data, str):
        data = bytes.fromhex(data.removeprefix("0x"))
    fn_abi = contract.functions[name].abi
    outputs = fn_abi["outputs"]
    if outputs and not data:
        raise ContractCallError(f"{name}() returned no data")

    values = decode(get_abi_output_types(fn_abi), data)
    return {
        (p["name"] or str(i)): value
        for i, (p, value) in enumerate(zip(outputs, values))
    }
