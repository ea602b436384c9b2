"""
Configuration constants for the cross-network pool quote run.

Centralizes all contract addresses, token addresses, pool parameters and RPC
endpoints. Each network is described by one NetworkConfig record in NETWORKS.
"""

from decimal import Decimal, InvalidOperation

from .models import NetworkConfig


def to_base_units(amount: str, decimals: int) -> int:
    """Scale a human-readable amount ("0.00001") to integer base units."""
    try:
        value = Decimal(amount)
    except InvalidOperation as e:
        raise ValueError(f"Invalid amount: {amount!r}") from e
    scaled = value.scaleb(decimals)
    if scaled != scaled.to_integral_value():
        raise ValueError(f"{amount} has more than {decimals} decimal places")
    return int(scaled)


# ─── Shared Parameters ───

FEE_TIER = 3000  # 0.3% (hundredths of a bip)
AMOUNT_IN = to_base_units("0.00001", 18)  # 0.00001 WETH
RPC_TIMEOUT = 30.0  # seconds

# ─── IMX Testnet (Immutable zkEVM) ───

QUOTER_V2_IMX = "0x19982BA744E0810DFE26A6cABe3f3cf568DBC602"
POOL_DEPLOYER_IMX = "0xFe44699408A456CDEdA31a2281A1D33adEBF354D"
POOL_INIT_CODE_HASH_IMX = (
    "0x8fb82830f8fa2a81d1b5156176e72c8d6b2fc897bc3d2fa77c25ce28f3a911cc"
)
WETH_IMX = "0x7828DE82Bba71cc354aBd176Afea9F97afb59062"
USDC_IMX = "0xcBD623D30e679656655A34EbBac91F5e2bdEBb63"
RPC_URL_IMX = "https://rpc.testnet.immutable.com"

# ─── MOVE Testnet (Movement EVM devnet) ───

QUOTER_V2_MOVE = "0x591FC1f613B94A87Ae6b1Bc13f386d4D64Df24E2"
POOL_DEPLOYER_MOVE = "0x775048cC1DFc6a36d125ED21CFeC806EE35FfEb8"
POOL_INIT_CODE_HASH_MOVE = (
    "0x965fc9e2b83fdb334d9096bef7094a4584dccd9e2ddd24e23eebe1c03603b398"
)
WETH_MOVE = "0x8Bd68700126A0411e2b8D41FcB7020f2058bC9B4"
USDC_MOVE = "0xF907Ca454C739ec2EcF50f929D371cf79D86871b"
RPC_URL_MOVE = "https://mevm.internal.devnet.m1.movementlabs.xyz"

# ─── Networks (quoted in this order) ───

NETWORKS = [
    NetworkConfig(
        name="IMX Testnet",
        quoter=QUOTER_V2_IMX,
        deployer=POOL_DEPLOYER_IMX,
        init_code_hash=POOL_INIT_CODE_HASH_IMX,
        token_in=WETH_IMX,
        token_out=USDC_IMX,
        rpc_url=RPC_URL_IMX,
        amount_in=AMOUNT_IN,
        fee=FEE_TIER,
    ),
    NetworkConfig(
        name="MOVE Testnet",
        quoter=QUOTER_V2_MOVE,
        deployer=POOL_DEPLOYER_MOVE,
        init_code_hash=POOL_INIT_CODE_HASH_MOVE,
        token_in=WETH_MOVE,
        token_out=USDC_MOVE,
        rpc_url=RPC_URL_MOVE,
        amount_in=AMOUNT_IN,
        fee=FEE_TIER,
    ),
]
