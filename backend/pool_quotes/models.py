"""
Value records passed between the address deriver, pool reader, quoter and driver.

All records are frozen: they are built per call and discarded afterwards.
"""

from dataclasses import dataclass
from decimal import Decimal, getcontext

# Enough precision for (uint160 / 2^96) ** 2
getcontext().prec = 50

Q96 = Decimal(2 ** 96)


@dataclass(frozen=True)
class TokenPair:
    """Two token addresses in pool order (token0 < token1, case-insensitive)."""
    token0: str
    token1: str

    @classmethod
    def from_unordered(cls, token_a: str, token_b: str) -> "TokenPair":
        """Order a pair the way the pool deployer does before hashing."""
        if token_a.lower() == token_b.lower():
            raise ValueError(f"Identical token addresses: {token_a}")
        if token_a.lower() < token_b.lower():
            return cls(token_a, token_b)
        return cls(token_b, token_a)


@dataclass(frozen=True)
class PoolQueryParams:
    """Inputs to the CREATE2 pool address derivation."""
    deployer: str
    token_a: str
    token_b: str
    fee: int
    init_code_hash: str | bytes


@dataclass(frozen=True)
class Slot0:
    """Decoded UniswapV3Pool.slot0() return value."""
    sqrt_price_x96: int
    tick: int
    observation_index: int
    observation_cardinality: int
    observation_cardinality_next: int
    fee_protocol: int
    unlocked: bool

    @property
    def price(self) -> Decimal:
        """Raw price (token1 per token0, no decimal adjustment)."""
        return (Decimal(self.sqrt_price_x96) / Q96) ** 2


@dataclass(frozen=True)
class PoolInfo:
    """
    Snapshot of a pool's public state.

    The six fields come from independent eth_calls and are not guaranteed
    to have been read at the same block.
    """
    address: str
    token0: str
    token1: str
    fee: int
    tick_spacing: int
    liquidity: int
    slot0: Slot0


@dataclass(frozen=True)
class QuoteResult:
    """QuoterV2.quoteExactInput output for a simulated swap."""
    amount_out: str
    sqrt_price_x96_after_list: list[int]
    initialized_ticks_crossed_list: list[int]
    gas_estimate: int


@dataclass(frozen=True)
class NetworkConfig:
    """Everything needed to quote one swap on one network."""
    name: str
    quoter: str
    deployer: str
    init_code_hash: str
    token_in: str
    token_out: str
    rpc_url: str
    amount_in: int
    fee: int = 3000


@dataclass(frozen=True)
class NetworkQuote:
    """Per-network outcome: either a quote or the error that prevented it."""
    network: str
    quote: QuoteResult | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.quote is not None
