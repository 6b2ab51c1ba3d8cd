from .client import JupiterClient, JupiterClientConfig
from .constants import SOL_MINT, USDC_MINT, ApiVersion, Dex
from .models import (
    Account,
    DecodeError,
    EncodingError,
    Instruction,
    JupiterError,
    JupiterErrorKind,
    JupiterOperation,
    LegacyQuoteParams,
    LegacySwapParams,
    PlatformFee,
    QuoteError,
    QuoteParams,
    QuoteResponse,
    RoutePlanStep,
    SwapInfo,
    SwapInstructionsResponse,
    SwapMode,
    SwapParams,
    SwapResponse,
    TransportError,
    UnexpectedStatusError,
)

__all__ = [
    "Account",
    "ApiVersion",
    "DecodeError",
    "Dex",
    "EncodingError",
    "Instruction",
    "JupiterClient",
    "JupiterClientConfig",
    "JupiterError",
    "JupiterErrorKind",
    "JupiterOperation",
    "LegacyQuoteParams",
    "LegacySwapParams",
    "PlatformFee",
    "QuoteError",
    "QuoteParams",
    "QuoteResponse",
    "RoutePlanStep",
    "SOL_MINT",
    "SwapInfo",
    "SwapInstructionsResponse",
    "SwapMode",
    "SwapParams",
    "SwapResponse",
    "TransportError",
    "USDC_MINT",
    "UnexpectedStatusError",
]
