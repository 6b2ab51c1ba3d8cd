from enum import Enum

CONTENT_TYPE_JSON = "application/json"

DEFAULT_TIMEOUT = 30.0

# Endpoint suffixes appended to the versioned base URL
ENDPOINT_QUOTE = "/quote"
ENDPOINT_SWAP = "/swap"
ENDPOINT_SWAP_INSTRUCTIONS = "/swap-instructions"

# Number of body characters kept on errors for diagnostics
ERROR_SNIPPET_LENGTH = 200

# Solana native token mint address (wrapped SOL)
SOL_MINT = "So11111111111111111111111111111111111111112"
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"


class ApiVersion(str, Enum):
    V4 = "v4"
    V6 = "v6"

    @property
    def default_api_url(self) -> str:
        return f"https://quote-api.jup.ag/{self.value}"


class Dex(str, Enum):
    """AMM labels accepted by the v6 `dexes` and `excludeDexes` filters.

    The live list is served at https://quote-api.jup.ag/v6/program-id-to-label
    """

    ALDRIN = "Aldrin"
    ALDRIN_V2 = "Aldrin V2"
    BONKSWAP = "Bonkswap"
    CLONE_PROTOCOL = "Clone Protocol"
    CREMA = "Crema"
    CROPPER = "Cropper"
    CROPPER_LEGACY = "Cropper Legacy"
    DEXLAB = "Dexlab"
    FLUXBEAM = "FluxBeam"
    GOOSEFX = "GooseFX"
    HELIUM_NETWORK = "Helium Network"
    INVARIANT = "Invariant"
    LIFINITY_V1 = "Lifinity V1"
    LIFINITY_V2 = "Lifinity V2"
    MARINADE = "Marinade"
    MERCURIA = "Mercuria"
    METEORA = "Meteora"
    METEORA_DLMM = "Meteora DLMM"
    OASIS = "Oasis"
    OPENBOOK = "Openbook"
    OPENBOOK_V2 = "OpenBook V2"
    ORCA_V1 = "Orca V1"
    ORCA_V2 = "Orca V2"
    PENGUIN = "Penguin"
    PERPS = "Perps"
    PHOENIX = "Phoenix"
    RAYDIUM = "Raydium"
    RAYDIUM_CLMM = "Raydium CLMM"
    RAYDIUM_CP = "Raydium CP"
    SABER = "Saber"
    SABER_DECIMALS = "Saber (Decimals)"
    SANCTUM = "Sanctum"
    SANCTUM_INFINITY = "Sanctum Infinity"
    SAROS = "Saros"
    STEPN = "StepN"
    TOKEN_SWAP = "Token Swap"
    WHIRLPOOL = "Whirlpool"
