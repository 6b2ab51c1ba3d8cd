from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, JsonValue, ValidationError
from pydantic.alias_generators import to_camel

from .constants import ApiVersion, Dex


# ============================================================================
# Error Handling
# ============================================================================
class JupiterErrorKind(str, Enum):
    ENCODING = "ENCODING"
    TRANSPORT = "TRANSPORT"
    UNEXPECTED_STATUS = "UNEXPECTED_STATUS"
    DECODE = "DECODE"


class JupiterOperation(str, Enum):
    QUOTE = "quote"
    SWAP = "swap"
    SWAP_INSTRUCTIONS = "swap-instructions"


class JupiterError(Exception):
    """Base class for every error raised by the client."""

    kind: JupiterErrorKind

    def __init__(self, message: str, operation: JupiterOperation | None = None):
        self.message = message
        self.operation = operation
        super().__init__(
            f"{operation.value}: {message}" if operation is not None else message
        )

    def as_dict(self) -> dict:
        return {
            "message": self.message,
            "kind": self.kind.value,
            "operation": self.operation.value if self.operation else None,
        }


class EncodingError(JupiterError):
    """Request parameters could not be serialized."""

    kind = JupiterErrorKind.ENCODING


class TransportError(JupiterError):
    """Network, connection or timeout failure."""

    kind = JupiterErrorKind.TRANSPORT


class UnexpectedStatusError(JupiterError):
    kind = JupiterErrorKind.UNEXPECTED_STATUS

    def __init__(
        self,
        message: str,
        status_code: int,
        body: str | None = None,
        error_code: str | int | None = None,
        operation: JupiterOperation | None = None,
    ):
        self.status_code = status_code
        self.body = body
        self.error_code = error_code
        super().__init__(message, operation=operation)

    def as_dict(self) -> dict:
        return {
            **super().as_dict(),
            "status_code": self.status_code,
            "error_code": self.error_code,
        }


class QuoteError(UnexpectedStatusError):
    """Non-2xx response to a quote request."""


class DecodeError(JupiterError):
    kind = JupiterErrorKind.DECODE

    def __init__(
        self,
        message: str,
        snippet: str | None = None,
        operation: JupiterOperation | None = None,
    ):
        self.snippet = snippet
        super().__init__(message, operation=operation)


class JupiterErrorResponse(BaseModel):
    """Error envelope returned by the API, e.g. {"error": "...", "errorCode": "..."}"""

    error: str | None = None
    error_code: str | int | None = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================================
# Enums
# ============================================================================
class SwapMode(str, Enum):
    EXACT_IN = "ExactIn"
    EXACT_OUT = "ExactOut"


# ============================================================================
# Request Models
# ============================================================================
class JupiterRequestBase(BaseModel):
    """Base model for request parameters.

    `api_versions` lists the schema versions a record can be sent to.
    """

    api_versions: ClassVar[frozenset[ApiVersion]] = frozenset(ApiVersion)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class QuoteParamsBase(JupiterRequestBase):
    """Quote parameters shared by every API version.

    Required fields are always sent. Every other field is omitted from the
    query string while it holds its zero value (None, "", 0, False, []).
    """

    input_mint: str
    output_mint: str
    amount: int = Field(ge=0, description="Raw amount, token decimals included")

    swap_mode: SwapMode | None = None
    slippage_bps: int | None = Field(default=None, ge=0)
    only_direct_routes: bool | None = None
    as_legacy_transaction: bool | None = None


class LegacyQuoteParams(QuoteParamsBase):
    """Quote parameters for the v4 API."""

    api_versions: ClassVar[frozenset[ApiVersion]] = frozenset({ApiVersion.V4})

    fee_bps: int | None = Field(default=None, ge=0)
    user_public_key: str | None = None


class QuoteParams(QuoteParamsBase):
    """Quote parameters for the v6 API."""

    api_versions: ClassVar[frozenset[ApiVersion]] = frozenset({ApiVersion.V6})

    dexes: list[Dex | str] | None = None
    exclude_dexes: list[Dex | str] | None = None
    restrict_intermediate_tokens: bool | None = None
    platform_fee_bps: int | None = Field(default=None, ge=0)
    max_accounts: int | None = Field(default=None, ge=0)
    auto_slippage: bool | None = None
    max_auto_slippage_bps: int | None = Field(default=None, ge=0)
    auto_slippage_collision_usd_value: int | None = Field(default=None, ge=0)


# ============================================================================
# Response Models
# ============================================================================
class JupiterResponseBase(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )


class PlatformFee(JupiterResponseBase):
    amount: str
    fee_bps: int


class SwapInfo(JupiterResponseBase):
    """Swap information for a single hop in the route."""

    amm_key: str
    label: str | None = None
    input_mint: str
    output_mint: str
    in_amount: str
    out_amount: str
    fee_amount: str | None = None
    fee_mint: str | None = None

    model_config = ConfigDict(extra="allow")


class RoutePlanStep(JupiterResponseBase):
    swap_info: SwapInfo
    percent: int

    model_config = ConfigDict(extra="allow")


class QuoteResponse(JupiterResponseBase):
    """Response from the /quote endpoint.

    Amounts are decimal strings. Fields the server adds beyond the ones
    declared here are kept, so the quote can be posted back to /swap as-is.
    """

    input_mint: str
    in_amount: str
    output_mint: str
    out_amount: str
    other_amount_threshold: str
    swap_mode: SwapMode
    slippage_bps: int
    platform_fee: JsonValue = None
    price_impact_pct: str
    route_plan: list[RoutePlanStep]  # Execution order
    context_slot: int | None = None
    time_taken: float | None = None

    model_config = ConfigDict(extra="allow")

    @property
    def platform_fee_info(self) -> PlatformFee | None:
        """Typed view of `platform_fee` when it has the usual object shape."""
        if not isinstance(self.platform_fee, dict):
            return None
        try:
            return PlatformFee.model_validate(self.platform_fee)
        except ValidationError:
            return None


class SwapParamsBase(JupiterRequestBase):
    """Swap parameters shared by every API version.

    Toggles typed `bool | None` are three-state: None leaves them out of
    the request body, False and True are sent as given.
    """

    quote_response: QuoteResponse
    user_public_key: str

    fee_account: str | None = None
    as_legacy_transaction: bool | None = None
    compute_unit_price_micro_lamports: int | None = None


class LegacySwapParams(SwapParamsBase):
    """Swap parameters for the v4 API."""

    api_versions: ClassVar[frozenset[ApiVersion]] = frozenset({ApiVersion.V4})

    wrap_unwrap_sol: bool | None = Field(default=None, alias="wrapUnwrapSOL")


class SwapParams(SwapParamsBase):
    """Swap parameters for the v6 API."""

    api_versions: ClassVar[frozenset[ApiVersion]] = frozenset({ApiVersion.V6})

    wrap_and_unwrap_sol: bool | None = None
    use_shared_accounts: bool | None = None
    tracking_account: str | None = None
    prioritization_fee_lamports: int | None = None
    use_token_ledger: bool | None = None
    destination_token_account: str | None = None
    dynamic_compute_unit_limit: bool | None = None
    skip_user_accounts_rpc_calls: bool | None = None


class SwapResponse(JupiterResponseBase):
    """Response from the /swap endpoint."""

    swap_transaction: str  # Base64-encoded transaction
    last_valid_block_height: int
    prioritization_fee_lamports: int | None = None


class Account(JupiterResponseBase):
    pubkey: str
    is_signer: bool
    is_writable: bool


class Instruction(JupiterResponseBase):
    program_id: str
    accounts: list[Account]
    data: str  # Base64-encoded instruction data


class SwapInstructionsResponse(JupiterResponseBase):
    """Response from the /swap-instructions endpoint."""

    token_ledger_instruction: Instruction | None = None
    compute_budget_instructions: list[Instruction] = Field(default_factory=list)
    setup_instructions: list[Instruction] = Field(default_factory=list)
    swap_instruction: Instruction
    cleanup_instruction: Instruction | None = None
    other_instructions: list[Instruction] = Field(default_factory=list)
    address_lookup_table_addresses: list[str] = Field(default_factory=list)
    prioritization_fee_lamports: int | None = None
