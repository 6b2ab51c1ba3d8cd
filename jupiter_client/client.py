import logging

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from .config import settings
from .constants import (
    ENDPOINT_QUOTE,
    ENDPOINT_SWAP,
    ENDPOINT_SWAP_INSTRUCTIONS,
    ApiVersion,
)
from .models import (
    EncodingError,
    JupiterErrorResponse,
    JupiterOperation,
    JupiterRequestBase,
    QuoteError,
    QuoteParamsBase,
    QuoteResponse,
    SwapInstructionsResponse,
    SwapParamsBase,
    SwapResponse,
    UnexpectedStatusError,
)
from .transport import JupiterTransport
from .utils import decode_response, snippet

logger = logging.getLogger(__name__)


class JupiterClientConfig(BaseModel):
    """Resolved client configuration. Read-only once the client is built."""

    api_version: ApiVersion
    api_url: str
    endpoint_quote: str
    endpoint_swap: str
    endpoint_swap_instructions: str
    timeout: float

    model_config = ConfigDict(frozen=True)


class JupiterClient:
    """Jupiter swap API client: quotes, swap transactions and swap instructions.

    The client keeps no mutable state after construction and can be shared
    between threads. Calls block until the response is read or the timeout
    elapses. Nothing is retried.

    Keyword arguments override the values read from `settings`. An injected
    `http_client` is used as-is (its own timeout applies) and is never closed
    by this client.
    """

    def __init__(
        self,
        http_client: httpx.Client | None = None,
        timeout: float | None = None,
        api_url: str | None = None,
        api_version: ApiVersion | None = None,
        endpoint_quote: str = ENDPOINT_QUOTE,
        endpoint_swap: str = ENDPOINT_SWAP,
        endpoint_swap_instructions: str = ENDPOINT_SWAP_INSTRUCTIONS,
    ):
        version = api_version or settings.JUPITER_API_VERSION
        base_url = api_url or settings.JUPITER_API_URL or version.default_api_url

        self.config = JupiterClientConfig(
            api_version=version,
            api_url=base_url.rstrip("/"),
            endpoint_quote=endpoint_quote,
            endpoint_swap=endpoint_swap,
            endpoint_swap_instructions=endpoint_swap_instructions,
            timeout=timeout if timeout is not None else settings.JUPITER_TIMEOUT,
        )
        self._transport = JupiterTransport(
            api_url=self.config.api_url,
            timeout=self.config.timeout,
            api_key=settings.JUPITER_API_KEY,
            http_client=http_client,
        )

    def _check_version(
        self, params: JupiterRequestBase, operation: JupiterOperation
    ) -> None:
        if not isinstance(params, JupiterRequestBase):
            raise EncodingError(
                f"Unsupported parameter type: {type(params).__name__}",
                operation=operation,
            )
        if self.config.api_version not in params.api_versions:
            raise EncodingError(
                f"{type(params).__name__} is not supported by API "
                f"{self.config.api_version.value}",
                operation=operation,
            )

    def _handle_error_response(
        self,
        response: httpx.Response,
        operation: JupiterOperation,
    ) -> None:
        """Raise UnexpectedStatusError unless the status is a success.

        Quote accepts any 2xx. Swap and swap-instructions accept only 200.
        The body is read as text only. Jupiter errors are typically in the
        format: {"error": "Could not find any route", "errorCode": "..."}
        """
        if operation == JupiterOperation.QUOTE:
            ok = response.is_success
        else:
            ok = response.status_code == httpx.codes.OK
        if ok:
            return

        body = response.read().decode("utf-8", errors="replace")
        message = f"Unexpected status code: {response.status_code}"
        error_code = None
        try:
            error = JupiterErrorResponse.model_validate_json(body)
            if error.error:
                message = f"{message}: {error.error}"
            error_code = error.error_code
        except ValidationError:
            # Non-JSON error pages keep the generic message
            pass

        logger.warning(f"Jupiter {operation.value} failed: {message}")

        error_class = (
            QuoteError if operation == JupiterOperation.QUOTE else UnexpectedStatusError
        )
        raise error_class(
            message=message,
            status_code=response.status_code,
            body=snippet(body),
            error_code=error_code,
            operation=operation,
        )

    def quote(self, params: QuoteParamsBase) -> QuoteResponse:
        """Get the best quote for swapping `amount` of input_mint to output_mint.

        Args:
            params: Quote parameters matching the client's API version

        Returns:
            QuoteResponse to pass back to swap() or swap_instructions()

        Raises:
            EncodingError: If the parameters cannot be encoded
            TransportError: If the request fails or times out
            QuoteError: If the API responds with a non-2xx status
            DecodeError: If the response body is malformed
        """
        operation = JupiterOperation.QUOTE
        self._check_version(params, operation)

        with self._transport.get(
            self.config.endpoint_quote, params, operation
        ) as response:
            self._handle_error_response(response, operation)
            return decode_response(response, QuoteResponse, operation)

    def create_swap(self, params: SwapParamsBase) -> SwapResponse:
        """Build a swap transaction for a previously obtained quote.

        The transaction is returned unsigned; signing and submission are
        left to the caller.

        Raises:
            EncodingError: If the parameters cannot be encoded
            TransportError: If the request fails or times out
            UnexpectedStatusError: If the API responds with a non-2xx status
            DecodeError: If the response body is malformed
        """
        operation = JupiterOperation.SWAP
        self._check_version(params, operation)

        with self._transport.post(
            self.config.endpoint_swap, params, operation
        ) as response:
            self._handle_error_response(response, operation)
            return decode_response(response, SwapResponse, operation)

    def swap(self, params: SwapParamsBase) -> str:
        """Return the base64 serialized swap transaction for a quote.

        Use create_swap() to also get the block height and prioritization fee.
        """
        return self.create_swap(params).swap_transaction

    def swap_instructions(self, params: SwapParamsBase) -> SwapInstructionsResponse:
        """Get the swap decomposed into instruction groups.

        Raises:
            EncodingError: If the parameters cannot be encoded
            TransportError: If the request fails or times out
            UnexpectedStatusError: If the API responds with a non-2xx status
            DecodeError: If the response body is malformed
        """
        operation = JupiterOperation.SWAP_INSTRUCTIONS
        self._check_version(params, operation)

        with self._transport.post(
            self.config.endpoint_swap_instructions, params, operation
        ) as response:
            self._handle_error_response(response, operation)
            return decode_response(response, SwapInstructionsResponse, operation)
