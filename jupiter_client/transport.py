import json
import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager

import httpx
from pydantic import BaseModel

from .constants import CONTENT_TYPE_JSON
from .models import JupiterOperation, TransportError
from .utils import to_json_body, to_query_params

logger = logging.getLogger(__name__)


class JupiterTransport:
    """Issues GET and POST requests against the Jupiter API.

    The body is streamed in under one deadline for the whole call, then
    handed to the `with` block already buffered. The underlying response is
    closed on every exit path.
    """

    def __init__(
        self,
        api_url: str,
        timeout: float,
        api_key: str | None = None,
        http_client: httpx.Client | None = None,
    ):
        self.api_url = api_url
        self.timeout = timeout
        self.api_key = api_key
        self.http_client = http_client

    def _create_client(self) -> httpx.Client:
        return httpx.Client(timeout=self.timeout)

    @contextmanager
    def _client(self) -> Iterator[httpx.Client]:
        # An injected client is owned by the caller and left open
        if self.http_client is not None:
            yield self.http_client
            return

        with self._create_client() as client:
            yield client

    def _read_before(
        self,
        response: httpx.Response,
        deadline: float,
        operation: JupiterOperation | None,
    ) -> httpx.Response:
        """Buffer the body, failing once `deadline` has passed.

        httpx timeouts apply per read, so a body trickling in slowly would
        otherwise hold the call open well past `self.timeout`.
        """
        chunks = []
        for chunk in response.iter_raw():
            chunks.append(chunk)
            if time.monotonic() > deadline:
                logger.warning(
                    f"{response.request.method} {response.request.url} "
                    f"exceeded {self.timeout}s"
                )
                raise TransportError(
                    f"Request to {response.request.url} timed out",
                    operation=operation,
                )

        # Raw bytes keep Content-Encoding valid for the buffered copy
        return httpx.Response(
            response.status_code,
            headers=response.headers,
            content=b"".join(chunks),
            request=response.request,
        )

    @contextmanager
    def _send(
        self,
        method: str,
        endpoint: str,
        operation: JupiterOperation | None,
        **kwargs,
    ) -> Iterator[httpx.Response]:
        url = f"{self.api_url}{endpoint}"
        logger.debug(f"{method} {url}")

        headers = kwargs.pop("headers", {})
        if self.api_key:
            headers["x-api-key"] = self.api_key

        deadline = time.monotonic() + self.timeout
        try:
            with self._client() as client:
                with client.stream(
                    method, url, headers=headers, **kwargs
                ) as response:
                    yield self._read_before(response, deadline, operation)
        except httpx.TimeoutException as e:
            logger.warning(f"{method} {url} timed out: {e}")
            raise TransportError(
                f"Request to {url} timed out", operation=operation
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise TransportError(
                f"Failed to make {method} request to {url}: {e}",
                operation=operation,
            ) from e

    @contextmanager
    def get(
        self,
        endpoint: str,
        params: BaseModel,
        operation: JupiterOperation | None = None,
    ) -> Iterator[httpx.Response]:
        """Send a GET request with `params` encoded as the query string."""
        query = to_query_params(params, operation)

        with self._send(
            "GET",
            endpoint,
            operation,
            params=query,
            headers={"Accept": CONTENT_TYPE_JSON},
        ) as response:
            yield response

    @contextmanager
    def post(
        self,
        endpoint: str,
        params: BaseModel,
        operation: JupiterOperation | None = None,
    ) -> Iterator[httpx.Response]:
        """Send a POST request with `params` encoded as the JSON body."""
        body = json.dumps(to_json_body(params, operation))

        with self._send(
            "POST",
            endpoint,
            operation,
            content=body,
            headers={
                "Content-Type": CONTENT_TYPE_JSON,
                "Accept": CONTENT_TYPE_JSON,
            },
        ) as response:
            yield response
