import json
import time

import httpx
import pytest
import respx

from jupiter_client.constants import SOL_MINT, USDC_MINT
from jupiter_client.mocks import MOCK_QUOTE_RESPONSE, USER_PUBLIC_KEY
from jupiter_client.models import (
    JupiterOperation,
    QuoteParams,
    SwapParams,
    TransportError,
)
from jupiter_client.transport import JupiterTransport

API_URL = "https://jupiter.test/v6"


class DripStream(httpx.SyncByteStream):
    """Body that arrives one chunk at a time with a pause before each."""

    def __init__(self, chunks: list[bytes], delay: float):
        self.chunks = chunks
        self.delay = delay
        self.sent = 0

    def __iter__(self):
        for chunk in self.chunks:
            time.sleep(self.delay)
            self.sent += 1
            yield chunk


@pytest.fixture
def transport():
    return JupiterTransport(api_url=API_URL, timeout=30.0)


@pytest.fixture
def quote_params():
    return QuoteParams(
        input_mint=SOL_MINT,
        output_mint=USDC_MINT,
        amount=100000,
        only_direct_routes=True,
    )


@pytest.fixture
def swap_params():
    return SwapParams(
        quote_response=MOCK_QUOTE_RESPONSE,
        user_public_key=USER_PUBLIC_KEY,
        use_shared_accounts=False,
    )


@respx.mock
def test_get_sends_query_and_accept_header(transport, quote_params):
    route = respx.get(f"{API_URL}/quote").mock(
        return_value=httpx.Response(200, json={"ok": True})
    )

    with transport.get("/quote", quote_params) as response:
        response.read()
        assert response.json() == {"ok": True}

    request = route.calls.last.request
    assert request.headers["Accept"] == "application/json"
    assert request.content == b""
    assert dict(request.url.params) == {
        "inputMint": SOL_MINT,
        "outputMint": USDC_MINT,
        "amount": "100000",
        "onlyDirectRoutes": "true",
    }
    assert "x-api-key" not in request.headers


@respx.mock
def test_post_sends_json_body(transport, swap_params):
    route = respx.post(f"{API_URL}/swap").mock(
        return_value=httpx.Response(200, json={"ok": True})
    )

    with transport.post("/swap", swap_params) as response:
        response.read()

    request = route.calls.last.request
    assert request.headers["Content-Type"] == "application/json"
    assert request.headers["Accept"] == "application/json"

    body = json.loads(request.content)
    assert body["userPublicKey"] == USER_PUBLIC_KEY
    assert body["useSharedAccounts"] is False
    assert body["quoteResponse"]["inAmount"] == "100000"
    assert "wrapAndUnwrapSol" not in body


@respx.mock
def test_api_key_header(quote_params):
    route = respx.get(f"{API_URL}/quote").mock(return_value=httpx.Response(200))
    transport = JupiterTransport(api_url=API_URL, timeout=30.0, api_key="test_key")

    with transport.get("/quote", quote_params):
        pass

    assert route.calls.last.request.headers["x-api-key"] == "test_key"


@respx.mock
def test_response_is_closed_after_block(transport, quote_params):
    respx.get(f"{API_URL}/quote").mock(return_value=httpx.Response(200, json={}))

    with transport.get("/quote", quote_params) as response:
        pass

    assert response.is_closed


@respx.mock
def test_response_is_closed_when_block_raises(transport, quote_params):
    respx.get(f"{API_URL}/quote").mock(return_value=httpx.Response(200, json={}))

    with pytest.raises(RuntimeError):
        with transport.get("/quote", quote_params) as response:
            raise RuntimeError("boom")

    assert response.is_closed


@respx.mock
def test_injected_client_is_left_open(quote_params):
    respx.get(f"{API_URL}/quote").mock(return_value=httpx.Response(200, json={}))
    http_client = httpx.Client(timeout=5.0)
    transport = JupiterTransport(
        api_url=API_URL, timeout=30.0, http_client=http_client
    )

    with transport.get("/quote", quote_params) as response:
        response.read()

    assert not http_client.is_closed
    http_client.close()


@pytest.mark.parametrize(
    "side_effect,message",
    [
        (httpx.ConnectTimeout, "timed out"),
        (httpx.ReadTimeout, "timed out"),
        (httpx.ConnectError, "Failed to make GET request"),
    ],
)
@respx.mock
def test_transport_failures(transport, quote_params, side_effect, message):
    respx.get(f"{API_URL}/quote").mock(side_effect=side_effect)

    with pytest.raises(TransportError) as exc_info:
        with transport.get("/quote", quote_params, JupiterOperation.QUOTE):
            pass

    assert message in exc_info.value.message
    assert exc_info.value.operation == JupiterOperation.QUOTE
    assert isinstance(exc_info.value.__cause__, side_effect)


@respx.mock
def test_api_key_header_with_injected_client(quote_params):
    route = respx.get(f"{API_URL}/quote").mock(return_value=httpx.Response(200))
    http_client = httpx.Client(timeout=5.0)
    transport = JupiterTransport(
        api_url=API_URL, timeout=30.0, api_key="test_key", http_client=http_client
    )

    with transport.get("/quote", quote_params):
        pass

    assert route.calls.last.request.headers["x-api-key"] == "test_key"
    http_client.close()


@respx.mock
def test_timeout_bounds_slow_body(quote_params):
    stream = DripStream([b"{", b'"a"', b":", b"1", b"}"] * 4, delay=0.1)
    respx.get(f"{API_URL}/quote").mock(
        return_value=httpx.Response(200, stream=stream)
    )
    transport = JupiterTransport(api_url=API_URL, timeout=0.3)

    start = time.monotonic()
    with pytest.raises(TransportError) as exc_info:
        with transport.get("/quote", quote_params, JupiterOperation.QUOTE):
            pass
    elapsed = time.monotonic() - start

    assert "timed out" in exc_info.value.message
    assert exc_info.value.operation == JupiterOperation.QUOTE
    assert stream.sent < len(stream.chunks)
    assert elapsed < 1.0


@respx.mock
def test_body_within_timeout_is_buffered(quote_params):
    stream = DripStream([b'{"ok"', b": ", b"true}"], delay=0.01)
    respx.get(f"{API_URL}/quote").mock(
        return_value=httpx.Response(200, stream=stream)
    )
    transport = JupiterTransport(api_url=API_URL, timeout=5.0)

    with transport.get("/quote", quote_params) as response:
        assert response.json() == {"ok": True}

    assert stream.sent == 3
