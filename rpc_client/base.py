"""Base JSON-RPC client with rate-limit retry."""

import asyncio

import httpx
from loguru import logger
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from rpc_client.errors import RpcUnavailableError, error_from_response
from settings import RPC_COMMITMENT, RPC_MAX_CONCURRENT, RPC_TIMEOUT, RPC_URL


def _is_rate_limited(exc: BaseException) -> bool:
    """Only HTTP 429 is retried; every other failure surfaces to the caller."""
    return isinstance(exc, httpx.HTTPStatusError) and exc.response.status_code == 429


class BaseClient:
    """Base async JSON-RPC client with a concurrency limit."""

    def __init__(
        self,
        url: str = RPC_URL,
        *,
        timeout: float = RPC_TIMEOUT,
        max_concurrent: int = RPC_MAX_CONCURRENT,
        commitment: str = RPC_COMMITMENT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.url = url
        self.commitment = commitment
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._sem = asyncio.Semaphore(max_concurrent)
        self._request_count = 0
        logger.info("{}: url={}, max_concurrent={}", self.__class__.__name__, url, max_concurrent)

    async def __aenter__(self):
        self._client = httpx.AsyncClient(
            timeout=self._timeout,
            limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *_):
        logger.info("Total RPC requests: {}", self._request_count)
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def request_count(self) -> int:
        return self._request_count

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        retry=retry_if_exception(_is_rate_limited),
        reraise=True,
    )
    async def _post(self, payload: dict) -> dict:
        """POST a JSON-RPC request, retrying when rate limited."""
        if self._client is None:
            raise RuntimeError(f"{self.__class__.__name__} used outside of 'async with'")
        async with self._sem:
            self._request_count += 1
            resp = await self._client.post(self.url, json=payload)
            resp.raise_for_status()
            return resp.json()

    async def _call(self, method: str, params: list | None = None):
        """Call an RPC method and return its `result`."""
        payload = {
            "jsonrpc": "2.0",
            "id": self._request_count + 1,
            "method": method,
            "params": params or [],
        }
        try:
            body = await self._post(payload)
        except httpx.HTTPStatusError as e:
            raise RpcUnavailableError(
                f"{method}: upstream returned HTTP {e.response.status_code}", method=method
            ) from e
        except httpx.HTTPError as e:
            raise RpcUnavailableError(f"{method}: {e.__class__.__name__}: {e}", method=method) from e
        except ValueError as e:
            raise RpcUnavailableError(f"{method}: malformed response body", method=method) from e

        if body.get("error"):
            logger.debug("RPC error for {}: {}", method, body["error"])
            raise error_from_response(body["error"], method)
        return body.get("result")

    async def _call_value(self, method: str, params: list | None = None):
        """Call an RPC method whose result is wrapped in `{context, value}`."""
        result = await self._call(method, params)
        if isinstance(result, dict) and "value" in result:
            return result["value"]
        return result
