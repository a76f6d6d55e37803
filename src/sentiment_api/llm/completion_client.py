"""
Completion client for the remote LLM provider.

Communicates with a chat-completion endpoint using httpx AsyncClient:
- API key sent as ``x-api-key`` header on every request
- One POST per classification, bounded by a fixed overall timeout
- No retries: failures are mapped to LLMClientError subclasses and raised
"""

import asyncio
import time
from typing import Any, Optional

import httpx
import structlog
from pydantic import ValidationError as PydanticValidationError

from sentiment_api.llm.base_client import BaseLLMClient
from sentiment_api.llm.exceptions import (
    EmptyChoicesError,
    MalformedResponseError,
    TransportError,
    UpstreamStatusError,
    UpstreamTimeoutError,
)
from sentiment_api.models.llm_models import CompletionRequest, CompletionResponse
from sentiment_api.monitoring.metrics import (
    llm_latency_seconds,
    llm_requests_total,
    llm_tokens_total,
)


class CompletionClient(BaseLLMClient):
    """
    Provider client using a persistent httpx AsyncClient.

    The underlying client only holds read-only configuration (credential,
    timeout, base headers), so one instance is shared by all requests.

    Request:
    {
        "model": "telkom-ai-instruct",
        "messages": [{"role": "system", ...}, {"role": "user", ...}],
        "stream": false,
        "max_tokens": 100,
        "temperature": 0.0
    }

    Response:
    {
        "choices": [{"message": {"role": "assistant", "content": "..."}, "index": 0}],
        "model": "telkom-ai-instruct",
        "usage": {...}
    }
    """

    def __init__(
        self,
        url: str,
        api_key: str,
        timeout: int = 60,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: Optional[structlog.stdlib.BoundLogger] = None,
    ):
        """
        Initialize completion client.

        Args:
            url: Full completion endpoint URL
            api_key: Provider credential (sent as x-api-key)
            timeout: Overall request timeout in seconds
            transport: Optional httpx transport (used by tests)
            logger: Structured logger
        """
        super().__init__(url, timeout, logger=logger)
        self._api_key = api_key
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

        self.logger.info(
            "Completion client initialized",
            url=self.url,
            timeout=timeout,
        )

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                headers={
                    "Content-Type": "application/json",
                    "x-api-key": self._api_key,
                },
                transport=self._transport,
            )
            self.logger.debug("Created new httpx AsyncClient")
        return self._client

    async def complete(self, request: CompletionRequest) -> Any:
        """
        POST the request and return the first choice's raw content.

        The content is returned as-is (normally a string); interpreting it
        as JSON is the extractor's job.
        """
        self.logger.debug(
            "Making API call to LLM",
            model=request.model,
            messages=len(request.messages),
            max_tokens=request.max_tokens,
            temperature=request.temperature,
        )

        start_time = time.perf_counter()
        try:
            client = await self._get_client()
            # httpx.Timeout bounds each phase separately; wait_for bounds the whole call
            response = await asyncio.wait_for(
                client.post(self.url, json=request.model_dump(mode="json")),
                timeout=self.timeout,
            )
        except (httpx.TimeoutException, asyncio.TimeoutError) as e:
            self._record(request.model, "timeout", start_time)
            self.logger.error(
                "LLM request timeout",
                timeout=self.timeout,
                error=str(e),
            )
            raise UpstreamTimeoutError(
                f"Request timeout after {self.timeout}s",
                details={"timeout": self.timeout, "error_type": type(e).__name__},
            ) from e
        except httpx.DecodingError as e:
            self._record(request.model, "malformed_response", start_time)
            self.logger.error(
                "Undecodable completion response body",
                error=str(e),
            )
            raise MalformedResponseError(
                "Invalid completion response from LLM",
                details={"decode_error": str(e)},
            ) from e
        except httpx.RequestError as e:
            self._record(request.model, "transport_error", start_time)
            self.logger.error(
                "HTTP request error in LLM call",
                error=str(e),
                error_type=type(e).__name__,
            )
            raise TransportError(
                f"request failed: {e}",
                details={"error_type": type(e).__name__},
            ) from e

        if response.status_code != httpx.codes.OK:
            self._record(request.model, "status_error", start_time)
            self.logger.error(
                "HTTP status error",
                status_code=response.status_code,
                response=response.text,
            )
            raise UpstreamStatusError(response.status_code, response.text)

        try:
            completion = CompletionResponse.model_validate(response.json())
        except (ValueError, PydanticValidationError) as e:
            self._record(request.model, "malformed_response", start_time)
            self.logger.error(
                "Invalid completion response body",
                error=str(e),
                response=response.text[:500],
            )
            raise MalformedResponseError(
                "Invalid completion response from LLM",
                details={"parse_error": str(e)},
            ) from e

        if not completion.choices:
            self._record(request.model, "empty_choices", start_time)
            self.logger.error("No choices in LLM response", model=completion.model)
            raise EmptyChoicesError(
                "no choices in response",
                details={"model": completion.model},
            )

        latency = self._record(request.model, "success", start_time)
        self._record_usage(completion.model or request.model, completion.usage)

        content = completion.choices[0].message.content
        self.logger.debug(
            "LLM API call successful",
            model=completion.model,
            latency_ms=int(latency * 1000),
            content_length=len(content) if isinstance(content, str) else None,
        )
        return content

    def _record(self, model: str, outcome: str, start_time: float) -> float:
        latency = time.perf_counter() - start_time
        llm_requests_total.labels(model=model, outcome=outcome).inc()
        llm_latency_seconds.labels(
            model=model, success=str(outcome == "success").lower()
        ).observe(latency)
        return latency

    def _record_usage(self, model: str, usage: Any) -> None:
        # Usage is provider-specific; only OpenAI-style counters are tracked
        if not isinstance(usage, dict):
            return
        for key, token_type in (("prompt_tokens", "prompt"), ("completion_tokens", "completion")):
            count = usage.get(key)
            if isinstance(count, int) and count > 0:
                llm_tokens_total.labels(model=model, token_type=token_type).inc(count)

    async def close(self):
        """Close the HTTP client connection."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self.logger.debug("Closed completion client connection")

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
