"""
Gemini HTTP client
Async client for the generateContent endpoint
"""
import asyncio
import logging
from typing import Optional

import httpx

from exam_relay.core.constants import Gemini, HTTPHeaders, Timeouts
from exam_relay.core.settings import BaseConfig
from exam_relay.schemas.provider import GenerateContentRequest, GenerateContentResponse

logger = logging.getLogger(__name__)


class GeminiClient:
    """
    Async Gemini client
    One pooled httpx.AsyncClient, created lazily and shared by all requests.
    Transport and HTTP errors are raised as-is (httpx exceptions); turning them
    into application errors is services.error_mapping's job.
    """

    def __init__(
        self,
        api_key: Optional[str],
        model_id: str = Gemini.DEFAULT_MODEL,
        base_url: str = Gemini.BASE_URL,
        timeout: float = Timeouts.LLM_API,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.api_key = api_key
        self.model_id = model_id
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @classmethod
    def from_settings(
        cls,
        settings: BaseConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> "GeminiClient":
        return cls(
            api_key=settings.GEMINI_API_KEY,
            model_id=settings.GEMINI_MODEL_ID,
            base_url=settings.GEMINI_BASE_URL,
            timeout=settings.REQUEST_TIMEOUT_S,
            transport=transport,
        )

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/{self.model_id}:generateContent"

    async def _get_client(self) -> httpx.AsyncClient:
        """Client instance (lazy initialization)"""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport,
            )
        return self._client

    async def close(self):
        """Close pooled connections"""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    def _get_headers(self) -> dict:
        return {
            HTTPHeaders.CONTENT_TYPE: HTTPHeaders.JSON_CONTENT,
            HTTPHeaders.GOOG_API_KEY: self.api_key or "",
        }

    async def generate_content(self, prompt: str) -> GenerateContentResponse:
        """
        Send one prompt as a single user turn

        Args:
            prompt: full prompt text

        Returns:
            parsed provider response

        Raises:
            httpx.TimeoutException / asyncio.TimeoutError: no answer within ``timeout``
            httpx.HTTPStatusError: non-2xx from the provider
            httpx.RequestError: connection level failure
            ValueError: body is not JSON or does not fit the response shape
        """
        client = await self._get_client()
        body = GenerateContentRequest.from_prompt(prompt, role=Gemini.USER_ROLE)

        # httpx timeouts are per phase; wait_for bounds the whole call
        try:
            response = await asyncio.wait_for(
                client.post(
                    self.endpoint,
                    json=body.model_dump(exclude_none=True),
                    headers=self._get_headers(),
                ),
                timeout=self.timeout,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "gemini_http_error",
                extra={"status": e.response.status_code, "model": self.model_id},
            )
            raise
        except (httpx.TimeoutException, asyncio.TimeoutError):
            logger.error("gemini_timeout", extra={"timeout_s": self.timeout, "model": self.model_id})
            raise
        except httpx.RequestError as e:
            logger.error("gemini_request_error", extra={"error": str(e), "model": self.model_id})
            raise

        return GenerateContentResponse.model_validate(response.json())
