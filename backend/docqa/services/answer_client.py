"""Question answering through the Gemini generateContent API"""
import asyncio
import logging
from typing import Optional

import httpx
from pydantic import ValidationError as SchemaError

from ..config import Settings
from ..models.gemini import GenerateContentRequest, GenerateContentResponse
from ..utils.errors import (
    Forbidden,
    InvalidRequest,
    MalformedResponse,
    MissingCredential,
    ModelUnavailable,
    ProviderError,
    RateLimited,
    Timeout,
    UpstreamError,
)

logger = logging.getLogger(__name__)

STATUS_ERRORS = {
    400: InvalidRequest,
    403: Forbidden,
    404: ModelUnavailable,
    429: RateLimited,
}


class AnswerClient:
    """Send prompts to Gemini and unwrap the answer text"""

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Initialize the answer client

        Args:
            settings: Application settings holding the API key, model and timeout
            transport: Optional httpx transport, used to stub the provider in tests
        """
        self.api_key = settings.gemini_api_key.get_secret_value() if settings.gemini_api_key else None
        self.model_name = settings.gemini_model
        self.timeout = settings.request_timeout
        self.url = f"{settings.gemini_base_url.rstrip('/')}/models/{settings.gemini_model}:generateContent"
        self._transport = transport
        logger.info(f"AnswerClient initialized with model: {self.model_name}")

    async def ask(self, prompt: str) -> str:
        """
        Ask the model a single prompt

        Args:
            prompt: Fully composed prompt text

        Returns:
            Answer text

        Raises:
            AskError: one of MissingCredential, Timeout, UpstreamError,
                InvalidRequest, Forbidden, ModelUnavailable, RateLimited,
                ProviderError or MalformedResponse
        """
        if not self.api_key:
            raise MissingCredential()

        payload = GenerateContentRequest.from_prompt(prompt).to_payload()

        logger.info(f"Calling Gemini API ({self.model_name}, prompt: {len(prompt)} chars)")
        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self.timeout) as client:
                # httpx timeouts apply per phase; the deadline covers the whole call
                response = await asyncio.wait_for(
                    client.post(
                        self.url,
                        params={"key": self.api_key},
                        headers={"Content-Type": "application/json"},
                        json=payload,
                    ),
                    self.timeout,
                )
        except (httpx.TimeoutException, asyncio.TimeoutError) as e:
            logger.error(f"Gemini API timed out after {self.timeout}s: {e!r}")
            raise Timeout(self.timeout) from e
        except httpx.HTTPError as e:
            logger.error(f"Transport error calling Gemini API: {e!r}")
            raise UpstreamError() from e

        logger.info(f"API Response Status: {response.status_code}")
        return self._interpret(response)

    def _interpret(self, response: httpx.Response) -> str:
        status = response.status_code
        if not response.is_success:
            logger.error(f"API Error Response ({status}): {response.text[:500]}")
            error_class = STATUS_ERRORS.get(status)
            if error_class is not None:
                raise error_class()
            raise UpstreamError(status)

        try:
            body = GenerateContentResponse.model_validate(response.json())
        except (ValueError, SchemaError) as e:
            logger.error(f"Unparseable response body from Gemini API: {e!r}")
            raise MalformedResponse() from e

        answer = body.answer_text
        if answer is not None:
            logger.info("Successfully got AI response")
            return answer

        if body.error is not None:
            logger.error(f"API Error: {body.error.model_dump()}")
            raise ProviderError(body.error.message, body.error.model_dump(exclude_none=True))

        logger.error(f"Unexpected response structure (finish reason: {body.finish_reason})")
        details = {"finish_reason": body.finish_reason} if body.finish_reason else None
        raise MalformedResponse(details)
