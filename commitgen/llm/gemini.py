"""Gemini (Google Generative Language API) LLM Client"""

import asyncio
import logging

import httpx

from commitgen.errors import HttpStatusError, InvalidInputError, LLMTimeoutError, NetworkError
from commitgen.llm.base import CommitMessage, LLMClient, check_request, system_prompt
from commitgen.llm.parser import decode_json, extract_text, usage_tokens
from commitgen.styles import CommitStyle

logger = logging.getLogger(__name__)


class GeminiClient(LLMClient):
    """Gemini REST client. The API key is injected, never read from the environment."""

    DEFAULT_MODEL = "gemini-2.5-flash"
    DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
    DEFAULT_TIMEOUT = 30.0
    TEMPERATURE = 0.0
    MAX_OUTPUT_TOKENS = 4096

    def __init__(
        self,
        api_key: str,
        model: str | None = None,
        timeout: float | None = None,
        temperature: float | None = None,
        max_output_tokens: int | None = None,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        if not api_key or not api_key.strip():
            raise InvalidInputError("API key is empty")
        self._api_key = api_key.strip()
        self.model = model or self.DEFAULT_MODEL
        self.timeout = timeout if timeout is not None else self.DEFAULT_TIMEOUT
        self.temperature = temperature if temperature is not None else self.TEMPERATURE
        self.max_output_tokens = max_output_tokens or self.MAX_OUTPUT_TOKENS
        self.base_url = (base_url or self.DEFAULT_BASE_URL).rstrip('/')
        self._transport = transport

    @property
    def name(self) -> str:
        return f"Gemini ({self.model})"

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    def build_request(self, prompt: str, style: CommitStyle) -> dict:
        """Request body in the generateContent "contents" schema."""
        return {
            "systemInstruction": {"parts": [{"text": system_prompt(style)}]},
            "contents": [{
                "role": "user",
                "parts": [{"text": prompt}],
            }],
            "generationConfig": {
                "temperature": self.temperature,
                "maxOutputTokens": self.max_output_tokens,
            },
        }

    async def _post(self, body: dict) -> httpx.Response:
        """Make a single API call. The connection lives only for this call."""
        headers = {
            "x-goog-api-key": self._api_key,
            "Content-Type": "application/json",
        }
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            transport=self._transport,
        ) as client:
            return await client.post(self.endpoint, json=body, headers=headers)

    async def generate(self, prompt: str, style: CommitStyle) -> CommitMessage:
        check_request(prompt, style)
        body = self.build_request(prompt, style)
        logger.debug("POST %s (style=%s, prompt=%d chars)", self.endpoint, style.value, len(prompt))

        try:
            response = await asyncio.wait_for(self._post(body), timeout=self.timeout)
        except (httpx.TimeoutException, asyncio.TimeoutError) as e:
            raise LLMTimeoutError(self.timeout) from e
        except httpx.HTTPError as e:
            raise NetworkError(f"Could not reach Gemini API: {e}") from e

        logger.debug("Gemini responded with HTTP %d", response.status_code)
        if not response.is_success:
            raise HttpStatusError(response.status_code, response.text)

        payload = decode_json(response.content)
        return CommitMessage(
            text=extract_text(payload),
            model=self.model,
            tokens_used=usage_tokens(payload),
        )
