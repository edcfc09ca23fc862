import logging
from typing import Any, Optional

import requests

from ..settings import settings
from ..constants.constants import *

logger = logging.getLogger(__name__)


class LLMError(Exception):
    """Base error for failed calls to the generative model."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class MissingCredentialError(LLMError):
    pass


class InvalidCredentialError(LLMError):
    pass


class PermissionDeniedError(LLMError):
    pass


class RateLimitError(LLMError):
    pass


class LLMConnectionError(LLMError):
    pass


class LLMResponseError(LLMError):
    pass


_STATUS_ERRORS = {
    HTTP_STATUS_BAD_REQUEST: (
        InvalidCredentialError,
        "Invalid API key or request. Please check your API key.",
    ),
    HTTP_STATUS_FORBIDDEN: (
        PermissionDeniedError,
        "API key does not have access. Please check your API key permissions.",
    ),
    HTTP_STATUS_TOO_MANY_REQUESTS: (
        RateLimitError,
        "Rate limit exceeded. Please wait a moment and try again.",
    ),
}


class GeminiAPI:
    def __init__(
        self,
        api_key: str,
        model: str = None,
        temperature: float = None,
        max_output_tokens: int = None,
        timeout: int = None,
    ):
        if not api_key:
            raise MissingCredentialError("An API key is required for DNA analysis.")
        self.api_key = api_key
        self.model = model or settings.model_name
        self.temperature = settings.temperature if temperature is None else temperature
        self.max_output_tokens = max_output_tokens or settings.max_output_tokens
        self.timeout = timeout or settings.request_timeout
        self.base_url = settings.gemini_base_url.rstrip("/")

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    def generate(self, prompt: str, max_output_tokens: Optional[int] = None) -> str:
        data = {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": self.temperature,
                "maxOutputTokens": max_output_tokens or self.max_output_tokens,
            },
        }

        try:
            response = requests.post(
                self.endpoint,
                params={"key": self.api_key},
                headers={"Content-Type": CONTENT_TYPE_JSON},
                json=data,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Failed to reach Gemini API: {e}")
            raise LLMConnectionError(f"Could not reach the analysis service: {e}") from e

        if not response.ok:
            logger.error(f"Gemini API request failed: {response.status_code} - {response.text}")
            error_cls, message = _STATUS_ERRORS.get(
                response.status_code,
                (LLMError, f"API Error: {response.status_code} {response.reason}"),
            )
            raise error_cls(message, status_code=response.status_code)

        try:
            payload = response.json()
        except ValueError as e:
            raise LLMResponseError("Unexpected response format from API") from e

        return self._extract_text(payload)

    def _extract_text(self, payload: Any) -> str:
        try:
            text = payload["candidates"][GEMINI_FIRST_CANDIDATE_INDEX]["content"]["parts"][
                GEMINI_FIRST_PART_INDEX
            ]["text"]
        except (KeyError, IndexError, TypeError) as e:
            logger.error(f"Unexpected Gemini response: {payload}")
            raise LLMResponseError("Unexpected response format from API") from e

        if not isinstance(text, str) or not text.strip():
            raise LLMResponseError("No content in AI response")
        return text

    def __call__(self, prompt: str) -> str:
        return self.generate(prompt)


class LLMFactory:

    @staticmethod
    def create_llm(api_key: Optional[str] = None) -> "GeminiAPI":
        return GeminiAPI(api_key=api_key or settings.gemini_api_key)


def create_llm(api_key: Optional[str] = None) -> "GeminiAPI":
    return LLMFactory.create_llm(api_key)
