"""
Text-generation providers for the cover letter writer.

Each provider wraps one vendor SDK behind LLMProvider.generate(), which
retries the vendor's transient errors with exponential backoff. SDKs are
imported when a provider is constructed, so building the site never loads them.
"""

import os
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import partial
from typing import Callable, Dict, Optional, Tuple, Type, TypeVar

from dotenv import load_dotenv
from loguru import logger

load_dotenv()

MAX_RETRIES = int(os.getenv("LLM_MAX_RETRIES", "5"))
BASE_DELAY = 1.0
MAX_OUTPUT_TOKENS = 2048

T = TypeVar("T")


def _retry_with_backoff(
    operation: Callable[[], T],
    transient_errors: Tuple[Type[Exception], ...],
    label: str,
) -> T:
    """
    Run operation, retrying transient errors after 1s, 2s, 4s, ...

    The last failure is re-raised once MAX_RETRIES attempts are used up.
    """
    attempt = 1
    while True:
        try:
            return operation()
        except transient_errors as e:
            if attempt >= MAX_RETRIES:
                raise
            delay = BASE_DELAY * 2 ** (attempt - 1)
            logger.warning(f"{label}: {e} (attempt {attempt}/{MAX_RETRIES}), retrying in {delay:.0f}s")
            time.sleep(delay)
            attempt += 1


@dataclass
class LLMResponse:
    """Generated text plus token usage."""

    content: str
    model: str
    input_tokens: int = 0
    output_tokens: int = 0


class LLMProvider(ABC):
    """
    Base class for a text-generation backend.

    Subclasses set prefix and default_model, fill transient_errors with the
    SDK's retryable exception types, and implement _call_api().
    """

    prefix: str = ""
    default_model: str = ""
    transient_errors: Tuple[Type[Exception], ...] = ()

    def __init__(self, model: Optional[str] = None):
        self.model = model or self.default_model

    @property
    def name(self) -> str:
        return f"{self.prefix}/{self.model}"

    @abstractmethod
    def _call_api(self, system_prompt: str, user_prompt: str) -> LLMResponse:
        """One request, no retries."""

    def generate(self, system_prompt: str, user_prompt: str) -> LLMResponse:
        return _retry_with_backoff(
            partial(self._call_api, system_prompt, user_prompt),
            self.transient_errors,
            f"{self.name} unavailable",
        )


class GeminiProvider(LLMProvider):
    """Google Gemini through the google-genai SDK."""

    prefix = "gemini"
    default_model = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")

    def __init__(self, model: Optional[str] = None):
        super().__init__(model)

        api_key = os.getenv("GEMINI_API_KEY")
        if not api_key:
            raise ValueError("GEMINI_API_KEY environment variable not set")

        from google import genai
        from google.genai import errors, types

        self.client = genai.Client(api_key=api_key)
        self._types = types
        self.transient_errors = (errors.ServerError,)

    def _call_api(self, system_prompt: str, user_prompt: str) -> LLMResponse:
        response = self.client.models.generate_content(
            model=self.model,
            contents=user_prompt,
            config=self._types.GenerateContentConfig(
                system_instruction=system_prompt,
                max_output_tokens=MAX_OUTPUT_TOKENS,
            ),
        )
        usage = response.usage_metadata
        return LLMResponse(
            content=response.text or "",
            model=self.model,
            input_tokens=(usage.prompt_token_count or 0) if usage else 0,
            output_tokens=(usage.candidates_token_count or 0) if usage else 0,
        )


class OpenAIProvider(LLMProvider):
    """OpenAI chat completions."""

    prefix = "openai"
    default_model = "gpt-4o"

    def __init__(self, model: Optional[str] = None):
        super().__init__(model)

        api_key = os.getenv("OPENAI_API_KEY")
        if not api_key:
            raise ValueError("OPENAI_API_KEY environment variable not set")

        import openai

        self.client = openai.OpenAI(api_key=api_key)
        self.transient_errors = (openai.RateLimitError, openai.APITimeoutError)

    def _call_api(self, system_prompt: str, user_prompt: str) -> LLMResponse:
        response = self.client.chat.completions.create(
            model=self.model,
            max_tokens=MAX_OUTPUT_TOKENS,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
        )
        return LLMResponse(
            content=response.choices[0].message.content or "",
            model=self.model,
            input_tokens=response.usage.prompt_tokens,
            output_tokens=response.usage.completion_tokens,
        )


def provider_errors() -> Tuple[Type[Exception], ...]:
    """
    Exceptions a provider raises when it cannot produce text: a missing key or
    unknown provider (ValueError) and any API or network error from the SDKs.
    """
    import openai
    from google.genai import errors

    return (ValueError, errors.APIError, openai.OpenAIError)


PROVIDERS: Dict[str, Type[LLMProvider]] = {
    "gemini": GeminiProvider,
    "openai": OpenAIProvider,
}


def get_provider(provider_name: Optional[str] = None, model: Optional[str] = None) -> LLMProvider:
    """
    Construct the configured provider.

    Args:
        provider_name: Key of PROVIDERS (default: LLM_PROVIDER, else "gemini")
        model: Model name (default: the provider's default_model)

    Raises:
        ValueError: Unknown provider or missing API key
    """
    provider_name = (provider_name or os.getenv("LLM_PROVIDER", "gemini")).lower()
    if provider_name not in PROVIDERS:
        raise ValueError(f"Unknown provider: {provider_name}. Use one of: {', '.join(PROVIDERS)}")
    return PROVIDERS[provider_name](model=model)
