"""
Google Gemini Step Generator

Uses the google-genai SDK's async client to call Gemini models.
"""

import os
from typing import Optional

import httpx
from google import genai
from google.genai import errors as genai_errors

from ..milestone.errors import GenerationError
from .base import IStepGenerator, GeneratorType, GeneratorConfig


DEFAULT_MODEL = "gemini-2.5-flash"
API_KEY_ENV = "GEMINI_API_KEY"


class GeminiGenerator(IStepGenerator):
    """
    Google Gemini step generator.

    The API key comes from the config, falling back to GEMINI_API_KEY.
    """

    def __init__(self, config: Optional[GeneratorConfig] = None):
        if config is None:
            config = GeneratorConfig(model=DEFAULT_MODEL)
        super().__init__(config)
        if not self.config.model:
            self.config.model = DEFAULT_MODEL
        self._client: Optional[genai.Client] = None

    @property
    def generator_type(self) -> GeneratorType:
        return GeneratorType.GEMINI

    @property
    def api_key(self) -> Optional[str]:
        return self.config.api_key or os.environ.get(API_KEY_ENV)

    def _get_client(self) -> genai.Client:
        if self._client is None:
            if not self.api_key:
                raise GenerationError(f"Gemini API key missing: set {API_KEY_ENV}")
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    async def complete(self, prompt: str) -> str:
        """
        Send a prompt to Gemini.

        Args:
            prompt: The instruction to send

        Returns:
            Response text

        Raises:
            GenerationError: On a missing key, API error or empty response
        """
        client = self._get_client()

        try:
            response = await client.aio.models.generate_content(
                model=self.config.model,
                contents=prompt,
            )
        except (genai_errors.APIError, httpx.HTTPError) as e:
            raise GenerationError(f"Gemini request failed: {e}") from e

        if not response.text:
            raise GenerationError("Gemini returned an empty response")
        return response.text

    def is_available(self) -> bool:
        """Check if an API key is configured."""
        return bool(self.api_key)
