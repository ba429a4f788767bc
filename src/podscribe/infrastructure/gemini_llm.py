"""Gemini LLM service implementation."""

import asyncio

from google import genai

from podscribe.exceptions import SummarizationError
from podscribe.logging import setup_logging

from .interfaces import LLMService

logger = setup_logging()


class GeminiLLMService(LLMService):
    """LLM service implementation using Google Gemini."""

    def __init__(
        self,
        client: genai.Client,
        model_name: str,
        system_prompt: str,
        temperature: float = 0.7,
        timeout_seconds: float | None = None,
    ):
        self._client = client
        self._model_name = model_name
        self._system_prompt = system_prompt
        self._temperature = temperature
        self._timeout_seconds = timeout_seconds

    async def complete(self, prompt: str) -> str:
        """
        Runs a prompt through Gemini and returns the response text.

        Raises:
            SummarizationError: If the API call fails or returns no text.
        """
        try:
            response = await asyncio.wait_for(
                self._client.aio.models.generate_content(
                    model=self._model_name,
                    contents=prompt,
                    config={
                        "system_instruction": self._system_prompt,
                        "temperature": self._temperature,
                    },
                ),
                timeout=self._timeout_seconds,
            )
            if not response.text:
                raise SummarizationError("Gemini returned empty response")
            logger.info("LLM completion finished", extra={"model": self._model_name})
            return response.text
        except SummarizationError:
            raise
        except Exception as e:
            logger.exception("Gemini API call failed")
            raise SummarizationError(f"Gemini completion failed: {e}", cause=e) from e
