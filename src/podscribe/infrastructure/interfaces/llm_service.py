"""Abstract interface for LLM service operations."""

from abc import ABC, abstractmethod


class LLMService(ABC):
    """Abstract base class for LLM backends."""

    @abstractmethod
    async def complete(self, prompt: str) -> str:
        """
        Runs a single prompt completion.

        Args:
            prompt: The full prompt text.

        Returns:
            The completion text.

        Raises:
            SummarizationError: If the LLM call fails or returns nothing.
        """
