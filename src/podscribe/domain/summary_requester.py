"""Best-effort title and summary generation."""

import asyncio

from podscribe.infrastructure.interfaces import LLMService
from podscribe.logging import setup_logging

from .models import SummaryResult
from .transcript_aggregator import TranscriptAggregator

logger = setup_logging()

SUMMARY_PROMPT = (
    "Please summarize the following transcript into one paragraph. "
    "Ignore advertisements. Here is the transcript:"
)
TITLE_PROMPT = (
    "Please summarize the following transcript into a short phrase that could be "
    "used as a title for the transcript. Ignore advertisements. "
    "Here is the transcript:"
)
PROMPT_SEPARATOR = "\n\n\n"


class SummaryRequester:
    """Requests a title and a paragraph summary for a transcript."""

    def __init__(self, llm_service: LLMService, aggregator: TranscriptAggregator):
        self._llm = llm_service
        self._aggregator = aggregator

    async def summarize(self, texts: list[str]) -> SummaryResult | None:
        """
        Produces a title and summary, or None when that is not possible.

        Never raises; every failure is logged and reported as an absent result.

        Args:
            texts: Transcript text per segment, in segment order.

        Returns:
            SummaryResult, or None for empty input or any failure.
        """
        if not any(text.strip() for text in texts):
            logger.info("Empty transcript, skipping summarization")
            return None

        try:
            transcript = self._aggregator.aggregate(texts)
            title, paragraph = await asyncio.gather(
                self._llm.complete(f"{TITLE_PROMPT}{PROMPT_SEPARATOR}{transcript}"),
                self._llm.complete(f"{SUMMARY_PROMPT}{PROMPT_SEPARATOR}{transcript}"),
            )
        except Exception:
            logger.exception("Summarization failed")
            return None

        logger.info(
            "Summary generated",
            extra={"prompt_chars": len(transcript), "chunk_count": len(texts)},
        )
        return SummaryResult(title=title.strip(), paragraph=paragraph.strip())
