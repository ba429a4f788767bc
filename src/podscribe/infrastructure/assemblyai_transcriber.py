"""AssemblyAI implementation of the TranscriptionService interface."""

import asyncio

import aiohttp
import assemblyai as aai

from podscribe.domain.models import TranscriptionOutput
from podscribe.exceptions import TranscriptionError
from podscribe.logging import setup_logging
from podscribe.utils import run_blocking

from .interfaces import TranscriptionService

logger = setup_logging()

PENDING_STATUSES = ("queued", "processing")


class AssemblyAITranscriber(TranscriptionService):
    """
    Handles audio transcription using AssemblyAI.

    The SDK uploads the file and submits the job from a worker thread; that
    call is bounded by the SDK's HTTP timeout. Waiting for the transcript is
    an async polling loop, so cancelling a request stops it at the next
    poll instead of leaving a thread running.
    """

    def __init__(
        self,
        transcriber: aai.Transcriber,
        api_key: str,
        base_url: str = "https://api.assemblyai.com",
        poll_interval_seconds: float = 3.0,
        http_timeout_seconds: float = 300.0,
    ):
        self._transcriber = transcriber
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._poll_interval_seconds = poll_interval_seconds
        self._timeout = aiohttp.ClientTimeout(total=http_timeout_seconds)

    async def transcribe(self, file_path: str, mime_type: str) -> TranscriptionOutput:
        """
        Transcribes an audio file using AssemblyAI.

        The upload carries the raw file bytes only; AssemblyAI detects the
        media format from the content, so ``mime_type`` is used for logging.
        """
        try:
            transcript = await run_blocking(self._transcriber.submit, file_path)
            if transcript.status == aai.TranscriptStatus.error:
                raise TranscriptionError(file_path, Exception(transcript.error))

            logger.info(
                "Transcription submitted",
                extra={
                    "file_path": file_path,
                    "mime_type": mime_type,
                    "transcript_id": transcript.id,
                },
            )
            payload = await self._wait_for_completion(transcript.id, file_path)

            text = payload.get("text")
            if text is None:
                raise TranscriptionError(
                    file_path, Exception("Transcription returned no text")
                )

            logger.info(
                "Audio transcription successful",
                extra={
                    "file_path": file_path,
                    "transcript_id": transcript.id,
                    "text_length": len(text),
                },
            )
            return TranscriptionOutput(text=text, raw=payload)

        except TranscriptionError:
            raise
        except Exception as e:
            logger.exception(
                "AssemblyAI transcription failed", extra={"file_path": file_path}
            )
            raise TranscriptionError(file_path, e) from e

    async def _wait_for_completion(self, transcript_id: str, file_path: str) -> dict:
        url = f"{self._base_url}/v2/transcript/{transcript_id}"
        headers = {"authorization": self._api_key}
        async with aiohttp.ClientSession(
            headers=headers, timeout=self._timeout
        ) as session:
            while True:
                async with session.get(url) as response:
                    response.raise_for_status()
                    payload = await response.json()

                status = payload.get("status")
                if status == "error":
                    raise TranscriptionError(
                        file_path, Exception(payload.get("error") or "unknown error")
                    )
                if status not in PENDING_STATUSES:
                    return payload
                await asyncio.sleep(self._poll_interval_seconds)
