"""Domain models for the transcription pipeline."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class JobStatus(str, Enum):
    """Lifecycle states of a transcription job."""

    RUNNING = "RUNNING"
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"


class TranscriptionJobMessage(BaseModel, frozen=True):
    """Represents an incoming transcription request event."""

    job_id: str = Field(min_length=1)
    audio_url: str = Field(min_length=1)


class AssetMetadata(BaseModel, frozen=True):
    """Content type and length reported for a remote file before download."""

    content_type: str | None = None
    content_length: int | None = None


class AudioAsset(BaseModel, frozen=True):
    """A downloaded audio file owned by a single job."""

    source_url: str
    local_path: str
    byte_size: int
    mime_type: str


class SplitDecision(BaseModel, frozen=True):
    """Whether an asset has to be cut into segments before transcription."""

    split: bool


class Segment(BaseModel, frozen=True):
    """A time-bounded slice of the original audio, in temporal order."""

    index: int = Field(ge=0)
    file_path: str
    mime_type: str


class TranscriptionOutput(BaseModel, frozen=True):
    """Text and provider payload returned by one transcription call."""

    text: str
    raw: dict[str, Any] = Field(default_factory=dict)


class TranscriptChunk(BaseModel, frozen=True):
    """Transcript of one segment."""

    segment_index: int = Field(ge=0)
    text: str
    raw_result: dict[str, Any] = Field(default_factory=dict)


class SummaryResult(BaseModel, frozen=True):
    """Title and one-paragraph summary of a transcript."""

    title: str | None = None
    paragraph: str | None = None


class JobOutcome(BaseModel, frozen=True):
    """Terminal (or running) state handed to the job repository."""

    status: JobStatus
    transcript: list[TranscriptChunk] | None = None
    title: str | None = None
    summary: str | None = None
    reason: str | None = None
    audio_url: str | None = None
    segment_count: int | None = None

    @classmethod
    def running(cls) -> "JobOutcome":
        return cls(status=JobStatus.RUNNING)

    @classmethod
    def failed(cls, reason: str) -> "JobOutcome":
        return cls(status=JobStatus.FAILED, reason=reason or "unknown error")

    @classmethod
    def succeeded(
        cls,
        transcript: list[TranscriptChunk],
        summary: SummaryResult | None,
        audio_url: str | None = None,
    ) -> "JobOutcome":
        return cls(
            status=JobStatus.SUCCESS,
            transcript=transcript,
            title=summary.title if summary else None,
            summary=summary.paragraph if summary else None,
            audio_url=audio_url,
            segment_count=len(transcript),
        )

    def to_fields(self) -> dict[str, Any]:
        """Returns the columns this state writes to the job record."""
        if self.status is JobStatus.RUNNING:
            return {"status": self.status.value}
        if self.status is JobStatus.FAILED:
            return {"status": self.status.value, "reason": self.reason}
        fields = {
            "status": self.status.value,
            "output": [chunk.model_dump() for chunk in self.transcript or []],
            "title": self.title,
            "summary": self.summary,
            "reason": None,
        }
        if self.audio_url is not None:
            fields["audio_url"] = self.audio_url
        return fields
