"""Request and response models for the start API."""

from pydantic import BaseModel, Field


class StartTranscriptionRequest(BaseModel):
    """Body of a transcription start request."""

    job_id: str = Field(min_length=1)
    file_name: str = Field(min_length=1)


class StartTranscriptionResponse(BaseModel):
    """Response returned once a job has been queued."""

    status: str
    job_id: str
    audio_url: str
