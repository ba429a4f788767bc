"""Transcription start endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from podscribe.dependencies import get_broker, get_config, get_storage
from podscribe.exceptions import EventPublishError
from podscribe.infrastructure.interfaces import MessagePublisher, StorageClient
from podscribe.logging import setup_logging
from podscribe.response_models import (
    StartTranscriptionRequest,
    StartTranscriptionResponse,
)

logger = setup_logging()

router = APIRouter(prefix="/transcriptions", tags=["transcriptions"])

StorageDep = Annotated[StorageClient, Depends(get_storage)]
PublisherDep = Annotated[MessagePublisher, Depends(get_broker)]


def get_routing_key() -> str:
    """Returns the routing key transcription requests are published under."""
    return get_config().rabbitmq.queue_config.expected_routing_key


RoutingKeyDep = Annotated[str, Depends(get_routing_key)]


@router.post("", response_model=StartTranscriptionResponse, status_code=202)
def start_transcription(
    request: StartTranscriptionRequest,
    storage: StorageDep,
    publisher: PublisherDep,
    routing_key: RoutingKeyDep,
) -> StartTranscriptionResponse:
    """
    Queues transcription of an uploaded audio file.

    Checks the file is present in storage, then publishes a job request
    for the worker.
    """
    logger.info(
        "Received start request",
        extra={"job_id": request.job_id, "file_name": request.file_name},
    )

    try:
        found = storage.exists(request.file_name)
    except Exception:
        logger.exception(
            "Storage lookup failed", extra={"file_name": request.file_name}
        )
        raise HTTPException(status_code=502, detail="Storage lookup failed")

    if not found:
        raise HTTPException(status_code=404, detail="File not found")

    audio_url = storage.object_url(request.file_name)

    try:
        publisher.publish(
            routing_key=routing_key,
            payload={"job_id": request.job_id, "audio_url": audio_url},
        )
    except EventPublishError:
        raise HTTPException(status_code=500, detail="Event publish failed")

    return StartTranscriptionResponse(
        status="queued", job_id=request.job_id, audio_url=audio_url
    )
