"""Worker that handles queue message consumption and orchestration."""

import asyncio
import json
from typing import Any

from pydantic import ValidationError

from podscribe.config import RabbitMQConfig
from podscribe.domain import JobStatus, TranscriptionJobMessage
from podscribe.handlers import TranscriptionJobHandler
from podscribe.infrastructure.interfaces import MessageBroker
from podscribe.logging import setup_logging

logger = setup_logging()


class Worker:
    """Consumes transcription requests from the queue and runs them."""

    def __init__(
        self,
        broker: MessageBroker,
        handler: TranscriptionJobHandler,
        config: RabbitMQConfig,
    ):
        self._broker = broker
        self._handler = handler
        self._config = config

    def start(self) -> None:
        """Starts consuming messages from the queue."""
        logger.info("Worker initialized, starting message consumption")
        self._broker.consume(self._on_message)

    def _on_message(
        self, body: bytes, delivery_tag: int, headers: dict[str, Any] | None
    ) -> None:
        """Callback for each received message."""
        delivery_count = headers.get("x-delivery-count", 1) if headers else 1

        logger.info(
            "Message received",
            extra={
                "attempt": delivery_count,
                "max_attempts": self._config.queue_config.max_delivery_count,
            },
        )

        try:
            message = TranscriptionJobMessage.model_validate(json.loads(body))
        except (ValidationError, ValueError) as e:
            logger.exception("Invalid message format", extra={"error": str(e)})
            self._broker.reject(delivery_tag)
            return

        try:
            outcome = asyncio.run(self._handler.process(message))
        except Exception:
            # job state could not be recorded; let the broker redeliver
            logger.exception(
                "Message processing failed",
                extra={"job_id": message.job_id},
            )
            self._broker.reject(delivery_tag)
            return

        self._broker.acknowledge(delivery_tag)

        queue_config = self._config.queue_config
        if outcome.status is JobStatus.SUCCESS:
            routing_key = queue_config.success_routing_key
            payload = {
                "job_id": message.job_id,
                "segment_count": outcome.segment_count,
                "title": outcome.title,
            }
        else:
            routing_key = queue_config.failure_routing_key
            payload = {"job_id": message.job_id, "reason": outcome.reason}

        try:
            self._broker.publish(routing_key=routing_key, payload=payload)
        except Exception:
            logger.exception(
                "Completion event not published", extra={"job_id": message.job_id}
            )

        logger.info(
            "Message processed",
            extra={"job_id": message.job_id, "status": outcome.status.value},
        )
