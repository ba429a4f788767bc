"""RabbitMQ implementation of the MessageBroker interface."""

import json
from collections.abc import Callable
from typing import Any

import pika
from pika.adapters.blocking_connection import BlockingChannel

from podscribe.config import RabbitMQConfig
from podscribe.exceptions import EventPublishError
from podscribe.logging import setup_logging

from .interfaces import MessageBroker

logger = setup_logging()

JSON_PERSISTENT = pika.BasicProperties(
    content_type="application/json",
    delivery_mode=pika.DeliveryMode.Persistent,
)


class RabbitMQBroker(MessageBroker):
    """
    Carries transcription job requests and completion events over RabbitMQ.

    Job requests are read from a quorum queue bound to the topic exchange.
    A request that keeps getting rejected is dead-lettered once the queue's
    delivery limit is reached.
    """

    def __init__(self, channel: BlockingChannel, config: RabbitMQConfig):
        self._channel = channel
        self._config = config
        self._queue = config.queue_config

    def publish(self, routing_key: str, payload: dict) -> None:
        """
        Publishes a persistent JSON message on the service exchange.

        Args:
            routing_key: Topic the message is published under.
            payload: JSON-serializable message body.

        Raises:
            EventPublishError: If the message cannot be published.
        """
        try:
            body = json.dumps(payload)
            self._channel.basic_publish(
                exchange=self._config.exchange_name,
                routing_key=routing_key,
                body=body,
                properties=JSON_PERSISTENT,
            )
        except Exception as e:
            logger.exception(
                "Failed to publish message",
                extra={
                    "exchange": self._config.exchange_name,
                    "routing_key": routing_key,
                    "job_id": payload.get("job_id"),
                },
            )
            raise EventPublishError(routing_key, cause=e) from e

        logger.info(
            "Message published",
            extra={"routing_key": routing_key, "job_id": payload.get("job_id")},
        )

    def acknowledge(self, delivery_tag: int) -> None:
        self._channel.basic_ack(delivery_tag=delivery_tag)

    def reject(self, delivery_tag: int) -> None:
        """Returns the message to the queue; the delivery limit dead-letters it."""
        self._channel.basic_nack(delivery_tag=delivery_tag, requeue=True)

    def consume(
        self, callback: Callable[[bytes, int, dict[str, Any] | None], None]
    ) -> None:
        """
        Blocks delivering job requests to ``callback`` one at a time.

        Args:
            callback: Called with (body, delivery_tag, headers) per message.
        """

        def on_message(channel, method, properties, body):
            callback(body, method.delivery_tag, getattr(properties, "headers", None))

        # a job already runs its segments concurrently
        self._channel.basic_qos(prefetch_count=1)
        self._channel.basic_consume(
            queue=self._queue.name,
            on_message_callback=on_message,
            auto_ack=False,
        )
        logger.info("Waiting for transcription jobs", extra={"queue": self._queue.name})
        self._channel.start_consuming()

    def setup(self) -> None:
        """Declares the job queue, its dead-letter queue and their bindings."""
        self._declare_dead_letter_queue()

        self._channel.exchange_declare(
            exchange=self._config.exchange_name,
            exchange_type="topic",
            durable=True,
        )
        self._channel.queue_declare(
            queue=self._queue.name,
            durable=True,
            arguments={
                "x-queue-type": self._queue.queue_type,
                "x-delivery-limit": self._queue.max_delivery_count,
                "x-dead-letter-exchange": self._queue.dlq_exchange_name,
                "x-dead-letter-routing-key": self._queue.dlq_routing_key,
            },
        )
        self._channel.queue_bind(
            queue=self._queue.name,
            exchange=self._config.exchange_name,
            routing_key=self._queue.expected_routing_key,
        )

        logger.info(
            "Job queue declared",
            extra={
                "queue": self._queue.name,
                "exchange": self._config.exchange_name,
                "routing_key": self._queue.expected_routing_key,
                "delivery_limit": self._queue.max_delivery_count,
            },
        )

    def _declare_dead_letter_queue(self) -> None:
        self._channel.exchange_declare(
            exchange=self._queue.dlq_exchange_name,
            exchange_type="direct",
            durable=True,
        )
        self._channel.queue_declare(queue=self._queue.dlq_name, durable=True)
        self._channel.queue_bind(
            queue=self._queue.dlq_name,
            exchange=self._queue.dlq_exchange_name,
            routing_key=self._queue.dlq_routing_key,
        )
