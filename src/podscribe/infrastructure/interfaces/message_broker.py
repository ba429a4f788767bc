"""Interfaces for job request and completion messaging."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any


class MessagePublisher(ABC):
    """Publishes job requests and completion events."""

    @abstractmethod
    def publish(self, routing_key: str, payload: dict) -> None:
        """
        Publishes one message.

        Args:
            routing_key: Topic the message is published under.
            payload: JSON-serializable message body.

        Raises:
            EventPublishError: If the message cannot be published.
        """


class MessageBroker(MessagePublisher):
    """Publisher that also consumes transcription job requests."""

    @abstractmethod
    def acknowledge(self, delivery_tag: int) -> None:
        """Marks a job request as handled."""

    @abstractmethod
    def reject(self, delivery_tag: int) -> None:
        """Hands a job request back to the broker for redelivery or dead-lettering."""

    @abstractmethod
    def consume(
        self, callback: Callable[[bytes, int, dict[str, Any] | None], None]
    ) -> None:
        """
        Delivers job requests until the consumer is stopped.

        Args:
            callback: Called with (body, delivery_tag, headers) per message.
        """

    @abstractmethod
    def setup(self) -> None:
        """Declares the exchanges and queues the worker reads from."""
