"""Abstract interface for transcription job state."""

from abc import ABC, abstractmethod
from typing import Any


class JobRepository(ABC):
    """Abstract base class for job state sinks."""

    @abstractmethod
    def update(self, job_id: str, fields: dict[str, Any]) -> None:
        """
        Applies a partial update to a job record.

        Repeating the same update leaves the record unchanged.

        Args:
            job_id: Identifier of the job record.
            fields: Column values to set.

        Raises:
            JobPersistenceError: If the update fails.
        """
