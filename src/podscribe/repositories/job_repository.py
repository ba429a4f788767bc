"""Repository for transcription job persistence."""

from typing import Any

from podscribe.db_models import TranscriptionJob, utcnow
from podscribe.exceptions import JobPersistenceError
from podscribe.infrastructure.interfaces import JobRepository
from podscribe.logging import setup_logging

logger = setup_logging()


class SqlJobRepository(JobRepository):
    """
    Handles database operations for transcription jobs.

    Every call is a partial update of one row: only the given columns
    change, and the row is created on first write.
    """

    def __init__(self, session_factory):
        """
        Initializes the repository.

        Args:
            session_factory: Callable that returns a SQLModel Session context manager.
        """
        self._session_factory = session_factory

    def update(self, job_id: str, fields: dict[str, Any]) -> None:
        unknown = set(fields) - set(TranscriptionJob.model_fields)
        if unknown:
            raise JobPersistenceError(
                job_id, ValueError(f"unknown job fields: {sorted(unknown)}")
            )

        try:
            with self._session_factory() as db_session:
                job = db_session.get(TranscriptionJob, job_id)
                if job is None:
                    job = TranscriptionJob(id=job_id)

                for name, value in fields.items():
                    setattr(job, name, value)
                job.updated_at = utcnow()

                db_session.add(job)
                db_session.commit()

                logger.info(
                    "Transcription job updated",
                    extra={"job_id": job_id, "fields": sorted(fields)},
                )
        except Exception as e:
            logger.exception("Failed to persist job", extra={"job_id": job_id})
            raise JobPersistenceError(job_id, cause=e) from e

    def get(self, job_id: str) -> TranscriptionJob | None:
        """Returns the job record, or None if it does not exist."""
        with self._session_factory() as db_session:
            return db_session.get(TranscriptionJob, job_id)
