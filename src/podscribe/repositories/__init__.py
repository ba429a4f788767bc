from .job_repository import SqlJobRepository

__all__ = ["SqlJobRepository"]
