"""Custom exceptions for the podscribe service."""


class InvalidAssetError(Exception):
    """Raised when an audio asset fails admission validation."""

    def __init__(self, reason: str, cause: Exception | None = None):
        self.reason = reason
        self.cause = cause
        super().__init__(f"invalid file: {reason}")


class FetchError(Exception):
    """Raised when fetching a remote audio file fails."""

    def __init__(self, url: str, cause: Exception | None = None):
        self.url = url
        self.cause = cause
        super().__init__(f"Failed to fetch '{url}'")


class SegmentationError(Exception):
    """Raised when the segmentation tool fails or produces no segments."""

    def __init__(self, file_path: str, reason: str, cause: Exception | None = None):
        self.file_path = file_path
        self.reason = reason
        self.cause = cause
        super().__init__(f"Failed to segment '{file_path}': {reason}")


class TranscriptionError(Exception):
    """Raised when transcribing one segment fails."""

    def __init__(
        self,
        file_name: str,
        cause: Exception | None = None,
        segment_index: int | None = None,
    ):
        self.file_name = file_name
        self.cause = cause
        self.segment_index = segment_index
        if segment_index is None:
            message = f"Failed to transcribe audio file '{file_name}'"
        else:
            message = f"Failed to transcribe segment {segment_index} ('{file_name}')"
        if cause is not None and str(cause):
            message = f"{message}: {cause}"
        super().__init__(message)


class SummarizationError(Exception):
    """Raised when a summary completion fails or returns nothing."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class StorageUploadError(Exception):
    """Raised when uploading a file to storage fails."""

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        self.cause = cause
        super().__init__(f"Failed to upload '{object_name}' to storage")


class EventPublishError(Exception):
    """Raised when publishing an event to the message broker fails."""

    def __init__(self, routing_key: str, cause: Exception | None = None):
        self.routing_key = routing_key
        self.cause = cause
        super().__init__(f"Failed to publish event with routing key '{routing_key}'")


class JobPersistenceError(Exception):
    """Raised when writing job state to the database fails."""

    def __init__(self, job_id: str, cause: Exception | None = None):
        self.job_id = job_id
        self.cause = cause
        super().__init__(f"Failed to persist transcription job '{job_id}'")
