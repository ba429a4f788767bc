"""Abstract interface for file storage operations."""

from abc import ABC, abstractmethod


class StorageClient(ABC):
    """Abstract base class for file storage backends."""

    @abstractmethod
    def upload_file(self, file_path: str, object_name: str, content_type: str) -> str:
        """
        Uploads a local file to storage.

        Args:
            file_path: Path of the local file.
            object_name: The destination path/name in storage.
            content_type: MIME type of the file.

        Returns:
            The URL the object can be fetched from.

        Raises:
            StorageUploadError: If the upload fails.
        """

    @abstractmethod
    def exists(self, object_name: str) -> bool:
        """
        Checks whether an object is present in storage.

        Args:
            object_name: The object path/name in storage.
        """

    @abstractmethod
    def object_url(self, object_name: str) -> str:
        """Returns the URL an object can be fetched from."""

    @abstractmethod
    def ensure_bucket_exists(self) -> None:
        """Ensures the configured bucket exists, creating it if necessary."""
