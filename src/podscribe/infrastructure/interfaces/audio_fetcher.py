"""Abstract interface for retrieving remote audio files."""

from abc import ABC, abstractmethod

from podscribe.domain.models import AssetMetadata


class AudioFetcher(ABC):
    """Abstract base class for remote audio sources."""

    @abstractmethod
    async def fetch_metadata(self, url: str) -> AssetMetadata:
        """
        Reads content type and length of a remote file without downloading it.

        Args:
            url: Location of the remote file.

        Returns:
            AssetMetadata; fields the remote host did not report are None.
        """

    @abstractmethod
    async def fetch_to_file(self, url: str, file_path: str) -> int:
        """
        Streams a remote file to local storage.

        Args:
            url: Location of the remote file.
            file_path: Destination path on the local filesystem.

        Returns:
            Number of bytes written.

        Raises:
            FetchError: If the download fails.
        """
