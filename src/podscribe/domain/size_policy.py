"""Admission validation and split decision for fetched audio."""

from podscribe.config import PipelineConfig
from podscribe.exceptions import InvalidAssetError
from podscribe.logging import setup_logging

from .models import AssetMetadata, SplitDecision

logger = setup_logging()


class SizePolicy:
    """Decides whether an asset is accepted and whether it must be split."""

    def __init__(self, config: PipelineConfig):
        self._config = config

    def validate(self, metadata: AssetMetadata) -> None:
        """
        Checks remote metadata before anything is downloaded.

        Args:
            metadata: Content type and length reported by the remote host.

        Raises:
            InvalidAssetError: If the type is not allowed or the size is
                missing, zero or above the accepted maximum.
        """
        content_type = _base_content_type(metadata.content_type)
        if content_type is None:
            raise InvalidAssetError("missing content type")
        if content_type not in self._config.supported_content_types:
            raise InvalidAssetError(f"unsupported content type '{content_type}'")
        if metadata.content_length is None:
            raise InvalidAssetError("missing content length")
        self._check_size(metadata.content_length)

    def validate_local_size(self, byte_size: int) -> None:
        """Rejects downloads that came back empty or oversized."""
        if byte_size == 0:
            raise InvalidAssetError("empty file")
        self._check_size(byte_size)

    def decide(self, byte_size: int, duration_hint: float | None = None) -> SplitDecision:
        """
        Decides whether an asset has to be split before transcription.

        Args:
            byte_size: Size of the asset in bytes.
            duration_hint: Optional duration in seconds; an asset that fits
                in one segment is never split.

        Returns:
            SplitDecision with ``split`` set when the size reaches the threshold.
        """
        if duration_hint is not None and duration_hint <= self._config.segment_seconds:
            return SplitDecision(split=False)
        split = byte_size >= self._config.split_threshold_bytes
        logger.info(
            "Split decision made",
            extra={
                "byte_size": byte_size,
                "threshold": self._config.split_threshold_bytes,
                "split": split,
            },
        )
        return SplitDecision(split=split)

    def _check_size(self, byte_size: int) -> None:
        if byte_size <= 0:
            raise InvalidAssetError("empty file")
        if byte_size > self._config.max_file_size_bytes:
            raise InvalidAssetError(
                f"file size {byte_size} exceeds maximum of "
                f"{self._config.max_file_size_bytes} bytes"
            )


def _base_content_type(content_type: str | None) -> str | None:
    """Strips parameters such as ``; charset=...`` from a content type."""
    if not content_type:
        return None
    return content_type.split(";", 1)[0].strip().lower() or None
