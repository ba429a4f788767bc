"""Abstract interface for the external media segmentation tool."""

from abc import ABC, abstractmethod


class SegmentationTool(ABC):
    """Abstract base class for stream-copy segmentation backends."""

    @abstractmethod
    async def run(self, input_path: str, segment_seconds: int, output_pattern: str) -> int:
        """
        Cuts a media file at fixed time boundaries without re-encoding.

        Args:
            input_path: The file to cut.
            segment_seconds: Duration of each output segment.
            output_pattern: Output file name pattern with a printf-style
                ordinal placeholder, e.g. ``/tmp/abc-segment-%03d.mp3``.

        Returns:
            The tool's exit status.
        """
