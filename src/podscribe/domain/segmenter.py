"""Cuts an audio asset into ordered, time-bounded segments."""

import os
import re

from podscribe.exceptions import SegmentationError
from podscribe.infrastructure.interfaces import SegmentationTool
from podscribe.logging import setup_logging

from .models import AudioAsset, Segment

logger = setup_logging()

SEGMENT_INFIX = "-segment-"
ORDINAL_WIDTH = 3


class Segmenter:
    """Splits audio with an external stream-copy tool and restores segment order."""

    def __init__(self, tool: SegmentationTool, segment_seconds: int):
        self._tool = tool
        self._segment_seconds = segment_seconds

    async def segment(self, asset: AudioAsset, split: bool) -> list[Segment]:
        """
        Produces the ordered segments to transcribe for an asset.

        Args:
            asset: The downloaded audio asset.
            split: Whether the asset has to be cut.

        Returns:
            Segments ordered by their position in the original audio.

        Raises:
            SegmentationError: If the tool fails or produces no output files.
        """
        if not split:
            return [Segment(index=0, file_path=asset.local_path, mime_type=asset.mime_type)]

        directory, prefix, extension = self._output_naming(asset.local_path)
        output_pattern = os.path.join(
            directory, f"{prefix}%0{ORDINAL_WIDTH}d{extension}"
        )

        try:
            exit_code = await self._tool.run(
                asset.local_path, self._segment_seconds, output_pattern
            )
        except Exception as e:
            logger.exception(
                "Segmentation tool could not be run",
                extra={"file_path": asset.local_path},
            )
            raise SegmentationError(asset.local_path, "tool invocation failed", e) from e

        if exit_code != 0:
            raise SegmentationError(
                asset.local_path, f"tool exited with status {exit_code}"
            )

        paths = collect_segment_paths(directory, prefix, extension)
        if not paths:
            raise SegmentationError(asset.local_path, "no segments were produced")

        segments = [
            Segment(index=index, file_path=path, mime_type=asset.mime_type)
            for index, path in enumerate(paths)
        ]
        logger.info(
            "Audio split into segments",
            extra={"file_path": asset.local_path, "segment_count": len(segments)},
        )
        return segments

    def _output_naming(self, local_path: str) -> tuple[str, str, str]:
        """Derives (directory, segment prefix, extension) from the asset path."""
        directory = os.path.dirname(local_path) or "."
        stem, extension = os.path.splitext(os.path.basename(local_path))
        return directory, f"{stem}{SEGMENT_INFIX}", extension


def collect_segment_paths(directory: str, prefix: str, extension: str) -> list[str]:
    """
    Lists segment files written for one asset, sorted by ordinal suffix.

    Directory listings come back in arbitrary order, so the ordinal embedded
    in each file name is parsed and used as the sort key.
    """
    pattern = re.compile(rf"^{re.escape(prefix)}(\d+){re.escape(extension)}$")
    ordered: list[tuple[int, str]] = []
    for name in os.listdir(directory):
        match = pattern.match(name)
        if match:
            ordered.append((int(match.group(1)), os.path.join(directory, name)))
    ordered.sort(key=lambda item: item[0])
    return [path for _, path in ordered]
