"""ffmpeg implementation of the SegmentationTool interface."""

import asyncio

from podscribe.logging import setup_logging

from .interfaces import SegmentationTool

logger = setup_logging()


class FfmpegSegmentationTool(SegmentationTool):
    """Cuts media with ffmpeg's segment muxer in stream-copy mode."""

    def __init__(self, ffmpeg_path: str = "ffmpeg"):
        self._ffmpeg_path = ffmpeg_path

    def build_args(
        self, input_path: str, segment_seconds: int, output_pattern: str
    ) -> list[str]:
        """Returns the ffmpeg command line for one segmentation run."""
        return [
            self._ffmpeg_path,
            "-y",
            "-loglevel",
            "warning",
            "-i",
            input_path,
            "-f",
            "segment",
            "-segment_time",
            str(segment_seconds),
            "-c",
            "copy",
            output_pattern,
        ]

    async def run(self, input_path: str, segment_seconds: int, output_pattern: str) -> int:
        process = await asyncio.create_subprocess_exec(
            *self.build_args(input_path, segment_seconds, output_pattern),
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        _, stderr = await process.communicate()

        if process.returncode != 0:
            logger.error(
                "ffmpeg segmentation failed",
                extra={
                    "input_path": input_path,
                    "returncode": process.returncode,
                    "stderr": stderr.decode(errors="replace")[-2000:],
                },
            )
        else:
            logger.info(
                "ffmpeg segmentation finished",
                extra={"input_path": input_path, "segment_seconds": segment_seconds},
            )
        return process.returncode
