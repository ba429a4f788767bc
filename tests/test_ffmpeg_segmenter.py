import asyncio

from podscribe.infrastructure import FfmpegSegmentationTool


class FakeProcess:
    def __init__(self, returncode, stderr=b""):
        self.returncode = returncode
        self._stderr = stderr

    async def communicate(self):
        return b"", self._stderr


def test_build_args_uses_stream_copy_segments():
    tool = FfmpegSegmentationTool("/usr/bin/ffmpeg")

    args = tool.build_args("/tmp/in.mp3", 1200, "/tmp/in-segment-%03d.mp3")

    assert args[0] == "/usr/bin/ffmpeg"
    assert args[args.index("-i") + 1] == "/tmp/in.mp3"
    assert args[args.index("-f") + 1] == "segment"
    assert args[args.index("-segment_time") + 1] == "1200"
    assert args[args.index("-c") + 1] == "copy"
    assert args[-1] == "/tmp/in-segment-%03d.mp3"


async def test_run_returns_exit_status(monkeypatch):
    calls = []

    async def fake_exec(*args, **kwargs):
        calls.append(args)
        return FakeProcess(0)

    monkeypatch.setattr(asyncio, "create_subprocess_exec", fake_exec)

    status = await FfmpegSegmentationTool().run("in.mp3", 60, "out-%03d.mp3")

    assert status == 0
    assert calls[0][0] == "ffmpeg"


async def test_run_reports_failure_status(monkeypatch):
    async def fake_exec(*args, **kwargs):
        return FakeProcess(1, stderr=b"Invalid data found when processing input")

    monkeypatch.setattr(asyncio, "create_subprocess_exec", fake_exec)

    status = await FfmpegSegmentationTool().run("in.mp3", 60, "out-%03d.mp3")

    assert status == 1
