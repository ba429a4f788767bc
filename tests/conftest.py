import asyncio
import os
import random

import pytest

from podscribe.config import PipelineConfig
from podscribe.domain import (
    AssetMetadata,
    Segmenter,
    SizePolicy,
    SummaryRequester,
    TranscriptAggregator,
    TranscriptionFanout,
    TranscriptionOutput,
)
from podscribe.handlers import TranscriptionJobHandler
from podscribe.infrastructure.interfaces import (
    AudioFetcher,
    JobRepository,
    LLMService,
    SegmentationTool,
    StorageClient,
    TranscriptionService,
)


class FakeFetcher(AudioFetcher):
    def __init__(self, content_type="audio/mpeg", size=5_000_000, content=None):
        self.metadata = AssetMetadata(content_type=content_type, content_length=size)
        self.content = content if content is not None else b"\x00" * size
        self.downloaded = []

    async def fetch_metadata(self, url):
        return self.metadata

    async def fetch_to_file(self, url, file_path):
        with open(file_path, "wb") as f:
            f.write(self.content)
        self.downloaded.append(file_path)
        return len(self.content)


class FakeSegmentationTool(SegmentationTool):
    """Writes ``count`` segment files in shuffled order."""

    def __init__(self, count=3, exit_code=0, seed=7):
        self.count = count
        self.exit_code = exit_code
        self.calls = []
        self._random = random.Random(seed)

    async def run(self, input_path, segment_seconds, output_pattern):
        self.calls.append((input_path, segment_seconds, output_pattern))
        ordinals = list(range(self.count))
        self._random.shuffle(ordinals)
        for ordinal in ordinals:
            with open(output_pattern % ordinal, "wb") as f:
                f.write(f"segment {ordinal}".encode())
        return self.exit_code


class FakeTranscriptionService(TranscriptionService):
    """Returns the file's base name as text; failures match on file name suffix."""

    def __init__(self, delays=None, fail_on=None, failures_before_success=0):
        self.delays = delays or {}
        self.fail_on = set(fail_on or [])
        self.failures_before_success = failures_before_success
        self.calls = []
        self.in_flight = 0
        self.max_in_flight = 0
        self.cancelled = 0

    async def transcribe(self, file_path, mime_type):
        self.calls.append((file_path, mime_type))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            name = os.path.basename(file_path)
            await asyncio.sleep(self.delays.get(name, 0))
            if any(name.endswith(pattern) for pattern in self.fail_on):
                raise RuntimeError(f"upstream rejected {name}")
            if self.failures_before_success > 0:
                self.failures_before_success -= 1
                raise ConnectionError("connection reset")
            return TranscriptionOutput(text=f"text of {name}", raw={"file": name})
        except asyncio.CancelledError:
            self.cancelled += 1
            raise
        finally:
            self.in_flight -= 1


class FakeLLM(LLMService):
    def __init__(self, fail=False):
        self.fail = fail
        self.prompts = []

    async def complete(self, prompt):
        self.prompts.append(prompt)
        if self.fail:
            raise RuntimeError("model unavailable")
        if "title" in prompt.split("\n\n\n", 1)[0]:
            return " A Title \n"
        return "A paragraph summary."


class FakeRepository(JobRepository):
    def __init__(self, fail=False):
        self.fail = fail
        self.updates = []

    def update(self, job_id, fields):
        if self.fail:
            raise RuntimeError("database down")
        self.updates.append((job_id, dict(fields)))


class FakeStorage(StorageClient):
    def __init__(self, objects=()):
        self.objects = set(objects)
        self.uploaded = []

    def upload_file(self, file_path, object_name, content_type):
        self.uploaded.append((object_name, content_type))
        self.objects.add(object_name)
        return self.object_url(object_name)

    def exists(self, object_name):
        return object_name in self.objects

    def object_url(self, object_name):
        return f"http://storage.local/audio/{object_name}"

    def ensure_bucket_exists(self):
        pass


@pytest.fixture
def pipeline_config(tmp_path):
    return PipelineConfig(
        temp_dir=str(tmp_path / "work"),
        split_threshold_bytes=24_000_000,
        max_file_size_bytes=100_000_000,
    )


@pytest.fixture
def fetcher():
    return FakeFetcher()


@pytest.fixture
def segmentation_tool():
    return FakeSegmentationTool()


@pytest.fixture
def transcription_service():
    return FakeTranscriptionService()


@pytest.fixture
def llm():
    return FakeLLM()


@pytest.fixture
def repository():
    return FakeRepository()


@pytest.fixture
def make_handler(pipeline_config, fetcher, segmentation_tool, transcription_service, llm, repository):
    def build(storage=None, config=None):
        config = config or pipeline_config
        return TranscriptionJobHandler(
            fetcher=fetcher,
            size_policy=SizePolicy(config),
            segmenter=Segmenter(segmentation_tool, segment_seconds=config.segment_seconds),
            fanout=TranscriptionFanout(
                transcription_service, max_concurrency=2, max_attempts=1
            ),
            summary_requester=SummaryRequester(llm, TranscriptAggregator()),
            repository=repository,
            temp_dir=config.temp_dir,
            storage=storage,
        )

    return build


@pytest.fixture
def fake_storage_class():
    return FakeStorage


@pytest.fixture
def fake_fetcher_class():
    return FakeFetcher


@pytest.fixture
def fake_tool_class():
    return FakeSegmentationTool


@pytest.fixture
def fake_transcriber_class():
    return FakeTranscriptionService


@pytest.fixture
def fake_llm_class():
    return FakeLLM
