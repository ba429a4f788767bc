"""Domain layer exports."""

from .models import (
    AssetMetadata,
    AudioAsset,
    JobOutcome,
    JobStatus,
    Segment,
    SplitDecision,
    SummaryResult,
    TranscriptChunk,
    TranscriptionJobMessage,
    TranscriptionOutput,
)
from .segmenter import Segmenter
from .size_policy import SizePolicy
from .summary_requester import SummaryRequester
from .transcript_aggregator import TranscriptAggregator
from .transcription_fanout import TranscriptionFanout

__all__ = [
    "AssetMetadata",
    "AudioAsset",
    "JobOutcome",
    "JobStatus",
    "Segment",
    "SplitDecision",
    "SummaryResult",
    "TranscriptChunk",
    "TranscriptionJobMessage",
    "TranscriptionOutput",
    "Segmenter",
    "SizePolicy",
    "SummaryRequester",
    "TranscriptAggregator",
    "TranscriptionFanout",
]
