import pytest

from podscribe.config import PipelineConfig
from podscribe.domain import AssetMetadata, SizePolicy
from podscribe.exceptions import InvalidAssetError


@pytest.fixture
def policy():
    return SizePolicy(
        PipelineConfig(split_threshold_bytes=24_000_000, max_file_size_bytes=100_000_000)
    )


def test_small_asset_is_not_split(policy):
    assert policy.decide(5_000_000).split is False


def test_asset_at_threshold_is_split(policy):
    assert policy.decide(24_000_000).split is True
    assert policy.decide(30_000_000).split is True


def test_short_duration_hint_prevents_split(policy):
    assert policy.decide(30_000_000, duration_hint=600).split is False
    assert policy.decide(30_000_000, duration_hint=3600).split is True


def test_accepts_supported_type_with_parameters(policy):
    policy.validate(
        AssetMetadata(content_type="audio/mpeg; charset=binary", content_length=1_000)
    )


@pytest.mark.parametrize(
    "metadata, reason",
    [
        (AssetMetadata(content_type=None, content_length=1_000), "missing content type"),
        (AssetMetadata(content_type="text/html", content_length=1_000), "unsupported"),
        (AssetMetadata(content_type="audio/mpeg", content_length=None), "missing content length"),
        (AssetMetadata(content_type="audio/mpeg", content_length=0), "empty file"),
        (AssetMetadata(content_type="audio/mpeg", content_length=100_000_001), "exceeds"),
    ],
)
def test_rejects_invalid_metadata(policy, metadata, reason):
    with pytest.raises(InvalidAssetError) as exc_info:
        policy.validate(metadata)
    assert reason in str(exc_info.value)


def test_rejects_empty_download(policy):
    with pytest.raises(InvalidAssetError, match="empty file"):
        policy.validate_local_size(0)
