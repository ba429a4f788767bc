from podscribe.domain import TranscriptAggregator
from podscribe.domain.transcript_aggregator import ELLIPSIS, JOIN_SEPARATOR, truncate


def _chunk(letter, size=10_000):
    return letter * size


def test_budget_favours_first_chunk_when_share_is_small():
    texts = [_chunk(letter) for letter in "ABCDEFGH"]
    aggregator = TranscriptAggregator(
        char_budget=12_000, min_first_chunk_chars=4_000, max_chunks_to_use=6
    )

    parts = aggregator.aggregate(texts).split(JOIN_SEPARATOR)

    assert len(parts) == 6
    assert parts[0] == "A" * 4_000 + ELLIPSIS
    for letter, part in zip("BCDEF", parts[1:]):
        assert part == letter * 1_600 + ELLIPSIS
    assert not any("G" in p or "H" in p for p in parts)


def test_budget_is_shared_evenly_when_share_is_large_enough():
    texts = [_chunk("A"), _chunk("B")]
    aggregator = TranscriptAggregator(char_budget=12_000, min_first_chunk_chars=4_000)

    parts = aggregator.aggregate(texts).split(JOIN_SEPARATOR)

    assert parts == ["A" * 6_000 + ELLIPSIS, "B" * 6_000 + ELLIPSIS]


def test_short_chunks_are_used_verbatim():
    aggregator = TranscriptAggregator(char_budget=12_000)

    assert aggregator.aggregate(["hello", "world"]) == "hello ... world"


def test_short_first_chunk_leaves_more_for_the_rest():
    texts = ["intro"] + [_chunk(letter) for letter in "BCDEF"]
    aggregator = TranscriptAggregator(
        char_budget=12_000, min_first_chunk_chars=4_000, max_chunks_to_use=6
    )

    parts = aggregator.aggregate(texts).split(JOIN_SEPARATOR)

    assert parts[0] == "intro"
    assert parts[1] == "B" * ((12_000 - 5) // 5) + ELLIPSIS


def test_output_length_is_bounded():
    aggregator = TranscriptAggregator(
        char_budget=12_000, min_first_chunk_chars=4_000, max_chunks_to_use=6
    )
    for count in range(1, 10):
        texts = [_chunk(str(i), 20_000) for i in range(count)]
        n = min(count, 6)
        overhead = n * len(ELLIPSIS) + (n - 1) * len(JOIN_SEPARATOR)

        assert len(aggregator.aggregate(texts)) <= 12_000 + overhead


def test_budget_override_and_single_small_budget():
    aggregator = TranscriptAggregator(char_budget=12_000, min_first_chunk_chars=4_000)

    assert aggregator.aggregate([_chunk("A")], char_budget=100) == "A" * 100 + ELLIPSIS


def test_aggregate_is_deterministic():
    texts = [_chunk(letter, 7_000) for letter in "ABCDEFG"]
    aggregator = TranscriptAggregator()

    assert aggregator.aggregate(texts) == aggregator.aggregate(list(texts))


def test_no_chunks_gives_empty_text():
    assert TranscriptAggregator().aggregate([]) == ""


def test_truncate_appends_marker_after_cut():
    assert truncate("abcdef", 3) == "abc..."
    assert truncate("abc", 3) == "abc"
