"""Compresses a multi-segment transcript into a bounded prompt body."""

ELLIPSIS = "..."
JOIN_SEPARATOR = " ... "


class TranscriptAggregator:
    """
    Builds summarization prompt text from ordered transcript chunks.

    Only the first ``max_chunks_to_use`` chunks are considered. The character
    budget is shared evenly between them unless that share would fall below
    ``min_first_chunk_chars``; in that case the first chunk, which usually
    says what the recording is about, keeps ``min_first_chunk_chars`` and the
    rest of the budget is split across the remaining chunks.
    """

    def __init__(
        self,
        char_budget: int = 12_000,
        min_first_chunk_chars: int = 4_000,
        max_chunks_to_use: int = 6,
    ):
        self._char_budget = char_budget
        self._min_first_chunk_chars = min_first_chunk_chars
        self._max_chunks_to_use = max_chunks_to_use

    def aggregate(self, texts: list[str], char_budget: int | None = None) -> str:
        """
        Merges transcript texts, in order, into one bounded string.

        Args:
            texts: Transcript text per segment, in segment order.
            char_budget: Overrides the configured character budget.

        Returns:
            The joined, truncated text. Empty when there are no chunks.
        """
        budget = self._char_budget if char_budget is None else char_budget
        n = min(len(texts), self._max_chunks_to_use)
        if n == 0:
            return ""

        used = texts[:n]
        per_chunk = budget // n

        if per_chunk >= self._min_first_chunk_chars:
            return JOIN_SEPARATOR.join(truncate(text, per_chunk) for text in used)

        first, rest = used[0], used[1:]
        first_allotment = min(self._min_first_chunk_chars, budget)
        first_size = min(len(first), first_allotment)
        parts = [truncate(first, first_allotment)]
        if rest:
            rest_size = max(budget - first_size, 0) // len(rest)
            parts.extend(truncate(text, rest_size) for text in rest)
        return JOIN_SEPARATOR.join(parts)


def truncate(text: str, num_chars: int) -> str:
    """Cuts ``text`` to ``num_chars`` characters, marking the cut with an ellipsis."""
    if len(text) <= num_chars:
        return text
    return text[:num_chars] + ELLIPSIS
