from podscribe.domain import SummaryRequester, TranscriptAggregator
from podscribe.domain.summary_requester import SUMMARY_PROMPT, TITLE_PROMPT


async def test_returns_title_and_paragraph(fake_llm_class):
    llm = fake_llm_class()
    requester = SummaryRequester(llm, TranscriptAggregator())

    result = await requester.summarize(["first part", "second part"])

    assert result.title == "A Title"
    assert result.paragraph == "A paragraph summary."
    assert sorted(llm.prompts) == sorted(
        [
            f"{TITLE_PROMPT}\n\n\nfirst part ... second part",
            f"{SUMMARY_PROMPT}\n\n\nfirst part ... second part",
        ]
    )


async def test_empty_transcript_makes_no_calls(fake_llm_class):
    llm = fake_llm_class()
    requester = SummaryRequester(llm, TranscriptAggregator())

    assert await requester.summarize([]) is None
    assert await requester.summarize(["", "   "]) is None
    assert llm.prompts == []


async def test_failure_is_reported_as_absent_result(fake_llm_class):
    requester = SummaryRequester(fake_llm_class(fail=True), TranscriptAggregator())

    assert await requester.summarize(["some speech"]) is None


async def test_prompt_uses_aggregated_text(fake_llm_class):
    llm = fake_llm_class()
    aggregator = TranscriptAggregator(char_budget=10, min_first_chunk_chars=5)
    requester = SummaryRequester(llm, aggregator)

    await requester.summarize(["x" * 50])

    assert all(prompt.endswith("x" * 10 + "...") for prompt in llm.prompts)
