from podscribe.config import load_config


def test_summary_and_retry_settings_come_from_environment(monkeypatch):
    monkeypatch.setenv("SUMMARY_CHAR_BUDGET", "8000")
    monkeypatch.setenv("SUMMARY_MIN_FIRST_CHUNK_CHARS", "2500")
    monkeypatch.setenv("SUMMARY_MAX_CHUNKS", "4")
    monkeypatch.setenv("GEMINI_TEMPERATURE", "0.2")
    monkeypatch.setenv("GEMINI_TIMEOUT_SECONDS", "45")
    monkeypatch.setenv("TRANSCRIPTION_BACKOFF_SECONDS", "0.5")
    monkeypatch.setenv("TRANSCRIPTION_POLL_INTERVAL_SECONDS", "1.5")

    config = load_config()

    assert config.summary.char_budget == 8000
    assert config.summary.min_first_chunk_chars == 2500
    assert config.summary.max_chunks_to_use == 4
    assert config.summary.temperature == 0.2
    assert config.summary.request_timeout_seconds == 45.0
    assert config.transcription.backoff_seconds == 0.5
    assert config.transcription.poll_interval_seconds == 1.5


def test_defaults_apply_without_environment(monkeypatch):
    for name in (
        "SUMMARY_CHAR_BUDGET",
        "SUMMARY_MIN_FIRST_CHUNK_CHARS",
        "SUMMARY_MAX_CHUNKS",
        "GEMINI_TEMPERATURE",
        "TRANSCRIPTION_BACKOFF_SECONDS",
        "SPLIT_THRESHOLD_BYTES",
    ):
        monkeypatch.delenv(name, raising=False)

    config = load_config()

    assert config.summary.char_budget == 12_000
    assert config.summary.min_first_chunk_chars == 4_000
    assert config.summary.max_chunks_to_use == 6
    assert config.summary.temperature == 0.7
    assert config.transcription.backoff_seconds == 1.0
    assert config.pipeline.split_threshold_bytes == 24_000_000
