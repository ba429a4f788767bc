from .transcription_job_handler import TranscriptionJobHandler

__all__ = ["TranscriptionJobHandler"]
