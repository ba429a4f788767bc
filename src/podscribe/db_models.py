from datetime import datetime, timezone
from typing import Any, List, Optional

from sqlalchemy import Column
from sqlalchemy.types import JSON, Text
from sqlmodel import Field, SQLModel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TranscriptionJob(SQLModel, table=True):
    __tablename__ = "transcription_jobs"

    id: str = Field(primary_key=True, max_length=255)
    status: Optional[str] = Field(default=None, max_length=16, index=True)
    audio_url: Optional[str] = Field(default=None, sa_column=Column(Text))
    output: Optional[List[dict[str, Any]]] = Field(default=None, sa_column=Column(JSON))
    title: Optional[str] = Field(default=None, sa_column=Column(Text))
    summary: Optional[str] = Field(default=None, sa_column=Column(Text))
    reason: Optional[str] = Field(default=None, sa_column=Column(Text))
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
