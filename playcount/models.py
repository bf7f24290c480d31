from datetime import date, datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field, PositiveInt


class PlayRecord(BaseModel):
    """One successfully parsed play event."""

    model_config = ConfigDict(frozen=True)

    play_id: str
    content_id: str
    client_id: str
    played_at: datetime


class HistogramEntry(BaseModel):
    """Number of clients that played exactly `distinct_count` distinct songs."""

    model_config = ConfigDict(frozen=True)

    distinct_count: PositiveInt
    client_count: PositiveInt


class ClientStat(BaseModel):
    client_id: str
    distinct_count: PositiveInt


class LineFailure(BaseModel):
    """A data line that was skipped, with its 1-based line number in the file."""

    line_number: int
    line: str
    reason: str


class ParseReport(BaseModel):
    records: List[PlayRecord] = Field(default_factory=list)
    total_lines: int = 0
    success_count: int = 0
    failures: List[LineFailure] = Field(default_factory=list)


class AnalysisResult(BaseModel):
    target_date: date
    total_lines: int
    parsed_records: int
    matched_records: int
    clients: List[ClientStat]
    histogram: List[HistogramEntry]
    failures: List[LineFailure]
    started_at: datetime
    finished_at: datetime
