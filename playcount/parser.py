import logging
from typing import Optional, Sequence

from .dates import parse_timestamp
from .errors import InvalidDateFormat, MalformedRecord
from .models import LineFailure, ParseReport, PlayRecord
from .splitter import split_line

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = 4


def parse_line(line: str) -> Optional[PlayRecord]:
    """Parse one data line; blank lines yield None rather than an error."""
    line = line.strip()
    if not line:
        return None

    parts = split_line(line)
    if len(parts) < REQUIRED_COLUMNS:
        raise MalformedRecord(
            f"Invalid CSV format: expected {REQUIRED_COLUMNS} columns, found {len(parts)}"
        )

    play_id, content_id, client_id, played_at = (
        part.strip() for part in parts[:REQUIRED_COLUMNS]
    )
    try:
        timestamp = parse_timestamp(played_at)
    except InvalidDateFormat as exc:
        raise MalformedRecord(str(exc)) from exc

    return PlayRecord(
        play_id=play_id,
        content_id=content_id,
        client_id=client_id,
        played_at=timestamp,
    )


def parse_lines(lines: Sequence[str]) -> ParseReport:
    """Parse every line after the header, collecting failures instead of raising."""
    report = ParseReport(total_lines=max(len(lines) - 1, 0))

    # Line 1 is the header; its content is not checked.
    for line_number, raw in enumerate(lines[1:], start=2):
        try:
            record = parse_line(raw)
        except MalformedRecord as exc:
            text = raw.strip()
            logger.warning(
                "Failed to parse line %d: %s. Error: %s", line_number, text, exc
            )
            report.failures.append(
                LineFailure(line_number=line_number, line=text, reason=str(exc))
            )
            continue
        if record is not None:
            report.records.append(record)

    report.success_count = len(report.records)
    logger.info(
        "Successfully parsed %d records from %d lines",
        report.success_count,
        report.total_lines,
    )
    return report
