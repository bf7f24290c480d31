import logging
from datetime import date, datetime
from pathlib import Path
from typing import Optional, Sequence, Union

from .aggregate import build_histogram, client_distinct_counts, filter_by_date
from .models import AnalysisResult, ClientStat
from .parser import parse_lines
from .sources import load_lines

logger = logging.getLogger(__name__)


class AnalysisPipeline:
    """Load, parse and aggregate a play log for one target date."""

    def __init__(self):
        self.last_run_at: Optional[datetime] = None
        self.last_result: Optional[AnalysisResult] = None

    def analyze_file(self, path: Union[str, Path], target_date: date) -> AnalysisResult:
        return self.analyze_lines(load_lines(path), target_date)

    def analyze_lines(self, lines: Sequence[str], target_date: date) -> AnalysisResult:
        started_at = datetime.now()
        report = parse_lines(lines)
        matched = filter_by_date(report.records, target_date)
        logger.debug("Found %d play records for %s", len(matched), f"{target_date:%d/%m/%Y}")

        counts = client_distinct_counts(matched)
        finished_at = datetime.now()

        self.last_run_at = finished_at
        self.last_result = AnalysisResult(
            target_date=target_date,
            total_lines=report.total_lines,
            parsed_records=report.success_count,
            matched_records=len(matched),
            clients=[
                ClientStat(client_id=client_id, distinct_count=count)
                for client_id, count in sorted(counts.items())
            ],
            histogram=build_histogram(counts),
            failures=report.failures,
            started_at=started_at,
            finished_at=finished_at,
        )
        return self.last_result
