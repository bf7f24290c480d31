"""Console and CSV renderings of an analysis result."""
import csv
from datetime import date, datetime
from pathlib import Path
from typing import List, Optional, Union

from .config import settings
from .errors import IOFailure
from .models import AnalysisResult

HEADER = ("DISTINCT_PLAY_COUNT", "CLIENT_COUNT")
NO_DATA = "No data found for the specified date"


def describe_date(value: date) -> str:
    """e.g. ``10/08/2016 (Wednesday, August 10, 2016)``."""
    return f"{value:%d/%m/%Y} ({value:%A, %B %d, %Y})"


def render_console(result: AnalysisResult) -> str:
    day = f"{result.target_date:%d/%m/%Y}"
    lines: List[str] = [
        f"Target date: {describe_date(result.target_date)}",
        f"Found {result.matched_records} play records for {day}",
        "",
        "Client Statistics:",
    ]
    if result.clients:
        for stat in result.clients:
            lines.append(f"Client {stat.client_id}: {stat.distinct_count} distinct songs")
    else:
        lines.append(f"No clients found with play records on {day}")

    lines.append("")
    lines.append(f"=== RESULTS FOR {describe_date(result.target_date)} ===")
    if result.histogram:
        lines.append("\t".join(HEADER))
        lines.append("-" * 35)
        for entry in result.histogram:
            lines.append(f"{entry.distinct_count}\t\t\t{entry.client_count}")
    else:
        lines.append(f"{NO_DATA}.")
    return "\n".join(lines)


def results_path(input_path: Union[str, Path], target_date: date) -> Path:
    """Results file that sits next to the input, named after it and the date."""
    input_path = Path(input_path)
    name = f"{input_path.stem}{settings.results_suffix}{target_date:%Y%m%d}.csv"
    return input_path.with_name(name)


def write_results(
    result: AnalysisResult,
    path: Union[str, Path],
    generated_at: Optional[datetime] = None,
) -> Path:
    path = Path(path)
    generated_at = generated_at or datetime.now()
    try:
        with path.open("w", encoding=settings.output_encoding, newline="") as f:
            f.write(
                "# Music Streaming Analysis Results for "
                f"{describe_date(result.target_date)}\n"
            )
            f.write(f"# Generated on: {generated_at:%Y-%m-%d %H:%M:%S}\n")
            writer = csv.writer(f, lineterminator="\n")
            writer.writerow(HEADER)
            for entry in result.histogram:
                writer.writerow((entry.distinct_count, entry.client_count))
            if not result.histogram:
                f.write(f"# {NO_DATA}\n")
    except OSError as exc:
        path.unlink(missing_ok=True)
        raise IOFailure(f"Could not write results to '{path}': {exc}") from exc
    return path
