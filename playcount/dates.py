"""Date and timestamp parsing for the play log.

Each parser walks an ordered list of exact formats and returns the first
match, so ambiguous inputs such as ``08/10/2016`` resolve to whichever
format comes first (``dd/MM/yyyy`` here: 8 October 2016). When no exact
format fits, the text is handed to ``dateutil`` using month-first
conventions before giving up.
"""
import re
from datetime import date, datetime
from typing import Optional, Sequence, Tuple

from dateutil import parser as dateparser

from .errors import InvalidDateFormat

DateFormat = Tuple[str, str]

TARGET_DATE_FORMATS: Sequence[DateFormat] = (
    ("dd/MM/yyyy", "%d/%m/%Y"),
    ("MM/dd/yyyy", "%m/%d/%Y"),
    ("yyyy-MM-dd", "%Y-%m-%d"),
    ("dd-MM-yyyy", "%d-%m-%Y"),
    ("MM-dd-yyyy", "%m-%d-%Y"),
    ("yyyy/MM/dd", "%Y/%m/%d"),
)

TIMESTAMP_FORMATS: Sequence[DateFormat] = (
    ("dd/MM/yyyy HH:mm:ss", "%d/%m/%Y %H:%M:%S"),
    ("dd/MM/yyyy HH:mm", "%d/%m/%Y %H:%M"),
    ("dd/MM/yyyy", "%d/%m/%Y"),
    ("MM/dd/yyyy HH:mm:ss", "%m/%d/%Y %H:%M:%S"),
    ("MM/dd/yyyy HH:mm", "%m/%d/%Y %H:%M"),
    ("MM/dd/yyyy", "%m/%d/%Y"),
    ("yyyy-MM-dd HH:mm:ss", "%Y-%m-%d %H:%M:%S"),
    ("yyyy-MM-dd HH:mm", "%Y-%m-%d %H:%M"),
    ("yyyy-MM-dd", "%Y-%m-%d"),
)

SUPPORTED_TARGET_FORMATS = ", ".join(label for label, _ in TARGET_DATE_FORMATS)

_FIELD_WIDTHS = {"%d": r"\d{2}", "%m": r"\d{2}", "%Y": r"\d{4}",
                 "%H": r"\d{2}", "%M": r"\d{2}", "%S": r"\d{2}"}


def _shape(fmt: str) -> re.Pattern:
    # strptime accepts "8/1/2016" for "%d/%m/%Y"; exact formats need fixed widths.
    pattern = re.escape(fmt)
    for directive, width in _FIELD_WIDTHS.items():
        pattern = pattern.replace(re.escape(directive), width)
    return re.compile(pattern)


_SHAPES = {fmt: _shape(fmt) for _, fmt in (*TARGET_DATE_FORMATS, *TIMESTAMP_FORMATS)}


def _parse_exact(text: str, formats: Sequence[DateFormat]) -> Optional[datetime]:
    for _, fmt in formats:
        if not _SHAPES[fmt].fullmatch(text):
            continue
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


# Defaults fall on different weekdays so a bare weekday name moves at least one.
_DEFAULT_A = datetime(2000, 1, 1)
_DEFAULT_B = datetime(2004, 2, 2)


def _parse_general(text: str) -> datetime:
    """Lenient parse that still insists on a full date, or a bare time of day."""
    try:
        first = dateparser.parse(text, default=_DEFAULT_A, dayfirst=False, yearfirst=False)
        second = dateparser.parse(text, default=_DEFAULT_B, dayfirst=False, yearfirst=False)
    except (ValueError, OverflowError) as exc:
        raise InvalidDateFormat(text) from exc

    first = first.replace(tzinfo=None)
    if first.date() == second.date():
        return first
    if first.date() == _DEFAULT_A.date() and second.date() == _DEFAULT_B.date():
        # Time of day only: it refers to today.
        return datetime.combine(date.today(), first.time())
    raise InvalidDateFormat(text)


def parse_target_date(text: str) -> date:
    """Parse the date the histogram is built for."""
    parsed = _parse_exact(text, TARGET_DATE_FORMATS)
    if parsed is None:
        parsed = _parse_general(text)
    return parsed.date()


def parse_timestamp(text: str) -> datetime:
    """Parse a PLAY_TS column value into a naive datetime."""
    parsed = _parse_exact(text, TIMESTAMP_FORMATS)
    if parsed is None:
        parsed = _parse_general(text)
    return parsed
