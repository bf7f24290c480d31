"""Date filtering and distinct-play histogram aggregation."""
from collections import Counter, defaultdict
from datetime import date
from typing import Dict, Iterable, List, Set

from .models import HistogramEntry, PlayRecord


def filter_by_date(records: Iterable[PlayRecord], target_date: date) -> List[PlayRecord]:
    return [record for record in records if record.played_at.date() == target_date]


def client_distinct_counts(records: Iterable[PlayRecord]) -> Dict[str, int]:
    """Map each client to the number of distinct songs it played."""
    songs: Dict[str, Set[str]] = defaultdict(set)
    for record in records:
        songs[record.client_id].add(record.content_id)
    return {client_id: len(content_ids) for client_id, content_ids in songs.items()}


def build_histogram(counts: Dict[str, int]) -> List[HistogramEntry]:
    clients_per_count = Counter(counts.values())
    return [
        HistogramEntry(distinct_count=distinct_count, client_count=client_count)
        for distinct_count, client_count in sorted(clients_per_count.items())
    ]


def aggregate(records: Iterable[PlayRecord], target_date: date) -> List[HistogramEntry]:
    """Histogram of distinct songs per client on `target_date`, ascending by count."""
    return build_histogram(client_distinct_counts(filter_by_date(records, target_date)))
