from datetime import date, datetime

from playcount.aggregate import aggregate, build_histogram, client_distinct_counts, filter_by_date
from playcount.models import PlayRecord

TARGET = date(2016, 8, 10)


def play(content_id, client_id, played_at, play_id="p"):
    return PlayRecord(
        play_id=play_id, content_id=content_id, client_id=client_id, played_at=played_at
    )


def as_pairs(histogram):
    return [(entry.distinct_count, entry.client_count) for entry in histogram]


def test_documented_example():
    day = datetime(2016, 8, 10, 12, 0)
    records = [
        play("9857", "1", day),
        play("3022", "1", day),
        play("9857", "1", day),
        play("217", "2", day),
        play("544", "3", day),
    ]
    assert as_pairs(aggregate(records, TARGET)) == [(1, 2), (2, 1)]


def test_filter_is_calendar_day():
    late = play("1", "a", datetime(2016, 8, 10, 23, 59, 59))
    next_day = play("1", "b", datetime(2016, 8, 11, 0, 0, 1))
    assert filter_by_date([late, next_day], TARGET) == [late]


def test_repeated_plays_count_once():
    day = datetime(2016, 8, 10, 8, 0)
    records = [play("9857", "1", day)] * 3 + [play("3022", "1", day)]
    assert client_distinct_counts(records) == {"1": 2}


def test_no_matching_records_gives_empty_histogram():
    records = [play("1", "a", datetime(2016, 8, 9, 10, 0))]
    assert aggregate(records, TARGET) == []
    assert build_histogram({}) == []


def test_histogram_totals_and_ordering():
    records = []
    for client in range(40):
        for song in range(client % 7 + 1):
            records.append(play(str(song), str(client), datetime(2016, 8, 10, song, 0)))
            records.append(play(str(song), str(client), datetime(2016, 8, 10, song, 30)))
        records.append(play("x", f"other-{client}", datetime(2016, 8, 11, 1, 0)))

    histogram = aggregate(records, TARGET)

    counts = [entry.distinct_count for entry in histogram]
    assert counts == sorted(set(counts))
    assert sum(entry.client_count for entry in histogram) == 40
    assert as_pairs(histogram)[0] == (1, 6)
