# app/utils/word_stats.py

from dataclasses import dataclass, field
from datetime import date, timedelta
from types import MappingProxyType
from typing import Callable, Dict, Hashable, Iterable, List, Mapping, Optional


CATEGORY_LABELS: Mapping[str, str] = MappingProxyType({
    "family": "ครอบครัว",
    "animal": "สัตว์",
    "food": "อาหาร",
    "body": "ร่างกาย",
    "object": "สิ่งของ",
    "action": "การกระทำ",
    "vehicle": "ยานพาหนะ",
    "place": "สถานที่",
    "emotion": "ความรู้สึก",
    "other": "อื่นๆ",
})

NO_CATEGORY = "-"
TOP_CATEGORIES_LIMIT = 3


@dataclass(frozen=True)
class WordRecord:
    date: str  # "YYYY-MM-DD"
    category: Optional[str] = None


@dataclass(frozen=True)
class CategoryCount:
    category: str
    count: int


@dataclass(frozen=True)
class DateCount:
    date: str
    count: int


@dataclass(frozen=True)
class WordSummary:
    today: int = 0
    yesterday: int = 0
    this_week: int = 0
    last_week: int = 0
    total: int = 0
    top_category: str = NO_CATEGORY
    top_categories: List[CategoryCount] = field(default_factory=list)


def group_counts(
    records: Iterable[WordRecord],
    key: Callable[[WordRecord], Optional[Hashable]],
) -> Dict[Hashable, int]:
    """
    Counts records per key in one pass. Keys come back in first-seen order;
    records whose key is None or empty are skipped.
    """
    counts: Dict[Hashable, int] = {}
    for record in records:
        k = key(record)
        if k is None or k == "":
            continue
        counts[k] = counts.get(k, 0) + 1
    return counts


def week_start(today: date) -> date:
    """Most recent Sunday at or before `today`."""
    # date.weekday() is Monday=0 ... Sunday=6; shift so Sunday=0
    days_since_sunday = (today.weekday() + 1) % 7
    return today - timedelta(days=days_since_sunday)


def count_by_date(records: Iterable[WordRecord]) -> List[DateCount]:
    counts = group_counts(records, key=lambda r: r.date)
    return [DateCount(date=d, count=n) for d, n in counts.items()]


def rank_categories(
    counts: Mapping[str, int],
    labels: Mapping[str, str],
    limit: int = TOP_CATEGORIES_LIMIT,
) -> List[CategoryCount]:
    # sorted() is stable, so ties keep first-encountered order
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [
        CategoryCount(category=labels.get(tag, tag), count=n)
        for tag, n in ranked[:limit]
    ]


def summarize_words(
    records: Iterable[WordRecord],
    labels: Mapping[str, str],
    today: Optional[date] = None,
) -> WordSummary:
    """
    Builds the stats summary for one baby's words:
    - today / yesterday: exact date matches
    - this_week: dates on or after the most recent Sunday
    - last_week: the seven days before that Sunday
    - top_category / top_categories: most frequent tags, labelled

    Dates are compared as ISO strings, so they must be zero-padded YYYY-MM-DD.
    """
    today = today or date.today()
    start = week_start(today)

    today_str = today.isoformat()
    yesterday_str = (today - timedelta(days=1)).isoformat()
    week_start_str = start.isoformat()
    last_week_start_str = (start - timedelta(days=7)).isoformat()
    last_week_end_str = (start - timedelta(days=1)).isoformat()

    counters = {"today": 0, "yesterday": 0, "this_week": 0, "last_week": 0, "total": 0}
    categorized: List[WordRecord] = []

    for record in records:
        counters["total"] += 1
        if record.date == today_str:
            counters["today"] += 1
        if record.date == yesterday_str:
            counters["yesterday"] += 1
        if record.date >= week_start_str:
            counters["this_week"] += 1
        if last_week_start_str <= record.date <= last_week_end_str:
            counters["last_week"] += 1
        if record.category:
            categorized.append(record)

    category_counts = group_counts(categorized, key=lambda r: r.category)

    top_categories = rank_categories(category_counts, labels)
    if top_categories:
        best = top_categories[0]
        top_category = f"{best.category} ({best.count})"
    else:
        top_category = NO_CATEGORY

    return WordSummary(
        top_category=top_category,
        top_categories=top_categories,
        **counters,
    )
