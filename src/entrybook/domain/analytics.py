"""Monthly and yearly aggregation of entries."""

from datetime import date
from typing import Iterable, Optional

from entrybook.domain.entities import Entry, MonthlyData, YearlyData
from entrybook.utils.date_parser import parse_manual_date

MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def aggregate_by_month(entries: Iterable[Entry], year: int) -> list[MonthlyData]:
    """Sum amounts and counts per month of one year.

    Always returns twelve buckets, January first, including empty months.
    Entries with unparseable dates or other years are skipped.
    """
    totals = [0] * 12
    counts = [0] * 12
    for entry in entries:
        entry_date = parse_manual_date(entry.manual_date)
        if entry_date is None or entry_date.year != year:
            continue
        totals[entry_date.month - 1] += int(entry.amount_rs)
        counts[entry_date.month - 1] += 1

    return [
        MonthlyData(
            month=MONTH_NAMES[index],
            month_index=index,
            total_amount=totals[index],
            count=counts[index],
        )
        for index in range(12)
    ]


def aggregate_by_year(entries: Iterable[Entry]) -> list[YearlyData]:
    """Sum amounts and counts per year, oldest year first."""
    yearly: dict[int, list[int]] = {}
    for entry in entries:
        entry_date = parse_manual_date(entry.manual_date)
        if entry_date is None:
            continue
        bucket = yearly.setdefault(entry_date.year, [0, 0])
        bucket[0] += int(entry.amount_rs)
        bucket[1] += 1

    return [
        YearlyData(year=year, total_amount=total, count=count)
        for year, (total, count) in sorted(yearly.items())
    ]


def get_available_years(entries: Iterable[Entry]) -> list[int]:
    """Return distinct years with parseable dates, newest first."""
    years = set()
    for entry in entries:
        entry_date = parse_manual_date(entry.manual_date)
        if entry_date is not None:
            years.add(entry_date.year)
    return sorted(years, reverse=True)


def default_year(entries: Iterable[Entry], today: Optional[date] = None) -> int:
    """Pick the year a monthly view starts on: the newest year with data."""
    years = get_available_years(entries)
    if years:
        return years[0]
    return (today or date.today()).year
