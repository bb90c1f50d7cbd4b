"""Tests for monthly and yearly aggregation."""

from datetime import date

from entrybook.domain.analytics import (
    aggregate_by_month,
    aggregate_by_year,
    default_year,
    get_available_years,
)


def test_by_month_empty_has_twelve_zero_buckets():
    """Test that an empty list yields twelve zero-valued months."""
    monthly = aggregate_by_month([], 2024)

    assert len(monthly) == 12
    assert [m.month for m in monthly][:3] == ["Jan", "Feb", "Mar"]
    assert [m.month_index for m in monthly] == list(range(12))
    assert all(m.total_amount == 0 and m.count == 0 for m in monthly)


def test_by_month_sums_requested_year_only(make_entry):
    """Test month totals skip other years and bad dates."""
    entries = [
        make_entry(manual_date="2024-01-05", amount_rs=100),
        make_entry(manual_date="2024-01-20", amount_rs=50),
        make_entry(manual_date="2024-12-31", amount_rs=7),
        make_entry(manual_date="2023-01-05", amount_rs=1000),
        make_entry(manual_date="2024-02-30", amount_rs=1000),
    ]

    monthly = aggregate_by_month(entries, 2024)

    assert len(monthly) == 12
    assert (monthly[0].total_amount, monthly[0].count) == (150, 2)
    assert (monthly[1].total_amount, monthly[1].count) == (0, 0)
    assert (monthly[11].month, monthly[11].total_amount, monthly[11].count) == ("Dec", 7, 1)


def test_by_year_sorted_ascending(make_entry):
    """Test year totals are grouped and sorted oldest first."""
    entries = [
        make_entry(manual_date="2024-03-01", amount_rs=10),
        make_entry(manual_date="2022-03-01", amount_rs=20),
        make_entry(manual_date="2024-05-01", amount_rs=30),
        make_entry(manual_date="garbage", amount_rs=99),
    ]

    yearly = aggregate_by_year(entries)

    assert [(y.year, y.total_amount, y.count) for y in yearly] == [(2022, 20, 1), (2024, 40, 2)]


def test_available_years_descending(make_entry):
    """Test distinct years come back newest first."""
    entries = [
        make_entry(manual_date="2022-01-01"),
        make_entry(manual_date="2024-01-01"),
        make_entry(manual_date="2024-06-01"),
        make_entry(manual_date=""),
    ]

    assert get_available_years(entries) == [2024, 2022]


def test_default_year(make_entry):
    """Test the default year is the newest with data, else the current year."""
    assert default_year([make_entry(manual_date="2021-01-01")]) == 2021
    assert default_year([], today=date(2030, 5, 5)) == 2030
