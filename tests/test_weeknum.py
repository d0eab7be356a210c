# tests/test_weeknum.py

import random
from datetime import date

import pytest

import jcal
from jcal.core.types import YearGrid
from jcal.layout.weeknum import number_weeks, week_start_date, year_weeks

J, G = jcal.JALALI, jcal.GREGORIAN


def test_nov_2025_week_numbers():
    grid = jcal.build_month(G, 2025, 11, week_start=0, week_numbers=True)
    assert grid.week_numbers == (43, 44, 45, 46, 47, 48)


def test_month_and_year_context_agree():
    random.seed(42)
    for _ in range(40):
        cal = random.choice([J, G])
        y = random.randint(1, 9999)
        ws = random.randint(0, 6)
        year = jcal.build_year(cal, y, ws, week_numbers=True)
        assert year.has_week_numbers
        for m, grid in enumerate(year.months, start=1):
            single = jcal.build_month(cal, y, m, ws, week_numbers=True)
            assert single.week_numbers == grid.week_numbers


def test_year_weeks_are_numbered_from_first_full_week():
    for cal, y, ws in ((J, 1403, 6), (G, 2025, 0), (G, 2023, 0), (J, 1402, 1)):
        weeks, _ = year_weeks(jcal.build_year(cal, y, ws))
        numbers = number_weeks(weeks)
        first_full = next(i for i, row in enumerate(weeks) if None not in row)
        assert all(n is None for n in numbers[:first_full])
        assert list(numbers[first_full:]) == list(range(1, len(weeks) - first_full + 1))
        # only the first and last week of the year may be partial
        assert all(None not in row for row in weeks[1:-1])


def test_every_day_matches_its_row_number():
    year = jcal.build_year(J, 1403, 6, week_numbers=True)
    for grid in year.months:
        for row, n in zip(grid.weeks, grid.week_numbers):
            for d in row:
                if d is not None:
                    assert jcal.week_number(d, 6) == n


def test_week_number_direct():
    # 2025-01-01 is a Wednesday; the first full Sunday week starts 2025-01-05
    assert jcal.week_number(jcal.Date(G, 2025, 1, 1), 0) is None
    assert jcal.week_number(jcal.Date(G, 2025, 1, 4), 0) is None
    assert jcal.week_number(jcal.Date(G, 2025, 1, 5), 0) == 1
    assert jcal.week_number(jcal.Date(G, 2025, 11, 1), 0) == 43
    assert jcal.week_number(jcal.Date(G, 2025, 11, 30), 0) == 48
    # 1403-01-01 is a Wednesday; with Saturday weeks, week 1 starts on the 4th
    assert jcal.week_number(jcal.Date(J, 1403, 1, 3), 6) is None
    assert jcal.week_number(jcal.Date(J, 1403, 1, 4), 6) == 1


def test_year_starting_on_week_start_has_no_leading_gap():
    # 2023-01-01 is a Sunday
    assert jcal.week_number(jcal.Date(G, 2023, 1, 1), 0) == 1
    grid = jcal.build_month(G, 2023, 1, 0, week_numbers=True)
    assert grid.week_numbers[0] == 1


def test_week_number_rejects_bad_week_start():
    with pytest.raises(jcal.InvalidWeekStartError):
        jcal.week_number(jcal.Date(G, 2025, 1, 1), 9)


def test_mixed_week_starts_cannot_be_merged():
    months = tuple(jcal.build_month(J, 1403, m, 0 if m == 1 else 3) for m in range(1, 13))
    with pytest.raises(ValueError):
        year_weeks(YearGrid(J, 1403, 0, months))


def test_week_start_date():
    jan1 = jcal.Date(G, 2025, 1, 1)
    assert week_start_date(jan1, 1, 0) == jcal.Date(G, 2025, 1, 5)
    assert week_start_date(jan1, 11, 0) == jcal.Date(G, 2025, 3, 16)
    # past the end of the year: the last day
    assert week_start_date(jan1, 54, 0) == jcal.Date(G, 2025, 12, 31)
    with pytest.raises(ValueError):
        week_start_date(jan1, 0, 0)


def test_week_start_date_numbers_back():
    random.seed(42)
    for _ in range(100):
        cal = random.choice([J, G])
        ws = random.randint(0, 6)
        d = jcal.Date(cal, random.randint(2, 9998), 1, 1)
        for n in (1, 10, 30, 52):
            assert jcal.week_number(week_start_date(d, n, ws), ws) == n


def test_iso_week_matches_python_isocalendar():
    random.seed(42)
    for _ in range(2000):
        g = jcal.from_epoch_day(G, random.randint(1721426 + 7, 5373484 - 7))
        iso = date(g.year, g.month, g.day).isocalendar()
        assert jcal.iso_week(g) == (iso[0], iso[1])


def test_iso_week_jalali():
    # Wednesday 31 Ordibehesht 1404; Farvardin 1 1404 is a Friday
    assert jcal.iso_week(jcal.Date(J, 1404, 2, 31)) == (1404, 9)
    # Friday 1 Farvardin belongs to the last ISO week of 1403
    assert jcal.iso_week(jcal.Date(J, 1404, 1, 1))[0] == 1403


def test_iso_week_start_date():
    jan1 = jcal.Date(G, 2025, 1, 1)
    # ISO week 1 of 2025 starts on Monday 2024-12-30: kept inside 2025
    assert week_start_date(jan1, 1, 1, iso=True) == jan1
    assert week_start_date(jan1, 2, 1, iso=True) == jcal.Date(G, 2025, 1, 6)


def test_iso_month_grids():
    assert jcal.build_month(G, 2025, 1, 1, iso_weeks=True).week_numbers == (1, 2, 3, 4, 5)
    assert jcal.build_month(G, 2024, 12, 1, iso_weeks=True).week_numbers == (48, 49, 50, 51, 52, 1)
    year = jcal.build_year(G, 2024, 1, iso_weeks=True)
    assert year.has_week_numbers
    with pytest.raises(jcal.InvalidWeekStartError):
        jcal.build_month(G, 2025, 1, 0, iso_weeks=True)
