# tests/test_diagnostics.py

import pytest

import jcal
from jcal.diagnostics import leap_years, new_years_table, round_trip


def test_nowruz_dates():
    assert new_years_table.nowruz(1403) == jcal.Date(jcal.GREGORIAN, 2024, 3, 20)
    rows = new_years_table.nowruz_rows(1402, 1404)
    assert [(y, d.isoformat(), leap) for y, d, leap in rows] == [
        (1402, "2023-03-21", False),
        (1403, "2024-03-20", True),
        (1404, "2025-03-21", False),
    ]


def test_nowruz_stays_near_the_equinox():
    """On the arithmetic cycle 1 Farvardin stays within March 20..22 for centuries."""
    for y in range(1300, 1500):
        d = new_years_table.nowruz(y)
        assert d.month == 3 and 20 <= d.day <= 22


def test_leap_year_listing():
    assert leap_years.leap_years(jcal.JALALI, 1399, 1408) == [1399, 1403, 1408]
    assert leap_years.leap_years(jcal.GREGORIAN, 1896, 1912) == [1896, 1904, 1908, 1912]


def test_cycle_rows():
    rows = leap_years.cycle_rows(1387, 1419)
    # 1387 is the first year of a cycle
    assert rows == [" 1387  L...L...L...L...L....L...L...L..."]


def test_round_trip_finds_no_failures():
    assert round_trip.roundtrip_test(jcal.JALALI, 500, 1948321, 5373484, 7, max_failures=1) == 0
    assert round_trip.roundtrip_test(jcal.GREGORIAN, 500, 1948321, 5373484, 7, max_failures=1) == 0


def test_nowruz_scatter_writes_png(tmp_path, capsys):
    pytest.importorskip("numpy")
    pytest.importorskip("matplotlib")
    from jcal.diagnostics import nowruz_scatter

    outbase = str(tmp_path / "scatter")
    rc = nowruz_scatter.main(["--start-year", "1390", "--end-year", "1420", "--show-trend", "--outbase", outbase])
    assert rc == 0
    assert (tmp_path / "scatter.png").exists()
    assert "Saved:" in capsys.readouterr().out


def test_rolling_median():
    np = pytest.importorskip("numpy")
    from jcal.diagnostics.nowruz_scatter import rolling_median

    y = np.array([1.0, 1.0, 9.0, 1.0, 1.0])
    assert list(rolling_median(np, y, win=3)) == [1.0, 1.0, 1.0, 1.0, 1.0]
