# tests/test_render.py

import jcal
from jcal.layout.render import (
    HIGHLIGHT_OFF,
    HIGHLIGHT_ON,
    center,
    fit_columns,
    highlight,
    month_lines,
    render_month,
    render_months,
    render_year,
    weekday_header,
)

J, G = jcal.JALALI, jcal.GREGORIAN


def test_nov_2025_ordinal_with_week_numbers():
    grid = jcal.build_month(G, 2025, 11, 0, week_numbers=True)
    assert month_lines(grid, ordinal=True, delimiter="|") == [
        "           November           ",
        "  |Sun|Mon|Tue|Wed|Thu|Fri|Sat",
        "43|   |   |   |   |   |   |305",
        "44|306|307|308|309|310|311|312",
        "45|313|314|315|316|317|318|319",
        "46|320|321|322|323|324|325|326",
        "47|327|328|329|330|331|332|333",
        "48|334|   |   |   |   |   |   ",
    ]


def test_nov_2025_plain():
    lines = month_lines(jcal.build_month(G, 2025, 11, 0))
    assert lines[0] == "      November      "
    assert lines[1] == "Su Mo Tu We Th Fr Sa"
    assert lines[2] == "                   1"
    assert lines[3] == " 2  3  4  5  6  7  8"
    assert lines[7] == "30                  "


def test_blocks_always_have_six_week_lines():
    lines = month_lines(jcal.build_month(G, 2015, 2, 0))
    assert len(lines) == 8
    assert lines[-1] == lines[-2] == " " * 20
    assert {len(line) for line in lines} == {20}


def test_jalali_saturday_header():
    lines = month_lines(jcal.build_month(J, 1403, 1, 6), year_in_header=True)
    assert lines[0].strip() == "Farvardin 1403"
    assert lines[1] == "Sa Su Mo Tu We Th Fr"
    # 1 Farvardin 1403 is a Wednesday: fifth column
    assert lines[2] == "             1  2  3"


def test_weekday_header_widths():
    assert weekday_header(1) == ["Mo", "Tu", "We", "Th", "Fr", "Sa", "Su"]
    assert weekday_header(0, ordinal=True)[0] == "Sun"


def test_highlighted_day():
    grid = jcal.build_month(G, 2025, 11, 0)
    out = render_month(grid, mark=jcal.Date(G, 2025, 11, 5))
    assert f"{HIGHLIGHT_ON} 5{HIGHLIGHT_OFF}" in out
    assert out.count(HIGHLIGHT_ON) == 1
    # a day of another month is not marked
    assert HIGHLIGHT_ON not in render_month(grid, mark=jcal.Date(G, 2025, 12, 5))


def test_months_side_by_side():
    grids = [jcal.build_month(G, 2025, m, 0) for m in (10, 11, 12)]
    lines = render_months(grids).splitlines()
    assert len(lines) == 8
    assert lines[0].split() == ["October", "November", "December"]
    assert all(len(line) == 3 * 20 + 2 * 3 for line in lines)


def test_months_across_years_carry_the_year():
    grids = [jcal.build_month(G, y, m, 0) for y, m in jcal.month_span(G, 2025, 12, 3, span=True)]
    out = render_months(grids)
    assert "December 2025" in out
    assert "January 2026" in out


def test_render_year():
    out = render_year(jcal.build_year(J, 1403, 6, week_numbers=True))
    lines = out.splitlines()
    assert lines[0].strip() == "1403"
    for name in ("Farvardin", "Ordibehesht", "Esfand"):
        assert name in out
    # title, blank, then 4 bands of 8 lines separated by blank lines
    assert len(lines) == 2 + 4 * 8 + 3


def test_center_puts_odd_space_right():
    assert center("ab", 5) == " ab  "
    assert center("abcdef", 4) == "abcd"


def test_nov_2025_vertical_ordinal():
    grid = jcal.build_month(G, 2025, 11, 0, week_numbers=True)
    assert render_month(grid, ordinal=True, vertical=True, delimiter="|").splitlines() == [
        "       November 2025       ",
        "   | 43| 44| 45| 46| 47| 48",
        "Sun|   |306|313|320|327|334",
        "Mon|   |307|314|321|328|   ",
        "Tue|   |308|315|322|329|   ",
        "Wed|   |309|316|323|330|   ",
        "Thu|   |310|317|324|331|   ",
        "Fri|   |311|318|325|332|   ",
        "Sat|305|312|319|326|333|   ",
    ]


def test_vertical_months_share_the_weekday_column():
    grids = [jcal.build_month(G, 2025, m, 0) for m in (10, 11, 12)]
    lines = render_months(grids, vertical=True).splitlines()
    assert len(lines) == 1 + 7
    assert lines[0].startswith("   ")
    assert lines[0].split() == ["October", "November", "December"]
    assert lines[1].startswith("Su ")
    assert lines[7].startswith("Sa ")
    # only one label column for the whole band
    assert lines[1].count("Su") == 1
    assert {len(line) for line in lines} == {3 + 3 * 17 + 2 * 3}


def test_vertical_single_month_cells():
    grid = jcal.build_month(G, 2025, 11, 0)
    lines = render_months([grid], vertical=True).splitlines()
    assert lines[1] == "Su    2  9 16 23 30"
    assert lines[7] == "Sa  1  8 15 22 29   "


def test_highlighted_week():
    grid = jcal.build_month(G, 2025, 11, 0, week_numbers=True)
    out = render_month(grid, mark_week=45)
    assert highlight("45") in out
    assert out.count(HIGHLIGHT_ON) == 1
    assert highlight("45") in render_month(grid, vertical=True, mark_week=45)


def test_fit_columns():
    grid = jcal.build_month(G, 2025, 11, 0)
    assert fit_columns(grid, 80) == 3
    assert fit_columns(grid, 50) == 2
    assert fit_columns(grid, 10) == 1
    # vertical blocks are 17 wide after a 3 wide label column
    assert fit_columns(grid, 80, vertical=True) == 4
    numbered = jcal.build_month(G, 2025, 11, 0, week_numbers=True)
    assert fit_columns(numbered, 80, ordinal=True) == 2


def test_render_year_vertical():
    out = render_year(jcal.build_year(G, 2025, 0), vertical=True, columns=4)
    lines = out.splitlines()
    assert lines[0].strip() == "2025"
    # title, blank, then 3 bands of 8 lines separated by blank lines
    assert len(lines) == 2 + 3 * 8 + 2
    assert lines[2].split() == ["January", "February", "March", "April"]
