"""
jcal.layout.render
------------------
Plain-text rendering of month and year grids, `cal` style.

Each month is a fixed block: a centered title line, a weekday line and always
six week lines, so months can be printed side by side. Cells are two
characters wide (three in ordinal mode, which shows the day of the year).
An optional week-number column sits to the left of the days.

In vertical mode the block is transposed: each week is a column and each
weekday a line, with the week numbers (if any) on the line under the title.
Several vertical months share one weekday label column on the left.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from jcal.core.time import DAYS_IN_WEEK
from jcal.core.types import Cell, Date, MonthGrid, YearGrid
from jcal.names import month_name, weekday_abbr

WEEKS_PER_BLOCK = 6
WEEKNUM_EMPTY = "  "
DEFAULT_DELIMITER = " "
DEFAULT_COLUMN_DELIMITER = DEFAULT_DELIMITER * 3
DEFAULT_COLUMNS = 3

# ANSI reverse video on/off
HIGHLIGHT_ON = "\x1b[7m"
HIGHLIGHT_OFF = "\x1b[27m"


def highlight(s: str) -> str:
    return f"{HIGHLIGHT_ON}{s}{HIGHLIGHT_OFF}"


def cell_width(ordinal: bool) -> int:
    return 3 if ordinal else 2


def center(s: str, width: int) -> str:
    """Center in `width`; the odd space goes right. Longer text is cut."""
    if len(s) >= width:
        return s[:width]
    pad = width - len(s)
    left = pad // 2
    return " " * left + s + " " * (pad - left)


def year_label(year: int) -> str:
    return f"{year:04d}"


def format_cell(cell: Cell, *, ordinal: bool = False, mark: Optional[Date] = None) -> str:
    width = cell_width(ordinal)
    if cell is None:
        return " " * width
    text = str(cell.day_of_year if ordinal else cell.day).rjust(width)
    return highlight(text) if cell == mark else text


def format_weeknum(n: Optional[int], width: int, mark_week: Optional[int] = None) -> str:
    if n is None:
        return " " * width
    text = str(n).rjust(width)
    return highlight(text) if n == mark_week else text


def weekday_header(week_start: int, *, ordinal: bool = False) -> List[str]:
    width = cell_width(ordinal)
    return [weekday_abbr((week_start + i) % DAYS_IN_WEEK, width).rjust(width) for i in range(DAYS_IN_WEEK)]


def block_width(
    grid: MonthGrid,
    *,
    ordinal: bool = False,
    delimiter: str = DEFAULT_DELIMITER,
    vertical: bool = False,
    weekday_labels: bool = True,
) -> int:
    numbered = grid.week_numbers is not None
    if vertical:
        cols = WEEKS_PER_BLOCK + (1 if weekday_labels else 0)
        return cols * cell_width(ordinal) + (cols - 1) * len(delimiter)
    cols = DAYS_IN_WEEK + (1 if numbered else 0)
    width = DAYS_IN_WEEK * cell_width(ordinal)
    if numbered:
        width += len(WEEKNUM_EMPTY)
    return width + (cols - 1) * len(delimiter)


def _row(grid: MonthGrid, i: int):
    if i < len(grid.weeks):
        return grid.weeks[i]
    return (None,) * DAYS_IN_WEEK


def _weeknum(grid: MonthGrid, i: int) -> Optional[int]:
    if grid.week_numbers is None or i >= len(grid.weeks):
        return None
    return grid.week_numbers[i]


def _title(grid: MonthGrid, year_in_header: bool) -> str:
    title = month_name(grid.calendar, grid.month)
    if year_in_header:
        title = f"{title} {year_label(grid.year)}"
    return title


def month_lines(
    grid: MonthGrid,
    *,
    ordinal: bool = False,
    delimiter: str = DEFAULT_DELIMITER,
    year_in_header: bool = False,
    mark: Optional[Date] = None,
    mark_week: Optional[int] = None,
) -> List[str]:
    """Title, weekday line and six week lines, all of the same width."""
    width = block_width(grid, ordinal=ordinal, delimiter=delimiter)
    numbered = grid.week_numbers is not None

    head = weekday_header(grid.week_start, ordinal=ordinal)
    if numbered:
        head.insert(0, WEEKNUM_EMPTY)
    lines = [center(_title(grid, year_in_header), width), delimiter.join(head)]

    for i in range(WEEKS_PER_BLOCK):
        cells = [format_cell(c, ordinal=ordinal, mark=mark) for c in _row(grid, i)]
        if numbered:
            cells.insert(0, format_weeknum(_weeknum(grid, i), len(WEEKNUM_EMPTY), mark_week))
        lines.append(delimiter.join(cells))
    return lines


def vertical_month_lines(
    grid: MonthGrid,
    *,
    ordinal: bool = False,
    delimiter: str = DEFAULT_DELIMITER,
    year_in_header: bool = False,
    weekday_labels: bool = True,
    mark: Optional[Date] = None,
    mark_week: Optional[int] = None,
) -> List[str]:
    """
    Transposed block: title, a week-number line when the grid is numbered,
    then one line per weekday with one cell per week.
    """
    cw = cell_width(ordinal)
    width = block_width(grid, ordinal=ordinal, delimiter=delimiter, vertical=True, weekday_labels=weekday_labels)
    labels = weekday_header(grid.week_start, ordinal=ordinal)

    lines = [center(_title(grid, year_in_header), width)]
    if grid.week_numbers is not None:
        cells = [format_weeknum(_weeknum(grid, w), cw, mark_week) for w in range(WEEKS_PER_BLOCK)]
        if weekday_labels:
            cells.insert(0, " " * cw)
        lines.append(delimiter.join(cells))

    for d in range(DAYS_IN_WEEK):
        cells = [format_cell(_row(grid, w)[d], ordinal=ordinal, mark=mark) for w in range(WEEKS_PER_BLOCK)]
        if weekday_labels:
            cells.insert(0, labels[d])
        lines.append(delimiter.join(cells))
    return lines


def weekday_column(grid: MonthGrid, *, ordinal: bool = False, delimiter: str = DEFAULT_DELIMITER) -> List[str]:
    """Shared label prefix for a band of vertical blocks, delimiter included."""
    blank = " " * cell_width(ordinal)
    prefix = [blank]
    if grid.week_numbers is not None:
        prefix.append(blank)
    prefix.extend(weekday_header(grid.week_start, ordinal=ordinal))
    return [p + delimiter for p in prefix]


def side_by_side(blocks: Sequence[List[str]], column_delimiter: str = DEFAULT_COLUMN_DELIMITER) -> List[str]:
    return [column_delimiter.join(parts) for parts in zip(*blocks)]


def fit_columns(
    grid: MonthGrid,
    width: int,
    *,
    ordinal: bool = False,
    vertical: bool = False,
    delimiter: str = DEFAULT_DELIMITER,
    column_delimiter: str = DEFAULT_COLUMN_DELIMITER,
) -> int:
    """How many month blocks fit side by side in `width` characters (at least 1)."""
    block = block_width(grid, ordinal=ordinal, delimiter=delimiter, vertical=vertical, weekday_labels=not vertical)
    if vertical:
        width -= cell_width(ordinal) + len(delimiter)
    if width < block:
        return 1
    return 1 + (width - block) // (block + len(column_delimiter))


def _chunks(items: Sequence, size: int) -> Iterable[Sequence]:
    size = max(1, size)
    for i in range(0, len(items), size):
        yield items[i : i + size]


def render_months(
    grids: Sequence[MonthGrid],
    *,
    columns: int = DEFAULT_COLUMNS,
    ordinal: bool = False,
    vertical: bool = False,
    delimiter: str = DEFAULT_DELIMITER,
    column_delimiter: str = DEFAULT_COLUMN_DELIMITER,
    mark: Optional[Date] = None,
    mark_week: Optional[int] = None,
) -> str:
    """
    Print several months, `columns` per band. Titles carry the year when
    the months do not all share one year.
    """
    if not grids:
        return ""
    year_in_header = len({g.year for g in grids}) > 1
    bands = []
    for band in _chunks(grids, columns):
        if vertical:
            blocks = [
                vertical_month_lines(
                    g,
                    ordinal=ordinal,
                    delimiter=delimiter,
                    year_in_header=year_in_header,
                    weekday_labels=False,
                    mark=mark,
                    mark_week=mark_week,
                )
                for g in band
            ]
            prefix = weekday_column(band[0], ordinal=ordinal, delimiter=delimiter)
            lines = [p + line for p, line in zip(prefix, side_by_side(blocks, column_delimiter))]
        else:
            blocks = [
                month_lines(
                    g,
                    ordinal=ordinal,
                    delimiter=delimiter,
                    year_in_header=year_in_header,
                    mark=mark,
                    mark_week=mark_week,
                )
                for g in band
            ]
            lines = side_by_side(blocks, column_delimiter)
        bands.append("\n".join(lines))
    return "\n\n".join(bands)


def render_month(
    grid: MonthGrid,
    *,
    ordinal: bool = False,
    vertical: bool = False,
    delimiter: str = DEFAULT_DELIMITER,
    mark: Optional[Date] = None,
    mark_week: Optional[int] = None,
) -> str:
    """A single month with the year in its title."""
    if vertical:
        lines = vertical_month_lines(
            grid, ordinal=ordinal, delimiter=delimiter, year_in_header=True, mark=mark, mark_week=mark_week
        )
    else:
        lines = month_lines(grid, ordinal=ordinal, delimiter=delimiter, year_in_header=True, mark=mark, mark_week=mark_week)
    return "\n".join(lines)


def render_year(
    grid: YearGrid,
    *,
    columns: int = DEFAULT_COLUMNS,
    ordinal: bool = False,
    vertical: bool = False,
    delimiter: str = DEFAULT_DELIMITER,
    column_delimiter: str = DEFAULT_COLUMN_DELIMITER,
    mark: Optional[Date] = None,
    mark_week: Optional[int] = None,
) -> str:
    """Year number centered over the bands of months."""
    columns = max(1, min(columns, len(grid.months)))
    first = grid.months[0]
    band_width = columns * block_width(first, ordinal=ordinal, delimiter=delimiter, vertical=vertical, weekday_labels=not vertical)
    band_width += (columns - 1) * len(column_delimiter)
    if vertical:
        band_width += cell_width(ordinal) + len(delimiter)
    body = render_months(
        grid.months,
        columns=columns,
        ordinal=ordinal,
        vertical=vertical,
        delimiter=delimiter,
        column_delimiter=column_delimiter,
        mark=mark,
        mark_week=mark_week,
    )
    return center(year_label(grid.year), band_width).rstrip() + "\n\n" + body
