# tests/test_cli.py

import io

import pytest

from jcal.cli import main
from jcal.layout.render import HIGHLIGHT_OFF, HIGHLIGHT_ON


def test_convert_jalali_to_gregorian(capsys):
    assert main(["convert", "1403-01-01"]) == 0
    assert capsys.readouterr().out.strip() == "2024-03-20 Wednesday"


def test_bare_date_shorthand(capsys):
    assert main(["1403/12/30"]) == 0
    assert capsys.readouterr().out.strip() == "2025-03-20 Thursday"


def test_convert_gregorian_to_jalali(capsys):
    assert main(["convert", "2024-03-20", "--from", "gregorian"]) == 0
    assert capsys.readouterr().out.strip() == "1403-01-01 Wednesday"


def test_convert_rejects_invalid_date(capsys):
    with pytest.raises(SystemExit) as e:
        main(["convert", "1402-12-30"])
    assert e.value.code == 2
    assert "outside" in capsys.readouterr().err


def test_convert_rejects_unknown_calendar():
    with pytest.raises(SystemExit) as e:
        main(["convert", "2024-03-20", "--from", "julian"])
    assert e.value.code == 2


def test_cal_month(capsys):
    assert main(["cal", "11", "2025", "--color", "never"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].strip() == "November 2025"
    assert lines[1] == "Su Mo Tu We Th Fr Sa"
    assert lines[-1].strip() == "30"


def test_cal_month_name(capsys):
    assert main(["cal", "-J", "esfand", "1403", "--color", "never"]) == 0
    out = capsys.readouterr().out
    assert "Esfand 1403" in out
    assert "Sa Su Mo Tu We Th Fr" in out
    assert "30" in out


def test_cal_jalali_year(capsys):
    assert main(["cal", "-J", "-y", "1403", "--color", "never"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0].strip() == "1403"
    assert "Farvardin" in out and "Esfand" in out


def test_lone_number_is_a_year(capsys):
    assert main(["cal", "2025", "--color", "never"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0].strip() == "2025"
    assert "January" in out and "December" in out


def test_cal_three_months_with_week_numbers(capsys):
    assert main(["cal", "-3", "11", "2025", "-w", "--color", "never"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0].split() == ["October", "November", "December"]
    assert "48" in out


def test_cal_week_argument_picks_and_highlights_the_week(capsys):
    # week 11 of 2025 (Sunday weeks) starts on March 16
    assert main(["cal", "-3", "-w", "11", "2025", "--color", "always"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0].split() == ["February", "March", "April"]
    assert f"{HIGHLIGHT_ON}11{HIGHLIGHT_OFF}" in out
    assert out.count(HIGHLIGHT_ON) == 1


def test_cal_ordinal_monday(capsys):
    assert main(["cal", "-j", "-m", "11", "2025", "--color", "never"]) == 0
    out = capsys.readouterr().out
    assert "Mon Tue Wed" in out
    assert "334" in out


def test_cal_highlights_given_day(capsys):
    assert main(["cal", "5", "11", "2025", "--color", "always"]) == 0
    assert f"{HIGHLIGHT_ON} 5" in capsys.readouterr().out


def test_cal_no_colour_when_not_a_tty(capsys):
    assert main(["cal", "5", "11", "2025"]) == 0
    assert HIGHLIGHT_ON not in capsys.readouterr().out


@pytest.mark.parametrize(
    "argv",
    [
        ["cal", "13", "2025"],
        ["cal", "31", "2", "2025"],
        ["cal", "1", "10000"],
        ["cal", "1", "2", "3", "4"],
        ["cal", "--weekday", "9", "1", "2025"],
        ["cal", "-w", "55", "2025"],
        ["cal", "--iso", "-s", "1", "2025"],
        ["cal", "-c", "0", "2025"],
        ["cal", "@1732000000", "2025"],
        ["cal", "@soon"],
    ],
)
def test_cal_input_errors(argv):
    with pytest.raises(SystemExit) as e:
        main(argv)
    assert e.value.code == 2


def test_diag_new_years(capsys):
    assert main(["diag", "new-years", "--from-year", "1402", "--to-year", "1404"]) == 0
    out = capsys.readouterr().out
    assert "2024-03-20" in out
    assert "2025-03-21" in out


def test_diag_leap_years(capsys):
    assert main(["diag", "leap-years", "--start-year", "1399", "--end-year", "1408", "--cycles"]) == 0
    out = capsys.readouterr().out
    assert "1403  (30 Esfand = 2025-03-20)" in out
    listed = [line.split()[0] for line in out.split("\n\n")[0].splitlines()[1:]]
    assert listed == ["1399", "1403", "1408"]


def test_diag_round_trip(capsys):
    assert main(["diag", "round-trip", "--N", "300"]) == 0
    assert "All round-trip tests passed." in capsys.readouterr().out


def test_cal_at_the_edge_of_the_supported_years(capsys):
    assert main(["cal", "-3", "1", "1", "--color", "never"]) == 0
    assert capsys.readouterr().out.splitlines()[0].split() == ["January", "February", "March"]
    assert main(["cal", "-J", "-3", "12", "9999", "--color", "never"]) == 0
    assert capsys.readouterr().out.splitlines()[0].split() == ["Dey", "Bahman", "Esfand"]


def test_cal_vertical(capsys):
    assert main(["cal", "-v", "11", "2025", "--color", "never"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].strip() == "November 2025"
    assert lines[1] == "Su    2  9 16 23 30"
    assert len(lines) == 1 + 7


def test_cal_twelve_months_from_this_one(capsys):
    assert main(["cal", "-Y", "11", "2025", "--color", "never"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0].split() == ["November", "2025", "December", "2025", "January", "2026"]
    assert "October 2026" in out
    assert "October 2025" not in out


def test_cal_auto_columns(capsys, monkeypatch):
    monkeypatch.setenv("COLUMNS", "50")
    assert main(["cal", "-c", "auto", "-y", "2025", "--color", "never"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[2].split() == ["January", "February"]


def test_cal_timestamp(capsys):
    # 2024-11-19 07:06 UTC: the 18th or 19th in any local time zone
    assert main(["cal", "@1732000000", "--color", "always"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0].strip() == "November 2024"
    assert out.count(HIGHLIGHT_ON) == 1
    assert main(["cal", "-J", "@1732000000", "--color", "never"]) == 0
    assert capsys.readouterr().out.splitlines()[0].strip() == "Aban 1403"


def test_cal_iso_weeks(capsys):
    assert main(["cal", "--iso", "1", "2025", "--color", "never"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[1] == "   Mo Tu We Th Fr Sa Su"
    assert lines[2].split() == ["1", "1", "2", "3", "4", "5"]
    assert lines[6].split() == ["5", "27", "28", "29", "30", "31"]


def test_date_jalali_format(capsys):
    assert main(["date", "-j", "-d", "2025-05-21", "+%Y/%m/%d %A %B %b %j %U"]) == 0
    assert capsys.readouterr().out == "1404/02/31 Wednesday Ordibehesht Ord 062 09\n"


def test_date_default_format(capsys):
    assert main(["date", "-d", "2024-03-20"]) == 0
    assert capsys.readouterr().out == "Wed Mar 20 2024\n"


def test_date_from_jalali(capsys):
    assert main(["date", "-g", "1403/01/01", "+%F %A"]) == 0
    assert capsys.readouterr().out == "2024-03-20 Wednesday\n"


def test_date_timestamp(capsys):
    assert main(["date", "-d", "@1732000000", "+%Y-%m"]) == 0
    assert capsys.readouterr().out == "2024-11\n"


def test_date_today(capsys):
    assert main(["date", "-j", "+%Y"]) == 0
    assert int(capsys.readouterr().out) >= 1404


def test_date_file_reports_bad_lines(tmp_path, capsys):
    path = tmp_path / "dates.txt"
    path.write_text("2024-03-20\nbogus\n\n2025-03-21\n", encoding="utf-8")
    assert main(["date", "-j", "-f", str(path), "+%F"]) == 1
    captured = capsys.readouterr()
    assert captured.out == "1403-01-01\n1404-01-01\n"
    assert "bogus" in captured.err
    assert ":2:" in captured.err


def test_date_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("2024-03-20\n2024-03-21\n"))
    assert main(["date", "-f", "-", "+%a"]) == 0
    assert capsys.readouterr().out == "Wed\nThu\n"


@pytest.mark.parametrize(
    "argv",
    [
        ["date", "%Y"],
        ["date", "-d", "2023-02-29"],
        ["date", "-d", "@tomorrow"],
        ["date", "-g", "1402/12/30"],
        ["date", "-d", "2024-03-20", "-g", "1403/01/01"],
    ],
)
def test_date_input_errors(argv):
    with pytest.raises(SystemExit) as e:
        main(argv)
    assert e.value.code == 2
