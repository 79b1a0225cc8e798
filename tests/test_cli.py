# tests/test_cli.py

import pytest

from calschema.cli import _parse_date, main
from calschema.core.types import DateParts


def test_parse_date():
    assert _parse_date("2000-1-2") == DateParts(2000, 1, 2)
    assert _parse_date("-44-03-15") == DateParts(-44, 3, 15)
    assert _parse_date("1720-13-006") == DateParts(1720, 13, 6)


def test_list(capsys):
    assert main(["list"]) == 0
    out = capsys.readouterr().out
    assert "gregorian" in out and "tabular_islamic" in out


def test_info(capsys):
    assert main(["info", "persian"]) == 0
    out = capsys.readouterr().out
    assert "Persian2820Schema" in out
    assert "RegularArithmetic" in out


def test_convert(capsys):
    assert main(["convert", "2000-01-01", "--to", "julian"]) == 0
    assert capsys.readouterr().out.strip() == "1999-12-19"
    assert main(["convert", "1421-01-01", "--from", "tabular_islamic", "--to", "gregorian"]) == 0
    assert capsys.readouterr().out.strip() == "2000-04-06"


def test_describe(capsys):
    assert main(["describe", "2000-02-29"]) == 0
    out = capsys.readouterr().out
    assert "intercalary_day" in out
    assert ["day_of_year", "60"] in [line.split() for line in out.splitlines()]


def test_add(capsys):
    assert main(["add", "2016-05-31", "--months", "1"]) == 0
    assert capsys.readouterr().out.strip() == "2016-06-30"
    assert main(["add", "2016-05-31", "--months", "1", "--rule", "overspill"]) == 0
    assert capsys.readouterr().out.strip() == "2016-07-01"
    assert main(["add", "2016-02-29", "--years", "1", "--rule", "exact"]) == 0
    assert capsys.readouterr().out.strip() == "2017-03-01"
    assert main(["add", "2000-02-28", "--days", "2"]) == 0
    assert capsys.readouterr().out.strip() == "2000-03-01"


def test_between(capsys):
    assert main(["between", "1900-03-02", "2000-03-01"]) == 0
    assert capsys.readouterr().out.strip() == "36524"


def test_errors_exit_with_code_2(capsys):
    assert main(["convert", "2001-02-29", "--to", "julian"]) == 2
    assert capsys.readouterr().err.startswith("error:")
    assert main(["info", "klingon"]) == 2
    assert "Unknown calendar" in capsys.readouterr().err
    assert main(["add", "2016-05-31", "--months", "1", "--rule", "overflow"]) == 2
    assert capsys.readouterr().err.startswith("error:")


def test_bad_arguments():
    with pytest.raises(SystemExit):
        main(["convert", "yesterday", "--to", "julian"])
    with pytest.raises(SystemExit):
        main(["add", "2016-05-31"])
    with pytest.raises(SystemExit):
        main(["add", "2016-05-31", "--days", "1", "--months", "1"])


def test_diag_round_trip(capsys):
    argv = ["diag", "round-trip", "--calendars", "gregorian,coptic13", "--start-year", "1999", "--end-year", "2001"]
    assert main(argv) == 0
    out = capsys.readouterr().out
    assert "gregorian" in out and "OK" in out
