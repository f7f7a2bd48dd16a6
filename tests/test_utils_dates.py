from __future__ import annotations
from datetime import date, datetime

import pytest

from convenia_util.utils.dates import (
    get_date_format, to_strftime, parse_date, format_date, diff_years,
)

@pytest.mark.parametrize("text, expected", [
    ("2000-21-12", "YYYY-MM-DD"),
    ("21-12-2000", "DD-MM-YYYY"),
    ("21/12/2000", "DD/MM/YYYY"),
    ("12/21/2000", "DD/MM/YYYY"),
    ("2000/12/21", None),
    ("3/102/2006", None),
    ("21/12/20", None),
    (" 21/12/2000", None),
    ("21.12.2000", None),
    (20001221, None),
    (None, None),
])
def test_get_date_format(text, expected):
    assert get_date_format(text) == expected

def test_to_strftime_tokens():
    assert to_strftime("DD/MM/YYYY") == "%d/%m/%Y"
    assert to_strftime("YYYY-MM-DD HH:mm:ss") == "%Y-%m-%d %H:%M:%S"
    assert to_strftime("DD/MM/YY") == "%d/%m/%y"

def test_parse_date_strict():
    ts = parse_date("21/12/2006", "DD/MM/YYYY")
    assert (ts.year, ts.month, ts.day) == (2006, 12, 21)
    assert parse_date("31/02/2006", "DD/MM/YYYY") is None
    assert parse_date("21/12/2006", "YYYY-MM-DD") is None
    assert parse_date("2000-21-12", "YYYY-MM-DD") is None
    assert parse_date(None, "YYYY-MM-DD") is None

def test_format_date():
    assert format_date(date(2006, 12, 21), "YYYY-MM-DD") == "2006-12-21"
    assert format_date(parse_date("2006-12-21", "YYYY-MM-DD"), "DD/MM/YYYY") == "21/12/2006"

def test_diff_years_whole_years():
    assert diff_years(date(2006, 12, 21), date(2016, 12, 21)) == 10
    assert diff_years(date(2006, 12, 21), date(2016, 12, 20)) == 9
    assert diff_years(datetime(2000, 12, 21, 8), datetime(2016, 12, 22, 12)) == 16
    assert diff_years(date(2020, 1, 1), date(2010, 1, 1)) == -10
