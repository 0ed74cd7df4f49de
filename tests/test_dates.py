"""DateNormalizer: permissive parsing and configurable output."""

import pytest

from pftv.core.dates import DEFAULT_DATE_FORMAT, DateNormalizer, to_strftime


@pytest.mark.parametrize("token_format, expected", [
    ("DD MMM YYYY", "%d %b %Y"),
    ("YYYY-MM-DD", "%Y-%m-%d"),
    ("dddd DD MMMM YY", "%A %d %B %y"),
    ("%d.%m.%Y", "%d.%m.%Y"),
])
def test_to_strftime(token_format, expected):
    assert to_strftime(token_format) == expected


def test_default_format_is_day_month_year():
    assert DEFAULT_DATE_FORMAT == "%d/%m/%Y"
    assert DateNormalizer().normalize("24 September 2007") == "24/09/2007"


def test_token_format_output():
    normalizer = DateNormalizer("DD MMM YYYY")
    assert normalizer.normalize("04 May 2024") == "04 May 2024"


@pytest.mark.parametrize("fragment", [
    "24 September 2007",
    "September 24, 2007",
    "Sep 24 2007",
    "2007-09-24",
    "Monday, 24 September 2007",
])
def test_loose_forms_agree(fragment):
    assert DateNormalizer("%Y-%m-%d").normalize(fragment) == "2007-09-24"


@pytest.mark.parametrize("fragment", [
    None,
    "",
    "   ",
    "no date here",
    "TBA",
    "10:00 PM",
    "Monday",
    "May",
    "22",
    "May 2024",
    "2024",
    "Tonight at 9pm",
])
def test_unparsable_is_none(fragment):
    assert DateNormalizer().normalize(fragment) is None


@pytest.mark.parametrize("date_format", ["%d/%m/%Y", "%m/%d/%Y", "DD MMM YYYY", "YYYY-MM-DD"])
def test_normalize_is_idempotent(date_format):
    normalizer = DateNormalizer(date_format)
    once = normalizer.normalize("3 February 2010")
    assert once is not None
    assert normalizer.normalize(once) == once


def test_numeric_dates_follow_output_order():
    assert DateNormalizer("%d/%m/%Y").dayfirst is True
    assert DateNormalizer("%m/%d/%Y").dayfirst is False
    assert DateNormalizer("%d/%m/%Y").normalize("03/02/2010") == "03/02/2010"
    assert DateNormalizer("%m/%d/%Y").normalize("03/02/2010") == "03/02/2010"


def test_time_of_day_does_not_hide_the_date():
    assert DateNormalizer().normalize("24 September 2007 10:00 PM") == "24/09/2007"
    assert DateNormalizer().normalize("2002-12-20") == "20/12/2002"
