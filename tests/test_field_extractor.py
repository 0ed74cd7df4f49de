"""FieldExtractor queries and the shared text helpers."""

import re

import pytest
from bs4 import BeautifulSoup

from pftv.parsers.common import (
    FieldExtractor,
    clean_text,
    direct_strings,
    match_groups,
    normalize_space,
    parse_count,
    parse_number,
)


HTML = """
<div id="box">
  <p class="item">  first <b>bold</b> </p>
  <p class="item">second<!-- hidden --> part</p>
  <a class="rel" href="/path/page">rel</a>
  <a class="abs" href="http://other.example/x">abs</a>
  <img src="img.png">
  <span><a>A</a> trailing  text <br>second line</span>
</div>
"""


@pytest.fixture
def fields():
    return FieldExtractor(BeautifulSoup(HTML, "html.parser"), "http://site.example/dir/")


def test_queries_that_match_nothing_return_empty(fields):
    assert fields.node("table") is None
    assert fields.nodes("table") == []
    assert fields.count("table") == 0
    assert fields.text("table") == ""
    assert fields.attr("table", "href") == ""
    assert fields.text_nodes("table") == []
    assert fields.nth("p.item", 3) is None
    assert fields.nth("p.item", 0) is None


def test_text_is_returned_untrimmed(fields):
    assert fields.text("p.item") == "  first bold "
    assert fields.normalized_text("p.item") == "first bold"


def test_nth_and_count(fields):
    assert fields.count("p.item") == 2
    assert normalize_space(fields.nth("p.item", 2).get_text()) == "second part"


def test_text_nodes_keep_order_and_skip_comments():
    fields = FieldExtractor(BeautifulSoup("<p>a<!-- c --><b> b</b> </p>", "html.parser"))
    assert fields.text_nodes("p") == ["a", " b", " "]


def test_attr_resolves_relative_links(fields):
    assert fields.attr("a.rel", "href") == "http://site.example/path/page"
    assert fields.attr("a.abs", "href") == "http://other.example/x"
    assert fields.attr("img", "src") == "http://site.example/dir/img.png"
    assert fields.attr("a.rel", "href", resolve=False) == "/path/page"
    assert fields.all_attrs("a[href]", "href") == [
        "http://site.example/path/page",
        "http://other.example/x",
    ]


def test_direct_strings_exclude_nested_elements(fields):
    span = fields.node("span")
    assert [s.strip() for s in direct_strings(span)] == ["trailing  text", "second line"]
    assert direct_strings(None) == []


@pytest.mark.parametrize("value, expected", [
    (None, None),
    ("", None),
    ("  \n\t ", None),
    ("  x ", "x"),
])
def test_clean_text(value, expected):
    assert clean_text(value) == expected


def test_match_groups():
    pattern = re.compile(r"(?P<a>\d+)-(?P<b>\w*)")
    assert match_groups(pattern, "x 12- y") == {"a": "12", "b": None}
    assert match_groups(pattern, "nothing") == {"a": None, "b": None}
    assert match_groups(pattern, None) == {"a": None, "b": None}


def test_number_helpers():
    assert parse_number("12.5") == 12.5
    assert parse_number("abc") is None
    assert parse_number(None) is None
    assert parse_count("34") == 34
    assert parse_count(None) == 0
    assert parse_count("-3") == 0
