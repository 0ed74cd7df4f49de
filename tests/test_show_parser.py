"""Show page extraction from HTML fixtures."""

import pytest
from bs4 import BeautifulSoup

from pftv.core.dates import DateNormalizer
from pftv.core.exceptions import NotFoundError
from pftv.parsers import ShowInfoParser, parse_show_info


@pytest.fixture
def show(load_document):
    return parse_show_info(load_document("show.html"), "the-big-bang-theory")


def test_show_fields(show):
    assert show.title == "The Big Bang Theory"
    assert show.plot == "Leonard and Sheldon are brilliant physicists, but they are socially awkward."
    assert show.image_url == "/images/posters/the-big-bang-theory.jpg"
    assert show.trailers == ("http://www.youtube.com/watch?v=trailer1", "/trailers/season-2")


def test_relative_urls_resolved_against_page(load_document):
    show = parse_show_info(
        load_document("show.html"),
        "the-big-bang-theory",
        base_url="http://projectfreetv.club/internet/the-big-bang-theory/",
    )
    assert show.image_url == "http://projectfreetv.club/images/posters/the-big-bang-theory.jpg"
    assert show.trailers[1] == "http://projectfreetv.club/trailers/season-2"


def test_categories_in_page_order(show):
    assert [c.name for c in show.categories] == ["Season 1", "Season 2", "Specials"]
    assert [c.id for c in show.categories] == ["season-1/", "season-2/", "specials/"]


def test_category_counts(show):
    first, second, specials = show.categories
    assert (first.episode_count, first.link_count) == (17, 312)
    assert (second.episode_count, second.link_count) == (23, 401)
    assert (specials.episode_count, specials.link_count) == (0, 0)


def test_category_counts_from_trailing_fragment():
    html = '<td class="mnlcategorylist"><a href="s1/"><b>Season 1</b></a> 12 Episodes, 34 Links</td>'
    show = parse_show_info(BeautifulSoup(f"<table><tr>{html}</tr></table>", "html.parser"), "x")
    assert show.categories[0].episode_count == 12
    assert show.categories[0].link_count == 34


def test_next_episode_default_format(show):
    assert show.next_episode is not None
    assert show.next_episode.code == "S07E22"
    assert show.next_episode.name == "The Proton Transmogrification"
    assert show.next_episode.air_date == "04/05/2024"


def test_next_episode_token_format(load_document):
    show = parse_show_info(load_document("show.html"), "x", DateNormalizer("DD MMM YYYY"))
    assert show.next_episode.air_date == "04 May 2024"


def test_finished_show_has_no_next_episode(load_document):
    show = parse_show_info(load_document("show_finished.html"), "firefly")
    assert show.title == "Firefly"
    assert show.next_episode is None
    assert show.categories[0].episode_count == 14


def test_malformed_fields_are_nulled_independently(load_document):
    show = parse_show_info(load_document("show_broken.html"), "mystery-show")
    assert show.title == "Mystery Show"
    assert show.plot is None
    assert show.image_url is None
    assert show.trailers == ()
    assert show.next_episode is not None
    assert show.next_episode.air_date is None
    assert show.next_episode.code is None
    assert show.next_episode.name is None
    category = show.categories[0]
    assert category.name == "Season 1"
    assert (category.episode_count, category.link_count) == (0, 0)


def test_page_without_title_or_seasons_is_not_found(load_document):
    with pytest.raises(NotFoundError) as exc_info:
        parse_show_info(load_document("not_found.html"), "no-such-show")
    assert exc_info.value.show_id == "no-such-show"
    assert exc_info.value.category_id is None


def test_title_alone_is_enough():
    document = BeautifulSoup('<div class="mnlshowinfo"><h1>Only a title</h1></div>', "html.parser")
    show = ShowInfoParser(document).parse("only-title")
    assert show.title == "Only a title"
    assert show.categories == ()
    assert show.next_episode is None


def test_seasons_alone_are_enough():
    document = BeautifulSoup(
        '<table><tr><td class="mnlcategorylist"><a href="s1/"><b>S1</b></a></td></tr></table>',
        "html.parser",
    )
    show = ShowInfoParser(document).parse("no-title")
    assert show.title is None
    assert show.find_category("s1/").name == "S1"
    assert show.find_category("s2/") is None


def test_extraction_is_deterministic(load_document):
    document = load_document("show.html")
    assert parse_show_info(document, "x") == parse_show_info(document, "x")
