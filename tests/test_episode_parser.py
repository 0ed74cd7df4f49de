"""Season page extraction, including link-row windowing."""

import pytest
from bs4 import BeautifulSoup

from pftv.core.exceptions import NotFoundError
from pftv.parsers import EpisodeListParser, parse_episode_list
from pftv.parsers.common import match_groups
from pftv.parsers.episodes import parse_percent, recover_name_number
from pftv.parsers.queries import LINK_HOST_INFO_RE


@pytest.fixture
def season(load_document):
    return parse_episode_list(load_document("episodes.html"), "the-big-bang-theory", "season-1/")


def test_breadcrumbs(season):
    assert season.show_name == "The Big Bang Theory"
    assert season.season_label == "Season 1"


def test_episodes_in_page_order(season):
    assert [e.number for e in season.episodes] == [1.0, 2.0, 3.0, 3.5]
    assert [e.name for e in season.episodes] == [
        "Pilot",
        "The Big Bran Hypothesis",
        "Season 1 Episode 3",
        "The Fuzzy Boots Corollary",
    ]
    assert season.episodes[3].display_number == "3.5"


def test_episode_metadata(season):
    pilot, second, third, half = season.episodes
    assert pilot.code == "S01E01"
    assert pilot.air_date == "24/09/2007"
    assert pilot.description == "A pair of socially awkward physicists meet their new neighbour."
    assert second.code is None
    assert second.air_date == "01/10/2007"
    assert second.description is None
    assert third.code == "S01E03"
    assert third.air_date is None
    assert third.description is None
    assert half.code == "S01E03b"
    assert half.air_date is None


def test_link_fields(season):
    first, mirror = season.episodes[0].links
    assert first.url == "http://www.example.com/embed/abc123"
    assert first.name == "Watch Pilot"
    assert first.loading_time == "fast"
    assert first.host == "example.com"
    assert first.submitted_by == "anon"
    assert first.working_percent == 87.0
    assert first.domain == "example.com"

    assert mirror.name == "Pilot (mirror)"
    assert mirror.host == "vidhost.net"
    assert mirror.loading_time == "slow"
    assert mirror.submitted_by is None
    assert mirror.working_percent is None


def test_link_without_annotations(season):
    (link,) = season.episodes[2].links
    assert link.url == "http://www.example.com/embed/ep3"
    assert link.name == "Episode three"
    assert link.host == "example.com"
    assert link.loading_time is None
    assert link.submitted_by is None
    assert link.working_percent is None


def test_window_stops_at_next_episode_row(season):
    assert len(season.episodes[0].links) == 2
    assert season.episodes[1].links == ()


def test_placeholder_row_before_next_episode_is_skipped(load_document):
    document = load_document("episodes.html")
    second_row = document.select("tr.episode")[1]
    placeholder = second_row.find_previous_sibling("tr")
    assert placeholder["class"] == ["none"]

    season = parse_episode_list(document, "the-big-bang-theory", "season-1/")
    assert [link.name for link in season.episodes[0].links] == ["Watch Pilot", "Pilot (mirror)"]
    assert season.episodes[1].links == ()


def test_window_of_dropped_row_is_not_reassigned(season):
    urls = [link.url for episode in season.episodes for link in episode.links]
    assert "http://www.example.com/embed/extra" not in urls
    assert len(season.episodes[2].links) == 1


def test_last_episode_window_runs_to_end_of_page(season):
    last = season.episodes[-1]
    assert [link.name for link in last.links] == ["Relative link", "Late link"]
    assert last.links[1].working_percent == 40.0
    assert season.link_count == 5


def test_relative_link_urls_resolved_against_page(load_document):
    season = parse_episode_list(
        load_document("episodes.html"),
        "the-big-bang-theory",
        "season-1/",
        base_url="http://projectfreetv.club/internet/the-big-bang-theory/season-1/",
    )
    assert season.episodes[-1].links[0].url == "http://projectfreetv.club/embed/local"


def test_legacy_rows_and_dropped_episodes(load_document):
    season = parse_episode_list(load_document("episodes_legacy.html"), "firefly", "season-1/")
    assert season.show_name == "Firefly"
    assert season.season_label is None
    assert len(season.episodes) == 1
    episode = season.episodes[0]
    assert episode.number == 1.0
    assert episode.name == "Episode 1 - Serenity"
    assert episode.code == "1x01"
    assert episode.air_date == "20/12/2002"
    assert [link.name for link in episode.links] == ["Serenity"]


def test_empty_season_with_breadcrumbs_is_not_an_error(load_document):
    season = parse_episode_list(load_document("episodes_empty.html"), "new-show", "season-9/")
    assert season.show_name == "New Show"
    assert season.season_label == "Season 9"
    assert season.episodes == ()


def test_page_without_episodes_or_breadcrumbs_is_not_found(load_document):
    with pytest.raises(NotFoundError) as exc_info:
        parse_episode_list(load_document("not_found.html"), "no-such-show", "season-1/")
    assert exc_info.value.show_id == "no-such-show"
    assert exc_info.value.category_id == "season-1/"


def test_episodes_alone_are_enough():
    document = BeautifulSoup(
        '<table><tr class="episode"><td class="mnlepisodename">5. Five</td></tr></table>',
        "html.parser",
    )
    season = EpisodeListParser(document).parse("x", "y")
    assert season.show_name is None
    assert season.season_label is None
    assert season.find_episode(5).name == "Five"
    assert season.find_episode(6) is None


@pytest.mark.parametrize("text, expected", [
    ("12. Name", (12.0, "Name")),
    ("  7.   Spaced   out  ", (7.0, "Spaced out")),
    ("12.5. Half", (12.5, "Half")),
    ("Season 2 Episode 4", (4.0, "Season 2 Episode 4")),
    ("episode 9: lower case", (9.0, "episode 9: lower case")),
    ("Special", (None, "Special")),
    ("", (None, None)),
    (None, (None, None)),
])
def test_recover_name_number(text, expected):
    assert recover_name_number(text) == expected


@pytest.mark.parametrize("text, expected", [
    ("87", 87.0),
    ("0", 0.0),
    ("100", 100.0),
    ("101", None),
    (None, None),
])
def test_parse_percent(text, expected):
    assert parse_percent(text) == expected


def _single_episode(info: str):
    document = BeautifulSoup(
        '<table><tr class="episode">'
        '<td class="mnlepisodename">1. Pilot</td>'
        f'<td class="mnlepisodeinfo">{info}</td>'
        '</tr></table>',
        "html.parser",
    )
    (episode,) = EpisodeListParser(document).parse_episodes()
    return episode


@pytest.mark.parametrize("info, code, air_date", [
    ("S01E01 - Air Date: 24 September 2007", "S01E01", "24/09/2007"),
    ("Air Date: 24 September 2007", None, "24/09/2007"),
    ("- Air Date: 24 September 2007", None, "24/09/2007"),
    ("1x01 aired: 2002-12-20", "1x01", "20/12/2002"),
    ("S01E01", "S01E01", None),
    ("S01E01 - Air Date: TBA", "S01E01", None),
    ("", None, None),
])
def test_episode_info_halves_are_independent(info, code, air_date):
    episode = _single_episode(info)
    assert episode.code == code
    assert episode.air_date == air_date


@pytest.mark.parametrize("text, loading_time, host, submitted_by", [
    ("Loading Time: fast Host: example.com Submitted by: anon", "fast", "example.com", "anon"),
    ("Loading Time: slow Host: vidhost.net", "slow", "vidhost.net", None),
    ("Host: vidhost.net", None, "vidhost.net", None),
    ("Loading Time: fast", None, None, None),
])
def test_host_info_without_loading_time(text, loading_time, host, submitted_by):
    groups = match_groups(LINK_HOST_INFO_RE, text)
    assert groups["loading_time"] == loading_time
    assert groups["host"] == host
    assert groups["submitted"] == submitted_by
