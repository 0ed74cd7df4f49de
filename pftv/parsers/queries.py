"""
Query Catalogue - Selectors and patterns for the listings pages.

Every location the parsers read from is named here, so a markup change
on the site is a one-line fix. Patterns are listed in the order the
parsers try them.
"""

import re


# Show page
TITLE = "div.mnlshowinfo h1"
PLOT = "div.mnlplot"
IMAGE = "img.mnlposter"
TRAILER_LINKS = "div.mnltrailers a[href]"
CATEGORY_BLOCKS = "td.mnlcategorylist"
CATEGORY_NAME = "a b"
CATEGORY_LINK = "a[href]"
NEXT_EPISODE = "div.mnlshowinfo span[style]"

# "24 Episodes, 312 Links"
CATEGORY_COUNTS_RE = re.compile(
    r'(?P<episodes>\d+)\s*Episodes?\D*?(?P<links>\d+)\s*Links?',
    re.IGNORECASE
)
# "Next Episode: 04 May 2024" -> everything after the first colon
NEXT_AIR_DATE_RE = re.compile(r'^[^:]*:\s*(?P<date>.+)$')
# "S07E22 - The Proton Transmogrification"
NEXT_CODE_NAME_RE = re.compile(r'^(?P<code>\S+)\s+-\s+(?P<name>.+)$')
FINISHED_SENTINEL = "finished"

# Episode list page
SHOW_NAME = "div.mnlbreadcrumbs > a"
SEASON_LABEL = "div.mnlbreadcrumbs > span"
SEASON_SEPARATOR = ">>"
EPISODE_ROWS = "tr.episode"
EPISODE_NAME = "td.mnlepisodename"
EPISODE_INFO = "td.mnlepisodeinfo"
EPISODE_DESCRIPTION = "td.mnldescription"
ROW_TAG = "tr"
EPISODE_ROW_CLASS = "episode"
LINK_ROW_CLASS = "mnllinklist"
LINK_URL = "a[href]"
LINK_NAME = "div.mnllinkname"
LINK_HOST_INFO = "div.mnlhostinfo"
LINK_WORKING = "div.mnlworking"

# Episode name/number formats the site has used, newest first
EPISODE_NUMBERED_RE = re.compile(r'^(?P<number>\d+(?:\.\d+)?)\.\s+(?P<name>.+)$')
EPISODE_LABELLED_RE = re.compile(r'\bEpisode\s+(?P<number>\d+(?:\.\d+)?)', re.IGNORECASE)

# "S01E01 - Air Date: 24 September 2007". Either half may be missing.
# A code always carries a digit.
EPISODE_INFO_RE = re.compile(
    r'^\s*(?P<code>(?=[A-Za-z]*\d)[A-Za-z0-9]+)?[^:]*(?::\s*(?P<date>.*\S))?'
)
# "Loading Time: fast Host: vidhost.com Submitted by: anon", or just "Host: vidhost.com"
LINK_HOST_INFO_RE = re.compile(
    r'(?:Loading Time:\s*(?P<loading_time>.*?)\s*)?Host:\s*(?P<host>\S+)'
    r'(?:\s*Submitted(?:\s+by)?:?\s*(?P<submitted>.*))?',
    re.IGNORECASE
)
# "87% Said Work"
LINK_WORKING_RE = re.compile(r'(?P<percent>\d+)\s*%')
