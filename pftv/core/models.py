"""
Core Data Models - Pydantic models for scraped show and episode records.

This module defines the value objects returned by the extraction engine:
shows with their seasons, and episode lists with their download links.
Every model is frozen, so a record is never mutated once it is returned.
"""

from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator

from pftv.core.utils import extract_domain


class Link(BaseModel):
    """A single embedded-player link listed under an episode."""

    model_config = ConfigDict(frozen=True)

    url: Optional[str] = Field(None, description="Embedded player URL")
    name: Optional[str] = Field(None, description="Link display name")
    host: Optional[str] = Field(None, description="Host name as shown on the page")
    loading_time: Optional[str] = Field(None, description="Loading time annotation")
    submitted_by: Optional[str] = Field(None, description="Submission marker")
    working_percent: Optional[float] = Field(
        None, ge=0.0, le=100.0, description="Share of users reporting the link as working"
    )

    @property
    def domain(self) -> Optional[str]:
        """Resolver key for this link (lower-cased host without www. or port)."""
        return extract_domain(self.url)

    def __str__(self) -> str:
        return f"{self.name or 'Link'} ({self.host or 'unknown host'})"


class Episode(BaseModel):
    """
    One episode of a season with the links attached to it.

    Episode numbers are kept as floats because the site lists
    half-episodes such as ``12.5``.
    """

    model_config = ConfigDict(frozen=True)

    number: float = Field(..., description="Episode number")
    name: str = Field(..., min_length=1, description="Episode name")
    code: Optional[str] = Field(None, description="Episode code, e.g. S01E01")
    air_date: Optional[str] = Field(None, description="Air date in the configured format")
    description: Optional[str] = Field(None, description="Episode synopsis")
    links: Tuple[Link, ...] = Field(default_factory=tuple, description="Links in page order")

    @field_validator('number')
    @classmethod
    def validate_number(cls, v: float) -> float:
        """Episode zero is never a real episode row."""
        if v == 0:
            raise ValueError("Episode number must be non-zero")
        return v

    @property
    def display_number(self) -> str:
        """Episode number without a trailing ``.0`` for whole numbers."""
        return f"{self.number:g}"

    def __str__(self) -> str:
        return f"Episode {self.display_number}: {self.name}"


class EpisodeList(BaseModel):
    """Episodes of one season page."""

    model_config = ConfigDict(frozen=True)

    show_name: Optional[str] = Field(None, description="Show name from the breadcrumbs")
    season_label: Optional[str] = Field(None, description="Season label from the breadcrumbs")
    episodes: Tuple[Episode, ...] = Field(default_factory=tuple, description="Episodes in page order")

    def find_episode(self, number: float) -> Optional[Episode]:
        """Return the episode with the given number, if listed."""
        for episode in self.episodes:
            if episode.number == number:
                return episode
        return None

    @property
    def link_count(self) -> int:
        return sum(len(episode.links) for episode in self.episodes)


class Category(BaseModel):
    """A season (category) block on the show page."""

    model_config = ConfigDict(frozen=True)

    id: Optional[str] = Field(None, description="Category identifier (anchor href)")
    name: Optional[str] = Field(None, description="Category name")
    episode_count: int = Field(0, ge=0, description="Episodes listed for the category")
    link_count: int = Field(0, ge=0, description="Links listed for the category")

    def __str__(self) -> str:
        return f"{self.name or self.id} ({self.episode_count} episodes, {self.link_count} links)"


class NextEpisode(BaseModel):
    """Upcoming episode announcement."""

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = Field(None, description="Episode name")
    code: Optional[str] = Field(None, description="Episode code")
    air_date: Optional[str] = Field(None, description="Air date in the configured format")


class Show(BaseModel):
    """
    Show page record.

    Contains the show metadata, its trailers, the upcoming episode
    (when announced) and the list of seasons in page order.
    """

    model_config = ConfigDict(frozen=True)

    title: Optional[str] = Field(None, description="Show title")
    plot: Optional[str] = Field(None, description="Show plot")
    image_url: Optional[str] = Field(None, description="Poster image URL")
    trailers: Tuple[str, ...] = Field(default_factory=tuple, description="Trailer URLs")
    next_episode: Optional[NextEpisode] = Field(None, description="Next announced episode")
    categories: Tuple[Category, ...] = Field(default_factory=tuple, description="Seasons in page order")

    def find_category(self, category_id: str) -> Optional[Category]:
        """Return the category with the given id, if listed."""
        for category in self.categories:
            if category.id == category_id:
                return category
        return None

    def __str__(self) -> str:
        return self.title or "Untitled show"


# Export all models
__all__ = [
    "Link",
    "Episode",
    "EpisodeList",
    "Category",
    "NextEpisode",
    "Show",
]
