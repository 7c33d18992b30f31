"""
Pydantic schema for the profile configuration record.

This is the record the wizard builds up step by step and hands to the
README renderer. Every section except ``meta`` is optional.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Enumerations
# =============================================================================


class HeaderStyle(str, Enum):
    """How the profile header is drawn."""

    TYPING_SVG = "typing_svg"
    TEXT = "text"
    BANNER = "banner"
    WAVE = "wave"


class ProjectDisplay(str, Enum):
    """How featured repositories are shown."""

    PIN_CARDS = "pin_cards"
    MARKDOWN_TABLE = "markdown_table"


class Template(str, Enum):
    """Overall README layout template."""

    MINIMAL = "minimal"
    FULL = "full"
    DEVELOPER_CARD = "developer_card"
    MULTI_COLUMN = "multi_column"


# =============================================================================
# Sections
# =============================================================================


class Meta(BaseModel):
    """Required metadata. At minimum the GitHub username."""

    username: str = ""
    name: str | None = None


class Header(BaseModel):
    """Header section: banner, typing SVG, or text greeting."""

    style: HeaderStyle | None = None
    banner_url: str | None = None
    typing_lines: list[str] | None = None
    typing_font: str | None = None
    typing_color: str | None = None
    tagline: str | None = None


class About(BaseModel):
    """About me section."""

    role: str | None = None
    company: str | None = None
    current_work: str | None = None
    learning: str | None = None
    reach_me: str | None = None
    fun_fact: str | None = None
    pronouns: str | None = None
    location: str | None = None
    timezone: str | None = None


class Social(BaseModel):
    """Social media links."""

    github: str | None = None
    twitter: str | None = None
    linkedin: str | None = None
    mastodon: str | None = None
    bluesky: str | None = None
    instagram: str | None = None
    youtube: str | None = None
    discord: str | None = None
    devto: str | None = None
    hashnode: str | None = None
    medium: str | None = None
    stackoverflow: str | None = None
    reddit: str | None = None
    twitch: str | None = None
    website: str | None = None
    email: str | None = None
    kofi: str | None = None
    rss: str | None = None


class Skills(BaseModel):
    """Tech stack, organized by category."""

    languages: list[str] | None = None
    frameworks: list[str] | None = None
    tools: list[str] | None = None
    databases: list[str] | None = None
    cloud: list[str] | None = None


class Stats(BaseModel):
    """GitHub stats cards."""

    stats_card: bool | None = None
    top_langs: bool | None = None
    streak: bool | None = None
    contributor_stats: bool | None = None
    trophies: bool | None = None
    contribution_snake: bool | None = None
    profile_views: bool | None = None
    theme: str | None = None
    hide_border: bool | None = None
    top_langs_layout: str | None = None
    top_langs_count: int | None = None


class Projects(BaseModel):
    """Featured projects."""

    repos: list[str] | None = None
    display: ProjectDisplay | None = None


class Article(BaseModel):
    """A single linked blog post."""

    title: str
    url: str


class Blog(BaseModel):
    """Blog and content section."""

    rss_urls: list[str] | None = None
    articles: list[Article] | None = None
    youtube: str | None = None
    newsletter: str | None = None


class Dynamic(BaseModel):
    """Real-time integrations."""

    spotify_uid: str | None = None
    wakatime: bool | None = None
    github_activity: bool | None = None
    stackoverflow_uid: str | None = None


class Layout(BaseModel):
    """Layout and theming."""

    template: Template | None = None
    dark_mode: bool | None = None
    centered: bool | None = None


class Sponsors(BaseModel):
    """Sponsorship links."""

    github_sponsors: bool | None = None
    kofi: str | None = None
    buy_me_a_coffee: str | None = None


class CollapsibleSection(BaseModel):
    """A ``<details>`` block with a summary line and hidden content."""

    summary: str
    content: str


class Extras(BaseModel):
    """PGP, gaming tags, certifications and custom blocks."""

    pgp_fingerprint: str | None = None
    xbox: str | None = None
    steam: str | None = None
    psn: str | None = None
    certifications: list[str] | None = None
    custom_blocks: list[str] | None = None
    collapsible: list[CollapsibleSection] | None = None


# =============================================================================
# Root Record
# =============================================================================


class ProfileConfig(BaseModel):
    """
    Root profile configuration.

    The wizard owns one instance while it runs and gives it up on
    extraction. Sections the user never filled in stay ``None``.
    """

    model_config = ConfigDict(validate_assignment=True)

    meta: Meta = Field(default_factory=Meta)
    header: Header | None = None
    about: About | None = None
    social: Social | None = None
    skills: Skills | None = None
    stats: Stats | None = None
    projects: Projects | None = None
    blog: Blog | None = None
    dynamic: Dynamic | None = None
    layout: Layout | None = None
    sponsors: Sponsors | None = None
    extras: Extras | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the record as plain data with unset values omitted."""
        return self.model_dump(mode="json", exclude_none=True)
