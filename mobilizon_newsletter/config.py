"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- FetchConfig: HTTP fetching settings
- FeedConfig: Which feed entries count as posts
- FormatConfig: Locale, timezone and excerpt length
- NewsletterConfig: Fixed text fragments of the newsletter
- OutputConfig: Output file settings
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import yaml


@dataclass
class FetchConfig:
    """Configuration for HTTP feed fetching.

    Attributes:
        timeout_seconds: HTTP request timeout, None disables the timeout
        trust_env: Whether to respect system proxy settings
        user_agent: HTTP User-Agent header string
    """

    timeout_seconds: float | None = None
    trust_env: bool = True
    user_agent: str = "mobilizon-newsletter/0.1.0"


@dataclass
class FeedConfig:
    """Configuration for reading the instance feeds.

    Attributes:
        post_path_prefix: URL path prefix of post entries; other entries (events) are skipped
    """

    post_path_prefix: str = "/p/"


@dataclass
class FormatConfig:
    """Configuration for date rendering and excerpts.

    Attributes:
        locale: Babel locale identifier for weekday, month and time names
        timezone: IANA zone used for month boundaries and displayed times
        max_description_length: Maximum characters of an excerpt before the ellipsis
    """

    locale: str = "nl"
    timezone: str = "Europe/Amsterdam"
    max_description_length: int = 256


@dataclass
class Channel:
    """A link listed in the "stay informed" section."""

    label: str
    url: str


def _default_channels() -> list[Channel]:
    return [
        Channel("Website", "https://animalrebellion.nl"),
        Channel("Mobilizon", "https://groups.animalrebellion.nl"),
        Channel("Peertube", "https://lone.earth/c/acties_van_animal_rebellion/videos"),
        Channel("Mastodon", "https://mastodon.social/@AnimalRebellion"),
    ]


@dataclass
class NewsletterConfig:
    """Fixed text fragments interpolated into the newsletter.

    Sentences containing ``{count}`` or ``{month}`` are formatted with the
    number of entries and the localized month name.
    """

    title: str = "Nieuwsbrief"
    greeting: str = "Lieve rebel,"
    intro: str = "Welkom bij de nieuwsbrief!"
    placeholder: str = "[op maat gemaakte input kan hier]"
    sign_off: str = "Met (dier)vriendelijke groeten,"
    organization: str = "Animal Rebellion"
    platform_name: str = "Mobilizon"
    events_heading: str = "Aankomende evenementen"
    events_count: str = "In {month} staan {count} evenementen op de planning!"
    events_overview: str = "Kijk op {platform} voor een actueel overzicht van alle evenementen."
    organizer_label: str = "Door"
    when_label: str = "Wanneer"
    where_label: str = "Waar"
    time_joiner: str = "om"
    read_more: str = "Meer lezen."
    posts_heading: str = "Berichten van afgelopen maand"
    posts_count: str = "Afgelopen maand hebben jullie {count} berichten gedeeld."
    posts_call_to_action: str = "Wil je ook iets delen? Dat kan door een bericht te maken op {platform}!"
    channels_heading: str = "Blijf op de hoogte!"
    channels_intro: str = "Volg ons via onze kanalen!"
    channels: list[Channel] = field(default_factory=_default_channels)
    contact_email: str = "animalrebellion.netherlands@protonmail.com"
    email_label: str = "E-mail"
    footer: str = (
        "De inhoud van deze nieuwsbrief is automatisch opgesteld op basis van publieke "
        "activiteit op {platform}. Als je vragen of opmerkingen hebt, stuur dan {email_link}."
    )
    footer_email_text: str = "een email"


@dataclass
class OutputConfig:
    """Configuration for output generation.

    Attributes:
        path: File the newsletter is written to, overwritten on every run
    """

    path: str = "output.html"


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to console
        file: Whether to log to file
        format: Log file format ("jsonl" or "plain")
        filename: Name of the log file
    """

    level: str = "INFO"
    console: bool = True
    file: bool = False
    format: str = "jsonl"
    filename: str = "newsletter.jsonl"


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    fetch: FetchConfig = field(default_factory=FetchConfig)
    feed: FeedConfig = field(default_factory=FeedConfig)
    format: FormatConfig = field(default_factory=FormatConfig)
    newsletter: NewsletterConfig = field(default_factory=NewsletterConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults."""
    if not path:
        return AppConfig()

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return _merge_config(AppConfig(), raw)


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = _asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if isinstance(value, dict) and isinstance(data[key], dict):
            data[key].update(value)
        else:
            data[key] = value
    return _fromdict(data)


def _asdict(cfg: AppConfig) -> dict[str, Any]:
    """Convert AppConfig to nested dictionary."""
    newsletter = dict(vars(cfg.newsletter))
    newsletter["channels"] = [
        {"label": channel.label, "url": channel.url} for channel in cfg.newsletter.channels
    ]
    return {
        "fetch": {
            "timeout_seconds": cfg.fetch.timeout_seconds,
            "trust_env": cfg.fetch.trust_env,
            "user_agent": cfg.fetch.user_agent,
        },
        "feed": {
            "post_path_prefix": cfg.feed.post_path_prefix,
        },
        "format": {
            "locale": cfg.format.locale,
            "timezone": cfg.format.timezone,
            "max_description_length": cfg.format.max_description_length,
        },
        "newsletter": newsletter,
        "output": {
            "path": cfg.output.path,
        },
        "logging": {
            "level": cfg.logging.level,
            "console": cfg.logging.console,
            "file": cfg.logging.file,
            "format": cfg.logging.format,
            "filename": cfg.logging.filename,
        },
    }


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    newsletter = dict(data["newsletter"])
    newsletter["channels"] = [
        item if isinstance(item, Channel) else Channel(**item)
        for item in newsletter.get("channels", [])
    ]
    return AppConfig(
        fetch=FetchConfig(**data["fetch"]),
        feed=FeedConfig(**data["feed"]),
        format=FormatConfig(**data["format"]),
        newsletter=NewsletterConfig(**newsletter),
        output=OutputConfig(**data["output"]),
        logging=LoggingConfig(**data["logging"]),
    )
