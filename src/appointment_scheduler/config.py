"""Environment-driven configuration: site display data, timezone, store and logging settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

DEFAULT_TZ = "America/Los_Angeles"
DEFAULT_TABLE_NAME = "appointments"
DEFAULT_REGION = "us-west-2"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class SiteConfig:
    """Passthrough display data for the booking page (title and navigation links)."""
    site_title: str
    about_url: str
    contact_url: str
    home_url: str

    def to_dict(self) -> dict[str, str]:
        """Keys match what booking page clients already expect."""
        return {
            "site_title": self.site_title,
            "about_page_url": self.about_url,
            "contact_page_url": self.contact_url,
            "home_page_url": self.home_url,
        }


def get_site_config() -> SiteConfig:
    return SiteConfig(
        site_title=os.environ.get("SITE_TITLE", "Appointment Scheduler"),
        about_url=os.environ.get("ABOUT_PAGE_URL", ""),
        contact_url=os.environ.get("CONTACT_PAGE_URL", ""),
        home_url=os.environ.get("HOME_PAGE_URL", ""),
    )


def local_tz() -> ZoneInfo:
    """Business timezone used to decide what 'today' is. Unknown names fall back to DEFAULT_TZ."""
    try:
        return ZoneInfo(os.environ.get("TIMEZONE", DEFAULT_TZ))
    except (ZoneInfoNotFoundError, ValueError):
        return ZoneInfo(DEFAULT_TZ)


def table_name() -> str:
    return os.environ.get("DYNAMODB_TABLE_NAME", DEFAULT_TABLE_NAME)


def aws_region() -> str:
    return os.environ.get("AWS_REGION", DEFAULT_REGION)


def dynamodb_endpoint() -> str | None:
    return (os.environ.get("DYNAMODB_ENDPOINT_URL") or "").strip() or None


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").upper()
