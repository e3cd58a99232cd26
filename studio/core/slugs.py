import re
from datetime import date
from typing import Optional

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"[\s-]+")


def slugify(value: str) -> str:
    """
    Lower-case, drop anything that is not alphanumeric, collapse whitespace to hyphens.

    "Sarah & Tom Wedding" -> "sarah-tom-wedding"
    """
    cleaned = _NON_SLUG_CHARS.sub("", value.lower())
    return _WHITESPACE.sub("-", cleaned.strip()).strip("-")


def shoot_slug(title: str, suffix: str, year: Optional[int] = None) -> str:
    year = year or date.today().year
    parts = [part for part in (slugify(title), slugify(suffix), str(year)) if part]
    return "-".join(parts)
