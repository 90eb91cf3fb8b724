from __future__ import annotations

import re

from slugify import slugify


def slugify_name(name: str, fallback: str = "timetable") -> str:
    """Transliterate and slugify names to a filesystem-safe representation."""

    cleaned = name.strip()
    slug = slugify(cleaned, lowercase=True, separator="-")
    slug = re.sub(r"-+", "-", slug)
    return slug or fallback


__all__ = ["slugify_name"]
