"""
Slug generation for article titles.
"""
import re

_DISALLOWED = re.compile(r"[^a-z0-9 -]")
_SPACES = re.compile(r" +")
_HYPHENS = re.compile(r"-+")


def slugify(title: str) -> str:
    """
    Convert a title into a URL-safe slug.

    Lowercases the title, drops everything outside ``[a-z0-9 -]``, turns
    runs of spaces into a single hyphen, collapses repeated hyphens and trims
    leading/trailing spaces and hyphens.

    Args:
        title: Arbitrary article title

    Returns:
        The slug, possibly empty
    """
    slug = title.lower()
    slug = _DISALLOWED.sub("", slug)
    slug = _SPACES.sub("-", slug)
    slug = _HYPHENS.sub("-", slug)
    return slug.strip(" -")
