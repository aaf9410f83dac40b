"""
Exceptions raised by article stores and the template renderer.
"""


class ArticleStoreError(Exception):
    """Storage could not be read or written."""


class ArticleNotFoundError(ArticleStoreError):
    """No article is stored under the requested slug."""

    def __init__(self, slug: str, message: str = ""):
        self.slug = slug
        super().__init__(message or f"article not found: {slug!r}")


class ArticleParseError(ArticleStoreError):
    """A stored article is not valid JSON or lacks required fields."""


class TemplateRenderError(Exception):
    """A template is missing, malformed or does not fit the supplied data."""
