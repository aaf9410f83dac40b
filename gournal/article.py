"""
Article model.

An article is a title, a body and a slug. The slug is derived from the title
when the article is created and is used as the permalink and the storage key.
"""
from dataclasses import dataclass
from typing import Any, Dict

from gournal.errors import ArticleParseError
from gournal.slug import slugify


@dataclass
class Article:
    """A single blog post."""
    title: str
    body: str
    slug: str

    @classmethod
    def new(cls, title: str, body: str) -> "Article":
        """Create an article, deriving its slug from the title."""
        return cls(title=title, body=body, slug=slugify(title))

    @classmethod
    def from_dict(cls, data: Any) -> "Article":
        """
        Build an article from its stored JSON representation.

        Args:
            data: Decoded JSON document with Title, Body and Slug keys

        Returns:
            Article instance

        Raises:
            ArticleParseError: If the document does not have the expected shape
        """
        if not isinstance(data, dict):
            raise ArticleParseError(f"expected a JSON object, got {type(data).__name__}")
        try:
            title, body, slug = data["Title"], data["Body"], data["Slug"]
        except KeyError as exc:
            raise ArticleParseError(f"missing field {exc.args[0]!r}") from exc
        if not all(isinstance(value, str) for value in (title, body, slug)):
            raise ArticleParseError("Title, Body and Slug must be strings")
        return cls(title=title, body=body, slug=slug)

    def to_dict(self) -> Dict[str, str]:
        """Get the stored JSON representation (field casing is part of the file format)."""
        return {"Title": self.title, "Body": self.body, "Slug": self.slug}

    def __str__(self) -> str:
        return f"{self.title} ({self.slug})"
