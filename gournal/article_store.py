"""
Abstract interface for article storage backends.

Defines the interface for creating, saving, loading and listing articles.
Implementations can store articles on local disk or in distributed storage
(Tigris/S3). Every backend keys articles by slug.
"""
from abc import ABC, abstractmethod
from typing import List

from gournal.article import Article


class ArticleStore(ABC):
    """Abstract base class for article storage backends."""

    def create(self, title: str, body: str) -> Article:
        """
        Build a new article with a slug derived from its title.

        The article is not persisted; call save() for that.

        Args:
            title: Article title
            body: Article body

        Returns:
            The new Article
        """
        return Article.new(title, body)

    @abstractmethod
    def save(self, article: Article) -> None:
        """
        Persist an article, overwriting any article with the same slug.

        Args:
            article: Article to store

        Raises:
            ArticleStoreError: If the article could not be written
        """

    @abstractmethod
    def load(self, slug: str) -> Article:
        """
        Load a single article by slug.

        Args:
            slug: The article's slug

        Returns:
            The stored Article

        Raises:
            ArticleNotFoundError: If no article is stored under the slug
            ArticleParseError: If the stored article is malformed
            ArticleStoreError: If storage could not be read
        """

    @abstractmethod
    def list_all(self) -> List[Article]:
        """
        Get every stored article, most recently modified first.

        A single unreadable article fails the whole listing.

        Returns:
            List of Articles

        Raises:
            ArticleStoreError: If storage could not be listed or any article failed to load
        """
