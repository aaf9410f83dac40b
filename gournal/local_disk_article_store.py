"""
Local disk implementation of article storage.

Stores each article as its own JSON file on the local filesystem.
Default location: articles/<slug>.json
"""
import json
import os
from typing import List

from gournal.article import Article
from gournal.article_store import ArticleStore
from gournal.errors import ArticleNotFoundError, ArticleParseError, ArticleStoreError
from gournal.file_utils import get_mtime, load_json_file, save_json_file

ARTICLE_SUFFIX = ".json"


class LocalDiskArticleStore(ArticleStore):
    """
    Local disk implementation of article storage.

    One file per article, named after the article's slug.
    """

    def __init__(self, articles_dir: str = "articles"):
        """
        Initialize local disk article store.

        Args:
            articles_dir: Directory holding the article files (default: "articles")
        """
        self.articles_dir = articles_dir
        os.makedirs(self.articles_dir, exist_ok=True)

    def _get_filepath(self, slug: str) -> str:
        """Get the full file path for an article."""
        return os.path.join(self.articles_dir, slug + ARTICLE_SUFFIX)

    def save(self, article: Article) -> None:
        """
        Write an article to <articles_dir>/<slug>.json.

        Args:
            article: Article to store
        """
        try:
            save_json_file(self._get_filepath(article.slug), article.to_dict(), ensure_dir=False)
        except OSError as exc:
            raise ArticleStoreError(str(exc)) from exc

    def load(self, slug: str) -> Article:
        """
        Read an article from <articles_dir>/<slug>.json.

        Args:
            slug: The article's slug

        Returns:
            The stored Article
        """
        # Slugs never contain separators; anything else would escape the directory
        if os.path.basename(slug) != slug or os.sep in slug:
            raise ArticleNotFoundError(slug)

        filepath = self._get_filepath(slug)
        try:
            data = load_json_file(filepath)
        except FileNotFoundError as exc:
            raise ArticleNotFoundError(slug, f"open {filepath}: no such file or directory") from exc
        except json.JSONDecodeError as exc:
            raise ArticleParseError(f"{filepath}: {exc}") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise ArticleStoreError(str(exc)) from exc
        return Article.from_dict(data)

    def list_all(self) -> List[Article]:
        """
        Load every article in the directory, newest modification first.

        Returns:
            List of Articles
        """
        try:
            entries = []
            for name in os.listdir(self.articles_dir):
                filepath = os.path.join(self.articles_dir, name)
                if not name.endswith(ARTICLE_SUFFIX) or not os.path.isfile(filepath):
                    continue
                entries.append((get_mtime(filepath), name[:-len(ARTICLE_SUFFIX)]))
        except OSError as exc:
            raise ArticleStoreError(str(exc)) from exc

        entries.sort(key=lambda entry: entry[0], reverse=True)
        return [self.load(slug) for _, slug in entries]
