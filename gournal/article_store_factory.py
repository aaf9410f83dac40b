"""
Factory function for creating article stores.
"""
from typing import Optional

from gournal.article_store import ArticleStore
from gournal.config import Config
from gournal.local_disk_article_store import LocalDiskArticleStore
from gournal.tigris_article_store import TigrisArticleStore


def create_article_store(config: Optional[Config] = None) -> ArticleStore:
    """
    Create an article store based on configuration.

    Reads Config.article_storage_type (ARTICLE_STORAGE_TYPE) to determine
    which implementation to use:
    - 'local' or unset: LocalDiskArticleStore (default)
    - 'tigris': TigrisArticleStore

    Args:
        config: Configuration to read (default: a fresh Config)

    Returns:
        ArticleStore: Configured article store instance
    """
    config = config or Config()

    if config.article_storage_type == 'tigris':
        return TigrisArticleStore()
    else:
        # Default to local disk storage
        return LocalDiskArticleStore(articles_dir=config.articles_dir)
