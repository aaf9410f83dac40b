"""
Configuration management for gournal.
Loads environment variables and provides access to configuration settings.

Every setting can be overridden explicitly when the Config is built; otherwise
the environment (or a .env file) is consulted, then the built-in default.
"""
import logging
import os
from typing import Any, Optional

from dotenv import load_dotenv

# Configure logging
logger = logging.getLogger(__name__)


class Config:
    """Configuration settings for the blog server and its article store."""

    def __init__(self, **overrides: Any):
        """
        Initialize configuration by loading environment variables.

        Args:
            **overrides: Explicit values keyed by property name
                (e.g. port=8080, articles_dir="/tmp/articles")
        """
        load_dotenv()
        self._config = {key: value for key, value in overrides.items() if value is not None}

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """
        Get a configuration value by environment key.

        Args:
            key: Configuration key name
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        return os.getenv(key, default)

    def _setting(self, name: str, env_key: str, default: str) -> Any:
        """Resolve a setting from overrides, then the environment, then the default."""
        if name in self._config:
            return self._config[name]
        return self.get(env_key, default)

    @property
    def articles_dir(self) -> str:
        """Get the directory holding article JSON files."""
        return self._setting("articles_dir", "GOURNAL_ARTICLES_DIR", "articles")

    @property
    def templates_dir(self) -> str:
        """Get the directory holding HTML templates."""
        return self._setting("templates_dir", "GOURNAL_TEMPLATES_DIR", "templates")

    @property
    def public_dir(self) -> str:
        """Get the directory served for static assets."""
        return self._setting("public_dir", "GOURNAL_PUBLIC_DIR", "public")

    @property
    def host(self) -> str:
        """Get server host."""
        return self._setting("host", "GOURNAL_HOST", "127.0.0.1")

    @property
    def port(self) -> int:
        """Get server port."""
        return int(self._setting("port", "GOURNAL_PORT", "3000"))

    @property
    def article_storage_type(self) -> str:
        """Get the article storage backend ('local' or 'tigris')."""
        return str(self._setting("article_storage_type", "ARTICLE_STORAGE_TYPE", "local")).lower()
