#!/usr/bin/env python
"""
Run the blog server.
"""
import uvicorn

from blog import create_blog_app, logger
from gournal.config import Config


def main():
    """Run the blog server."""
    # Load configuration
    config = Config()

    app = create_blog_app(config=config)

    logger.info(f"Serving articles from {config.articles_dir}")
    logger.info(f"Listening on port {config.port}...")

    # Run uvicorn server
    uvicorn.run(
        app,
        host=config.host,
        port=config.port,
        log_level="info"
    )


if __name__ == "__main__":
    main()
