"""
Blog web application.
Lists, shows, creates and edits articles, rendering HTML pages from templates
and serving everything else from the public directory.
"""
import logging
import os
from typing import Optional

from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles

from gournal.article_store import ArticleStore
from gournal.article_store_factory import create_article_store
from gournal.config import Config
from gournal.errors import ArticleNotFoundError, ArticleStoreError, TemplateRenderError
from gournal.renderer import TemplateRenderer

# Configure blog logger
logger = logging.getLogger('gournal')
logger.setLevel(logging.INFO)

# Add console handler if not already present
if not logger.handlers:
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

NOT_FOUND_BODY = "404 page not found"


def sanitize_log_input(value: str) -> str:
    """
    Sanitize user input for logging to prevent log injection attacks.
    Removes newlines and other control characters that could be used for log forging.

    Args:
        value: The user input to sanitize

    Returns:
        Sanitized string safe for logging
    """
    if not isinstance(value, str):
        value = str(value)
    sanitized = value.replace('\n', '_').replace('\r', '_').replace('\t', '_')
    # Truncate to reasonable length to prevent log flooding
    return sanitized[:200]


def article_url(slug: str) -> str:
    """Get the permalink path for an article."""
    return f"/articles/{slug}"


def create_blog_app(
    config: Optional[Config] = None,
    article_store: Optional[ArticleStore] = None,
    renderer: Optional[TemplateRenderer] = None,
) -> FastAPI:
    """
    Create the blog FastAPI application.

    Args:
        config: Configuration (defaults to Config() built from the environment)
        article_store: Optional article store instance (defaults to factory-created)
        renderer: Optional template renderer (defaults to one reading config.templates_dir)

    Returns:
        FastAPI application instance
    """
    config = config or Config()
    if article_store is None:
        article_store = create_article_store(config)
    if renderer is None:
        renderer = TemplateRenderer(templates_dir=config.templates_dir)

    app = FastAPI()  # pylint: disable=redefined-outer-name

    # ================== RESPONSES ==================
    def render_page(request_line: str, name: str, **context):
        """Render a page, turning template failures into a 500."""
        try:
            html_content = renderer.render(name, **context)
        except TemplateRenderError as e:
            logger.error(f"{request_line} - 500 {sanitize_log_input(str(e))}")
            return PlainTextResponse(str(e), status_code=500)
        logger.info(f"{request_line} - 200")
        return HTMLResponse(content=html_content)

    def store_error(request_line: str, error: ArticleStoreError) -> PlainTextResponse:
        """Map a store failure to a plain-text response."""
        if isinstance(error, ArticleNotFoundError):
            logger.warning(f"{request_line} - 404 {sanitize_log_input(str(error))}")
            return PlainTextResponse(NOT_FOUND_BODY, status_code=404)
        logger.error(f"{request_line} - 500 {sanitize_log_input(str(error))}")
        return PlainTextResponse(str(error), status_code=500)

    def redirect(request_line: str, url: str) -> RedirectResponse:
        logger.info(f"{request_line} - 302 Redirecting to {sanitize_log_input(url)}")
        return RedirectResponse(url=url, status_code=302)

    # ================== HANDLERS ==================
    async def home():
        """Home page listing recent articles."""
        request_line = "GET /"
        logger.info(request_line)
        try:
            articles = article_store.list_all()
        except ArticleStoreError as e:
            # An article vanishing mid-listing is still a listing failure, not a 404
            logger.error(f"{request_line} - 500 {sanitize_log_input(str(e))}")
            return PlainTextResponse(str(e), status_code=500)
        return render_page(request_line, "home", articles=articles)

    async def new_article():
        """Empty article creation form."""
        request_line = "GET /articles/new"
        logger.info(request_line)
        return render_page(request_line, "new_article")

    async def create_article(title: str = Form(""), body: str = Form("")):
        """Create an article from form input and redirect to it."""
        request_line = "POST /articles"
        logger.info(request_line)
        article = article_store.create(title, body)
        try:
            article_store.save(article)
        except ArticleStoreError as e:
            return store_error(request_line, e)
        return redirect(request_line, article_url(article.slug))

    async def show_article(slug: str):
        """Show a single article."""
        request_line = f"GET {article_url(sanitize_log_input(slug))}"
        logger.info(request_line)
        try:
            article = article_store.load(slug)
        except ArticleStoreError as e:
            return store_error(request_line, e)
        return render_page(request_line, "article", article=article)

    async def show_untitled_article():
        """Show the article saved from an empty title (its slug is empty)."""
        return await show_article("")

    async def edit_article(slug: str):
        """Edit form for an existing article."""
        request_line = f"GET {article_url(sanitize_log_input(slug))}/edit"
        logger.info(request_line)
        try:
            article = article_store.load(slug)
        except ArticleStoreError as e:
            return store_error(request_line, e)
        return render_page(request_line, "edit_article", article=article)

    async def update_article(request: Request, slug: str, title: str = Form(""), body: str = Form("")):
        """Overwrite an article's title and body; the slug stays fixed."""
        request_line = f"{request.method} {article_url(sanitize_log_input(slug))}"
        logger.info(request_line)
        try:
            article = article_store.load(slug)
            article.title = title
            article.body = body
            article_store.save(article)
        except ArticleStoreError as e:
            return store_error(request_line, e)
        return redirect(request_line, article_url(article.slug))

    # ================== ROUTES ==================
    # Order matters: /articles/new must win over /articles/{slug}
    routes = [
        ("/", ["GET"], home),
        ("/articles/new", ["GET"], new_article),
        ("/articles", ["POST"], create_article),
        ("/articles/", ["GET"], show_untitled_article),
        ("/articles/{slug}", ["GET"], show_article),
        ("/articles/{slug}/edit", ["GET"], edit_article),
        # HTML forms cannot send PUT, so the edit form POSTs here
        ("/articles/{slug}", ["PUT", "POST"], update_article),
    ]
    for path, methods, handler in routes:
        app.add_api_route(path, handler, methods=methods)

    if os.path.isdir(config.public_dir):
        app.mount("/", StaticFiles(directory=config.public_dir, html=True), name="public")
    else:
        logger.warning(f"Public directory {config.public_dir!r} not found, static files disabled")

    return app
