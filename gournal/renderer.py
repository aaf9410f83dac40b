"""
HTML rendering for blog pages.

Each page template extends the shared layout.html. Templates are read from
disk on every render so edits show up without a restart.
"""
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError, select_autoescape

from gournal.errors import TemplateRenderError

LAYOUT_TEMPLATE = "layout.html"


class TemplateRenderer:
    """Renders named page templates inside the shared layout."""

    def __init__(self, templates_dir: str = "templates"):
        self.templates_dir = templates_dir
        self.env = Environment(
            loader=FileSystemLoader(templates_dir),
            autoescape=select_autoescape(["html"]),
            undefined=StrictUndefined,
            cache_size=0,
        )

    def render(self, name: str, **context: Any) -> str:
        """
        Render the page template <name>.html merged into the layout.

        Args:
            name: Page template name without extension (e.g. "home")
            **context: Data made available to the templates

        Returns:
            Rendered HTML

        Raises:
            TemplateRenderError: If a template is missing or does not fit the data
        """
        try:
            # Fail on a missing layout even if the page template forgets to extend it
            self.env.get_template(LAYOUT_TEMPLATE)
            template = self.env.get_template(f"{name}.html")
            return template.render(**context)
        except TemplateError as exc:
            raise TemplateRenderError(f"template {name!r}: {exc}") from exc
