import logging
from pathlib import Path
from urllib.parse import quote

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError

from chill.core.errors import RenderError
from chill.models.media import MediaGroup

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
PAGE_TITLE = "Chill Media Player"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

# Relative paths become URL paths in href attributes; "/" separators are kept
templates.env.filters["urlpath"] = lambda path: quote(path, safe="/")


def render_listing(request: Request, groups: list[MediaGroup]) -> HTMLResponse:
    """
    Render the grouped media listing page.

    Raises:
        RenderError: If the template cannot be loaded or rendered.
    """
    try:
        return templates.TemplateResponse(
            request,
            "index.html",
            {"title": PAGE_TITLE, "groups": groups},
        )
    except TemplateError as e:
        logger.error("Error rendering listing template: %s", e)
        raise RenderError(f"Error rendering listing: {e}") from e
