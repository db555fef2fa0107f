import logging
import os
import stat
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response
from fastapi.staticfiles import StaticFiles

from chill.models.media import CategoryConfig
from chill.services.enumerator import collect_media_groups
from chill.services.listing import render_listing

logger = logging.getLogger(__name__)

router = APIRouter()


def build_static_handlers(categories: tuple[CategoryConfig, ...]) -> list[StaticFiles]:
    """
    Create one static file handler per category, in configuration order.
    Directories are not checked here: a missing directory simply never matches.
    """
    return [
        StaticFiles(directory=category.directory, check_dir=False, follow_symlink=True)
        for category in categories
    ]


def get_categories(request: Request) -> tuple[CategoryConfig, ...]:
    """
    Dependency returning the categories loaded at startup.
    """
    return request.app.state.categories


def get_static_handlers(request: Request) -> list[StaticFiles]:
    return request.app.state.static_handlers


def normalize_request_path(path: str) -> str:
    # Same normalisation StaticFiles applies to its own mount paths
    return os.path.normpath(os.path.join(*path.split("/")))


def resolve_media_file(
    static_handlers: list[StaticFiles],
    path: str,
) -> Optional[tuple[StaticFiles, str, os.stat_result]]:
    """
    Find the first category directory holding a regular file at the requested path.

    Args:
        static_handlers: One handler per category, in configuration order.
        path: The request path without its leading "/".

    Returns:
        The handler, absolute file path and stat result of the first match,
        or None when no category contains such a file. Paths escaping a
        category directory never match.
    """
    rel_path = normalize_request_path(path)

    for handler in static_handlers:
        try:
            full_path, stat_result = handler.lookup_path(rel_path)
        except (OSError, ValueError) as e:
            # Unreadable or invalid names (embedded NUL bytes) count as "not here"
            logger.debug("Lookup of %s failed: %s", rel_path, e)
            continue

        if stat_result is not None and stat.S_ISREG(stat_result.st_mode):
            return handler, full_path, stat_result

    return None


@router.api_route("/{file_path:path}", methods=["GET", "HEAD"])
def serve_media(
    request: Request,
    file_path: str,
    categories: tuple[CategoryConfig, ...] = Depends(get_categories),
    static_handlers: list[StaticFiles] = Depends(get_static_handlers),
) -> Response:
    """
    Serve a media file if one exists at the path in any category,
    otherwise render the full media listing.
    There are no 404s: every unmatched path falls through to the listing.
    """
    match = resolve_media_file(static_handlers, file_path)
    if match is not None:
        handler, full_path, stat_result = match
        return handler.file_response(full_path, stat_result, request.scope)

    # ChillError subclasses are turned into 500s by the app handler
    groups = collect_media_groups(list(categories))
    return render_listing(request, groups)
