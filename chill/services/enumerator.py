import logging
import os
from typing import Iterator

from chill.core.errors import EnumerationError
from chill.models.media import CategoryConfig, MediaFile, MediaGroup

logger = logging.getLogger(__name__)


def file_extension(filename: str) -> str:
    """
    Return the suffix starting at the last dot of the base name ("" if none).
    Unlike os.path.splitext, a dotfile such as ".mp4" has the extension ".mp4".
    """
    idx = filename.rfind(".")
    return filename[idx:] if idx >= 0 else ""


def is_allowed_file_type(filename: str, file_types: tuple[str, ...]) -> bool:
    """
    Check if the lower-cased extension exactly matches one of the allowed types.
    """
    return file_extension(filename).lower() in file_types


def _relative_path(path: str, root: str) -> str:
    try:
        rel = os.path.relpath(path, root)
    except ValueError:
        # Different drives on Windows; keep the entry with an empty path
        return ""
    return rel.replace(os.sep, "/")


def iter_media_files(category: CategoryConfig) -> Iterator[MediaFile]:
    """
    Lazily walk a category directory and yield every qualifying file.

    Directories are never yielded. Files come out in traversal order.
    Errors below the root (permission denied, vanished entries) are logged
    and the affected subtree is skipped. Files whose names are not valid
    UTF-8 are logged and skipped.

    Raises:
        EnumerationError: If the category root itself cannot be read.
    """
    root = category.directory

    # os.walk hides errors behind onerror; open the root up front so a
    # missing or unreadable directory fails the request instead
    try:
        with os.scandir(root):
            pass
    except OSError as e:
        raise EnumerationError(f"Cannot read directory of category '{category.name}': {e}") from e

    def on_error(err: OSError) -> None:
        logger.warning("Error accessing file: %s", err)

    for dirpath, _dirnames, filenames in os.walk(root, onerror=on_error):
        for filename in filenames:
            if not is_allowed_file_type(filename, category.file_types):
                continue
            path = os.path.join(dirpath, filename)
            rel_path = _relative_path(path, root)
            try:
                # Undecodable bytes come back as surrogates and cannot be rendered
                filename.encode("utf-8")
                rel_path.encode("utf-8")
            except UnicodeEncodeError as e:
                logger.warning("Error accessing file: %r is not valid UTF-8 (%s)", path, e)
                continue
            yield MediaFile(name=filename, path=rel_path)


def collect_media_groups(categories: list[CategoryConfig]) -> list[MediaGroup]:
    """
    Build one MediaGroup per category, in configuration order.
    Every call walks the filesystem from scratch.
    """
    groups = []
    for category in categories:
        groups.append(MediaGroup(
            directory=category.directory,
            files=list(iter_media_files(category)),
        ))
    return groups
