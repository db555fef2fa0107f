import logging
from pathlib import Path
from typing import Iterable

from chill.core.errors import ConfigError
from chill.models.media import CategoryConfig

logger = logging.getLogger(__name__)


def parse_media_directories(lines: Iterable[str], source: str = "<config>") -> list[CategoryConfig]:
    """
    Parse the INI-like category format into an ordered list of categories.

    Example:
        [Movies]
        Directory=/media/movies
        FileTypes=.mp4, .mkv

    Args:
        lines: The raw lines of the configuration file.
        source: Name used in error messages (usually the file path).

    Returns:
        list[CategoryConfig]: Categories in the order their headers appear.

    Raises:
        ConfigError: If a Key=Value line appears before the first [Name] header.
    """
    # Sections are collected as plain dicts and frozen once the file is read
    sections: list[dict] = []

    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()

        # Skip blank lines and comments
        if not line or line.startswith("#"):
            continue

        # [Name] opens a new category; duplicate names are allowed
        if line.startswith("[") and line.endswith("]"):
            sections.append({"name": line[1:-1]})
            continue

        key, sep, value = line.partition("=")
        if not sep:
            continue

        if not sections:
            raise ConfigError(f"{source}:{lineno}: '{line}' appears before any [Category] header")

        key = key.strip()
        value = value.strip()
        current = sections[-1]

        if key == "Directory":
            current["directory"] = value
        elif key == "FileTypes":
            current["file_types"] = [t.strip() for t in value.split(",")]
        # Any other key is ignored

    return [CategoryConfig(**section) for section in sections]


def load_media_directories(config_file: Path) -> list[CategoryConfig]:
    """
    Read and parse the category configuration file.
    OSError (missing or unreadable file) propagates to the caller.
    """
    with open(config_file, encoding="utf-8") as fh:
        categories = parse_media_directories(fh, source=str(config_file))

    logger.info("Loaded %d media categories from %s", len(categories), config_file)
    return categories
