class ChillError(Exception):
    """Base class for server errors; carries the HTTP status used when it reaches a request."""

    default_status = 500

    def __init__(self, message: str = "", *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code if status_code is not None else self.default_status


class ConfigError(ChillError):
    """The category configuration file is malformed."""


class EnumerationError(ChillError):
    """A category directory could not be walked."""


class RenderError(ChillError):
    """The listing page template failed to render."""
