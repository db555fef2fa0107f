import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger once for the whole process.
    Modules log through logging.getLogger(__name__).
    """
    logging.basicConfig(
        level=level.upper(),
        format=LOG_FORMAT,
    )
