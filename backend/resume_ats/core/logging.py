import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure root logging once for the API process.
    Modules only ever call logging.getLogger(__name__).
    """
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level.upper())
        return

    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)

    # httpx logs every request line at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
