import logging
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

# Client libraries that are chatty at INFO
QUIET_LOGGERS = ("google", "urllib3")


def setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr so stdout only carries the export."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
