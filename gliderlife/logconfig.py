import logging
import sys


class ConsoleFormatter(logging.Formatter):
    """Formats records as ``LEVEL logger.name message``, with any exception ahead of the message."""

    def format(self, record):
        message = record.getMessage()
        thrown = ""
        if record.exc_info and record.exc_info[1] is not None:
            exc = record.exc_info[1]
            thrown = f"{type(exc).__name__}: {exc}\n"
        return f"{record.levelname} {record.name} {thrown}{message}"


def configure_logging(level=logging.INFO, stream=None):
    """
    Replace all root handlers with a single console handler.

    Call once before the driver starts. Returns the installed handler.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(logging.NOTSET)
    handler.setFormatter(ConsoleFormatter())
    root.addHandler(handler)
    root.setLevel(level)
    return handler
