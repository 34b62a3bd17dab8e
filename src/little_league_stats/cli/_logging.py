import logging
import sys

# Pillow logs every PNG chunk at DEBUG; pytesseract logs each subprocess call.
_OCR_LOGGERS = ("PIL", "pytesseract")

_FORMAT = "%(levelname)-8s %(message)s"
# Parser debugging needs to know which recognizer spoke.
_VERBOSE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s:%(lineno)d | %(message)s"


def configure_logging(*, verbose: bool = False) -> None:
    """Send log records to stderr, replacing any handler from an earlier call.

    Plain runs show INFO and above as short lines, which is what a batch ingest
    prints per box score. ``verbose`` switches to DEBUG with timestamps and
    source locations, and lets the OCR libraries log too.
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG if verbose else logging.INFO)

    handler = logging.StreamHandler(sys.stderr)
    if verbose:
        handler.setFormatter(logging.Formatter(_VERBOSE_FORMAT, datefmt="%H:%M:%S"))
    else:
        handler.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(handler)

    for name in _OCR_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET if verbose else logging.WARNING)
