"""
utils.py

Common utilities: logging setup and writing results.
"""

import io
import logging
import os
import sys

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(log_file: str = None, level: int = logging.INFO):
    """
    Set up logging to stderr (and optionally to a file). Standard output is
    left for codec output. Calling it again replaces the handlers it added.
    """
    root = logging.getLogger()
    root.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    for handler in list(root.handlers):
        if getattr(handler, "_rank_codec", False):
            root.removeHandler(handler)
            handler.close()

    # Console handler
    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(level)
    ch.setFormatter(formatter)
    ch._rank_codec = True
    root.addHandler(ch)

    # File handler
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(formatter)
        fh._rank_codec = True
        root.addHandler(fh)


def write_output(text: str, path: str = None):
    """
    Write text plus a trailing newline to path, or to stdout when path is None.
    """
    if path is None:
        sys.stdout.write(text + "\n")
        sys.stdout.flush()
        return
    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text + "\n")
    logging.info(f"Wrote output to {path}")


def use_utf8_streams():
    """
    Read stdin and write stdout as UTF-8 whatever the locale says, so piped
    text tokenizes the same way as a file read with --input.
    """
    for stream in (sys.stdin, sys.stdout):
        if isinstance(stream, io.TextIOWrapper):
            stream.reconfigure(encoding="utf-8")
