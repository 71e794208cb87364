"""
data_loader.py

Reads input text into memory: a stream, one file, or every .txt file under a
folder.
"""

import logging
import os
from typing import TextIO

logger = logging.getLogger(__name__)


def read_stream(stream: TextIO) -> str:
    return stream.read()


def load_text(path: str) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def load_corpus(data_dir: str) -> str:
    """
    Read and concatenate all .txt files under data_dir, in sorted path order.
    """
    if not os.path.isdir(data_dir):
        raise FileNotFoundError(f"Data directory not found: {data_dir}")

    texts = []
    for root, dirs, files in os.walk(data_dir):
        dirs.sort()
        for fname in sorted(files):
            if not fname.lower().endswith(".txt"):
                continue
            path = os.path.join(root, fname)
            texts.append(load_text(path))
    logger.info(f"Loaded {len(texts)} text file(s) from '{data_dir}'")
    return "\n".join(texts)
