from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pandas as pd

from .text_cleaning import CleanTextConfig, clean_text

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 64 * 1024


def read_corpus_chars(
    path: str | Path,
    *,
    encoding: str = "utf-8",
    clean: CleanTextConfig | None = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Iterator[str]:
    """Yield the characters of a text file one at a time.

    The file is decoded in chunks so large corpora are never held in memory,
    unless ``clean`` is given: normalization works on the whole text.
    """

    if chunk_size <= 0:
        raise ValueError("chunk_size must be >= 1")

    logger.info("Reading corpus %s", path)
    # newline="" keeps \r\n as written; the model learns line endings too.
    with open(path, "r", encoding=encoding, newline="") as f:
        if clean is not None:
            yield from clean_text(f.read(), clean)
            return
        while True:
            chunk = f.read(chunk_size)
            if not chunk:
                break
            yield from chunk


def load_corpus_csv(
    path: str | Path,
    column: str = "text",
    separator: str = "\n",
    encoding: str = "utf-8",
) -> str:
    """Join the non-null values of one CSV column into a single corpus string."""

    df = pd.read_csv(path, encoding=encoding)
    if column not in df.columns:
        raise ValueError(f"CSV must have a column named {column!r}")
    logger.info("Read %d rows from %s", len(df), path)
    return separator.join(df[column].dropna().astype(str).tolist())


def iter_corpus(
    path: str | Path,
    *,
    encoding: str = "utf-8",
    column: str = "text",
    clean: CleanTextConfig | None = None,
) -> Iterator[str]:
    """Character stream for ``path``: CSV files by column, anything else as text."""

    if Path(path).suffix.lower() == ".csv":
        text = load_corpus_csv(path, column=column, encoding=encoding)
        if clean is not None:
            text = clean_text(text, clean)
        return iter(text)
    return read_corpus_chars(path, encoding=encoding, clean=clean)
