"""
Character-level Markov Language Model

A fixed-order Markov chain over characters. Training counts, for every window
of ``window_length`` characters seen in the corpus, which characters follow it;
generation extends a text by repeatedly sampling the next character from the
distribution of its trailing window.

Usage:
    model = LanguageModel(window_length=3, seed=42)
    model.train(corpus_text)
    print(model.generate("The", 200))
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, Iterator, Optional

import numpy as np

from .config import ModelConfig, check_seed, check_window_length
from .corpus import read_corpus_chars
from .exceptions import ModelAlreadyTrainedError
from .frequency_table import FrequencyTable
from .text_cleaning import CleanTextConfig
from .windows import sliding_windows, trailing_window

logger = logging.getLogger(__name__)


class LanguageModel:
    """
    Maps each window of preceding characters to the FrequencyTable of the
    characters that followed it in the corpus.

    The mapping is empty until ``train`` is called, is built exactly once, and
    is only read afterwards. The random source belongs to this instance alone:
    two models with the same seed, trained on the same corpus, generate the
    same texts.
    """

    def __init__(self, window_length: int, seed: Optional[int] = None):
        """
        Args:
            window_length: Number of preceding characters used as context (>= 1)
            seed: Seed for reproducible sampling, any int; None draws fresh OS entropy
        """
        check_window_length(window_length)
        check_seed(seed)

        self.window_length = window_length
        self.seed = seed
        # numpy seeds must be non-negative; fold negative ints into 64 bits.
        self._rng = np.random.default_rng(None if seed is None else seed % 2**64)
        self._tables: Dict[str, FrequencyTable] = {}
        self._trained = False

    @classmethod
    def from_config(cls, config: ModelConfig) -> 'LanguageModel':
        return cls(config.window_length, seed=config.seed)

    @property
    def is_trained(self) -> bool:
        return self._trained

    def train(self, chars: Iterable[str]) -> None:
        """
        Build the window -> FrequencyTable mapping from a character stream.

        Args:
            chars: Any iterable of single characters (a str, a corpus reader, ...)

        Raises:
            InsufficientInputError: The stream holds fewer than window_length
                characters. The model stays untrained.
            ModelAlreadyTrainedError: The model was trained before.
        """
        if self._trained:
            raise ModelAlreadyTrainedError("model is already trained; build a new LanguageModel")

        tables: Dict[str, FrequencyTable] = {}
        n_chars = self.window_length

        for window, c in sliding_windows(chars, self.window_length):
            table = tables.get(window)
            if table is None:
                table = tables[window] = FrequencyTable()
            table.update(c)
            n_chars += 1

        for table in tables.values():
            table.calculate_probabilities()

        self._tables = tables
        self._trained = True
        logger.info(
            "Trained on %d characters: %d distinct windows of length %d",
            n_chars, len(tables), self.window_length,
        )

    def train_file(
        self,
        path: str | Path,
        encoding: str = "utf-8",
        clean: Optional[CleanTextConfig] = None,
    ) -> None:
        """Train on the characters of a text file."""
        self.train(read_corpus_chars(path, encoding=encoding, clean=clean))

    def generate(self, initial_text: str, target_length: int) -> str:
        """
        Extend ``initial_text`` one sampled character at a time.

        Stops when the text reaches ``target_length`` characters, or earlier
        when its trailing window was never seen during training; in that case
        the text produced so far is returned. ``initial_text`` is returned
        unchanged if it is shorter than the window or already long enough.
        """
        if self.window_length > len(initial_text) or len(initial_text) >= target_length:
            return initial_text

        chars = list(initial_text)
        window = trailing_window(initial_text, self.window_length)

        while len(chars) < target_length:
            table = self._tables.get(window)
            if table is None:
                logger.debug(
                    "Window %r not in model; stopping at %d of %d characters",
                    window, len(chars), target_length,
                )
                break
            c = table.sample_char(self._rng.random())
            chars.append(c)
            window = window[1:] + c

        return "".join(chars)

    def table_for(self, window: str) -> Optional[FrequencyTable]:
        """Return a copy of the FrequencyTable of ``window``, or None if it was never seen."""
        table = self._tables.get(window)
        return None if table is None else table.copy()

    def describe(self) -> str:
        """Diagnostic dump: one line per window, in mapping order."""
        return "".join(f"{window!r} : {table}\n" for window, table in self._tables.items())

    def __contains__(self, window: object) -> bool:
        return window in self._tables

    def __len__(self) -> int:
        return len(self._tables)

    def __iter__(self) -> Iterator[str]:
        return iter(self._tables)

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return (
            f"LanguageModel(window_length={self.window_length}, seed={self.seed!r}, "
            f"windows={len(self._tables)}, trained={self._trained})"
        )
