"""
Configuration for the character-level Markov model.

Holds the construction parameters of a LanguageModel together with the
generation and corpus settings used by the command line entry point.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Dict, Optional


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def check_window_length(window_length) -> None:
    if not _is_int(window_length) or window_length < 1:
        raise ValueError(f"window_length must be >= 1, got {window_length!r}")


def check_seed(seed) -> None:
    """Seeds are None or any int; negative ints are folded into range by the model."""
    if seed is not None and not _is_int(seed):
        raise ValueError(f"seed must be an integer, got {seed!r}")


@dataclass
class ModelConfig:
    """
    Configuration class for training and sampling.

    Attributes:
        window_length: Number of preceding characters that condition the next one
        seed: Seed for the model's random source; None gives non-reproducible output
        initial_text: Text that generation starts from (empty: use the corpus head)
        target_length: Total length of the generated text, initial text included
        encoding: Encoding used to decode corpus files
        csv_column: Column holding the text when the corpus is a CSV file
        clean: Whether to normalize the corpus with clean_text before training
    """

    window_length: int = 4
    seed: Optional[int] = None

    # Generation
    initial_text: str = ""
    target_length: int = 200

    # Corpus
    encoding: str = "utf-8"
    csv_column: str = "text"
    clean: bool = False

    def __post_init__(self):
        """Validate settings; JSON configs can carry any type."""
        check_window_length(self.window_length)
        check_seed(self.seed)
        if not _is_int(self.target_length) or self.target_length < 0:
            raise ValueError(f"target_length must be >= 0, got {self.target_length!r}")
        for name in ("initial_text", "encoding", "csv_column"):
            if not isinstance(getattr(self, name), str):
                raise ValueError(f"{name} must be a string, got {getattr(self, name)!r}")
        if not isinstance(self.clean, bool):
            raise ValueError(f"clean must be true or false, got {self.clean!r}")

    @classmethod
    def from_dict(cls, config_dict: Dict) -> 'ModelConfig':
        """Create ModelConfig instance from dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config_dict.items() if k in known})

    @classmethod
    def from_json(cls, path: str | Path) -> 'ModelConfig':
        """Load a ModelConfig from a JSON object stored at ``path``."""
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{path}: expected a JSON object")
        return cls.from_dict(data)

    def to_dict(self) -> Dict:
        """Convert ModelConfig to dictionary."""
        return asdict(self)
