"""Character-level fixed-order Markov language model.

Train a LanguageModel on any character stream (see `corpus` for file readers)
and sample new text from it.
"""

__version__ = "0.1.0"

from .config import ModelConfig
from .exceptions import (
    EmptyTableError,
    InsufficientInputError,
    MarkovModelError,
    ModelAlreadyTrainedError,
    ProbabilitiesNotCalculatedError,
)
from .frequency_table import CharCount, FrequencyTable
from .language_model import LanguageModel

__all__ = [
    "CharCount",
    "EmptyTableError",
    "FrequencyTable",
    "InsufficientInputError",
    "LanguageModel",
    "MarkovModelError",
    "ModelAlreadyTrainedError",
    "ModelConfig",
    "ProbabilitiesNotCalculatedError",
]
