"""
Command line entry point: train a character model on a corpus file and print
generated text.

Usage:
    markov-lm corpus.txt --window 4 --seed 7 --length 300
    markov-lm corpus.txt --initial-text "Once upon" --length 120
    markov-lm reviews.csv --column review --clean --window 3
    markov-lm corpus.txt --config settings.json --dump
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import ModelConfig
from .corpus import iter_corpus
from .exceptions import MarkovModelError
from .language_model import LanguageModel
from .text_cleaning import CleanTextConfig

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="markov-lm",
        description="Generate text from a character-level Markov model trained on CORPUS.",
    )
    parser.add_argument("corpus", help="Text file (or .csv file) to train on")
    parser.add_argument("--config", help="JSON file with ModelConfig settings")
    parser.add_argument("--window", type=int, dest="window_length", help="Window length")
    parser.add_argument("--seed", type=int, help="Random seed for reproducible output")
    parser.add_argument("--initial-text", dest="initial_text",
                        help="Text to start from (default: the first window of the corpus)")
    parser.add_argument("--length", type=int, dest="target_length",
                        help="Total length of the generated text")
    parser.add_argument("--encoding", help="Corpus file encoding")
    parser.add_argument("--column", dest="csv_column", help="Text column of a CSV corpus")
    parser.add_argument("--clean", action="store_true", default=None,
                        help="Lowercase, strip accents and collapse whitespace first")
    parser.add_argument("--dump", action="store_true",
                        help="Print the trained window table instead of generating")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def resolve_config(args: argparse.Namespace) -> ModelConfig:
    """Merge the optional JSON config with explicit command line flags."""
    base = ModelConfig.from_json(args.config).to_dict() if args.config else {}
    overrides = {
        key: getattr(args, key)
        for key in ("window_length", "seed", "initial_text", "target_length",
                    "encoding", "csv_column", "clean")
        if getattr(args, key) is not None
    }
    base.update(overrides)
    return ModelConfig.from_dict(base)


def run(config: ModelConfig, corpus_path: str, dump: bool = False) -> str:
    clean = (
        CleanTextConfig(lowercase=True, strip_accents=True, normalize_whitespace=True)
        if config.clean else None
    )

    model = LanguageModel.from_config(config)
    model.train(iter_corpus(corpus_path, encoding=config.encoding,
                            column=config.csv_column, clean=clean))
    if dump:
        return model.describe()

    initial_text = config.initial_text
    if not initial_text:
        # Seed with the corpus head so the first window is known to the model.
        head = iter_corpus(corpus_path, encoding=config.encoding,
                           column=config.csv_column, clean=clean)
        initial_text = "".join(c for _, c in zip(range(config.window_length), head))

    return model.generate(initial_text, config.target_length)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        config = resolve_config(args)
        output = run(config, args.corpus, dump=args.dump)
    except (MarkovModelError, OSError, ValueError) as e:
        logger.error("%s", e)
        return 1

    sys.stdout.write(output)
    if not output.endswith("\n"):
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
