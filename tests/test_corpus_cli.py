"""
Tests for configuration, corpus readers, text cleaning and the command line.
"""

import io
import json
import shutil
import tempfile
import unittest
import sys
from contextlib import redirect_stdout
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from markov_lm.cli import main, resolve_config, build_parser
from markov_lm.config import ModelConfig
from markov_lm.corpus import iter_corpus, load_corpus_csv, read_corpus_chars
from markov_lm.text_cleaning import CleanTextConfig, clean_text


class TempDirTestCase(unittest.TestCase):
    """Provides a scratch directory removed after each test."""

    def setUp(self):
        """Create the scratch directory."""
        self.tmp = Path(tempfile.mkdtemp())

    def tearDown(self):
        shutil.rmtree(self.tmp)

    def write(self, name, text, encoding="utf-8"):
        path = self.tmp / name
        with open(path, "w", encoding=encoding, newline="") as f:
            f.write(text)
        return path


class TestModelConfig(TempDirTestCase):
    """Tests for ModelConfig."""

    def test_default_config(self):
        """Test default configuration creation."""
        config = ModelConfig()
        self.assertEqual(config.window_length, 4)
        self.assertIsNone(config.seed)
        self.assertEqual(config.target_length, 200)
        self.assertEqual(config.encoding, "utf-8")
        self.assertFalse(config.clean)

    def test_validation(self):
        """Non-positive windows and negative lengths are rejected."""
        with self.assertRaises(ValueError):
            ModelConfig(window_length=0)
        with self.assertRaises(ValueError):
            ModelConfig(target_length=-1)
        with self.assertRaises(ValueError):
            ModelConfig(window_length=True)

    def test_seed_validation(self):
        """Any int seeds the model; other types are rejected."""
        self.assertEqual(ModelConfig(seed=-1).seed, -1)
        for bad in ("7", 1.5, True):
            with self.assertRaises(ValueError):
                ModelConfig(seed=bad)

    def test_type_validation(self):
        """Values loaded from JSON must have the declared types."""
        for bad in ({"clean": "false"}, {"clean": 1}, {"initial_text": 5},
                    {"encoding": None}, {"csv_column": ["text"]}):
            with self.assertRaises(ValueError):
                ModelConfig.from_dict(bad)

    def test_from_dict_ignores_unknown_keys(self):
        """Unknown keys are dropped."""
        config = ModelConfig.from_dict({"window_length": 2, "seed": 3, "colour": "red"})
        self.assertEqual(config.window_length, 2)
        self.assertEqual(config.seed, 3)

    def test_json_round_trip(self):
        """to_dict output loads back through from_json."""
        config = ModelConfig(window_length=6, seed=99, initial_text="Once", target_length=50)
        path = self.write("config.json", json.dumps(config.to_dict()))
        self.assertEqual(ModelConfig.from_json(path), config)

    def test_json_must_be_object(self):
        """A JSON list is not a configuration."""
        path = self.write("config.json", "[1, 2]")
        with self.assertRaises(ValueError):
            ModelConfig.from_json(path)


class TestCleanText(unittest.TestCase):
    """Tests for corpus normalization."""

    def test_default_keeps_text(self):
        """Defaults only drop control characters."""
        self.assertEqual(clean_text("Héllo,\tWorld\n\x00"), "Héllo,\tWorld\n")

    def test_full_normalization(self):
        """Lowercasing, accent stripping and whitespace collapsing."""
        cfg = CleanTextConfig(lowercase=True, strip_accents=True, normalize_whitespace=True)
        self.assertEqual(clean_text("  Café   CRÈME \n brûlée ", cfg), "cafe creme brulee")


class TestCorpus(TempDirTestCase):
    """Tests for corpus readers."""

    def test_read_chars_in_chunks(self):
        """Chunked reading yields every character in order."""
        text = "line one\r\nline two\n"
        path = self.write("corpus.txt", text)
        self.assertEqual("".join(read_corpus_chars(path, chunk_size=3)), text)

    def test_read_chars_with_encoding(self):
        """Files are decoded with the requested encoding."""
        path = self.write("latin.txt", "façade", encoding="latin-1")
        self.assertEqual("".join(read_corpus_chars(path, encoding="latin-1")), "façade")

    def test_read_chars_with_cleaning(self):
        """A clean config normalizes the whole text."""
        path = self.write("corpus.txt", "ABC  Déf")
        cfg = CleanTextConfig(lowercase=True, strip_accents=True, normalize_whitespace=True)
        self.assertEqual("".join(read_corpus_chars(path, clean=cfg)), "abc def")

    def test_missing_file(self):
        """Missing files raise when the stream is consumed."""
        with self.assertRaises(FileNotFoundError):
            list(read_corpus_chars(self.tmp / "missing.txt"))

    def test_load_csv(self):
        """CSV values of one column are joined, nulls dropped."""
        path = self.write("reviews.csv", "id,text\n1,good film\n2,\n3,bad plot\n")
        self.assertEqual(load_corpus_csv(path), "good film\nbad plot")
        self.assertEqual(load_corpus_csv(path, separator=" "), "good film bad plot")

    def test_load_csv_missing_column(self):
        """A CSV without the column is rejected."""
        path = self.write("reviews.csv", "id,body\n1,good\n")
        with self.assertRaises(ValueError):
            load_corpus_csv(path)

    def test_iter_corpus_dispatch(self):
        """CSV files are read by column; other files as plain text."""
        csv_path = self.write("data.csv", "review\nnice\nfine\n")
        txt_path = self.write("data.txt", "review\nnice\n")
        self.assertEqual("".join(iter_corpus(csv_path, column="review")), "nice\nfine")
        self.assertEqual("".join(iter_corpus(txt_path)), "review\nnice\n")


class TestCli(TempDirTestCase):
    """Tests for the markov-lm entry point."""

    def setUp(self):
        """Write a corpus in which every window of length 2 has a successor."""
        super().setUp()
        self.corpus = self.write("corpus.txt", "abc" * 10)

    def run_main(self, *argv):
        out = io.StringIO()
        with redirect_stdout(out):
            status = main([str(a) for a in argv])
        return status, out.getvalue()

    def test_generate(self):
        """Generation starts from the corpus head by default."""
        status, out = self.run_main(self.corpus, "--window", 2, "--seed", 1, "--length", 12)
        self.assertEqual(status, 0)
        self.assertEqual(out, "abcabcabcabc\n")

    def test_initial_text(self):
        """An explicit initial text is extended."""
        status, out = self.run_main(self.corpus, "--window", 2, "--initial-text", "xbc", "--length", 8)
        self.assertEqual(status, 0)
        self.assertEqual(out, "xbcabcab\n")

    def test_dump(self):
        """--dump prints one line per window."""
        status, out = self.run_main(self.corpus, "--window", 2, "--dump")
        self.assertEqual(status, 0)
        self.assertEqual(sorted(out.splitlines()), [
            "'ab' : ((c 10 1 1))",
            "'bc' : ((a 9 1 1))",
            "'ca' : ((b 9 1 1))",
        ])

    def test_config_file_with_override(self):
        """Flags override values from the JSON config."""
        config_path = self.write("config.json", json.dumps({"window_length": 2, "target_length": 5}))
        args = build_parser().parse_args([str(self.corpus), "--config", str(config_path), "--length", "7"])
        config = resolve_config(args)
        self.assertEqual(config.window_length, 2)
        self.assertEqual(config.target_length, 7)

        status, out = self.run_main(self.corpus, "--config", config_path)
        self.assertEqual(status, 0)
        self.assertEqual(out, "abcab\n")

    def test_negative_seed(self):
        """Negative seeds are accepted on the command line."""
        status, out = self.run_main(self.corpus, "--window", 2, "--seed", -1, "--length", 6)
        self.assertEqual(status, 0)
        self.assertEqual(out, "abcabc\n")

    def test_bad_config_types(self):
        """A config with a mistyped seed or flag exits with status 1."""
        for bad in ({"seed": "7"}, {"clean": "false"}):
            config_path = self.write("config.json", json.dumps(bad))
            status, out = self.run_main(self.corpus, "--config", config_path)
            self.assertEqual(status, 1)
            self.assertEqual(out, "")

    def test_missing_corpus(self):
        """A missing corpus file exits with status 1."""
        status, out = self.run_main(self.tmp / "nope.txt")
        self.assertEqual(status, 1)
        self.assertEqual(out, "")

    def test_corpus_too_short(self):
        """A corpus shorter than the window exits with status 1."""
        short = self.write("short.txt", "ab")
        status, _ = self.run_main(short, "--window", 5)
        self.assertEqual(status, 1)


if __name__ == '__main__':
    unittest.main()
