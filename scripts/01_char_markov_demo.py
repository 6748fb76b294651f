from __future__ import annotations

from markov_lm import LanguageModel


def main() -> None:
    text = (
        "natural language processing (nlp) is fun. "
        "start small, iterate, and learn by coding. "
        "a small model of characters learns which letter tends to follow which. "
    )

    for window_length in (1, 3, 5):
        model = LanguageModel(window_length, seed=42)
        model.train(text)
        print(f"window={window_length} windows={len(model)}")
        print("  " + model.generate(text[:window_length], 120))


if __name__ == "__main__":
    main()
