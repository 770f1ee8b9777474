"""
words.py

Handles loading the candidate word list.
Plain text handling; the numpy side lives in vocabulary.py.
"""

import logging
from pathlib import Path

from wordsolve.vocabulary import Vocabulary, is_valid_word

log = logging.getLogger(__name__)


DATA_DIR = Path(__file__).resolve().parent.parent / "data"
VOCAB_PATH = DATA_DIR / "vocabulary.txt"

DEMO_WORDS = [
    "stalk", "scrap", "shear", "batch", "motif",
    "tense", "ultra", "vital", "ether", "nadir",
]


def load_word_list(path):
    """
    Load a newline-separated word list into a Python list.

    Words are lowercased. Blank lines are skipped, and so are lines that are
    not five letters, with a warning. Order and duplicates are preserved.
    """
    words = []
    with open(path, "r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            word = line.strip().lower()
            if not word:
                continue
            if not is_valid_word(word):
                log.warning("%s:%d: skipping %r, not a five letter word", path, lineno, word)
                continue
            words.append(word)
    return words


def load_vocabulary(path=VOCAB_PATH) -> Vocabulary:
    # Use a path relative to this source tree by default so the solver works
    # no matter which directory Python is launched from.
    return Vocabulary(load_word_list(path))
